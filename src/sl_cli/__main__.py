"""Allow running the CLI with `python -m sl_cli`."""

from sl_cli.cli import cli_main

if __name__ == "__main__":
    cli_main()
