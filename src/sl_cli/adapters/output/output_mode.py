"""Selection of the output format."""

from typing import Literal

from sl_cli.domain.errors import InputError

OutputMode = Literal["json", "plain", "pretty"]


def resolve_output_mode(json_flag: bool, plain_flag: bool, is_tty: bool) -> OutputMode:
    """Pick the output mode from the global flags.

    Without a flag, a terminal gets human-readable output and anything else
    (pipes, files) gets JSON.

    Raises:
        InputError: If both --json and --plain are given.
    """
    if json_flag and plain_flag:
        raise InputError("Use either --json or --plain, not both.")
    if json_flag:
        return "json"
    if plain_flag:
        return "plain"
    return "pretty" if is_tty else "json"
