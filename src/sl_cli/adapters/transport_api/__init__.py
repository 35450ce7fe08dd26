"""SL Transport v1 adapters."""

from sl_cli.adapters.transport_api.transport_repository import SlTransportRepository

__all__ = ["SlTransportRepository"]
