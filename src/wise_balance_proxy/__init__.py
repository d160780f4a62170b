"""Proxy that re-exposes Wise account balances as JSON pairs or plain text."""

__version__ = "1.0.0"
