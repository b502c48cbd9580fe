"""Logging adapters implementing LoggerProtocol."""

from secretcache.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
