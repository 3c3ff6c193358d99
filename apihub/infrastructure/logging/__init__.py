"""Logging adapters implementing LoggerProtocol."""

from apihub.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
