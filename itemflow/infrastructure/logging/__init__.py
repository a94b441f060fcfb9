"""Logging adapters implementing LoggerProtocol."""

from itemflow.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
