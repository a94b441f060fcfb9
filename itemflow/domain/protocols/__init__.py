"""Domain protocols (structural interfaces implemented by infrastructure)."""

from itemflow.domain.protocols.item_repository import ItemRepository
from itemflow.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["ItemRepository", "LoggerProtocol"]
