"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`jmsconn.message` so the message handle remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class NativeMessage(ABC):
    """Minimal contract for a transport-level message.

    Setters raise :class:`TransportError` for values the transport cannot
    carry.
    """

    @abstractmethod
    def get_header(self, field: str) -> Any:
        """Return the value of a header field, or None if unset."""

    @abstractmethod
    def set_header(self, field: str, value: Any) -> None:
        """Assign a header field."""

    @abstractmethod
    def get_text(self) -> Optional[str]:
        """Return the body as text."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the body with text."""

    @abstractmethod
    def get_property(self, name: str) -> Any:
        """Return an application property, or None if unset."""

    @abstractmethod
    def set_property(self, name: str, value: Any) -> None:
        """Assign an application property."""

    @abstractmethod
    def clear_properties(self) -> None:
        """Remove all application properties."""
