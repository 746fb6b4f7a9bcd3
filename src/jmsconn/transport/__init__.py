"""Transport layer implementations."""

from .base import (
    NativeMessage,
    TransportError,
    TransportConnectionError,
)
