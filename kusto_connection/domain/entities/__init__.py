"""Domain entities - Objects with identity and lifecycle."""

from .connection_descriptor import DEFAULT_AUTHORITY_ID, SECRET_MASK, ConnectionDescriptor

__all__ = [
    "DEFAULT_AUTHORITY_ID",
    "SECRET_MASK",
    "ConnectionDescriptor",
]
