"""Kusto connection string parsing into normalized connection descriptors."""

from .domain.entities import DEFAULT_AUTHORITY_ID, ConnectionDescriptor
from .domain.services import ConnectionStringParser, parse_connection_string
from .domain.value_objects import AuthenticationMode, DescriptorField

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_AUTHORITY_ID",
    "AuthenticationMode",
    "ConnectionDescriptor",
    "ConnectionStringParser",
    "DescriptorField",
    "__version__",
    "parse_connection_string",
]
