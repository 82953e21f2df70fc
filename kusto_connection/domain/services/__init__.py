"""Domain services - Stateless operations on domain objects."""

from .connection_string_parser import ConnectionStringParser, parse_connection_string

__all__ = ["ConnectionStringParser", "parse_connection_string"]
