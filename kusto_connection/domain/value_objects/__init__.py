"""Domain value objects - Immutable objects defined by their attributes."""

from .authentication_mode import AuthenticationMode
from .descriptor_field import DescriptorField
from .keyword_aliases import KEYWORD_ALIASES, aliases_for, normalize_keyword, resolve_keyword

__all__ = [
    "KEYWORD_ALIASES",
    "AuthenticationMode",
    "DescriptorField",
    "aliases_for",
    "normalize_keyword",
    "resolve_keyword",
]
