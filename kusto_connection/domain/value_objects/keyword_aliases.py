"""Keyword alias table for connection strings."""

from collections.abc import Mapping
from types import MappingProxyType

from .descriptor_field import DescriptorField

_ALIASES: dict[DescriptorField, tuple[str, ...]] = {
    DescriptorField.DATA_SOURCE: (
        "Data Source",
        "Addr",
        "Address",
        "Network Address",
        "Server",
        "Host",
    ),
    DescriptorField.INITIAL_CATALOG: ("Initial Catalog", "Database", "DB"),
    DescriptorField.AAD_USER_ID: ("AAD User ID", "UID", "User ID", "User"),
    DescriptorField.PASSWORD: ("Password", "Pwd"),
    DescriptorField.APPLICATION_CLIENT_ID: (
        "Application Client Id",
        "AppClientId",
        "App Client Id",
    ),
    DescriptorField.APPLICATION_KEY: ("Application Key", "AppKey", "App Key"),
    DescriptorField.APPLICATION_CERTIFICATE: (
        "Application Certificate",
        "Application Certificate Blob",
        "AppCert",
    ),
    DescriptorField.APPLICATION_CERTIFICATE_THUMBPRINT: (
        "Application Certificate Thumbprint",
        "AppCertThumbprint",
        "Certificate Thumbprint",
    ),
    DescriptorField.APPLICATION_CERTIFICATE_SUBJECT_DISTINGUISHED_NAME: (
        "Application Certificate Subject Distinguished Name",
        "Application Certificate Subject",
        "AppCertSubject",
    ),
    DescriptorField.AUTHORITY_ID: (
        "Authority Id",
        "AuthorityId",
        "Authority",
        "TenantId",
        "Tenant",
        "tid",
    ),
    DescriptorField.USER_TOKEN: ("User Token", "UserToken", "UsrToken"),
    DescriptorField.APPLICATION_TOKEN: ("Application Token", "AppToken"),
    DescriptorField.APPLICATION_NAME_FOR_TRACING: (
        "Application Name for Tracing",
        "TraceAppName",
    ),
    DescriptorField.USER_NAME_FOR_TRACING: (
        "User Name for Tracing",
        "TraceUserName",
    ),
}


def normalize_keyword(key: str) -> str:
    """Lower-case a keyword and drop all whitespace from it."""
    return "".join(key.split()).lower()


def _build_lookup() -> Mapping[str, DescriptorField]:
    lookup: dict[str, DescriptorField] = {}
    for field, aliases in _ALIASES.items():
        for alias in aliases:
            normalized = normalize_keyword(alias)
            if normalized in lookup and lookup[normalized] is not field:
                msg = f"Alias {alias!r} is mapped to both {lookup[normalized]} and {field}"
                raise ValueError(msg)
            lookup[normalized] = field
    return MappingProxyType(lookup)


KEYWORD_ALIASES: Mapping[str, DescriptorField] = _build_lookup()


def aliases_for(field: DescriptorField) -> tuple[str, ...]:
    """Get every accepted spelling of a field, canonical keyword first."""
    return _ALIASES[field]


def resolve_keyword(key: str) -> DescriptorField | None:
    """Resolve any alias spelling to its canonical field (None if unknown)."""
    return KEYWORD_ALIASES.get(normalize_keyword(key))
