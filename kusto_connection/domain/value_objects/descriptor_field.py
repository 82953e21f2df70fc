"""Descriptor field value object."""

from enum import StrEnum, auto


class DescriptorField(StrEnum):
    """Canonical field of a connection descriptor.

    Each value is the name of the matching ``ConnectionDescriptor`` attribute.
    """

    DATA_SOURCE = auto()
    INITIAL_CATALOG = auto()
    AAD_USER_ID = auto()
    PASSWORD = auto()
    APPLICATION_CLIENT_ID = auto()
    APPLICATION_KEY = auto()
    APPLICATION_CERTIFICATE = auto()
    APPLICATION_CERTIFICATE_THUMBPRINT = auto()
    APPLICATION_CERTIFICATE_SUBJECT_DISTINGUISHED_NAME = auto()
    AUTHORITY_ID = auto()
    USER_TOKEN = auto()
    APPLICATION_TOKEN = auto()
    APPLICATION_NAME_FOR_TRACING = auto()
    USER_NAME_FOR_TRACING = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def keyword(self) -> str:
        """Canonical connection-string keyword."""
        match self:
            case DescriptorField.DATA_SOURCE:
                return "Data Source"
            case DescriptorField.INITIAL_CATALOG:
                return "Initial Catalog"
            case DescriptorField.AAD_USER_ID:
                return "AAD User ID"
            case DescriptorField.PASSWORD:
                return "Password"
            case DescriptorField.APPLICATION_CLIENT_ID:
                return "Application Client Id"
            case DescriptorField.APPLICATION_KEY:
                return "Application Key"
            case DescriptorField.APPLICATION_CERTIFICATE:
                return "Application Certificate"
            case DescriptorField.APPLICATION_CERTIFICATE_THUMBPRINT:
                return "Application Certificate Thumbprint"
            case DescriptorField.APPLICATION_CERTIFICATE_SUBJECT_DISTINGUISHED_NAME:
                return "Application Certificate Subject Distinguished Name"
            case DescriptorField.AUTHORITY_ID:
                return "Authority Id"
            case DescriptorField.USER_TOKEN:
                return "User Token"
            case DescriptorField.APPLICATION_TOKEN:
                return "Application Token"
            case DescriptorField.APPLICATION_NAME_FOR_TRACING:
                return "Application Name for Tracing"
            case DescriptorField.USER_NAME_FOR_TRACING:
                return "User Name for Tracing"

    @property
    def is_secret(self) -> bool:
        """Check if values of this field must never be displayed."""
        return self in {
            DescriptorField.PASSWORD,
            DescriptorField.APPLICATION_KEY,
            DescriptorField.APPLICATION_CERTIFICATE,
            DescriptorField.USER_TOKEN,
            DescriptorField.APPLICATION_TOKEN,
        }
