"""Authentication mode value object."""

from enum import StrEnum, auto


class AuthenticationMode(StrEnum):
    """Authentication strategy a descriptor is configured for.

    Declaration order is precedence order when several modes are configured.
    """

    APPLICATION_CERTIFICATE = auto()
    APPLICATION_KEY = auto()
    USER_PASSWORD = auto()
    APPLICATION_TOKEN = auto()
    USER_TOKEN = auto()
    DEVICE_CODE = auto()
    MANAGED_IDENTITY = auto()
    AZ_CLI = auto()
    INTERACTIVE = auto()
    NONE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case AuthenticationMode.APPLICATION_CERTIFICATE:
                return "AAD Application Certificate"
            case AuthenticationMode.APPLICATION_KEY:
                return "AAD Application Key"
            case AuthenticationMode.USER_PASSWORD:
                return "AAD User Password"
            case AuthenticationMode.APPLICATION_TOKEN:
                return "AAD Application Token"
            case AuthenticationMode.USER_TOKEN:
                return "AAD User Token"
            case AuthenticationMode.DEVICE_CODE:
                return "AAD Device Code"
            case AuthenticationMode.MANAGED_IDENTITY:
                return "Managed Identity"
            case AuthenticationMode.AZ_CLI:
                return "Azure CLI"
            case AuthenticationMode.INTERACTIVE:
                return "Interactive Login"
            case AuthenticationMode.NONE:
                return "No Authentication"
