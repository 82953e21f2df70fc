"""Connection descriptor entity describing how to reach and authenticate to a cluster."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Self

from ..exceptions import MissingArgumentError, UnknownKeywordError
from ..value_objects import AuthenticationMode, DescriptorField, resolve_keyword

DEFAULT_AUTHORITY_ID: Final = "common"
SECRET_MASK: Final = "****"


def _clean(value: str | None) -> str | None:
    """Trim a value, mapping blank input to None."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"Expected a string, got {type(value).__name__}"
        raise TypeError(msg)
    stripped = value.strip()
    return stripped or None


def _require(**arguments: str | None) -> None:
    """Reject factory calls with missing, blank or non-string arguments."""
    for name, value in arguments.items():
        if value is not None and not isinstance(value, str):
            msg = f"Expected {name} to be a string, got {type(value).__name__}"
            raise TypeError(msg)
    missing = [name for name, value in arguments.items() if _clean(value) is None]
    if missing:
        msg = f"Missing required arguments: {', '.join(missing)}"
        raise MissingArgumentError(msg)


@dataclass(slots=True)
class ConnectionDescriptor:
    """
    Normalized connection configuration.

    Unset fields are always None, never an empty string. The descriptor is a
    plain mutable value: fields may be assigned after construction.
    """

    data_source: str | None = None
    initial_catalog: str | None = None
    aad_user_id: str | None = None
    password: str | None = field(default=None, repr=False)
    application_client_id: str | None = None
    application_key: str | None = field(default=None, repr=False)
    application_certificate: str | None = field(default=None, repr=False)
    application_certificate_thumbprint: str | None = None
    application_certificate_subject_distinguished_name: str | None = None
    authority_id: str = DEFAULT_AUTHORITY_ID
    user_token: str | None = field(default=None, repr=False)
    application_token: str | None = field(default=None, repr=False)
    application_name_for_tracing: str | None = None
    user_name_for_tracing: str | None = None

    # Mode flags, only set through the named factories
    device_login: bool = False
    interactive_login: bool = False
    msi_authentication: bool = False
    msi_client_id: str | None = None
    az_cli_login: bool = False

    def __getitem__(self, key: DescriptorField | str) -> str | None:
        return getattr(self, self._field_for(key).value)

    def __setitem__(self, key: DescriptorField | str, value: str | None) -> None:
        descriptor_field = self._field_for(key)
        if value is not None and not isinstance(value, str):
            msg = f"Expected {descriptor_field.keyword} to be a string, got {type(value).__name__}"
            raise TypeError(msg)
        cleaned = _clean(value)
        if descriptor_field is DescriptorField.AUTHORITY_ID and cleaned is None:
            cleaned = DEFAULT_AUTHORITY_ID
        setattr(self, descriptor_field.value, cleaned)

    def __str__(self) -> str:
        return self.to_connection_string()

    @staticmethod
    def _field_for(key: DescriptorField | str) -> DescriptorField:
        if isinstance(key, DescriptorField):
            return key
        if key in DescriptorField.__members__.values():
            return DescriptorField(key)
        descriptor_field = resolve_keyword(key)
        if descriptor_field is None:
            raise UnknownKeywordError(key)
        return descriptor_field

    @property
    def configured_authentication_modes(self) -> list[AuthenticationMode]:
        """All authentication modes whose required fields are present, by precedence."""
        configured = {
            AuthenticationMode.APPLICATION_CERTIFICATE: bool(
                self.application_client_id
                and self.application_certificate
                and (
                    self.application_certificate_thumbprint
                    or self.application_certificate_subject_distinguished_name
                )
            ),
            AuthenticationMode.APPLICATION_KEY: bool(
                self.application_client_id and self.application_key
            ),
            AuthenticationMode.USER_PASSWORD: bool(self.aad_user_id and self.password),
            AuthenticationMode.APPLICATION_TOKEN: self.application_token is not None,
            AuthenticationMode.USER_TOKEN: self.user_token is not None,
            AuthenticationMode.DEVICE_CODE: self.device_login,
            AuthenticationMode.MANAGED_IDENTITY: self.msi_authentication,
            AuthenticationMode.AZ_CLI: self.az_cli_login,
            AuthenticationMode.INTERACTIVE: self.interactive_login,
        }
        return [mode for mode in AuthenticationMode if configured.get(mode, False)]

    @property
    def authentication_mode(self) -> AuthenticationMode:
        """The authentication mode a connecting client should use."""
        modes = self.configured_authentication_modes
        return modes[0] if modes else AuthenticationMode.NONE

    @property
    def has_conflicting_credentials(self) -> bool:
        """Check if more than one authentication mode is configured at once."""
        return len(self.configured_authentication_modes) > 1

    @property
    def secrets_configured(self) -> list[DescriptorField]:
        """Secret fields that hold a value."""
        return [f for f in DescriptorField if f.is_secret and self[f] is not None]

    def to_connection_string(self, *, show_secrets: bool = False) -> str:
        """
        Render the descriptor as a canonical connection string.

        Args:
            show_secrets: If False, secret values are replaced by a mask.

        Returns:
            ``Keyword=value`` pairs joined by ``;`` in field order.
        """
        pairs: list[str] = []
        for descriptor_field in DescriptorField:
            value = self[descriptor_field]
            if value is None:
                continue
            if descriptor_field.is_secret and not show_secrets:
                value = SECRET_MASK
            pairs.append(f"{descriptor_field.keyword}={value}")
        return ";".join(pairs)

    @classmethod
    def with_aad_user_password_authentication(
        cls,
        data_source: str,
        user_id: str,
        password: str,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """Create a descriptor authenticating with an AAD user name and password."""
        _require(data_source=data_source, user_id=user_id, password=password)
        return cls(
            data_source=_clean(data_source),
            aad_user_id=_clean(user_id),
            password=_clean(password),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
        )

    @classmethod
    def with_aad_application_key_authentication(
        cls,
        data_source: str,
        application_client_id: str,
        application_key: str,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """Create a descriptor authenticating with an AAD application id and key."""
        _require(
            data_source=data_source,
            application_client_id=application_client_id,
            application_key=application_key,
        )
        return cls(
            data_source=_clean(data_source),
            application_client_id=_clean(application_client_id),
            application_key=_clean(application_key),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
        )

    @classmethod
    def with_aad_application_certificate_authentication(
        cls,
        data_source: str,
        application_client_id: str,
        certificate: str,
        thumbprint: str,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """
        Create a descriptor authenticating with an AAD application certificate.

        Args:
            data_source: Cluster URL.
            application_client_id: AAD application id.
            certificate: PEM encoded certificate private key.
            thumbprint: Hex encoded thumbprint of the certificate.
            authority_id: Tenant to authenticate against.
        """
        _require(
            data_source=data_source,
            application_client_id=application_client_id,
            certificate=certificate,
            thumbprint=thumbprint,
        )
        return cls(
            data_source=_clean(data_source),
            application_client_id=_clean(application_client_id),
            application_certificate=_clean(certificate),
            application_certificate_thumbprint=_clean(thumbprint),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
        )

    @classmethod
    def with_aad_application_certificate_sni_authentication(
        cls,
        data_source: str,
        application_client_id: str,
        certificate: str,
        subject_distinguished_name: str,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """Create a descriptor authenticating with a certificate selected by subject name."""
        _require(
            data_source=data_source,
            application_client_id=application_client_id,
            certificate=certificate,
            subject_distinguished_name=subject_distinguished_name,
        )
        return cls(
            data_source=_clean(data_source),
            application_client_id=_clean(application_client_id),
            application_certificate=_clean(certificate),
            application_certificate_subject_distinguished_name=_clean(subject_distinguished_name),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
        )

    @classmethod
    def with_aad_device_authentication(
        cls,
        data_source: str,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """Create a descriptor using the device code flow."""
        _require(data_source=data_source)
        return cls(
            data_source=_clean(data_source),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
            device_login=True,
        )

    @classmethod
    def with_aad_managed_identity_authentication(
        cls,
        data_source: str,
        client_id: str | None = None,
    ) -> Self:
        """
        Create a descriptor using a managed identity.

        Args:
            data_source: Cluster URL.
            client_id: Client id of a user-assigned identity (system-assigned if None).
        """
        _require(data_source=data_source)
        return cls(
            data_source=_clean(data_source),
            msi_authentication=True,
            msi_client_id=_clean(client_id),
        )

    @classmethod
    def with_interactive_login(
        cls,
        data_source: str,
        user_id_hint: str | None = None,
        authority_id: str | None = DEFAULT_AUTHORITY_ID,
    ) -> Self:
        """Create a descriptor using interactive browser login."""
        _require(data_source=data_source)
        return cls(
            data_source=_clean(data_source),
            aad_user_id=_clean(user_id_hint),
            authority_id=_clean(authority_id) or DEFAULT_AUTHORITY_ID,
            interactive_login=True,
        )

    @classmethod
    def with_az_cli_authentication(cls, data_source: str) -> Self:
        """Create a descriptor reusing the signed-in Azure CLI profile."""
        _require(data_source=data_source)
        return cls(data_source=_clean(data_source), az_cli_login=True)

    @classmethod
    def with_aad_user_token_authentication(cls, data_source: str, user_token: str) -> Self:
        """Create a descriptor presenting a pre-acquired AAD user token."""
        _require(data_source=data_source, user_token=user_token)
        return cls(data_source=_clean(data_source), user_token=_clean(user_token))

    @classmethod
    def with_aad_application_token_authentication(
        cls, data_source: str, application_token: str
    ) -> Self:
        """Create a descriptor presenting a pre-acquired AAD application token."""
        _require(data_source=data_source, application_token=application_token)
        return cls(data_source=_clean(data_source), application_token=_clean(application_token))
