"""API request and response models (secret values are never exposed)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class DescribeRequest(BaseModel):
    """Connection string to describe."""

    connection_string: str = Field(description="Semicolon-delimited key=value connection string")


class DescriptorResponse(BaseModel):
    """Parsed connection descriptor (no secret values)."""

    data_source: str
    authority_id: str
    initial_catalog: str | None = None
    aad_user_id: str | None = None
    application_client_id: str | None = None
    application_certificate_thumbprint: str | None = None
    application_certificate_subject_distinguished_name: str | None = None
    msi_client_id: str | None = None
    authentication_mode: str = Field(description="Authentication mode a client would use")
    configured_modes: list[str] = Field(description="Every authentication mode configured")
    has_conflicts: bool = Field(description="More than one authentication mode is configured")
    secrets_configured: list[str] = Field(description="Names of secret fields holding a value")
    connection_string: str = Field(description="Canonical connection string, secrets masked")


class KeywordResponse(BaseModel):
    """Accepted spellings of one descriptor field."""

    field: str
    keyword: str
    secret: bool
    aliases: list[str]


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
