"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from ....application.exceptions import ApplicationError
from ....domain.value_objects import DescriptorField, aliases_for
from .models import (
    DescribeRequest,
    DescriptorResponse,
    ErrorResponse,
    HealthResponse,
    KeywordResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from ....application.use_cases import ConnectionDescription, DescribeConnection

logger = logging.getLogger(__name__)


def _description_to_response(description: ConnectionDescription) -> DescriptorResponse:
    """Convert a connection description to an API response (no secret values)."""
    descriptor = description.descriptor
    return DescriptorResponse(
        data_source=descriptor.data_source,
        authority_id=descriptor.authority_id,
        initial_catalog=descriptor.initial_catalog,
        aad_user_id=descriptor.aad_user_id,
        application_client_id=descriptor.application_client_id,
        application_certificate_thumbprint=descriptor.application_certificate_thumbprint,
        application_certificate_subject_distinguished_name=(
            descriptor.application_certificate_subject_distinguished_name
        ),
        msi_client_id=descriptor.msi_client_id,
        authentication_mode=description.authentication_mode.value,
        configured_modes=[mode.value for mode in description.configured_modes],
        has_conflicts=description.has_conflicts,
        secrets_configured=[field.value for field in descriptor.secrets_configured],
        connection_string=description.redacted_connection_string,
    )


def create_app(describe: DescribeConnection, version: str = "1.0.0") -> FastAPI:
    """
    Create FastAPI application.

    Args:
        describe: Use case used to parse submitted connection strings.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Kusto Connection Descriptor API",
        description="Parse Kusto connection strings and report how a client would connect "
        "and authenticate. **Secret values are never returned.**",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/descriptors",
        response_model=DescriptorResponse,
        tags=["Descriptors"],
        summary="Describe a connection string",
        description="Parse a connection string and resolve its authentication mode.",
        responses={
            422: {"model": ErrorResponse, "description": "Unusable connection string"},
        },
    )
    async def describe_connection(request: DescribeRequest) -> DescriptorResponse:
        try:
            description = describe.execute(request.connection_string)
        except ApplicationError as e:
            raise HTTPException(
                status_code=422,
                detail=str(e),
            ) from e
        return _description_to_response(description)

    @app.get(
        "/api/v1/keywords",
        response_model=list[KeywordResponse],
        tags=["Descriptors"],
        summary="List connection string keywords",
    )
    async def list_keywords() -> list[KeywordResponse]:
        return [
            KeywordResponse(
                field=field.value,
                keyword=field.keyword,
                secret=field.is_secret,
                aliases=list(aliases_for(field)),
            )
            for field in DescriptorField
        ]

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
