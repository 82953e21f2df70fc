"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from uuid import uuid4

import pytest

from kusto_connection.domain.entities import ConnectionDescriptor
from kusto_connection.domain.services import ConnectionStringParser


@pytest.fixture
def parser() -> ConnectionStringParser:
    """Parser with the default authority."""
    return ConnectionStringParser()


@pytest.fixture
def expected_user() -> str:
    """AAD user used in user/password scenarios."""
    return "test"


@pytest.fixture
def expected_password() -> str:
    """Password used in user/password scenarios."""
    return "Pa$$w0rd"


@pytest.fixture
def application_client_id() -> str:
    """A random AAD application id."""
    return str(uuid4())


@pytest.fixture
def application_key() -> str:
    """Application key used in application scenarios."""
    return "key of application"


@pytest.fixture
def user_password_descriptor(expected_user: str, expected_password: str) -> ConnectionDescriptor:
    """A descriptor built for user/password authentication."""
    return ConnectionDescriptor.with_aad_user_password_authentication(
        "localhost", expected_user, expected_password
    )
