"""Use case for describing the connection a connection string configures."""

import logging
from dataclasses import dataclass

from ...domain.entities import ConnectionDescriptor
from ...domain.services import ConnectionStringParser
from ...domain.value_objects import AuthenticationMode
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConnectionDescription:
    """Result of the describe connection use case."""

    descriptor: ConnectionDescriptor
    authentication_mode: AuthenticationMode
    configured_modes: list[AuthenticationMode]

    @property
    def has_conflicts(self) -> bool:
        """Check if the connection string configures more than one credential."""
        return len(self.configured_modes) > 1

    @property
    def redacted_connection_string(self) -> str:
        """Canonical connection string with secrets masked."""
        return self.descriptor.to_connection_string()


class DescribeConnection:
    """
    Use case for parsing a connection string and resolving its authentication.

    Conflicting credentials are reported, not rejected.
    """

    def __init__(self, parser: ConnectionStringParser | None = None) -> None:
        """Initialize the use case with the parser to use."""
        self._parser = parser or ConnectionStringParser()

    def execute(self, connection_string: str) -> ConnectionDescription:
        """
        Execute the describe connection use case.

        Args:
            connection_string: Raw connection string.

        Returns:
            ConnectionDescription for the parsed descriptor.

        Raises:
            ConfigurationError: If no data source is configured.
        """
        descriptor = self._parser.parse(connection_string)
        if descriptor.data_source is None:
            msg = "Connection string does not configure a data source"
            raise ConfigurationError(msg)

        description = ConnectionDescription(
            descriptor=descriptor,
            authentication_mode=descriptor.authentication_mode,
            configured_modes=descriptor.configured_authentication_modes,
        )

        logger.info(
            "Connection to %s uses %s (authority: %s)",
            descriptor.data_source,
            description.authentication_mode.display_name,
            descriptor.authority_id,
        )
        logger.debug("Resolved connection string: %s", description.redacted_connection_string)

        if description.has_conflicts:
            logger.warning(
                "Connection string configures multiple authentication modes: %s; using %s",
                ", ".join(mode.display_name for mode in description.configured_modes),
                description.authentication_mode.display_name,
            )

        return description
