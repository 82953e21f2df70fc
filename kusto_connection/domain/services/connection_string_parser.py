"""Domain service for parsing connection strings into descriptors."""

from __future__ import annotations

import logging

from ..entities import DEFAULT_AUTHORITY_ID, ConnectionDescriptor
from ..value_objects import DescriptorField, resolve_keyword

logger = logging.getLogger(__name__)

SEGMENT_DELIMITER = ";"
KEY_VALUE_DELIMITER = "="


class ConnectionStringParser:
    """
    Domain service turning a connection string into a ConnectionDescriptor.

    Parsing is lenient: unknown keywords, stray delimiters and empty segments
    are dropped rather than reported. Mutually exclusive credentials are not
    rejected here; see ConnectionDescriptor.has_conflicting_credentials.
    """

    def __init__(self, default_authority_id: str = DEFAULT_AUTHORITY_ID) -> None:
        """Initialize parser with the authority used when none is given."""
        if not default_authority_id.strip():
            msg = "Default authority id must not be empty"
            raise ValueError(msg)
        self._default_authority_id = default_authority_id.strip()

    def parse(self, connection_string: str) -> ConnectionDescriptor:
        """
        Parse a connection string.

        A string without any ``=`` is taken as a bare data source. Otherwise
        the first segment may still be a bare data source, e.g.
        ``"localhost;AAD User ID=user"``.

        Args:
            connection_string: ``key=value`` pairs separated by ``;``.

        Returns:
            A new descriptor; later duplicates of a keyword win.
        """
        descriptor = ConnectionDescriptor(authority_id=self._default_authority_id)

        for field, value in self.tokenize(connection_string):
            if field is DescriptorField.AUTHORITY_ID and not value:
                descriptor.authority_id = self._default_authority_id
                continue
            descriptor[field] = value

        return descriptor

    def tokenize(self, connection_string: str) -> list[tuple[DescriptorField, str]]:
        """
        Split a connection string into resolved (field, value) pairs, in order.

        Unknown keywords and segments that are not ``key=value`` are skipped.
        """
        if KEY_VALUE_DELIMITER not in connection_string:
            return [(DescriptorField.DATA_SOURCE, connection_string.strip())]

        pairs: list[tuple[DescriptorField, str]] = []
        segments = [s.strip() for s in connection_string.split(SEGMENT_DELIMITER)]
        for index, segment in enumerate(s for s in segments if s):
            if KEY_VALUE_DELIMITER not in segment:
                if index == 0:
                    pairs.append((DescriptorField.DATA_SOURCE, segment))
                else:
                    logger.debug("Skipping connection string segment without '='")
                continue

            raw_key, _, raw_value = segment.partition(KEY_VALUE_DELIMITER)
            field = resolve_keyword(raw_key)
            if field is None:
                logger.debug("Ignoring unknown connection string keyword: %s", raw_key.strip())
                continue
            pairs.append((field, raw_value.strip()))

        return pairs


def parse_connection_string(connection_string: str) -> ConnectionDescriptor:
    """Parse a connection string with the default authority."""
    return ConnectionStringParser().parse(connection_string)
