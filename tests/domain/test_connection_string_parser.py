"""Tests for ConnectionStringParser domain service."""

from __future__ import annotations

import pytest

from kusto_connection.domain.entities import ConnectionDescriptor
from kusto_connection.domain.services import ConnectionStringParser, parse_connection_string
from kusto_connection.domain.value_objects import DescriptorField, aliases_for


class TestParseWithoutCredentials:
    """Connection strings naming only the data source."""

    @pytest.mark.parametrize(
        "connection_string",
        ["localhost", "data Source=localhost", "Addr=localhost", "Addr = localhost", "  localhost  "],
    )
    def test_data_source_only(self, parser: ConnectionStringParser, connection_string: str) -> None:
        """Bare hosts and data source aliases yield the same descriptor."""
        descriptor = parser.parse(connection_string)

        assert descriptor.data_source == "localhost"
        assert descriptor.authority_id == "common"
        for field in ("aadUserId", "password", "applicationClientId", "applicationKey"):
            assert descriptor[field] is None

    def test_device_factory_matches_parsed_fields(self, parser: ConnectionStringParser) -> None:
        """The device code factory leaves every credential field unset."""
        descriptor = ConnectionDescriptor.with_aad_device_authentication("localhost", "common")
        parsed = parser.parse("localhost")

        for field in DescriptorField:
            assert descriptor[field] == parsed[field]

    def test_bare_host_leaves_everything_else_unset(self, parser: ConnectionStringParser) -> None:
        """Only data source and the default authority are populated."""
        assert parser.parse("localhost") == ConnectionDescriptor(data_source="localhost")

    def test_empty_string_has_no_data_source(self, parser: ConnectionStringParser) -> None:
        """An empty connection string maps to None, not an empty string."""
        descriptor = parser.parse("   ")
        assert descriptor.data_source is None
        assert descriptor.authority_id == "common"


class TestParseUserPassword:
    """Connection strings configuring AAD user/password authentication."""

    @pytest.mark.parametrize(
        "template",
        [
            "localhost;AAD User ID={user};password={password}",
            "Data Source=localhost ; AaD User ID={user}; Password ={password}",
            " Addr = localhost ; AAD User ID = {user} ; Pwd ={password}",
            "Network Address = localhost; AAD User iD = {user} ; Pwd = {password} ",
        ],
    )
    def test_user_password_spellings(
        self,
        parser: ConnectionStringParser,
        template: str,
        expected_user: str,
        expected_password: str,
    ) -> None:
        """All spellings resolve to the same user/password descriptor."""
        descriptor = parser.parse(template.format(user=expected_user, password=expected_password))

        assert descriptor.data_source == "localhost"
        assert descriptor.aad_user_id == expected_user
        assert descriptor.password == expected_password
        assert descriptor.authority_id == "common"
        assert descriptor.application_client_id is None
        assert descriptor.application_key is None

    def test_assigning_after_construction(
        self,
        parser: ConnectionStringParser,
        user_password_descriptor: ConnectionDescriptor,
        expected_user: str,
        expected_password: str,
    ) -> None:
        """Fields assigned after parsing give the same descriptor as the factory."""
        descriptor = parser.parse("Server=localhost")
        descriptor.aad_user_id = expected_user
        descriptor.password = expected_password

        assert descriptor == user_password_descriptor

    def test_round_trip_with_factory(self, parser: ConnectionStringParser) -> None:
        """Parsing and the named factory produce identical descriptors."""
        parsed = parser.parse("Data Source=X;AAD User ID=U;Password=P")
        built = ConnectionDescriptor.with_aad_user_password_authentication("X", "U", "P")

        assert parsed == built


class TestParseApplicationKey:
    """Connection strings configuring AAD application key authentication."""

    @pytest.mark.parametrize(
        "template",
        [
            "localhost;Application client Id={app_id};application Key={key}",
            "Data Source=localhost ; Application Client Id={app_id}; Appkey ={key}",
            " Addr = localhost ; AppClientId = {app_id} ; AppKey ={key}",
            "Network Address = localhost; AppClientId = {app_id} ; AppKey ={key}",
        ],
    )
    def test_application_key_spellings(
        self,
        parser: ConnectionStringParser,
        template: str,
        application_client_id: str,
        application_key: str,
    ) -> None:
        """All spellings resolve to the same application key descriptor."""
        descriptor = parser.parse(template.format(app_id=application_client_id, key=application_key))

        assert descriptor.data_source == "localhost"
        assert descriptor.application_client_id == application_client_id
        assert descriptor.application_key == application_key
        assert descriptor.authority_id == "common"
        assert descriptor.aad_user_id is None
        assert descriptor.password is None

    def test_assigning_after_construction(
        self, parser: ConnectionStringParser, application_client_id: str, application_key: str
    ) -> None:
        """Fields assigned after parsing give the same descriptor as the factory."""
        descriptor = parser.parse("server=localhost")
        descriptor.application_client_id = application_client_id
        descriptor.application_key = application_key

        expected = ConnectionDescriptor.with_aad_application_key_authentication(
            "localhost", application_client_id, application_key
        )
        assert descriptor == expected


class TestParseLeniency:
    """Malformed input is dropped rather than reported."""

    def test_alias_equivalence(self, parser: ConnectionStringParser) -> None:
        """Every alias of a field yields the same value as the canonical keyword."""
        for field in DescriptorField:
            canonical = parser.parse(f"Data Source=h;{field.keyword}=value")
            for alias in aliases_for(field):
                assert parser.parse(f"Data Source=h;{alias}=value")[field] == canonical[field]

    def test_unknown_keywords_are_ignored(self, parser: ConnectionStringParser) -> None:
        """Unknown keywords do not affect the descriptor."""
        descriptor = parser.parse("Data Source=localhost;Streaming=true;Fed=True")
        assert descriptor == ConnectionDescriptor(data_source="localhost")

    def test_empty_segments_are_ignored(self, parser: ConnectionStringParser) -> None:
        """Trailing and doubled delimiters produce no spurious pairs."""
        descriptor = parser.parse(";;Data Source=localhost;;Pwd=secret;; ;")
        assert descriptor.data_source == "localhost"
        assert descriptor.password == "secret"

    @pytest.mark.parametrize("connection_string", [";localhost;Pwd=p", " ; localhost;uid=u;Pwd=p"])
    def test_bare_host_after_leading_empty_segment(
        self, parser: ConnectionStringParser, connection_string: str
    ) -> None:
        """Empty segments are dropped before looking for a bare data source."""
        descriptor = parser.parse(connection_string)
        assert descriptor.data_source == "localhost"
        assert descriptor.password == "p"

    def test_segment_without_delimiter_after_first_is_skipped(
        self, parser: ConnectionStringParser
    ) -> None:
        """Only the first segment may be a bare data source."""
        descriptor = parser.parse("Data Source=localhost;garbage;User ID=u")
        assert descriptor.data_source == "localhost"
        assert descriptor.aad_user_id == "u"

    def test_last_duplicate_wins(self, parser: ConnectionStringParser) -> None:
        """Repeated keywords overwrite earlier values."""
        descriptor = parser.parse("Server=first;Host=second;Addr=third")
        assert descriptor.data_source == "third"

    def test_empty_value_maps_to_none(self, parser: ConnectionStringParser) -> None:
        """A keyword with an empty value is treated as not configured."""
        descriptor = parser.parse("Data Source=localhost;Password=;AAD User ID=  ")
        assert descriptor.password is None
        assert descriptor.aad_user_id is None

    def test_value_keeps_equal_signs(self, parser: ConnectionStringParser) -> None:
        """Only the first '=' separates key from value."""
        descriptor = parser.parse("Data Source=localhost;AppKey=abc==")
        assert descriptor.application_key == "abc=="

    def test_conflicting_credentials_are_kept(self, parser: ConnectionStringParser) -> None:
        """Parsing does not enforce a single authentication mode."""
        descriptor = parser.parse("localhost;User ID=u;Pwd=p;AppClientId=a;AppKey=k")
        assert descriptor.password == "p"
        assert descriptor.application_key == "k"
        assert descriptor.has_conflicting_credentials is True


class TestParseAuthority:
    """Authority resolution while parsing."""

    def test_explicit_authority(self, parser: ConnectionStringParser) -> None:
        """A supplied authority replaces the default."""
        assert parser.parse("localhost;Tenant=contoso.com").authority_id == "contoso.com"

    def test_empty_authority_falls_back_to_default(self, parser: ConnectionStringParser) -> None:
        """An empty authority value never leaves authority unset."""
        assert parser.parse("localhost;Authority Id=").authority_id == "common"

    def test_custom_default_authority(self) -> None:
        """A parser may use a different default authority."""
        parser = ConnectionStringParser(default_authority_id="organizations")
        assert parser.parse("localhost").authority_id == "organizations"
        assert parser.parse("localhost;tid=").authority_id == "organizations"
        assert parser.parse("localhost;tid=contoso").authority_id == "contoso"

    def test_blank_default_authority_rejected(self) -> None:
        """The default authority itself cannot be empty."""
        with pytest.raises(ValueError, match="must not be empty"):
            ConnectionStringParser(default_authority_id=" ")


class TestTokenize:
    """Tests for tokenization into resolved pairs."""

    def test_pairs_keep_input_order(self, parser: ConnectionStringParser) -> None:
        """Resolved pairs are returned in the order they appear."""
        assert parser.tokenize("localhost; Pwd = p ;Unknown=x;uid=u") == [
            (DescriptorField.DATA_SOURCE, "localhost"),
            (DescriptorField.PASSWORD, "p"),
            (DescriptorField.AAD_USER_ID, "u"),
        ]

    def test_module_level_parse(self) -> None:
        """parse_connection_string uses the default authority."""
        descriptor = parse_connection_string("Addr=localhost")
        assert descriptor.data_source == "localhost"
        assert descriptor.authority_id == "common"
