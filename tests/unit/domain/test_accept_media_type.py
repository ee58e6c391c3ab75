"""Unit tests for the Accept media type grammar parser."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from payid.domain.payment.exceptions import InvalidMediaTypeError
from payid.domain.payment.value_objects import (
    AcceptMediaType,
    format_accept_media_type,
    parse_accept_media_type,
)


class TestParseAcceptMediaType:
    """Tests for parse_accept_media_type."""

    def test_parses_network_and_environment(self):
        accept_type = parse_accept_media_type("application/xrpl-testnet+json")

        assert accept_type.payment_network == "xrpl"
        assert accept_type.environment == "testnet"
        assert accept_type.quality == 1.0

    def test_network_without_environment_is_wildcard(self):
        accept_type = parse_accept_media_type("application/ach+json")

        assert accept_type.payment_network == "ach"
        assert accept_type.environment is None
        assert accept_type.is_wildcard_environment

    def test_environment_named_any_is_not_wildcard(self):
        accept_type = parse_accept_media_type("application/btc-any+json")

        assert accept_type.environment == "any"
        assert not accept_type.is_wildcard_environment

    def test_is_case_insensitive_and_normalizes_to_lowercase(self):
        accept_type = parse_accept_media_type("Application/XRPL-MainNet+JSON")

        assert accept_type.payment_network == "xrpl"
        assert accept_type.environment == "mainnet"
        assert accept_type.media_type == "application/xrpl-mainnet+json"

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("application/btc-mainnet+json;q=0.5", 0.5),
            ("application/btc-mainnet+json; q=0.25", 0.25),
            ("application/btc-mainnet+json ; Q = .3", 0.3),
            ("application/btc-mainnet+json;q=0", 0.0),
            ("application/btc-mainnet+json;q=1", 1.0),
            ("application/btc-mainnet+json;q=1.000", 1.0),
        ],
    )
    def test_parses_quality(self, token: str, expected: float):
        assert parse_accept_media_type(token).quality == expected

    @pytest.mark.parametrize("quality", ["1.5", "-0.1", "abc", "", "nan", "1e-1"])
    def test_rejects_invalid_quality(self, quality: str):
        token = f"application/xrpl-mainnet+json;q={quality}"

        with pytest.raises(InvalidMediaTypeError) as exc_info:
            parse_accept_media_type(token)

        assert exc_info.value.token == token

    @pytest.mark.parametrize(
        "token",
        [
            "application/xrpl-mainnet",
            "text/xrpl-mainnet+json",
            "application/+json",
            "application/xrpl-+json",
            "application/xrpl-main-net+json",
            "application/xrpl-mainnet+xml",
            "*/*",
            "",
        ],
    )
    def test_rejects_tokens_outside_grammar(self, token: str):
        with pytest.raises(InvalidMediaTypeError):
            parse_accept_media_type(token)

    def test_rejects_parameters_other_than_quality(self):
        with pytest.raises(InvalidMediaTypeError):
            parse_accept_media_type("application/xrpl-mainnet+json;charset=utf-8")

    def test_rejects_repeated_quality(self):
        with pytest.raises(InvalidMediaTypeError):
            parse_accept_media_type("application/xrpl-mainnet+json;q=0.5;q=0.4")

    def test_rejects_plain_application_json(self):
        with pytest.raises(InvalidMediaTypeError) as exc_info:
            parse_accept_media_type("application/json")

        assert "payment network" in exc_info.value.message

    def test_same_token_yields_equal_values(self):
        token = "application/btc-testnet+json;q=0.7"

        assert parse_accept_media_type(token) == parse_accept_media_type(token)


class TestAcceptMediaType:
    """Tests for the AcceptMediaType value object."""

    def test_media_type_with_environment(self):
        accept_type = AcceptMediaType(payment_network="xrpl", environment="testnet")

        assert accept_type.media_type == "application/xrpl-testnet+json"

    def test_media_type_without_environment(self):
        accept_type = AcceptMediaType(payment_network="ach")

        assert accept_type.media_type == "application/ach+json"

    def test_rejects_empty_network(self):
        with pytest.raises(PydanticValidationError):
            AcceptMediaType(payment_network="")

    def test_rejects_quality_out_of_bounds(self):
        with pytest.raises(PydanticValidationError):
            AcceptMediaType(payment_network="xrpl", quality=1.5)

    def test_matches_exact_environment(self):
        accept_type = AcceptMediaType(payment_network="xrpl", environment="mainnet")

        assert accept_type.matches("xrpl", "mainnet")
        assert not accept_type.matches("xrpl", "testnet")
        assert not accept_type.matches("btc", "mainnet")

    def test_wildcard_matches_any_environment(self):
        accept_type = AcceptMediaType(payment_network="xrpl")

        assert accept_type.matches("xrpl", "mainnet")
        assert accept_type.matches("xrpl", "testnet")
        assert accept_type.matches("xrpl", None)
        assert not accept_type.matches("btc", "mainnet")


class TestFormatAcceptMediaType:
    """Formatting then parsing yields the same value."""

    @pytest.mark.parametrize(
        ("network", "environment", "quality"),
        [
            ("xrpl", "mainnet", 1.0),
            ("btc", "testnet", 0.5),
            ("ach", None, 0.123456789),
            ("eth", "kovan", 0.0),
            ("xrpl", None, 0.00001),
        ],
    )
    def test_format_then_parse(self, network, environment, quality):
        accept_type = AcceptMediaType(
            payment_network=network,
            environment=environment,
            quality=quality,
        )

        parsed = parse_accept_media_type(format_accept_media_type(accept_type))

        assert parsed == accept_type
        assert parsed.media_type == accept_type.media_type

    def test_default_quality_is_omitted(self):
        accept_type = AcceptMediaType(payment_network="xrpl", environment="mainnet")

        assert format_accept_media_type(accept_type) == "application/xrpl-mainnet+json"
