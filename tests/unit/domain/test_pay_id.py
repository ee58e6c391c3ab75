"""Unit tests for PayId and PayID URL normalization."""

import pytest

from payid.domain.payment.exceptions import InvalidPayIdError
from payid.domain.payment.value_objects import PayId, pay_id_from_url
from payid.domain.shared.exceptions import ErrorCode


class TestPayIdFromUrl:
    """Tests for pay_id_from_url."""

    def test_converts_url_to_pay_id(self):
        pay_id = pay_id_from_url("https://example.com/alice")

        assert pay_id.user == "alice"
        assert pay_id.host == "example.com"
        assert str(pay_id) == "alice$example.com"

    def test_lowercases_user_and_host(self):
        pay_id = pay_id_from_url("https://Example.COM/Alice.Smith")

        assert str(pay_id) == "alice.smith$example.com"

    def test_ignores_port(self):
        pay_id = pay_id_from_url("https://example.com:8080/alice")

        assert str(pay_id) == "alice$example.com"

    def test_rejects_http(self):
        with pytest.raises(InvalidPayIdError) as exc_info:
            pay_id_from_url("http://example.com/alice")

        assert "HTTPS" in exc_info.value.message
        assert exc_info.value.code == ErrorCode.INVALID_PAY_ID

    def test_rejects_other_protocols(self):
        with pytest.raises(InvalidPayIdError) as exc_info:
            pay_id_from_url("ftp://example.com/alice")

        assert "HTTP/HTTPS" in exc_info.value.message

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/",
            "https://example.com/alice..smith",
            "https://example.com/.alice",
            "https:///alice",
        ],
    )
    def test_rejects_missing_or_invalid_user(self, url: str):
        with pytest.raises(InvalidPayIdError):
            pay_id_from_url(url)


class TestPayId:
    """Tests for the PayId value object."""

    def test_parse_canonical_form(self):
        pay_id = PayId.parse("Alice$Example.com")

        assert pay_id == PayId(user="alice", host="example.com")

    @pytest.mark.parametrize("value", ["alice", "$example.com", "alice$", ""])
    def test_parse_rejects_malformed(self, value: str):
        with pytest.raises(InvalidPayIdError):
            PayId.parse(value)

    def test_to_url_round_trips(self):
        pay_id = PayId(user="bob", host="payid.example.org")

        assert pay_id_from_url(pay_id.to_url()) == pay_id
