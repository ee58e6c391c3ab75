"""Unit tests for payment information response serialization.

The wire format uses the camelCase keys of the PayID protocol, and each
details type is rendered with its own shape only.
"""

from payid.application.dtos import PaymentInformation
from payid.presentation.api.schemas import PaymentInformationResponse
from tests.shared.fixtures.factories import ach_address, crypto_address


class TestPaymentInformationResponse:
    """Tests for PaymentInformationResponse.from_dto."""

    def test_crypto_address_content(self):
        info = PaymentInformation.from_address(
            crypto_address("xrpl", "mainnet", address="rAddress", tag="42"),
        )

        content = PaymentInformationResponse.from_dto(info).to_content()

        assert content == {
            "addressDetailType": "CryptoAddressDetails",
            "addressDetails": {"address": "rAddress", "tag": "42"},
        }

    def test_crypto_address_without_tag_omits_it(self):
        info = PaymentInformation.from_address(
            crypto_address("btc", "testnet", address="mxAddress"),
        )

        content = PaymentInformationResponse.from_dto(info).to_content()

        assert content["addressDetails"] == {"address": "mxAddress"}

    def test_ach_address_content(self):
        info = PaymentInformation.from_address(
            ach_address(account_number="111", routing_number="222"),
        )

        content = PaymentInformationResponse.from_dto(info).to_content()

        assert content == {
            "addressDetailType": "AchAddressDetails",
            "addressDetails": {"accountNumber": "111", "routingNumber": "222"},
        }
        assert "address" not in content["addressDetails"]
