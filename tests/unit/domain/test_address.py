"""Unit tests for address value objects."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from payid.domain.payment.exceptions import (
    InvalidAddressDetailsError,
    UnknownAddressDetailsTypeError,
)
from payid.domain.shared.exceptions import ErrorCode
from payid.domain.payment.value_objects import (
    AchAddressDetails,
    AddressDetailsType,
    AddressInformation,
    CryptoAddressDetails,
)
from tests.shared.fixtures.factories import ach_address, crypto_address


class TestAddressInformation:
    """Tests for AddressInformation."""

    def test_normalizes_network_and_environment(self):
        address = AddressInformation(
            payment_network="XRPL",
            environment="TESTNET",
            details_type=AddressDetailsType.CRYPTO_ADDRESS,
            details={"address": "rAddress"},
        )

        assert address.payment_network == "xrpl"
        assert address.environment == "testnet"

    def test_crypto_details(self):
        address = crypto_address("xrpl", "mainnet", address="rAddress", tag="42")

        details = address.typed_details()

        assert details == CryptoAddressDetails(address="rAddress", tag="42")

    def test_ach_details_from_camel_case(self):
        details = ach_address(account_number="111", routing_number="222").typed_details()

        assert details == AchAddressDetails(account_number="111", routing_number="222")

    def test_ach_details_never_use_crypto_shape(self):
        details = ach_address().typed_details()

        assert not isinstance(details, CryptoAddressDetails)

    def test_details_must_fit_their_type(self):
        address = AddressInformation(
            payment_network="ach",
            details_type=AddressDetailsType.ACH_ADDRESS,
            details={"address": "rAddress"},
        )

        with pytest.raises(InvalidAddressDetailsError) as exc_info:
            address.typed_details()

        assert exc_info.value.code == ErrorCode.INVALID_ADDRESS_DETAILS
        assert exc_info.value.details["details_type"] == "AchAddressDetails"

    def test_crypto_details_with_non_string_tag_fail_typed(self):
        address = AddressInformation(
            payment_network="xrpl",
            environment="mainnet",
            details_type=AddressDetailsType.CRYPTO_ADDRESS,
            details={"address": "r1", "tag": 12345},
        )

        with pytest.raises(InvalidAddressDetailsError):
            address.typed_details()

    def test_crypto_details_without_address_fail_typed(self):
        address = AddressInformation(
            payment_network="btc",
            details_type=AddressDetailsType.CRYPTO_ADDRESS,
            details={"tag": "1"},
        )

        with pytest.raises(InvalidAddressDetailsError):
            address.typed_details()

    def test_unknown_details_type_fails_fast(self):
        address = AddressInformation.model_construct(
            payment_network="xrpl",
            environment="mainnet",
            details_type="SomethingElse",
            details={},
        )

        with pytest.raises(UnknownAddressDetailsTypeError):
            address.typed_details()

    def test_rejects_unknown_details_type_on_construction(self):
        with pytest.raises(PydanticValidationError):
            AddressInformation(
                payment_network="xrpl",
                details_type="SomethingElse",
                details={},
            )
