"""Address value objects.

An address is one stored payment destination of a PayID. Its details come
in one of two mutually exclusive shapes, selected by ``details_type``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from payid.domain.payment.exceptions import (
    InvalidAddressDetailsError,
    UnknownAddressDetailsTypeError,
)


class AddressDetailsType(str, Enum):
    """Discriminator for the shape of an address' details."""

    CRYPTO_ADDRESS = "CryptoAddressDetails"
    ACH_ADDRESS = "AchAddressDetails"


class CryptoAddressDetails(BaseModel):
    """Address on a crypto ledger (e.g. XRPL, BTC)."""

    address: str = Field(..., min_length=1)
    tag: Optional[str] = Field(default=None, description="Destination tag/memo")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class AchAddressDetails(BaseModel):
    """Bank account reachable over ACH."""

    account_number: str = Field(..., min_length=1)
    routing_number: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


AddressDetails = Union[CryptoAddressDetails, AchAddressDetails]


class AddressInformation(BaseModel):
    """
    Value object for one stored payment address of a PayID.

    Read-only for the resolver: created and deleted by the address store.
    """

    payment_network: str = Field(..., min_length=1)
    environment: Optional[str] = Field(default=None)
    details_type: AddressDetailsType
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("payment_network", "environment")
    @classmethod
    def normalize_token(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v

    def typed_details(self) -> AddressDetails:
        """Validate ``details`` into the shape named by ``details_type``.

        Raises
        ------
        UnknownAddressDetailsTypeError
            If ``details_type`` is not a known kind
        InvalidAddressDetailsError
            If ``details`` does not fit the shape of ``details_type``
        """
        try:
            if self.details_type is AddressDetailsType.CRYPTO_ADDRESS:
                return CryptoAddressDetails.model_validate(self.details)
            if self.details_type is AddressDetailsType.ACH_ADDRESS:
                return AchAddressDetails.model_validate(_ach_fields(self.details))
        except PydanticValidationError as e:
            raise InvalidAddressDetailsError(self.details_type.value, str(e)) from e
        raise UnknownAddressDetailsTypeError(self.details_type)

    def __str__(self) -> str:
        env = f"-{self.environment}" if self.environment else ""
        return f"{self.payment_network}{env} ({self.details_type.value})"


def _ach_fields(details: dict[str, Any]) -> dict[str, Any]:
    # Stored details use the camelCase keys of the wire format
    return {
        "account_number": details.get("account_number", details.get("accountNumber")),
        "routing_number": details.get("routing_number", details.get("routingNumber")),
    }
