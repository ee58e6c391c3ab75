"""DTOs for PayID resolution results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from payid.domain.payment.exceptions import PaymentInformationNotFoundError
from payid.domain.payment.services import NoMatchReason
from payid.domain.payment.value_objects import (
    AcceptMediaType,
    AchAddressDetails,
    AddressDetails,
    AddressDetailsType,
    AddressInformation,
    CryptoAddressDetails,
    PayId,
)


@dataclass(frozen=True)
class PaymentInformation:
    """Payment information returned to the client for one address."""

    address_details_type: AddressDetailsType
    address_details: AddressDetails

    @classmethod
    def from_address(cls, address: AddressInformation) -> PaymentInformation:
        details = address.typed_details()
        if isinstance(details, CryptoAddressDetails):
            return cls(AddressDetailsType.CRYPTO_ADDRESS, details)
        if isinstance(details, AchAddressDetails):
            return cls(AddressDetailsType.ACH_ADDRESS, details)
        msg = f"Unhandled address details {type(details).__name__}"
        raise TypeError(msg)


@dataclass(frozen=True)
class ResolvedPaymentInformation:
    """Successful resolution of a PayID."""

    pay_id: PayId
    accept_type: AcceptMediaType
    address: AddressInformation
    payment_information: PaymentInformation

    @property
    def content_type(self) -> str:
        return self.accept_type.media_type


@dataclass(frozen=True)
class PaymentInformationNotFound:
    """No address of the PayID satisfies the Accept preferences.

    ``payment_network`` and ``environment`` are only known when the client
    asked for exactly one media type.
    """

    pay_id: PayId
    reason: NoMatchReason
    payment_network: Optional[str] = None
    environment: Optional[str] = None

    @property
    def message(self) -> str:
        if self.payment_network is None:
            return f"Payment information for {self.pay_id} could not be found."
        location = f"in {self.payment_network.upper()}"
        if self.environment is not None:
            location += f" on {self.environment.upper()}"
        return f"Payment information for {self.pay_id} {location} could not be found."

    def to_exception(self) -> PaymentInformationNotFoundError:
        return PaymentInformationNotFoundError(
            message=self.message,
            pay_id=str(self.pay_id),
            reason=self.reason.value,
            payment_network=self.payment_network,
            environment=self.environment,
        )


ResolutionResult = Union[ResolvedPaymentInformation, PaymentInformationNotFound]
