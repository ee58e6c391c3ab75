"""API request/response schemas."""

from payid.presentation.api.schemas.payment_information import (
    AchAddressDetailsResponse,
    CryptoAddressDetailsResponse,
    ErrorResponse,
    PaymentInformationResponse,
)

__all__ = [
    "AchAddressDetailsResponse",
    "CryptoAddressDetailsResponse",
    "ErrorResponse",
    "PaymentInformationResponse",
]
