"""Data transfer objects of the application layer."""

from payid.application.dtos.payment_information_dto import (
    PaymentInformation,
    PaymentInformationNotFound,
    ResolutionResult,
    ResolvedPaymentInformation,
)

__all__ = [
    "PaymentInformation",
    "PaymentInformationNotFound",
    "ResolutionResult",
    "ResolvedPaymentInformation",
]
