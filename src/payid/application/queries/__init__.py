"""Query layer. Read-only operations for retrieving data."""

from payid.application.queries.resolve_payment_information_query import (
    PayIdNormalizer,
    ResolvePaymentInformationQuery,
)

__all__ = [
    "PayIdNormalizer",
    "ResolvePaymentInformationQuery",
]
