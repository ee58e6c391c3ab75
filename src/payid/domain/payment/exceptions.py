"""Payment domain exceptions.

This module defines the failures of PayID resolution: malformed PayID URLs,
missing or malformed Accept headers, absent payment information and
failures of the address store.

Client errors map to 4xx HTTP responses; store failures map to 503 and
unknown address detail types are programmer errors (500).
"""

from __future__ import annotations

from typing import Optional

from payid.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

ACCEPT_HEADER_FORMAT_HELP = (
    'Must be of the form "application/{payment_network}(-{environment})+json".\n'
    "Examples:\n"
    "- 'Accept: application/xrpl-mainnet+json'\n"
    "- 'Accept: application/btc-testnet+json'\n"
    "- 'Accept: application/ach+json'"
)

# =============================================================================
# Identifier Exceptions
# =============================================================================


class InvalidPayIdError(ValidationError):
    """Raised when a PayID or PayID URL is malformed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            message=reason,
            code=ErrorCode.INVALID_PAY_ID,
            details={"value": value},
        )
        self.value = value


# =============================================================================
# Accept Header Exceptions
# =============================================================================


class InvalidMediaTypeError(ValidationError):
    """Raised when a single Accept token does not match the PayID grammar."""

    def __init__(self, token: str, reason: Optional[str] = None) -> None:
        msg = reason or f"Invalid media type '{token}'"
        super().__init__(
            message=msg,
            code=ErrorCode.INVALID_ACCEPT_HEADER,
            details={"token": token},
        )
        self.token = token


class MissingAcceptHeaderError(ValidationError):
    """Raised when a request carries no Accept header tokens."""

    def __init__(self) -> None:
        super().__init__(
            message=f"Missing Accept header. {ACCEPT_HEADER_FORMAT_HELP}",
            code=ErrorCode.MISSING_ACCEPT_HEADER,
        )


class InvalidAcceptHeaderError(ValidationError):
    """Raised when any token of the Accept header is invalid.

    A single bad token invalidates the whole header.
    """

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid Accept header. {ACCEPT_HEADER_FORMAT_HELP}",
            code=ErrorCode.INVALID_ACCEPT_HEADER,
            details={"token": token, "reason": reason},
        )
        self.token = token


# =============================================================================
# Resolution Exceptions
# =============================================================================


class PaymentInformationNotFoundError(EntityNotFoundError):
    """Raised by the HTTP layer when no address satisfies the request."""

    def __init__(
        self,
        message: str,
        pay_id: str,
        reason: str,
        payment_network: Optional[str] = None,
        environment: Optional[str] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.PAYMENT_INFORMATION_NOT_FOUND,
            details={
                "pay_id": pay_id,
                "reason": reason,
                "payment_network": payment_network,
                "environment": environment,
            },
        )


class AddressLookupError(DomainException):
    """Raised when the address store fails to return addresses for a PayID."""

    def __init__(self, pay_id: str, reason: Optional[str] = None) -> None:
        super().__init__(
            message=f"Failed to look up payment information for {pay_id}",
            code=ErrorCode.ADDRESS_LOOKUP_FAILED,
            details={"pay_id": pay_id, "reason": reason},
        )


class UnknownAddressDetailsTypeError(DomainException):
    """Raised when a stored address carries an unrecognized details type."""

    def __init__(self, details_type: object) -> None:
        super().__init__(
            message="Stored address has an unsupported details type",
            code=ErrorCode.UNKNOWN_ADDRESS_DETAILS_TYPE,
            details={"details_type": repr(details_type)},
        )


class InvalidAddressDetailsError(DomainException):
    """Raised when stored address details do not fit their details type."""

    def __init__(self, details_type: str, reason: str) -> None:
        super().__init__(
            message="Stored address details do not match their details type",
            code=ErrorCode.INVALID_ADDRESS_DETAILS,
            details={"details_type": details_type, "reason": reason},
        )
