"""Payment value objects."""

from payid.domain.payment.value_objects.accept_media_type import (
    DEFAULT_QUALITY,
    AcceptMediaType,
    format_accept_media_type,
    parse_accept_media_type,
)
from payid.domain.payment.value_objects.address import (
    AchAddressDetails,
    AddressDetails,
    AddressDetailsType,
    AddressInformation,
    CryptoAddressDetails,
)
from payid.domain.payment.value_objects.pay_id import PayId, pay_id_from_url

__all__ = [
    "DEFAULT_QUALITY",
    "AcceptMediaType",
    "AchAddressDetails",
    "AddressDetails",
    "AddressDetailsType",
    "AddressInformation",
    "CryptoAddressDetails",
    "PayId",
    "format_accept_media_type",
    "parse_accept_media_type",
    "pay_id_from_url",
]
