"""Domain services for Accept negotiation."""

from payid.domain.payment.services.address_matcher import (
    AddressMatch,
    MatchResult,
    NoAddressMatch,
    NoMatchReason,
    find_preferred_address,
)
from payid.domain.payment.services.preference_ranker import (
    rank_accept_media_types,
    split_accept_header,
)

__all__ = [
    "AddressMatch",
    "MatchResult",
    "NoAddressMatch",
    "NoMatchReason",
    "find_preferred_address",
    "rank_accept_media_types",
    "split_accept_header",
]
