"""Selection of the address that best satisfies ranked preferences."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from payid.domain.payment.value_objects.accept_media_type import AcceptMediaType
from payid.domain.payment.value_objects.address import AddressInformation

logger = logging.getLogger(__name__)


class NoMatchReason(str, Enum):
    """Why no address was selected."""

    NO_ADDRESSES = "no_addresses"
    NO_MATCHING_ADDRESS = "no_matching_address"


@dataclass(frozen=True)
class AddressMatch:
    """The selected address and the preference it satisfied."""

    accept_type: AcceptMediaType
    address: AddressInformation


@dataclass(frozen=True)
class NoAddressMatch:
    """No preference was satisfied by any address."""

    reason: NoMatchReason


MatchResult = Union[AddressMatch, NoAddressMatch]


def find_preferred_address(
    addresses: Sequence[AddressInformation],
    preferences: Sequence[AcceptMediaType],
) -> MatchResult:
    """Pick the address for the highest-ranked satisfiable preference.

    Preference order dominates address order: the first preference with
    any matching address wins, even if a later preference has a match
    earlier in ``addresses``. Several addresses matching the same
    preference resolve to the first one in ``addresses``.

    Parameters
    ----------
    addresses
        All stored addresses of the PayID, in store order
    preferences
        Ranked preferences (see ``rank_accept_media_types``)

    Returns
    -------
    AddressMatch, or NoAddressMatch telling an empty address set apart
    from addresses that satisfy none of the preferences
    """
    if not addresses:
        return NoAddressMatch(reason=NoMatchReason.NO_ADDRESSES)

    for accept_type in preferences:
        for address in addresses:
            if accept_type.matches(address.payment_network, address.environment):
                logger.debug("Accept type %s matched %s", accept_type, address)
                return AddressMatch(accept_type=accept_type, address=address)

    return NoAddressMatch(reason=NoMatchReason.NO_MATCHING_ADDRESS)
