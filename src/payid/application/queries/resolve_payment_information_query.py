"""Resolve payment information query - pick the address for a PayID request."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from payid.application.dtos import (
    PaymentInformation,
    PaymentInformationNotFound,
    ResolutionResult,
    ResolvedPaymentInformation,
)
from payid.domain.payment.exceptions import (
    AddressLookupError,
    InvalidAcceptHeaderError,
    InvalidMediaTypeError,
    MissingAcceptHeaderError,
)
from payid.domain.payment.repositories import AddressRepository
from payid.domain.payment.services import (
    AddressMatch,
    NoMatchReason,
    find_preferred_address,
    rank_accept_media_types,
)
from payid.domain.payment.value_objects import (
    AcceptMediaType,
    AddressInformation,
    PayId,
    pay_id_from_url,
)
from payid.domain.shared.exceptions import DomainException

logger = logging.getLogger(__name__)

PayIdNormalizer = Callable[[str], PayId]


class ResolvePaymentInformationQuery:
    """Query resolving a PayID URL and Accept tokens to one address.

    Malformed input raises; absence of a matching address is returned as
    PaymentInformationNotFound.
    """

    def __init__(
        self,
        address_repository: AddressRepository,
        normalizer: PayIdNormalizer = pay_id_from_url,
    ):
        self._address_repo = address_repository
        self._normalize = normalizer

    async def execute(
        self,
        pay_id_url: str,
        accept_tokens: Sequence[str],
    ) -> ResolutionResult:
        """
        Resolve the payment information for a PayID.

        Parameters
        ----------
        pay_id_url
            URL the PayID was requested at (``https://host/user``)
        accept_tokens
            Accept header tokens in header order

        Returns
        -------
        ResolvedPaymentInformation, or PaymentInformationNotFound if no
        stored address satisfies any of the accepted media types

        Raises
        ------
        InvalidPayIdError
            If the URL does not identify a PayID
        MissingAcceptHeaderError
            If no Accept tokens were supplied, or all of them have ``q=0``
        InvalidAcceptHeaderError
            If any Accept token is malformed
        AddressLookupError
            If the address store fails
        """
        pay_id = self._normalize(pay_id_url)

        if not accept_tokens:
            raise MissingAcceptHeaderError()

        try:
            accept_types = rank_accept_media_types(accept_tokens)
        except InvalidMediaTypeError as e:
            raise InvalidAcceptHeaderError(e.token, e.message) from e

        if not accept_types:
            # Every type was refused with q=0
            raise MissingAcceptHeaderError()

        addresses = await self._find_addresses(pay_id)
        result = find_preferred_address(addresses, accept_types)

        if not isinstance(result, AddressMatch):
            logger.info(
                "No payment information for %s (%s, %d accept types)",
                pay_id,
                result.reason.value,
                len(accept_types),
            )
            return self._not_found(pay_id, result.reason, accept_types)

        logger.debug("Resolved %s as %s", pay_id, result.accept_type.media_type)
        return ResolvedPaymentInformation(
            pay_id=pay_id,
            accept_type=result.accept_type,
            address=result.address,
            payment_information=PaymentInformation.from_address(result.address),
        )

    async def _find_addresses(self, pay_id: PayId) -> list[AddressInformation]:
        try:
            return await self._address_repo.find_all_by_pay_id(pay_id)
        except DomainException:
            raise
        except Exception as e:
            logger.error("Address lookup failed for %s: %s", pay_id, e)
            raise AddressLookupError(str(pay_id), reason=str(e)) from e

    @staticmethod
    def _not_found(
        pay_id: PayId,
        reason: NoMatchReason,
        accept_types: list[AcceptMediaType],
    ) -> PaymentInformationNotFound:
        if len(accept_types) == 1:
            only = accept_types[0]
            return PaymentInformationNotFound(
                pay_id=pay_id,
                reason=reason,
                payment_network=only.payment_network,
                environment=only.environment,
            )
        return PaymentInformationNotFound(pay_id=pay_id, reason=reason)
