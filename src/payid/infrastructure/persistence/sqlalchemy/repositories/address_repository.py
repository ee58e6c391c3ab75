"""SQLAlchemy implementation of AddressRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payid.domain.payment.exceptions import UnknownAddressDetailsTypeError
from payid.domain.payment.repositories import AddressRepository
from payid.domain.payment.value_objects import (
    AddressDetailsType,
    AddressInformation,
    PayId,
)
from payid.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    AddressModel,
)

logger = logging.getLogger(__name__)


class AddressRepositorySQLAlchemy(AddressRepository):
    """SQLAlchemy implementation of the address repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all_by_pay_id(self, pay_id: PayId) -> list[AddressInformation]:
        stmt = (
            select(AddressModel)
            .join(AccountModel, AddressModel.account_id == AccountModel.id)
            .where(AccountModel.pay_id == str(pay_id))
            .order_by(AddressModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        logger.debug("Found %d addresses for %s", len(models), pay_id)
        return [self._map_to_domain(model) for model in models]

    def _map_to_domain(self, model: AddressModel) -> AddressInformation:
        try:
            details_type = AddressDetailsType(model.details_type)
        except ValueError:
            raise UnknownAddressDetailsTypeError(model.details_type) from None

        return AddressInformation(
            payment_network=model.payment_network,
            environment=model.environment,
            details_type=details_type,
            details=dict(model.details),
        )
