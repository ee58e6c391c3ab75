"""
SQLite-based database fixtures for integration tests.

Usage:
    from tests.shared.fixtures.database import seed_account

    async def test_something(db_session):
        await seed_account(db_session, "alice$example.com", [...])
"""

from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from payid.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    AddressModel,
)


async def seed_account(
    session: AsyncSession,
    pay_id: str,
    addresses: Iterable[dict],
) -> AccountModel:
    """Insert a PayID account with its addresses, in the given order."""
    account = AccountModel(pay_id=pay_id)
    session.add(account)
    await session.flush()

    for address in addresses:
        session.add(AddressModel(account_id=account.id, **address))
        # Flush one by one so ids follow insertion order
        await session.flush()

    return account


def crypto_row(network: str, environment: str | None, address: str) -> dict:
    return {
        "payment_network": network,
        "environment": environment,
        "details_type": "CryptoAddressDetails",
        "details": {"address": address},
    }


def ach_row(account_number: str, routing_number: str) -> dict:
    return {
        "payment_network": "ACH",
        "environment": None,
        "details_type": "AchAddressDetails",
        "details": {"accountNumber": account_number, "routingNumber": routing_number},
    }
