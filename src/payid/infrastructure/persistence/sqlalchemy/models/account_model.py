"""SQLAlchemy models for PayID accounts and their addresses."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payid.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin):
    """Database model for a PayID account."""

    __tablename__ = "account"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Canonical form: user$host, lowercase
    pay_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    addresses: Mapped[list[AddressModel]] = relationship(
        "AddressModel",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="AddressModel.id",
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, pay_id={self.pay_id})>"


class AddressModel(Base, TimestampMixin):
    """Database model for one payment address of a PayID account."""

    __tablename__ = "address"

    # Insertion order; resolution tie-break among duplicate addresses
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    account_id: Mapped[int] = mapped_column(
        ForeignKey("account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    payment_network: Mapped[str] = mapped_column(String(20), nullable=False)
    environment: Mapped[Optional[str]] = mapped_column(String(20))
    details_type: Mapped[str] = mapped_column(String(30), nullable=False)
    details: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    account: Mapped[AccountModel] = relationship(
        "AccountModel",
        back_populates="addresses",
    )

    __table_args__ = (
        Index("idx_address_network_environment", "payment_network", "environment"),
    )

    def __repr__(self) -> str:
        return (
            f"<AddressModel(id={self.id}, "
            f"payment_network={self.payment_network}, "
            f"environment={self.environment})>"
        )
