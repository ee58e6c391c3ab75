"""SQLAlchemy database models."""

from payid.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
    AddressModel,
)
from payid.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = [
    "AccountModel",
    "AddressModel",
    "Base",
    "TimestampMixin",
]
