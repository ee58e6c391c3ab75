"""SQLAlchemy repository implementations."""

from payid.infrastructure.persistence.sqlalchemy.repositories.address_repository import (  # NOQA: E501
    AddressRepositorySQLAlchemy,
)

__all__ = ["AddressRepositorySQLAlchemy"]
