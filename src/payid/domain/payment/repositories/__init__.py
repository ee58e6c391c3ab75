"""Repository interfaces for the payment domain."""

from payid.domain.payment.repositories.address_repository import AddressRepository

__all__ = ["AddressRepository"]
