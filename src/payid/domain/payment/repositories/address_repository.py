"""Repository interface for PayID addresses."""

from abc import ABC, abstractmethod

from payid.domain.payment.value_objects import AddressInformation, PayId


class AddressRepository(ABC):
    """Read access to the addresses stored for PayIDs."""

    @abstractmethod
    async def find_all_by_pay_id(self, pay_id: PayId) -> list[AddressInformation]:
        """
        Find all addresses of a PayID.

        Parameters
        ----------
        pay_id
            The normalized PayID

        Returns
        -------
        Addresses in insertion order, or an empty list if the PayID is unknown
        """
