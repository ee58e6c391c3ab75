"""Payment information schemas for API responses."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from payid.application.dtos import PaymentInformation
from payid.domain.payment.value_objects import (
    AchAddressDetails,
    AddressDetailsType,
)


class CryptoAddressDetailsResponse(BaseModel):
    """Crypto address details as sent to PayID clients."""

    address: str = Field(..., description="Address on the payment network")
    tag: Optional[str] = Field(default=None, description="Destination tag/memo")


class AchAddressDetailsResponse(BaseModel):
    """ACH account details as sent to PayID clients."""

    account_number: str = Field(..., alias="accountNumber")
    routing_number: str = Field(..., alias="routingNumber")

    model_config = ConfigDict(populate_by_name=True)


class PaymentInformationResponse(BaseModel):
    """Response schema for a resolved PayID."""

    address_details_type: AddressDetailsType = Field(
        ...,
        alias="addressDetailType",
        description="Shape of addressDetails",
    )
    address_details: Union[AchAddressDetailsResponse, CryptoAddressDetailsResponse] = (
        Field(..., alias="addressDetails")
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "addressDetailType": "CryptoAddressDetails",
                "addressDetails": {
                    "address": "rw2ciyaNshpHe7bCHo4bRWq6pqqynnWKQg",
                    "tag": "67298042",
                },
            },
        },
    )

    @classmethod
    def from_dto(cls, info: PaymentInformation) -> "PaymentInformationResponse":
        details = info.address_details
        if isinstance(details, AchAddressDetails):
            return cls(
                address_details_type=info.address_details_type,
                address_details=AchAddressDetailsResponse(
                    account_number=details.account_number,
                    routing_number=details.routing_number,
                ),
            )
        return cls(
            address_details_type=info.address_details_type,
            address_details=CryptoAddressDetailsResponse(
                address=details.address,
                tag=details.tag,
            ),
        )

    def to_content(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error body rendered by the exception handlers."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
