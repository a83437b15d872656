from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.common import (
    DeletedObject,
    ExpandableParams,
    ListParams,
    ListResponse,
    StripeParams,
)

DeviceType = Literal["bbpos_chipper2x", "verifone_P400"]


class Reader(BaseModel):
    """A physical card reader registered with Stripe Terminal."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Literal["terminal.reader"] = "terminal.reader"
    device_sw_version: Annotated[
        str | None,
        Field(description="The current software version of the reader."),
    ] = None
    device_type: Annotated[
        DeviceType, Field(description="Type of reader, e.g., verifone_P400.")
    ]
    ip_address: Annotated[
        str | None, Field(description="The local IP address of the reader.")
    ] = None
    label: Annotated[
        str, Field(description="Custom label given to the reader for easier identification.")
    ]
    location: Annotated[
        str | None, Field(description="The location identifier of the reader.")
    ] = None
    serial_number: Annotated[
        str, Field(description="Serial number of the reader.")
    ]
    status: Annotated[
        str | None, Field(description="The networking status of the reader.")
    ] = None


class DeletedReader(DeletedObject):
    object: Literal["terminal.reader"] = "terminal.reader"


class ReaderListResponse(ListResponse):
    data: list[Reader]


class ReaderCreateParams(ExpandableParams):
    label: str | None = None
    location: str | None = None
    operator_account: str | None = None
    registration_code: Annotated[
        str,
        Field(description="A code generated by the reader used for registering to an account."),
    ]


class ReaderDeleteParams(StripeParams):
    operator_account: str | None = None


class ReaderListParams(ListParams):
    device_type: DeviceType | str | None = None
    location: str | None = None
    operator_account: str | None = None
    status: Literal["offline", "online"] | str | None = None


class ReaderRetrieveParams(ExpandableParams):
    operator_account: str | None = None


class ReaderUpdateParams(ExpandableParams):
    label: str | None = None
    operator_account: str | None = None


__all__ = [
    "DeviceType",
    "Reader",
    "DeletedReader",
    "ReaderListResponse",
    "ReaderCreateParams",
    "ReaderDeleteParams",
    "ReaderListParams",
    "ReaderRetrieveParams",
    "ReaderUpdateParams",
]
