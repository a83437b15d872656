from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.account import Account
from stripe_contracts.services.stripe.types.common import (
    ExpandableParams,
    ExpandedObject,
    ListParams,
    ListResponse,
    Metadata,
    RangeQuery,
    Timestamp,
)


class TransferReversal(BaseModel):
    id: str
    object: Literal["transfer_reversal"] = "transfer_reversal"
    amount: int
    balance_transaction: str | ExpandedObject | None = None
    created: Timestamp
    currency: str
    destination_payment_refund: str | ExpandedObject | None = None
    metadata: Metadata = {}
    source_refund: str | ExpandedObject | None = None
    transfer: "str | Transfer"


class TransferReversalListResponse(ListResponse):
    data: list[TransferReversal]


class Transfer(BaseModel):
    """Funds moved from the platform balance to a connected account."""

    id: Annotated[
        str | None, Field(description="Unique identifier for the object.")
    ] = None
    object: Literal["transfer"] = "transfer"
    amount: Annotated[
        int | None,
        Field(description="Amount in cents to be transferred."),
    ] = None
    amount_reversed: Annotated[
        int | None,
        Field(description="Amount in cents reversed (can be less than the amount attribute on the transfer if a partial reversal was issued)."),
    ] = None
    balance_transaction: str | ExpandedObject | None = None
    created: Timestamp | None = None
    currency: str | None = None
    description: str | None = None
    destination: Annotated[
        str | Account | None,
        Field(description="ID of the Stripe account the transfer was sent to."),
    ] = None
    destination_payment: str | ExpandedObject | None = None
    livemode: bool | None = None
    metadata: Metadata | None = None
    reversals: TransferReversalListResponse | None = None
    reversed: bool | None = None
    source_transaction: str | ExpandedObject | None = None
    source_type: str | None = None
    transfer_group: str | None = None


TransferReversal.model_rebuild()
TransferReversalListResponse.model_rebuild()
Transfer.model_rebuild()


class TransferListResponse(ListResponse):
    data: list[Transfer]


class TransferCreateParams(ExpandableParams):
    amount: int | None = None
    currency: Annotated[
        str, Field(description="3-letter ISO code for currency.")
    ]
    description: str | None = None
    destination: Annotated[
        str,
        Field(description="The ID of a connected Stripe account."),
    ]
    metadata: Metadata | None = None
    source_transaction: str | None = None
    source_type: Literal["bank_account", "card"] | None = None
    transfer_group: str | None = None


class TransferListParams(ListParams):
    created: RangeQuery | int | None = None
    destination: str | None = None
    transfer_group: str | None = None


class TransferRetrieveParams(ExpandableParams):
    pass


class TransferUpdateParams(ExpandableParams):
    description: str | None = None
    metadata: Metadata | None = None


class TransferCreateReversalParams(ExpandableParams):
    amount: int | None = None
    description: str | None = None
    metadata: Metadata | None = None
    refund_application_fee: bool | None = None


class TransferListReversalsParams(ListParams):
    pass


class TransferRetrieveReversalParams(ExpandableParams):
    pass


class TransferUpdateReversalParams(ExpandableParams):
    metadata: Metadata | None = None


__all__ = [
    "TransferReversal",
    "TransferReversalListResponse",
    "Transfer",
    "TransferListResponse",
    "TransferCreateParams",
    "TransferListParams",
    "TransferRetrieveParams",
    "TransferUpdateParams",
    "TransferCreateReversalParams",
    "TransferListReversalsParams",
    "TransferRetrieveReversalParams",
    "TransferUpdateReversalParams",
]
