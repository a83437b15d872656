from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.common import (
    DeletedObject,
    ExpandableParams,
    ExpandedObject,
    ListParams,
    ListResponse,
    Metadata,
    RangeQuery,
    StripeParams,
    Timestamp,
)

AggregateUsage = Literal["last_during_period", "last_ever", "max", "sum"]
BillingScheme = Literal["per_unit", "tiered"]
PlanInterval = Literal["day", "month", "week", "year"]
TiersMode = Literal["graduated", "volume"]
UsageType = Literal["licensed", "metered"]


class PlanTier(BaseModel):
    flat_amount: int | None = None
    flat_amount_decimal: Decimal | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None
    up_to: int | None = None


class TransformUsage(BaseModel):
    divide_by: int
    round: Literal["down", "up"]


class Plan(BaseModel):
    """Pricing and billing cycle for recurring purchases of a product."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    object: Literal["plan"] = "plan"
    active: Annotated[
        bool, Field(description="Whether the plan can be used for new purchases.")
    ]
    aggregate_usage: Annotated[
        AggregateUsage | None,
        Field(description="Specifies a usage aggregation strategy for plans of `usage_type=metered`."),
    ] = None
    amount: Annotated[
        int | None,
        Field(description="The unit amount in cents to be charged, represented as a whole integer if possible."),
    ] = None
    amount_decimal: Annotated[
        Decimal | None,
        Field(description="The unit amount in cents to be charged, represented as a decimal string with at most 12 decimal places."),
    ] = None
    billing_scheme: BillingScheme | None = None
    created: Timestamp
    currency: str
    interval: Annotated[
        PlanInterval,
        Field(description="The frequency at which a subscription is billed."),
    ]
    interval_count: Annotated[
        int,
        Field(description="The number of intervals between subscription billings."),
    ]
    livemode: bool
    metadata: Metadata = {}
    nickname: str | None = None
    product: str | ExpandedObject | None = None
    tiers: list[PlanTier] | None = None
    tiers_mode: TiersMode | None = None
    transform_usage: TransformUsage | None = None
    trial_period_days: int | None = None
    usage_type: UsageType


class DeletedPlan(DeletedObject):
    object: Literal["plan"] = "plan"


class PlanListResponse(ListResponse):
    data: list[Plan]


class InlineProductParams(StripeParams):
    active: bool | None = None
    id: str | None = None
    metadata: Metadata | None = None
    name: Annotated[
        str,
        Field(description="The product's name, meant to be displayable to the customer."),
    ]
    statement_descriptor: str | None = None
    unit_label: str | None = None


class PlanTierParams(StripeParams):
    flat_amount: int | None = None
    flat_amount_decimal: Decimal | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None
    up_to: Literal["inf"] | int


class TransformUsageParams(StripeParams):
    divide_by: int
    round: Literal["down", "up"]


class PlanCreateParams(ExpandableParams):
    active: bool | None = None
    aggregate_usage: AggregateUsage | None = None
    amount: int | None = None
    amount_decimal: Decimal | None = None
    billing_scheme: BillingScheme | None = None
    currency: Annotated[
        str, Field(description="Three-letter ISO currency code, in lowercase.")
    ]
    id: str | None = None
    interval: PlanInterval
    interval_count: int | None = None
    metadata: Metadata | None = None
    nickname: str | None = None
    product: InlineProductParams | str | None = None
    tiers: list[PlanTierParams] | None = None
    tiers_mode: TiersMode | None = None
    transform_usage: TransformUsageParams | None = None
    trial_period_days: int | None = None
    usage_type: UsageType | None = None


class PlanDeleteParams(StripeParams):
    pass


class PlanListParams(ListParams):
    active: bool | None = None
    created: RangeQuery | int | None = None
    product: str | None = None


class PlanRetrieveParams(ExpandableParams):
    pass


class PlanUpdateParams(ExpandableParams):
    active: bool | None = None
    metadata: Metadata | None = None
    nickname: str | None = None
    product: str | None = None
    trial_period_days: int | None = None


__all__ = [
    "AggregateUsage",
    "BillingScheme",
    "PlanInterval",
    "TiersMode",
    "UsageType",
    "PlanTier",
    "TransformUsage",
    "Plan",
    "DeletedPlan",
    "PlanListResponse",
    "InlineProductParams",
    "PlanTierParams",
    "TransformUsageParams",
    "PlanCreateParams",
    "PlanDeleteParams",
    "PlanListParams",
    "PlanRetrieveParams",
    "PlanUpdateParams",
]
