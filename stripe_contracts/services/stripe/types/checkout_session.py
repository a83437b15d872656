from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.common import (
    ExpandableParams,
    ExpandedObject,
    Metadata,
    StripeParams,
)
from stripe_contracts.services.stripe.types.plan import Plan

Locale = Literal[
    "auto",
    "da",
    "de",
    "en",
    "es",
    "fi",
    "fr",
    "it",
    "ja",
    "nb",
    "nl",
    "pl",
    "pt",
    "sv",
    "zh",
]
SessionMode = Literal["payment", "setup", "subscription"]
SubmitType = Literal["auto", "book", "donate", "pay"]


class CustomDisplayItem(BaseModel):
    description: str | None = None
    images: list[str] | None = None
    name: str


class DisplayItem(BaseModel):
    amount: int | None = None
    currency: str | None = None
    custom: CustomDisplayItem | None = None
    plan: Plan | None = None
    quantity: int | None = None
    sku: ExpandedObject | None = None
    type: str | None = None


class CheckoutSession(BaseModel):
    """A customer's session as they pay through a hosted payment page."""

    id: Annotated[
        str | None, Field(description="Unique identifier for the object.")
    ] = None
    object: Literal["checkout.session"] = "checkout.session"
    billing_address_collection: str | None = None
    cancel_url: Annotated[
        str | None,
        Field(description="The URL the customer will be directed to if they decide to cancel payment."),
    ] = None
    client_reference_id: str | None = None
    customer: str | ExpandedObject | None = None
    customer_email: str | None = None
    display_items: list[DisplayItem] | None = None
    livemode: bool | None = None
    locale: Locale | None = None
    mode: SessionMode | None = None
    payment_intent: str | ExpandedObject | None = None
    payment_method_types: list[str] | None = None
    setup_intent: str | ExpandedObject | None = None
    submit_type: SubmitType | None = None
    subscription: str | ExpandedObject | None = None
    success_url: Annotated[
        str | None,
        Field(description="The URL the customer will be directed to after the payment or subscription creation is successful."),
    ] = None


class LineItemParams(StripeParams):
    amount: int
    currency: str
    description: str | None = None
    images: list[str] | None = None
    name: str
    quantity: int


class ShippingAddressParams(StripeParams):
    city: str | None = None
    country: str | None = None
    line1: str
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class ShippingParams(StripeParams):
    address: ShippingAddressParams
    carrier: str | None = None
    name: str
    phone: str | None = None
    tracking_number: str | None = None


class TransferDataParams(StripeParams):
    destination: str


class PaymentIntentDataParams(StripeParams):
    application_fee_amount: int | None = None
    capture_method: Literal["automatic", "manual"] | None = None
    description: str | None = None
    metadata: Metadata | None = None
    on_behalf_of: str | None = None
    receipt_email: str | None = None
    setup_future_usage: Literal["off_session", "on_session"] | None = None
    shipping: ShippingParams | None = None
    statement_descriptor: str | None = None
    transfer_data: TransferDataParams | None = None


class SetupIntentDataParams(StripeParams):
    description: str | None = None
    metadata: Metadata | None = None
    on_behalf_of: str | None = None


class SubscriptionItemParams(StripeParams):
    plan: str
    quantity: int | None = None


class SubscriptionDataParams(StripeParams):
    application_fee_percent: float | None = None
    items: list[SubscriptionItemParams]
    metadata: Metadata | None = None
    trial_end: int | None = None
    trial_from_plan: bool | None = None
    trial_period_days: int | None = None


class CheckoutSessionCreateParams(ExpandableParams):
    billing_address_collection: Literal["auto", "required"] | None = None
    cancel_url: Annotated[
        str,
        Field(description="The URL the customer will be directed to if they decide to cancel payment."),
    ]
    client_reference_id: str | None = None
    customer: str | None = None
    customer_email: str | None = None
    line_items: list[LineItemParams] | None = None
    locale: Locale | None = None
    mode: SessionMode | None = None
    payment_intent_data: PaymentIntentDataParams | None = None
    payment_method_types: Annotated[
        list[Literal["card", "ideal"]],
        Field(description="A list of the types of payment methods this session accepts."),
    ]
    setup_intent_data: SetupIntentDataParams | None = None
    submit_type: SubmitType | None = None
    subscription_data: SubscriptionDataParams | None = None
    success_url: Annotated[
        str,
        Field(description="The URL the customer will be directed to after the payment or subscription creation is successful."),
    ]


class CheckoutSessionRetrieveParams(ExpandableParams):
    pass


__all__ = [
    "Locale",
    "SessionMode",
    "SubmitType",
    "CustomDisplayItem",
    "DisplayItem",
    "CheckoutSession",
    "LineItemParams",
    "ShippingAddressParams",
    "ShippingParams",
    "TransferDataParams",
    "PaymentIntentDataParams",
    "SetupIntentDataParams",
    "SubscriptionItemParams",
    "SubscriptionDataParams",
    "CheckoutSessionCreateParams",
    "CheckoutSessionRetrieveParams",
]
