from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from stripe_contracts.services.stripe.types.account import Account
from stripe_contracts.services.stripe.types.common import (
    Address,
    DeletedObject,
    Empty,
    ExpandableParams,
    ExpandedObject,
    ListParams,
    ListResponse,
    Metadata,
    RangeQuery,
    StripeParams,
    Timestamp,
)
from stripe_contracts.services.stripe.types.plan import Plan

BillingReason = Literal[
    "automatic_pending_invoice_item_invoice",
    "manual",
    "subscription",
    "subscription_create",
    "subscription_cycle",
    "subscription_threshold",
    "subscription_update",
    "upcoming",
]
CollectionMethod = Literal["charge_automatically", "send_invoice"]
InvoiceStatus = Literal["deleted", "draft", "open", "paid", "uncollectible", "void"]
TaxIdType = Literal[
    "au_abn",
    "ch_vat",
    "eu_vat",
    "in_gst",
    "mx_rfc",
    "no_vat",
    "nz_gst",
    "unknown",
    "za_vat",
]


# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------


class LineItemPeriod(BaseModel):
    end: Timestamp
    start: Timestamp


class InvoiceLineItem(BaseModel):
    id: str
    object: Literal["line_item"] = "line_item"
    amount: int
    currency: str
    description: str | None = None
    discountable: bool | None = None
    invoice_item: str | None = None
    livemode: bool | None = None
    metadata: Metadata = {}
    period: LineItemPeriod | None = None
    plan: Plan | None = None
    proration: bool | None = None
    quantity: int | None = None
    subscription: str | None = None
    subscription_item: str | None = None
    type: Literal["invoiceitem", "subscription"]


class InvoiceLineItemListResponse(ListResponse):
    data: list[InvoiceLineItem]


# ---------------------------------------------------------------------------
# Invoice
# ---------------------------------------------------------------------------


class CustomField(BaseModel):
    name: str
    value: str


class CustomerShipping(BaseModel):
    address: Address | None = None
    carrier: str | None = None
    name: str | None = None
    phone: str | None = None
    tracking_number: str | None = None


class CustomerTaxId(BaseModel):
    type: TaxIdType
    value: str | None = None


class StatusTransitions(BaseModel):
    finalized_at: Timestamp | None = None
    marked_uncollectible_at: Timestamp | None = None
    paid_at: Timestamp | None = None
    voided_at: Timestamp | None = None


class ThresholdItemReason(BaseModel):
    line_item_ids: list[str]
    usage_gte: int


class ThresholdReason(BaseModel):
    amount_gte: int | None = None
    item_reasons: list[ThresholdItemReason] = []


class TaxAmount(BaseModel):
    amount: int
    inclusive: bool
    tax_rate: str | ExpandedObject


class InvoiceTransferData(BaseModel):
    destination: str | Account


class Invoice(BaseModel):
    """
    A statement of amounts owed by a customer, generated one-off or
    periodically from a subscription.
    """

    id: Annotated[
        str | None,
        Field(description="Unique identifier for the object. Absent on upcoming invoice previews."),
    ] = None
    object: Literal["invoice"] = "invoice"
    account_country: str | None = None
    account_name: str | None = None
    amount_due: Annotated[
        int,
        Field(description="Final amount due at this time for this invoice."),
    ]
    amount_paid: Annotated[
        int, Field(description="The amount, in cents, that was paid.")
    ]
    amount_remaining: Annotated[
        int, Field(description="The amount remaining, in cents, that is due.")
    ]
    application_fee_amount: int | None = None
    attempt_count: int
    attempted: bool
    auto_advance: bool = False
    billing_reason: BillingReason | None = None
    charge: str | ExpandedObject | None = None
    collection_method: CollectionMethod | None = None
    created: Timestamp
    currency: str
    custom_fields: list[CustomField] | None = None
    customer: str | ExpandedObject
    customer_address: Address | None = None
    customer_email: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    customer_shipping: CustomerShipping | None = None
    customer_tax_exempt: Literal["exempt", "none", "reverse"] | None = None
    customer_tax_ids: list[CustomerTaxId] | None = None
    default_payment_method: str | ExpandedObject | None = None
    default_source: str | ExpandedObject | None = None
    default_tax_rates: list[ExpandedObject] | None = None
    description: str | None = None
    discount: ExpandedObject | None = None
    due_date: Timestamp | None = None
    ending_balance: int | None = None
    footer: str | None = None
    hosted_invoice_url: str | None = None
    invoice_pdf: str | None = None
    lines: Annotated[
        InvoiceLineItemListResponse,
        Field(description="The individual line items that make up the invoice."),
    ]
    livemode: bool
    metadata: Metadata | None = None
    next_payment_attempt: Timestamp | None = None
    number: str | None = None
    paid: bool
    payment_intent: str | ExpandedObject | None = None
    period_end: Timestamp
    period_start: Timestamp
    post_payment_credit_notes_amount: int
    pre_payment_credit_notes_amount: int
    receipt_number: str | None = None
    starting_balance: int
    statement_descriptor: str | None = None
    status: Annotated[
        InvoiceStatus | None,
        Field(description="The status of the invoice."),
    ] = None
    status_transitions: StatusTransitions
    subscription: str | ExpandedObject | None = None
    subscription_proration_date: int | None = None
    subtotal: int
    tax: int | None = None
    tax_percent: float | None = None
    threshold_reason: ThresholdReason | None = None
    total: int
    total_tax_amounts: list[TaxAmount] | None = None
    transfer_data: InvoiceTransferData | None = None
    webhooks_delivered_at: Timestamp | None = None


class DeletedInvoice(DeletedObject):
    object: Literal["invoice"] = "invoice"


class InvoiceListResponse(ListResponse):
    data: list[Invoice]


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------


class CustomFieldParams(StripeParams):
    name: str
    value: str


class InvoiceTransferDataParams(StripeParams):
    destination: str


class InvoiceUpdateParams(ExpandableParams):
    application_fee_amount: int | None = None
    auto_advance: bool | None = None
    collection_method: CollectionMethod | None = None
    custom_fields: list[CustomFieldParams] | Empty | None = None
    days_until_due: int | None = None
    default_payment_method: str | None = None
    default_source: str | None = None
    default_tax_rates: list[str] | Empty | None = None
    description: str | None = None
    due_date: int | None = None
    footer: str | None = None
    metadata: Metadata | None = None
    statement_descriptor: str | None = None
    tax_percent: float | Empty | None = None
    transfer_data: InvoiceTransferDataParams | Empty | None = None


class InvoiceCreateParams(ExpandableParams):
    application_fee_amount: int | None = None
    auto_advance: bool | None = None
    collection_method: CollectionMethod | None = None
    custom_fields: list[CustomFieldParams] | Empty | None = None
    customer: Annotated[
        str,
        Field(description="The ID of the customer who will be billed."),
    ]
    days_until_due: int | None = None
    default_payment_method: str | None = None
    default_source: str | None = None
    default_tax_rates: list[str] | None = None
    description: str | None = None
    due_date: int | None = None
    footer: str | None = None
    metadata: Metadata | None = None
    statement_descriptor: str | None = None
    subscription: str | None = None
    tax_percent: float | None = None
    transfer_data: InvoiceTransferDataParams | None = None


class InvoiceDeleteParams(StripeParams):
    pass


class InvoiceListParams(ListParams):
    collection_method: CollectionMethod | None = None
    created: RangeQuery | int | None = None
    customer: str | None = None
    due_date: RangeQuery | int | None = None
    status: Literal["draft", "open", "paid", "uncollectible", "void"] | None = None
    subscription: str | None = None


class InvoiceRetrieveParams(ExpandableParams):
    pass


class InvoiceFinalizeParams(ExpandableParams):
    auto_advance: bool | None = None


class InvoiceMarkUncollectibleParams(ExpandableParams):
    pass


class InvoicePayParams(ExpandableParams):
    forgive: bool | None = None
    off_session: bool | None = None
    paid_out_of_band: bool | None = None
    payment_method: str | None = None
    source: str | None = None


class InvoiceSendParams(ExpandableParams):
    pass


class InvoiceVoidParams(ExpandableParams):
    pass


class InvoiceListLineItemsParams(ListParams):
    pass


class PeriodParams(StripeParams):
    end: int
    start: int


class UpcomingInvoiceItemParams(StripeParams):
    amount: int | None = None
    currency: str | None = None
    description: str | None = None
    discountable: bool | None = None
    invoiceitem: str | None = None
    metadata: Metadata | None = None
    period: PeriodParams | None = None
    quantity: int | None = None
    tax_rates: list[str] | Empty | None = None
    unit_amount: int | None = None
    unit_amount_decimal: Decimal | None = None


class BillingThresholdsParams(StripeParams):
    usage_gte: int


class UpcomingSubscriptionItemParams(StripeParams):
    billing_thresholds: BillingThresholdsParams | Empty | None = None
    clear_usage: bool | None = None
    deleted: bool | None = None
    id: str | None = None
    metadata: Metadata | None = None
    plan: str | None = None
    quantity: int | None = None
    tax_rates: list[str] | Empty | None = None


class InvoiceUpcomingParams(StripeParams):
    """Parameters shared by the upcoming invoice preview and its line items."""

    coupon: str | None = None
    customer: str | None = None
    invoice_items: list[UpcomingInvoiceItemParams] | None = None
    schedule: str | None = None
    subscription: str | None = None
    subscription_billing_cycle_anchor: Literal["now", "unchanged"] | int | None = None
    subscription_cancel_at: int | Empty | None = None
    subscription_cancel_at_period_end: bool | None = None
    subscription_cancel_now: bool | None = None
    subscription_default_tax_rates: list[str] | Empty | None = None
    subscription_items: list[UpcomingSubscriptionItemParams] | None = None
    subscription_prorate: bool | None = None
    subscription_proration_date: int | None = None
    subscription_start_date: int | None = None
    subscription_tax_percent: float | None = None
    subscription_trial_end: Literal["now"] | int | None = None
    subscription_trial_from_plan: bool | None = None


class InvoiceRetrieveUpcomingParams(InvoiceUpcomingParams):
    expand: list[str] | None = None


class InvoiceListUpcomingLineItemsParams(InvoiceUpcomingParams, ListParams):
    pass


__all__ = [
    "BillingReason",
    "CollectionMethod",
    "InvoiceStatus",
    "TaxIdType",
    "LineItemPeriod",
    "InvoiceLineItem",
    "InvoiceLineItemListResponse",
    "CustomField",
    "CustomerShipping",
    "CustomerTaxId",
    "StatusTransitions",
    "ThresholdItemReason",
    "ThresholdReason",
    "TaxAmount",
    "InvoiceTransferData",
    "Invoice",
    "DeletedInvoice",
    "InvoiceListResponse",
    "CustomFieldParams",
    "InvoiceTransferDataParams",
    "InvoiceCreateParams",
    "InvoiceUpdateParams",
    "InvoiceDeleteParams",
    "InvoiceListParams",
    "InvoiceRetrieveParams",
    "InvoiceFinalizeParams",
    "InvoiceMarkUncollectibleParams",
    "InvoicePayParams",
    "InvoiceSendParams",
    "InvoiceVoidParams",
    "InvoiceListLineItemsParams",
    "PeriodParams",
    "UpcomingInvoiceItemParams",
    "BillingThresholdsParams",
    "UpcomingSubscriptionItemParams",
    "InvoiceUpcomingParams",
    "InvoiceRetrieveUpcomingParams",
    "InvoiceListUpcomingLineItemsParams",
]
