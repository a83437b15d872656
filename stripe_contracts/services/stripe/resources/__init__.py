"""
Resource accessors, one per Stripe resource family.

Accessors are created by :class:`stripe_contracts.services.stripe.main.StripeClient`
and share its HTTP client:
- AccountsResource: accounts, capabilities, external accounts, login links, persons
- BalanceResource: account balance
- CheckoutSessionsResource: hosted Checkout sessions
- InvoicesResource: invoices, upcoming invoices and line items
- PlansResource: subscription plans
- ReadersResource: Terminal readers
- TransfersResource: transfers and transfer reversals
- WebhookEndpointsResource: webhook endpoints
"""

from stripe_contracts.services.stripe.resources.accounts import AccountsResource
from stripe_contracts.services.stripe.resources.balance import BalanceResource
from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.resources.checkout_sessions import (
    CheckoutSessionsResource,
)
from stripe_contracts.services.stripe.resources.invoices import InvoicesResource
from stripe_contracts.services.stripe.resources.plans import PlansResource
from stripe_contracts.services.stripe.resources.readers import ReadersResource
from stripe_contracts.services.stripe.resources.transfers import TransfersResource
from stripe_contracts.services.stripe.resources.webhook_endpoints import (
    WebhookEndpointsResource,
)


__all__ = [
    "APIResource",
    "ParamsInput",
    "AccountsResource",
    "BalanceResource",
    "CheckoutSessionsResource",
    "InvoicesResource",
    "PlansResource",
    "ReadersResource",
    "TransfersResource",
    "WebhookEndpointsResource",
]
