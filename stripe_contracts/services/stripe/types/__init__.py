"""
Typed records for the Stripe API resource families.

Each family module declares its resource record, its deleted tombstone (when
the family can be deleted), its list wrapper and one parameter record per
operation. ``MODEL_REGISTRY`` maps model names to classes for tooling that
looks models up by name, such as the ``describe`` and ``validate`` commands.
"""

from pydantic import BaseModel

from stripe_contracts.services.stripe.types import (
    account,
    balance,
    checkout_session,
    common,
    invoice,
    plan,
    reader,
    transfer,
    webhook_endpoint,
)
from stripe_contracts.services.stripe.types.account import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.balance import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.checkout_session import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.common import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.invoice import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.plan import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.reader import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.transfer import *  # noqa: F401,F403
from stripe_contracts.services.stripe.types.webhook_endpoint import *  # noqa: F401,F403

# Family name -> module declaring it, in the order the families are documented.
FAMILIES = {
    "Account": account,
    "Invoice": invoice,
    "Terminal Reader": reader,
    "Transfer": transfer,
    "Balance": balance,
    "Checkout Session": checkout_session,
    "Plan": plan,
    "WebhookEndpoint": webhook_endpoint,
}

# Family name -> the resource record the family is named after.
FAMILY_RESOURCES: dict[str, type[BaseModel]] = {
    "Account": account.Account,
    "Invoice": invoice.Invoice,
    "Terminal Reader": reader.Reader,
    "Transfer": transfer.Transfer,
    "Balance": balance.Balance,
    "Checkout Session": checkout_session.CheckoutSession,
    "Plan": plan.Plan,
    "WebhookEndpoint": webhook_endpoint.WebhookEndpoint,
}


def _models_of(module) -> dict[str, type[BaseModel]]:
    models = {}
    for name in module.__all__:
        obj = getattr(module, name)
        if isinstance(obj, type) and issubclass(obj, BaseModel):
            models[name] = obj
    return models


MODEL_REGISTRY: dict[str, type[BaseModel]] = {}
for _module in (common, *FAMILIES.values()):
    MODEL_REGISTRY.update(_models_of(_module))


def family_models(family: str) -> dict[str, type[BaseModel]]:
    """Return the models declared by a resource family, keyed by name."""
    return _models_of(FAMILIES[family])


__all__ = [
    *account.__all__,
    *balance.__all__,
    *checkout_session.__all__,
    *common.__all__,
    *invoice.__all__,
    *plan.__all__,
    *reader.__all__,
    *transfer.__all__,
    *webhook_endpoint.__all__,
    "FAMILIES",
    "FAMILY_RESOURCES",
    "MODEL_REGISTRY",
    "family_models",
]
