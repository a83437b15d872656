from typing import Literal

from pydantic import BaseModel

from stripe_contracts.services.stripe.types.common import ExpandableParams


class BalanceSourceTypes(BaseModel):
    bank_account: int | None = None
    card: int | None = None


class BalanceFunds(BaseModel):
    amount: int | None = None
    currency: str | None = None
    source_types: BalanceSourceTypes | None = None


class Balance(BaseModel):
    """Funds held in the Stripe account, split by availability."""

    object: Literal["balance"] = "balance"
    available: list[BalanceFunds] | None = None
    connect_reserved: list[BalanceFunds] | None = None
    livemode: bool | None = None
    pending: list[BalanceFunds] | None = None


class BalanceRetrieveParams(ExpandableParams):
    pass


__all__ = [
    "BalanceSourceTypes",
    "BalanceFunds",
    "Balance",
    "BalanceRetrieveParams",
]
