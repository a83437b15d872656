"""
Stripe API client and typed resource records.

Example usage:
    from stripe_contracts.services.stripe import StripeClient
    from stripe_contracts.services.stripe.types import PlanCreateParams

    async with StripeClient() as client:
        plan = await client.plans.create(
            PlanCreateParams(currency="usd", interval="month", amount=2000)
        )
"""

from stripe_contracts.services.stripe.main import StripeClient


__all__ = [
    "StripeClient",
]
