from stripe_contracts.services.stripe import StripeClient

__all__ = [
    "StripeClient",
]
