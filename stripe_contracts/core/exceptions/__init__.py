from stripe_contracts.core.exceptions.types import (
    AppException,
    IdempotencyException,
    RateLimitException,
    StripeAPIException,
    StripeAuthenticationException,
    StripeCardException,
    StripeConnectionException,
    StripeNotFoundException,
)

__all__ = [
    "AppException",
    "IdempotencyException",
    "RateLimitException",
    "StripeAPIException",
    "StripeAuthenticationException",
    "StripeCardException",
    "StripeConnectionException",
    "StripeNotFoundException",
]
