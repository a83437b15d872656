from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.checkout_session import (
    CheckoutSession,
    CheckoutSessionCreateParams,
    CheckoutSessionRetrieveParams,
)
from stripe_contracts.services.stripe.types.common import RequestOptions

__all__ = ["CheckoutSessionsResource"]


class CheckoutSessionsResource(APIResource):
    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> CheckoutSession:
        """
        Create a Checkout Session (POST /v1/checkout/sessions).

        Parameters
        ----------
        params : CheckoutSessionCreateParams | Mapping | None
            ``cancel_url``, ``success_url`` and ``payment_method_types`` are
            required. One-off purchases go in ``line_items``; subscriptions
            in ``subscription_data.items``.
        options : RequestOptions | None
            Per-request header overrides.

        Returns
        -------
        CheckoutSession
            The created session; redirect the customer using its ``id``.
        """
        return await self._call(
            "POST",
            self._path("checkout", "sessions"),
            CheckoutSessionCreateParams,
            params,
            options,
            CheckoutSession,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> CheckoutSession:
        return await self._call(
            "GET",
            self._path("checkout", "sessions", id),
            CheckoutSessionRetrieveParams,
            params,
            options,
            CheckoutSession,
        )
