from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.common import RequestOptions
from stripe_contracts.services.stripe.types.webhook_endpoint import (
    DeletedWebhookEndpoint,
    WebhookEndpoint,
    WebhookEndpointCreateParams,
    WebhookEndpointDeleteParams,
    WebhookEndpointListParams,
    WebhookEndpointListResponse,
    WebhookEndpointRetrieveParams,
    WebhookEndpointUpdateParams,
)

__all__ = ["WebhookEndpointsResource"]


class WebhookEndpointsResource(APIResource):
    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> WebhookEndpoint:
        """
        Register a webhook endpoint (POST /v1/webhook_endpoints).

        The returned record is the only one that carries the signing
        ``secret``; store it before discarding the response.
        """
        return await self._call(
            "POST",
            self._path("webhook_endpoints"),
            WebhookEndpointCreateParams,
            params,
            options,
            WebhookEndpoint,
        )

    async def delete(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedWebhookEndpoint:
        return await self._call(
            "DELETE",
            self._path("webhook_endpoints", id),
            WebhookEndpointDeleteParams,
            params,
            options,
            DeletedWebhookEndpoint,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> WebhookEndpointListResponse:
        return await self._call(
            "GET",
            self._path("webhook_endpoints"),
            WebhookEndpointListParams,
            params,
            options,
            WebhookEndpointListResponse,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> WebhookEndpoint:
        return await self._call(
            "GET",
            self._path("webhook_endpoints", id),
            WebhookEndpointRetrieveParams,
            params,
            options,
            WebhookEndpoint,
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> WebhookEndpoint:
        return await self._call(
            "POST",
            self._path("webhook_endpoints", id),
            WebhookEndpointUpdateParams,
            params,
            options,
            WebhookEndpoint,
        )
