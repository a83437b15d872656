from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.common import RequestOptions
from stripe_contracts.services.stripe.types.reader import (
    DeletedReader,
    Reader,
    ReaderCreateParams,
    ReaderDeleteParams,
    ReaderListParams,
    ReaderListResponse,
    ReaderRetrieveParams,
    ReaderUpdateParams,
)

__all__ = ["ReadersResource"]


class ReadersResource(APIResource):
    """Stripe Terminal readers, under /v1/terminal/readers."""

    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Reader:
        return await self._call(
            "POST",
            self._path("terminal", "readers"),
            ReaderCreateParams,
            params,
            options,
            Reader,
        )

    async def delete(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedReader:
        return await self._call(
            "DELETE",
            self._path("terminal", "readers", id),
            ReaderDeleteParams,
            params,
            options,
            DeletedReader,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> ReaderListResponse:
        return await self._call(
            "GET",
            self._path("terminal", "readers"),
            ReaderListParams,
            params,
            options,
            ReaderListResponse,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Reader:
        return await self._call(
            "GET",
            self._path("terminal", "readers", id),
            ReaderRetrieveParams,
            params,
            options,
            Reader,
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Reader:
        return await self._call(
            "POST",
            self._path("terminal", "readers", id),
            ReaderUpdateParams,
            params,
            options,
            Reader,
        )
