from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.common import RequestOptions
from stripe_contracts.services.stripe.types.transfer import (
    Transfer,
    TransferCreateParams,
    TransferCreateReversalParams,
    TransferListParams,
    TransferListResponse,
    TransferListReversalsParams,
    TransferRetrieveParams,
    TransferRetrieveReversalParams,
    TransferReversal,
    TransferReversalListResponse,
    TransferUpdateParams,
    TransferUpdateReversalParams,
)

__all__ = ["TransfersResource"]


class TransfersResource(APIResource):
    """Transfers to connected accounts and their reversals. Transfers cannot be deleted."""

    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Transfer:
        return await self._call(
            "POST",
            self._path("transfers"),
            TransferCreateParams,
            params,
            options,
            Transfer,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> TransferListResponse:
        return await self._call(
            "GET",
            self._path("transfers"),
            TransferListParams,
            params,
            options,
            TransferListResponse,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Transfer:
        return await self._call(
            "GET",
            self._path("transfers", id),
            TransferRetrieveParams,
            params,
            options,
            Transfer,
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Transfer:
        """Only ``description`` and ``metadata`` can change after creation."""
        return await self._call(
            "POST",
            self._path("transfers", id),
            TransferUpdateParams,
            params,
            options,
            Transfer,
        )

    async def create_reversal(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> TransferReversal:
        """
        Reverse all or part of a transfer (POST /v1/transfers/{id}/reversals).

        Omitting ``amount`` reverses whatever has not been reversed yet.
        """
        return await self._call(
            "POST",
            self._path("transfers", id, "reversals"),
            TransferCreateReversalParams,
            params,
            options,
            TransferReversal,
        )

    async def list_reversals(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> TransferReversalListResponse:
        return await self._call(
            "GET",
            self._path("transfers", id, "reversals"),
            TransferListReversalsParams,
            params,
            options,
            TransferReversalListResponse,
        )

    async def retrieve_reversal(
        self,
        id: str,
        reversal: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> TransferReversal:
        return await self._call(
            "GET",
            self._path("transfers", id, "reversals", reversal),
            TransferRetrieveReversalParams,
            params,
            options,
            TransferReversal,
        )

    async def update_reversal(
        self,
        id: str,
        reversal: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> TransferReversal:
        return await self._call(
            "POST",
            self._path("transfers", id, "reversals", reversal),
            TransferUpdateReversalParams,
            params,
            options,
            TransferReversal,
        )
