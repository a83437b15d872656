from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.common import RequestOptions
from stripe_contracts.services.stripe.types.invoice import (
    DeletedInvoice,
    Invoice,
    InvoiceCreateParams,
    InvoiceDeleteParams,
    InvoiceFinalizeParams,
    InvoiceLineItemListResponse,
    InvoiceListLineItemsParams,
    InvoiceListParams,
    InvoiceListResponse,
    InvoiceListUpcomingLineItemsParams,
    InvoiceMarkUncollectibleParams,
    InvoicePayParams,
    InvoiceRetrieveParams,
    InvoiceRetrieveUpcomingParams,
    InvoiceSendParams,
    InvoiceUpdateParams,
    InvoiceVoidParams,
)

__all__ = ["InvoicesResource"]


class InvoicesResource(APIResource):
    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        """
        Create a draft invoice for a customer (POST /v1/invoices).

        The draft collects the customer's pending invoice items. ``customer``
        is required.
        """
        return await self._call(
            "POST",
            self._path("invoices"),
            InvoiceCreateParams,
            params,
            options,
            Invoice,
        )

    async def delete(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedInvoice:
        """Permanently delete a draft invoice."""
        return await self._call(
            "DELETE",
            self._path("invoices", id),
            InvoiceDeleteParams,
            params,
            options,
            DeletedInvoice,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> InvoiceListResponse:
        return await self._call(
            "GET",
            self._path("invoices"),
            InvoiceListParams,
            params,
            options,
            InvoiceListResponse,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "GET",
            self._path("invoices", id),
            InvoiceRetrieveParams,
            params,
            options,
            Invoice,
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        """
        Update a draft invoice. Once finalized, only a few fields such as
        ``metadata`` and ``description`` can still change.
        """
        return await self._call(
            "POST",
            self._path("invoices", id),
            InvoiceUpdateParams,
            params,
            options,
            Invoice,
        )

    async def finalize_invoice(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "POST",
            self._path("invoices", id, "finalize"),
            InvoiceFinalizeParams,
            params,
            options,
            Invoice,
        )

    async def mark_uncollectible(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "POST",
            self._path("invoices", id, "mark_uncollectible"),
            InvoiceMarkUncollectibleParams,
            params,
            options,
            Invoice,
        )

    async def pay(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "POST",
            self._path("invoices", id, "pay"),
            InvoicePayParams,
            params,
            options,
            Invoice,
        )

    async def retrieve_upcoming(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        """
        Preview the next invoice for a customer (GET /v1/invoices/upcoming).

        ``invoice_items`` and ``subscription_items`` let the caller see what the
        invoice would look like after hypothetical changes.
        """
        return await self._call(
            "GET",
            self._path("invoices", "upcoming"),
            InvoiceRetrieveUpcomingParams,
            params,
            options,
            Invoice,
        )

    async def send_invoice(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "POST",
            self._path("invoices", id, "send"),
            InvoiceSendParams,
            params,
            options,
            Invoice,
        )

    async def void_invoice(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Invoice:
        return await self._call(
            "POST",
            self._path("invoices", id, "void"),
            InvoiceVoidParams,
            params,
            options,
            Invoice,
        )

    async def list_line_items(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> InvoiceLineItemListResponse:
        return await self._call(
            "GET",
            self._path("invoices", id, "lines"),
            InvoiceListLineItemsParams,
            params,
            options,
            InvoiceLineItemListResponse,
        )

    async def list_upcoming_line_items(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> InvoiceLineItemListResponse:
        return await self._call(
            "GET",
            self._path("invoices", "upcoming", "lines"),
            InvoiceListUpcomingLineItemsParams,
            params,
            options,
            InvoiceLineItemListResponse,
        )
