from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.common import RequestOptions
from stripe_contracts.services.stripe.types.plan import (
    DeletedPlan,
    Plan,
    PlanCreateParams,
    PlanDeleteParams,
    PlanListParams,
    PlanListResponse,
    PlanRetrieveParams,
    PlanUpdateParams,
)

__all__ = ["PlansResource"]


class PlansResource(APIResource):
    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Plan:
        """
        Create a plan (POST /v1/plans).

        ``currency`` and ``interval`` are required. ``product`` is either an
        existing product id or an inline product with at least a ``name``.
        Tiered plans need ``tiers`` whose last entry has ``up_to="inf"``.
        """
        return await self._call(
            "POST",
            self._path("plans"),
            PlanCreateParams,
            params,
            options,
            Plan,
        )

    async def delete(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedPlan:
        return await self._call(
            "DELETE",
            self._path("plans", id),
            PlanDeleteParams,
            params,
            options,
            DeletedPlan,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> PlanListResponse:
        return await self._call(
            "GET",
            self._path("plans"),
            PlanListParams,
            params,
            options,
            PlanListResponse,
        )

    async def retrieve(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Plan:
        return await self._call(
            "GET",
            self._path("plans", id),
            PlanRetrieveParams,
            params,
            options,
            Plan,
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Plan:
        """Pricing fields are immutable; only names, metadata and trial settings change."""
        return await self._call(
            "POST",
            self._path("plans", id),
            PlanUpdateParams,
            params,
            options,
            Plan,
        )
