from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.balance import (
    Balance,
    BalanceRetrieveParams,
)
from stripe_contracts.services.stripe.types.common import RequestOptions

__all__ = ["BalanceResource"]


class BalanceResource(APIResource):
    async def retrieve(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Balance:
        """
        Retrieve the current balance (GET /v1/balance).

        Pass ``RequestOptions(stripe_account=...)`` to read a connected
        account's balance instead of the platform's.
        """
        return await self._call(
            "GET",
            self._path("balance"),
            BalanceRetrieveParams,
            params,
            options,
            Balance,
        )
