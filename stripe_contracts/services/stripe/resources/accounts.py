from pydantic import TypeAdapter

from stripe_contracts.services.stripe.resources.base import APIResource, ParamsInput
from stripe_contracts.services.stripe.types.account import (
    Account,
    AccountCreateExternalAccountParams,
    AccountCreateLoginLinkParams,
    AccountCreateParams,
    AccountCreatePersonParams,
    AccountDeleteExternalAccountParams,
    AccountDeleteParams,
    AccountDeletePersonParams,
    AccountListCapabilitiesParams,
    AccountListExternalAccountsParams,
    AccountListParams,
    AccountListPersonsParams,
    AccountListResponse,
    AccountRejectParams,
    AccountRetrieveCapabilityParams,
    AccountRetrieveExternalAccountParams,
    AccountRetrieveParams,
    AccountRetrievePersonParams,
    AccountUpdateCapabilityParams,
    AccountUpdateExternalAccountParams,
    AccountUpdateParams,
    AccountUpdatePersonParams,
    BankAccount,
    Capability,
    CapabilityListResponse,
    Card,
    DeletedAccount,
    DeletedBankAccount,
    DeletedCard,
    DeletedExternalAccount,
    DeletedPerson,
    ExternalAccount,
    ExternalAccountListResponse,
    LoginLink,
    Person,
    PersonListResponse,
)
from stripe_contracts.services.stripe.types.common import RequestOptions

__all__ = ["AccountsResource"]

_external_account = TypeAdapter(ExternalAccount)
_deleted_external_account = TypeAdapter(DeletedExternalAccount)


class AccountsResource(APIResource):
    """Operations on Connect accounts and their capabilities, external accounts and persons."""

    async def create(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Account:
        """
        Create a connected account (POST /v1/accounts).

        Parameters
        ----------
        params : AccountCreateParams | Mapping | None
            Every field is optional; an empty call creates a bare account.
        options : RequestOptions | None
            Per-request header overrides.

        Returns
        -------
        Account
            The newly created account.
        """
        return await self._call(
            "POST",
            self._path("accounts"),
            AccountCreateParams,
            params,
            options,
            Account,
        )

    async def delete(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedAccount:
        return await self._call(
            "DELETE",
            self._path("accounts", id),
            AccountDeleteParams,
            params,
            options,
            DeletedAccount,
        )

    async def list(
        self,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> AccountListResponse:
        return await self._call(
            "GET",
            self._path("accounts"),
            AccountListParams,
            params,
            options,
            AccountListResponse,
        )

    async def reject(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Account:
        """Reject a connected account, flagging it for fraud or a terms violation."""
        return await self._call(
            "POST",
            self._path("accounts", id, "reject"),
            AccountRejectParams,
            params,
            options,
            Account,
        )

    async def retrieve(
        self,
        id: str | None = None,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Account:
        """
        Retrieve an account.

        Without an ``id`` this returns the account that owns the API key
        (GET /v1/account); with one it returns that connected account.
        """
        path = self._path("account") if id is None else self._path("accounts", id)
        return await self._call(
            "GET", path, AccountRetrieveParams, params, options, Account
        )

    async def update(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Account:
        return await self._call(
            "POST",
            self._path("accounts", id),
            AccountUpdateParams,
            params,
            options,
            Account,
        )

    # Capabilities

    async def list_capabilities(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> CapabilityListResponse:
        return await self._call(
            "GET",
            self._path("accounts", id, "capabilities"),
            AccountListCapabilitiesParams,
            params,
            options,
            CapabilityListResponse,
        )

    async def retrieve_capability(
        self,
        id: str,
        capability: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Capability:
        return await self._call(
            "GET",
            self._path("accounts", id, "capabilities", capability),
            AccountRetrieveCapabilityParams,
            params,
            options,
            Capability,
        )

    async def update_capability(
        self,
        id: str,
        capability: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Capability:
        return await self._call(
            "POST",
            self._path("accounts", id, "capabilities", capability),
            AccountUpdateCapabilityParams,
            params,
            options,
            Capability,
        )

    # External accounts

    async def create_external_account(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> BankAccount | Card:
        """
        Attach a bank account or debit card to a connected account.

        Returns
        -------
        BankAccount | Card
            Resolved from the ``object`` field of the response.
        """
        return await self._call(
            "POST",
            self._path("accounts", id, "external_accounts"),
            AccountCreateExternalAccountParams,
            params,
            options,
            _external_account,
        )

    async def delete_external_account(
        self,
        id: str,
        external_account: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedBankAccount | DeletedCard:
        """Detach an external account. Returns a ``DeletedBankAccount`` or ``DeletedCard``."""
        return await self._call(
            "DELETE",
            self._path("accounts", id, "external_accounts", external_account),
            AccountDeleteExternalAccountParams,
            params,
            options,
            _deleted_external_account,
        )

    async def list_external_accounts(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> ExternalAccountListResponse:
        return await self._call(
            "GET",
            self._path("accounts", id, "external_accounts"),
            AccountListExternalAccountsParams,
            params,
            options,
            ExternalAccountListResponse,
        )

    async def retrieve_external_account(
        self,
        id: str,
        external_account: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> BankAccount | Card:
        return await self._call(
            "GET",
            self._path("accounts", id, "external_accounts", external_account),
            AccountRetrieveExternalAccountParams,
            params,
            options,
            _external_account,
        )

    async def update_external_account(
        self,
        id: str,
        external_account: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> BankAccount | Card:
        return await self._call(
            "POST",
            self._path("accounts", id, "external_accounts", external_account),
            AccountUpdateExternalAccountParams,
            params,
            options,
            _external_account,
        )

    # Login links

    async def create_login_link(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> LoginLink:
        """Create a single-use Express dashboard login link for a connected account."""
        return await self._call(
            "POST",
            self._path("accounts", id, "login_links"),
            AccountCreateLoginLinkParams,
            params,
            options,
            LoginLink,
        )

    # Persons

    async def create_person(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Person:
        return await self._call(
            "POST",
            self._path("accounts", id, "persons"),
            AccountCreatePersonParams,
            params,
            options,
            Person,
        )

    async def delete_person(
        self,
        id: str,
        person: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> DeletedPerson:
        return await self._call(
            "DELETE",
            self._path("accounts", id, "persons", person),
            AccountDeletePersonParams,
            params,
            options,
            DeletedPerson,
        )

    async def list_persons(
        self,
        id: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> PersonListResponse:
        return await self._call(
            "GET",
            self._path("accounts", id, "persons"),
            AccountListPersonsParams,
            params,
            options,
            PersonListResponse,
        )

    async def retrieve_person(
        self,
        id: str,
        person: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Person:
        return await self._call(
            "GET",
            self._path("accounts", id, "persons", person),
            AccountRetrievePersonParams,
            params,
            options,
            Person,
        )

    async def update_person(
        self,
        id: str,
        person: str,
        params: ParamsInput = None,
        options: RequestOptions | None = None,
    ) -> Person:
        return await self._call(
            "POST",
            self._path("accounts", id, "persons", person),
            AccountUpdatePersonParams,
            params,
            options,
            Person,
        )
