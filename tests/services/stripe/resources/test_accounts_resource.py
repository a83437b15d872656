"""
Test suite for the accounts accessor.

Each test checks the HTTP method and path an operation uses, how its
parameters are sent and the record the response is validated into.

Run tests:
    pytest tests/services/stripe/resources/test_accounts_resource.py -v
"""

import pytest
from pydantic import ValidationError

from stripe_contracts.services.stripe.types import (
    Account,
    AccountListResponse,
    AccountRejectParams,
    BankAccount,
    Capability,
    CapabilityListResponse,
    Card,
    DeletedAccount,
    DeletedBankAccount,
    DeletedCard,
    DeletedPerson,
    ExternalAccountListResponse,
    LoginLink,
    Person,
    PersonListResponse,
    RequestOptions,
)


def _sent(mock_http):
    call = mock_http.request.await_args
    return call.args[0], call.args[1], call.kwargs


class TestAccountOperations:

    @pytest.mark.asyncio
    async def test_create(self, stripe_client, mock_http, make_response, account_json):
        mock_http.request.return_value = make_response(200, account_json)

        account = await stripe_client.accounts.create(
            {"type": "custom", "country": "US", "requested_capabilities": ["transfers"]}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts")
        assert kwargs["data"] == {
            "type": "custom",
            "country": "US",
            "requested_capabilities[0]": "transfers",
        }
        assert isinstance(account, Account)

    @pytest.mark.asyncio
    async def test_create_without_params(self, stripe_client, mock_http, make_response, account_json):
        """Test that account creation needs no parameters at all."""
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.create()

        assert _sent(mock_http)[2]["data"] == {}

    @pytest.mark.asyncio
    async def test_delete(self, stripe_client, mock_http, make_response):
        mock_http.request.return_value = make_response(
            200, {"id": "acct_1", "object": "account", "deleted": True}
        )

        result = await stripe_client.accounts.delete("acct_1")

        assert _sent(mock_http)[:2] == ("DELETE", "/v1/accounts/acct_1")
        assert isinstance(result, DeletedAccount)

    @pytest.mark.asyncio
    async def test_list(self, stripe_client, mock_http, make_response, make_list, account_json):
        mock_http.request.return_value = make_response(
            200, make_list("/v1/accounts", account_json)
        )

        result = await stripe_client.accounts.list({"limit": 3, "created": {"gte": 1}})

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("GET", "/v1/accounts")
        assert kwargs["params"] == {"limit": "3", "created[gte]": "1"}
        assert isinstance(result, AccountListResponse)
        assert result.data[0].id == "acct_123"

    @pytest.mark.asyncio
    async def test_reject(self, stripe_client, mock_http, make_response, account_json):
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.reject("acct_1", AccountRejectParams(reason="fraud"))

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_1/reject")
        assert kwargs["data"] == {"reason": "fraud"}

    @pytest.mark.asyncio
    async def test_reject_requires_reason(self, stripe_client, mock_http):
        """Test that missing required parameters fail before any request."""
        with pytest.raises(ValidationError):
            await stripe_client.accounts.reject("acct_1")

        mock_http.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retrieve_own_account(self, stripe_client, mock_http, make_response, account_json):
        """Test that retrieving without an id reads the key owner's account."""
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.retrieve()

        assert _sent(mock_http)[:2] == ("GET", "/v1/account")

    @pytest.mark.asyncio
    async def test_retrieve_connected_account(
        self, stripe_client, mock_http, make_response, account_json
    ):
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.retrieve("acct_123", {"expand": ["settings"]})

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("GET", "/v1/accounts/acct_123")
        assert kwargs["params"] == {"expand[0]": "settings"}

    @pytest.mark.asyncio
    async def test_update(self, stripe_client, mock_http, make_response, account_json):
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.update(
            "acct_123", {"metadata": {"order": "6735"}, "business_profile": {"mcc": "5734"}}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_123")
        assert kwargs["data"] == {
            "metadata[order]": "6735",
            "business_profile[mcc]": "5734",
        }

    @pytest.mark.asyncio
    async def test_update_rejects_create_only_fields(self, stripe_client, mock_http):
        with pytest.raises(ValidationError):
            await stripe_client.accounts.update("acct_123", {"type": "express"})

        mock_http.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ids_are_path_encoded(self, stripe_client, mock_http, make_response, account_json):
        mock_http.request.return_value = make_response(200, account_json)

        await stripe_client.accounts.retrieve("acct/../x")

        assert _sent(mock_http)[1] == "/v1/accounts/acct%2F..%2Fx"


class TestCapabilityOperations:

    @pytest.mark.asyncio
    async def test_list_capabilities(
        self, stripe_client, mock_http, make_response, make_list, capability_json
    ):
        mock_http.request.return_value = make_response(
            200, make_list("/v1/accounts/acct_123/capabilities", capability_json)
        )

        result = await stripe_client.accounts.list_capabilities("acct_123")

        assert _sent(mock_http)[:2] == ("GET", "/v1/accounts/acct_123/capabilities")
        assert isinstance(result, CapabilityListResponse)

    @pytest.mark.asyncio
    async def test_retrieve_capability(self, stripe_client, mock_http, make_response, capability_json):
        mock_http.request.return_value = make_response(200, capability_json)

        result = await stripe_client.accounts.retrieve_capability("acct_123", "card_payments")

        assert _sent(mock_http)[:2] == (
            "GET",
            "/v1/accounts/acct_123/capabilities/card_payments",
        )
        assert isinstance(result, Capability)

    @pytest.mark.asyncio
    async def test_update_capability(self, stripe_client, mock_http, make_response, capability_json):
        mock_http.request.return_value = make_response(200, capability_json)

        await stripe_client.accounts.update_capability(
            "acct_123", "card_payments", {"requested": True}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == (
            "POST",
            "/v1/accounts/acct_123/capabilities/card_payments",
        )
        assert kwargs["data"] == {"requested": "true"}


class TestExternalAccountOperations:

    @pytest.mark.asyncio
    async def test_create_bank_account(
        self, stripe_client, mock_http, make_response, bank_account_json
    ):
        mock_http.request.return_value = make_response(200, bank_account_json)

        result = await stripe_client.accounts.create_external_account(
            "acct_123", {"external_account": "btok_1"}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_123/external_accounts")
        assert kwargs["data"] == {"external_account": "btok_1"}
        assert isinstance(result, BankAccount)

    @pytest.mark.asyncio
    async def test_create_requires_token(self, stripe_client, mock_http):
        with pytest.raises(ValidationError):
            await stripe_client.accounts.create_external_account("acct_123")

    @pytest.mark.asyncio
    async def test_retrieve_card(self, stripe_client, mock_http, make_response, card_json):
        mock_http.request.return_value = make_response(200, card_json)

        result = await stripe_client.accounts.retrieve_external_account(
            "acct_123", "card_123"
        )

        assert _sent(mock_http)[:2] == (
            "GET",
            "/v1/accounts/acct_123/external_accounts/card_123",
        )
        assert isinstance(result, Card)

    @pytest.mark.asyncio
    async def test_update(self, stripe_client, mock_http, make_response, card_json):
        mock_http.request.return_value = make_response(200, card_json)

        await stripe_client.accounts.update_external_account(
            "acct_123", "card_123", {"default_for_currency": True, "exp_year": "2031"}
        )

        method, path, kwargs = _sent(mock_http)
        assert method == "POST"
        assert kwargs["data"] == {"default_for_currency": "true", "exp_year": "2031"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body,expected",
        [
            ({"id": "ba_1", "object": "bank_account", "deleted": True}, DeletedBankAccount),
            ({"id": "card_1", "object": "card", "deleted": True}, DeletedCard),
        ],
    )
    async def test_delete(self, stripe_client, mock_http, make_response, body, expected):
        """Test that deleting returns the tombstone of the matching kind."""
        mock_http.request.return_value = make_response(200, body)

        result = await stripe_client.accounts.delete_external_account("acct_123", body["id"])

        assert _sent(mock_http)[0] == "DELETE"
        assert isinstance(result, expected)

    @pytest.mark.asyncio
    async def test_list(
        self, stripe_client, mock_http, make_response, make_list, bank_account_json, card_json
    ):
        mock_http.request.return_value = make_response(
            200,
            make_list("/v1/accounts/acct_123/external_accounts", bank_account_json, card_json),
        )

        result = await stripe_client.accounts.list_external_accounts("acct_123", {"limit": 2})

        assert isinstance(result, ExternalAccountListResponse)
        assert [type(item) for item in result.data] == [BankAccount, Card]


class TestLoginLinkAndPersonOperations:

    @pytest.mark.asyncio
    async def test_create_login_link(self, stripe_client, mock_http, make_response):
        mock_http.request.return_value = make_response(
            200,
            {"object": "login_link", "created": 1573000000, "url": "https://x.test/l"},
        )

        result = await stripe_client.accounts.create_login_link(
            "acct_123", {"redirect_url": "https://example.com"}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_123/login_links")
        assert kwargs["data"] == {"redirect_url": "https://example.com"}
        assert isinstance(result, LoginLink)

    @pytest.mark.asyncio
    async def test_create_person(self, stripe_client, mock_http, make_response, person_json):
        mock_http.request.return_value = make_response(200, person_json)

        result = await stripe_client.accounts.create_person(
            "acct_123",
            {
                "first_name": "Jenny",
                "dob": {"day": 1, "month": 1, "year": 1990},
                "relationship": {"owner": True, "percent_ownership": 25.5},
            },
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_123/persons")
        assert kwargs["data"] == {
            "first_name": "Jenny",
            "dob[day]": "1",
            "dob[month]": "1",
            "dob[year]": "1990",
            "relationship[owner]": "true",
            "relationship[percent_ownership]": "25.5",
        }
        assert isinstance(result, Person)

    @pytest.mark.asyncio
    async def test_delete_person(self, stripe_client, mock_http, make_response):
        mock_http.request.return_value = make_response(
            200, {"id": "person_1", "object": "person", "deleted": True}
        )

        result = await stripe_client.accounts.delete_person("acct_123", "person_1")

        assert _sent(mock_http)[:2] == ("DELETE", "/v1/accounts/acct_123/persons/person_1")
        assert isinstance(result, DeletedPerson)

    @pytest.mark.asyncio
    async def test_list_persons(
        self, stripe_client, mock_http, make_response, make_list, person_json
    ):
        mock_http.request.return_value = make_response(
            200, make_list("/v1/accounts/acct_123/persons", person_json)
        )

        result = await stripe_client.accounts.list_persons(
            "acct_123", {"relationship": {"owner": True}}
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("GET", "/v1/accounts/acct_123/persons")
        assert kwargs["params"] == {"relationship[owner]": "true"}
        assert isinstance(result, PersonListResponse)

    @pytest.mark.asyncio
    async def test_retrieve_person(self, stripe_client, mock_http, make_response, person_json):
        mock_http.request.return_value = make_response(200, person_json)

        await stripe_client.accounts.retrieve_person("acct_123", "person_123")

        assert _sent(mock_http)[:2] == (
            "GET",
            "/v1/accounts/acct_123/persons/person_123",
        )

    @pytest.mark.asyncio
    async def test_update_person_on_behalf_of(
        self, stripe_client, mock_http, make_response, person_json
    ):
        """Test that request options travel with the call."""
        mock_http.request.return_value = make_response(200, person_json)

        await stripe_client.accounts.update_person(
            "acct_123",
            "person_123",
            {"email": "jenny@example.com"},
            RequestOptions(stripe_account="acct_123"),
        )

        method, path, kwargs = _sent(mock_http)
        assert (method, path) == ("POST", "/v1/accounts/acct_123/persons/person_123")
        assert kwargs["headers"]["Stripe-Account"] == "acct_123"
