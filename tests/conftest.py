"""
Pytest configuration and core fixtures.

Provides a Stripe client whose HTTP transport is mocked, a factory for real
``httpx.Response`` objects and representative API bodies for each resource
family. No test talks to the network.
"""

import os
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    os.environ["ENVIRONMENT"] = "test"
    os.environ.setdefault("STRIPE_API_KEY", "sk_test_from_env")
    os.environ["LOG_TO_FILE"] = "false"
    os.environ["SENTRY_DSN"] = ""


def _make_response(
    status_code: int = 200,
    json_body: Any = None,
    *,
    method: str = "GET",
    url: str = "https://api.stripe.com/v1/test",
    headers: dict[str, str] | None = None,
    text: str | None = None,
) -> httpx.Response:
    request = httpx.Request(method, url)
    if text is not None:
        return httpx.Response(
            status_code, text=text, headers=headers, request=request
        )
    return httpx.Response(
        status_code, json=json_body, headers=headers, request=request
    )


@pytest.fixture
def make_response():
    """Factory building ``httpx.Response`` objects bound to a request."""
    return _make_response


@pytest.fixture
def stripe_client():
    from stripe_contracts.services.stripe import StripeClient

    return StripeClient(
        api_key="sk_test_123",
        base_url="https://api.stripe.com",
        api_version="2019-11-05",
    )


@pytest.fixture
def mock_http(stripe_client):
    """Replace the client's ``httpx.AsyncClient`` with a mock."""
    with patch.object(stripe_client, "_client") as mock_client:
        mock_client.request = AsyncMock()
        yield mock_client


# ---------------------------------------------------------------------------
# Sample API bodies
# ---------------------------------------------------------------------------


@pytest.fixture
def plan_json() -> dict[str, Any]:
    return {
        "id": "gold",
        "object": "plan",
        "active": True,
        "aggregate_usage": None,
        "amount": 2000,
        "amount_decimal": "2000",
        "billing_scheme": "per_unit",
        "created": 1573000000,
        "currency": "usd",
        "interval": "month",
        "interval_count": 1,
        "livemode": False,
        "metadata": {"tier": "gold"},
        "nickname": "Gold",
        "product": "prod_123",
        "tiers": None,
        "tiers_mode": None,
        "transform_usage": None,
        "trial_period_days": 14,
        "usage_type": "licensed",
    }


@pytest.fixture
def reader_json() -> dict[str, Any]:
    return {
        "id": "tmr_123",
        "object": "terminal.reader",
        "device_sw_version": "2.3.1",
        "device_type": "verifone_P400",
        "ip_address": "192.168.2.2",
        "label": "Front desk",
        "location": "tml_123",
        "serial_number": "123-456-789",
        "status": "online",
    }


@pytest.fixture
def webhook_endpoint_json() -> dict[str, Any]:
    return {
        "id": "we_123",
        "object": "webhook_endpoint",
        "api_version": "2019-11-05",
        "application": None,
        "created": 1573000000,
        "enabled_events": ["charge.failed", "charge.succeeded"],
        "livemode": False,
        "secret": "whsec_abc",
        "status": "enabled",
        "url": "https://example.com/my/webhook/endpoint",
    }


@pytest.fixture
def line_item_json() -> dict[str, Any]:
    return {
        "id": "il_123",
        "object": "line_item",
        "amount": 2000,
        "currency": "usd",
        "description": "Gold plan",
        "discountable": True,
        "livemode": False,
        "metadata": {},
        "period": {"end": 1575600000, "start": 1573000000},
        "plan": None,
        "proration": False,
        "quantity": 1,
        "subscription": "sub_123",
        "subscription_item": "si_123",
        "type": "subscription",
    }


@pytest.fixture
def invoice_json(line_item_json) -> dict[str, Any]:
    return {
        "id": "in_123",
        "object": "invoice",
        "account_country": "US",
        "account_name": "Acme",
        "amount_due": 2000,
        "amount_paid": 0,
        "amount_remaining": 2000,
        "application_fee_amount": None,
        "attempt_count": 0,
        "attempted": False,
        "auto_advance": True,
        "billing_reason": "manual",
        "charge": None,
        "collection_method": "charge_automatically",
        "created": 1573000000,
        "currency": "usd",
        "custom_fields": None,
        "customer": "cus_123",
        "customer_address": None,
        "customer_email": "jenny@example.com",
        "customer_name": None,
        "customer_phone": None,
        "customer_shipping": None,
        "customer_tax_exempt": "none",
        "customer_tax_ids": [{"type": "eu_vat", "value": "DE123456789"}],
        "default_payment_method": None,
        "default_source": None,
        "default_tax_rates": [],
        "description": None,
        "discount": None,
        "due_date": None,
        "ending_balance": None,
        "footer": None,
        "hosted_invoice_url": None,
        "invoice_pdf": None,
        "lines": {
            "object": "list",
            "data": [line_item_json],
            "has_more": False,
            "url": "/v1/invoices/in_123/lines",
        },
        "livemode": False,
        "metadata": {},
        "next_payment_attempt": 1573003600,
        "number": None,
        "paid": False,
        "payment_intent": None,
        "period_end": 1573000000,
        "period_start": 1573000000,
        "post_payment_credit_notes_amount": 0,
        "pre_payment_credit_notes_amount": 0,
        "receipt_number": None,
        "starting_balance": 0,
        "statement_descriptor": None,
        "status": "draft",
        "status_transitions": {
            "finalized_at": None,
            "marked_uncollectible_at": None,
            "paid_at": None,
            "voided_at": None,
        },
        "subscription": None,
        "subscription_proration_date": 0,
        "subtotal": 2000,
        "tax": None,
        "tax_percent": None,
        "threshold_reason": None,
        "total": 2000,
        "total_tax_amounts": [],
        "transfer_data": None,
        "webhooks_delivered_at": None,
    }


@pytest.fixture
def bank_account_json() -> dict[str, Any]:
    return {
        "id": "ba_123",
        "object": "bank_account",
        "account": "acct_123",
        "account_holder_name": "Jane Austen",
        "account_holder_type": "individual",
        "bank_name": "STRIPE TEST BANK",
        "country": "US",
        "currency": "usd",
        "default_for_currency": False,
        "fingerprint": "1JWtPxqbdX5Gamtc",
        "last4": "6789",
        "metadata": {},
        "routing_number": "110000000",
        "status": "new",
    }


@pytest.fixture
def card_json() -> dict[str, Any]:
    return {
        "id": "card_123",
        "object": "card",
        "account": "acct_123",
        "brand": "Visa",
        "country": "US",
        "currency": "usd",
        "cvc_check": "pass",
        "exp_month": 8,
        "exp_year": 2030,
        "fingerprint": "Xt5EWLLDS7FJjR1c",
        "funding": "debit",
        "last4": "4242",
        "metadata": {},
        "name": None,
    }


@pytest.fixture
def person_json() -> dict[str, Any]:
    return {
        "id": "person_123",
        "object": "person",
        "account": "acct_123",
        "created": 1573000000,
        "dob": {"day": 1, "month": 1, "year": 1990},
        "email": "jenny@example.com",
        "first_name": "Jenny",
        "last_name": "Rosen",
        "metadata": {},
        "relationship": {
            "director": False,
            "executive": True,
            "owner": True,
            "percent_ownership": 50.0,
            "representative": True,
            "title": "CEO",
        },
        "requirements": {
            "currently_due": [],
            "eventually_due": [],
            "past_due": [],
            "pending_verification": [],
        },
        "ssn_last_4_provided": True,
        "verification": {
            "additional_document": None,
            "details": None,
            "details_code": None,
            "document": {"back": None, "front": "file_123"},
            "status": "verified",
        },
    }


@pytest.fixture
def account_json(bank_account_json) -> dict[str, Any]:
    return {
        "id": "acct_123",
        "object": "account",
        "business_profile": {
            "mcc": None,
            "name": "Acme",
            "product_description": None,
            "support_address": None,
            "support_email": None,
            "support_phone": None,
            "support_url": None,
            "url": "https://acme.example.com",
        },
        "business_type": "company",
        "capabilities": {"card_payments": "active", "transfers": "pending"},
        "charges_enabled": True,
        "country": "US",
        "created": 1573000000,
        "default_currency": "usd",
        "details_submitted": True,
        "email": "owner@acme.example.com",
        "external_accounts": {
            "object": "list",
            "data": [bank_account_json],
            "has_more": False,
            "url": "/v1/accounts/acct_123/external_accounts",
        },
        "metadata": {},
        "payouts_enabled": True,
        "requirements": {
            "current_deadline": None,
            "currently_due": [],
            "disabled_reason": None,
            "eventually_due": [],
            "past_due": [],
            "pending_verification": [],
        },
        "settings": {
            "branding": {"icon": None, "logo": None, "primary_color": None},
            "card_payments": {
                "decline_on": {"avs_failure": False, "cvc_failure": True},
                "statement_descriptor_prefix": None,
            },
            "dashboard": {"display_name": "Acme", "timezone": "Etc/UTC"},
            "payments": {
                "statement_descriptor": "ACME",
                "statement_descriptor_kana": None,
                "statement_descriptor_kanji": None,
            },
            "payouts": {
                "debit_negative_balances": True,
                "schedule": {"delay_days": 2, "interval": "daily"},
                "statement_descriptor": None,
            },
        },
        "tos_acceptance": {"date": 1573000000, "ip": "8.8.8.8", "user_agent": None},
        "type": "custom",
    }


@pytest.fixture
def transfer_json() -> dict[str, Any]:
    return {
        "id": "tr_123",
        "object": "transfer",
        "amount": 1100,
        "amount_reversed": 0,
        "balance_transaction": "txn_123",
        "created": 1573000000,
        "currency": "usd",
        "description": None,
        "destination": "acct_123",
        "destination_payment": "py_123",
        "livemode": False,
        "metadata": {},
        "reversals": {
            "object": "list",
            "data": [],
            "has_more": False,
            "url": "/v1/transfers/tr_123/reversals",
        },
        "reversed": False,
        "source_transaction": None,
        "source_type": "card",
        "transfer_group": "ORDER_95",
    }


@pytest.fixture
def reversal_json() -> dict[str, Any]:
    return {
        "id": "trr_123",
        "object": "transfer_reversal",
        "amount": 100,
        "balance_transaction": None,
        "created": 1573000000,
        "currency": "usd",
        "destination_payment_refund": None,
        "metadata": {},
        "source_refund": None,
        "transfer": "tr_123",
    }


@pytest.fixture
def balance_json() -> dict[str, Any]:
    return {
        "object": "balance",
        "available": [
            {"amount": 2217, "currency": "usd", "source_types": {"card": 2217}}
        ],
        "connect_reserved": [{"amount": 0, "currency": "usd"}],
        "livemode": False,
        "pending": [
            {"amount": 0, "currency": "usd", "source_types": {"card": 0}}
        ],
    }


@pytest.fixture
def checkout_session_json() -> dict[str, Any]:
    return {
        "id": "cs_test_123",
        "object": "checkout.session",
        "billing_address_collection": None,
        "cancel_url": "https://example.com/cancel",
        "client_reference_id": None,
        "customer": None,
        "customer_email": None,
        "display_items": [
            {
                "amount": 1500,
                "currency": "usd",
                "custom": {
                    "description": "Comfortable cotton t-shirt",
                    "images": None,
                    "name": "T-shirt",
                },
                "quantity": 2,
                "type": "custom",
            }
        ],
        "livemode": False,
        "locale": None,
        "mode": "payment",
        "payment_intent": "pi_123",
        "payment_method_types": ["card"],
        "setup_intent": None,
        "submit_type": None,
        "subscription": None,
        "success_url": "https://example.com/success",
    }


@pytest.fixture
def capability_json() -> dict[str, Any]:
    return {
        "id": "card_payments",
        "object": "capability",
        "account": "acct_123",
        "requested": True,
        "requested_at": 1573000000,
        "requirements": {
            "current_deadline": None,
            "currently_due": [],
            "disabled_reason": None,
            "eventually_due": [],
            "past_due": [],
            "pending_verification": [],
        },
        "status": "active",
    }


def list_body(url: str, *items: dict[str, Any]) -> dict[str, Any]:
    return {"object": "list", "data": list(items), "has_more": False, "url": url}


@pytest.fixture
def make_list():
    """Factory wrapping items in an API list envelope."""
    return list_body
