from typing import Any

import httpx

from stripe_contracts.core.config import settings, stripe_logger
from stripe_contracts.core.exceptions.types import (
    IdempotencyException,
    RateLimitException,
    StripeAPIException,
    StripeAuthenticationException,
    StripeCardException,
    StripeConnectionException,
    StripeNotFoundException,
)
from stripe_contracts.services.stripe.resources import (
    AccountsResource,
    BalanceResource,
    CheckoutSessionsResource,
    InvoicesResource,
    PlansResource,
    ReadersResource,
    TransfersResource,
    WebhookEndpointsResource,
)
from stripe_contracts.services.stripe.types.common import RequestOptions, StripeParams


class _CheckoutNamespace:
    def __init__(self, client: "StripeClient") -> None:
        self.sessions = CheckoutSessionsResource(client)


class _TerminalNamespace:
    def __init__(self, client: "StripeClient") -> None:
        self.readers = ReadersResource(client)


class StripeClient:
    """
    Asynchronous client for the Stripe API.

    Each accessor attribute groups the operations of one resource family:
    ``accounts``, ``balance``, ``checkout.sessions``, ``invoices``, ``plans``,
    ``terminal.readers``, ``transfers`` and ``webhook_endpoints``. Every call
    issues exactly one HTTP request.

    Example:
        async with StripeClient() as client:
            balance = await client.balance.retrieve()
            endpoint = await client.webhook_endpoints.create(
                {"url": "https://example.com/hooks", "enabled_events": ["*"]}
            )
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_key: str = api_key if api_key is not None else settings.STRIPE_API_KEY
        self._base_url: str = base_url or settings.STRIPE_API_BASE_URL
        self._api_version: str = api_version or settings.STRIPE_API_VERSION
        self._timeout: float = (
            timeout if timeout is not None else settings.STRIPE_TIMEOUT_SECONDS
        )
        self._client: httpx.AsyncClient | None = None

        self.accounts = AccountsResource(self)
        self.balance = BalanceResource(self)
        self.checkout = _CheckoutNamespace(self)
        self.invoices = InvoicesResource(self)
        self.plans = PlansResource(self)
        self.terminal = _TerminalNamespace(self)
        self.transfers = TransfersResource(self)
        self.webhook_endpoints = WebhookEndpointsResource(self)

    async def __aenter__(self) -> "StripeClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @staticmethod
    def _format_value(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _flatten_to_payload(
        payload: dict[str, str],
        prefix: str,
        data: dict[str, Any],
        *,
        max_depth: int = 5,
        _current_depth: int = 0,
    ) -> None:
        """
        Flatten a nested dict into Stripe's form-encoded format.

        Recursively converts nested dictionaries and lists into the bracket
        notation keys the API expects. An empty ``prefix`` writes the top-level
        keys unbracketed.

        Example:
            data = {"metadata": {"user_id": "123"}, "expand": ["customer"]}
            prefix = ""
            Result: payload["metadata[user_id]"] = "123"
                    payload["expand[0]"] = "customer"

        Parameters
        ----------
        payload : dict[str, str]
            The payload dict to add flattened keys to.
        prefix : str
            The base key prefix (e.g., "subscription_data", "metadata").
        data : dict[str, Any]
            The dict to flatten.
        max_depth : int, optional
            Maximum nesting depth to prevent infinite recursion. Defaults to 5,
            enough for the deepest account parameters.
        _current_depth : int
            Internal counter for recursion depth. Do not set manually.
        """
        fmt = StripeClient._format_value
        if _current_depth >= max_depth:
            # Safety limit reached, convert remaining value to string
            for key, value in data.items():
                payload[f"{prefix}[{key}]" if prefix else key] = fmt(value)
            return

        for key, value in data.items():
            full_key = f"{prefix}[{key}]" if prefix else key
            if isinstance(value, dict):
                StripeClient._flatten_to_payload(
                    payload,
                    full_key,
                    value,
                    max_depth=max_depth,
                    _current_depth=_current_depth + 1,
                )
            elif isinstance(value, list):
                # Handle lists (e.g., expand, line_items, tiers)
                for idx, item in enumerate(value):
                    if isinstance(item, dict):
                        StripeClient._flatten_to_payload(
                            payload,
                            f"{full_key}[{idx}]",
                            item,
                            max_depth=max_depth,
                            _current_depth=_current_depth + 1,
                        )
                    else:
                        payload[f"{full_key}[{idx}]"] = fmt(item)
            else:
                payload[full_key] = fmt(value)

    @classmethod
    def _encode_params(cls, params: StripeParams | None) -> dict[str, str]:
        """Serialise a parameter record into flat form fields, dropping unset values."""
        payload: dict[str, str] = {}
        if params is None:
            return payload
        cls._flatten_to_payload(
            payload, "", params.model_dump(mode="json", exclude_none=True)
        )
        return payload

    def _check_api_key(self, options: RequestOptions | None = None) -> None:
        """Validate that a Stripe API key is available for the request.

        Raises
        ------
            ValueError
                If neither the client nor the request options carry a non-blank
                API key. The client key is read from the STRIPE_API_KEY
                environment variable or a .env file unless passed explicitly.
        """
        api_key = (options.api_key if options else None) or self._api_key
        if not api_key.strip():
            raise ValueError(
                "Stripe API key is not set. Please set STRIPE_API_KEY in the environment variables or .env file."
            )

    def _init_client(self, options: RequestOptions | None = None) -> None:
        """Lazily create the underlying ``httpx.AsyncClient``.

        Calling it again once the client exists is a no-op. The caller is
        responsible for closing the client through :meth:`aclose`.
        """
        self._check_api_key(options)
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers={"Stripe-Version": self._api_version},
            )
            stripe_logger.info("Stripe HTTP client initialized")

    def _build_headers(self, options: RequestOptions | None = None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Stripe-Version": self._api_version,
        }
        if options is not None:
            headers.update(options.to_headers())
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: StripeParams | None = None,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """
        Make a single asynchronous HTTP request to the Stripe API.

        Query-string parameters are used for GET and DELETE, a form-encoded
        body for every other method. Nothing is retried: the first failure is
        mapped to an exception and raised.

        Parameters
        ----------
            method : str
                The HTTP method to use (e.g., 'GET', 'POST', 'DELETE').
            endpoint : str
                The API path, e.g. "/v1/plans/gold".
            params : StripeParams | None, optional
                The validated parameter record for the operation.
            options : RequestOptions | None, optional
                Per-request overrides for the API key, connected account,
                API version and timeout.

        Returns
        -------
            dict[str, Any]
                The decoded JSON object.

        Raises
        ------
            RateLimitException
                On 429 responses.
            IdempotencyException
                On 409 responses or ``idempotency_error`` errors.
            StripeCardException
                For ``card_error`` errors (declined cards, etc.)
            StripeAuthenticationException
                On 401 responses.
            StripeNotFoundException
                On 404 responses.
            StripeAPIException
                For every other error response, and for success responses whose
                body is not a JSON object.
            StripeConnectionException
                When the request times out or cannot reach Stripe.
        """
        if self._client is None:
            self._init_client(options)
        else:
            self._check_api_key(options)

        # Assert client is initialized (for type checker)
        assert self._client is not None, "HTTP client should be initialized"

        encoded = self._encode_params(params)
        is_query = method.upper() in ("GET", "DELETE")
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        if options is not None and options.timeout is not None:
            timeout = options.timeout

        try:
            resp: httpx.Response = await self._client.request(
                method,
                endpoint,
                params=encoded if is_query and encoded else None,
                data=None if is_query else encoded,
                headers=self._build_headers(options),
                timeout=timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._raise_for_error(exc)
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            stripe_logger.error(
                f"Network error on Stripe {method} {endpoint}: "
                f"{exc.__class__.__name__}: {exc}"
            )
            raise StripeConnectionException(
                details={"error": str(exc), "type": "network_error"},
            ) from exc

        request_id = resp.headers.get("Request-Id")
        try:
            body = resp.json()
        except ValueError:
            body = resp.text

        if not isinstance(body, dict):
            stripe_logger.error(
                f"Stripe {method} {endpoint} returned a non-object body "
                f"(Request-Id: {request_id or 'N/A'})"
            )
            raise StripeAPIException(
                message="Unexpected response body from Stripe.",
                status_code=resp.status_code,
                request_id=request_id,
                details={"body": body},
            )

        stripe_logger.info(
            f"Stripe {method} {endpoint} succeeded (Request-Id: {request_id or 'N/A'})"
        )
        return body

    @staticmethod
    def _raise_for_error(exc: httpx.HTTPStatusError) -> None:
        """Map an error response to the matching application exception."""
        status = exc.response.status_code
        request_id = exc.response.headers.get("Request-Id")

        # Safely extract error body
        try:
            err_body = exc.response.json()
        except ValueError:
            err_body = {"error": {"message": exc.response.text}}
        if not isinstance(err_body, dict):
            err_body = {"error": {"message": str(err_body)}}

        # Extract Stripe error details
        error_data = err_body.get("error") or {}
        error_type = error_data.get("type")
        error_code = error_data.get("code")
        error_message = error_data.get("message") or f"Stripe API error {status}"
        error_param = error_data.get("param")
        decline_code = error_data.get("decline_code")

        # Log with Request-Id for Stripe support debugging
        stripe_logger.error(
            f"Stripe error: {status} {error_type or 'unknown'} | "
            f"Code: {error_code or 'N/A'} | Request-Id: {request_id or 'N/A'} | "
            f"Message: {error_message}"
        )

        if status == 429:
            raise RateLimitException(
                message=error_message,
                details={
                    "code": error_code,
                    "type": error_type or "rate_limit_error",
                    "request_id": request_id,
                    **err_body,
                },
            ) from exc

        if status == 409 or error_type == "idempotency_error":
            raise IdempotencyException(
                message=error_message,
                request_id=request_id,
                details={
                    "code": error_code,
                    "type": error_type,
                    "param": error_param,
                    **err_body,
                },
            ) from exc

        if error_type == "card_error":
            raise StripeCardException(
                message=error_message,
                stripe_code=error_code,
                decline_code=decline_code,
                param=error_param,
                request_id=request_id,
                details=err_body,
            ) from exc

        if status == 401:
            raise StripeAuthenticationException(
                message=error_message,
                stripe_code=error_code,
                request_id=request_id,
                details=err_body,
            ) from exc

        if status == 404:
            raise StripeNotFoundException(
                message=error_message,
                stripe_code=error_code,
                param=error_param,
                request_id=request_id,
                details=err_body,
            ) from exc

        raise StripeAPIException(
            message=error_message,
            status_code=status,
            stripe_code=error_code,
            error_type=error_type or "api_error",
            param=error_param,
            request_id=request_id,
            details=err_body,
        ) from exc

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it was created."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            stripe_logger.info("Stripe HTTP client closed")


__all__ = ["StripeClient"]
