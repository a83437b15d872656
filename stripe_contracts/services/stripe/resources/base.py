"""
Base class for the per-family resource accessors.

An accessor groups the operations of one resource family. Each operation
validates its parameters into the family's parameter record, sends a single
request through the owning :class:`StripeClient` and validates the response
body into the declared result type.

Example usage:
    async with StripeClient(api_key="sk_test_...") as client:
        plan = await client.plans.retrieve("gold")
        readers = await client.terminal.readers.list({"limit": 3})
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter

from stripe_contracts.services.stripe.types.common import RequestOptions, StripeParams

if TYPE_CHECKING:
    from stripe_contracts.services.stripe.main import StripeClient


__all__ = ["APIResource", "ParamsInput"]

P = TypeVar("P", bound=StripeParams)

ParamsInput = StripeParams | Mapping[str, Any] | None


class APIResource:
    """Shared plumbing for resource accessors."""

    def __init__(self, client: "StripeClient") -> None:
        self._client = client

    @staticmethod
    def _path(*segments: str) -> str:
        """
        Build an API path, percent-encoding every segment.

        Raises
        ------
            ValueError
                If a segment is empty or blank. A blank id would otherwise
                address the collection endpoint instead of the object.
        """
        for segment in segments:
            if not isinstance(segment, str) or not segment.strip():
                raise ValueError(
                    f"Could not determine which URL to request: invalid ID {segment!r}"
                )
        return "/v1/" + "/".join(quote(segment, safe="") for segment in segments)

    @staticmethod
    def _coerce_params(model: type[P], params: ParamsInput) -> P:
        """
        Validate caller-supplied parameters into ``model``.

        ``None`` is treated as an empty parameter set, so operations with
        required parameters fail with a ``ValidationError`` before any request
        is made. A record of a different parameter type is rejected outright.
        """
        if params is None:
            return model.model_validate({})
        if isinstance(params, model):
            return params
        if isinstance(params, BaseModel):
            raise TypeError(
                f"Expected {model.__name__} or a mapping, got {type(params).__name__}"
            )
        return model.model_validate(params)

    async def _call(
        self,
        method: str,
        path: str,
        params_model: type[StripeParams],
        params: ParamsInput,
        options: RequestOptions | None,
        result: Any,
    ) -> Any:
        payload = self._coerce_params(params_model, params)
        body = await self._client._request(
            method, path, params=payload, options=options
        )
        if isinstance(result, type) and issubclass(result, BaseModel):
            return result.model_validate(body)
        adapter = result if isinstance(result, TypeAdapter) else TypeAdapter(result)
        return adapter.validate_python(body)
