"""
Building blocks shared by every Stripe resource family.

Response records are plain ``BaseModel`` subclasses that ignore keys they do not
declare. Parameter records derive from :class:`StripeParams`, which forbids
unknown keys so a misspelt or unsupported parameter fails before any request is
made.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def coerce_timestamp_to_datetime(ts: Any) -> Any:
    """Converts a Unix timestamp (in seconds) to a UTC datetime object."""
    if isinstance(ts, bool):
        return ts
    if isinstance(ts, (int, float)):
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    return ts


Timestamp = Annotated[datetime, BeforeValidator(coerce_timestamp_to_datetime)]

Metadata = dict[str, str]

# The API clears a field when it receives an empty string for it.
Empty = Literal[""]


class ExpandedObject(BaseModel):
    """An expanded API object from outside the modeled resource families."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    object: str


class ListResponse(BaseModel):
    object: Literal["list"] = "list"
    has_more: bool
    url: str


class DeletedObject(BaseModel):
    """Tombstone returned once a resource has been deleted."""

    id: Annotated[str, Field(description="Unique identifier for the object.")]
    deleted: Annotated[
        Literal[True], Field(description="Always true for a deleted object.")
    ] = True


class Address(BaseModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class JapanAddress(Address):
    town: str | None = None


class VerificationDocument(BaseModel):
    back: str | ExpandedObject | None = None
    details: str | None = None
    details_code: str | None = None
    front: str | ExpandedObject | None = None


class StripeParams(BaseModel):
    """Base for request parameter records."""

    model_config = ConfigDict(extra="forbid")


class ExpandableParams(StripeParams):
    expand: Annotated[
        list[str] | None,
        Field(description="Specifies which fields in the response should be expanded."),
    ] = None


class ListParams(ExpandableParams):
    ending_before: Annotated[
        str | None,
        Field(
            description="A cursor for pagination. Return objects listed before this ID."
        ),
    ] = None
    limit: Annotated[
        int | None,
        Field(
            ge=1,
            le=100,
            description="A limit on the number of objects to be returned, between 1 and 100.",
        ),
    ] = None
    starting_after: Annotated[
        str | None,
        Field(
            description="A cursor for pagination. Return objects listed after this ID."
        ),
    ] = None


class RangeQuery(StripeParams):
    gt: int | None = None
    gte: int | None = None
    lt: int | None = None
    lte: int | None = None


class AddressParams(StripeParams):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class JapanAddressParams(AddressParams):
    town: str | None = None


class DocumentParams(StripeParams):
    back: str | None = None
    front: str | None = None


class RequestOptions(BaseModel):
    """Per-request overrides sent as headers alongside a single API call."""

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = None
    stripe_account: Annotated[
        str | None,
        Field(description="Perform the request on behalf of this connected account."),
    ] = None
    stripe_version: str | None = None
    timeout: float | None = None

    def to_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.stripe_account:
            headers["Stripe-Account"] = self.stripe_account
        if self.stripe_version:
            headers["Stripe-Version"] = self.stripe_version
        return headers


__all__ = [
    "coerce_timestamp_to_datetime",
    "Timestamp",
    "Metadata",
    "Empty",
    "ExpandedObject",
    "ListResponse",
    "DeletedObject",
    "Address",
    "JapanAddress",
    "VerificationDocument",
    "StripeParams",
    "ExpandableParams",
    "ListParams",
    "RangeQuery",
    "AddressParams",
    "JapanAddressParams",
    "DocumentParams",
    "RequestOptions",
]
