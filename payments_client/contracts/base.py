"""
Shared contract building blocks.

- Params / ListParams: request parameter models, form-encoded by payments_client.form
- ExpandableResource: base for any resource the API may return either as a
  bare ID string or as the fully expanded object
- ListObject: the `list` envelope returned by every list endpoint
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from payments_client.errors import DecodeError


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------

class Params(BaseModel):
    """
    Parameters accepted by every request.

    `idempotency_key` and `stripe_account` travel as headers and are never
    form-encoded.
    """

    model_config = ConfigDict(extra="forbid")

    expand: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    idempotency_key: Optional[str] = Field(default=None, exclude=True)
    stripe_account: Optional[str] = Field(default=None, exclude=True)

    def add_expand(self, field_path: str) -> None:
        self.expand = [*(self.expand or []), field_path]


class RangeQueryParams(BaseModel):
    """Timestamp range filter, e.g. created[gte]=..."""

    gt: Optional[int] = None
    gte: Optional[int] = None
    lt: Optional[int] = None
    lte: Optional[int] = None


class ListParams(Params):
    """
    Pagination parameters.

    `single` stops the iterator after the first page instead of following
    `has_more`.
    """

    limit: Optional[int] = Field(default=None, ge=1, le=100)
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None
    single: bool = Field(default=False, exclude=True)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class APIResource(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = ""
    object: Optional[str] = None


class ExpandableResource(APIResource):
    """
    A resource that may arrive collapsed to its ID.

    A bare JSON string becomes an instance with only `id` set; every other
    field keeps its default. A JSON object is validated as the full resource.
    """

    @model_validator(mode="before")
    @classmethod
    def _collapse_bare_id(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"id": data}
        return data

    @property
    def is_expanded(self) -> bool:
        """True when the API sent more than the bare ID."""
        return bool(self.model_fields_set - {"id"})


class ListMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    has_more: bool = False
    total_count: Optional[int] = None
    url: str = ""


ResourceT = TypeVar("ResourceT", bound=BaseModel)


class ListObject(ListMeta, Generic[ResourceT]):
    object: str = "list"
    data: List[ResourceT] = Field(default_factory=list)

    @property
    def meta(self) -> ListMeta:
        return ListMeta(has_more=self.has_more, total_count=self.total_count, url=self.url)


ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_resource(model_type: Type[ModelT], raw: Union[str, bytes, bytearray]) -> ModelT:
    """
    Decode one JSON document into `model_type`.

    Malformed JSON and shape mismatches both surface as DecodeError, with the
    pydantic error chained as the cause.
    """
    try:
        return model_type.model_validate_json(raw)
    except ValidationError as exc:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else raw
        raise DecodeError(
            f"Could not decode {model_type.__name__}: {exc.error_count()} validation error(s)",
            payload={"body": text[:2000]},
        ) from exc
