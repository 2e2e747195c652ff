from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, StringConstraints, ValidationError

from orchestra_cms.errors import ContentValidationError

# Persisted children come back with their integer id, unsaved ones with a client token
ChildId = Optional[Union[StrictInt, StrictStr]]

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ContentDocument(BaseModel):
    """Base for every editable page document."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    version: Optional[StrictInt] = Field(
        default=None,
        description="Version the editor started from; checked against the stored row.",
    )


class ChildItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: ChildId = None


DocumentT = TypeVar("DocumentT", bound=ContentDocument)


def assert_unique_ids(items: List[ChildItem], label: str) -> None:
    seen = set()
    for item in items:
        if item.id is None:
            continue
        key = (type(item.id), item.id)
        if key in seen:
            raise ValueError(f"Duplicate id {item.id!r} in {label}")
        seen.add(key)


def validate_optional_url(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Invalid URL format")
    return value


def format_errors(error: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": ".".join(str(part) for part in err.get("loc", ())),
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in error.errors()
    ]


def parse_document(schema: Type[DocumentT], payload: Any) -> DocumentT:
    """Validate a raw JSON payload; raise ContentValidationError with field detail."""
    if not isinstance(payload, dict):
        raise ContentValidationError(
            "Invalid data format",
            details=[{"loc": "", "msg": "Request body must be a JSON object", "type": "dict_type"}],
        )

    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ContentValidationError("Invalid data format", details=format_errors(exc)) from exc
