from __future__ import annotations
from datetime import datetime, timezone
from typing import Annotated, Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Server-assigned identity, opaque to the client
ID = int

# Ecwid renders timestamps as "2014-07-30 10:32:37 +0000"
ECWID_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def _parse_datetime(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.strptime(value, ECWID_DATETIME_FORMAT)
        except ValueError:
            return value  # let pydantic try ISO-8601
    return value


def _format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.strftime(ECWID_DATETIME_FORMAT)


EcwidDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_datetime),
    PlainSerializer(_format_datetime, return_type=str, when_used="json"),
]


class EcwidModel(BaseModel):
    """camelCase on the wire, snake_case in Python, immutable once built."""
    model_config = {
        "frozen": True,  # immuable = safe
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_payload(self) -> dict:
        """JSON body for POST/PUT: wire names, unset (None) fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


T = TypeVar("T")


class SearchPage(EcwidModel, Generic[T]):
    """
    One page of a search. Pagination is complete once offset + count >= total.
    """
    total: int = 0
    count: int = 0
    offset: int = 0
    limit: int = 0
    items: List[T] = Field(default_factory=list)

    @property
    def next_offset(self) -> int:
        return self.offset + self.count

    @property
    def is_last(self) -> bool:
        return self.offset + self.count >= self.total


class ImageDetails(EcwidModel):
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
