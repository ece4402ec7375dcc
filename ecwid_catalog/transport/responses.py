# ecwid_catalog/transport/responses.py
from __future__ import annotations
from typing import Any, Type, TypeVar
import logging

import httpx
import pydantic

from ecwid_catalog.core.errors import (
    DecodeError,
    NotFoundError,
    TransportError,
    UpdateCountError,
    ValidationError,
)

"""
Note:
    - Maps raw HTTP responses to (decoded value | typed error).
    - Ecwid error bodies look like {"errorMessage": "...", "errorCode": "..."}.
    - Success bodies: records, {"id": N}, {"updateCount": N}, {"deleteCount": N}.
"""

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=pydantic.BaseModel)

_VALIDATION_STATUSES = {400, 409, 422}


def _preview(text: str, limit: int = 500) -> str:
    """Truncate a body for error messages and logs."""
    return text if len(text) <= limit else text[:limit] + "…[truncated]"


def raise_for_status(response: httpx.Response) -> None:
    """Raise the typed error matching a non-2xx response; no-op on success."""
    if response.is_success:
        return

    message, code = None, None
    try:
        body = response.json()
        if isinstance(body, dict):
            message = body.get("errorMessage")
            code = body.get("errorCode")
    except ValueError:
        pass

    status = response.status_code
    text = _preview(response.text)
    message = message or response.reason_phrase or "request failed"
    logger.debug("api error status=%s code=%s message=%s", status, code, message)

    kwargs = {"status_code": status, "error_code": code, "body": text}
    if status == 404:
        raise NotFoundError(message, **kwargs)
    if status in _VALIDATION_STATUSES:
        raise ValidationError(message, **kwargs)
    raise TransportError(message, **kwargs)


def _json_body(response: httpx.Response) -> Any:
    raise_for_status(response)
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"malformed JSON body: {_preview(response.text, 200)!r}") from e


def _int_field(response: httpx.Response, field: str) -> int:
    body = _json_body(response)
    if not isinstance(body, dict) or field not in body:
        raise DecodeError(f"response has no '{field}' field: {_preview(response.text, 200)!r}")
    try:
        return int(body[field])
    except (TypeError, ValueError) as e:
        raise DecodeError(f"'{field}' is not an integer: {body[field]!r}") from e


def unmarshal(response: httpx.Response, model: Type[T]) -> T:
    """Decode a success body into `model`."""
    body = _json_body(response)
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as e:
        raise DecodeError(f"cannot decode {model.__name__}: {e}") from e


def decode_add(response: httpx.Response) -> int:
    """{"id": N} -> N"""
    return _int_field(response, "id")


def decode_update(response: httpx.Response) -> None:
    """{"updateCount": N}; zero updated rows is an error."""
    count = _int_field(response, "updateCount")
    if count < 1:
        raise UpdateCountError(
            "nothing updated",
            update_count=count,
            status_code=response.status_code,
        )


def decode_delete(response: httpx.Response) -> int:
    """{"deleteCount": N} -> N"""
    return _int_field(response, "deleteCount")


def decode_update_count(response: httpx.Response) -> int:
    """{"updateCount": N} -> N, passed through as-is."""
    return _int_field(response, "updateCount")
