"""Normalized HTTP response view and pure helpers over it."""

import json
from dataclasses import dataclass
from typing import Any, NoReturn, TypeVar

from pydantic import TypeAdapter, ValidationError

from task_api_harness.errors import DecodeFailure


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def _loads(raw_body: bytes) -> Any:
    """Parse strict JSON, rejecting NaN and Infinity."""
    return json.loads(raw_body, parse_constant=_reject_constant)


@dataclass(frozen=True, kw_only=True)
class ProbeResponse:
    """Status code and raw body of one completed request."""

    status_code: int
    raw_body: bytes = b""

    @property
    def text(self) -> str:
        return self.raw_body.decode("utf-8", errors="replace")


def is_status(response: ProbeResponse, status: int) -> bool:
    """Check for an exact status code."""
    return response.status_code == status


def is_ok(response: ProbeResponse) -> bool:
    return is_status(response, 200)


def is_bad_request(response: ProbeResponse) -> bool:
    return is_status(response, 400)


def is_not_found(response: ProbeResponse) -> bool:
    return is_status(response, 404)


def body(response: ProbeResponse) -> str:
    """Body text, for use in assertion messages."""
    return response.text


def is_json(response: ProbeResponse) -> bool:
    """Check whether the body is well-formed JSON. Never raises."""
    try:
        _loads(response.raw_body)
    except ValueError:
        return False
    return True


def to_json(response: ProbeResponse) -> Any:
    """Decode the body as JSON.

    Raises:
        DecodeFailure: If the body is not well-formed JSON

    """
    try:
        return _loads(response.raw_body)
    except ValueError as exc:
        raise DecodeFailure(
            f"Response body is not valid JSON ({exc}): {response.text!r}"
        ) from exc


T = TypeVar("T")


def parse_as(response: ProbeResponse, type_: type[T]) -> T:
    """Decode the body as JSON and validate it against ``type_``.

    Args:
        response: Response to decode
        type_: Any type pydantic can validate, e.g. ``User`` or ``list[Task]``

    Raises:
        DecodeFailure: If the body is not JSON or does not match ``type_``

    """
    data = to_json(response)
    try:
        return TypeAdapter(type_).validate_python(data)
    except ValidationError as exc:
        raise DecodeFailure(
            f"Response body does not match {getattr(type_, '__name__', type_)}: "
            f"{response.text!r}"
        ) from exc
