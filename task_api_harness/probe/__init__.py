"""HTTP probe module."""

from task_api_harness.probe.client import HttpProbe
from task_api_harness.probe.config import DEFAULT_BASE_URL, ProbeConfig
from task_api_harness.probe.response import (
    ProbeResponse,
    body,
    is_bad_request,
    is_json,
    is_not_found,
    is_ok,
    is_status,
    parse_as,
    to_json,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "HttpProbe",
    "ProbeConfig",
    "ProbeResponse",
    "body",
    "is_bad_request",
    "is_json",
    "is_not_found",
    "is_ok",
    "is_status",
    "parse_as",
    "to_json",
]
