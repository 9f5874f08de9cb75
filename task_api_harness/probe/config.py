"""Configuration for the HTTP probe."""

from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = "http://localhost:8080/"


class ProbeConfig(BaseModel):
    """Configuration for the HTTP probe."""

    base_url: str = DEFAULT_BASE_URL
    # Total seconds per request; None waits indefinitely
    timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        """Keep a path prefix such as /api when joining request paths."""
        return value if value.endswith("/") else f"{value}/"
