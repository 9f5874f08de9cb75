"""Pydantic models for task API response payloads."""

from pydantic import Field

from task_api_harness.models.base import Model


class User(Model):
    """A user as returned by GET /user/{id}."""

    email: str = Field(..., description="Email the user was created with")
    active: bool = Field(..., description="False once the user is deactivated")


class Task(Model):
    """A task as listed by GET /user/{id}/tasks."""

    description: str = Field(..., description="Free-text task description")
    active: bool = Field(..., description="False once the task is soft-deleted")
