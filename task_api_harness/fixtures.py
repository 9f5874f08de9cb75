"""Fixture creation through the task API itself."""

import logging
from dataclasses import dataclass

from task_api_harness.probe.client import HttpProbe

log = logging.getLogger(__name__)

PLACEHOLDER_EMAIL = "random@email.com"


@dataclass(frozen=True, kw_only=True)
class FixtureBuilder:
    """Creates users and tasks needed as preconditions by test cases.

    Every call creates a new entity on the server, nothing is cached.
    """

    probe: HttpProbe

    async def create_user(self, email: str) -> str:
        """Create a user and return the response body as its id."""
        response = await self.probe.execute("POST", "user", {"email": email})
        log.debug("Created user email=%s id=%s", email, response.text)
        return response.text

    async def create_task(self, description: str, user_id: str | None = None) -> str:
        """Create a task and return the response body as its id.

        A placeholder user is created first when ``user_id`` is not given.
        """
        if user_id is None:
            user_id = await self.create_user(PLACEHOLDER_EMAIL)

        response = await self.probe.execute(
            "POST", f"user/{user_id}/tasks", {"description": description}
        )
        log.debug("Created task user_id=%s id=%s", user_id, response.text)
        return response.text
