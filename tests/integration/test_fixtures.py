"""Integration tests for the fixture builder."""

from aioresponses import aioresponses as aioresponses_cls
from yarl import URL

from task_api_harness.fixtures import PLACEHOLDER_EMAIL, FixtureBuilder
from task_api_harness.probe.client import HttpProbe

API_BASE_URL = "http://task-api.test"


async def test_create_user_returns_body_as_id(
    probe: HttpProbe, aioresponses: aioresponses_cls
) -> None:
    """Posts the email and returns the raw body."""
    url = f"{API_BASE_URL}/user"
    aioresponses.post(url, status=200, body="user-17")

    user_id = await FixtureBuilder(probe=probe).create_user("mike@rowe.com")

    assert user_id == "user-17"
    call = aioresponses.requests[("POST", URL(url))][0]
    assert call.kwargs["json"] == {"email": "mike@rowe.com"}


async def test_create_user_creates_a_new_user_each_call(
    probe: HttpProbe, aioresponses: aioresponses_cls
) -> None:
    """Nothing is cached between calls."""
    url = f"{API_BASE_URL}/user"
    aioresponses.post(url, status=200, body="1")
    aioresponses.post(url, status=200, body="2")
    fixtures = FixtureBuilder(probe=probe)

    first = await fixtures.create_user("same@nodomain.com")
    second = await fixtures.create_user("same@nodomain.com")

    assert (first, second) == ("1", "2")
    assert len(aioresponses.requests[("POST", URL(url))]) == 2


async def test_create_task_for_given_user(
    probe: HttpProbe, aioresponses: aioresponses_cls
) -> None:
    """Posts the description to the user's tasks."""
    url = f"{API_BASE_URL}/user/user-17/tasks"
    aioresponses.post(url, status=200, body="task-3")

    task_id = await FixtureBuilder(probe=probe).create_task(
        "pick up the kids", "user-17"
    )

    assert task_id == "task-3"
    call = aioresponses.requests[("POST", URL(url))][0]
    assert call.kwargs["json"] == {"description": "pick up the kids"}
    assert ("POST", URL(f"{API_BASE_URL}/user")) not in aioresponses.requests


async def test_create_task_creates_placeholder_user(
    probe: HttpProbe, aioresponses: aioresponses_cls
) -> None:
    """Creates a user first when no user id is given."""
    aioresponses.post(f"{API_BASE_URL}/user", status=200, body="user-99")
    aioresponses.post(f"{API_BASE_URL}/user/user-99/tasks", status=200, body="task-1")

    task_id = await FixtureBuilder(probe=probe).create_task("Drycleaning")

    assert task_id == "task-1"
    user_call = aioresponses.requests[("POST", URL(f"{API_BASE_URL}/user"))][0]
    assert user_call.kwargs["json"] == {"email": PLACEHOLDER_EMAIL}
