"""End-to-end test cases for the task API.

Cases run in the order listed in ``build_suite`` and share server state:
users and tasks created by one case remain for the rest of the run.
"""

from task_api_harness.assertions import assert_true
from task_api_harness.models.api import Task, User
from task_api_harness.probe import (
    body,
    is_bad_request,
    is_json,
    is_not_found,
    is_ok,
    parse_as,
)
from task_api_harness.suite import CaseBody, CaseContext, Suite


async def get_missing_user_returns_not_found(ctx: CaseContext) -> None:
    response = await ctx.probe.execute("GET", "user/123")

    assert_true(
        is_not_found(response),
        f"HTTP status should be 404 but was {response.status_code}",
    )


async def post_user_creates_user(ctx: CaseContext) -> None:
    response = await ctx.probe.execute("POST", "user", {"email": "john@nodomain.com"})

    assert_true(
        is_ok(response),
        f"Expected POST to succeed with 200, got {response.status_code}",
    )
    assert_true(
        body(response),
        f"Request body should contain an ID, did not find it in {body(response)}",
    )


async def get_user_returns_created_user(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("john@nodomain.com")

    response = await ctx.probe.execute("GET", f"user/{user_id}")

    assert_true(is_ok(response), "User created should have been found")
    assert_true(is_json(response), "Response should be a JSON response")
    user = parse_as(response, User)
    assert_true(
        user.email == "john@nodomain.com",
        "The returned user needs to match the original user created",
    )
    assert_true(
        user.active, f"User needs to be created as active but got {body(response)}"
    )


async def delete_user_deactivates_user(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("someuser@nodomain.com")

    response = await ctx.probe.execute("DELETE", f"user/{user_id}")

    assert_true(is_ok(response), "DELETE should succeed with a 200")
    response = await ctx.probe.execute("GET", f"user/{user_id}")
    assert_true(is_ok(response), "User should have been found even if deactivated")
    user = parse_as(response, User)
    assert_true(not user.active, "User should no longer be active")


async def post_task_creates_task_for_user(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("mike@rowe.com")

    response = await ctx.probe.execute(
        "POST", f"user/{user_id}/tasks", {"description": "Drycleaning"}
    )

    assert_true(is_ok(response), "Creating a task should have returned OK")
    assert_true(
        len(body(response)) >= 1, "The response should have a length greater than 1"
    )
    tasks_response = await ctx.probe.execute("GET", f"user/{user_id}/tasks")
    tasks = parse_as(tasks_response, list[Task])
    assert_true(
        len(tasks) == 1, f"User should have 1 task but has {body(tasks_response)}"
    )
    assert_true(
        tasks[0].active,
        f"Tasks should be created as active but was not {body(tasks_response)}",
    )


async def put_task_updates_task(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("mike@nodomain.com")
    task_id = await ctx.fixtures.create_task("pick up the kids", user_id)

    response = await ctx.probe.execute(
        "PUT", f"tasks/{task_id}", {"description": "pick up the cats"}
    )

    assert_true(is_ok(response), "Updating a task should have returned OK")
    tasks_response = await ctx.probe.execute("GET", f"user/{user_id}/tasks")
    tasks = parse_as(tasks_response, list[Task])
    assert_true(len(tasks) > 0, "Tasks should not be empty for user after updating")
    assert_true(
        tasks[0].description == "pick up the cats",
        f"Task should have been updated but was not {body(tasks_response)}",
    )


async def delete_task_soft_deletes_task(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("mike@nodomain.com")
    task_id = await ctx.fixtures.create_task("pick up the kids", user_id)

    response = await ctx.probe.execute("DELETE", f"tasks/{task_id}")

    assert_true(is_ok(response), "Deleting a task should have returned OK")
    tasks_response = await ctx.probe.execute("GET", f"user/{user_id}/tasks")
    tasks = parse_as(tasks_response, list[Task])
    assert_true(len(tasks) > 0, "Tasks should still be listed after deleting")
    assert_true(
        not tasks[0].active, "Task should have been set to inactive, not deleted"
    )


async def malformed_request_returns_bad_request(ctx: CaseContext) -> None:
    response = await ctx.probe.execute(
        "POST", "user", {"notExistentField": "bad value"}
    )

    assert_true(
        is_bad_request(response),
        "Malformed POST /user should produce a bad request (400) but produced "
        f"{response.status_code}",
    )


async def inactive_user_task_cannot_be_deleted(ctx: CaseContext) -> None:
    user_id = await ctx.fixtures.create_user("someuser@nodomain.com")
    task_id = await ctx.fixtures.create_task("pick up the kids", user_id)

    await ctx.probe.execute("DELETE", f"user/{user_id}")

    response = await ctx.probe.execute("DELETE", f"tasks/{task_id}")
    assert_true(
        is_bad_request(response),
        "Should not be able to delete a task for an inactive user",
    )


SCENARIOS: tuple[tuple[str, CaseBody], ...] = (
    (
        "GET /user when user does not exist returns 404",
        get_missing_user_returns_not_found,
    ),
    ("POST /user creates a new user", post_user_creates_user),
    (
        "GET /user/{userId} returns user after creating one",
        get_user_returns_created_user,
    ),
    ("DELETE /user/{userId} deactivates a user", delete_user_deactivates_user),
    (
        "POST /user/{userId}/tasks creates a task for a user",
        post_task_creates_task_for_user,
    ),
    ("PUT /tasks/{taskId} updates an existing task", put_task_updates_task),
    (
        "DELETE /tasks/{taskId} performs a soft-delete of the task",
        delete_task_soft_deletes_task,
    ),
    (
        "Endpoints return a Bad Request (400) status code for malformed requests",
        malformed_request_returns_bad_request,
    ),
    (
        "Tasks for inactive users should not be able to be deleted",
        inactive_user_task_cannot_be_deleted,
    ),
)


def build_suite() -> Suite:
    """Register every task API case in execution order."""
    suite = Suite()
    for name, case_body in SCENARIOS:
        suite.add(name, case_body)
    return suite
