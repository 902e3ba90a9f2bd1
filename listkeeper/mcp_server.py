import datetime

from fastmcp import FastMCP

from listkeeper.display import from_display, to_display
from listkeeper.exceptions import InvalidArgumentError, NotFoundError
from listkeeper.models.tasks import TaskItem
from listkeeper.services import tasks as tasks_service

mcp = FastMCP("Listkeeper")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, NotFoundError):
        return {"error": "not_found", "message": str(e), "action": "Call tasks_list_lists or tasks_list_tasks to get current ids"}
    if isinstance(e, InvalidArgumentError):
        return {"error": "invalid_argument", "message": str(e), "action": "Provide a non-blank value"}
    if isinstance(e, ValueError):
        return {"error": "invalid_argument", "message": str(e)}
    return {"error": "unknown_error", "message": str(e)}


def _parse_due_date(due_date: str) -> datetime.date | None:
    value = from_display(due_date.strip(), "")
    return datetime.date.fromisoformat(value) if value is not None else None


def _dump_task(task: TaskItem) -> dict:
    data = task.model_dump(mode="json")
    data["due_date"] = to_display(data["due_date"], "")
    return data


# --- Task list tools ---

@mcp.tool
def tasks_list_lists() -> dict:
    """List all task lists in display order, with their task and completed counts.
    The position of each list in the result is the position used by tasks_delete_lists and tasks_move_lists."""
    lists = tasks_service.list_task_lists()
    return {"lists": [tl.model_dump() for tl in lists], "count": len(lists)}


@mcp.tool
def tasks_create_list(name: str) -> dict:
    """Create a new, empty task list at the end. The name must not be blank."""
    try:
        return tasks_service.create_list(name).model_dump()
    except InvalidArgumentError as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_rename_list(list_id: str, name: str) -> dict:
    """Rename a task list."""
    try:
        return tasks_service.rename_list(list_id, name).model_dump()
    except (NotFoundError, InvalidArgumentError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_delete_lists(positions: list[int]) -> dict:
    """Delete the task lists at the given zero-based positions, all in one step.
    Positions refer to the order before deletion. Positions that do not exist are ignored."""
    tasks_service.delete_lists(positions)
    return {"deleted": True}


@mcp.tool
def tasks_move_lists(positions: list[int], to: int) -> dict:
    """Move the task lists at the given positions so they sit before the list currently at position `to`.
    Use the number of lists as `to` to move them to the end."""
    lists = tasks_service.reorder_lists(positions, to)
    return {"lists": [tl.model_dump() for tl in lists], "count": len(lists)}


# --- Task tools ---

@mcp.tool
def tasks_list_tasks(list_id: str, show_incomplete_only: bool = False) -> dict:
    """List the tasks in a task list in display order.
    Set show_incomplete_only to hide completed tasks.
    A task without a due date has due_date set to an empty string."""
    try:
        tasks = tasks_service.list_tasks(list_id, show_incomplete_only)
        return {"tasks": [_dump_task(t) for t in tasks], "count": len(tasks)}
    except NotFoundError as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_create_task(list_id: str, title: str) -> dict:
    """Add a new, incomplete task to the end of a task list."""
    try:
        return _dump_task(tasks_service.create_task(list_id, title))
    except (NotFoundError, InvalidArgumentError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_delete_tasks(list_id: str, positions: list[int]) -> dict:
    """Delete the tasks at the given zero-based positions of a task list, all in one step.
    Positions that do not exist are ignored."""
    try:
        tasks_service.delete_tasks(list_id, positions)
        return {"deleted": True}
    except NotFoundError as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_move_tasks(list_id: str, positions: list[int], to: int) -> dict:
    """Move the tasks at the given positions so they sit before the task currently at position `to`."""
    try:
        tasks = tasks_service.reorder_tasks(list_id, positions, to)
        return {"tasks": [_dump_task(t) for t in tasks], "count": len(tasks)}
    except NotFoundError as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_toggle_task(list_id: str, task_id: str) -> dict:
    """Mark a task completed, or incomplete again if it was already completed."""
    try:
        return _dump_task(tasks_service.toggle_task(list_id, task_id))
    except NotFoundError as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_edit_task(list_id: str, task_id: str, title: str, due_date: str = "", notes: str | None = None) -> dict:
    """Replace a task's title, due date and notes. Completion is not changed.
    due_date is an ISO date (YYYY-MM-DD); leave it empty to clear the due date.
    Omitting notes clears them too, so pass the existing notes to keep them."""
    try:
        return _dump_task(tasks_service.edit_task(list_id, task_id, title, _parse_due_date(due_date), notes))
    except (NotFoundError, InvalidArgumentError, ValueError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def tasks_toggle_all(list_id: str) -> dict:
    """Complete every task in a list. If every task is already completed, mark them all incomplete instead."""
    try:
        tasks = tasks_service.toggle_all_in_list(list_id)
        return {"tasks": [_dump_task(t) for t in tasks], "count": len(tasks)}
    except NotFoundError as e:
        return _handle_mcp_error(e)


# --- Status tool ---

@mcp.tool
def listkeeper_status() -> dict:
    """Summarize the store: number of lists, tasks and completed tasks."""
    return tasks_service.store_status().model_dump()
