import datetime

from listkeeper.exceptions import InvalidArgumentError
from listkeeper.models.common import StatusResponse
from listkeeper.models.tasks import TaskItem, TaskListDetail, TaskListInfo
from listkeeper.store import TaskStore, get_store


def _resolve(store: TaskStore | None) -> TaskStore:
    return store if store is not None else get_store()


def _require_text(value: str, field: str) -> str:
    if not value.strip():
        raise InvalidArgumentError(f"{field} must not be blank.")
    return value


# --- Task Lists ---


def list_task_lists(store: TaskStore | None = None) -> list[TaskListInfo]:
    """List all task lists in display order."""
    return [tl.info() for tl in _resolve(store).lists]


def get_task_list(list_id: str, store: TaskStore | None = None) -> TaskListDetail:
    """Get a task list together with all of its tasks."""
    task_list = _resolve(store).get_list(list_id)
    return TaskListDetail(**task_list.info().model_dump(), tasks=task_list.filtered_tasks())


def create_list(name: str, store: TaskStore | None = None) -> TaskListInfo:
    """Create an empty task list at the end of the store."""
    return _resolve(store).append_list(_require_text(name, "name"))


def rename_list(list_id: str, name: str, store: TaskStore | None = None) -> TaskListInfo:
    return _resolve(store).get_list(list_id).rename(_require_text(name, "name"))


def delete_lists(positions: list[int], store: TaskStore | None = None) -> None:
    """Delete the task lists at the given positions. Out-of-range positions are ignored."""
    _resolve(store).remove_lists(positions)


def reorder_lists(positions: list[int], to: int, store: TaskStore | None = None) -> list[TaskListInfo]:
    """Move the task lists at ``positions`` before the list currently at ``to``."""
    store = _resolve(store)
    store.move_lists(positions, to)
    return list_task_lists(store)


# --- Tasks ---


def list_tasks(list_id: str, show_incomplete_only: bool = False, store: TaskStore | None = None) -> list[TaskItem]:
    """List tasks in a task list, optionally only the incomplete ones."""
    return _resolve(store).get_list(list_id).filtered_tasks(show_incomplete_only)


def get_task(list_id: str, task_id: str, store: TaskStore | None = None) -> TaskItem:
    return _resolve(store).get_list(list_id).get_task(task_id)


def create_task(list_id: str, title: str, store: TaskStore | None = None) -> TaskItem:
    """Append a new, incomplete task to a task list."""
    return _resolve(store).get_list(list_id).append_task(_require_text(title, "title"))


def delete_tasks(list_id: str, positions: list[int], store: TaskStore | None = None) -> None:
    """Delete the tasks at the given positions. Out-of-range positions are ignored."""
    _resolve(store).get_list(list_id).remove_tasks(positions)


def reorder_tasks(list_id: str, positions: list[int], to: int, store: TaskStore | None = None) -> list[TaskItem]:
    task_list = _resolve(store).get_list(list_id)
    task_list.move_tasks(positions, to)
    return task_list.filtered_tasks()


def toggle_task(list_id: str, task_id: str, store: TaskStore | None = None) -> TaskItem:
    """Flip the completion flag of a single task."""
    return _resolve(store).get_list(list_id).toggle_task(task_id)


def edit_task(
    list_id: str,
    task_id: str,
    title: str,
    due_date: datetime.date | None = None,
    notes: str | None = None,
    store: TaskStore | None = None,
) -> TaskItem:
    """Replace the title, due date and notes of a task."""
    task_list = _resolve(store).get_list(list_id)
    return task_list.edit_task(task_id, _require_text(title, "title"), due_date, notes)


def toggle_all_in_list(list_id: str, store: TaskStore | None = None) -> list[TaskItem]:
    """Complete every task, or un-complete every task if all were already completed."""
    task_list = _resolve(store).get_list(list_id)
    task_list.toggle_all_completion()
    return task_list.filtered_tasks()


def store_status(store: TaskStore | None = None) -> StatusResponse:
    """Count lists, tasks and completed tasks across the whole store."""
    infos = list_task_lists(store)
    return StatusResponse(
        list_count=len(infos),
        task_count=sum(i.task_count for i in infos),
        completed_count=sum(i.completed_count for i in infos),
    )
