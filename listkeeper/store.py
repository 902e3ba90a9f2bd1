import datetime
import logging
import threading
from collections.abc import Callable, Iterable
from functools import lru_cache

from listkeeper.exceptions import NotFoundError
from listkeeper.models.tasks import StoreEvent, TaskItem, TaskListInfo, new_id
from listkeeper.offsets import move_at_offsets, remove_at_offsets

logger = logging.getLogger(__name__)

Observer = Callable[[StoreEvent], None]


class TaskList:
    """An ordered collection of tasks.

    Lists created through a TaskStore share the store's lock and report their
    changes to the store's observers. A standalone list gets its own lock and
    reports nowhere.
    """

    def __init__(
        self,
        name: str,
        tasks: Iterable[TaskItem] = (),
        *,
        lock=None,
        notify: Callable[[StoreEvent], None] | None = None,
    ):
        self._id = new_id()
        self.name = name
        self.tasks: list[TaskItem] = list(tasks)
        self._lock = lock or threading.RLock()
        self._notify = notify or (lambda event: None)

    @property
    def id(self) -> str:
        return self._id

    def _emit(self, action: str, task_ids: list[str] | None = None) -> None:
        self._notify(StoreEvent(action=action, list_id=self.id, task_ids=task_ids or []))

    # --- Queries ---

    def _find(self, task_id: str) -> TaskItem:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(f"Task {task_id} not found in list {self.id}.")

    def get_task(self, task_id: str) -> TaskItem:
        """Return a copy of the task. Changing it does not change the list."""
        with self._lock:
            return self._find(task_id).model_copy()

    def filtered_tasks(self, show_incomplete_only: bool = False) -> list[TaskItem]:
        """Incomplete tasks only when ``show_incomplete_only`` is set, else every task. Order is preserved."""
        with self._lock:
            if show_incomplete_only:
                return [t.model_copy() for t in self.tasks if not t.is_completed]
            return [t.model_copy() for t in self.tasks]

    def info(self) -> TaskListInfo:
        with self._lock:
            return TaskListInfo(
                id=self.id,
                name=self.name,
                task_count=len(self.tasks),
                completed_count=sum(1 for t in self.tasks if t.is_completed),
            )

    # --- Mutations ---

    def rename(self, name: str) -> TaskListInfo:
        with self._lock:
            self.name = name
            self._emit("list_renamed")
            return self.info()

    def add_task(self, title: str) -> str:
        return self.append_task(title).id

    def append_task(self, title: str) -> TaskItem:
        """Append a new task and return a copy of it as stored."""
        with self._lock:
            task = TaskItem(title=title)
            self.tasks.append(task)
            logger.debug("Task added id=%s list=%s", task.id, self.id)
            self._emit("task_added", [task.id])
            return task.model_copy()

    def remove_tasks(self, positions: Iterable[int]) -> None:
        with self._lock:
            before = self.tasks
            self.tasks = remove_at_offsets(before, positions)
            kept = {t.id for t in self.tasks}
            self._emit("tasks_removed", [t.id for t in before if t.id not in kept])

    def move_tasks(self, positions: Iterable[int], to: int) -> None:
        with self._lock:
            self.tasks = move_at_offsets(self.tasks, positions, to)
            self._emit("tasks_moved")

    def toggle_task(self, task_id: str) -> TaskItem:
        with self._lock:
            task = self._find(task_id)
            task.is_completed = not task.is_completed
            self._emit("task_toggled", [task.id])
            return task.model_copy()

    def edit_task(
        self,
        task_id: str,
        title: str,
        due_date: datetime.date | None = None,
        notes: str | None = None,
    ) -> TaskItem:
        """Replace title, due date and notes of a task. Completion is left alone."""
        with self._lock:
            task = self._find(task_id)
            task.title = title
            task.due_date = due_date
            task.notes = notes
            self._emit("task_edited", [task.id])
            return task.model_copy()

    def toggle_all_completion(self) -> None:
        """Mark every task incomplete if all are completed, otherwise mark every task completed."""
        with self._lock:
            all_completed = all(t.is_completed for t in self.tasks)
            for task in self.tasks:
                task.is_completed = not all_completed
            self._emit("tasks_toggled_all", [t.id for t in self.tasks])


class TaskStore:
    """The ordered collection of all task lists held by the process."""

    def __init__(self):
        self.lists: list[TaskList] = []
        self._lock = threading.RLock()
        self._observers: list[Observer] = []

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Call ``callback`` with a StoreEvent after every mutation. Returns an unsubscribe function."""
        with self._lock:
            self._observers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for callback in list(self._observers):
            callback(event)

    def get_list(self, list_id: str) -> TaskList:
        with self._lock:
            for task_list in self.lists:
                if task_list.id == list_id:
                    return task_list
        raise NotFoundError(f"Task list {list_id} not found.")

    def add_list(self, name: str) -> str:
        return self.append_list(name).id

    def append_list(self, name: str) -> TaskListInfo:
        """Append a new, empty list and return its summary."""
        with self._lock:
            task_list = TaskList(name, lock=self._lock, notify=self._notify)
            self.lists.append(task_list)
            logger.debug("Task list added id=%s", task_list.id)
            self._notify(StoreEvent(action="list_added", list_id=task_list.id))
            return task_list.info()

    def remove_lists(self, positions: Iterable[int]) -> None:
        with self._lock:
            before = self.lists
            self.lists = remove_at_offsets(before, positions)
            for task_list in before:
                if task_list not in self.lists:
                    self._notify(StoreEvent(action="list_removed", list_id=task_list.id))

    def move_lists(self, positions: Iterable[int], to: int) -> None:
        with self._lock:
            self.lists = move_at_offsets(self.lists, positions, to)
            self._notify(StoreEvent(action="lists_moved"))


@lru_cache
def get_store() -> TaskStore:
    logger.info("Creating task store")
    return TaskStore()
