import datetime

import pytest
from fastapi.testclient import TestClient

from listkeeper.models.tasks import TaskItem, TaskListInfo
from listkeeper.store import TaskStore, get_store


# --- Canned models ---

SAMPLE_LIST = TaskListInfo(id="list123", name="Groceries", task_count=2, completed_count=1)

SAMPLE_TASK = TaskItem(
    id="task123",
    title="Buy milk",
    is_completed=False,
    due_date=datetime.date(2025, 1, 2),
    notes="Semi-skimmed",
)

DONE_TASK = TaskItem(id="task456", title="Buy bread", is_completed=True)


@pytest.fixture(autouse=True)
def fresh_process_store():
    """Every test starts with an empty process-wide store."""
    get_store.cache_clear()
    yield
    get_store.cache_clear()


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def titled_list(store):
    """A list holding tasks A, B, C in that order."""
    list_id = store.add_list("Letters")
    task_list = store.get_list(list_id)
    for title in ("A", "B", "C"):
        task_list.add_task(title)
    return task_list


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from listkeeper.main import api
    return TestClient(api)
