import datetime
import uuid

from pydantic import BaseModel, Field


def new_id() -> str:
    return str(uuid.uuid4())


class TaskItem(BaseModel):
    id: str = Field(default_factory=new_id, frozen=True)
    title: str
    is_completed: bool = False
    due_date: datetime.date | None = None
    notes: str | None = None


class TaskListInfo(BaseModel):
    id: str
    name: str
    task_count: int
    completed_count: int


class TaskListDetail(TaskListInfo):
    tasks: list[TaskItem]


class StoreEvent(BaseModel):
    action: str  # e.g. "list_added", "tasks_moved", "task_toggled"
    list_id: str | None = None
    task_ids: list[str] = []


class CreateTaskListRequest(BaseModel):
    name: str


class RenameTaskListRequest(BaseModel):
    name: str


class CreateTaskRequest(BaseModel):
    title: str


class EditTaskRequest(BaseModel):
    title: str
    due_date: datetime.date | None = None
    notes: str | None = None


class PositionsRequest(BaseModel):
    positions: list[int]


class MoveRequest(BaseModel):
    positions: list[int]
    to: int
