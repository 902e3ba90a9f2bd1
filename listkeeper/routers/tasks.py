from fastapi import APIRouter

from listkeeper.models.tasks import (
    CreateTaskListRequest,
    CreateTaskRequest,
    EditTaskRequest,
    MoveRequest,
    PositionsRequest,
    RenameTaskListRequest,
    TaskItem,
    TaskListDetail,
    TaskListInfo,
)
from listkeeper.services import tasks as tasks_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


# --- Task Lists ---


@router.get("/lists")
def list_task_lists() -> list[TaskListInfo]:
    return tasks_service.list_task_lists()


@router.post("/lists")
def create_list(request: CreateTaskListRequest) -> TaskListInfo:
    return tasks_service.create_list(request.name)


@router.post("/lists/delete", status_code=204)
def delete_lists(request: PositionsRequest):
    tasks_service.delete_lists(request.positions)


@router.post("/lists/move")
def reorder_lists(request: MoveRequest) -> list[TaskListInfo]:
    return tasks_service.reorder_lists(request.positions, request.to)


@router.get("/lists/{list_id}")
def get_task_list(list_id: str) -> TaskListDetail:
    return tasks_service.get_task_list(list_id)


@router.patch("/lists/{list_id}")
def rename_list(list_id: str, request: RenameTaskListRequest) -> TaskListInfo:
    return tasks_service.rename_list(list_id, request.name)


# --- Tasks ---


@router.get("/lists/{list_id}/tasks")
def list_tasks(list_id: str, show_incomplete_only: bool = False) -> list[TaskItem]:
    return tasks_service.list_tasks(list_id, show_incomplete_only)


@router.post("/lists/{list_id}/tasks")
def create_task(list_id: str, request: CreateTaskRequest) -> TaskItem:
    return tasks_service.create_task(list_id, request.title)


@router.post("/lists/{list_id}/tasks/delete", status_code=204)
def delete_tasks(list_id: str, request: PositionsRequest):
    tasks_service.delete_tasks(list_id, request.positions)


@router.post("/lists/{list_id}/tasks/move")
def reorder_tasks(list_id: str, request: MoveRequest) -> list[TaskItem]:
    return tasks_service.reorder_tasks(list_id, request.positions, request.to)


@router.post("/lists/{list_id}/tasks/toggle-all")
def toggle_all_in_list(list_id: str) -> list[TaskItem]:
    return tasks_service.toggle_all_in_list(list_id)


@router.get("/lists/{list_id}/tasks/{task_id}")
def get_task(list_id: str, task_id: str) -> TaskItem:
    return tasks_service.get_task(list_id, task_id)


@router.put("/lists/{list_id}/tasks/{task_id}")
def edit_task(list_id: str, task_id: str, request: EditTaskRequest) -> TaskItem:
    return tasks_service.edit_task(list_id, task_id, request.title, request.due_date, request.notes)


@router.post("/lists/{list_id}/tasks/{task_id}/toggle")
def toggle_task(list_id: str, task_id: str) -> TaskItem:
    return tasks_service.toggle_task(list_id, task_id)
