import pytest

from listkeeper.exceptions import InvalidArgumentError, NotFoundError
from listkeeper.models.tasks import TaskListDetail
from conftest import DONE_TASK, SAMPLE_LIST, SAMPLE_TASK


@pytest.fixture
def client(mocker):
    mocker.patch("listkeeper.routers.tasks.tasks_service")
    from listkeeper.main import api
    from fastapi.testclient import TestClient
    return TestClient(api)


@pytest.fixture
def mock_svc(mocker):
    return mocker.patch("listkeeper.routers.tasks.tasks_service")


class TestListEndpoints:
    def test_list_task_lists(self, client, mock_svc):
        mock_svc.list_task_lists.return_value = [SAMPLE_LIST]
        resp = client.get("/api/tasks/lists")
        assert resp.status_code == 200
        assert resp.json()[0]["name"] == "Groceries"

    def test_create_list(self, client, mock_svc):
        mock_svc.create_list.return_value = SAMPLE_LIST
        resp = client.post("/api/tasks/lists", json={"name": "Groceries"})
        assert resp.status_code == 200
        mock_svc.create_list.assert_called_once_with("Groceries")

    def test_delete_lists(self, client, mock_svc):
        resp = client.post("/api/tasks/lists/delete", json={"positions": [0, 2]})
        assert resp.status_code == 204
        mock_svc.delete_lists.assert_called_once_with([0, 2])

    def test_move_lists(self, client, mock_svc):
        mock_svc.reorder_lists.return_value = [SAMPLE_LIST]
        resp = client.post("/api/tasks/lists/move", json={"positions": [1], "to": 0})
        assert resp.status_code == 200
        mock_svc.reorder_lists.assert_called_once_with([1], 0)

    def test_get_list(self, client, mock_svc):
        mock_svc.get_task_list.return_value = TaskListDetail(
            **SAMPLE_LIST.model_dump(), tasks=[SAMPLE_TASK, DONE_TASK],
        )
        resp = client.get("/api/tasks/lists/list123")
        assert resp.status_code == 200
        assert len(resp.json()["tasks"]) == 2

    def test_rename_list(self, client, mock_svc):
        mock_svc.rename_list.return_value = SAMPLE_LIST
        client.patch("/api/tasks/lists/list123", json={"name": "Food"})
        mock_svc.rename_list.assert_called_once_with("list123", "Food")


class TestTaskEndpoints:
    def test_list_tasks_forwards_filter(self, client, mock_svc):
        mock_svc.list_tasks.return_value = [SAMPLE_TASK]
        resp = client.get("/api/tasks/lists/list123/tasks?show_incomplete_only=true")
        assert resp.status_code == 200
        assert resp.json()[0]["due_date"] == "2025-01-02"
        mock_svc.list_tasks.assert_called_once_with("list123", True)

    def test_create_task(self, client, mock_svc):
        mock_svc.create_task.return_value = SAMPLE_TASK
        resp = client.post("/api/tasks/lists/list123/tasks", json={"title": "Buy milk"})
        assert resp.status_code == 200
        assert resp.json()["id"] == "task123"

    def test_delete_tasks(self, client, mock_svc):
        resp = client.post("/api/tasks/lists/list123/tasks/delete", json={"positions": [1]})
        assert resp.status_code == 204
        mock_svc.delete_tasks.assert_called_once_with("list123", [1])

    def test_move_tasks(self, client, mock_svc):
        mock_svc.reorder_tasks.return_value = [DONE_TASK, SAMPLE_TASK]
        client.post("/api/tasks/lists/list123/tasks/move", json={"positions": [1], "to": 0})
        mock_svc.reorder_tasks.assert_called_once_with("list123", [1], 0)

    def test_toggle_task(self, client, mock_svc):
        mock_svc.toggle_task.return_value = DONE_TASK
        resp = client.post("/api/tasks/lists/list123/tasks/task456/toggle")
        assert resp.json()["is_completed"] is True

    def test_edit_task(self, client, mock_svc):
        import datetime
        mock_svc.edit_task.return_value = SAMPLE_TASK
        client.put(
            "/api/tasks/lists/list123/tasks/task123",
            json={"title": "Buy milk", "due_date": "2025-01-02", "notes": "Semi-skimmed"},
        )
        mock_svc.edit_task.assert_called_once_with(
            "list123", "task123", "Buy milk", datetime.date(2025, 1, 2), "Semi-skimmed",
        )

    def test_toggle_all(self, client, mock_svc):
        mock_svc.toggle_all_in_list.return_value = [DONE_TASK]
        resp = client.post("/api/tasks/lists/list123/tasks/toggle-all")
        assert resp.status_code == 200
        mock_svc.toggle_all_in_list.assert_called_once_with("list123")


class TestExceptionMapping:
    def test_not_found_returns_404(self, client, mock_svc):
        mock_svc.get_task.side_effect = NotFoundError("Task task999 not found")
        resp = client.get("/api/tasks/lists/list123/tasks/task999")
        assert resp.status_code == 404
        assert resp.json()["error_code"] == "not_found"

    def test_invalid_argument_returns_400(self, client, mock_svc):
        mock_svc.create_list.side_effect = InvalidArgumentError("name must not be blank.")
        resp = client.post("/api/tasks/lists", json={"name": " "})
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "invalid_argument"

    def test_malformed_body_returns_422(self, client, mock_svc):
        resp = client.post("/api/tasks/lists/move", json={"positions": [1]})
        assert resp.status_code == 422


class TestEndToEnd:
    def test_list_and_task_lifecycle(self, api_client):
        list_id = api_client.post("/api/tasks/lists", json={"name": "Chores"}).json()["id"]
        base = f"/api/tasks/lists/{list_id}/tasks"
        ids = [api_client.post(base, json={"title": t}).json()["id"] for t in ("A", "B", "C")]

        api_client.post(f"{base}/{ids[1]}/toggle")
        incomplete = api_client.get(base, params={"show_incomplete_only": True}).json()
        assert [t["title"] for t in incomplete] == ["A", "C"]

        api_client.post(f"{base}/delete", json={"positions": [0, 2]})
        remaining = api_client.get(base).json()
        assert [t["id"] for t in remaining] == [ids[1]]

        status = api_client.get("/api/status").json()
        assert status == {"list_count": 1, "task_count": 1, "completed_count": 1}

    def test_edit_missing_task_returns_404(self, api_client):
        list_id = api_client.post("/api/tasks/lists", json={"name": "Chores"}).json()["id"]
        resp = api_client.put(f"/api/tasks/lists/{list_id}/tasks/nope", json={"title": "X"})
        assert resp.status_code == 404

    def test_blank_title_returns_400(self, api_client):
        list_id = api_client.post("/api/tasks/lists", json={"name": "Chores"}).json()["id"]
        resp = api_client.post(f"/api/tasks/lists/{list_id}/tasks", json={"title": "   "})
        assert resp.status_code == 400
