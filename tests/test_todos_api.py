from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from todo_api.decorations import Operation, Outcome, status_emoji
from todo_api.main import create_app
from todo_api.store import InMemoryTodoStore, TodoStore


@pytest.fixture
def store():
    return InMemoryTodoStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


def parse_ts(value: str) -> datetime:
    # RFC3339 'Z' suffix is only understood by fromisoformat on 3.11+
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def assert_todo_shape(todo: dict):
    assert set(todo) == {"id", "title", "completed", "created_at", "updated_at"}
    assert isinstance(todo["id"], str) and todo["id"]
    assert isinstance(todo["title"], str)
    assert isinstance(todo["completed"], bool)
    created = parse_ts(todo["created_at"])
    updated = parse_ts(todo["updated_at"])
    assert created.tzinfo is not None
    assert created <= updated


def create(client, title="Test Task") -> dict:
    res = client.post("/todos", json={"title": title})
    assert res.status_code == 201
    return res.json()["todo"]


class TestHealth:
    def test_health_check(self, client):
        create(client)
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Healthy", "todos": 1}


class TestCreate:
    def test_create_todo(self, client, store):
        res = client.post("/todos", json={"title": "Buy milk"})
        assert res.status_code == 201
        body = res.json()
        assert body["message"] == "Todo created"
        assert body["status_emoji"] == status_emoji(Operation.CREATE, Outcome.SUCCESS)
        todo = body["todo"]
        assert_todo_shape(todo)
        assert todo["title"] == "Buy milk"
        assert todo["completed"] is False
        assert todo["created_at"] == todo["updated_at"]
        assert store.get(todo["id"])["title"] == "Buy milk"

    def test_create_ignores_client_supplied_fields(self, client):
        res = client.post("/todos", json={"title": "X", "id": "mine", "completed": True})
        assert res.status_code == 201
        todo = res.json()["todo"]
        assert todo["id"] != "mine"
        assert todo["completed"] is False

    def test_create_accepts_empty_title(self, client):
        res = client.post("/todos", json={"title": ""})
        assert res.status_code == 201
        assert res.json()["todo"]["title"] == ""

    def test_create_generates_distinct_ids(self, client):
        ids = {create(client, f"T{i}")["id"] for i in range(5)}
        assert len(ids) == 5

    def test_create_malformed_json(self, client, store):
        res = client.post(
            "/todos", content=b'{"title": ', headers={"Content-Type": "application/json"}
        )
        assert res.status_code == 400
        body = res.json()
        assert body["message"] == "Invalid input"
        assert isinstance(body["error"], str) and body["error"]
        assert body["status_emoji"] == status_emoji(Operation.CREATE, Outcome.INVALID_INPUT)
        assert store.count() == 0

    @pytest.mark.parametrize("payload", [{}, {"title": 5}, {"title": None}, ["title"]])
    def test_create_wrong_shape(self, client, store, payload):
        res = client.post("/todos", json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid input"
        assert store.count() == 0


class TestRead:
    def test_list_empty(self, client):
        res = client.get("/todos")
        assert res.status_code == 200
        assert res.json()["todos"] == []

    def test_list_returns_all(self, client):
        created = {create(client, t)["id"] for t in ("a", "b", "c")}
        res = client.get("/todos")
        assert res.status_code == 200
        body = res.json()
        assert {t["id"] for t in body["todos"]} == created
        assert body["status_emoji"] == status_emoji(Operation.LIST, Outcome.SUCCESS)
        for todo in body["todos"]:
            assert_todo_shape(todo)

    def test_get_todo(self, client):
        todo = create(client, "Read book")
        res = client.get(f"/todos/{todo['id']}")
        assert res.status_code == 200
        assert res.json()["todo"] == todo

    def test_get_unknown(self, client):
        res = client.get("/todos/unknown-id")
        assert res.status_code == 404
        body = res.json()
        assert body["message"] == "Todo not found"
        assert body["status_emoji"] == status_emoji(Operation.GET, Outcome.NOT_FOUND)


class TestUpdate:
    def test_update_completed_only(self, client):
        todo = create(client, "Keep me")
        res = client.put(f"/todos/{todo['id']}", json={"completed": True})
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Todo updated"
        assert body["status_emoji"] == status_emoji(Operation.UPDATE, Outcome.SUCCESS)
        updated = body["todo"]
        assert updated["completed"] is True
        assert updated["title"] == "Keep me"
        assert updated["created_at"] == todo["created_at"]
        assert parse_ts(updated["updated_at"]) >= parse_ts(todo["updated_at"])

    def test_update_title_only(self, client):
        todo = create(client, "Old")
        client.put(f"/todos/{todo['id']}", json={"completed": True})
        res = client.put(f"/todos/{todo['id']}", json={"title": "New"})
        assert res.status_code == 200
        updated = res.json()["todo"]
        assert updated["title"] == "New"
        assert updated["completed"] is True

    def test_update_null_fields_are_ignored(self, client):
        todo = create(client, "Same")
        res = client.put(f"/todos/{todo['id']}", json={"title": None, "completed": None})
        assert res.status_code == 200
        updated = res.json()["todo"]
        assert updated["title"] == "Same"
        assert updated["completed"] is False

    def test_update_persists(self, client):
        todo = create(client)
        client.put(f"/todos/{todo['id']}", json={"title": "Stored", "completed": True})
        fetched = client.get(f"/todos/{todo['id']}").json()["todo"]
        assert fetched["title"] == "Stored"
        assert fetched["completed"] is True

    def test_update_unknown(self, client, store):
        res = client.put("/todos/nope", json={"completed": True})
        assert res.status_code == 404
        body = res.json()
        assert body["message"] == "Todo not found"
        assert body["status_emoji"] == status_emoji(Operation.UPDATE, Outcome.NOT_FOUND)
        assert store.count() == 0

    def test_update_malformed(self, client):
        todo = create(client, "Untouched")
        res = client.put(
            f"/todos/{todo['id']}", content=b"not json", headers={"Content-Type": "application/json"}
        )
        assert res.status_code == 400
        body = res.json()
        assert body["message"] == "Invalid input"
        assert body["status_emoji"] == status_emoji(Operation.UPDATE, Outcome.INVALID_INPUT)
        assert client.get(f"/todos/{todo['id']}").json()["todo"] == todo

    def test_update_wrong_type(self, client):
        todo = create(client)
        res = client.put(f"/todos/{todo['id']}", json={"completed": "yes"})
        assert res.status_code == 400

    def test_update_vanished_record(self):
        class VanishingStore(InMemoryTodoStore):
            def modify(self, todo_id, mutator):
                self.delete(todo_id)
                return super().modify(todo_id, mutator)

        vanishing = VanishingStore()
        client = TestClient(create_app(store=vanishing))
        todo = create(client)
        res = client.put(f"/todos/{todo['id']}", json={"completed": True})
        assert res.status_code == 500
        body = res.json()
        assert body["message"] == "Failed to update todo"
        assert body["status_emoji"] == status_emoji(Operation.UPDATE, Outcome.INTERNAL_ERROR)



class TestDelete:
    def test_delete_todo(self, client):
        todo = create(client, "ToDelete")
        res = client.delete(f"/todos/{todo['id']}")
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Todo deleted"
        assert body["status_emoji"] == status_emoji(Operation.DELETE, Outcome.SUCCESS)

        res_get = client.get(f"/todos/{todo['id']}")
        assert res_get.status_code == 404
        assert res_get.json()["message"] == "Todo not found"

    def test_delete_twice(self, client):
        todo = create(client)
        assert client.delete(f"/todos/{todo['id']}").status_code == 200
        res = client.delete(f"/todos/{todo['id']}")
        assert res.status_code == 404
        body = res.json()
        assert body["message"] == "Todo not found"
        assert body["status_emoji"] == status_emoji(Operation.DELETE, Outcome.NOT_FOUND)


class TestIsolation:
    def test_apps_do_not_share_state(self):
        first = TestClient(create_app(store=InMemoryTodoStore()))
        second = TestClient(create_app(store=InMemoryTodoStore()))
        create(first)
        assert second.get("/todos").json()["todos"] == []

    def test_default_app_builds_its_own_store(self):
        app = create_app()
        assert isinstance(app.state.store, TodoStore)
