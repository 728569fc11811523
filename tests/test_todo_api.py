from prometheus_client import REGISTRY

from todo_app.todo import todo_slice


def test_list_returns_seeded_item(client):
    resp = client.get("/todos")

    assert resp.status_code == 200
    assert resp.json() == {"todos": [{"id": 1, "text": "Hello everyone."}]}


def test_end_to_end_scenario(client):
    resp = client.post("/todos", json={"text": "Buy milk"})
    assert resp.status_code == 201
    created = resp.json()
    assert created["text"] == "Buy milk"
    new_id = created["id"]

    resp = client.put("/todos/1", json={"text": "Hi all"})
    assert resp.status_code == 200
    assert resp.json()["todos"] == [
        {"id": 1, "text": "Hi all"},
        {"id": new_id, "text": "Buy milk"},
    ]

    resp = client.delete("/todos/1")
    assert resp.status_code == 200
    assert resp.json() == {"todos": [{"id": new_id, "text": "Buy milk"}]}


def test_update_and_delete_by_generated_id(client):
    new_id = client.post("/todos", json={"text": "a"}).json()["id"]

    resp = client.put(f"/todos/{new_id}", json={"text": "b"})
    assert resp.json()["todos"][-1] == {"id": new_id, "text": "b"}

    resp = client.delete(f"/todos/{new_id}")
    assert [t["id"] for t in resp.json()["todos"]] == [1]


def test_unknown_id_is_silent_noop(client):
    before = client.get("/todos").json()

    assert client.put("/todos/missing", json={"text": "x"}).json() == before
    assert client.delete("/todos/999").json() == before


def test_create_requires_text(client):
    resp = client.post("/todos", json={})
    assert resp.status_code == 422


def test_raw_action_dispatch(client):
    resp = client.post(
        "/actions",
        json={"type": "todo/updateTodo", "payload": {"id": 1, "text": "raw"}},
    )

    assert resp.status_code == 200
    assert resp.json()["todos"][0] == {"id": 1, "text": "raw"}


def test_raw_action_unknown_type(client):
    resp = client.post("/actions", json={"type": "toggleTodo", "payload": {"id": 1}})

    assert resp.status_code == 422
    assert "toggleTodo" in resp.json()["detail"]


def test_raw_action_missing_text(client):
    resp = client.post("/actions", json={"type": "addTodo", "payload": {}})

    assert resp.status_code == 422
    assert resp.json()["detail"][0]["type"] == "missing"
    assert client.get("/todos").json()["todos"] == [{"id": 1, "text": "Hello everyone."}]


def test_store_resets_between_app_runs():
    from fastapi.testclient import TestClient

    from todo_app.main import app

    with TestClient(app) as first:
        first.post("/todos", json={"text": "temp"})
        assert len(first.get("/todos").json()["todos"]) == 2

    with TestClient(app) as second:
        assert second.get("/todos").json()["todos"] == [{"id": 1, "text": "Hello everyone."}]


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "slices": ["todo"], "todo_count": 1}


def test_trace_id_header_echoed(client):
    resp = client.get("/todos", headers={"X-Trace-ID": "abc-123"})
    assert resp.headers["X-Trace-ID"] == "abc-123"


def test_non_ascii_digit_ids_are_noop(client):
    before = client.get("/todos").json()

    # "²" 让 str.isdigit() 为真但 int() 会失败；"١" 是阿拉伯-印度数字 1
    for raw_id in ("²", "١"):
        assert client.delete(f"/todos/{raw_id}").json() == before
        assert client.put(f"/todos/{raw_id}", json={"text": "x"}).json() == before


def test_create_returns_own_item_when_listener_dispatches(client):
    store = client.app.state.store

    def listener():
        if len(todo_slice.select_todos(store.get_state())) == 2:
            store.dispatch(todo_slice.actions.add_todo("from listener"))

    store.subscribe(listener)
    created = client.post("/todos", json={"text": "mine"}).json()

    assert created["text"] == "mine"
    assert [t["text"] for t in client.get("/todos").json()["todos"]][-1] == "from listener"


def test_unmatched_routes_share_one_metrics_label(client):
    client.get("/no-such-path-abc")

    assert REGISTRY.get_sample_value(
        "todo_request_total",
        {"method": "GET", "endpoint": "unmatched", "status_code": "404"},
    ) >= 1
    assert REGISTRY.get_sample_value(
        "todo_request_total",
        {"method": "GET", "endpoint": "/no-such-path-abc", "status_code": "404"},
    ) is None
