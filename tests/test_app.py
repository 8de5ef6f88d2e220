import pytest

from config import AppConfig
from main import create_app


@pytest.fixture
def client():
    app = create_app(AppConfig(secret_key="test", max_items=50))
    return app.test_client()


def run(client, operation, container, **operands):
    return client.post("/api/run", json={"operation": operation, "container": container, "operands": operands})


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "sorting" in resp.get_json()["families"]


def test_operations_listing(client):
    ops = client.get("/api/operations").get_json()["operations"]
    assert any(op["key"] == "graph.dijkstra" for op in ops)

    stack_ops = client.get("/api/operations?family=stack").get_json()["operations"]
    assert stack_ops and all(op["family"] == "stack" for op in stack_ops)
    push = next(op for op in stack_ops if op["key"] == "stack.push")
    assert push["operands"] == ["value", "capacity"]
    assert push["complexity"]["worst"] == "O(1)"


def test_run_sort(client):
    resp = run(client, "sorting.bubble", [5, 2, 8, 1, 9])
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["snapshots"][-1] == [1, 2, 5, 8, 9]
    assert data["metrics"]["total_steps"] == len(data["steps"])
    assert data["steps"][-1]["kind"] == "sorted"


def test_run_linked_list_from_values(client):
    data = run(client, "linked_list.insert_tail", {"values": [1, 2]}, value=3).get_json()
    assert data["result"] == "node-2"
    assert data["steps"][-1]["newTail"] == "node-2"


def test_run_bst_from_values(client):
    data = run(client, "bst.find_min", {"values": [5, 3, 8, 1]}).get_json()
    assert data["result"] == 1


def test_run_binary_tree_from_values(client):
    data = run(client, "binary_tree.in_order", [1, 2, 3]).get_json()
    assert data["result"] == [2, 1, 3]


def test_run_hash_table_from_entries(client):
    container = {"capacity": 5, "entries": [[1, 10], [6, 60]]}
    data = run(client, "hash_table.search", container, key=6).get_json()
    assert data["result"] == 60
    assert data["initial"]["collisions"] == 1


def test_run_dijkstra_serialises_infinity_as_null(client):
    graph = {
        "directed": True,
        "weighted": True,
        "nodes": [{"id": "0"}, {"id": "1"}, {"id": "2"}, {"id": "3"}],
        "edges": [
            {"source": "0", "target": "1", "weight": 4},
            {"source": "0", "target": "2", "weight": 1},
            {"source": "2", "target": "1", "weight": 1},
        ],
    }
    data = run(client, "graph.dijkstra", graph, source="0").get_json()
    assert data["result"]["distances"] == {"0": 0, "1": 2, "2": 1, "3": None}
    assert data["steps"][0]["auxiliary"]["distances"]["3"] is None


def test_run_graph_from_adjacency_text(client):
    data = run(client, "graph.bfs", {"adjacency": "0: 1 2\n1: 3\n2: 3"}, source="0").get_json()
    assert data["result"] == ["0", "1", "2", "3"]


def test_guard_is_a_normal_response(client):
    data = run(client, "stack.pop", []).get_json()
    assert data["steps"][0]["rejected"] is True
    assert data["metrics"]["rejected"] is True


@pytest.mark.parametrize("payload", [
    {"operation": "sorting.bogo", "container": [1]},
    {"operation": "sorting.bubble", "container": "nope"},
    {"operation": "sorting.bubble", "container": [1, "x"]},
    {"operation": "sorting.bubble", "container": list(range(51))},
    {"operation": "array.insert", "container": [1], "operands": {"index": 0}},
    {"operation": "array.insert", "container": [1], "operands": {"bogus": 1}},
    {"operation": "linked_list.search", "container": {"head": "node-0", "nodes": [{"value": 1}]}},
    {"operation": "hash_table.insert", "container": {"capacity": 0}, "operands": {"key": 1, "value": 1}},
])
def test_bad_payloads_are_400(client, payload):
    resp = client.post("/api/run", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_self_linked_list_is_400(client):
    container = {"head": "node-0", "nodes": [{"id": "node-0", "value": 1, "next": "node-0"}]}
    resp = run(client, "linked_list.size", container)
    assert resp.status_code == 400
    assert "cycle" in resp.get_json()["error"]


def test_hash_entries_beyond_capacity_are_400(client):
    container = {"capacity": 2, "entries": [[1, 1], [2, 2], [3, 3]]}
    resp = run(client, "hash_table.get_keys", container)
    assert resp.status_code == 400
    assert "3" in resp.get_json()["error"]


def test_non_json_body_is_400(client):
    resp = client.post("/api/run", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_generate_array_is_seeded(client):
    a = client.post("/api/data/generate", json={"kind": "array", "size": 6, "seed": 4}).get_json()["array"]
    b = client.post("/api/data/generate", json={"kind": "array", "size": 6, "seed": 4}).get_json()["array"]
    assert a == b and len(a) == 6

    sorted_ = client.post("/api/data/generate", json={"kind": "array", "preset": "sorted", "seed": 4})
    assert sorted_.get_json()["array"] == sorted(sorted_.get_json()["array"])


def test_generate_graph(client):
    graph = client.post("/api/data/generate", json={"kind": "graph", "nodes": 5, "seed": 1}).get_json()["graph"]
    assert len(graph["nodes"]) == 5


def test_generate_rejects_unknown_kind_and_oversize(client):
    assert client.post("/api/data/generate", json={"kind": "cube"}).status_code == 400
    assert client.post("/api/data/generate", json={"kind": "array", "size": 500}).status_code == 400


def test_compare(client):
    resp = client.post("/api/compare", json={
        "left": "sorting.bubble", "right": "sorting.selection", "values": [1, 2, 3, 4],
    })
    data = resp.get_json()
    assert data["comparison"]["winner_compares"] == "Bubble Sort"
    assert data["left"]["snapshots"][-1] == [1, 2, 3, 4]


def test_compare_rejects_operations_with_operands(client):
    resp = client.post("/api/compare", json={"left": "sorting.bubble", "right": "stack.push", "values": [1]})
    assert resp.status_code == 400
