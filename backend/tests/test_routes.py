"""Tests for the FastAPI routes — one POST per algorithm, /algorithms, /samples, health."""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from graphlab.api import routes
from graphlab.config import Settings, get_settings
from graphlab.engine.algorithm_registry import AlgorithmRegistry
from graphlab.engine.results import INF_DISTANCE, UNREACHABLE_COST
from graphlab.main import app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _graph(edges, nodes=None, oriented=False) -> dict:
    """Wire-format graph from ``(from, to, weight)`` tuples."""
    if nodes is None:
        nodes = sorted({n for u, v, _ in edges for n in (u, v)})
    return {
        "nodes": nodes,
        "edges": [{"from": u, "to": v, "weight": w} for u, v, w in edges],
        "isOriented": oriented,
    }


TREE = _graph([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)], nodes=["A", "B", "C", "D"])
TRIANGLE = _graph([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
NEGATIVE_CYCLE = _graph([("A", "B", 1), ("B", "C", 1), ("C", "A", -3)], oriented=True)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_overrides():
    yield
    app.dependency_overrides.clear()


# ===========================================================================
# Health
# ===========================================================================


class TestHealth:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json() == "OK"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_lifespan_logs_algorithms_and_samples(self, caplog):
        with caplog.at_level(logging.INFO, logger="uvicorn.error"):
            with TestClient(app):
                pass
        messages = " ".join(r.getMessage() for r in caplog.records)
        assert "Loaded 7 graph algorithm(s)" in messages
        assert "french_cities" in messages


# ===========================================================================
# Traversals
# ===========================================================================


class TestTraversalRoutes:
    def test_bfs(self, client):
        resp = client.post("/bfs", json={"graph": TREE, "start": "A"})
        assert resp.status_code == 200
        assert resp.json() == {
            "order": ["A", "B", "C", "D"],
            "parents": {"A": None, "B": "A", "C": "A", "D": "B"},
        }

    def test_dfs(self, client):
        resp = client.post("/dfs", json={"graph": TREE, "start": "A"})
        assert resp.status_code == 200
        assert resp.json()["order"] == ["A", "B", "D", "C"]

    def test_bfs_respects_orientation(self, client):
        graph = _graph([("A", "B", 1), ("C", "A", 1)], oriented=True)
        resp = client.post("/bfs", json={"graph": graph, "start": "A"})
        assert resp.json()["order"] == ["A", "B"]

    def test_unknown_start_is_not_an_error(self, client):
        resp = client.post("/bfs", json={"graph": TREE, "start": "Z"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["order"] == []
        assert set(body["parents"].values()) == {None}

    def test_missing_start_returns_422(self, client):
        resp = client.post("/dfs", json={"graph": TREE})
        assert resp.status_code == 422


# ===========================================================================
# Shortest paths
# ===========================================================================


class TestPathRoutes:
    def test_dijkstra(self, client):
        resp = client.post("/dijkstra", json={"graph": TRIANGLE, "start": "A", "target": "C"})
        assert resp.status_code == 200
        assert resp.json() == {"path": ["A", "B", "C"], "totalCost": 2}

    def test_dijkstra_unreachable(self, client):
        graph = _graph([("A", "B", 1), ("X", "Y", 1)])
        resp = client.post("/dijkstra", json={"graph": graph, "start": "A", "target": "Y"})
        assert resp.status_code == 200
        assert resp.json() == {"path": [], "totalCost": UNREACHABLE_COST}

    def test_bellman_ford(self, client):
        resp = client.post("/bellman-ford", json={"graph": TRIANGLE, "start": "A", "target": "C"})
        assert resp.status_code == 200
        assert resp.json() == {"path": ["A", "B", "C"], "totalCost": 2, "hasNegativeCycle": False}

    def test_bellman_ford_negative_cycle(self, client):
        resp = client.post("/bellman-ford", json={"graph": NEGATIVE_CYCLE, "start": "A", "target": "C"})
        assert resp.status_code == 200
        assert resp.json() == {"path": [], "totalCost": UNREACHABLE_COST, "hasNegativeCycle": True}

    def test_missing_target_returns_422(self, client):
        resp = client.post("/dijkstra", json={"graph": TRIANGLE, "start": "A"})
        assert resp.status_code == 422


# ===========================================================================
# All pairs
# ===========================================================================


class TestFloydWarshallRoute:
    def test_floyd_warshall(self, client):
        resp = client.post("/floyd-warshall", json=TRIANGLE)
        assert resp.status_code == 200
        body = resp.json()
        assert body["nodes"] == ["A", "B", "C"]
        assert body["distances"] == [[0, 1, 2], [1, 0, 1], [2, 1, 0]]
        assert body["next"][0] == [None, "B", "B"]
        assert body["hasNegativeCycle"] is False

    def test_floyd_warshall_unreachable_sentinel(self, client):
        graph = _graph([("A", "B", 1)], nodes=["A", "B", "X"])
        body = client.post("/floyd-warshall", json=graph).json()
        assert body["distances"][0][2] == INF_DISTANCE
        assert body["next"][0][2] is None


# ===========================================================================
# Spanning trees
# ===========================================================================


class TestSpanningTreeRoutes:
    def test_kruskal(self, client):
        graph = _graph([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
        resp = client.post("/kruskal", json=graph)
        assert resp.status_code == 200
        assert resp.json() == {
            "edges": [
                {"from": "A", "to": "B", "weight": 1},
                {"from": "B", "to": "C", "weight": 2},
            ],
            "totalCost": 3,
        }

    def test_prim(self, client):
        graph = _graph([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
        resp = client.post("/prim", json={"graph": graph, "start": "C"})
        assert resp.status_code == 200
        body = resp.json()
        assert [(e["from"], e["to"]) for e in body["edges"]] == [("B", "C"), ("A", "B")]
        assert body["totalCost"] == 3


# ===========================================================================
# Graph validation at the boundary
# ===========================================================================


class TestGraphValidation:
    def test_edge_with_unknown_node_returns_422(self, client):
        graph = _graph([("A", "B", 1)], nodes=["A"])
        resp = client.post("/bfs", json={"graph": graph, "start": "A"})
        assert resp.status_code == 422
        assert "unknown node" in resp.json()["detail"]

    def test_rejected_graph_is_logged(self, client, caplog):
        graph = _graph([("A", "B", 1)], nodes=["A"])
        with caplog.at_level(logging.WARNING, logger="graphlab.api.routes"):
            client.post("/kruskal", json=graph)
        assert any("Rejected graph" in r.getMessage() for r in caplog.records)

    def test_empty_node_list_returns_422(self, client):
        resp = client.post("/kruskal", json={"nodes": [], "edges": []})
        assert resp.status_code == 422

    def test_non_numeric_weight_returns_422(self, client):
        graph = {"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": "heavy"}]}
        resp = client.post("/floyd-warshall", json=graph)
        assert resp.status_code == 422

    def test_weight_alias_accepted(self, client):
        graph = {"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "cost": 4}]}
        resp = client.post("/dijkstra", json={"graph": graph, "start": "A", "target": "B"})
        assert resp.json()["totalCost"] == 4

    def test_is_oriented_optional(self, client):
        graph = {"nodes": ["A", "B"], "edges": [{"from": "B", "to": "A", "weight": 1}]}
        resp = client.post("/bfs", json={"graph": graph, "start": "A"})
        assert resp.json()["order"] == ["A", "B"]

    def test_node_ids_trimmed(self, client):
        graph = {"nodes": [" A", "B "], "edges": [{"from": "A ", "to": " B", "weight": 1}]}
        resp = client.post("/bfs", json={"graph": graph, "start": "A"})
        assert resp.json()["order"] == ["A", "B"]

    def test_unregistered_algorithm_returns_404(self, client, monkeypatch):
        monkeypatch.setattr(routes, "registry", AlgorithmRegistry())
        resp = client.post("/bfs", json={"graph": TREE, "start": "A"})
        assert resp.status_code == 404
        assert "bfs" in resp.json()["detail"]


# ===========================================================================
# /algorithms
# ===========================================================================


class TestAlgorithmsRoute:
    def test_lists_all_algorithms(self, client):
        resp = client.get("/algorithms")
        assert resp.status_code == 200
        by_name = {a["name"]: a for a in resp.json()}
        assert set(by_name) == {
            "bfs", "dfs", "dijkstra", "bellman-ford", "floyd-warshall", "kruskal", "prim",
        }
        assert by_name["dijkstra"] == {"name": "dijkstra", "kind": "path", "params": ["start", "target"]}
        assert by_name["kruskal"]["params"] == []


# ===========================================================================
# /samples
# ===========================================================================


class TestSampleRoutes:
    def test_list_samples(self, client):
        resp = client.get("/samples")
        assert resp.status_code == 200
        names = [s["name"] for s in resp.json()]
        assert names == ["french_cities", "negative_cycle", "negative_weights"]
        assert all(s["description"] for s in resp.json())

    def test_get_sample(self, client):
        resp = client.get("/samples/negative_cycle")
        assert resp.status_code == 200
        assert resp.json() == NEGATIVE_CYCLE

    def test_sample_roundtrips_through_algorithm(self, client):
        graph = client.get("/samples/french_cities").json()
        resp = client.post("/dijkstra", json={"graph": graph, "start": "Rennes", "target": "Grenoble"})
        assert resp.json() == {"path": ["Rennes", "Paris", "Dijon", "Grenoble"], "totalCost": 245}

    def test_unknown_sample_returns_404(self, client):
        resp = client.get("/samples/does_not_exist")
        assert resp.status_code == 404
        assert "french_cities" in resp.json()["detail"]

    def test_missing_samples_dir(self, client, tmp_path):
        app.dependency_overrides[get_settings] = lambda: Settings(samples_dir=tmp_path / "missing")
        assert client.get("/samples").json() == []

    def test_invalid_json_sample_returns_500(self, client, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        app.dependency_overrides[get_settings] = lambda: Settings(samples_dir=tmp_path)
        resp = client.get("/samples/broken")
        assert resp.status_code == 500
        assert "invalid JSON" in resp.json()["detail"]

    def test_invalid_graph_sample_returns_500(self, client, tmp_path):
        content = {"metadata": {"description": "bad"}, "graph": _graph([("A", "B", 1)], nodes=["A"])}
        (tmp_path / "bad.json").write_text(json.dumps(content), encoding="utf-8")
        app.dependency_overrides[get_settings] = lambda: Settings(samples_dir=tmp_path)
        resp = client.get("/samples/bad")
        assert resp.status_code == 500
        assert "not a valid graph" in resp.json()["detail"]

    def test_samples_dir_from_override(self, client, tmp_path):
        content = {"metadata": {"description": "one node"}, "graph": {"nodes": ["solo"]}}
        (tmp_path / "tiny.json").write_text(json.dumps(content), encoding="utf-8")
        app.dependency_overrides[get_settings] = lambda: Settings(samples_dir=tmp_path)
        assert client.get("/samples").json() == [{"name": "tiny", "description": "one node"}]
        assert client.get("/samples/tiny").json() == {"nodes": ["solo"], "edges": [], "isOriented": False}
