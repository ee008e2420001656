"""Tests for the chronoq FastAPI server endpoints."""

import pytest

fastapi = pytest.importorskip("fastapi")

from fastapi.testclient import TestClient
from chronoq.server.app import app

client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# API endpoint tests
# ═══════════════════════════════════════════════════════════════════════════

class TestServerEndpoints:
    def test_experiments(self):
        r = client.get("/api/experiments")
        assert r.status_code == 200
        assert len(r.json()["experiments"]) == 4

    def test_run_clocks(self):
        r = client.post("/api/run", json={"experiment": "clocks_only", "qubits": 5})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["experiment"] == "clocks_only"
        assert "elapsed_ms" in data

    def test_run_message(self):
        r = client.post("/api/run", json={
            "experiment": "message_only", "qubits": 8, "message": "hi", "time_delta": -3600,
        })
        assert r.status_code == 200
        assert r.json()["success"] is False

    def test_unknown_experiment(self):
        r = client.post("/api/run", json={"experiment": "time_machine", "qubits": 5})
        assert r.status_code == 400
        assert "Unknown experiment" in r.json()["error"]

    def test_qubits_below_minimum(self):
        r = client.post("/api/run", json={"experiment": "clocks_only", "qubits": 3})
        assert r.status_code == 422

    def test_verilog(self):
        r = client.get("/api/verilog", params={"qubits": 12})
        assert r.status_code == 200
        assert "text/plain" in r.headers["content-type"]
        assert "parameter QUBITS = 12" in r.text

    def test_verilog_invalid(self):
        r = client.get("/api/verilog", params={"qubits": 0})
        assert r.status_code == 400
