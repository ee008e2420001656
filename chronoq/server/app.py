"""chronoq FastAPI server: REST access to the experiments."""

from __future__ import annotations

import time

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from chronoq.api.dispatch import dispatch as api_dispatch
from chronoq.core.errors import SimulatorError
from chronoq.hdl import render_verilog
from chronoq.quantum.config import SimulatorConfig
from chronoq.quantum.experiments import (
    DEFAULT_MESSAGE,
    DEFAULT_TIME_DELTA,
    EXPERIMENTS,
    Simulator,
    run_experiment,
)

app = FastAPI(title="chronoq", version="0.1.0")


# ---------------------------------------------------------------------------
# Request/Response models
# ---------------------------------------------------------------------------

class RunRequest(BaseModel):
    experiment: str = "full_simulation"
    message: str = DEFAULT_MESSAGE
    time_delta: float = DEFAULT_TIME_DELTA
    qubits: int = Field(default=16, ge=5, le=24)


# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------

@app.get("/api/experiments")
async def api_experiments():
    return api_dispatch({"action": "list_experiments"})


@app.post("/api/run")
async def api_run(req: RunRequest):
    if req.experiment not in EXPERIMENTS:
        return JSONResponse(
            status_code=400,
            content={"error": f"Unknown experiment: {req.experiment!r}"},
        )
    try:
        sim = Simulator(SimulatorConfig(qubits=req.qubits))
        t0 = time.perf_counter()
        result = run_experiment(req.experiment, sim, req.message, req.time_delta)
        elapsed = time.perf_counter() - t0

        out = result.to_dict()
        out["experiment"] = req.experiment
        out["elapsed_ms"] = round(elapsed * 1000, 3)
        return out
    except SimulatorError as e:
        return JSONResponse(status_code=400, content={"error": f"{type(e).__name__}: {e}"})
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {e}"})


@app.get("/api/verilog", response_class=PlainTextResponse)
async def api_verilog(qubits: int = 16):
    try:
        return PlainTextResponse(render_verilog(SimulatorConfig(qubits=qubits)))
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
