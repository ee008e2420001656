"""chronoq API dispatcher: JSON request/response interface.

Usage:
    from chronoq.api.dispatch import dispatch
    result = dispatch({"action": "message_only", "message": "hi", "time_delta": -3600})
"""

from __future__ import annotations

from chronoq.api.tools import get_tool_definitions as _get_tool_defs
from chronoq.core.errors import SimulatorError
from chronoq.hdl import render_verilog
from chronoq.quantum.analysis import coherence_matrix
from chronoq.quantum.config import SimulatorConfig
from chronoq.quantum.experiments import (
    DEFAULT_MESSAGE,
    DEFAULT_TIME_DELTA,
    EXPERIMENTS,
    Simulator,
    run_experiment,
)


_EXPERIMENT_INFO = [
    {
        "name": "full_simulation",
        "description": "Entangled clocks, message recovery, tomography and resource report",
        "params": ["message", "time_delta", "qubits"],
    },
    {
        "name": "tests",
        "description": "Self-test suite: gates, clock coherence, recovery failure, resource limits",
        "params": ["qubits"],
    },
    {
        "name": "clocks_only",
        "description": "Entangled clock experiment on qubits 0, 1 with environment qubit 2",
        "params": ["qubits"],
    },
    {
        "name": "message_only",
        "description": "Encode a message, decohere for the scaled time delta, attempt recovery",
        "params": ["message", "time_delta", "qubits"],
    },
]


def dispatch(request: dict) -> dict:
    """Main entry point for the chronoq tool-use API.

    Args:
        request: JSON-like dict with "action" and action-specific params.

    Returns:
        JSON-like dict with results or error information.
    """
    action = request.get("action")
    if not action:
        return {"error": "Missing 'action' field"}

    try:
        if action == "list_experiments":
            return {"experiments": _EXPERIMENT_INFO}
        elif action in EXPERIMENTS:
            return _handle_experiment(action, request)
        elif action == "coherence_matrix":
            return _handle_coherence_matrix(request)
        elif action == "verilog":
            return {"verilog": render_verilog(_config_from(request))}
        else:
            return {"error": f"Unknown action: {action!r}"}
    except SimulatorError as e:
        return {"error": f"{type(e).__name__}: {e}"}
    except (ValueError, TypeError) as e:
        return {"error": f"Invalid request: {e}"}


def get_tool_definitions() -> list[dict]:
    """Return tool schema definitions."""
    return _get_tool_defs()


# ---------------------------------------------------------------------------
# Action handlers
# ---------------------------------------------------------------------------

def _config_from(request: dict) -> SimulatorConfig:
    config = SimulatorConfig()
    if request.get("qubits") is not None:
        config = config.replace(qubits=int(request["qubits"]))
    return config


def _handle_experiment(action: str, request: dict) -> dict:
    sim = Simulator(_config_from(request))
    message = request.get("message", DEFAULT_MESSAGE)
    time_delta = float(request.get("time_delta", DEFAULT_TIME_DELTA))
    result = run_experiment(action, sim, message, time_delta)
    out = result.to_dict()
    out["experiment"] = action
    return out


def _handle_coherence_matrix(request: dict) -> dict:
    """Coherence matrix of the entangled-clock preparation after evolution."""
    sim = Simulator(_config_from(request))
    run_experiment("clocks_only", sim)
    matrix = coherence_matrix(sim.register, request.get("span"))
    return {"qubits": matrix.shape[0], "matrix": matrix.tolist()}
