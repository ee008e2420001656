"""Tool definitions for the chronoq API: JSON Schema descriptions."""

from __future__ import annotations

_QUBITS = {
    "type": "integer",
    "description": "Register width (default: 16)",
    "minimum": 5,
}

_MESSAGE = {
    "type": "string",
    "description": "Message to encode into the register",
}

_TIME_DELTA = {
    "type": "number",
    "description": "Signed target time delta in seconds (default: -3600)",
    "default": -3600,
}

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": "list_experiments",
        "description": "List the named experiments with descriptions.",
        "parameters": {"type": "object", "properties": {}},
    },
    {
        "name": "full_simulation",
        "description": "Run both experiments, then report tomography, resources and conclusions.",
        "parameters": {
            "type": "object",
            "properties": {"message": _MESSAGE, "time_delta": _TIME_DELTA, "qubits": _QUBITS},
        },
    },
    {
        "name": "tests",
        "description": "Run the four-check self-test suite.",
        "parameters": {"type": "object", "properties": {"qubits": _QUBITS}},
    },
    {
        "name": "clocks_only",
        "description": "Run the entangled clock experiment and return its coherence trace.",
        "parameters": {"type": "object", "properties": {"qubits": _QUBITS}},
    },
    {
        "name": "message_only",
        "description": "Encode a message, evolve it under time-scaled decoherence, attempt recovery.",
        "parameters": {
            "type": "object",
            "properties": {"message": _MESSAGE, "time_delta": _TIME_DELTA, "qubits": _QUBITS},
        },
    },
    {
        "name": "coherence_matrix",
        "description": "Pairwise temporal coherence after the clock experiment.",
        "parameters": {
            "type": "object",
            "properties": {
                "qubits": _QUBITS,
                "span": {
                    "type": "integer",
                    "description": "Number of lowest qubits to include (default: all)",
                },
            },
        },
    },
    {
        "name": "verilog",
        "description": "Render the static Verilog artifact for the configured register.",
        "parameters": {"type": "object", "properties": {"qubits": _QUBITS}},
    },
]


def get_tool_definitions() -> list[dict]:
    return TOOL_DEFINITIONS
