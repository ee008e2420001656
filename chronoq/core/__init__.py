"""chronoq core: complex arithmetic, register, gate catalog, gate engine."""

from chronoq.core.complex_ops import complex_add, complex_multiply, magnitude_squared
from chronoq.core.errors import (
    SimulatorError,
    UnknownGateError,
    QubitIndexError,
    AllocationError,
    NormalizationError,
)
from chronoq.core.register import QuantumRegister
from chronoq.core.gates import Gate, SINGLE_QUBIT_GATES
from chronoq.core.engine import apply_single_qubit_gate, apply_cnot, apply_gate
from chronoq.core.resources import ResourceCounters

__all__ = [
    "complex_add", "complex_multiply", "magnitude_squared",
    "SimulatorError", "UnknownGateError", "QubitIndexError",
    "AllocationError", "NormalizationError",
    "QuantumRegister",
    "Gate", "SINGLE_QUBIT_GATES",
    "apply_single_qubit_gate", "apply_cnot", "apply_gate",
    "ResourceCounters",
]
