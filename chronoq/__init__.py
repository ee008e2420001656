"""chronoq: discrete-event quantum state-vector simulator.

Demonstrates numerically that information encoded in an entangled or
decohering register cannot be recovered after time evolution.

Layers:
  - chronoq.core: complex arithmetic, register, gate catalog, gate engine
  - chronoq.quantum: decoherence, analysis, message codec, experiments
  - chronoq.api / chronoq.server: JSON and HTTP invocation surfaces
"""

from chronoq.core import (
    QuantumRegister,
    Gate,
    apply_single_qubit_gate,
    apply_cnot,
    SimulatorError,
)
from chronoq.quantum import (
    SimulatorConfig,
    Simulator,
    run_experiment,
    EXPERIMENTS,
)

__version__ = "0.1.0"

__all__ = [
    "QuantumRegister", "Gate", "apply_single_qubit_gate", "apply_cnot",
    "SimulatorError", "SimulatorConfig", "Simulator",
    "run_experiment", "EXPERIMENTS",
]
