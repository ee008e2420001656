"""Quantum register: the dense state vector and its lifecycle.

Basis index i encodes qubit b in bit b of i. The register is owned by
whoever created it and passed explicitly into the gate engine, the
decoherence model and the analyzers. Only the engine and the decoherence
model write to it, always by swapping in a freshly computed vector.
"""

from __future__ import annotations

import operator

import numpy as np

from chronoq.core.errors import AllocationError, QubitIndexError

AMPLITUDE_BYTES = np.dtype(np.complex128).itemsize
DEFAULT_MAX_STATE_BYTES = 1 << 30


class QuantumRegister:
    """Dense 2^Q complex128 amplitude vector."""

    def __init__(self, qubits: int, max_state_bytes: int = DEFAULT_MAX_STATE_BYTES) -> None:
        self.max_state_bytes = max_state_bytes
        self._qubits = 0
        self._state = np.zeros(0, dtype=np.complex128)
        self.reset(qubits)

    # --- Lifecycle ---

    def reset(self, qubits: int | None = None) -> None:
        """Re-initialize to |00...0>, optionally with a new width."""
        if qubits is None:
            qubits = self._qubits
        if qubits < 1:
            raise AllocationError(f"Cannot allocate a register of {qubits} qubits")
        required = AMPLITUDE_BYTES << qubits
        if required > self.max_state_bytes:
            raise AllocationError(
                f"{qubits} qubits need {required} bytes, limit is {self.max_state_bytes}"
            )
        try:
            state = np.zeros(1 << qubits, dtype=np.complex128)
        except MemoryError as e:
            raise AllocationError(f"Out of memory allocating {qubits} qubits") from e
        state[0] = 1.0 + 0.0j
        self._qubits = qubits
        self._state = state

    def replace(self, new_state: np.ndarray) -> None:
        """Swap in a complete new state vector (writers only)."""
        if new_state.shape != self._state.shape:
            raise ValueError(
                f"State shape mismatch: expected {self._state.shape}, got {new_state.shape}"
            )
        self._state = np.ascontiguousarray(new_state, dtype=np.complex128)

    # --- Read-only access ---

    @property
    def qubits(self) -> int:
        return self._qubits

    @property
    def dim(self) -> int:
        return self._state.shape[0]

    @property
    def amplitudes(self) -> np.ndarray:
        """Read-only view of the state vector."""
        view = self._state.view()
        view.flags.writeable = False
        return view

    def amplitude(self, index: int) -> complex:
        return complex(self._state[index])

    def check_qubit(self, qubit: int) -> int:
        """Validate a qubit index and return it as int."""
        try:
            qubit = operator.index(qubit)
        except TypeError:
            raise QubitIndexError(f"Qubit index must be an integer, got {qubit!r}") from None
        if qubit < 0 or qubit >= self._qubits:
            raise QubitIndexError(
                f"Qubit {qubit} out of range for a {self._qubits}-qubit register"
            )
        return qubit

    def norm_squared(self) -> float:
        return float(np.vdot(self._state, self._state).real)

    def copy_state(self) -> np.ndarray:
        return self._state.copy()

    def __repr__(self) -> str:
        top = int(np.argmax(np.abs(self._state)))
        return f"QuantumRegister[{self._qubits}q](top={top}, norm2={self.norm_squared():.6f})"
