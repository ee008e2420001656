"""Gate catalog: each gate carries its exact complex matrix as data.

Single-qubit matrices are row-major [[m00, m01], [m10, m11]] acting on
(|0>, |1>) of the target qubit. Two- and three-qubit entries use the
(control..., target) ordering with the target as least significant row bit.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from chronoq.core.errors import UnknownGateError

_INV_SQRT2 = 1.0 / np.sqrt(2.0)

_HADAMARD = np.array([[_INV_SQRT2, _INV_SQRT2], [_INV_SQRT2, -_INV_SQRT2]], dtype=np.complex128)
_PAULI_X = np.array([[0, 1], [1, 0]], dtype=np.complex128)
_PAULI_Y = np.array([[0, -1j], [1j, 0]], dtype=np.complex128)
_PAULI_Z = np.array([[1, 0], [0, -1]], dtype=np.complex128)
_PHASE_S = np.array([[1, 0], [0, 1j]], dtype=np.complex128)
_T_GATE = np.array([[1, 0], [0, np.exp(1j * np.pi / 4)]], dtype=np.complex128)

_CNOT = np.eye(4, dtype=np.complex128)[[0, 1, 3, 2]]
_TOFFOLI = np.eye(8, dtype=np.complex128)[[0, 1, 2, 3, 4, 5, 7, 6]]

for _m in (_HADAMARD, _PAULI_X, _PAULI_Y, _PAULI_Z, _PHASE_S, _T_GATE, _CNOT, _TOFFOLI):
    _m.flags.writeable = False


class Gate(Enum):
    """Fixed gate catalog. Values are the canonical catalog names."""

    HADAMARD = "HADAMARD"
    PAULI_X = "PAULI_X"
    PAULI_Y = "PAULI_Y"
    PAULI_Z = "PAULI_Z"
    PHASE_S = "PHASE_S"
    T_GATE = "T_GATE"
    CNOT = "CNOT"
    TOFFOLI = "TOFFOLI"

    @property
    def matrix(self) -> np.ndarray:
        """Read-only complex matrix (2x2, 4x4 or 8x8)."""
        return _MATRICES[self]

    @property
    def arity(self) -> int:
        """Number of qubits the gate acts on."""
        return int(np.log2(self.matrix.shape[0]))

    @property
    def is_single_qubit(self) -> bool:
        return self.arity == 1

    @classmethod
    def from_name(cls, name: str | Gate) -> Gate:
        """Look up a gate by catalog name (case-insensitive)."""
        if isinstance(name, Gate):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            raise UnknownGateError(f"Unknown gate: {name!r}") from None


_MATRICES: dict[Gate, np.ndarray] = {
    Gate.HADAMARD: _HADAMARD,
    Gate.PAULI_X: _PAULI_X,
    Gate.PAULI_Y: _PAULI_Y,
    Gate.PAULI_Z: _PAULI_Z,
    Gate.PHASE_S: _PHASE_S,
    Gate.T_GATE: _T_GATE,
    Gate.CNOT: _CNOT,
    Gate.TOFFOLI: _TOFFOLI,
}

SINGLE_QUBIT_GATES: tuple[Gate, ...] = tuple(g for g in Gate if g.is_single_qubit)
