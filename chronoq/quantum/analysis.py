"""Coherence / entanglement analysis over the register's Born distribution.

Metrics are this simulator's own definitions:
  - temporal coherence(a, b): probability that qubits a and b read equal
    (a classical-correlation proxy, not an off-diagonal coherence measure)
  - fidelity: probability mass left at |00...0>
  - entropy: -sum p ln p over basis states with p > 1e-6
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from chronoq.core.complex_ops import magnitude_squared
from chronoq.core.register import QuantumRegister

ENTROPY_CUTOFF = 1e-6
TOMOGRAPHY_CUTOFF = 1e-3


def probabilities(register: QuantumRegister) -> np.ndarray:
    return magnitude_squared(register.amplitudes)


def _bit(indices: np.ndarray, qubit: int) -> np.ndarray:
    return (indices >> qubit) & 1


def temporal_coherence(register: QuantumRegister, qubit_a: int, qubit_b: int) -> float:
    """Total probability of basis states where ``qubit_a`` equals ``qubit_b``."""
    qubit_a = register.check_qubit(qubit_a)
    qubit_b = register.check_qubit(qubit_b)
    idx = np.arange(register.dim)
    equal = _bit(idx, qubit_a) == _bit(idx, qubit_b)
    return float(np.sum(probabilities(register)[equal]))


def coherence_matrix(register: QuantumRegister, qubits: int | None = None) -> np.ndarray:
    """Pairwise temporal coherence for the lowest ``qubits`` qubits (default all).

    Uses C[a,b] = total - m_a - m_b + 2*E[b_a b_b], where m_a = P(qubit a = 1).
    """
    n = register.qubits if qubits is None else qubits
    if n < 1:
        raise ValueError(f"qubits must be positive, got {n}")
    register.check_qubit(n - 1)
    p = probabilities(register)
    idx = np.arange(register.dim)
    bits = ((idx[:, None] >> np.arange(n)[None, :]) & 1).astype(np.float64)
    joint = (bits * p[:, None]).T @ bits
    ones = np.diag(joint)
    return float(np.sum(p)) - ones[:, None] - ones[None, :] + 2.0 * joint


def marginal_one(register: QuantumRegister, qubit: int) -> float:
    """Probability of measuring ``qubit`` as 1."""
    qubit = register.check_qubit(qubit)
    idx = np.arange(register.dim)
    return float(np.sum(probabilities(register)[_bit(idx, qubit) == 1]))


def fidelity(register: QuantumRegister) -> float:
    """Probability mass at |00...0>."""
    return float(magnitude_squared(register.amplitude(0)))


def entropy(register: QuantumRegister, cutoff: float = ENTROPY_CUTOFF) -> float:
    """Entropy of the measurement distribution, nats. 0 for a basis state."""
    p = probabilities(register)
    p = p[p > cutoff]
    return float(-np.sum(p * np.log(p)))


def tomography(register: QuantumRegister, cutoff: float = TOMOGRAPHY_CUTOFF) -> Iterator[tuple[int, float]]:
    """Yield (basis_index, probability) for every state above ``cutoff``.

    Each call recomputes from the current register state.
    """
    p = probabilities(register)
    for index in np.flatnonzero(p > cutoff):
        yield int(index), float(p[index])


def basis_label(index: int, qubits: int) -> str:
    return f"|{index:0{qubits}b}⟩"


def describe_state(register: QuantumRegister, qubits: int) -> list[str]:
    """Amplitude listing for basis indices [0, 2^qubits)."""
    qubits = min(qubits, register.qubits)
    amps = register.amplitudes[: 1 << qubits]
    lines = []
    for i, a in enumerate(amps):
        p = float(magnitude_squared(a))
        lines.append(f"{basis_label(i, qubits)}: {a.real:.6f} + {a.imag:.6f}i (P={p:.6f})")
    return lines


@dataclass(frozen=True)
class TomographyReport:
    entries: list[tuple[int, float]]
    total_probability: float
    entropy: float
    qubits: int

    def lines(self) -> list[str]:
        out = [f"State {basis_label(i, self.qubits)}: P = {p:.6f}" for i, p in self.entries]
        out.append(f"Total probability: {self.total_probability:.6f}")
        out.append(f"von Neumann entropy: {self.entropy:.6f}")
        return out


def tomography_report(register: QuantumRegister) -> TomographyReport:
    return TomographyReport(
        entries=list(tomography(register)),
        total_probability=float(np.sum(probabilities(register))),
        entropy=entropy(register),
        qubits=register.qubits,
    )
