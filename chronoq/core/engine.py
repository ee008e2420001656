"""Gate engine: single-qubit unitaries and the CNOT permutation.

Every application computes a fresh vector from the prior state and swaps
it into the register, so no amplitude is read after being overwritten.
"""

from __future__ import annotations

import logging

import numpy as np

from chronoq.core.complex_ops import complex_add, complex_multiply
from chronoq.core.errors import QubitIndexError, UnknownGateError
from chronoq.core.gates import Gate
from chronoq.core.register import QuantumRegister
from chronoq.core.resources import ResourceCounters

logger = logging.getLogger(__name__)


def apply_single_qubit_gate(
    register: QuantumRegister,
    target: int,
    gate: Gate | str,
    resources: ResourceCounters | None = None,
) -> None:
    """Apply a 2x2 catalog gate to ``target``.

    For index i with bit ``target`` = 0 and its partner f = i ^ (1 << target):
      new[i] = m00*old[i] + m01*old[f]
      new[f] = m10*old[i] + m11*old[f]
    """
    gate = Gate.from_name(gate)
    if not gate.is_single_qubit:
        raise UnknownGateError(f"{gate.value} is not a single-qubit gate")
    target = register.check_qubit(target)
    logger.debug("Applying %s gate to qubit %d", gate.value, target)

    (m00, m01), (m10, m11) = gate.matrix
    # Axis 1 of the (high, bit, low) view is the target bit.
    old = register.amplitudes.reshape(-1, 2, 1 << target)
    old0 = old[:, 0, :]
    old1 = old[:, 1, :]

    new = np.empty_like(old)
    new[:, 0, :] = complex_add(complex_multiply(m00, old0), complex_multiply(m01, old1))
    new[:, 1, :] = complex_add(complex_multiply(m10, old0), complex_multiply(m11, old1))
    register.replace(new.reshape(-1))

    if resources is not None:
        resources.record_single_qubit_gate()


def apply_cnot(
    register: QuantumRegister,
    control: int,
    target: int,
    resources: ResourceCounters | None = None,
) -> None:
    """Flip ``target`` on every basis state where ``control`` is 1.

    Each (control=1, target=0) index is paired with its target=1 partner
    exactly once.
    """
    control = register.check_qubit(control)
    target = register.check_qubit(target)
    if control == target:
        raise QubitIndexError(f"CNOT control and target must differ (both {control})")
    logger.debug("Applying CNOT gate: control=%d, target=%d", control, target)

    old = register.amplitudes
    idx = np.arange(register.dim)
    low = idx[((idx >> control) & 1 == 1) & ((idx >> target) & 1 == 0)]
    high = low | (1 << target)

    new = old.copy()
    new[low] = old[high]
    new[high] = old[low]
    register.replace(new)

    if resources is not None:
        resources.record_cnot()


def apply_gate(
    register: QuantumRegister,
    gate: Gate | str,
    *qubits: int,
    resources: ResourceCounters | None = None,
) -> None:
    """Dispatch on gate arity: ``apply_gate(reg, "CNOT", 0, 1)``."""
    gate = Gate.from_name(gate)
    if gate is Gate.CNOT:
        if len(qubits) != 2:
            raise ValueError(f"CNOT takes 2 qubits, got {len(qubits)}")
        apply_cnot(register, qubits[0], qubits[1], resources)
    elif gate.is_single_qubit:
        if len(qubits) != 1:
            raise ValueError(f"{gate.value} takes 1 qubit, got {len(qubits)}")
        apply_single_qubit_gate(register, qubits[0], gate, resources)
    else:
        raise UnknownGateError(f"{gate.value} has no application kernel")
