"""Tests for the gate catalog and gate engine."""

import numpy as np
import pytest

from chronoq.core.engine import apply_cnot, apply_gate, apply_single_qubit_gate
from chronoq.core.errors import QubitIndexError, UnknownGateError
from chronoq.core.gates import Gate, SINGLE_QUBIT_GATES
from chronoq.core.register import QuantumRegister
from chronoq.core.resources import ResourceCounters


def _random_state(qubits, seed=0):
    rng = np.random.default_rng(seed)
    v = rng.normal(size=1 << qubits) + 1j * rng.normal(size=1 << qubits)
    return v / np.linalg.norm(v)


def _full_operator(gate, target, qubits):
    """Kronecker reference: qubit b is bit b, so the highest qubit goes first."""
    ops = [np.eye(2, dtype=np.complex128)] * qubits
    ops[qubits - 1 - target] = gate.matrix
    out = ops[0]
    for op in ops[1:]:
        out = np.kron(out, op)
    return out


# ═══════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════

class TestCatalog:

    def test_from_name_case_insensitive(self):
        assert Gate.from_name("hadamard") is Gate.HADAMARD
        assert Gate.from_name(" PAULI_Y ") is Gate.PAULI_Y
        assert Gate.from_name(Gate.T_GATE) is Gate.T_GATE

    def test_unknown_name(self):
        with pytest.raises(UnknownGateError):
            Gate.from_name("SQRT_SWAP")

    @pytest.mark.parametrize("gate", list(Gate))
    def test_unitary(self, gate):
        m = gate.matrix
        np.testing.assert_allclose(m.conj().T @ m, np.eye(m.shape[0]), atol=1e-12)

    def test_arity(self):
        assert Gate.CNOT.arity == 2
        assert Gate.TOFFOLI.arity == 3
        assert set(SINGLE_QUBIT_GATES) == {
            Gate.HADAMARD, Gate.PAULI_X, Gate.PAULI_Y, Gate.PAULI_Z, Gate.PHASE_S, Gate.T_GATE,
        }

    def test_complex_entries(self):
        np.testing.assert_array_equal(Gate.PAULI_Y.matrix, [[0, -1j], [1j, 0]])
        np.testing.assert_array_equal(Gate.PHASE_S.matrix, [[1, 0], [0, 1j]])
        assert Gate.T_GATE.matrix[1, 1] == pytest.approx(np.exp(1j * np.pi / 4))

    def test_matrix_read_only(self):
        with pytest.raises(ValueError):
            Gate.HADAMARD.matrix[0, 0] = 0


# ═══════════════════════════════════════════════════════════════════════════
# Single-qubit application
# ═══════════════════════════════════════════════════════════════════════════

class TestSingleQubitGate:

    def test_hadamard_twice_is_identity(self):
        reg = QuantumRegister(3)
        before = reg.copy_state()
        apply_single_qubit_gate(reg, 1, Gate.HADAMARD)
        apply_single_qubit_gate(reg, 1, Gate.HADAMARD)
        np.testing.assert_allclose(reg.amplitudes, before, atol=1e-12)

    def test_pauli_x_flips_target_bit(self):
        reg = QuantumRegister(3)
        apply_single_qubit_gate(reg, 2, "PAULI_X")
        assert reg.amplitude(4) == pytest.approx(1.0)

    def test_pauli_y_on_ground(self):
        reg = QuantumRegister(1)
        apply_single_qubit_gate(reg, 0, Gate.PAULI_Y)
        np.testing.assert_allclose(reg.amplitudes, [0, 1j], atol=1e-12)

    def test_phase_s_on_one(self):
        reg = QuantumRegister(1)
        apply_single_qubit_gate(reg, 0, Gate.PAULI_X)
        apply_single_qubit_gate(reg, 0, Gate.PHASE_S)
        np.testing.assert_allclose(reg.amplitudes, [0, 1j], atol=1e-12)

    def test_t_gate_on_one(self):
        reg = QuantumRegister(1)
        apply_single_qubit_gate(reg, 0, Gate.PAULI_X)
        apply_single_qubit_gate(reg, 0, Gate.T_GATE)
        assert reg.amplitude(1) == pytest.approx(np.exp(1j * np.pi / 4))

    def test_pauli_z_after_hadamard(self):
        reg = QuantumRegister(1)
        apply_single_qubit_gate(reg, 0, Gate.HADAMARD)
        apply_single_qubit_gate(reg, 0, Gate.PAULI_Z)
        s = 1 / np.sqrt(2)
        np.testing.assert_allclose(reg.amplitudes, [s, -s], atol=1e-12)

    @pytest.mark.parametrize("gate", SINGLE_QUBIT_GATES)
    @pytest.mark.parametrize("target", [0, 1, 3])
    def test_matches_kronecker_reference(self, gate, target):
        reg = QuantumRegister(4)
        state = _random_state(4, seed=target)
        reg.replace(state.copy())
        apply_single_qubit_gate(reg, target, gate)
        expected = _full_operator(gate, target, 4) @ state
        np.testing.assert_allclose(reg.amplitudes, expected, atol=1e-12)

    def test_target_out_of_range(self):
        reg = QuantumRegister(3)
        with pytest.raises(QubitIndexError):
            apply_single_qubit_gate(reg, 3, Gate.HADAMARD)
        with pytest.raises(QubitIndexError):
            apply_single_qubit_gate(reg, -1, Gate.HADAMARD)

    def test_fractional_target_rejected(self):
        reg = QuantumRegister(3)
        with pytest.raises(QubitIndexError):
            apply_single_qubit_gate(reg, 1.7, Gate.PAULI_X)
        assert reg.amplitude(0) == 1.0

    def test_unknown_gate(self):
        reg = QuantumRegister(2)
        with pytest.raises(UnknownGateError):
            apply_single_qubit_gate(reg, 0, "FREDKIN")

    def test_two_qubit_gate_rejected(self):
        reg = QuantumRegister(2)
        with pytest.raises(UnknownGateError):
            apply_single_qubit_gate(reg, 0, Gate.CNOT)

    def test_failed_gate_leaves_state(self):
        reg = QuantumRegister(2)
        apply_single_qubit_gate(reg, 0, Gate.HADAMARD)
        before = reg.copy_state()
        with pytest.raises(QubitIndexError):
            apply_single_qubit_gate(reg, 5, Gate.PAULI_X)
        np.testing.assert_array_equal(reg.amplitudes, before)


# ═══════════════════════════════════════════════════════════════════════════
# CNOT
# ═══════════════════════════════════════════════════════════════════════════

class TestCNOT:

    def test_bell_pair(self):
        reg = QuantumRegister(2)
        apply_single_qubit_gate(reg, 0, Gate.HADAMARD)
        apply_cnot(reg, 0, 1)
        s = 1 / np.sqrt(2)
        np.testing.assert_allclose(reg.amplitudes, [s, 0, 0, s], atol=1e-12)

    @pytest.mark.parametrize("control,target", [(0, 1), (1, 0), (0, 3), (3, 2)])
    def test_involution(self, control, target):
        reg = QuantumRegister(4)
        state = _random_state(4, seed=control * 7 + target)
        reg.replace(state.copy())
        apply_cnot(reg, control, target)
        apply_cnot(reg, control, target)
        np.testing.assert_array_equal(reg.amplitudes, state)

    def test_permutation(self):
        reg = QuantumRegister(3)
        state = _random_state(3, seed=5)
        reg.replace(state.copy())
        apply_cnot(reg, 2, 0)
        idx = np.arange(8)
        source = np.where((idx >> 2) & 1 == 1, idx ^ 1, idx)
        np.testing.assert_array_equal(reg.amplitudes, state[source])

    def test_control_equals_target(self):
        reg = QuantumRegister(2)
        with pytest.raises(QubitIndexError):
            apply_cnot(reg, 1, 1)

    def test_out_of_range(self):
        reg = QuantumRegister(2)
        with pytest.raises(QubitIndexError):
            apply_cnot(reg, 0, 2)


# ═══════════════════════════════════════════════════════════════════════════
# Dispatch, resources, normalization
# ═══════════════════════════════════════════════════════════════════════════

class TestApplyGate:

    def test_dispatch_by_arity(self):
        reg = QuantumRegister(2)
        apply_gate(reg, "HADAMARD", 0)
        apply_gate(reg, "CNOT", 0, 1)
        assert abs(reg.amplitude(3)) ** 2 == pytest.approx(0.5)

    def test_wrong_qubit_count(self):
        reg = QuantumRegister(2)
        with pytest.raises(ValueError):
            apply_gate(reg, "CNOT", 0)
        with pytest.raises(ValueError):
            apply_gate(reg, "PAULI_X", 0, 1)

    def test_toffoli_not_applicable(self):
        reg = QuantumRegister(3)
        with pytest.raises(UnknownGateError):
            apply_gate(reg, Gate.TOFFOLI, 0, 1, 2)


class TestResourceCounters:

    def test_single_qubit_costs(self):
        reg = QuantumRegister(2)
        res = ResourceCounters()
        apply_single_qubit_gate(reg, 0, Gate.HADAMARD, res)
        assert (res.lut_usage, res.dsp_usage, res.clock_cycles) == (50, 4, 10)

    def test_cnot_costs(self):
        reg = QuantumRegister(2)
        res = ResourceCounters()
        apply_cnot(reg, 0, 1, res)
        assert (res.lut_usage, res.bram_usage, res.clock_cycles) == (200, 1, 25)

    def test_limits_and_report(self):
        res = ResourceCounters(lut_usage=100_000)
        assert not res.within_limits()
        res.reset()
        assert res.within_limits()
        res.record_cycles(500)
        assert res.execution_time_us(250) == pytest.approx(2.0)
        assert any("Clock Cycles: 500" in line for line in res.report(250))


class TestNormalizationInvariant:

    def test_random_gate_sequence(self):
        rng = np.random.default_rng(42)
        reg = QuantumRegister(5)
        for _ in range(60):
            if rng.random() < 0.3:
                c, t = rng.choice(5, size=2, replace=False)
                apply_cnot(reg, int(c), int(t))
            else:
                gate = SINGLE_QUBIT_GATES[rng.integers(len(SINGLE_QUBIT_GATES))]
                apply_single_qubit_gate(reg, int(rng.integers(5)), gate)
            assert reg.norm_squared() == pytest.approx(1.0, abs=1e-6)
