"""Unit tests for complex arithmetic and the QuantumRegister."""

import numpy as np
import pytest

from chronoq.core.complex_ops import complex_add, complex_multiply, magnitude_squared
from chronoq.core.errors import AllocationError, QubitIndexError
from chronoq.core.register import QuantumRegister


# ---------------------------------------------------------------------------
# Complex amplitude arithmetic
# ---------------------------------------------------------------------------

class TestComplexOps:

    def test_multiply(self):
        assert complex_multiply(1 + 2j, 3 - 1j) == pytest.approx(5 + 5j)

    def test_add(self):
        assert complex_add(1 + 2j, -0.5 + 0.25j) == pytest.approx(0.5 + 2.25j)

    def test_magnitude_squared(self):
        assert magnitude_squared(3 + 4j) == pytest.approx(25.0)

    def test_array_broadcast(self):
        a = np.array([1j, 2.0, 1 + 1j])
        np.testing.assert_allclose(magnitude_squared(a), [1.0, 4.0, 2.0])
        np.testing.assert_allclose(complex_multiply(1j, a), [-1.0, 2j, -1 + 1j])


# ---------------------------------------------------------------------------
# Register lifecycle
# ---------------------------------------------------------------------------

class TestRegisterLifecycle:

    def test_ground_state(self):
        reg = QuantumRegister(4)
        assert reg.qubits == 4
        assert reg.dim == 16
        assert reg.amplitude(0) == 1.0
        assert np.count_nonzero(reg.amplitudes) == 1

    def test_reference_width(self):
        reg = QuantumRegister(16)
        assert reg.dim == 65536
        assert reg.norm_squared() == pytest.approx(1.0)

    def test_reset_after_mutation(self):
        reg = QuantumRegister(3)
        reg.replace(np.full(8, 1 / np.sqrt(8), dtype=np.complex128))
        reg.reset()
        assert reg.amplitude(0) == 1.0
        assert reg.norm_squared() == pytest.approx(1.0)

    def test_reset_new_width(self):
        reg = QuantumRegister(3)
        reg.reset(5)
        assert reg.dim == 32

    def test_zero_qubits_rejected(self):
        with pytest.raises(AllocationError):
            QuantumRegister(0)

    def test_memory_bound(self):
        with pytest.raises(AllocationError):
            QuantumRegister(10, max_state_bytes=1024)

    def test_amplitudes_read_only(self):
        reg = QuantumRegister(2)
        with pytest.raises(ValueError):
            reg.amplitudes[0] = 0.0

    def test_replace_shape_mismatch(self):
        reg = QuantumRegister(2)
        with pytest.raises(ValueError):
            reg.replace(np.zeros(8, dtype=np.complex128))

    def test_copy_is_independent(self):
        reg = QuantumRegister(2)
        snapshot = reg.copy_state()
        snapshot[0] = 0.0
        assert reg.amplitude(0) == 1.0


class TestQubitIndex:

    @pytest.mark.parametrize("qubit", [-1, 3, 100])
    def test_out_of_range(self, qubit):
        reg = QuantumRegister(3)
        with pytest.raises(QubitIndexError):
            reg.check_qubit(qubit)

    def test_valid(self):
        reg = QuantumRegister(3)
        assert reg.check_qubit(2) == 2

    @pytest.mark.parametrize("qubit", [1.7, 1.0, "1", None])
    def test_non_integer_rejected(self, qubit):
        reg = QuantumRegister(3)
        with pytest.raises(QubitIndexError):
            reg.check_qubit(qubit)

    def test_numpy_integer_accepted(self):
        reg = QuantumRegister(3)
        assert reg.check_qubit(np.int64(1)) == 1
