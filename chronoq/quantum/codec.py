"""Message codec: classical bytes smeared into qubit superpositions.

Encoding flips qubit ``start + k`` when bit k is 1 and then applies a
Hadamard to it unconditionally, so every encoded qubit ends in an equal
superposition. Recovery thresholds each qubit's marginal P(1) at 0.5 but
always reports failure: information smeared into amplitude and then
decohered is treated as unrecoverable, whatever the bits happen to read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chronoq.core.engine import apply_single_qubit_gate
from chronoq.core.gates import Gate
from chronoq.core.register import QuantumRegister
from chronoq.core.resources import ResourceCounters
from chronoq.quantum.analysis import marginal_one

logger = logging.getLogger(__name__)

BITS_PER_CHAR = 8
BIT_THRESHOLD = 0.5
PRINTABLE = range(32, 127)


def message_bits(message: str) -> str:
    """UTF-8 bytes of ``message`` as a '0'/'1' string, 8 bits per byte."""
    return "".join(f"{byte:08b}" for byte in message.encode("utf-8"))


def encodable_bits(register: QuantumRegister, bit_count: int, start_qubit: int) -> int:
    """How many of ``bit_count`` bits fit between ``start_qubit`` and the top qubit."""
    start_qubit = register.check_qubit(start_qubit)
    return max(0, min(bit_count, register.qubits - start_qubit))


def bits_to_text(bits: str) -> str:
    """Group into bytes; keep only printable ASCII (32-126). Trailing partial byte dropped."""
    chars = []
    for i in range(0, len(bits) - BITS_PER_CHAR + 1, BITS_PER_CHAR):
        value = int(bits[i:i + BITS_PER_CHAR], 2)
        if value in PRINTABLE:
            chars.append(chr(value))
    return "".join(chars)


@dataclass(frozen=True)
class EncodedMessage:
    message: str
    bits: str
    start_qubit: int
    qubits_used: int

    @property
    def encoded_bits(self) -> str:
        return self.bits[: self.qubits_used]


@dataclass(frozen=True)
class RecoveryResult:
    """Outcome of a recovery attempt. ``success`` is False by contract."""

    bits: str
    text: str
    marginals: list[float] = field(default_factory=list)
    success: bool = False

    def agreement(self, original_bits: str) -> float:
        """Fraction of recovered bits equal to the original ones (diagnostic only)."""
        n = min(len(self.bits), len(original_bits))
        if n == 0:
            return 0.0
        return sum(a == b for a, b in zip(self.bits[:n], original_bits[:n])) / n


def encode_message(
    register: QuantumRegister,
    message: str,
    start_qubit: int,
    resources: ResourceCounters | None = None,
) -> EncodedMessage:
    logger.info("Encoding message: '%s' starting at qubit %d", message, start_qubit)
    bits = message_bits(message)
    logger.debug("Binary representation: %s", bits)

    used = encodable_bits(register, len(bits), start_qubit)
    for k in range(used):
        qubit = start_qubit + k
        if bits[k] == "1":
            apply_single_qubit_gate(register, qubit, Gate.PAULI_X, resources)
        apply_single_qubit_gate(register, qubit, Gate.HADAMARD, resources)

    if used < len(bits):
        logger.debug("Register holds %d of %d message bits", used, len(bits))
    logger.info("Message encoded in quantum state")
    return EncodedMessage(message=message, bits=bits, start_qubit=start_qubit, qubits_used=used)


def recover_message(register: QuantumRegister, message_length: int, start_qubit: int) -> RecoveryResult:
    """Threshold-measure the encoded qubits. Always reports failure."""
    logger.info("Attempting to recover message from quantum state")
    count = encodable_bits(register, message_length * BITS_PER_CHAR, start_qubit)
    marginals = [marginal_one(register, start_qubit + k) for k in range(count)]
    bits = "".join("1" if p > BIT_THRESHOLD else "0" for p in marginals)
    text = bits_to_text(bits)
    logger.info("Message recovery attempt completed")
    return RecoveryResult(bits=bits, text=text, marginals=marginals)
