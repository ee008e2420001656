"""Decoherence model: amplitude damping toward |00...0> plus renormalization.

Iteration s (0-indexed) scales every amplitude except index 0 by
exp(-s * rate), then divides the whole vector by its L2 norm. The decay is
applied to the live state, so after n iterations a non-ground amplitude has
been attenuated relative to the ground amplitude by

    prod_{s=0}^{n-1} exp(-s * rate) = exp(-rate * n(n-1)/2)

i.e. quadratic in time.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from chronoq.core.complex_ops import magnitude_squared
from chronoq.core.errors import NormalizationError
from chronoq.core.register import QuantumRegister

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


def decay_factor(step: int, rate: float) -> float:
    return math.exp(-step * rate)


def cumulative_attenuation(steps: int, rate: float) -> float:
    """Net non-ground/ground amplitude ratio change after ``steps`` iterations."""
    return math.exp(-rate * steps * (steps - 1) / 2)


def renormalize(state: np.ndarray) -> tuple[np.ndarray, float]:
    """Return (state / ||state||, ||state||); NormalizationError on a bad norm."""
    norm = math.sqrt(float(np.sum(magnitude_squared(state))))
    if not math.isfinite(norm) or norm <= 0.0:
        raise NormalizationError(f"Cannot renormalize state with norm {norm}")
    return state / norm, norm


def apply_decoherence(register: QuantumRegister, time_steps: int, rate: float) -> None:
    """Run ``time_steps`` damping + renormalization iterations at ``rate``."""
    logger.debug("Simulating decoherence over %d time steps at rate %g", time_steps, rate)
    state = register.copy_state()
    for step in range(time_steps):
        factor = decay_factor(step, rate)
        state[1:] *= factor
        state, norm = renormalize(state)
        if step % PROGRESS_EVERY == 0:
            logger.debug("Decoherence step %d: norm=%.9g, decay_factor=%.9g", step, norm, factor)
    register.replace(state)
