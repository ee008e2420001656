"""Simulator exception hierarchy."""

from __future__ import annotations


class SimulatorError(Exception):
    """Base exception for all simulator errors."""


class UnknownGateError(SimulatorError):
    """Gate name not in the catalog, or wrong arity for the requested path."""


class QubitIndexError(SimulatorError):
    """Qubit index outside [0, qubits)."""


class AllocationError(SimulatorError):
    """State vector too large (or too small) to allocate."""


class NormalizationError(SimulatorError):
    """State norm is zero or non-finite."""
