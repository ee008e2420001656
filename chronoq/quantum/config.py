"""Simulator configuration: the reference FPGA hardware profile."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self

from chronoq.core.register import DEFAULT_MAX_STATE_BYTES


@dataclass(frozen=True)
class SimulatorConfig:
    qubits: int = 16
    clock_freq_mhz: float = 250.0
    memory_depth: int = 65536
    pipeline_stages: int = 8
    coherence_time_ns: int = 1_000_000
    entanglement_fidelity: float = 0.99
    decoherence_rate: float = 0.001
    error_correction: bool = True
    clock_steps: int = 100
    evolution_steps: int = 1000
    message_offset: int = 4
    coherence_threshold: float = 0.5
    coherence_tolerance: float = 1e-9
    max_state_bytes: int = DEFAULT_MAX_STATE_BYTES

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.qubits < 1:
            raise ValueError(f"qubits must be positive, got {self.qubits}")
        if self.clock_freq_mhz <= 0:
            raise ValueError(f"clock_freq_mhz must be positive, got {self.clock_freq_mhz}")
        if self.clock_steps < 1 or self.evolution_steps < 1:
            raise ValueError(
                f"step counts must be positive, got clock_steps={self.clock_steps}, "
                f"evolution_steps={self.evolution_steps}"
            )
        if self.message_offset < 0:
            raise ValueError(f"message_offset must be non-negative, got {self.message_offset}")

    # --- Construction / serialization ---

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_json(cls, path: str | Path) -> Self:
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_json(self, path: str | Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def replace(self, **overrides: Any) -> Self:
        return dataclasses.replace(self, **overrides)
