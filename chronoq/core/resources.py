"""Simulated FPGA resource bookkeeping.

Purely for reporting: nothing here feeds back into the numerics.
"""

from __future__ import annotations

from dataclasses import dataclass

LUT_LIMIT = 100_000
BRAM_LIMIT = 500
DSP_LIMIT = 1_000
BASE_POWER_MW = 100

# Per-operation costs
SINGLE_GATE_LUT = 50
SINGLE_GATE_DSP = 4
SINGLE_GATE_CYCLES = 10
CNOT_LUT = 200
CNOT_BRAM = 1
CNOT_CYCLES = 25
EVOLUTION_STEP_CYCLES = 100


@dataclass
class ResourceCounters:
    lut_usage: int = 0
    bram_usage: int = 0
    dsp_usage: int = 0
    clock_cycles: int = 0
    power_mw: int = BASE_POWER_MW

    def reset(self) -> None:
        self.lut_usage = 0
        self.bram_usage = 0
        self.dsp_usage = 0
        self.clock_cycles = 0
        self.power_mw = BASE_POWER_MW

    def record_single_qubit_gate(self) -> None:
        self.lut_usage += SINGLE_GATE_LUT
        self.dsp_usage += SINGLE_GATE_DSP
        self.clock_cycles += SINGLE_GATE_CYCLES

    def record_cnot(self) -> None:
        self.lut_usage += CNOT_LUT
        self.bram_usage += CNOT_BRAM
        self.clock_cycles += CNOT_CYCLES

    def record_cycles(self, cycles: int) -> None:
        self.clock_cycles += cycles

    def within_limits(self) -> bool:
        return (
            self.lut_usage < LUT_LIMIT
            and self.bram_usage < BRAM_LIMIT
            and self.dsp_usage < DSP_LIMIT
        )

    def execution_time_us(self, clock_freq_mhz: float) -> float:
        """Simulated wall time: cycles / MHz = microseconds."""
        return self.clock_cycles / clock_freq_mhz

    def report(self, clock_freq_mhz: float) -> list[str]:
        return [
            f"LUT Usage: {self.lut_usage}/{LUT_LIMIT} ({self.lut_usage * 100 // LUT_LIMIT}%)",
            f"BRAM Usage: {self.bram_usage}/{BRAM_LIMIT} ({self.bram_usage * 100 // BRAM_LIMIT}%)",
            f"DSP Usage: {self.dsp_usage}/{DSP_LIMIT} ({self.dsp_usage * 100 // DSP_LIMIT}%)",
            f"Clock Cycles: {self.clock_cycles}",
            f"Power Consumption: {self.power_mw} mW",
            f"Execution Time: {self.execution_time_us(clock_freq_mhz):g} us",
        ]

    def to_dict(self) -> dict:
        return {
            "lut_usage": self.lut_usage,
            "bram_usage": self.bram_usage,
            "dsp_usage": self.dsp_usage,
            "clock_cycles": self.clock_cycles,
            "power_mw": self.power_mw,
        }
