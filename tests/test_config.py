"""Tests for SimulatorConfig construction, validation and JSON round-trips."""

import json

import pytest

from chronoq.quantum.config import SimulatorConfig


class TestDefaults:

    def test_reference_profile(self):
        cfg = SimulatorConfig()
        assert cfg.qubits == 16
        assert cfg.clock_freq_mhz == 250.0
        assert cfg.memory_depth == 65536
        assert cfg.pipeline_stages == 8
        assert cfg.coherence_time_ns == 1_000_000
        assert cfg.entanglement_fidelity == 0.99
        assert cfg.decoherence_rate == 0.001
        assert cfg.error_correction is True

    def test_experiment_parameters(self):
        cfg = SimulatorConfig()
        assert cfg.clock_steps == 100
        assert cfg.evolution_steps == 1000
        assert cfg.message_offset == 4
        assert cfg.coherence_threshold == 0.5

    def test_frozen(self):
        cfg = SimulatorConfig()
        with pytest.raises(AttributeError):
            cfg.qubits = 4


class TestValidation:

    @pytest.mark.parametrize("overrides", [
        {"qubits": 0},
        {"clock_freq_mhz": 0.0},
        {"clock_steps": -1},
        {"clock_steps": 0},
        {"evolution_steps": -5},
        {"evolution_steps": 0},
        {"message_offset": -1},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValueError):
            SimulatorConfig(**overrides)

    def test_replace_validates(self):
        with pytest.raises(ValueError):
            SimulatorConfig().replace(qubits=-3)

    def test_replace(self):
        cfg = SimulatorConfig().replace(qubits=6, decoherence_rate=0.01)
        assert cfg.qubits == 6
        assert cfg.decoherence_rate == 0.01
        assert cfg.clock_steps == 100


class TestSerialization:

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="warp_drive"):
            SimulatorConfig.from_dict({"warp_drive": True})

    def test_from_dict_partial(self):
        cfg = SimulatorConfig.from_dict({"qubits": 8})
        assert cfg.qubits == 8
        assert cfg.pipeline_stages == 8

    def test_json_roundtrip(self, tmp_path):
        path = tmp_path / "profile.json"
        original = SimulatorConfig(qubits=10, clock_freq_mhz=125.0, error_correction=False)
        original.to_json(path)
        assert json.loads(path.read_text())["qubits"] == 10
        assert SimulatorConfig.from_json(path) == original

    def test_to_dict_keys(self):
        d = SimulatorConfig().to_dict()
        assert d["qubits"] == 16
        assert "max_state_bytes" in d
