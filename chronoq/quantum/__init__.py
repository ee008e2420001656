"""chronoq quantum layer: decoherence, analysis, message codec, experiments.

Public API:
  - Config: SimulatorConfig
  - Decoherence: apply_decoherence, cumulative_attenuation
  - Analysis: temporal_coherence, coherence_matrix, entropy, fidelity,
    tomography, tomography_report, marginal_one, describe_state
  - Codec: encode_message, recover_message, EncodedMessage, RecoveryResult
  - Experiments: Simulator, entangled_clock_experiment,
    message_recovery_experiment, run_self_tests, run_full_simulation,
    run_experiment, EXPERIMENTS
"""

from chronoq.quantum.config import SimulatorConfig
from chronoq.quantum.decoherence import (
    apply_decoherence,
    cumulative_attenuation,
    decay_factor,
    renormalize,
)
from chronoq.quantum.analysis import (
    temporal_coherence,
    coherence_matrix,
    entropy,
    fidelity,
    tomography,
    tomography_report,
    TomographyReport,
    marginal_one,
    describe_state,
)
from chronoq.quantum.codec import (
    encode_message,
    recover_message,
    message_bits,
    bits_to_text,
    EncodedMessage,
    RecoveryResult,
)
from chronoq.quantum.experiments import (
    Simulator,
    ClockExperimentResult,
    MessageExperimentResult,
    SelfTestReport,
    SimulationReport,
    entangled_clock_experiment,
    message_recovery_experiment,
    enhanced_decoherence_rate,
    run_self_tests,
    run_full_simulation,
    run_experiment,
    EXPERIMENTS,
)

__all__ = [
    "SimulatorConfig",
    "apply_decoherence", "cumulative_attenuation", "decay_factor", "renormalize",
    "temporal_coherence", "coherence_matrix", "entropy", "fidelity",
    "tomography", "tomography_report", "TomographyReport",
    "marginal_one", "describe_state",
    "encode_message", "recover_message", "message_bits", "bits_to_text",
    "EncodedMessage", "RecoveryResult",
    "Simulator", "ClockExperimentResult", "MessageExperimentResult",
    "SelfTestReport", "SimulationReport",
    "entangled_clock_experiment", "message_recovery_experiment",
    "enhanced_decoherence_rate", "run_self_tests", "run_full_simulation",
    "run_experiment", "EXPERIMENTS",
]
