"""Command line driver.

    python -m chronoq [full_simulation|tests|clocks_only|message_only] [message] [time_delta]
"""

from __future__ import annotations

import argparse
import logging
import sys

from chronoq.core.errors import SimulatorError
from chronoq.hdl import write_verilog
from chronoq.logs import configure_logging
from chronoq.quantum.config import SimulatorConfig
from chronoq.quantum.experiments import (
    DEFAULT_MESSAGE,
    DEFAULT_TIME_DELTA,
    EXPERIMENTS,
    Simulator,
    run_experiment,
)

logger = logging.getLogger("chronoq.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chronoq",
        description="Quantum state-vector simulation of backward-in-time message transmission.",
    )
    parser.add_argument("operation", nargs="?", default="full_simulation", choices=EXPERIMENTS)
    parser.add_argument("message", nargs="?", default=DEFAULT_MESSAGE)
    parser.add_argument("time_delta", nargs="?", type=float, default=DEFAULT_TIME_DELTA,
                        help="signed time delta in seconds")
    parser.add_argument("--qubits", type=int, default=None, help="override register width")
    parser.add_argument("--config", default=None, help="JSON hardware profile")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verilog", default=None, help="write the Verilog artifact to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "INFO", args.log_file)

    try:
        config = SimulatorConfig.from_json(args.config) if args.config else SimulatorConfig()
        if args.qubits is not None:
            config = config.replace(qubits=args.qubits)

        logger.info("Quantum Listening Time Simulator")
        logger.info("Operation: %s", args.operation)
        if args.verilog:
            write_verilog(args.verilog, config)

        result = run_experiment(args.operation, Simulator(config), args.message, args.time_delta)
    except (SimulatorError, ValueError, OSError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 2

    logger.info("Simulation completed")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
