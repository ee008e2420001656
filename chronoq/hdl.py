"""Static Verilog artifact describing the conceptual FPGA pipeline.

Pure text generation for reporting; the simulator never reads it back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from string import Template

from chronoq.quantum.config import SimulatorConfig

logger = logging.getLogger(__name__)

STATE_WIDTH = 32

_TEMPLATE = Template("""\
// Generated quantum circuit for FPGA implementation
// chronoq temporal coherence engine

module quantum_processing_unit #(
    parameter QUBITS = $qubits,
    parameter STATE_WIDTH = $state_width,
    parameter CLOCK_FREQ = $clock_hz,
    parameter PIPELINE_STAGES = $pipeline_stages
)(
    input wire clk,
    input wire rst_n,
    input wire [QUBITS-1:0] gate_select,
    input wire [7:0] gate_type,
    input wire gate_enable,
    output reg [STATE_WIDTH-1:0] state_real [0:(1<<QUBITS)-1],
    output reg [STATE_WIDTH-1:0] state_imag [0:(1<<QUBITS)-1],
    output reg computation_done,
    output wire [15:0] resource_usage
);

    reg [STATE_WIDTH-1:0] quantum_state_real [0:(1<<QUBITS)-1];
    reg [STATE_WIDTH-1:0] quantum_state_imag [0:(1<<QUBITS)-1];
    reg [7:0] pipeline_stage;
    reg [31:0] decoherence_counter;
    reg [15:0] lut_usage;
    reg [15:0] bram_usage;
    reg [15:0] dsp_usage;

    assign resource_usage = lut_usage + bram_usage + dsp_usage;

    always @(posedge clk or negedge rst_n) begin
        if (!rst_n) begin
            // |00...0>
            quantum_state_real[0] <= {STATE_WIDTH{1'b1}};
            quantum_state_imag[0] <= {STATE_WIDTH{1'b0}};
            for (integer i = 1; i < (1<<QUBITS); i++) begin
                quantum_state_real[i] <= {STATE_WIDTH{1'b0}};
                quantum_state_imag[i] <= {STATE_WIDTH{1'b0}};
            end
            pipeline_stage <= 0;
            computation_done <= 0;
            decoherence_counter <= 0;
            lut_usage <= 0;
            bram_usage <= 0;
            dsp_usage <= 0;
        end else begin
            if (gate_enable) begin
                case (gate_type)
                    8'h01: begin // Hadamard
                        lut_usage <= lut_usage + 50;
                        dsp_usage <= dsp_usage + 4;
                    end
                    8'h02: begin // Pauli-X
                        lut_usage <= lut_usage + 25;
                    end
                    8'h03: begin // CNOT
                        lut_usage <= lut_usage + 200;
                        bram_usage <= bram_usage + 1;
                    end
                    8'h04: begin // Decoherence
                        decoherence_counter <= decoherence_counter + 1;
                        for (integer i = 1; i < (1<<QUBITS); i++) begin
                            quantum_state_real[i] <= quantum_state_real[i] - (quantum_state_real[i] >> 10);
                            quantum_state_imag[i] <= quantum_state_imag[i] - (quantum_state_imag[i] >> 10);
                        end
                    end
                endcase
                pipeline_stage <= pipeline_stage + 1;
                if (pipeline_stage >= PIPELINE_STAGES) begin
                    computation_done <= 1;
                    pipeline_stage <= 0;
                end
            end
            for (integer i = 0; i < (1<<QUBITS); i++) begin
                state_real[i] <= quantum_state_real[i];
                state_imag[i] <= quantum_state_imag[i];
            end
        end
    end

endmodule

module temporal_coherence_calculator #(
    parameter QUBITS = $qubits,
    parameter STATE_WIDTH = $state_width
)(
    input wire clk,
    input wire rst_n,
    input wire [STATE_WIDTH-1:0] state_real [0:(1<<QUBITS)-1],
    input wire [STATE_WIDTH-1:0] state_imag [0:(1<<QUBITS)-1],
    input wire [QUBITS-1:0] qubit_a,
    input wire [QUBITS-1:0] qubit_b,
    input wire calculate_enable,
    output reg [STATE_WIDTH-1:0] coherence_value,
    output reg calculation_done
);

    reg [STATE_WIDTH-1:0] coherence_sum;
    reg [QUBITS:0] state_counter;

    always @(posedge clk or negedge rst_n) begin
        if (!rst_n) begin
            coherence_sum <= 0;
            coherence_value <= 0;
            calculation_done <= 0;
            state_counter <= 0;
        end else if (calculate_enable) begin
            if (state_counter < (1<<QUBITS)) begin
                // accumulate |psi|^2 where bit a == bit b
                if (((state_counter >> qubit_a) & 1) == ((state_counter >> qubit_b) & 1)) begin
                    coherence_sum <= coherence_sum +
                                     (state_real[state_counter] * state_real[state_counter]) +
                                     (state_imag[state_counter] * state_imag[state_counter]);
                end
                state_counter <= state_counter + 1;
            end else begin
                coherence_value <= coherence_sum;
                calculation_done <= 1;
                state_counter <= 0;
                coherence_sum <= 0;
            end
        end
    end

endmodule
""")


def render_verilog(config: SimulatorConfig | None = None) -> str:
    config = config or SimulatorConfig()
    return _TEMPLATE.substitute(
        qubits=config.qubits,
        state_width=STATE_WIDTH,
        clock_hz=f"{int(config.clock_freq_mhz * 1_000_000):_d}",
        pipeline_stages=config.pipeline_stages,
    )


def write_verilog(path: str | Path, config: SimulatorConfig | None = None) -> Path:
    path = Path(path)
    path.write_text(render_verilog(config), encoding="utf-8")
    logger.info("Generated Verilog implementation: %s", path)
    return path
