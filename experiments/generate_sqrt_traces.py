"""Generate Heron's method iteration traces for precise-numbers.

This script generates JSON trace files for:
- Square roots of a fixed set of radicands at the default configuration
- The same radicands at a coarser precision and a smaller scale

Output JSON files record the seed, every approximation and the rescaled
result, so convergence can be inspected or plotted.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

from precise_numbers.algorithms.square_root import (
    ITERATION_SCALE,
    run_herons_method,
    scientific_notation_for_sqrt,
)
from precise_numbers.data.precision_types import PrecisionConfig

RADICANDS = ["2", "10", "144", "12345", "0.25", "987654321987654321"]


def generate_sqrt_traces(
    config: PrecisionConfig,
    name: str,
    output_dir: Path | None = None,
) -> None:
    """Generate one trace file per radicand for a configuration.

    Args:
        config: Precision configuration passed to the engine.
        name: Label used in output file names.
        output_dir: Output directory (defaults to experiments/traces/).
    """
    if output_dir is None:
        output_dir = Path(__file__).parent / "traces"

    output_dir.mkdir(parents=True, exist_ok=True)

    print(
        f"Generating {name} traces (precision={config.precision}, scale={config.scale})..."
    )

    for radicand in RADICANDS:
        print(f"  Running sqrt({radicand})...", end=" ", flush=True)

        trace = run_herons_method(Decimal(radicand), config)
        notation = scientific_notation_for_sqrt(Decimal(radicand))

        output = {
            "metadata": {
                "algorithm": "herons_method",
                "radicand": str(trace.value),
                "scientific_notation": notation.as_string(),
                "precision": str(config.precision),
                "scale": config.scale,
                "rounding_mode": config.rounding_mode.value,
                "iteration_scale": ITERATION_SCALE,
                "timestamp": datetime.now(UTC).isoformat(),
            },
            "summary": {
                "iterations": trace.iterations,
                "seed": str(trace.seed),
                "converged_value": str(trace.converged_value),
                "result": str(trace.result),
            },
            "trace": [
                {"iteration": i, "approximation": str(approximation)}
                for i, approximation in enumerate(trace.approximations)
            ],
        }

        output_file = output_dir / f"trace_{name}_{radicand.replace('.', '_')}.json"
        with output_file.open("w") as f:
            json.dump(output, f, indent=2)

        print(f"✓ {trace.iterations} iterations, result={trace.result}")

    print(f"\n{name} traces saved to: {output_dir}")


def main() -> None:
    """Generate all square-root traces."""
    print("=" * 70)
    print("Precise Numbers - Heron's Method Trace Generation")
    print("=" * 70)

    output_dir = Path(__file__).parent / "traces"

    generate_sqrt_traces(PrecisionConfig(), "default", output_dir)
    generate_sqrt_traces(
        PrecisionConfig(precision=Decimal("1E-9"), scale=4), "coarse", output_dir
    )

    print("\n" + "=" * 70)
    print("✓ All traces generated successfully!")
    print("=" * 70)
    print(f"\nOutput directory: {output_dir.absolute()}")
    print("\nGenerated files:")
    for trace_file in sorted(output_dir.glob("trace_*.json")):
        size_kb = trace_file.stat().st_size / 1024
        print(f"  - {trace_file.name} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
