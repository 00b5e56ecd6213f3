"""
Synthetic weight log generator for Fourier Fit.

Writes a deterministic ``date,weight`` CSV: a slow linear trend, a weekly
cycle, Gaussian day-to-day noise and an optional fraction of skipped days,
which exercises the interpolation in the weight log loader.
"""

from __future__ import annotations

import csv
import math
import random
import sys
import time
from datetime import date, timedelta
from pathlib import Path

import typer

from fourier_fit.storage.weight_log import CSV_COLUMNS

app = typer.Typer(help="Generate a synthetic daily weight CSV.")


def _generate_rows_csv(
    csv_path: Path,
    days: int,
    seed: int,
    start: date = date(2024, 1, 1),
    start_weight: float = 82.0,
    trend_per_day: float = -0.02,
    weekly_amplitude: float = 0.4,
    noise: float = 0.3,
    skip_fraction: float = 0.0,
) -> int:
    """Write the CSV and return the number of rows written."""
    rng = random.Random(seed)
    written = 0
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for i in range(days):
            # First and last day are always kept so the span stays `days` long.
            if 0 < i < days - 1 and rng.random() < skip_fraction:
                continue
            weight = (
                start_weight
                + trend_per_day * i
                + weekly_amplitude * math.sin(2.0 * math.pi * i / 7.0)
                + rng.gauss(0.0, noise)
            )
            writer.writerow([(start + timedelta(days=i)).isoformat(), f"{weight:.2f}"])
            written += 1
    return written


@app.command()
def main(
    days: int = typer.Option(365, "--days", "-n", help="Number of days to cover."),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
    skip_fraction: float = typer.Option(
        0.1, "--skip-fraction", help="Fraction of interior days left unrecorded."
    ),
    output: Path = typer.Option(
        Path("data/weights.csv"), "--output", "-o", help="CSV output path."
    ),
) -> None:
    """
    Generate a synthetic weight log CSV.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    typer.echo(f"Generating {days:,} days -> {output} (seed={seed}, skip={skip_fraction})")
    rows = _generate_rows_csv(output, days=days, seed=seed, skip_fraction=skip_fraction)
    typer.echo(f"Wrote {rows:,} rows in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
