from __future__ import annotations

import json
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from fourier_fit.config import get_settings
from fourier_fit.domain.models import CandleLength, FilterParams
from fourier_fit.errors import FourierFitError
from fourier_fit.filters import available_filters
from fourier_fit.orchestrator import RunConfig, run_filters
from fourier_fit.reporter import print_results
from fourier_fit.storage.weight_log import WeightLog, parse_date
from fourier_fit.utils.logging import configure_logging

app = typer.Typer(help="Fourier Fit: low-pass filtering and spectral analysis of a daily weight log.")


def _parse_day(value: Optional[str]) -> date:
    if value is None:
        return date.today()
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as exc:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date") from exc
    return parse_date(parsed.year, parsed.month, parsed.day)


def _load_or_new(path: Path) -> WeightLog:
    return WeightLog.load(path) if path.exists() else WeightLog()


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} data={settings.data_file} results={settings.results_dir} | "
        f"filter={settings.default_filter} cutoff={settings.cutoff_period_days}d "
        f"order={settings.filter_order} ripple={settings.ripple_db}dB "
        f"attenuation={settings.attenuation_db}dB | fs={settings.sample_rate} "
        f"bode_points={settings.bode_points} candles={settings.candle_length}"
    )


@app.command()
def filters() -> None:
    """
    List available filter designs.
    """
    typer.echo("Available filters: " + ", ".join(available_filters()))


@app.command()
def run(
    filter_name: str = typer.Option(
        "all",
        "--filter",
        "-f",
        help="Filter design to run (butterworth, chebyshev1, chebyshev2, all).",
    ),
    cutoff: Optional[float] = typer.Option(
        None, "--cutoff", "-c", help="Cutoff period in days (must exceed 2)."
    ),
    order: Optional[int] = typer.Option(None, "--order", "-n", help="Filter order."),
    ripple: Optional[float] = typer.Option(None, "--ripple", help="Chebyshev I ripple (dB)."),
    attenuation: Optional[float] = typer.Option(
        None, "--attenuation", help="Chebyshev II stop-band attenuation (dB)."
    ),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Weight CSV (date,weight). Defaults to the configured data file."
    ),
    demo: bool = typer.Option(False, "--demo", help="Use the synthetic demo series."),
    candles: Optional[CandleLength] = typer.Option(
        None, "--candles", help="Candle length (weekly, monthly, yearly)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON instead of tables."),
    persist: bool = typer.Option(True, "--persist/--no-persist", help="Write results JSON."),
    strict: bool = typer.Option(False, "--strict", help="Stop at the first failing filter."),
) -> None:
    """
    Filter the series with one or all designs and report the results.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if demo:
        data_file = None
    else:
        data_file = data or Path(settings.data_file)
        if data is None and not data_file.exists():
            typer.echo(f"{data_file} not found; using demo series.", err=True)
            data_file = None

    try:
        params = FilterParams(
            cutoff_period=cutoff if cutoff is not None else settings.cutoff_period_days,
            order=order if order is not None else settings.filter_order,
            ripple_db=ripple if ripple is not None else settings.ripple_db,
            attenuation_db=attenuation if attenuation is not None else settings.attenuation_db,
        )
    except ValidationError as exc:
        typer.echo(f"Error: invalid filter parameters: {exc.errors()[0]['msg']}", err=True)
        raise typer.Exit(code=1)

    config = RunConfig(
        filter_names=[filter_name],
        params=params,
        candle_length=candles,
        data_file=data_file,
        persist=persist,
        failure_policy="strict" if strict else "tolerant",
    )
    try:
        results = run_filters(config)
    except (FourierFitError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        # click turns an interrupt inside a command into "Aborted!" with status 1
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130)

    if as_json:
        typer.echo(json.dumps(results, indent=2))
    else:
        print_results(results)

    if any(r.get("error") for r in results):
        raise typer.Exit(code=1)


@app.command("log")
def log_weight(
    weight: str = typer.Argument(..., help="Weight to record."),
    day: Optional[str] = typer.Option(None, "--date", help="Date (YYYY-MM-DD), default today."),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Weight CSV to update."),
) -> None:
    """
    Record a weight for a date in the weight CSV.
    """
    path = data or Path(get_settings().data_file)
    try:
        weight_log = _load_or_new(path)
        entry = weight_log.log_entry(_parse_day(day), weight)
        weight_log.save(path)
    except FourierFitError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{entry.day.isoformat()}: {entry.weight} ({len(weight_log)} entries in {path})")


@app.command()
def show(
    day: Optional[str] = typer.Option(None, "--date", help="Date (YYYY-MM-DD), default today."),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Weight CSV to read."),
) -> None:
    """
    Print the recorded weight for a date.
    """
    path = data or Path(get_settings().data_file)
    try:
        weight_log = WeightLog.load(path)
        selected = _parse_day(day)
    except FourierFitError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    value = weight_log.display_for(selected)
    typer.echo(f"{selected.isoformat()}: {value or '(no entry)'}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
