from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from fourier_fit.utils.formatting import fmt_complex, fmt_tick

MAX_ROOT_ROWS = 12
MAX_CANDLE_ROWS = 10


def _complex(pair: Dict[str, float]) -> complex:
    return complex(pair["re"], pair["im"])


def _summary_table(results: List[Dict[str, Any]]) -> Table:
    table = Table(title="Fourier Fit Results", box=box.ROUNDED)
    table.add_column("Filter", style="cyan", no_wrap=True)
    table.add_column("Samples", justify="right", style="magenta")
    table.add_column("Cutoff (days)", justify="right")
    table.add_column("Order", justify="right")
    table.add_column("Stable", justify="center")
    table.add_column("Top period (days)", justify="right", style="green")
    table.add_column("Duration (s)", justify="right", style="yellow")
    table.add_column("Error", style="red")

    for res in results:
        params = res.get("params", {})
        peaks = res.get("spectrum_peaks") or []
        top_period = "N/A"
        if peaks and peaks[0]["freq"] > 0:
            top_period = fmt_tick(1.0 / peaks[0]["freq"])
        stable = res.get("stable")
        table.add_row(
            res.get("label", res.get("filter", "Unknown")),
            f"{res.get('rows', 0):,}",
            fmt_tick(params.get("cutoff_period", 0.0)),
            str(params.get("order", "")),
            "N/A" if stable is None else ("[green]yes[/green]" if stable else "[red]no[/red]"),
            top_period,
            f"{res.get('duration_seconds', 0.0):.4f}",
            res.get("error") or "",
        )
    return table


def _roots_table(res: Dict[str, Any]) -> Table:
    zeros = [_complex(z) for z in res.get("zeros", [])]
    poles = [_complex(p) for p in res.get("poles", [])]
    table = Table(title=f"{res.get('label', res.get('filter'))}: z-plane", box=box.SIMPLE)
    table.add_column("Zeros (z-plane)", style="white")
    table.add_column("Poles (z-plane)", style="white")
    rows = max(len(zeros), len(poles))
    if rows == 0:
        table.add_row("(none)", "(none)")
    for i in range(min(rows, MAX_ROOT_ROWS)):
        table.add_row(
            fmt_complex(zeros[i]) if i < len(zeros) else "",
            fmt_complex(poles[i]) if i < len(poles) else "",
        )
    if rows > MAX_ROOT_ROWS:
        table.caption = f"{rows - MAX_ROOT_ROWS} more not shown"
    return table


def _bode_table(res: Dict[str, Any], points: int = 8) -> Table:
    bode = res.get("bode") or {}
    freqs = bode.get("freqs", [])
    mags = bode.get("magnitude", [])
    dbs = bode.get("magnitude_db", [])
    table = Table(title="Bode magnitude", box=box.SIMPLE)
    table.add_column("Frequency (cycles/day)", justify="right")
    table.add_column("|H|", justify="right")
    table.add_column("dB", justify="right")
    if not freqs:
        return table
    step = max(len(freqs) // points, 1)
    for i in sorted(set(list(range(0, len(freqs), step))[:points] + [len(freqs) - 1])):
        mag = mags[i]
        db = dbs[i]
        table.add_row(
            fmt_tick(freqs[i]),
            "NaN" if mag is None else fmt_tick(mag),
            "-inf" if db is None else fmt_tick(db),
        )
    return table


def _candles_table(res: Dict[str, Any]) -> Table:
    candles = res.get("candles") or []
    table = Table(title=f"Candles ({res.get('candle_length', '')})", box=box.SIMPLE)
    for col in ("t", "Open", "High", "Low", "Close"):
        table.add_column(col, justify="right")
    for c in candles[-MAX_CANDLE_ROWS:]:
        style = "green" if c["close"] >= c["open"] else "red"
        table.add_row(
            f"{c['t']:.0f}",
            fmt_tick(c["open"]),
            fmt_tick(c["high"]),
            fmt_tick(c["low"]),
            fmt_tick(c["close"]),
            style=style,
        )
    return table


def print_results(
    results: List[Dict[str, Any]],
    console: Optional[Console] = None,
    details: bool = True,
) -> None:
    """
    Render filter results as rich tables.

    A summary row per filter, then the pole/zero listing, a thinned Bode
    table and the most recent candles for each successful filter.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    console.print(_summary_table(results))
    if not details:
        return

    for res in results:
        if res.get("error"):
            continue
        console.print(_roots_table(res))
        console.print(_bode_table(res))
        if res.get("candles"):
            console.print(_candles_table(res))
