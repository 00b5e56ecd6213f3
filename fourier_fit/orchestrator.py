"""
Orchestrator for running filter designs over a series, profiling each run
and persisting the results.

Usage (example from CLI):
    from fourier_fit.orchestrator import RunConfig, run_filters

    results = run_filters(RunConfig(filter_names=["butterworth", "chebyshev2"]))

Outputs are saved to ``results/`` by default:
- ``results/latest.json`` (last run)
- ``results/run-<timestamp>.json`` (timestamped archive)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Sequence

import numpy as np

from fourier_fit.analysis.bode import magnitude_to_db
from fourier_fit.analysis.roots import is_stable
from fourier_fit.analysis.spectrum import dominant_bins, rfft_freqs
from fourier_fit.config import get_settings
from fourier_fit.domain.models import CandleLength, FilterParams, FilterType
from fourier_fit.errors import FourierFitError
from fourier_fit.filters import available_filters
from fourier_fit.session import FilterSession
from fourier_fit.storage.weight_log import WeightLog
from fourier_fit.utils.logging import get_logger
from fourier_fit.utils.profiler import profile_block

log = get_logger(__name__)

FailurePolicy = Literal["tolerant", "strict"]


@dataclass
class RunConfig:
    """
    Everything one orchestrated run needs.

    ``data`` wins over ``data_file``; with neither, the demo series is used.
    """

    filter_names: Optional[Sequence[str]] = None
    params: Optional[FilterParams] = None
    candle_length: Optional[CandleLength] = None
    data: Optional[Sequence[float]] = None
    data_file: Optional[Path | str] = None
    results_dir: Optional[Path | str] = None
    persist: bool = True
    failure_policy: FailurePolicy = "tolerant"
    spectrum_peaks: int = 5
    extra: Dict[str, Any] = field(default_factory=dict)


def _default_params() -> FilterParams:
    settings = get_settings()
    return FilterParams(
        cutoff_period=settings.cutoff_period_days,
        order=settings.filter_order,
        ripple_db=settings.ripple_db,
        attenuation_db=settings.attenuation_db,
    )


def _resolve_names(filter_names: Optional[Sequence[str]]) -> List[str]:
    names = list(filter_names) if filter_names else ["all"]
    if len(names) == 1 and names[0] == "all":
        return available_filters()
    unknown = [n for n in names if n not in available_filters()]
    if unknown:
        raise ValueError(
            f"Unknown filter '{unknown[0]}'. Available: {', '.join(available_filters())}"
        )
    return names


def load_series(config: RunConfig) -> tuple[np.ndarray, str]:
    """Return the input series and a label describing where it came from."""
    if config.data is not None:
        return np.asarray(config.data, dtype=float), "inline"
    if config.data_file is not None:
        series = WeightLog.load(config.data_file).to_daily_series()
        return series, str(config.data_file)
    session = FilterSession()
    session.set_demo_data()
    return session.raw_data, "demo"


def _complex_pairs(roots: Optional[Sequence[complex]]) -> List[Dict[str, float]]:
    return [{"re": float(z.real), "im": float(z.imag)} for z in roots or []]


def _finite_or_none(values: np.ndarray) -> List[Optional[float]]:
    return [float(v) if math.isfinite(v) else None for v in values]


def _session_result(session: FilterSession, config: RunConfig) -> Dict[str, Any]:
    """Serialisable summary of a completed session."""
    filtered = session.filtered_data
    freqs, mags = session.bode_plot
    spectrum = session.data_spectrum
    bins = rfft_freqs(filtered.filtered.size, session.sample_rate)
    return {
        "rows": int(session.raw_data.size),
        "stable": is_stable(session.poles),
        "b": [float(v) for v in filtered.b],
        "a": [float(v) for v in filtered.a],
        "zeros": _complex_pairs(session.zeros),
        "poles": _complex_pairs(session.poles),
        "bode": {
            "freqs": [float(f) for f in freqs],
            "magnitude": _finite_or_none(mags),
            "magnitude_db": _finite_or_none(magnitude_to_db(mags)),
        },
        "spectrum_peaks": [
            {"freq": f, "magnitude": m}
            for f, m in dominant_bins(spectrum, bins, config.spectrum_peaks)
        ],
        "filtered": [float(v) for v in filtered.filtered],
        "candles": [c.model_dump() for c in session.candles or []],
    }


def _run_one(
    name: str,
    series: np.ndarray,
    params: FilterParams,
    candle_length: CandleLength,
    config: RunConfig,
) -> Dict[str, Any]:
    log.info(f"[FILTER START] {name}", extra={"filter": name})
    result: Dict[str, Any] = {}
    with profile_block(name) as stats:
        try:
            session = FilterSession()
            session.set_data(series)
            session.set_filter_type(FilterType(name))
            session.set_cutoff_period(params.cutoff_period)
            session.set_order(params.order)
            session.set_ripple(params.ripple_db)
            session.set_attenuation(params.attenuation_db)
            session.set_candle_length(candle_length)
            session.calculate()
            result = _session_result(session, config)
            result["error"] = None
            log.info(f"[FILTER SUCCESS] {name}", extra={"filter": name, "rows": result["rows"]})
        except FourierFitError as exc:
            if config.failure_policy == "strict":
                raise
            log.warning(f"[FILTER FAILED] {name}: {exc}", extra={"filter": name, **exc.to_dict()})
            result = {"rows": int(series.size), "error": str(exc), "extra": exc.to_dict()}

    result["filter"] = name
    result["label"] = FilterType(name).label
    result["params"] = params.model_dump()
    result["candle_length"] = candle_length.value
    result["profile"] = stats.as_dict()
    result["duration_seconds"] = round(stats.duration_seconds, 4)
    result["peak_rss_bytes"] = stats.peak_rss_bytes
    return result


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


def run_filters(config: Optional[RunConfig] = None) -> List[Dict[str, Any]]:
    """
    Run one or more filter designs over the configured series.

    Parameters
    ----------
    config : RunConfig | None
        Run options; defaults come from settings.

    Returns
    -------
    List[dict]
        One result dictionary per filter design, in run order. In tolerant
        mode a failing design yields a dict with ``error`` set; in strict
        mode the first failure propagates.
    """
    config = config or RunConfig()
    settings = get_settings()
    names = _resolve_names(config.filter_names)
    params = config.params or _default_params()
    candle_length = config.candle_length or CandleLength(settings.candle_length)
    series, source = load_series(config)

    log.info(
        "[ORCHESTRATOR START]",
        extra={"filters": names, "source": source, "samples": int(series.size)},
    )
    results = [_run_one(name, series, params, candle_length, config) for name in names]

    if config.persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": source,
            "filters": names,
            "results": results,
        }
        _persist_results(payload, Path(config.results_dir or settings.results_dir))

    failed = [r["filter"] for r in results if r.get("error")]
    log.info(
        f"[ORCHESTRATOR COMPLETE] {len(names) - len(failed)}/{len(names)} filter(s) succeeded",
        extra={"filters": names, "failed": failed},
    )
    return results


__all__ = ["FailurePolicy", "RunConfig", "load_series", "run_filters"]
