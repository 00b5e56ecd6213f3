"""
Profiling helpers used around each filter analysis.

``profile_block`` records wall-clock time, the peak resident set size seen
by a background psutil sampler, the process CPU percentage and the peak of
Python allocations traced by tracemalloc.

    with profile_block("butterworth") as stats:
        session.calculate()
    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """Measurements collected by profile_block."""

    label: str
    start_ts: float = 0.0
    end_ts: float = 0.0
    duration_seconds: float = 0.0
    peak_rss_bytes: Optional[int] = None
    peak_traced_bytes: Optional[int] = None
    cpu_percent: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "peak_rss_bytes": self.peak_rss_bytes,
            "peak_traced_bytes": self.peak_traced_bytes,
            "cpu_percent": round(self.cpu_percent, 1) if self.cpu_percent is not None else None,
        }


class _RssSampler(threading.Thread):
    """Daemon thread polling the process RSS until stopped."""

    def __init__(self, process: psutil.Process, interval_s: float) -> None:
        super().__init__(daemon=True)
        self._process = process
        self._interval_s = interval_s
        self._stop_event = threading.Event()
        self.peak = process.memory_info().rss

    def run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.peak = max(self.peak, self._process.memory_info().rss)
            except psutil.Error:
                break
            self._stop_event.wait(self._interval_s)

    def stop(self) -> int:
        self._stop_event.set()
        self.join(timeout=1.0)
        return self.peak


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 20, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Profile the enclosed block.

    Parameters
    ----------
    label : str
        Name recorded on the returned stats.
    sample_interval_ms : int
        RSS polling interval for the background sampler.
    enable_tracemalloc : bool
        Track the peak of Python-level allocations. tracemalloc is only
        stopped afterwards if this block started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    process.cpu_percent(interval=None)

    started_tracing = False
    if enable_tracemalloc and not tracemalloc.is_tracing():
        tracemalloc.start()
        started_tracing = True

    sampler = _RssSampler(process, sample_interval_ms / 1000.0)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.peak_rss_bytes = sampler.stop() or None
        stats.cpu_percent = process.cpu_percent(interval=None)
        if enable_tracemalloc and tracemalloc.is_tracing():
            stats.peak_traced_bytes = tracemalloc.get_traced_memory()[1]
            if started_tracing:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
