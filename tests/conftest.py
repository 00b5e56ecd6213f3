"""
Pytest configuration for Fourier Fit.

Provides fixtures for:
- Settings isolation (no stray env vars, .env files or cached settings)
- The demo series and small synthetic weight logs on disk
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Generator

import numpy as np
import pytest

from fourier_fit.config import get_settings
from fourier_fit.session import demo_series
from scripts.generate_data import _generate_rows_csv

_SETTINGS_ENV = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "DATA_FILE",
    "RESULTS_DIR",
    "SAMPLE_RATE",
    "BODE_POINTS",
    "DEFAULT_FILTER",
    "CUTOFF_PERIOD_DAYS",
    "FILTER_ORDER",
    "RIPPLE_DB",
    "ATTENUATION_DB",
    "CANDLE_LENGTH",
)


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """
    Run every test from an empty working directory with default settings.

    Results and data files land under tmp_path, and a developer's .env can
    not leak into assertions about defaults.
    """
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def demo() -> np.ndarray:
    return demo_series()


@pytest.fixture
def weights_csv(tmp_path: Path) -> Path:
    """A 120-day synthetic weight log with a few skipped days."""
    path = tmp_path / "weights.csv"
    _generate_rows_csv(path, days=120, seed=7, start=date(2024, 1, 1), skip_fraction=0.1)
    return path
