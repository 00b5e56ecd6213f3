import csv
from datetime import date
from pathlib import Path
from time import sleep

from fourier_fit import config
from fourier_fit.filters import available_filters
from fourier_fit.utils import profiler
from scripts import generate_data

DEFAULT_CUTOFF_DAYS = 4.2
DEFAULT_ORDER = 4
DEFAULT_BODE_POINTS = 100


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.log_level == "INFO"
    assert settings.default_filter == "butterworth"
    assert settings.cutoff_period_days == DEFAULT_CUTOFF_DAYS
    assert settings.filter_order == DEFAULT_ORDER
    assert settings.ripple_db > 0
    assert settings.attenuation_db > 0
    assert settings.sample_rate == 1.0
    assert settings.bode_points == DEFAULT_BODE_POINTS
    assert settings.candle_length == "weekly"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("FILTER_ORDER", "6")
    monkeypatch.setenv("DEFAULT_FILTER", "chebyshev2")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.filter_order == 6
    assert settings.default_filter == "chebyshev2"


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is None or stats.peak_rss_bytes > 0
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)
    assert stats.as_dict()["label"] == "sleep"


def test_available_filters_contains_known_entries():
    names = available_filters()
    assert names == ["butterworth", "chebyshev1", "chebyshev2"]


def test_generate_data_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "weights.csv"
    written = generate_data._generate_rows_csv(csv_path, days=10, seed=123)
    assert written == 10
    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + 10 rows
    assert len(rows) == 11
    assert rows[0] == ["date", "weight"]
    assert rows[1][0] == date(2024, 1, 1).isoformat()
    float(rows[1][1])


def test_generate_data_skips_keep_first_and_last_day(tmp_path: Path):
    csv_path = tmp_path / "weights.csv"
    written = generate_data._generate_rows_csv(csv_path, days=30, seed=1, skip_fraction=0.5)
    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))[1:]
    assert len(rows) == written < 30
    assert rows[0][0] == "2024-01-01"
    assert rows[-1][0] == "2024-01-30"
