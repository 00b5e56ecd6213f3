"""
Dated weight log backed by a two-column CSV file (``date,weight``).

Entries are keyed by calendar day. ``to_daily_series`` turns the log into
the evenly sampled series the filters expect, filling skipped days by
linear interpolation.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from fourier_fit.domain.models import WeightEntry
from fourier_fit.errors import InvalidDateError, WeightLogError
from fourier_fit.utils.logging import get_logger

log = get_logger(__name__)

CSV_COLUMNS = ["date", "weight"]


def parse_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError() from exc


class WeightLog:
    """In-memory weight log with CSV persistence."""

    def __init__(self, entries: Optional[Dict[date, float]] = None) -> None:
        self.data: Dict[date, float] = dict(entries or {})

    def __len__(self) -> int:
        return len(self.data)

    def log_entry(self, day: date, text: str) -> WeightEntry:
        """Parse ``text`` as a weight and store it for ``day``, replacing any previous value."""
        try:
            weight = float(text.strip())
        except (AttributeError, ValueError) as exc:
            raise WeightLogError(f"{text} is not a number.", code="not_a_number") from exc
        if not np.isfinite(weight):
            raise WeightLogError(f"{text} is not a number.", code="not_a_number")
        self.data[day] = weight
        return WeightEntry(day=day, weight=weight)

    def display_for(self, day: date) -> str:
        """Stored weight for ``day`` as text, or an empty string."""
        value = self.data.get(day)
        return "" if value is None else str(value)

    def entries(self) -> List[WeightEntry]:
        return [WeightEntry(day=d, weight=w) for d, w in sorted(self.data.items())]

    def to_daily_series(self) -> np.ndarray:
        """One value per day from the first to the last entry, gaps interpolated."""
        if not self.data:
            return np.empty(0, dtype=float)
        series = pd.Series(self.data, dtype=float)
        series.index = pd.to_datetime(series.index)
        series = series.sort_index().asfreq("D").interpolate(method="linear")
        return series.to_numpy(dtype=float)

    @classmethod
    def load(cls, path: Path | str) -> "WeightLog":
        file_path = Path(path)
        if not file_path.exists():
            raise WeightLogError(f"{file_path} does not exist", code="missing_file")
        try:
            df = pd.read_csv(file_path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise WeightLogError(
                f"Unable to read {file_path}: {exc}", code="unreadable_file", original_exception=exc
            ) from exc

        missing = [c for c in CSV_COLUMNS if c not in df.columns]
        if missing:
            raise WeightLogError(
                f"{file_path} is missing columns: {', '.join(missing)}",
                code="missing_columns",
                details={"missing": missing},
            )
        try:
            days = pd.to_datetime(df["date"], format="%Y-%m-%d").dt.date
            weights = pd.to_numeric(df["weight"])
        except (ValueError, TypeError) as exc:
            raise WeightLogError(
                f"Malformed rows in {file_path}: {exc}", code="malformed_rows", original_exception=exc
            ) from exc

        # Blank cells parse as NaN/NaT.
        bad = (~np.isfinite(weights.to_numpy(dtype=float))) | days.isna().to_numpy()
        if bad.any():
            rows = [int(i) + 2 for i in np.flatnonzero(bad)]
            raise WeightLogError(
                f"Malformed rows in {file_path}: missing or non-finite values on line(s) "
                f"{', '.join(str(r) for r in rows)}",
                code="malformed_rows",
                details={"lines": rows},
            )

        weight_log = cls({d: float(w) for d, w in zip(days, weights)})
        log.info("Loaded weight log", extra={"path": str(file_path), "entries": len(weight_log)})
        return weight_log

    def save(self, path: Path | str) -> Path:
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        rows = sorted(self.data.items())
        df = pd.DataFrame(
            {
                "date": [d.isoformat() for d, _ in rows],
                "weight": [w for _, w in rows],
            },
            columns=CSV_COLUMNS,
        )
        df.to_csv(file_path, index=False)
        log.info("Saved weight log", extra={"path": str(file_path), "entries": len(rows)})
        return file_path


__all__ = ["CSV_COLUMNS", "WeightLog", "parse_date"]
