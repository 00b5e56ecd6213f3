"""
OHLC candles over fixed-size chunks of a series.

Chunks do not overlap and a trailing partial chunk is dropped, so every
candle summarises exactly ``per_candle`` samples.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from fourier_fit.domain.models import Candle
from fourier_fit.errors import CandleError


def vec_to_candles(data: Sequence[float], per_candle: int) -> List[Candle]:
    if per_candle == 0:
        raise CandleError("Cannot have a chunk size of zero in candle making function")
    if per_candle < 0:
        raise CandleError(f"Chunk size must be positive, got {per_candle}")

    samples = np.asarray(data, dtype=float)
    n_full = samples.size // per_candle
    chunks = samples[: n_full * per_candle].reshape(n_full, per_candle)
    return [
        Candle(
            t=float(i),
            open=float(chunk[0]),
            close=float(chunk[-1]),
            high=float(chunk.max()),
            low=float(chunk.min()),
        )
        for i, chunk in enumerate(chunks)
    ]


__all__ = ["vec_to_candles"]
