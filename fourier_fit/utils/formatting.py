"""Number formatting for axis ticks and complex roots."""

from __future__ import annotations

from typing import Iterable


def fmt_tick(v: float) -> str:
    av = abs(v)
    if (0.0 < av < 0.01) or av >= 10_000.0:
        return f"{v:.2e}"
    if av >= 100.0:
        return f"{v:.0f}"
    if av >= 10.0:
        return f"{v:.1f}"
    return f"{v:.2f}"


def fmt_complex(z: complex) -> str:
    return f"{z.real:+.6f} {z.imag:+.6f}j"


def fmt_roots(roots: Iterable[complex]) -> str:
    """One root per line, or "(none)" for an empty set."""
    lines = [fmt_complex(z) for z in roots]
    return "\n".join(lines) if lines else "(none)"


__all__ = ["fmt_tick", "fmt_complex", "fmt_roots"]
