"""Deterministic, cyclic color assignment for plotted series.

Colors depend only on a series' position in the list, never on its identity:
re-ordering the series re-colors them.
"""

from __future__ import annotations

from typing import Any, Sequence

# Series colors, in assignment order (blue, emerald, amber, red, violet, cyan).
DEFAULT_PALETTE: tuple[str, ...] = (
    "#2563EB",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#06B6D4",
)


def color_for_index(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    """Return the palette entry for the index-th series (wraps around).

    Raises:
        ValueError: If palette is empty.
    """
    if len(palette) == 0:
        raise ValueError("palette must contain at least one color")
    return palette[index % len(palette)]


def assign_colors(series: Sequence[Any], palette: Sequence[str] = DEFAULT_PALETTE) -> list[str]:
    """Return one color per series, by position."""
    if len(palette) == 0:
        raise ValueError("palette must contain at least one color")
    return [color_for_index(i, palette) for i in range(len(series))]
