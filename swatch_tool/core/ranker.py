"""Exact-match colour frequency ranking.

One pass over the grid counts every distinct colour value, then the pairs
are ordered by count descending. Equal counts are ordered by packed colour
value ascending so results are reproducible.

Alpha is ignored for colour identity unless include_alpha is set, in which
case two pixels with equal RGB but different alpha are distinct colours.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future
from numbers import Integral

import numpy as np

from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.palette import RGB_MASK
from swatch_tool.core.types import Colour, ColourCount, InvalidInput

DEFAULT_TOP_N = 20


def _check_grid(grid: PixelGrid) -> None:
    if grid is None:
        raise InvalidInput('grid is None')
    if not isinstance(grid, PixelGrid):
        raise InvalidInput(f'Expected a PixelGrid, got {type(grid).__name__}')


def _unique_counts(grid: PixelGrid, include_alpha: bool) -> tuple[np.ndarray, np.ndarray]:
    values = grid.pixels.ravel()
    if not include_alpha:
        values = values & np.uint32(RGB_MASK)
    return np.unique(values, return_counts=True)


def count_colours(grid: PixelGrid, include_alpha: bool = False) -> dict[int, int]:
    """Map every distinct packed colour in the grid to its pixel count."""
    _check_grid(grid)
    values, counts = _unique_counts(grid, include_alpha)
    return {int(v): int(c) for v, c in zip(values, counts)}


def top_colours(grid: PixelGrid, top_n: int = DEFAULT_TOP_N, include_alpha: bool = False) -> list[ColourCount]:
    """Return the top_n most frequent colours, most frequent first.

    Result length is min(top_n, distinct colours). An empty grid or
    top_n == 0 gives an empty list.
    """
    _check_grid(grid)
    if isinstance(top_n, bool) or not isinstance(top_n, Integral) or top_n < 0:
        raise InvalidInput(f'top_n must be a non-negative integer, got {top_n!r}')
    if top_n == 0 or grid.size == 0:
        return []

    values, counts = _unique_counts(grid, include_alpha)
    # lexsort sorts by the last key first: count descending, then value ascending
    order = np.lexsort((values, -counts.astype(np.int64)))[:top_n]
    return [ColourCount(Colour.from_int(int(values[i]), include_alpha), int(counts[i])) for i in order]


def rank_in_background(
    executor: Executor,
    grid: PixelGrid,
    top_n: int = DEFAULT_TOP_N,
    include_alpha: bool = False,
) -> Future:
    """Submit top_colours to an executor so an interactive caller stays responsive."""
    return executor.submit(top_colours, grid, top_n, include_alpha)
