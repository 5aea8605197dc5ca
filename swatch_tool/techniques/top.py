"""Rank the N most frequent exact colours in the image.

Counts every pixel (no sampling, no clustering). Colours are ordered by
pixel count, most frequent first; equal counts are ordered by colour value
ascending. Each entry carries its #RRGGBB hex form, RGB(r, g, b) form,
pixel count and share of the image.

With --alpha, colours that differ only in alpha are ranked separately.

Example:
    uv run swatch-tool top screenshot.png --top 20
    uv run swatch-tool top --paste --json
"""

from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.ranker import top_colours
from swatch_tool.core.types import Report, Technique

technique = Technique(
    name='top',
    help='Rank the N most frequent exact colours with hex, RGB and pixel counts.',
)


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    ranked = top_colours(grid, report.top_n, include_alpha=report.include_alpha)
    report.add(
        'top',
        {
            'top_n': report.top_n,
            'colours': [cc.to_dict(total=grid.size) for cc in ranked],
        },
    )
