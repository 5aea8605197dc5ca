"""Distinct colour statistics for the whole image.

Reports the total pixel count, how many exact distinct colours occur, and
which colour dominates along with its share.

Example:
    uv run swatch-tool distinct screenshot.png
"""

from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.ranker import count_colours
from swatch_tool.core.types import Colour, Report, Technique

technique = Technique(
    name='distinct',
    help='Count distinct exact colours and report the dominant one.',
)


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    counts = count_colours(grid, include_alpha=report.include_alpha)
    data: dict = {'total': grid.size, 'distinct': len(counts)}
    if counts:
        value, count = min(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        data['dominant'] = Colour.from_int(value, report.include_alpha).hex
        data['dominant_pct'] = round(count / grid.size * 100, 1)
    report.add('distinct', data)
