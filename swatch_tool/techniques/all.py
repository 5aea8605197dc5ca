"""Run every technique, combine into a single report.

Runs: distinct, top.
Runs swatches too if --out is provided.

Example:
    uv run swatch-tool all screenshot.png
    uv run swatch-tool all screenshot.png --out ./tmp --json
"""

from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.types import Report, Technique

technique = Technique(
    name='all',
    help='Run every technique. Combine into a single report.',
)


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    from swatch_tool.registry import all_techniques

    has_out = bool(getattr(args, 'out', None))
    for name, tech in sorted(all_techniques().items()):
        if name == 'all':
            continue
        # swatches only runs when --out is provided
        if name == 'swatches' and not has_out:
            continue
        tech.execute(grid, report, args)
