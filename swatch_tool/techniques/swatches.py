"""Render the ranked colours as a swatch sheet PNG.

One row per ranked colour: rank, a filled swatch block, the hex and RGB
forms, and the pixel count. Saved to <out>/swatches.png.

Requires --out. Without it the technique reports an error and writes nothing.

Example:
    uv run swatch-tool swatches screenshot.png --out ./tmp --top 12
"""

import os

from PIL import Image, ImageDraw, ImageFont

from swatch_tool.core.grid import PixelGrid
from swatch_tool.core.palette import luminance
from swatch_tool.core.ranker import top_colours
from swatch_tool.core.types import ColourCount, Report, Technique

technique = Technique(
    name='swatches',
    help='Render the ranked colours as a swatch sheet PNG. Requires --out.',
)

ROW_HEIGHT = 40
SWATCH_WIDTH = 80
SHEET_WIDTH = 460
PADDING = 6
BACKGROUND = (255, 255, 255)
INK = (33, 33, 33)


def render_sheet(ranked: list[ColourCount]) -> Image.Image:
    """Draw a sheet with one row per colour. An empty ranking gives a single blank row."""
    rows = max(len(ranked), 1)
    sheet = Image.new('RGB', (SHEET_WIDTH, rows * ROW_HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(sheet)
    font = ImageFont.load_default()

    for i, cc in enumerate(ranked):
        top = i * ROW_HEIGHT
        x0 = 40
        draw.text((PADDING, top + ROW_HEIGHT // 2 - 6), f'#{i + 1}', fill=INK, font=font)
        block = (x0, top + PADDING, x0 + SWATCH_WIDTH, top + ROW_HEIGHT - PADDING)
        draw.rectangle(block, fill=cc.colour.rgb, outline=INK)
        # Hex label inside the block, in whichever ink reads on that colour
        label_ink = (0, 0, 0) if luminance(*cc.colour.rgb) > 128 else (255, 255, 255)
        draw.text((x0 + PADDING, top + ROW_HEIGHT // 2 - 6), cc.hex, fill=label_ink, font=font)
        text_x = x0 + SWATCH_WIDTH + 2 * PADDING
        draw.text((text_x, top + PADDING), cc.rgb, fill=INK, font=font)
        draw.text((text_x, top + ROW_HEIGHT // 2), f'Count: {cc.count:,} pixels', fill=INK, font=font)

    return sheet


@technique.run
def run(grid: PixelGrid, report: Report, args) -> None:
    out_dir = getattr(args, 'out', None)
    if not out_dir:
        report.add('swatches', {'error': '--out directory required'})
        return

    ranked = top_colours(grid, report.top_n, include_alpha=report.include_alpha)
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, 'swatches.png')
    render_sheet(ranked).save(path)
    report.add('swatches', {'file': path, 'rows': len(ranked)})
