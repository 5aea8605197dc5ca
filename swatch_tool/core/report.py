"""Report builder — text and JSON output for swatch-tool results."""

import json
from typing import Any

from swatch_tool.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.image_width}×{report.image_height}'
    header = f'swatch-tool: {report.source} ({dim}, {report.total_pixels:,} pixels)'
    if report.include_alpha:
        header += ', alpha counted'
    lines.append(header)
    lines.append('')

    for tech_name, data in report.sections.items():
        if 'error' in data:
            lines.append(f'── {tech_name}')
            lines.append(f'  error: {data["error"]}')
        elif tech_name == 'top':
            lines.append(f'── Top {data["top_n"]} Colours')
            if not data['colours']:
                lines.append('  (no colours)')
            for rank, c in enumerate(data['colours'], start=1):
                pct = f' ({c["pct"]:.1f}%)' if 'pct' in c else ''
                alpha = f'  A={c["a"]}' if 'a' in c else ''
                lines.append(
                    f'  #{rank:<3} {c["hex"]}  {c["rgb"]:<20}{alpha}  Count: {c["count"]:,} pixels{pct}'
                )
        elif tech_name == 'distinct':
            lines.append('── distinct')
            lines.append(f'  distinct colours: {data["distinct"]:,} of {data["total"]:,} pixels')
            if data.get('dominant'):
                lines.append(f'  dominant: {data["dominant"]} ({data["dominant_pct"]:.1f}%)')
        elif tech_name == 'swatches':
            lines.append('── swatches')
            lines.append(f'  sheet: {data["file"]} ({data["rows"]} rows)')
        else:
            lines.append(f'── {tech_name}')
            for k, v in data.items():
                lines.append(f'  {tech_name}.{k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip() + '\n'


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'source': report.source,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
        'total_pixels': report.total_pixels,
        'include_alpha': report.include_alpha,
        'techniques': report.sections,
    }
    return json.dumps(obj, indent=2)
