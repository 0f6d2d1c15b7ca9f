"""Report builder — text and JSON output for geomedian results."""

import json
from typing import Any

from geomedian.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.image_width}×{report.image_height}'
    header = f'geomedian: {report.image_path} ({dim})'
    if report.origin != (0, 0):
        header += f' at origin {report.origin[0]},{report.origin[1]}'
    lines.append(header)
    lines.append('')

    for tech_name, data in report.results.items():
        lines.append(f'── {tech_name}')
        if 'error' in data:
            lines.append(f'  error: {data["error"]}')
        elif tech_name == 'point':
            lines.append(f'  median: ({data["x"]}, {data["y"]})')
            lines.append(f'  background: {data["background"]}')
        elif tech_name == 'projections':
            for axis in ('horizontal', 'vertical'):
                proj = data[axis]
                lines.append(
                    f'  {axis}: total={proj["total"]} half={proj["half"]} '
                    f'index={proj["index"]} counts={proj["counts"]}'
                )
        elif tech_name == 'mark':
            lines.append(f'  wrote: {data["file"]}')
            lines.append(f'  cross: {data["h_size"]}×{data["v_size"]} {data["colour"]}')
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {tech_name}.{k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'image': report.image_path,
        'dimensions': {'width': report.image_width, 'height': report.image_height},
        'origin': {'x': report.origin[0], 'y': report.origin[1]},
        'techniques': report.results,
    }
    errors = report.errors
    if errors:
        obj['errors'] = errors
    return json.dumps(obj, indent=2)
