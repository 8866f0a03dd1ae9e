"""Report builder — text and JSON summaries of a conversion."""

import json
from typing import Any

from img2header.core.types import ConversionReport


def format_text(report: ConversionReport) -> str:
    """Format report as human-readable text."""
    dim = f'{report.width}×{report.height}'
    lines = [f'img2header: {report.source} ({dim}) → {report.dialect}']

    if report.indexed:
        lines.append(f'  palette: {report.palette_size}/{report.color_limit} colours')
        if report.overflow_pixels:
            lines.append(f'  nearest-matched: {report.overflow_pixels} pixel(s)')
    else:
        lines.append('  direct colour (no palette)')

    lines.append(f'  identifier: {report.identifier or "(empty)"}')
    if report.output_path:
        lines.append(f'  output: {report.output_path}')
    return '\n'.join(lines)


def format_json(report: ConversionReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'source': report.source,
        'dimensions': {'width': report.width, 'height': report.height},
        'dialect': report.dialect,
        'mode': 'indexed' if report.indexed else 'direct',
        'identifier': report.identifier,
    }
    if report.indexed:
        obj['palette'] = {
            'size': report.palette_size,
            'limit': report.color_limit,
            'overflow_pixels': report.overflow_pixels,
        }
    if report.output_path:
        obj['output'] = report.output_path
    return json.dumps(obj, indent=2)
