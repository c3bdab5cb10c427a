"""
Loading of saved ffprobe reports.

Reports are produced elsewhere, for example with::

    ffprobe -v quiet -print_format json -show_format -show_streams \\
        -show_chapters input.mkv > report.json
"""

import json
from pathlib import Path
from typing import Union

from ..models import ProbeResult
from ..utils import ProbeReportError, get_logger
from .mapper import parse_probe_report

logger = get_logger(__name__)


def load_probe_report(source: Union[Path, str]) -> ProbeResult:
    """
    Read and map a JSON probe report.

    Args:
        source: Path to a report file, or the JSON text itself

    Returns:
        Mapped ProbeResult

    Raises:
        ProbeReportError: If the file cannot be read, the JSON is invalid,
            or the top-level value is not an object
    """
    path = source if isinstance(source, Path) else None

    if path is not None:
        logger.info(f"Loading probe report: {path.name}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProbeReportError(f"Cannot read probe report: {e}", source=path)
    else:
        text = source

    try:
        report = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProbeReportError(f"Failed to parse probe report: {e}", source=path)

    if not isinstance(report, dict):
        raise ProbeReportError(
            f"Probe report must be a JSON object, got {type(report).__name__}", source=path
        )

    return parse_probe_report(report)
