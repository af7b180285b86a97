"""Loading analysis reports from JSON text or files."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from chesstrainer.core.errors import ReportFormatError
from chesstrainer.review.models import MultiGameAnalysisReport

_LOGGER = logging.getLogger(__name__)

# Models sometimes wrap the JSON in a fenced code block despite instructions.
_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def parse_report(text: str) -> MultiGameAnalysisReport:
    """Parse the analysis supplier's raw answer.

    Raises:
        ReportFormatError: not JSON, or not shaped like a report.
    """
    raw = text.strip()
    fenced = _FENCE_RE.match(raw)
    if fenced:
        raw = fenced.group(1)
    if not raw:
        raise ReportFormatError("Report is empty")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReportFormatError(f"Report is not valid JSON: {exc}") from exc
    report = MultiGameAnalysisReport.from_dict(data)
    _LOGGER.info(
        "Parsed report for %r: %d themes, %d examples",
        report.player_name,
        len(report.recurring_themes),
        report.example_count,
    )
    return report


def load_report(path: Path | str) -> MultiGameAnalysisReport:
    """Read and parse a report file.

    Raises:
        OSError: the file cannot be read.
        ReportFormatError: the content is not a report.
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_report(text)
