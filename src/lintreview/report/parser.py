"""Read Android Lint XML reports into :class:`Issue` records."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from lintreview.core.errors import PreconditionError
from lintreview.core.models import Issue

_LEADING_DIGITS = re.compile(r"\s*([+-]?\d+)")


def read_report(path: Path) -> list[dict[str, str | None]]:
    """Return one raw record per ``<issue>`` element, in document order."""
    try:
        tree = ET.parse(path)
    except ET.ParseError as exc:
        raise PreconditionError(f"Lint report at `{path}` is not valid XML: {exc}") from exc

    records: list[dict[str, str | None]] = []
    for node in tree.getroot().iter("issue"):
        location = node.find("location")
        records.append({
            "id": node.get("id"),
            "severity": node.get("severity"),
            "message": node.get("message"),
            "file": location.get("file") if location is not None else None,
            "line": location.get("line") if location is not None else None,
        })
    return records


def normalize(record: dict[str, str | None]) -> Issue:
    """Map a raw record onto an Issue without validating its values."""
    return Issue(
        id=record.get("id") or "",
        severity=record.get("severity") or "",
        file=record.get("file") or "",
        line=_parse_line(record.get("line")),
        message=record.get("message") or "",
    )


def load_issues(path: Path) -> list[Issue]:
    return [normalize(record) for record in read_report(path)]


def _parse_line(value: str | None) -> int:
    if not value:
        return 0
    match = _LEADING_DIGITS.match(value)
    return int(match.group(1)) if match else 0
