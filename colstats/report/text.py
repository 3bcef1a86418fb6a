"""
Plain-text analysis report.

render_report() lays out one analyzed column: header block, the full
statistical summary, the skewness/kurtosis interpretation and the first
values of the 4-point moving average.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from colstats.report.formatting import format_value

if TYPE_CHECKING:
    from colstats.descriptive.solution import StatisticsSolution

RULE = "=" * 40
THIN_RULE = "-" * 40


def _section(title: str) -> list[str]:
    return [THIN_RULE, title.center(40).rstrip(), THIN_RULE, ""]


def render_report(
    solution: 'StatisticsSolution',
    *,
    source: str | None = None,
    column: str | None = None,
    generated: datetime | None = None,
    preview: int = 10,
) -> str:
    """
    Render the analysis report for one column.

    Parameters
    ----------
    solution : StatisticsSolution
        Output of describe().
    source : str, optional
        Source file name shown in the header.
    column : str, optional
        Column name; defaults to the design's name.
    generated : datetime, optional
        Timestamp shown in the header; now() when omitted.
    preview : int
        How many 4-point moving-average values to list.
    """
    from colstats.smoothing import four_point_moving_average

    column = column or solution.name or "<unnamed>"
    generated = generated or datetime.now()

    lines = [
        RULE,
        "COLUMN STATISTICS - ANALYSIS REPORT".center(40).rstrip(),
        RULE,
        "",
        f"Source File: {source or '<unknown>'}",
        f"Column Analyzed: {column}",
        f"Generated: {generated:%Y-%m-%d %H:%M:%S}",
        "",
    ]

    lines += _section("STATISTICAL SUMMARY")
    for key, value in solution.full_analysis().items():
        lines.append(f"{key:<25} : {format_value(value)}")
    lines.append("")

    lines += _section("INTERPRETATION")
    lines.append(f"Skewness: {solution.skewness_interpretation}")
    lines.append(f"Kurtosis: {solution.kurtosis_interpretation}")
    lines.append("")

    lines += _section("MOVING AVERAGES")
    ma4 = four_point_moving_average(solution.design)
    lines.append(f"4-Point Moving Average values: {len(ma4)}")
    if len(ma4) and preview > 0:
        shown = ", ".join(format_value(v) for v in ma4.values[:preview])
        lines.append(f"First {min(preview, len(ma4))}: {shown}")
    lines.append("")

    lines += [RULE, "END OF REPORT".center(40).rstrip(), RULE]
    return "\n".join(lines) + "\n"


def write_report(path: str | Path, text: str) -> Path:
    """Write report text as UTF-8 and return the path written."""
    path = Path(path)
    path.write_text(text, encoding='utf-8')
    return path
