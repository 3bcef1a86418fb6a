"""
Report module.

Display formatting for statistic values and the plain-text analysis
report.

Public API:
    format_value(v)          - 'N/A' / '0' / scientific / fixed rendering
    format_fixed(v)          - Always fixed notation
    format_scientific(v)     - Always scientific notation
    render_report(solution)  - Full text report for one column
    write_report(path, text) - Save a report
"""

from colstats.report.formatting import format_value, format_fixed, format_scientific
from colstats.report.text import render_report, write_report

__all__ = [
    "format_value",
    "format_fixed",
    "format_scientific",
    "render_report",
    "write_report",
]
