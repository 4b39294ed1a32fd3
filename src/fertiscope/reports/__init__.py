"""Reports module for FertiScope."""

from fertiscope.reports.generator import (
    ClinicalReportGenerator,
    format_findings_summary,
    generate_report,
)

__all__ = [
    "ClinicalReportGenerator",
    "format_findings_summary",
    "generate_report",
]
