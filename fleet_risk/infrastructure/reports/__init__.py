"""Infrastructure helpers for persisting risk reports."""

from .risk_report import (
    FileSystemRiskReportRepository,
    profiles_to_frame,
    summary_to_dict,
)

__all__ = [
    "FileSystemRiskReportRepository",
    "profiles_to_frame",
    "summary_to_dict",
]
