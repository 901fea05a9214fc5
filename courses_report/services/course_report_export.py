"""Export the filtered courses report as CSV or spreadsheet-compatible tab text."""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence

from courses_report.schemas.course_report import (
    CourseStats,
    ExportFormat,
    ExportNotification,
    ReportExport,
)

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "Course Code",
    "Course Name",
    "Provider",
    "Monthly Fee",
    "Status",
    "Total Enrolments",
    "Active Enrolments",
    "Total Revenue",
    "Start Date",
    "End Date",
]

CSV_MEDIA_TYPE = "text/csv"
EXCEL_MEDIA_TYPE = "application/vnd.ms-excel"

_EXTENSIONS = {"csv": "csv", "excel": "xls"}
_FORMAT_LABELS = {"csv": "CSV", "excel": "Excel file"}


def status_label(is_active: bool) -> str:
    return "Active" if is_active else "Inactive"


def format_number(value: Decimal) -> str:
    """Render an amount as a plain numeric literal: ``100``, ``99.5``, ``0``."""
    return format(Decimal(value).normalize(), "f")


def _optional_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def build_export_rows(rows: Sequence[CourseStats]) -> List[List[str]]:
    return [
        [
            course.code,
            course.name,
            course.provider,
            format_number(course.monthly_fee),
            status_label(course.is_active),
            str(course.total_enrolments),
            str(course.active_enrolments),
            format_number(course.total_revenue),
            _optional_date(course.start_date),
            _optional_date(course.end_date),
        ]
        for course in rows
    ]


def serialize_csv(rows: Sequence[CourseStats]) -> str:
    # Cells are quoted but embedded quotes are left as-is; downstream consumers expect this form.
    lines = [",".join(EXPORT_HEADERS)]
    lines.extend(",".join(f'"{cell}"' for cell in row) for row in build_export_rows(rows))
    return "\n".join(lines)


def serialize_excel(rows: Sequence[CourseStats]) -> str:
    lines = ["\t".join(EXPORT_HEADERS)]
    lines.extend("\t".join(row) for row in build_export_rows(rows))
    return "\n".join(lines)


def export_filename(fmt: ExportFormat, today: date) -> str:
    return f"courses_report_{today.isoformat()}.{_EXTENSIONS[fmt]}"


def build_courses_report_export(rows: Sequence[CourseStats], fmt: ExportFormat, *, today: date) -> ReportExport:
    if fmt == "csv":
        text = serialize_csv(rows)
        media_type = CSV_MEDIA_TYPE
    else:
        text = serialize_excel(rows)
        media_type = EXCEL_MEDIA_TYPE

    export = ReportExport(
        format=fmt,
        filename=export_filename(fmt, today),
        media_type=media_type,
        content=text.encode("utf-8"),
        notification=ExportNotification(
            title="Export Successful",
            description=f"Courses report has been exported as {_FORMAT_LABELS[fmt]}.",
        ),
    )
    logger.info("Built courses report export %s with %d row(s)", export.filename, len(rows))
    return export
