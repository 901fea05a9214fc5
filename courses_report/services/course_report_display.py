"""Display rendering for the courses report table and summary footer."""

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, List, Sequence

from courses_report.core.settings import get_settings
from courses_report.schemas.course_report import CourseStats, CourseTableRow, FilteredSummary
from courses_report.services.course_report_export import status_label

CurrencyFormatter = Callable[[Decimal], str]
DateFormatter = Callable[[str], str]

EMPTY_STATE_MESSAGE = "No courses found matching the filters."
MISSING_DATE = "-"

_CURRENCY_SYMBOLS = {"USD": "$", "AUD": "$", "EUR": "€", "GBP": "£"}


def format_currency(amount: Decimal) -> str:
    symbol = _CURRENCY_SYMBOLS.get(get_settings().currency, "")
    value = Decimal(str(amount or 0)).quantize(Decimal("0.01"))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_date(iso_date: str) -> str:
    return datetime.strptime(iso_date[:10], "%Y-%m-%d").strftime("%d %b %Y")


def _display_date(value: date | None, format_date: DateFormatter) -> str:
    return format_date(value.isoformat()) if value else MISSING_DATE


def build_report_table(
    rows: Sequence[CourseStats],
    *,
    format_currency: CurrencyFormatter = format_currency,
    format_date: DateFormatter = format_date,
) -> List[CourseTableRow]:
    return [
        CourseTableRow(
            course_id=course.id,
            code=course.code,
            name=course.name,
            provider=course.provider,
            monthly_fee=format_currency(course.monthly_fee),
            status=status_label(course.is_active),
            total_enrolments=course.total_enrolments,
            active_enrolments=course.active_enrolments,
            total_revenue=format_currency(course.total_revenue),
            start_date=_display_date(course.start_date, format_date),
            end_date=_display_date(course.end_date, format_date),
        )
        for course in rows
    ]


def showing_label(filtered_count: int, total_count: int) -> str:
    return f"Showing {filtered_count} of {total_count} courses"


def summary_line(summary: FilteredSummary, *, format_currency: CurrencyFormatter = format_currency) -> str:
    return (
        f"{summary.course_count} courses • {summary.active_enrolments} active enrolments • "
        f"{format_currency(summary.total_revenue)} total revenue"
    )
