"""Courses report assembly: load a snapshot, derive stats, filter and summarize."""

import logging

from sqlalchemy.orm import Session

from courses_report.models.course import Course
from courses_report.models.enrolment import Enrolment
from courses_report.models.transaction import Transaction
from courses_report.schemas.course_report import (
    CourseRecord,
    CoursesReport,
    CourseStats,
    EnrolmentRecord,
    FilterSelection,
    ReportSnapshot,
    TransactionRecord,
)
from courses_report.services.course_report_display import (
    EMPTY_STATE_MESSAGE,
    CurrencyFormatter,
    DateFormatter,
    build_report_table,
    format_currency,
    format_date,
    showing_label,
    summary_line,
)
from courses_report.services.course_stats import (
    aggregate_course_stats,
    calculate_overall_stats,
    filter_course_stats,
    list_providers,
    summarize_filtered,
)

logger = logging.getLogger(__name__)


def load_report_snapshot(db: Session) -> ReportSnapshot:
    """Read the three collections as immutable records, ordered by id."""
    courses = db.query(Course).order_by(Course.id).all()
    enrolments = db.query(Enrolment).order_by(Enrolment.id).all()
    transactions = db.query(Transaction).order_by(Transaction.id).all()
    return ReportSnapshot(
        courses=tuple(CourseRecord.model_validate(c) for c in courses),
        enrolments=tuple(EnrolmentRecord.model_validate(e) for e in enrolments),
        transactions=tuple(TransactionRecord.model_validate(t) for t in transactions),
    )


def get_filtered_course_stats(snapshot: ReportSnapshot, selection: FilterSelection) -> list[CourseStats]:
    stats = aggregate_course_stats(snapshot.courses, snapshot.enrolments, snapshot.transactions)
    return filter_course_stats(stats, selection)


def build_courses_report(
    snapshot: ReportSnapshot,
    selection: FilterSelection,
    *,
    format_currency: CurrencyFormatter = format_currency,
    format_date: DateFormatter = format_date,
) -> CoursesReport:
    rows = get_filtered_course_stats(snapshot, selection)
    summary = summarize_filtered(rows)
    logger.debug(
        "Courses report status=%s provider=%s matched %d of %d course(s)",
        selection.status_filter,
        selection.provider_filter,
        len(rows),
        len(snapshot.courses),
    )
    return CoursesReport(
        filters=selection,
        providers=list_providers(snapshot.courses),
        overall=calculate_overall_stats(snapshot.courses, snapshot.enrolments, snapshot.transactions),
        courses=rows,
        table=build_report_table(rows, format_currency=format_currency, format_date=format_date),
        summary=summary,
        showing=showing_label(len(rows), len(snapshot.courses)),
        summary_line=summary_line(summary, format_currency=format_currency),
        empty_message=EMPTY_STATE_MESSAGE if not rows else None,
    )
