"""Per-course statistics, filtering and summary totals for the courses report."""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from courses_report.schemas.course_report import (
    CourseRecord,
    CourseStats,
    EnrolmentRecord,
    FilteredSummary,
    FilterSelection,
    OverallStats,
    TransactionRecord,
)

ALL = "all"
CHARGE = "charge"
COMPLETED = "completed"


def is_recognized_revenue(transaction: TransactionRecord) -> bool:
    return transaction.type == CHARGE and transaction.status == COMPLETED


def _revenue(transactions: Iterable[TransactionRecord]) -> Decimal:
    # charges may be stored negative; only the magnitude counts
    return sum((abs(t.amount) for t in transactions if is_recognized_revenue(t)), Decimal("0"))


def aggregate_course_stats(
    courses: Sequence[CourseRecord],
    enrolments: Sequence[EnrolmentRecord],
    transactions: Sequence[TransactionRecord],
) -> List[CourseStats]:
    """Join enrolments and transactions onto each course, keeping course order."""
    enrolments_by_course: Dict[int, List[EnrolmentRecord]] = defaultdict(list)
    for enrolment in enrolments:
        enrolments_by_course[enrolment.course_id].append(enrolment)

    transactions_by_course: Dict[int, List[TransactionRecord]] = defaultdict(list)
    for transaction in transactions:
        if transaction.course_id is not None:
            transactions_by_course[transaction.course_id].append(transaction)

    stats = []
    for course in courses:
        course_enrolments = enrolments_by_course.get(course.id, [])
        stats.append(
            CourseStats(
                **course.model_dump(),
                total_enrolments=len(course_enrolments),
                active_enrolments=sum(1 for e in course_enrolments if e.is_active),
                total_revenue=_revenue(transactions_by_course.get(course.id, [])),
            )
        )
    return stats


def list_providers(courses: Iterable[CourseRecord]) -> List[str]:
    return sorted({course.provider for course in courses})


def _matches_status(course: CourseStats, status_filter: str) -> bool:
    if status_filter == "active":
        return course.is_active
    if status_filter == "inactive":
        return not course.is_active
    return True


def filter_course_stats(stats: Sequence[CourseStats], selection: FilterSelection) -> List[CourseStats]:
    """Return the rows matching both the status and the provider selection.

    An empty list means the filters matched nothing; it is never ``None``.
    """
    return [
        course
        for course in stats
        if _matches_status(course, selection.status_filter)
        and (selection.provider_filter == ALL or course.provider == selection.provider_filter)
    ]


def calculate_overall_stats(
    courses: Sequence[CourseRecord],
    enrolments: Sequence[EnrolmentRecord],
    transactions: Sequence[TransactionRecord],
) -> OverallStats:
    """Totals over the unfiltered collections, independent of any filter selection."""
    return OverallStats(
        total_courses=len(courses),
        active_courses=sum(1 for c in courses if c.is_active),
        total_enrolments=len(enrolments),
        active_enrolments=sum(1 for e in enrolments if e.is_active),
        # transactions not tied to a course are not course revenue
        total_revenue=_revenue(t for t in transactions if t.course_id is not None),
    )


def summarize_filtered(rows: Sequence[CourseStats]) -> FilteredSummary:
    return FilteredSummary(
        course_count=len(rows),
        active_enrolments=sum(row.active_enrolments for row in rows),
        total_revenue=sum((row.total_revenue for row in rows), Decimal("0")),
    )
