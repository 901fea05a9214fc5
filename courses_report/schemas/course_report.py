"""Course report schemas: input snapshots, derived statistics and the report payload."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

StatusFilter = Literal["all", "active", "inactive"]
ExportFormat = Literal["csv", "excel"]


class CourseRecord(BaseModel):
    id: int
    code: str
    name: str
    provider: str
    monthly_fee: Decimal
    is_active: bool
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class EnrolmentRecord(BaseModel):
    id: int
    course_id: int
    is_active: bool

    model_config = ConfigDict(from_attributes=True, frozen=True)


class TransactionRecord(BaseModel):
    id: int
    course_id: Optional[int] = None
    type: str
    status: str
    amount: Decimal

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ReportSnapshot(BaseModel):
    courses: tuple[CourseRecord, ...] = ()
    enrolments: tuple[EnrolmentRecord, ...] = ()
    transactions: tuple[TransactionRecord, ...] = ()

    model_config = ConfigDict(frozen=True)


class CourseStats(CourseRecord):
    total_enrolments: int
    active_enrolments: int
    total_revenue: Decimal


class OverallStats(BaseModel):
    total_courses: int
    active_courses: int
    total_enrolments: int
    active_enrolments: int
    total_revenue: Decimal

    model_config = ConfigDict(frozen=True)


class FilteredSummary(BaseModel):
    course_count: int
    active_enrolments: int
    total_revenue: Decimal

    model_config = ConfigDict(frozen=True)


class FilterSelection(BaseModel):
    status_filter: StatusFilter = "all"
    provider_filter: str = "all"

    model_config = ConfigDict(frozen=True)


class CourseTableRow(BaseModel):
    course_id: int
    code: str
    name: str
    provider: str
    monthly_fee: str
    status: str
    total_enrolments: int
    active_enrolments: int
    total_revenue: str
    start_date: str
    end_date: str


class CoursesReport(BaseModel):
    filters: FilterSelection
    providers: list[str]
    overall: OverallStats
    courses: list[CourseStats]
    table: list[CourseTableRow]
    summary: FilteredSummary
    showing: str
    summary_line: str
    empty_message: str | None = None


class ExportNotification(BaseModel):
    title: str
    description: str

    model_config = ConfigDict(frozen=True)


class ReportExport(BaseModel):
    format: ExportFormat
    filename: str
    media_type: str
    content: bytes
    notification: ExportNotification

    model_config = ConfigDict(frozen=True)
