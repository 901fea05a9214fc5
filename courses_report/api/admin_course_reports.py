"""Admin courses report and export endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from courses_report.core.time import utc_today
from courses_report.db.session import get_db
from courses_report.schemas.course_report import CoursesReport, ExportFormat, FilterSelection, StatusFilter
from courses_report.services.course_report_export import build_courses_report_export
from courses_report.services.course_stats import list_providers
from courses_report.services.courses_report import (
    build_courses_report,
    get_filtered_course_stats,
    load_report_snapshot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/reports/courses", tags=["admin-reports"])


@router.get("", response_model=CoursesReport)
async def courses_report(
    status: StatusFilter = "all",
    provider: str = "all",
    db: Session = Depends(get_db),
):
    snapshot = load_report_snapshot(db)
    selection = FilterSelection(status_filter=status, provider_filter=provider)
    return build_courses_report(snapshot, selection)


@router.get("/providers", response_model=list[str])
async def courses_report_providers(db: Session = Depends(get_db)):
    return list_providers(load_report_snapshot(db).courses)


@router.get("/export/{fmt}", response_class=Response)
async def courses_report_export(
    fmt: ExportFormat,
    status: StatusFilter = "all",
    provider: str = "all",
    today: date | None = None,
    db: Session = Depends(get_db),
):
    snapshot = load_report_snapshot(db)
    selection = FilterSelection(status_filter=status, provider_filter=provider)
    rows = get_filtered_course_stats(snapshot, selection)
    export = build_courses_report_export(rows, fmt, today=today or utc_today())
    logger.info("%s: %s", export.notification.title, export.notification.description)
    headers = {
        "Content-Disposition": f'attachment; filename="{export.filename}"',
        "X-Export-Notification-Title": export.notification.title,
        "X-Export-Notification-Description": export.notification.description,
    }
    return Response(content=export.content, media_type=export.media_type, headers=headers)
