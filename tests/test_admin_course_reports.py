from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from courses_report.db.base import Base
from courses_report.db.session import SessionLocal, engine
from courses_report.main import app
from courses_report.models.course import Course
from courses_report.models.enrolment import Enrolment
from courses_report.models.transaction import Transaction


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def seed_courses():
    db = SessionLocal()
    try:
        intro = Course(code="C1", name="Intro", provider="Acme", monthly_fee=Decimal("100.00"), is_active=True)
        advanced = Course(
            code="C2",
            name="Advanced",
            provider="Beta",
            monthly_fee=Decimal("80.50"),
            is_active=False,
            start_date=date(2030, 1, 1),
            end_date=date(2030, 6, 30),
        )
        extra = Course(code="C3", name="Extra", provider="Acme", monthly_fee=Decimal("20.00"), is_active=True)
        db.add_all([intro, advanced, extra])
        db.commit()
        db.add_all(
            [
                Enrolment(course_id=intro.id, is_active=True),
                Enrolment(course_id=intro.id, is_active=True),
                Enrolment(course_id=advanced.id, is_active=False),
                Transaction(course_id=intro.id, type="charge", status="completed", amount=Decimal("-50.00")),
                Transaction(course_id=intro.id, type="charge", status="pending", amount=Decimal("-25.00")),
                Transaction(course_id=advanced.id, type="refund", status="completed", amount=Decimal("10.00")),
                Transaction(course_id=None, type="charge", status="completed", amount=Decimal("999.00")),
            ]
        )
        db.commit()
    finally:
        db.close()


def test_courses_report_unfiltered():
    seed_courses()
    client = TestClient(app)
    resp = client.get("/admin/reports/courses")
    assert resp.status_code == 200
    data = resp.json()
    assert data["providers"] == ["Acme", "Beta"]
    assert [c["code"] for c in data["courses"]] == ["C1", "C2", "C3"]
    intro = data["courses"][0]
    assert intro["total_enrolments"] == 2
    assert intro["active_enrolments"] == 2
    assert Decimal(intro["total_revenue"]) == Decimal("50")
    overall = data["overall"]
    assert overall["total_courses"] == 3
    assert overall["active_courses"] == 2
    assert overall["total_enrolments"] == 3
    assert overall["active_enrolments"] == 2
    assert Decimal(overall["total_revenue"]) == Decimal("50")
    assert data["showing"] == "Showing 3 of 3 courses"
    assert data["table"][1]["end_date"] == "30 Jun 2030"
    assert data["empty_message"] is None


def test_courses_report_filtered_summary_tracks_filters():
    seed_courses()
    client = TestClient(app)
    resp = client.get("/admin/reports/courses", params={"status": "active", "provider": "Acme"})
    assert resp.status_code == 200
    data = resp.json()
    assert [c["code"] for c in data["courses"]] == ["C1", "C3"]
    assert data["summary"]["course_count"] == 2
    assert data["summary"]["active_enrolments"] == 2
    assert Decimal(data["summary"]["total_revenue"]) == Decimal("50")
    assert data["overall"]["total_courses"] == 3


def test_courses_report_empty_state():
    seed_courses()
    client = TestClient(app)
    resp = client.get("/admin/reports/courses", params={"status": "inactive", "provider": "Acme"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["courses"] == []
    assert data["summary"]["course_count"] == 0
    assert Decimal(data["summary"]["total_revenue"]) == Decimal("0")
    assert data["empty_message"] == "No courses found matching the filters."


def test_courses_report_rejects_unknown_status():
    client = TestClient(app)
    resp = client.get("/admin/reports/courses", params={"status": "archived"})
    assert resp.status_code == 422


def test_courses_report_providers():
    seed_courses()
    client = TestClient(app)
    resp = client.get("/admin/reports/courses/providers")
    assert resp.status_code == 200
    assert resp.json() == ["Acme", "Beta"]


def test_export_csv_download():
    seed_courses()
    client = TestClient(app)
    resp = client.get(
        "/admin/reports/courses/export/csv",
        params={"provider": "Acme", "today": "2030-06-15"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.headers["content-disposition"] == 'attachment; filename="courses_report_2030-06-15.csv"'
    assert resp.headers["x-export-notification-title"] == "Export Successful"
    lines = resp.content.decode("utf-8").split("\n")
    assert len(lines) == 3
    assert lines[1] == '"C1","Intro","Acme","100","Active","2","2","50","",""'
    assert lines[2] == '"C3","Extra","Acme","20","Active","0","0","0","",""'


def test_export_excel_download():
    seed_courses()
    client = TestClient(app)
    resp = client.get(
        "/admin/reports/courses/export/excel",
        params={"status": "inactive", "today": "2030-06-15"},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/vnd.ms-excel")
    assert "courses_report_2030-06-15.xls" in resp.headers["content-disposition"]
    assert resp.headers["x-export-notification-description"] == "Courses report has been exported as Excel file."
    lines = resp.content.decode("utf-8").split("\n")
    assert lines[1] == "C2\tAdvanced\tBeta\t80.5\tInactive\t1\t0\t0\t2030-01-01\t2030-06-30"


def test_export_rejects_unknown_format():
    client = TestClient(app)
    resp = client.get("/admin/reports/courses/export/pdf")
    assert resp.status_code == 422
