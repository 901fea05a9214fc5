# Courses report backend entrypoint.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courses_report.api import admin_course_reports
from courses_report.core.log_config import setup_logging
from courses_report.core.settings import get_settings

settings = get_settings()
setup_logging()

app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Export-Notification-Title", "X-Export-Notification-Description"],
)

app.include_router(admin_course_reports.router)


@app.get("/")
def read_root():
    return {"app": "Courses Report backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}
