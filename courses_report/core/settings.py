import os


class Settings:
    def __init__(self):
        self.app_name = "Courses Report"
        self.api_version = "1.0.0"
        self.environment = os.environ.get("COURSES_REPORT_ENVIRONMENT", "development")
        self.database_url = os.environ.get("COURSES_REPORT_DATABASE_URL", "sqlite:///./courses_report.db")
        self.currency = "USD"
        self.log_level = os.environ.get("COURSES_REPORT_LOG_LEVEL", "INFO")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
