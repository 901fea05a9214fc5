from courses_report.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from courses_report.models.course import Course  # noqa: F401
from courses_report.models.enrolment import Enrolment  # noqa: F401
from courses_report.models.transaction import Transaction  # noqa: F401
