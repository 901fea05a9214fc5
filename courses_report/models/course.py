"""Course model: the catalogue entry a report row is built from."""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Numeric, String
from sqlalchemy.orm import relationship

from courses_report.db.base_class import Base
from courses_report.core.time import utc_now


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), nullable=False)
    name = Column(String, nullable=False)
    provider = Column(String, nullable=False, index=True)
    monthly_fee = Column(Numeric(10, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    enrolments = relationship("Enrolment", back_populates="course")
    transactions = relationship("Transaction", back_populates="course")
