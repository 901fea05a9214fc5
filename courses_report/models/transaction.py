"""Ledger transaction model. Charges may be stored with either sign."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from courses_report.db.base_class import Base
from courses_report.core.time import utc_now


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=True, index=True)
    type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    amount = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    course = relationship("Course", back_populates="transactions")
