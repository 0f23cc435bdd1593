from sqlalchemy import Column, Integer, String, Text, ForeignKey
from .base import Base


class ExamModel(Base):
    __tablename__ = "exams"

    record_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("owners.owner_id"), index=True, nullable=False)
    subject = Column(String, nullable=False)
    date = Column(String, nullable=False)  # ISO date string
    time_hour = Column(Integer, nullable=True)
    time_minute = Column(Integer, nullable=True)
    syllabus = Column(Text, nullable=False, default="")
    created_at = Column(String, nullable=False)
