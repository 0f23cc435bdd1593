from sqlalchemy import Boolean, Column, Integer, String, ForeignKey
from .base import Base


class ClassSessionModel(Base):
    __tablename__ = "classes"

    record_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("owners.owner_id"), index=True, nullable=False)
    subject = Column(String, nullable=False)
    weekday = Column(Integer, nullable=False)  # 1 = Monday, 7 = Sunday
    start_hour = Column(Integer, nullable=False)
    start_minute = Column(Integer, nullable=False)
    end_hour = Column(Integer, nullable=False)
    end_minute = Column(Integer, nullable=False)
    is_break = Column(Boolean, nullable=False, default=False)
    created_at = Column(String, nullable=False)
