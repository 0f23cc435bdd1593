from sqlalchemy import Column, String, Text, ForeignKey
from .base import Base


class NoteModel(Base):
    __tablename__ = "notes"

    record_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("owners.owner_id"), index=True, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(String, nullable=False)
