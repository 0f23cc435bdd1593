"""Owner database model.

This module defines the Owner (student account) database model using
SQLAlchemy.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base


class OwnerModel(Base):
    """Owner database model."""

    __tablename__ = "owners"

    owner_id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    access_code = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(String, nullable=False)  # ISO format string

    viewers = relationship(
        "ViewerModel",
        back_populates="owner",
        order_by="ViewerModel.id",
        cascade="all, delete-orphan",
    )
