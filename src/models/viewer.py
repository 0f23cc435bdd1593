from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base


class ViewerModel(Base):
    __tablename__ = "viewers"
    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_viewers_owner_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String, ForeignKey("owners.owner_id", ondelete="CASCADE"), index=True)
    name = Column(String, nullable=False)
    joined_at = Column(String, nullable=False)

    owner = relationship("OwnerModel", back_populates="viewers")
