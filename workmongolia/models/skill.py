"""Skill model"""

from sqlalchemy import Column, Integer, String, Boolean
from workmongolia.core.database import Base
from workmongolia.models.base import TimestampMixin


class Skill(Base, TimestampMixin):
    """Skill offered to job postings and candidate profiles"""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Skill(id={self.id}, name={self.name}, is_active={self.is_active})>"
