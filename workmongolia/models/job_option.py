"""Job option model"""

from sqlalchemy import Column, Integer, String, Boolean, Enum as SQLEnum, UniqueConstraint
from workmongolia.core.database import Base
from workmongolia.models.base import TimestampMixin
import enum


class JobOptionKind(str, enum.Enum):
    """Recruitment master option categories"""
    DEPARTMENT = "department"
    EMPLOYMENT_TYPE = "employment_type"
    EXPERIENCE_LEVEL = "experience_level"
    PREFERRED_INDUSTRY = "preferred_industry"


class JobOption(Base, TimestampMixin):
    """Selectable option used by job postings and candidate profiles"""

    __tablename__ = "job_options"
    __table_args__ = (
        UniqueConstraint("kind", "name", name="uq_job_options_kind_name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(SQLEnum(JobOptionKind), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    name_ko = Column(String(100), nullable=True)
    name_en = Column(String(100), nullable=True)
    name_mn = Column(String(100), nullable=True)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<JobOption(id={self.id}, kind={self.kind}, name={self.name})>"
