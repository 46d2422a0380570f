"""Database models"""

from workmongolia.models.base import TimestampMixin
from workmongolia.models.job_option import JobOption, JobOptionKind
from workmongolia.models.skill import Skill

__all__ = [
    "TimestampMixin",
    "JobOption",
    "JobOptionKind",
    "Skill",
]
