"""Data access layer"""

from workmongolia.repositories.job_option_repository import JobOptionRepository
from workmongolia.repositories.skill_repository import SkillRepository

__all__ = ['JobOptionRepository', 'SkillRepository']
