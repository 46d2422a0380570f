"""Business logic services"""

from workmongolia.services.job_option_service import JobOptionService
from workmongolia.services.skill_service import SkillService

__all__ = ['JobOptionService', 'SkillService']
