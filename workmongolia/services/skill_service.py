"""Skill service for business logic operations"""

from typing import List

from workmongolia.repositories.skill_repository import SkillRepository
from workmongolia.models.skill import Skill
from workmongolia.schemas.master import SkillCreateRequest, SkillUpdateRequest
from workmongolia.core.logging import get_logger
from workmongolia.core.exceptions import ValidationException, NotFoundException, ConflictException

logger = get_logger(__name__)


class SkillService:
    """Service for skill master data"""

    def __init__(self, skill_repository: SkillRepository):
        self.skill_repo = skill_repository

    async def list_skills(self, active_only: bool = False) -> List[Skill]:
        return await self.skill_repo.get_all(active_only=active_only)

    async def get_skill(self, skill_id: int) -> Skill:
        """
        Get skill by ID

        Raises:
            NotFoundException: If skill not found
        """
        skill = await self.skill_repo.get_by_id(skill_id)
        if not skill:
            raise NotFoundException(f"Skill not found: {skill_id}")
        return skill

    async def create_skill(self, request: SkillCreateRequest) -> Skill:
        """
        Create a skill

        Raises:
            ConflictException: If a skill with the same name exists
        """
        logger.info(f"Creating skill: {request.name}")

        await self._ensure_unique_name(request.name)
        skill = await self.skill_repo.create(request.model_dump())

        logger.info(f"Successfully created skill: {skill.id}")
        return skill

    async def update_skill(self, skill_id: int, request: SkillUpdateRequest) -> Skill:
        """
        Update the fields present in ``request``

        Raises:
            NotFoundException: If skill not found
            ValidationException: If a required field is cleared
            ConflictException: If the new name is taken
        """
        logger.info(f"Updating skill: {skill_id}")

        skill = await self.get_skill(skill_id)
        updates = request.model_dump(exclude_unset=True)

        if "name" in updates:
            if updates["name"] is None:
                raise ValidationException("Skill name is required")
            if updates["name"].lower() != skill.name.lower():
                await self._ensure_unique_name(updates["name"])

        if "description" in updates and updates["description"] is not None:
            updates["description"] = updates["description"].strip() or None

        if "is_active" in updates and updates["is_active"] is None:
            del updates["is_active"]

        updated = await self.skill_repo.update(skill, updates)
        logger.info(f"Successfully updated skill: {skill_id}")
        return updated

    async def set_active(self, skill_id: int, is_active: bool) -> Skill:
        skill = await self.get_skill(skill_id)
        return await self.skill_repo.update(skill, {"is_active": is_active})

    async def delete_skill(self, skill_id: int) -> bool:
        """
        Permanently delete a skill

        Raises:
            NotFoundException: If skill not found
        """
        logger.info(f"Deleting skill: {skill_id}")

        await self.get_skill(skill_id)
        return await self.skill_repo.delete(skill_id)

    async def _ensure_unique_name(self, name: str) -> None:
        existing = await self.skill_repo.get_by_name(name)
        if existing:
            raise ConflictException(
                f"Skill already exists: {name}",
                details={"id": existing.id}
            )
