"""Skill repository for database operations"""

from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from workmongolia.models.skill import Skill
from workmongolia.core.logging import get_logger

logger = get_logger(__name__)


class SkillRepository:
    """Repository for skill database operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, skill_data: Dict[str, Any]) -> Skill:
        skill = Skill(**skill_data)
        self.db.add(skill)
        await self.db.commit()
        await self.db.refresh(skill)

        logger.info(f"Created skill: {skill.id}")
        return skill

    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        stmt = select(Skill).where(Skill.id == skill_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Skill]:
        """Case-insensitive lookup by name"""
        stmt = select(Skill).where(func.lower(Skill.name) == name.lower())
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_all(self, active_only: bool = False) -> List[Skill]:
        """
        List skills alphabetically

        Args:
            active_only: Only return active skills
        """
        stmt = select(Skill)
        if active_only:
            stmt = stmt.where(Skill.is_active.is_(True))
        stmt = stmt.order_by(Skill.name.asc(), Skill.id.asc())

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, skill: Skill, updates: Dict[str, Any]) -> Skill:
        for key, value in updates.items():
            setattr(skill, key, value)
        await self.db.commit()
        await self.db.refresh(skill)

        logger.info(f"Updated skill: {skill.id}")
        return skill

    async def delete(self, skill_id: int) -> bool:
        stmt = delete(Skill).where(Skill.id == skill_id)
        result = await self.db.execute(stmt)
        await self.db.commit()

        success = result.rowcount > 0
        if success:
            logger.info(f"Deleted skill: {skill_id}")
        return success
