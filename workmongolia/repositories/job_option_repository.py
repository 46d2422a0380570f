"""Job option repository for database operations"""

from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from workmongolia.models.job_option import JobOption, JobOptionKind
from workmongolia.core.logging import get_logger

logger = get_logger(__name__)


class JobOptionRepository:
    """Repository for job option database operations"""

    def __init__(self, db: AsyncSession):
        """
        Initialize job option repository

        Args:
            db: Database session
        """
        self.db = db

    async def create(self, option_data: Dict[str, Any]) -> JobOption:
        """
        Create a new job option

        Args:
            option_data: Column values, including ``kind``

        Returns:
            Created job option
        """
        option = JobOption(**option_data)
        self.db.add(option)
        await self.db.commit()
        await self.db.refresh(option)

        logger.info(f"Created job option: {option.id}", extra={"record_kind": option.kind.value})
        return option

    async def get_by_id(self, kind: JobOptionKind, option_id: int) -> Optional[JobOption]:
        """
        Get job option by ID within a kind

        Returns:
            Job option if found, None otherwise
        """
        stmt = select(JobOption).where(JobOption.id == option_id, JobOption.kind == kind)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, kind: JobOptionKind, name: str) -> Optional[JobOption]:
        """Case-insensitive lookup of an option name within a kind"""
        stmt = select(JobOption).where(
            JobOption.kind == kind,
            func.lower(JobOption.name) == name.lower()
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_by_kind(self, kind: JobOptionKind, active_only: bool = False) -> List[JobOption]:
        """
        List options of one kind ordered by sort position, then ID

        Args:
            kind: Option kind
            active_only: Only return active options
        """
        stmt = select(JobOption).where(JobOption.kind == kind)
        if active_only:
            stmt = stmt.where(JobOption.is_active.is_(True))
        stmt = stmt.order_by(JobOption.order.asc(), JobOption.id.asc())

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, kind: JobOptionKind) -> int:
        stmt = select(func.count(JobOption.id)).where(JobOption.kind == kind)
        result = await self.db.execute(stmt)
        return result.scalar()

    async def update(self, option: JobOption, updates: Dict[str, Any]) -> JobOption:
        """
        Apply updates to a loaded option

        Args:
            option: Job option to modify
            updates: Fields to update

        Returns:
            Updated job option
        """
        for key, value in updates.items():
            setattr(option, key, value)
        await self.db.commit()
        await self.db.refresh(option)

        logger.info(f"Updated job option: {option.id}", extra={"record_kind": option.kind.value})
        return option

    async def delete(self, kind: JobOptionKind, option_id: int) -> bool:
        """
        Permanently delete a job option

        Returns:
            True if a row was removed
        """
        stmt = delete(JobOption).where(JobOption.id == option_id, JobOption.kind == kind)
        result = await self.db.execute(stmt)
        await self.db.commit()

        success = result.rowcount > 0
        if success:
            logger.info(f"Deleted job option: {option_id}", extra={"record_kind": kind.value})
        return success
