"""Job option service for business logic operations"""

from typing import List

from workmongolia.repositories.job_option_repository import JobOptionRepository
from workmongolia.models.job_option import JobOption, JobOptionKind
from workmongolia.schemas.master import JobOptionCreateRequest, JobOptionUpdateRequest
from workmongolia.core.logging import get_logger
from workmongolia.core.exceptions import ValidationException, NotFoundException, ConflictException

logger = get_logger(__name__)

LOCALIZED_NAME_FIELDS = ("name_ko", "name_en", "name_mn")


class JobOptionService:
    """Service for recruitment master options (departments, employment types, ...)"""

    def __init__(self, job_option_repository: JobOptionRepository):
        """
        Initialize job option service

        Args:
            job_option_repository: Job option repository
        """
        self.option_repo = job_option_repository

    async def list_options(self, kind: JobOptionKind, active_only: bool = False) -> List[JobOption]:
        """
        List options of a kind in display order

        Args:
            kind: Option kind
            active_only: Hide inactive options

        Returns:
            Ordered list of options
        """
        return await self.option_repo.list_by_kind(kind, active_only=active_only)

    async def get_option(self, kind: JobOptionKind, option_id: int) -> JobOption:
        """
        Get option by ID

        Raises:
            NotFoundException: If the option does not exist within ``kind``
        """
        option = await self.option_repo.get_by_id(kind, option_id)
        if not option:
            raise NotFoundException(f"Job option not found: {kind.value}/{option_id}")
        return option

    async def create_option(self, kind: JobOptionKind, request: JobOptionCreateRequest) -> JobOption:
        """
        Create an option, appending it last when no order is given

        Args:
            kind: Option kind
            request: Validated create payload

        Returns:
            Created option

        Raises:
            ValidationException: If a preferred industry lacks a localized name
            ConflictException: If the name is already used within ``kind``
        """
        logger.info(f"Creating job option: {kind.value}/{request.name}")

        data = request.model_dump()
        self._validate_localized_names(kind, data)
        await self._ensure_unique_name(kind, data["name"])

        if data.get("order") is None:
            data["order"] = await self.option_repo.count(kind) + 1

        data["kind"] = kind
        option = await self.option_repo.create(data)
        logger.info(f"Successfully created job option: {option.id}")
        return option

    async def update_option(
        self,
        kind: JobOptionKind,
        option_id: int,
        request: JobOptionUpdateRequest
    ) -> JobOption:
        """
        Update the fields present in ``request``

        Raises:
            NotFoundException: If option not found
            ValidationException: If the result would break a required field
            ConflictException: If the new name is already used within ``kind``
        """
        logger.info(f"Updating job option: {kind.value}/{option_id}")

        option = await self.get_option(kind, option_id)
        updates = request.model_dump(exclude_unset=True)

        if "name" in updates:
            if updates["name"] is None:
                raise ValidationException("Name is required")
            if updates["name"].lower() != option.name.lower():
                await self._ensure_unique_name(kind, updates["name"])

        for field in LOCALIZED_NAME_FIELDS:
            if field in updates and updates[field] is not None:
                updates[field] = updates[field].strip() or None

        # A blank order or active flag leaves the stored value unchanged
        for field in ("order", "is_active"):
            if field in updates and updates[field] is None:
                del updates[field]

        merged = {field: updates.get(field, getattr(option, field)) for field in LOCALIZED_NAME_FIELDS}
        self._validate_localized_names(kind, merged)

        updated = await self.option_repo.update(option, updates)
        logger.info(f"Successfully updated job option: {option_id}")
        return updated

    async def set_active(self, kind: JobOptionKind, option_id: int, is_active: bool) -> JobOption:
        """Flip the active switch of a single option"""
        option = await self.get_option(kind, option_id)
        return await self.option_repo.update(option, {"is_active": is_active})

    async def delete_option(self, kind: JobOptionKind, option_id: int) -> bool:
        """
        Permanently delete an option

        Raises:
            NotFoundException: If option not found
        """
        logger.info(f"Deleting job option: {kind.value}/{option_id}")

        await self.get_option(kind, option_id)
        return await self.option_repo.delete(kind, option_id)

    async def _ensure_unique_name(self, kind: JobOptionKind, name: str) -> None:
        existing = await self.option_repo.get_by_name(kind, name)
        if existing:
            raise ConflictException(
                f"Job option already exists: {name}",
                details={"kind": kind.value, "id": existing.id}
            )

    @staticmethod
    def _validate_localized_names(kind: JobOptionKind, values: dict) -> None:
        # Preferred industries are shown to candidates in every language
        if kind != JobOptionKind.PREFERRED_INDUSTRY:
            return
        missing = [field for field in LOCALIZED_NAME_FIELDS if not values.get(field)]
        if missing:
            raise ValidationException(
                "Name is required in every language",
                details={"missing": missing}
            )
