"""Recruitment master API endpoints (job options and skills)"""

from typing import Any, Dict, List
import enum

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from workmongolia.core.database import get_db
from workmongolia.models.job_option import JobOptionKind
from workmongolia.repositories.job_option_repository import JobOptionRepository
from workmongolia.repositories.skill_repository import SkillRepository
from workmongolia.services.job_option_service import JobOptionService
from workmongolia.services.skill_service import SkillService
from workmongolia.schemas.master import (
    ActiveToggleRequest, DeleteResponse, JobOptionResponse, JobOptionUpdateRequest,
    SkillCreateRequest, SkillResponse, SkillUpdateRequest, job_option_create_schema
)
from workmongolia.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class OptionCollection(str, enum.Enum):
    """URL segment for each job option kind"""
    DEPARTMENTS = "departments"
    EMPLOYMENT_TYPES = "employment-types"
    EXPERIENCE_LEVELS = "experience-levels"
    PREFERRED_INDUSTRIES = "preferred-industries"

    @property
    def kind(self) -> JobOptionKind:
        return COLLECTION_KINDS[self]


COLLECTION_KINDS = {
    OptionCollection.DEPARTMENTS: JobOptionKind.DEPARTMENT,
    OptionCollection.EMPLOYMENT_TYPES: JobOptionKind.EMPLOYMENT_TYPE,
    OptionCollection.EXPERIENCE_LEVELS: JobOptionKind.EXPERIENCE_LEVEL,
    OptionCollection.PREFERRED_INDUSTRIES: JobOptionKind.PREFERRED_INDUSTRY,
}


async def get_job_option_service(db: AsyncSession = Depends(get_db)) -> JobOptionService:
    """Dependency to get job option service"""
    return JobOptionService(JobOptionRepository(db))


async def get_skill_service(db: AsyncSession = Depends(get_db)) -> SkillService:
    """Dependency to get skill service"""
    return SkillService(SkillRepository(db))


# ---------------------------------------------------------------------------
# Job options
# ---------------------------------------------------------------------------

@router.get("/job-options/{collection}", response_model=List[JobOptionResponse])
async def list_job_options(
    collection: OptionCollection,
    active_only: bool = Query(False, description="Only return active options"),
    service: JobOptionService = Depends(get_job_option_service)
):
    """
    List the options of one collection

    Options are ordered by their sort position, then by ID.
    """
    options = await service.list_options(collection.kind, active_only=active_only)
    return [JobOptionResponse.model_validate(option) for option in options]


@router.post(
    "/job-options/{collection}",
    response_model=JobOptionResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_job_option(
    collection: OptionCollection,
    payload: Dict[str, Any] = Body(...),
    service: JobOptionService = Depends(get_job_option_service)
):
    """
    Create an option

    **Validation:**
    - Name: 1-100 characters, required
    - Preferred industries: Korean, English and Mongolian names all required
    - Order: non-negative; appended last when omitted
    - Name must be unique within the collection (409 otherwise)
    """
    schema = job_option_create_schema(collection.kind)
    try:
        request = schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))

    option = await service.create_option(collection.kind, request)
    return JobOptionResponse.model_validate(option)


@router.put("/job-options/{collection}/{option_id}", response_model=JobOptionResponse)
async def update_job_option(
    collection: OptionCollection,
    option_id: int,
    request: JobOptionUpdateRequest,
    service: JobOptionService = Depends(get_job_option_service)
):
    """Update an option; fields omitted from the body are left unchanged"""
    option = await service.update_option(collection.kind, option_id, request)
    return JobOptionResponse.model_validate(option)


@router.patch("/job-options/{collection}/{option_id}", response_model=JobOptionResponse)
async def toggle_job_option(
    collection: OptionCollection,
    option_id: int,
    request: ActiveToggleRequest,
    service: JobOptionService = Depends(get_job_option_service)
):
    """Set the active flag of an option"""
    option = await service.set_active(collection.kind, option_id, request.is_active)
    return JobOptionResponse.model_validate(option)


@router.delete("/job-options/{collection}/{option_id}", response_model=DeleteResponse)
async def delete_job_option(
    collection: OptionCollection,
    option_id: int,
    service: JobOptionService = Depends(get_job_option_service)
):
    """Permanently delete an option"""
    await service.delete_option(collection.kind, option_id)
    return DeleteResponse(message="Job option deleted successfully", id=option_id)


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

@router.get("/skills", response_model=List[SkillResponse])
async def list_skills(
    active_only: bool = Query(False, description="Only return active skills"),
    service: SkillService = Depends(get_skill_service)
):
    """List skills alphabetically"""
    skills = await service.list_skills(active_only=active_only)
    return [SkillResponse.model_validate(skill) for skill in skills]


@router.post("/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    request: SkillCreateRequest,
    service: SkillService = Depends(get_skill_service)
):
    """
    Create a skill

    **Validation:**
    - Name: 1-100 characters, required, unique (case-insensitive)
    - Description: up to 500 characters
    """
    skill = await service.create_skill(request)
    return SkillResponse.model_validate(skill)


@router.put("/skills/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: int,
    request: SkillUpdateRequest,
    service: SkillService = Depends(get_skill_service)
):
    """Update a skill; fields omitted from the body are left unchanged"""
    skill = await service.update_skill(skill_id, request)
    return SkillResponse.model_validate(skill)


@router.patch("/skills/{skill_id}", response_model=SkillResponse)
async def toggle_skill(
    skill_id: int,
    request: ActiveToggleRequest,
    service: SkillService = Depends(get_skill_service)
):
    """Set the active flag of a skill"""
    skill = await service.set_active(skill_id, request.is_active)
    return SkillResponse.model_validate(skill)


@router.delete("/skills/{skill_id}", response_model=DeleteResponse)
async def delete_skill(
    skill_id: int,
    service: SkillService = Depends(get_skill_service)
):
    """Permanently delete a skill"""
    await service.delete_skill(skill_id)
    return DeleteResponse(message="Skill deleted successfully", id=skill_id)
