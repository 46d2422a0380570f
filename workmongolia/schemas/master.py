"""Recruitment master schemas for API requests and responses.

The request schemas are the single declarative validation contract for
recruitment master records: the API validates payloads with them and the
admin client validates form input with the same classes before sending
anything.
"""

from typing import Optional, Type
from datetime import datetime

from pydantic import Field, field_validator, model_validator, ConfigDict
from pydantic.alias_generators import to_camel

from workmongolia.models.job_option import JobOptionKind
from workmongolia.schemas.domain import DomainModel


def _clean_optional(v):
    if v is not None:
        return v.strip() if v.strip() else None
    return v


class JobOptionCreateRequest(DomainModel):
    """Request schema for creating a job option"""
    name: str = Field(..., min_length=1, max_length=100, description="Default display name")
    name_ko: Optional[str] = Field(None, max_length=100, description="Korean name")
    name_en: Optional[str] = Field(None, max_length=100, description="English name")
    name_mn: Optional[str] = Field(None, max_length=100, description="Mongolian name")
    order: Optional[int] = Field(None, ge=0, description="Sort position; appended last when omitted")
    is_active: bool = Field(True, description="Whether the option is offered")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("name_ko", "name_en", "name_mn")
    @classmethod
    def validate_localized_names(cls, v):
        return _clean_optional(v)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Development",
                "nameKo": "개발팀",
                "nameEn": "Development",
                "nameMn": "Хөгжүүлэлт",
                "order": 1,
                "isActive": True
            }
        }
    )


class PreferredIndustryCreateRequest(JobOptionCreateRequest):
    """Preferred industries must be named in every supported language"""
    name: Optional[str] = Field(None, max_length=100, description="Defaults to the English name")
    name_ko: str = Field(..., min_length=1, max_length=100, description="Korean name")
    name_en: str = Field(..., min_length=1, max_length=100, description="English name")
    name_mn: str = Field(..., min_length=1, max_length=100, description="Mongolian name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _clean_optional(v)

    @field_validator("name_ko", "name_en", "name_mn")
    @classmethod
    def validate_localized_names(cls, v):
        if not v.strip():
            raise ValueError("Name is required in every language")
        return v.strip()

    @model_validator(mode="after")
    def default_name(self):
        if not self.name:
            self.name = self.name_en
        return self


class JobOptionUpdateRequest(DomainModel):
    """Request schema for updating a job option; omitted fields are unchanged"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    name_ko: Optional[str] = Field(None, max_length=100)
    name_en: Optional[str] = Field(None, max_length=100)
    name_mn: Optional[str] = Field(None, max_length=100)
    order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None:
            if not v.strip():
                raise ValueError("Name is required")
            return v.strip()
        return v


class ActiveToggleRequest(DomainModel):
    """Request schema for the active switch"""
    is_active: bool


class JobOptionResponse(DomainModel):
    """Response schema for a job option"""
    id: int
    kind: JobOptionKind
    name: str
    name_ko: Optional[str] = None
    name_en: Optional[str] = None
    name_mn: Optional[str] = None
    order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SkillCreateRequest(DomainModel):
    """Request schema for creating a skill"""
    name: str = Field(..., min_length=1, max_length=100, description="Skill name")
    description: Optional[str] = Field(None, max_length=500, description="Skill description")
    is_active: bool = Field(True, description="Whether the skill is offered")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Skill name is required")
        return v.strip()

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _clean_optional(v)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "React",
                "description": "Frontend UI library",
                "isActive": True
            }
        }
    )


class SkillUpdateRequest(DomainModel):
    """Request schema for updating a skill; omitted fields are unchanged"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None:
            if not v.strip():
                raise ValueError("Skill name is required")
            return v.strip()
        return v


class SkillResponse(DomainModel):
    """Response schema for a skill"""
    id: int
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DeleteResponse(DomainModel):
    """Response schema for deletions"""
    success: bool = True
    message: str
    id: int


def job_option_create_schema(kind: JobOptionKind) -> Type[JobOptionCreateRequest]:
    """Pick the create schema that applies to an option kind"""
    if kind == JobOptionKind.PREFERRED_INDUSTRY:
        return PreferredIndustryCreateRequest
    return JobOptionCreateRequest
