"""Domain types shared by every page: users and companies.

Values are exchanged in camelCase (``experienceYears``, ``logoUrl``) and held
as snake_case attributes. Optional fields that are absent or null mean
"unknown", never an error.
"""

from typing import List, Optional
from datetime import datetime, timezone
import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class UserRole(str, enum.Enum):
    """Which UI surface a user belongs to"""
    CANDIDATE = "candidate"
    EMPLOYER = "employer"
    ADMIN = "admin"


class CompanySize(str, enum.Enum):
    """Company size enumeration"""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# Profile fields only a candidate may carry
CANDIDATE_ONLY_FIELDS = ("headline", "skills", "experience_years")


class DomainModel(BaseModel):
    """Base for camelCase wire models"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _as_utc(value: datetime) -> datetime:
    # Timestamps without an offset are taken to be UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _check_timestamps(created_at: Optional[datetime], updated_at: Optional[datetime]) -> None:
    if created_at is None or updated_at is None:
        return
    if _as_utc(updated_at) < _as_utc(created_at):
        raise ValueError("updatedAt cannot be earlier than createdAt")


class User(DomainModel):
    """A candidate, employer or administrator"""

    id: int = Field(..., ge=1)
    email: str = Field(..., min_length=3, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole

    # Candidate profile
    headline: Optional[str] = None
    skills: Optional[List[str]] = None
    experience_years: Optional[int] = Field(None, ge=0)

    location: Optional[str] = None
    phone: Optional[str] = None
    profile_picture: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = v.strip()
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_role_fields(self):
        if self.role != UserRole.CANDIDATE:
            populated = [f for f in CANDIDATE_ONLY_FIELDS if getattr(self, f) is not None]
            if populated:
                raise ValueError(
                    f"Only candidates may carry {', '.join(populated)}"
                )
        _check_timestamps(self.created_at, self.updated_at)
        return self

    @property
    def is_candidate(self) -> bool:
        return self.role == UserRole.CANDIDATE


class Company(DomainModel):
    """An employer organisation"""

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=255)
    industry: Optional[str] = None
    size: Optional[CompanySize] = None
    location: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_timestamps(self):
        _check_timestamps(self.created_at, self.updated_at)
        return self
