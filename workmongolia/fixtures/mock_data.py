"""Mock users and companies used in place of a live data source.

Timestamps are derived from ``now`` so that callers can freeze time; when it
is omitted the current UTC time is used.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from workmongolia.fixtures.data_source import InMemoryDataSource
from workmongolia.schemas.domain import Company, CompanySize, User, UserRole

ONE_DAY = timedelta(days=1)


def _resolve_now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def build_mock_users(now: Optional[datetime] = None) -> List[User]:
    """Return the mock users, ordered by id"""
    now = _resolve_now(now)
    return [
        User(
            id=1,
            email="wizar.temuujin1@gmail.com",
            name="John Doe",
            role=UserRole.CANDIDATE,
            headline=(
                "Experienced software developer with 5 years of React and TypeScript "
                "experience. Passionate about building scalable web applications."
            ),
            skills=["React", "TypeScript", "Node.js", "Next.js", "GraphQL"],
            experience_years=5,
            location="Ulaanbaatar",
            profile_picture=None,
            is_active=True,
            created_at=now,
            updated_at=now,
        ),
        User(
            id=2,
            email="comp@mail.com",
            name="Jane Smith",
            role=UserRole.EMPLOYER,
            location="Ulaanbaatar",
            profile_picture=None,
            is_active=True,
            created_at=now,
            updated_at=now,
        ),
        User(
            id=3,
            email="admin@admin.admin",
            name="Admin User",
            role=UserRole.ADMIN,
            location="Ulaanbaatar",
            profile_picture=None,
            is_active=True,
            created_at=now,
            updated_at=now,
        ),
        User(
            id=4,
            email="seojun.kim@email.com",
            name="김서준",
            role=UserRole.CANDIDATE,
            headline="시니어 프론트엔드 개발자. 대기업에서 핵심 서비스를 개발하고 있으며, 오픈소스 기여자입니다.",
            skills=["React", "TypeScript", "Next.js", "GraphQL", "AWS"],
            experience_years=5,
            location="서울시 판교",
            profile_picture=None,
            is_active=True,
            created_at=now,
            updated_at=now,
        ),
    ]


def build_mock_companies(now: Optional[datetime] = None) -> List[Company]:
    """Return the mock companies, ordered by id"""
    now = _resolve_now(now)
    yesterday = now - ONE_DAY
    return [
        Company(
            id=1,
            name="Tech Mongolia",
            industry="Technology",
            size=CompanySize.MEDIUM,
            location="Ulaanbaatar",
            description="Leading tech company in Mongolia",
            logo_url=None,
            website_url="https://techmongolia.mn",
            created_at=now,
            updated_at=now,
        ),
        Company(
            id=2,
            name="Startup Hub",
            industry="Technology",
            size=CompanySize.SMALL,
            location="Ulaanbaatar",
            description="Innovative startup accelerator",
            logo_url=None,
            website_url="https://startuphub.mn",
            created_at=now,
            updated_at=now,
        ),
        Company(
            id=3,
            name="Mongolian Bank",
            industry="Finance",
            size=CompanySize.LARGE,
            location="Ulaanbaatar",
            description="Premier financial services provider in Mongolia",
            logo_url=None,
            website_url="https://mongolianbank.mn",
            created_at=yesterday,
            updated_at=yesterday,
        ),
    ]


def mock_user_source(now: Optional[datetime] = None) -> InMemoryDataSource[User]:
    """Fresh in-memory user source seeded with the mock users"""
    return InMemoryDataSource(User, build_mock_users(now))


def mock_company_source(now: Optional[datetime] = None) -> InMemoryDataSource[Company]:
    """Fresh in-memory company source seeded with the mock companies"""
    return InMemoryDataSource(Company, build_mock_companies(now))
