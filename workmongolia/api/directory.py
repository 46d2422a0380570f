"""Read-only user and company directory endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from workmongolia.fixtures.data_source import DataSource
from workmongolia.schemas.domain import Company, User, UserRole

router = APIRouter()


def get_user_source(request: Request) -> DataSource[User]:
    """Dependency returning the application's user source"""
    return request.app.state.user_source


def get_company_source(request: Request) -> DataSource[Company]:
    """Dependency returning the application's company source"""
    return request.app.state.company_source


@router.get("/users", response_model=List[User], response_model_exclude_none=True)
async def list_users(
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    source: DataSource[User] = Depends(get_user_source)
):
    """List users, optionally restricted to one role"""
    users = source.list()
    if role is not None:
        users = [user for user in users if user.role == role]
    return users


@router.get("/users/{user_id}", response_model=User, response_model_exclude_none=True)
async def get_user(user_id: int, source: DataSource[User] = Depends(get_user_source)):
    return source.get(user_id)


@router.get("/companies", response_model=List[Company])
async def list_companies(source: DataSource[Company] = Depends(get_company_source)):
    return source.list()


@router.get("/companies/{company_id}", response_model=Company)
async def get_company(company_id: int, source: DataSource[Company] = Depends(get_company_source)):
    return source.get(company_id)
