"""Mock domain data and injectable data sources"""

from workmongolia.fixtures.data_source import DataSource, InMemoryDataSource
from workmongolia.fixtures.mock_data import (
    build_mock_users,
    build_mock_companies,
    mock_user_source,
    mock_company_source,
)

__all__ = [
    "DataSource",
    "InMemoryDataSource",
    "build_mock_users",
    "build_mock_companies",
    "mock_user_source",
    "mock_company_source",
]
