"""
Pytest configuration and fixtures for all tests.
"""

import os
import pytest
from typing import Generator, Optional
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from ucsb_backend.database import get_db
from ucsb_backend.model import Base
from ucsb_backend.model.organization import UCSBOrganization
from ucsb_backend.permissions.auth import get_current_principal
from ucsb_backend.permissions.principal import Principal
from ucsb_backend.repositories.organization import UCSBOrganizationRepository, get_organization_repository


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


@pytest.fixture(scope="function")
def engine():
    """Create an in-memory SQLite engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(engine) -> Generator[Session, None, None]:
    """Create a test database session using SQLite in-memory."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def organization_repository() -> UCSBOrganizationRepository:
    """
    Repository whose store operations are mocks.
    Lookups report nothing stored until a test says otherwise.
    """
    repository = UCSBOrganizationRepository(MagicMock(spec=Session))
    repository.list = MagicMock(return_value=[])
    repository.get_by_id_optional = MagicMock(return_value=None)
    repository.exists = MagicMock(return_value=False)
    repository.upsert = MagicMock(side_effect=lambda entity: entity)
    repository.insert = MagicMock(side_effect=lambda entity: entity)
    repository.delete = MagicMock(return_value=None)
    return repository


# Principal fixtures for different user types
@pytest.fixture
def user_principal() -> Principal:
    return Principal(user_id="user-123", roles=["USER"])


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(user_id="admin-123", roles=["ADMIN", "USER"])


@pytest.fixture
def client_factory(organization_repository):
    """Factory for creating test clients acting as a given principal."""
    from fastapi.testclient import TestClient
    from ucsb_backend.server import app

    def _create_client(principal: Optional[Principal] = None):
        app.dependency_overrides[get_organization_repository] = lambda: organization_repository
        if principal is not None:
            app.dependency_overrides[get_current_principal] = lambda: principal
        return TestClient(app)

    yield _create_client

    app.dependency_overrides.clear()


@pytest.fixture
def database_client(test_db, admin_principal):
    """Admin test client whose requests run against the SQLite test session."""
    from fastapi.testclient import TestClient
    from ucsb_backend.server import app

    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_current_principal] = lambda: admin_principal

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(client_factory):
    return client_factory()


@pytest.fixture
def user_client(client_factory, user_principal):
    return client_factory(user_principal)


@pytest.fixture
def admin_client(client_factory, admin_principal):
    return client_factory(admin_principal)


def make_organization(org_code: str, short: str, full: str, inactive: bool = False) -> UCSBOrganization:
    return UCSBOrganization(
        org_code=org_code,
        org_translation_short=short,
        org_translation=full,
        inactive=inactive
    )


@pytest.fixture
def tasa() -> UCSBOrganization:
    return make_organization("tasa", "taiwaneseAmericanStudentAssociation", "taiwaneseAmericanStudentAssociationAtUCSB")


@pytest.fixture
def osli() -> UCSBOrganization:
    return make_organization("osli", "studentLife", "officeOfStudentLife")
