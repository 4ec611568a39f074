#!/usr/bin/env python3
"""
Shared test fixtures and configuration.

Organized for incremental testing from small to large blocks:
mocked sessions, sample data, the in-memory test database, then the full service.
"""

import pytest
import sys
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import Mock, patch

# Add project root to path for proper imports
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src import consts
from src.db.test_db import TestDatabase, TestDataFactory, SAMPLE_BUSINESSES
from src.business_directory import BusinessDirectoryService


# ============================================================================
# Level 1: Basic Mocking Fixtures
# ============================================================================

@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict('os.environ', {
        consts.DATABASE_URL_ENV: 'sqlite://',
        consts.PARALLEL_READS_ENV: 'false',
        consts.SKIP_EMPTY_TAGS_ENV: 'false',
    }):
        yield


@pytest.fixture
def mock_db_session():
    """Mock database session for testing."""
    mock_db = Mock()
    mock_db.query.return_value.filter.return_value.first.return_value = None
    mock_db.query.return_value.filter.return_value.all.return_value = []
    mock_db.add.return_value = None
    mock_db.commit.return_value = None
    return mock_db


@pytest.fixture
def mock_session_factory(mock_db_session):
    """Session factory that always yields the mock session."""
    @contextmanager
    def factory():
        yield mock_db_session
    return factory


# ============================================================================
# Level 2: Sample Data Fixtures
# ============================================================================

@pytest.fixture
def sample_businesses():
    """Sample creation inputs for testing."""
    return {name: dict(info) for name, info in SAMPLE_BUSINESSES.items()}


# ============================================================================
# Level 3: Test Database Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def test_db():
    """Test database with proper setup and teardown."""
    db = TestDatabase()
    db.setup()
    yield db
    db.teardown()


@pytest.fixture
def test_data_factory():
    """Test data factory for creating test data."""
    return TestDataFactory()


@pytest.fixture
def test_session(test_db):
    """Get a test database session."""
    with test_db.get_session() as session:
        yield session


@pytest.fixture
def seeded_directory(test_session, test_data_factory):
    """
    Three businesses:
      b1 (beauty) - main image, two gallery images, tags nails and hair
      b2 (beauty) - no images, no tags
      b3 (fitness) - main image, tag yoga
    """
    factory = test_data_factory
    factory.create_test_business(test_session, "b1", name="Salon X", location="Seoul")
    factory.create_test_business(test_session, "b2", name="Spa Y", location="Busan")
    factory.create_test_business(test_session, "b3", category="fitness", name="Gym Z", location="Incheon")

    factory.create_test_image(test_session, "b1", "/images/b1/main.jpg", "main")
    factory.create_test_image(test_session, "b1", "/images/b1/gallery-1.jpg", "gallery")
    factory.create_test_image(test_session, "b1", "/images/b1/gallery-2.jpg", "gallery")
    factory.create_test_image(test_session, "b3", "/images/b3/main.jpg", "main")

    factory.create_test_tags(test_session, "b1", ["nails", "hair"])
    factory.create_test_tags(test_session, "b3", ["yoga"])
    return test_session


# ============================================================================
# Level 4: Service Fixtures
# ============================================================================

@pytest.fixture
def directory_service(test_db):
    """BusinessDirectoryService bound to the test database, sequential reads."""
    return BusinessDirectoryService(session_factory=test_db.get_session, parallel_reads=False, skip_empty_tags=False)


# ============================================================================
# Utility Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path."""
    return project_root
