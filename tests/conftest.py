"""
Test configuration and fixtures for the FastAPI link shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from shortlink_app.database.connection import Base, get_db
from shortlink_app.services.link_service import LinkService
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)
    
    # Create session
    db = TestingSessionLocal()
    
    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def link_service(db_session):
    """LinkService wired to the test session with a fixed base URL"""
    return LinkService(
        db=db_session,
        strategy=RandomShortCodeStrategy(length=6),
        base_url="https://sho.rt"
    )


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db
    
    # Create test client
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()
