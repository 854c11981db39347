import os

# Cheap hashes and no stray .env values while testing
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("GEMINI_API_KEY", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ecotrack.database import Base, get_db
from ecotrack.main import app
from ecotrack.models import Role
from ecotrack.schemas import UserCreate
from ecotrack.services.auth import UserService


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the startup seeding does not run
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def manager(db):
    return UserService(db).create_user(UserCreate(
        name="Mia Manager",
        email="manager@example.com",
        password="manager-pass",
        role=Role.MANAGER,
    ))


@pytest.fixture
def viewer(db):
    return UserService(db).create_user(UserCreate(
        name="Vic Viewer",
        email="viewer@example.com",
        password="viewer-pass",
        role=Role.VIEWER,
        allowed_units=["Warehouse 6"],
    ))
