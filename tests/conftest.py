import logging

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, StaticPool, create_engine

from app.api.deps import get_session
from app.main import app
from app.repositories.subscription_repository import SQLSubscriptionRepository


@pytest.fixture(name="engine")
def engine_fixture():
    # One shared in-memory SQLite connection, usable from the TestClient thread
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="logger")
def logger_fixture():
    return logging.getLogger("subscription-service.tests")


@pytest.fixture(name="repository")
def repository_fixture(session, logger):
    return SQLSubscriptionRepository(session, logger)


@pytest.fixture(name="client")
def client_fixture(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
