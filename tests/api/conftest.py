"""API test fixtures: the app wired to a fixed clock over an in-memory store or SQLite."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fitform.api.dependencies import get_ai_service, get_clock, get_store
from fitform.db.session import get_db
from fitform.main import app
from fitform.services.ai_service import AIPlanService


class StubCompletion:
    def __init__(self, content: str):
        self.content = content

    def model_dump(self) -> dict:
        return {"choices": [{"message": {"role": "assistant", "content": self.content}}]}


class StubClient:
    def __init__(self):
        self.content = "{}"
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        return StubCompletion(self.content)


@pytest.fixture
def ai_client() -> StubClient:
    return StubClient()


@pytest.fixture
def client(store, clock, ai_client):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_ai_service] = lambda: AIPlanService(client=ai_client)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_client(sql_engine, clock):
    """Client whose requests each open a fresh database session."""

    def get_test_db():
        with Session(sql_engine) as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
