from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, select

from ..core.config import Settings, get_settings
from ..core.db import create_engine_for_url, get_session, set_engine
from ..core.dependencies import get_classifier
from ..main import app
from ..models import TransactionModel
from ..services import Outcome, OutcomeClassifier


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def engine(tmp_path):
    test_engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def force_outcome() -> Callable[[Outcome], None]:
    def _force(outcome: Outcome) -> None:
        app.dependency_overrides[get_classifier] = lambda: OutcomeClassifier.always(outcome)

    return _force


@pytest.fixture
def count_rows(engine) -> Callable[[], int]:
    def _count() -> int:
        with Session(engine) as session:
            return len(session.exec(select(TransactionModel)).all())

    return _count


@pytest.fixture
def client(engine, settings, force_outcome) -> TestClient:
    set_engine(engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    app.dependency_overrides[get_settings] = lambda: settings
    force_outcome(Outcome.SUCCESS)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    set_engine(None)
