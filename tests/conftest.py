import os
from datetime import date

# до импорта приложения: тестовая БД, без OpenAI, без задержки mock-режима
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""
os.environ["MOCK_MODE"] = "false"
os.environ["MOCK_DELAY_SECONDS"] = "0"
os.environ["TIMEZONE"] = "UTC"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from getfit.db.base import Base
from getfit import models  # noqa
from getfit.deps import get_db, get_today
from getfit.main import app

TODAY = date(2026, 10, 19)  # Monday


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def openai_key(monkeypatch):
    from getfit.core.config import settings

    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    return "sk-test"
