# tests/conftest.py

from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from application.use_cases import ANTHROPIC, GEMINI, OLLAMA
from infrastructure.config import Settings
from infrastructure.database import Database
from interfaces.app import create_app

from fakes import FakeProvider


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(database_path=str(tmp_path / "tasks.db"), gemini_api_key="test-key")


@pytest.fixture()
def database(settings: Settings) -> Database:
    return Database(settings.database_path)


@pytest.fixture()
def providers() -> Dict[str, FakeProvider]:
    return {
        ANTHROPIC: FakeProvider("from anthropic"),
        OLLAMA: FakeProvider("from ollama"),
        GEMINI: FakeProvider("from gemini"),
    }


@pytest.fixture()
def client(settings: Settings, database: Database, providers: Dict[str, FakeProvider]) -> TestClient:
    return TestClient(create_app(settings, database, providers))
