"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from docmanager.core.config import Settings
from docmanager.db.repositories.document_repository import DocumentRepository
from docmanager.domains.documents.entities import Author, Document
from docmanager.main import create_app


def utc(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def repository():
    return DocumentRepository()


@pytest.fixture
def alpha_report():
    return Document(
        title="Alpha Report",
        content="quarterly results",
        author=Author(id="a1", name="Alice"),
        created=utc(2024, 1, 10),
    )


@pytest.fixture
def populated_repository(repository):
    repository.save(Document(
        title="Alpha Report",
        content="quarterly results",
        author=Author(id="a1", name="Alice"),
        created=utc(2024, 1, 10),
    ))
    repository.save(Document(
        title="Beta Notes",
        content="meeting minutes and results",
        author=Author(id="a2", name="Bob"),
        created=utc(2024, 3, 5),
    ))
    repository.save(Document(
        title="Bonus Plan",
        content="annual budget",
        author=Author(id="a3", name="Carol"),
        created=utc(2023, 12, 31, 23, 59, 59),
    ))
    return repository


@pytest.fixture
def client():
    app = create_app(Settings(app_title="DocManager Test", log_level="DEBUG"))
    with TestClient(app) as test_client:
        yield test_client
