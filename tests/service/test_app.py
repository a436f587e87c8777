"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from docdeps.config import CheckConfig
from docdeps.hook import IncludeCheckHook
from docdeps.report.sinks import CollectingStatusSink
from docdeps.service import create_app
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def client() -> TestClient:
    app = create_app(lambda: IncludeCheckHook(CheckConfig(), sink=CollectingStatusSink()))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_on_success_returns_report(client: TestClient, repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "source/page.txt": ".. include:: /includes/foo.rst\n",
            "source/includes/foo.rst": "Shared\n",
        }
    )

    response = client.post(
        "/events/on-success",
        json={
            "path": str(repo_builder.path()),
            "modified_files": ["source/includes/foo.rst"],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["title"] == "Documentation Include Dependency Check"
    assert "[Changed Include File]: source/includes/foo.rst" in data["text"]


def test_on_success_skipped_when_disabled(client: TestClient, repo_builder: RepoBuilder) -> None:
    response = client.post(
        "/events/on-success",
        json={"path": str(repo_builder.path()), "enabled": False},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "skipped"


def test_on_success_missing_revisions_is_bad_request(
    client: TestClient, repo_builder: RepoBuilder
) -> None:
    response = client.post("/events/on-success", json={"path": str(repo_builder.path())})

    assert response.status_code == 400
    assert "Missing base and head revision" in response.json()["detail"]
