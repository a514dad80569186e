"""Tests for the project store and service."""

import json
from decimal import Decimal

import pytest

from projects_app.domain import Project
from projects_app.exceptions import PersistenceError
from projects_app.persistence import (
    FileStorage,
    InMemoryProjectRepository,
    JsonProjectRepository,
)
from projects_app.service import ProjectService


def _draft(name="Widget"):
    return Project(
        project_name=name,
        estimated_hours=Decimal("10.00"),
        actual_hours=Decimal("8.00"),
        difficulty=3,
        notes="note",
    )


def test_json_repository_assigns_ids_and_keeps_draft(tmp_path):
    path = tmp_path / "projects.json"
    repo = JsonProjectRepository(str(path))
    draft = _draft()

    first = repo.insert_project(draft)
    second = repo.insert_project(_draft("Gadget"))

    assert draft.project_id is None
    assert first.project_id == 1
    assert second.project_id == 2
    assert repo.lade_alle() == [first, second]


def test_json_repository_stores_two_decimal_places(tmp_path):
    path = tmp_path / "projects.json"
    JsonProjectRepository(str(path)).insert_project(_draft())

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["projects"][0]["estimated_hours"] == "10.00"
    assert payload["projects"][0]["actual_hours"] == "8.00"


def test_json_repository_continues_after_highest_id(tmp_path):
    path = tmp_path / "projects.json"
    path.write_text(json.dumps({"projects": [
        {"project_id": 7, "project_name": "Old", "estimated_hours": None,
         "actual_hours": None, "difficulty": None, "notes": None},
    ]}), encoding="utf-8")

    saved = JsonProjectRepository(str(path)).insert_project(_draft())

    assert saved.project_id == 8


def test_corrupt_file_raises_persistence_error(tmp_path):
    path = tmp_path / "projects.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonProjectRepository(str(path)).insert_project(_draft())

    assert path.read_text(encoding="utf-8") == "{not json"


def test_write_failure_raises_persistence_error(tmp_path):
    class BrokenStorage(FileStorage):
        def schreibe_text(self, pfad, content):
            raise OSError("disk full")

    path = tmp_path / "projects.json"
    repo = JsonProjectRepository(str(path), storage=BrokenStorage())

    with pytest.raises(PersistenceError, match="disk full"):
        repo.insert_project(_draft())
    assert not path.exists()


def test_in_memory_repository_ids():
    repo = InMemoryProjectRepository()

    assert repo.insert_project(_draft()).project_id == 1
    assert repo.insert_project(_draft()).project_id == 2


def test_service_requires_name():
    repo = InMemoryProjectRepository()
    service = ProjectService(repo)

    with pytest.raises(PersistenceError, match="Project name is required."):
        service.add_project(Project())
    assert repo.lade_alle() == []


def test_service_returns_authoritative_copy():
    service = ProjectService(InMemoryProjectRepository())

    saved = service.add_project(_draft())

    assert saved.project_id == 1
    assert str(saved) == (
        "Project(project_id=1, project_name=Widget, estimated_hours=10.00, "
        "actual_hours=8.00, difficulty=3, notes=note)"
    )
