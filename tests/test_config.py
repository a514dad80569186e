"""Tests for configuration loading and the entry point."""

import logging

import pytest

from projects_app import main as main_module
from projects_app.config import AppConfig, DEFAULT_DATA_PATH, DEFAULT_LOG_LEVEL
from projects_app.logging_utils import resolve_level, setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("PROJECTS_DATA_PATH", raising=False)
    monkeypatch.delenv("PROJECTS_LOG_LEVEL", raising=False)

    cfg = AppConfig.from_env()

    assert cfg.data_path == DEFAULT_DATA_PATH
    assert cfg.log_level == DEFAULT_LOG_LEVEL


def test_from_env(monkeypatch, tmp_path):
    target = tmp_path / "nested" / "projects.json"
    monkeypatch.setenv("PROJECTS_DATA_PATH", str(target))
    monkeypatch.setenv("PROJECTS_LOG_LEVEL", "DEBUG")

    cfg = AppConfig.from_env()
    cfg.validate()

    assert cfg.data_path == str(target)
    assert cfg.log_level == "DEBUG"
    assert target.parent.is_dir()


def test_validate_rejects_empty_path():
    with pytest.raises(ValueError):
        AppConfig(data_path=" ").validate()


def test_main_runs_until_exit(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("PROJECTS_DATA_PATH", str(tmp_path / "projects.json"))
    lines = iter(["1", "Widget", "10", "8", "3", "note", ""])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

    main_module.main()

    out = capsys.readouterr().out
    assert "You have successfully created project: Project(project_id=1" in out
    assert "Exiting the menu." in out
    assert (tmp_path / "projects.json").exists()


@pytest.mark.parametrize("raw,expected", [
    ("debug", logging.DEBUG),
    (" Info ", logging.INFO),
    ("bogus", logging.WARNING),
    (logging.ERROR, logging.ERROR),
])
def test_resolve_level(raw, expected):
    assert resolve_level(raw) == expected


def test_setup_logging_uses_given_level_not_env(monkeypatch):
    calls = []
    monkeypatch.setenv("PROJECTS_LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("ERROR")

    assert calls[0]["level"] == logging.ERROR
