"""Shared fixtures: scripted console and in-memory store."""

import pytest

from projects_app.controller import ProjectsController
from projects_app.persistence import InMemoryProjectRepository
from projects_app.service import ProjectService
from projects_app.view import ConsoleProjectsView


class ScriptedConsole:
    """Feeds prepared lines to input() and records everything printed."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def print(self, *args):
        self.output.append(" ".join(str(a) for a in args))

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def make_console():
    def _make(*lines):
        return ScriptedConsole(lines)
    return _make


@pytest.fixture
def repo():
    return InMemoryProjectRepository()


@pytest.fixture
def make_controller(repo):
    def _make(console, service=None):
        view = ConsoleProjectsView(input_func=console.input, output_func=console.print)
        return ProjectsController(service or ProjectService(repo), view)
    return _make
