"""
Application/Use-Case layer

Der ProjectService ist die Schnittstelle zwischen Menü und Persistenz.
Er prüft nur das Nötigste und gibt den Entwurf an das Repository weiter.
"""

from __future__ import annotations

import logging

from .domain import Project
from .exceptions import PersistenceError
from .persistence import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Service für Projekte.
    """

    def __init__(self, repo: ProjectRepository) -> None:
        self._repo = repo

    def add_project(self, project: Project) -> Project:
        """
        Legt ein Projekt an.
        - Projektname ist Pflicht (wie NOT NULL in der Tabelle).
        - difficulty wird nicht auf 1..5 geprüft.
        - Rückgabe ist die gespeicherte Kopie mit ID.
        """
        if project.project_name is None:
            raise PersistenceError("Project name is required.")

        saved = self._repo.insert_project(project)
        logger.debug("Projekt angelegt: %s", saved)
        return saved
