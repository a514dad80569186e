"""
Persistence layer (JSON)

Hier liegt die Speicherung der Projekte. Die Domain selbst bleibt frei von JSON-Details.
- ProjectRepository: Schnittstelle (insert_project)
- JsonProjectRepository: Datei-Repository
- InMemoryProjectRepository: Repository im Speicher (Tests, Probeläufe)
- JsonSerializer: Mapping zwischen Project und JSON

Für eine bessere Fehlerbehandlung:
- Lese- und Schreibfehler werden als PersistenceError weitergegeben.
- Geschrieben wird erst in eine temporäre Datei, dann umbenannt.
"""

from __future__ import annotations

import json
import logging
import os
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Protocol

from .domain import Project
from .exceptions import PersistenceError

logger = logging.getLogger(__name__)


class ProjectRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def insert_project(self, project: Project) -> Project:
        """Speichert einen Entwurf und liefert ihn mit ID zurück."""
        ...


def naechste_id(projects: List[Project]) -> int:
    """Höchste vorhandene ID + 1. Leerer Bestand -> 1."""
    ids = [p.project_id for p in projects if p.project_id is not None]
    return max(ids, default=0) + 1


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def existiert(self, pfad: str) -> bool:
        """Prüft, ob die Datei vorhanden ist."""
        return os.path.exists(pfad)

    def lese_text(self, pfad: str) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8") as f:
            return f.read()

    def schreibe_text(self, pfad: str, content: str) -> None:
        """
        Schreibt Text in eine Datei.
        Erst temporäre Datei, dann os.replace. So bleibt die alte Datei bei Fehlern erhalten.
        """
        tmp_pfad = f"{pfad}.tmp"
        with open(tmp_pfad, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_pfad, pfad)


class JsonSerializer:
    """
    Wandelt Projekte <-> JSON.
    - Decimal wird als String gespeichert, damit "10.00" nicht zu 10.0 wird.
    - Fehlende Felder werden zu None.
    """

    def to_json(self, projects: List[Project]) -> str:
        """
        Macht aus der Projektliste einen JSON-String.
        Der String ist formatiert indent = 2.
        """
        payload = {"projects": [self._project_to_dict(p) for p in projects]}
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def from_json(self, raw: str) -> List[Project]:
        """
        Baut die Projektliste aus JSON.
        """
        payload = json.loads(raw)
        if not isinstance(payload, dict) or not isinstance(payload.get("projects", []), list):
            raise ValueError("Unerwartetes Format: 'projects' muss eine Liste sein.")
        return [self._project_from_dict(d) for d in payload.get("projects", [])]

    def _project_to_dict(self, p: Project) -> Dict[str, Any]:
        """Project Mapping für JSON."""
        return {
            "project_id": p.project_id,
            "project_name": p.project_name,
            "estimated_hours": self._decimal_to_str(p.estimated_hours),
            "actual_hours": self._decimal_to_str(p.actual_hours),
            "difficulty": p.difficulty,
            "notes": p.notes,
        }

    def _project_from_dict(self, d: Dict[str, Any]) -> Project:
        """Mapping für Project."""
        return Project(
            project_id=int(d["project_id"]),
            project_name=d.get("project_name"),
            estimated_hours=self._decimal_from_raw(d.get("estimated_hours")),
            actual_hours=self._decimal_from_raw(d.get("actual_hours")),
            difficulty=int(d["difficulty"]) if d.get("difficulty") is not None else None,
            notes=d.get("notes"),
        )

    def _decimal_to_str(self, value: Optional[Decimal]) -> Optional[str]:
        return None if value is None else str(value)

    def _decimal_from_raw(self, raw: Any) -> Optional[Decimal]:
        if raw is None:
            return None
        try:
            return Decimal(str(raw))
        except InvalidOperation as e:
            raise ValueError(f"Ungültiger Dezimalwert: {raw!r}") from e


class JsonProjectRepository:
    """
    Repository für eine JSON-Datei.
    - FileStorage für Datei-Zugriff
    - JsonSerializer für Mapping
    - Fehlende Datei = leerer Bestand
    """

    def __init__(
        self,
        pfad: str,
        storage: Optional[FileStorage] = None,
        serializer: Optional[JsonSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._pfad = pfad
        self._storage = storage or FileStorage()
        self._serializer = serializer or JsonSerializer()

    def lade_alle(self) -> List[Project]:
        """
        Lädt die Datei und baut die Projekte.
        """
        if not self._storage.existiert(self._pfad):
            logger.debug("Datendatei %s fehlt, starte mit leerem Bestand", self._pfad)
            return []

        try:
            raw = self._storage.lese_text(self._pfad)
            projects = self._serializer.from_json(raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise PersistenceError(f"Could not read projects from {self._pfad}: {e}") from e

        logger.debug("%d Projekte aus %s geladen", len(projects), self._pfad)
        return projects

    def insert_project(self, project: Project) -> Project:
        """
        Vergibt die nächste ID, hängt das Projekt an und schreibt die Datei.
        """
        projects = self.lade_alle()
        saved = project.with_id(naechste_id(projects))
        projects.append(saved)

        try:
            raw = self._serializer.to_json(projects)
            self._storage.schreibe_text(self._pfad, raw)
        except OSError as e:
            raise PersistenceError(f"Could not write projects to {self._pfad}: {e}") from e

        logger.debug("Projekt %s in %s gespeichert", saved.project_id, self._pfad)
        return saved


class InMemoryProjectRepository:
    """
    Repository im Speicher.
    Gleiche ID-Regel wie die Datei-Variante.
    """

    def __init__(self, projects: Optional[List[Project]] = None) -> None:
        self._projects: List[Project] = list(projects or [])

    def lade_alle(self) -> List[Project]:
        """Kopie der gespeicherten Projekte."""
        return list(self._projects)

    def insert_project(self, project: Project) -> Project:
        saved = project.with_id(naechste_id(self._projects))
        self._projects.append(saved)
        return saved
