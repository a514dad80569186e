"""
Domain beinhaltet die Entities

Dieses Modul enthält nur die Fachobjekte.
Es enthält keine UI- oder JSON-Logik.

- Ein Projekt ist eine Dataclass.
- Der Entwurf (Draft) und der gespeicherte Datensatz sind dieselbe Klasse.
- Ein Entwurf hat noch keine project_id.
- Fehlende Werte sind immer None, nie ein leerer String.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional


# Menü-Text für das Anlegen eines Projekts.
ADD_PROJECT = "Add a project"

# Wert für "keine Eingabe" im Menü.
EXIT_SELECTION = -1


@dataclass(slots=True, frozen=True)
class Project:
    """
    Ein Projekt.
    - estimated_hours / actual_hours haben immer 2 Nachkommastellen.
    - difficulty soll 1..5 sein, wird hier aber nicht geprüft.
    """
    project_name: Optional[str] = None
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    project_id: Optional[int] = None

    def with_id(self, project_id: int) -> "Project":
        """
        Liefert eine Kopie mit vergebener ID.
        Der Entwurf selbst bleibt unverändert.
        """
        return replace(self, project_id=project_id)

    def __str__(self) -> str:
        return (
            f"Project(project_id={self.project_id}, "
            f"project_name={self.project_name}, "
            f"estimated_hours={self.estimated_hours}, "
            f"actual_hours={self.actual_hours}, "
            f"difficulty={self.difficulty}, "
            f"notes={self.notes})"
        )
