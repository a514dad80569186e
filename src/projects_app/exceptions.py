"""
Fehlerklassen der Anwendung.

- ValidationError: Eingabe passt nicht zum erwarteten Typ.
- PersistenceError: Speichern ist fehlgeschlagen oder wurde abgelehnt.

Beide Fehler werden erst in der Menü-Schleife abgefangen.
"""

from __future__ import annotations


class ProjectsAppError(Exception):
    """Basisklasse für alle Fehler der Anwendung."""


class ValidationError(ProjectsAppError):
    """
    Eingabe konnte nicht umgewandelt werden.
    - text: die Eingabe, so wie sie eingegeben wurde (getrimmt)
    - expected: Name des erwarteten Typs
    """

    def __init__(self, text: str, expected: str) -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"{text} is not a valid {expected}.")


class PersistenceError(ProjectsAppError):
    """Fehler aus der Persistenz-Schicht."""
