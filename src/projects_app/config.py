"""
Konfiguration der Anwendung.

Nur der Einstiegspunkt liest die Konfiguration.
Alle Werte sind optional und kommen aus Umgebungsvariablen.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_PATH = os.path.join("data", "projects.json")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class AppConfig:
    """
    Konfiguration als Dataclass.
    - data_path: JSON-Datei mit den Projekten
    - log_level: Level für logging
    """
    data_path: str = DEFAULT_DATA_PATH
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Baut die Konfiguration aus Umgebungsvariablen.
        - PROJECTS_DATA_PATH
        - PROJECTS_LOG_LEVEL
        """
        return cls(
            data_path=os.getenv("PROJECTS_DATA_PATH", DEFAULT_DATA_PATH),
            log_level=os.getenv("PROJECTS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def validate(self) -> None:
        """Prüft die Werte und legt den Datenordner an."""
        if not self.data_path.strip():
            raise ValueError("data_path darf nicht leer sein.")
        Path(self.data_path).parent.mkdir(parents=True, exist_ok=True)
