"""
Entry point für die Projekt-Konsole.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import sys

from .config import AppConfig
from .logging_utils import setup_logging
from .persistence import JsonProjectRepository
from .service import ProjectService
from .view import ConsoleProjectsView
from .controller import ProjectsController


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Logging einrichten
    - Komponenten erstellen
    - Menü-Schleife starten
    """
    try:
        config = AppConfig.from_env()
        setup_logging(config.log_level)
        config.validate()

        # Bausteine der App erstellen.
        repo = JsonProjectRepository(config.data_path)
        service = ProjectService(repo)
        view = ConsoleProjectsView()
        controller = ProjectsController(service, view)

        # App starten.
        controller.process_user_selections()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nExiting the menu.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler beim Start.
        print(f"\nERROR: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
