"""
Controller layer

Der ProjectsController steuert die App. Er verbindet Service und View.

Aufgaben:
- Menü anzeigen und Auswahl lesen
- Auswahl an die passende Operation weitergeben
- Fehler eines Durchlaufs abfangen und melden
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple

from .domain import ADD_PROJECT, EXIT_SELECTION, Project
from .service import ProjectService
from .view import ConsoleProjectsView


class LoopState(Enum):
    """Zustand der Menü-Schleife."""
    running = "running"
    terminated = "terminated"


class ProjectsController:
    """
    Hauptcontroller für das Projekt-Menü.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Service und View
    """

    def __init__(
        self,
        service: ProjectService,
        view: ConsoleProjectsView,
    ) -> None:
        """
        Erstellt den Controller.

        - service: Anlegen von Projekten
        - view: Ein-/Ausgabe
        """
        self._service = service
        self._view = view
        self._state = LoopState.running

        # (Menü-Text, Handler). Auswahlnummer = Position + 1.
        self._operations: Tuple[Tuple[str, Callable[[], None]], ...] = (
            (ADD_PROJECT, self.create_project),
        )

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def operations(self) -> Tuple[str, ...]:
        """Menü-Texte in Anzeige-Reihenfolge."""
        return tuple(label for label, _ in self._operations)

    def process_user_selections(self) -> None:
        """
        Startet die Menü-Schleife.
        Läuft, bis der Nutzer ohne Eingabe Enter drückt.
        """
        while self._state is LoopState.running:
            self.run_menu_pass()

    def run_menu_pass(self) -> None:
        """
        Ein Durchlauf: Menü zeigen, Auswahl lesen, Operation ausführen.
        Jeder Fehler wird hier abgefangen. Die Schleife läuft weiter.
        """
        try:
            selection = self.get_user_selection()

            if selection == EXIT_SELECTION:
                self.exit_menu()
            elif self._is_operation(selection):
                _, handler = self._operations[selection - 1]
                handler()
            else:
                self._view.show_message(f"\n{selection} is not a valid selection. Try again.")

        except Exception as e:
            self._view.show_message(f"\nError: {e} Try again.")

    def get_user_selection(self) -> int:
        """
        Zeigt das Menü und liest die Auswahl.
        Keine Eingabe -> EXIT_SELECTION.
        """
        self._view.render_operations(self.operations)
        selection = self._view.read_integer("Enter a menu selection")
        return EXIT_SELECTION if selection is None else selection

    def create_project(self) -> None:
        """
        Fragt die Felder ab und legt das Projekt an.
        Fehler werden nicht hier abgefangen, sondern im Menü-Durchlauf.
        """
        project_name = self._view.read_line("Enter the project name")
        estimated_hours = self._view.read_decimal("Enter the estimated hours")
        actual_hours = self._view.read_decimal("Enter the actual hours")
        difficulty = self._view.read_integer("Enter the project difficulty (1-5)")
        notes = self._view.read_line("Enter the project notes")

        draft = Project(
            project_name=project_name,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            difficulty=difficulty,
            notes=notes,
        )

        db_project = self._service.add_project(draft)
        self._view.show_message(f"\nYou have successfully created project: {db_project}")

    def exit_menu(self) -> None:
        """Beendet die Menü-Schleife."""
        self._view.show_message("Exiting the menu.")
        self._state = LoopState.terminated

    def _is_operation(self, selection: int) -> bool:
        """Nur Positionen aus dem Menü."""
        return 1 <= selection <= len(self._operations)
