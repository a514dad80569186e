"""
projects_app package

Konsolen-Menü zum Anlegen von Projekten.

Schichtenarchitektur:
- domain.py: Entity Project + Menü-Einträge
- exceptions.py: Fehlerklassen
- persistence.py: JSON-Persistierung
- service.py: Anlegen von Projekten
- view.py: Ein-/Ausgabe und Typ-Umwandlung
- controller.py: Menü-Schleife
- config.py / logging_utils.py: Konfiguration und Logging
- main.py: Einstiegspunkt
"""

__version__ = "0.1.0"
