"""
UI layer für die Console

Diese View liest Eingaben und gibt Text aus.
- Eingaben lesen und trimmen (leer = None)
- Eingaben in Decimal / int umwandeln
- Menü und Meldungen ausgeben
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Callable, Iterable, Optional

from .exceptions import ValidationError

# Erlaubte Schreibweisen wie bei einem Dezimal-Literal: 5 / -5.1 / .5 / 1e3
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")

_TWO_PLACES = Decimal("0.01")

# Obergrenze für Stellen vor dem Komma (Emax des Standard-Kontexts).
_MAX_STELLEN = 999_999


def parse_decimal(text: str) -> Decimal:
    """
    Wandelt Text in ein Decimal mit genau 2 Nachkommastellen.
    Gerundet wird kaufmännisch (ROUND_HALF_UP).
    """
    if not _DECIMAL_RE.fullmatch(text) or not text.isascii():
        raise ValidationError(text, "decimal number")
    try:
        value = Decimal(text)
        # Stellen vor dem Komma + 2 Nachkommastellen + 1 für Übertrag beim Runden.
        stellen = max(value.adjusted(), 0) + 4
        if stellen > _MAX_STELLEN:
            raise ValidationError(text, "decimal number")
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, stellen)
            result = value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(text, "decimal number") from e

    # Kein -0.00, Null hat kein Vorzeichen.
    return result.copy_abs() if result.is_zero() else result


def parse_integer(text: str) -> int:
    """Wandelt Text in eine ganze Zahl. Kein Bereichs-Check."""
    if not _INTEGER_RE.fullmatch(text) or not text.isascii():
        raise ValidationError(text, "number")
    return int(text)


class ConsoleProjectsView:
    """
    View für die Konsole.

    input_func / output_func sind austauschbar.
    Standard ist input() und print().
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[..., None]] = None,
    ) -> None:
        self._input = input_func or input
        self._output = output_func or print

    def read_line(self, prompt: str) -> Optional[str]:
        """
        Zeigt den Prompt und liest eine Zeile.
        - Leere Eingabe oder nur Leerzeichen -> None
        - Sonst der getrimmte Text
        - Ende der Eingabe (EOF) zählt als leere Eingabe
        """
        try:
            raw = self._input(f"{prompt}: ")
        except EOFError:
            return None

        text = raw.strip()
        return text if text else None

    def read_decimal(self, prompt: str) -> Optional[Decimal]:
        """Liest eine Dezimalzahl. None bleibt None."""
        text = self.read_line(prompt)
        if text is None:
            return None
        return parse_decimal(text)

    def read_integer(self, prompt: str) -> Optional[int]:
        """Liest eine ganze Zahl. None bleibt None."""
        text = self.read_line(prompt)
        if text is None:
            return None
        return parse_integer(text)

    def render_operations(self, operations: Iterable[str]) -> None:
        """Zeigt das Menü, eine Zeile pro Eintrag."""
        self._output("\nThese are the available selections. Press the Enter key to quit:")
        for nummer, label in enumerate(operations, 1):
            self._output(f"   {nummer}) {label}")

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        self._output(text)
