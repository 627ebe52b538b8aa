"""Prüfung einer Kursreihenfolge gegen den Katalog.

Sicherheitsnetz unabhängig von der Struktur, die die Reihenfolge erzeugt hat:
der Graph liefert garantiert gültige Pläne, die In-Order-Liste des Baums
nur in typischen Fällen.
"""

from collections import Counter
from typing import Iterable, Literal

from pydantic import BaseModel

from models.catalog import CourseCatalog


class OrderViolation(BaseModel):
    """Eine einzelne Verletzung der Kursreihenfolge."""

    severity: Literal["error", "warning"]
    constraint: str      # z.B. "prerequisite_order"
    description: str
    entity: str          # Kursnummer


class OrderValidationReport(BaseModel):
    """Ergebnis der Reihenfolge-Prüfung."""

    violations: list[OrderViolation]
    is_valid: bool       # True wenn keine Errors (Warnings ok)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        errors = [v for v in self.violations if v.severity == "error"]
        warnings = [v for v in self.violations if v.severity == "warning"]

        status = (
            "[bold green]✓ GÜLTIGE REIHENFOLGE[/bold green]"
            if self.is_valid
            else "[bold red]✗ VERLETZUNGEN GEFUNDEN[/bold red]"
        )
        lines = [status, f"Fehler: {len(errors)} | Warnungen: {len(warnings)}"]
        console.print(Panel("\n".join(lines), title="Reihenfolge-Prüfung", border_style="cyan"))

        if not self.violations:
            return

        table = Table(box=box.ROUNDED, show_lines=True)
        table.add_column("Typ", width=8)
        table.add_column("Constraint", width=22)
        table.add_column("Kurs", width=12)
        table.add_column("Beschreibung")
        for v in self.violations:
            color = "red" if v.severity == "error" else "yellow"
            table.add_row(
                f"[{color}]{v.severity.upper()}[/{color}]",
                v.constraint,
                v.entity,
                v.description,
            )
        console.print(table)


def validate_order(catalog: CourseCatalog, order: Iterable[str]) -> OrderValidationReport:
    """Prüft, ob order eine gültige Kursreihenfolge für den Katalog ist.

    Prüfungen:
    1. Jeder Kurs des Katalogs kommt vor (missing_course)
    2. Kein Kurs kommt mehrfach vor (repeated_course)
    3. Keine unbekannten Kurse (unknown_course, Warnung)
    4. Jede Voraussetzung steht vor dem Kurs (prerequisite_order)
    """
    order = list(order)
    violations: list[OrderViolation] = []

    counts = Counter(order)
    for number, n in counts.items():
        if n > 1:
            violations.append(OrderViolation(
                severity="error", constraint="repeated_course", entity=number,
                description=f"Kommt {n}x in der Reihenfolge vor.",
            ))
        if number not in catalog:
            violations.append(OrderViolation(
                severity="warning", constraint="unknown_course", entity=number,
                description="Nicht im Katalog.",
            ))

    for number in catalog.numbers:
        if number not in counts:
            violations.append(OrderViolation(
                severity="error", constraint="missing_course", entity=number,
                description="Fehlt in der Reihenfolge.",
            ))

    # Erste Position zählt
    position: dict[str, int] = {}
    for i, number in enumerate(order):
        position.setdefault(number, i)

    for course in catalog.courses:
        if course.number not in position:
            continue
        for prereq in course.prerequisite_numbers:
            if prereq in position and position[prereq] > position[course.number]:
                violations.append(OrderViolation(
                    severity="error", constraint="prerequisite_order", entity=course.number,
                    description=(
                        f"Voraussetzung {prereq} (Pos. {position[prereq] + 1}) steht nach "
                        f"{course.number} (Pos. {position[course.number] + 1})."
                    ),
                ))

    has_errors = any(v.severity == "error" for v in violations)
    return OrderValidationReport(violations=violations, is_valid=not has_errors)
