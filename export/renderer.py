"""Terminal-Darstellung (Rich) für Studienplan, Kursliste und Kursdetails.

Wird von den CLI-Befehlen und dem interaktiven Menü verwendet.
"""

from typing import Iterable, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table

from models.catalog import CourseCatalog
from models.course import CourseRecord


def format_prerequisites(record: CourseRecord) -> str:
    """'CSCI100, CSCI101' oder '—'."""
    return ", ".join(record.prerequisite_numbers) if record.prerequisite_numbers else "—"


def course_rows(
    numbers: Iterable[str], catalog: CourseCatalog, show_prerequisites: bool = True
) -> list[list[str]]:
    """Tabellenzeilen [Pos., Nummer, Name(, Voraussetzungen)] für eine Kursfolge."""
    rows: list[list[str]] = []
    for pos, number in enumerate(numbers, start=1):
        record = catalog.get(number)
        name = record.name if record else "?"
        row = [str(pos), number, name]
        if show_prerequisites:
            row.append(format_prerequisites(record) if record else "—")
        rows.append(row)
    return rows


def render_course_table(
    title: str,
    numbers: Iterable[str],
    catalog: CourseCatalog,
    show_prerequisites: bool = True,
) -> Table:
    """Rich-Tabelle für einen Studienplan oder eine Kursliste."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kurs", style="bold")
    table.add_column("Name")
    if show_prerequisites:
        table.add_column("Voraussetzungen")
    for row in course_rows(numbers, catalog, show_prerequisites):
        table.add_row(*row)
    return table


def render_course_detail(
    record: CourseRecord, dependents: Optional[list[CourseRecord]] = None
) -> Panel:
    """Panel mit Nummer, Name, Voraussetzungen und (optional) Folgekursen."""
    lines = [f"[bold]{record.number}[/bold], {record.name}"]
    if record.prerequisite_numbers:
        lines.append(f"Voraussetzungen: {format_prerequisites(record)}")
    else:
        lines.append("[dim]Keine Voraussetzungen.[/dim]")
    if dependents:
        lines.append(f"Voraussetzung für: {', '.join(d.number for d in dependents)}")
    return Panel("\n".join(lines), title="Kurs", border_style="cyan")
