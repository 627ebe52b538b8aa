"""CourseCatalog: alle geladenen Kurse + Lookup-Helfer und Katalog-Prüfung (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel, PrivateAttr

from models.course import CourseRecord


class CatalogReport(BaseModel):
    """Ergebnis der Katalog-Prüfung."""

    is_valid: bool
    errors: list[str]      # Kritische Probleme (Kante zeigt ins Leere, doppelte Nummer)
    warnings: list[str]    # Hinweise (Kurs ohne Bezug, Selbstvoraussetzung)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel

        console = Console()
        if self.is_valid:
            status = "[bold green]✓ KATALOG GÜLTIG[/bold green]"
        else:
            status = "[bold red]✗ KATALOG UNGÜLTIG[/bold red]"

        lines = [status]
        if self.errors:
            lines.append("\n[red bold]Fehler:[/red bold]")
            for e in self.errors:
                lines.append(f"  [red]• {e}[/red]")
        if self.warnings:
            lines.append("\n[yellow bold]Warnungen:[/yellow bold]")
            for w in self.warnings:
                lines.append(f"  [yellow]• {w}[/yellow]")
        if not self.errors and not self.warnings:
            lines.append("[dim]Keine Probleme gefunden.[/dim]")

        console.print(Panel("\n".join(lines), title="Katalog-Prüfung", border_style="cyan"))


class CourseCatalog(BaseModel):
    """Alle Kurse eines Ladevorgangs in Ladereihenfolge."""

    courses: list[CourseRecord] = []
    source: Optional[str] = None

    _index: dict[str, CourseRecord] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        # Bei doppelten Nummern gewinnt der erste Eintrag
        for course in self.courses:
            self._index.setdefault(course.number, course)

    # ─── Lookup ───

    def get(self, number: str) -> Optional[CourseRecord]:
        """Kurs zur Nummer oder None."""
        return self._index.get(number.strip())

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and number.strip() in self._index

    def __len__(self) -> int:
        return len(self.courses)

    @property
    def numbers(self) -> list[str]:
        return [c.number for c in self.courses]

    def prerequisites_of(self, number: str) -> list[CourseRecord]:
        """Bekannte Voraussetzungen eines Kurses (unbekannte Nummern fallen weg)."""
        course = self.get(number)
        if course is None:
            return []
        return [self._index[p] for p in course.prerequisite_numbers if p in self._index]

    def dependents_of(self, number: str) -> list[CourseRecord]:
        """Alle Kurse, die den Kurs als Voraussetzung führen."""
        number = number.strip()
        return [c for c in self.courses if number in c.prerequisite_numbers]

    def ordered_by_prerequisite_count(self) -> list[CourseRecord]:
        """Kurse mit den meisten Voraussetzungen zuerst (stabil)."""
        return sorted(self.courses, key=lambda c: len(c.prerequisite_numbers), reverse=True)

    # ─── Prüfung ───

    def validate_catalog(self) -> CatalogReport:
        """Prüft den Katalog auf Bezüge, die der Planer nicht auflösen kann.

        Prüfungen:
        1. Doppelte Kursnummern
        2. Voraussetzungen, die auf keinen geladenen Kurs zeigen
        3. Kurse, die sich selbst voraussetzen (Zyklus der Länge 1)
        """
        errors: list[str] = []
        warnings: list[str] = []

        seen: set[str] = set()
        for course in self.courses:
            if course.number in seen:
                errors.append(f"Kursnummer '{course.number}' ist mehrfach vorhanden.")
            seen.add(course.number)

        for course in self.courses:
            for prereq in course.prerequisite_numbers:
                if prereq == course.number:
                    warnings.append(f"Kurs '{course.number}' setzt sich selbst voraus.")
                elif prereq not in self._index:
                    errors.append(
                        f"Kurs '{course.number}': Voraussetzung '{prereq}' existiert nicht."
                    )

        return CatalogReport(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
