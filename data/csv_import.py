"""CSV-Import des Kurskatalogs.

Format (eine Zeile pro Kurs, ohne Anführungszeichen-Zwang):
    Kursnummer,Kursname[,Voraussetzung1,Voraussetzung2,...]

Verwendet nur stdlib csv, keine zusätzlichen Abhängigkeiten.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel

from config.schema import ImportConfig
from models.catalog import CourseCatalog
from models.course import CourseRecord

logger = logging.getLogger(__name__)


class CsvImportError(Exception):
    """Fehler beim CSV-Import."""


class ImportReport(BaseModel):
    """Bericht über den CSV-Import."""
    warnings: list[str] = []
    errors: list[str] = []
    courses_imported: int = 0
    prerequisites_imported: int = 0
    prerequisites_dropped: int = 0

    def print_rich(self) -> None:
        from rich.console import Console
        from rich.panel import Panel
        console = Console()
        lines = [f"[green]Kurse: {self.courses_imported}[/green]  "
                 f"[green]Voraussetzungen: {self.prerequisites_imported}[/green]"]
        if self.prerequisites_dropped:
            lines[0] += f"  [yellow]Verworfen: {self.prerequisites_dropped}[/yellow]"
        if self.warnings:
            lines.append("\n[yellow]Warnungen:[/yellow]")
            for w in self.warnings:
                lines.append(f"  [yellow]• {w}[/yellow]")
        if self.errors:
            lines.append("\n[red]Fehler:[/red]")
            for e in self.errors:
                lines.append(f"  [red]• {e}[/red]")
        console.print(Panel("\n".join(lines), title="CSV-Import", border_style="cyan"))


def _read_rows(path: Path, settings: ImportConfig) -> list[tuple[int, list[str]]]:
    """Liest alle nicht-leeren Zeilen als (Zeilennummer, Felder)."""
    try:
        with open(path, "r", encoding=settings.encoding, newline="") as f:
            rows = list(csv.reader(f, delimiter=settings.delimiter))
    except FileNotFoundError as e:
        raise CsvImportError(f"Datei nicht gefunden: {path}") from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise CsvImportError(f"Datei nicht lesbar: {path}: {e}") from e

    result = []
    for line_no, row in enumerate(rows, start=1):
        if settings.has_header and line_no == 1:
            continue
        fields = [cell.strip() for cell in row]
        if not any(fields):
            continue
        result.append((line_no, fields))
    return result


def import_from_csv(
    path: Path, settings: Optional[ImportConfig] = None
) -> tuple[CourseCatalog, ImportReport]:
    """Importiert einen Kurskatalog aus einer CSV-Datei.

    Args:
        path: Pfad zur CSV-Datei.
        settings: Import-Einstellungen; Standard: ImportConfig().

    Returns:
        (CourseCatalog, ImportReport)

    Raises:
        CsvImportError: Datei fehlt/ist unlesbar, oder im strikten Modus bei
            Zeilen ohne Namen bzw. unbekannten Voraussetzungen.
    """
    path = Path(path)
    settings = settings or ImportConfig()
    report = ImportReport()
    rows = _read_rows(path, settings)

    # 1. Durchlauf: alle gültigen Kursnummern
    entries: list[tuple[int, str, str, list[str]]] = []
    seen: set[str] = set()
    for line_no, fields in rows:
        if len(fields) < 2 or not fields[0] or not fields[1]:
            msg = f"Zeile {line_no}: Kursnummer und Name erforderlich ({','.join(fields)})"
            if settings.strict_prerequisites:
                report.errors.append(msg)
                continue
            report.warnings.append(msg + " – übersprungen")
            continue
        number, name = fields[0], fields[1]
        if number in seen:
            report.warnings.append(
                f"Zeile {line_no}: Kurs '{number}' doppelt – Zeile übersprungen"
            )
            continue
        seen.add(number)
        entries.append((line_no, number, name, [p for p in fields[2:] if p]))

    # 2. Durchlauf: Voraussetzungen gegen die gültigen Nummern prüfen
    courses: list[CourseRecord] = []
    for line_no, number, name, prereqs in entries:
        valid = []
        for prereq in prereqs:
            if prereq in seen:
                valid.append(prereq)
                continue
            msg = f"Zeile {line_no}: Kurs '{number}': unbekannte Voraussetzung '{prereq}'"
            if settings.strict_prerequisites:
                report.errors.append(msg)
            else:
                report.warnings.append(msg + " – verworfen")
                report.prerequisites_dropped += 1
        courses.append(CourseRecord(number=number, name=name, prerequisite_numbers=valid))
        report.prerequisites_imported += len(valid)

    if report.errors:
        raise CsvImportError(
            f"Import von {path} fehlgeschlagen:\n" + "\n".join(f"  • {e}" for e in report.errors)
        )

    report.courses_imported = len(courses)
    for w in report.warnings:
        logger.warning(w)
    logger.info(f"{len(courses)} Kurse aus {path} importiert")
    return CourseCatalog(courses=courses, source=str(path)), report


def write_csv(path: Path, rows: Iterable[list[str]], delimiter: str = ",") -> Path:
    """Schreibt Katalogzeilen im Importformat."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, delimiter=delimiter, lineterminator="\n")
        for row in rows:
            writer.writerow(row)
    return path
