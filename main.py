"""Studienplaner — Haupt-CLI.

Verwendung:
  python main.py schedule <katalog.csv>          Gültigen Studienplan berechnen (Graph)
  python main.py list <katalog.csv>              Kursliste aus dem Voraussetzungs-Baum
  python main.py show <katalog.csv> <kurs>       Kurs mit Voraussetzungen anzeigen
  python main.py validate <katalog.csv>          Katalog prüfen (Bezüge, Zyklen)
  python main.py menu [<katalog.csv>]            Interaktives Menü
  python main.py config show                     Konfiguration anzeigen
  python main.py config init [--sample datei]    Konfiguration (und Beispielkatalog) anlegen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich import box

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_catalog_or_abort(path: Path, config):
    """Lädt den Katalog oder bricht mit Fehlermeldung ab."""
    from data.csv_import import import_from_csv, CsvImportError

    try:
        catalog, report = import_from_csv(path, config.importer)
    except CsvImportError as e:
        console.print(f"[red bold]Import fehlgeschlagen:[/red bold]\n{e}")
        sys.exit(1)
    if report.warnings:
        report.print_rich()
    return catalog


def _build_tree(catalog, config):
    from planner import build_tree
    return build_tree(catalog.courses, order=config.tree.insert_order.value)


# ─── SCHEDULE ─────────────────────────────────────────────────────────────────

@click.command("schedule")
@click.argument("datei", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Studienplan als JSON-Liste ausgeben.")
@click.pass_obj
def cmd_schedule(config, datei: Path, as_json: bool):
    """Berechnet einen gültigen Studienplan (Kahn-Algorithmus)."""
    import json
    from planner import build_graph, schedule
    from export.renderer import render_course_table

    catalog = _load_catalog_or_abort(datei, config)
    graph = build_graph(catalog.courses)
    result = schedule(graph)
    if not result.is_ok:
        console.print(f"[red bold]Kein gültiger Studienplan:[/red bold] {result.error}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.value))
        return
    console.print(render_course_table(
        "Vorgeschlagener Studienplan", result.value, catalog,
        show_prerequisites=config.output.show_prerequisites,
    ))


# ─── LIST ─────────────────────────────────────────────────────────────────────

@click.command("list")
@click.argument("datei", type=click.Path(path_type=Path))
@click.pass_obj
def cmd_list(config, datei: Path):
    """Listet alle Kurse in Baum-Reihenfolge (In-Order)."""
    from analysis.schedule_validator import validate_order
    from export.renderer import render_course_table

    catalog = _load_catalog_or_abort(datei, config)
    tree = _build_tree(catalog, config)
    numbers = [number for number, _ in tree.in_order()]

    console.print(render_course_table(
        "Beispiel-Studienplan (Baum)", numbers, catalog,
        show_prerequisites=config.output.show_prerequisites,
    ))
    report = validate_order(catalog, numbers)
    if not report.is_valid:
        console.print(
            "[yellow]Hinweis: Die Baum-Reihenfolge verletzt Voraussetzungen. "
            "Für einen gültigen Plan [bold]python main.py schedule[/bold] verwenden.[/yellow]"
        )


# ─── SHOW ─────────────────────────────────────────────────────────────────────

@click.command("show")
@click.argument("datei", type=click.Path(path_type=Path))
@click.argument("kurs")
@click.pass_obj
def cmd_show(config, datei: Path, kurs: str):
    """Zeigt einen Kurs mit Voraussetzungen und Folgekursen."""
    catalog = _load_catalog_or_abort(datei, config)
    tree = _build_tree(catalog, config)
    if not _print_course(tree, kurs):
        sys.exit(1)


def _print_course(tree, number: str) -> bool:
    from planner import lookup
    from export.renderer import render_course_detail

    record = lookup(tree, number.strip())
    if record is None:
        console.print(f"Kurs \"{number}\" nicht gefunden.")
        return False
    console.print(render_course_detail(record, tree.dependents_of(record.number)))
    return True


# ─── VALIDATE ─────────────────────────────────────────────────────────────────

@click.command("validate")
@click.argument("datei", type=click.Path(path_type=Path))
@click.pass_obj
def cmd_validate(config, datei: Path):
    """Prüft den Katalog: Bezüge und Zyklen."""
    from planner import build_graph, schedule

    catalog = _load_catalog_or_abort(datei, config)
    report = catalog.validate_catalog()
    report.print_rich()

    result = schedule(build_graph(catalog.courses))
    if result.is_ok:
        console.print(f"[green]✓[/green] Keine Zyklen ({len(result.value)} Kurse planbar).")
    else:
        console.print(f"[red]✗ {result.error}[/red]")

    sys.exit(0 if report.is_valid and result.is_ok else 1)


# ─── MENU ─────────────────────────────────────────────────────────────────────

@click.command("menu")
@click.argument("datei", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def cmd_menu(config, datei: Optional[Path]):
    """Interaktives Menü: Laden, Kursliste, Kurs anzeigen."""
    from export.renderer import render_course_table

    if datei is None:
        datei = Path(Prompt.ask("Name der Katalogdatei"))
    catalog = _load_catalog_or_abort(datei, config)
    tree = None

    while True:
        console.print(Panel(
            "  [bold]1.[/bold] Datenstruktur laden\n"
            "  [bold]2.[/bold] Kursliste ausgeben\n"
            "  [bold]3.[/bold] Kurs ausgeben\n"
            "  [bold]4.[/bold] Beenden",
            title="Studienplaner", border_style="cyan",
        ))
        choice = Prompt.ask("Auswahl", default="4")

        if choice == "1":
            tree = _build_tree(catalog, config)
            console.print("[green]✓[/green] Datenstruktur geladen.")
        elif choice in ("2", "3") and tree is None:
            console.print("[yellow]Bitte zuerst die Datenstruktur laden (1).[/yellow]")
        elif choice == "2":
            numbers = [number for number, _ in tree.in_order()]
            console.print(render_course_table(
                "Beispiel-Studienplan", numbers, catalog,
                show_prerequisites=config.output.show_prerequisites,
            ))
        elif choice == "3":
            _print_course(tree, Prompt.ask("Welcher Kurs"))
        elif choice == "4":
            break
        else:
            console.print("[yellow]Ungültige Auswahl.[/yellow]")

    console.print("Danke für die Nutzung des Studienplaners!")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_obj
def config_show(config):
    """Zeigt die aktive Konfiguration an."""
    table = Table(title="Konfiguration", box=box.ROUNDED)
    table.add_column("Bereich", style="bold")
    table.add_column("Parameter")
    table.add_column("Wert")
    for section, values in config.model_dump(mode="json").items():
        for key, value in values.items():
            table.add_row(section, key, str(value))
    console.print(table)


@cmd_config.command("init")
@click.option("--sample", "sample_path", default=None, type=click.Path(path_type=Path),
              help="Zusätzlich einen Beispielkatalog als CSV anlegen.")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
@click.pass_context
def config_init(ctx, sample_path: Optional[Path], force: bool):
    """Legt die Standardkonfiguration als YAML an."""
    from config.defaults import default_planner_config, SAMPLE_CATALOG_ROWS
    from data.csv_import import write_csv

    mgr = ctx.meta["config_manager"]
    target = ctx.meta["config_path"] or mgr.DEFAULT_CONFIG
    if Path(target).exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
    else:
        mgr.save(default_planner_config(), target)
        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    if sample_path is not None:
        write_csv(sample_path, SAMPLE_CATALOG_ROWS)
        console.print(f"[green]✓[/green] Beispielkatalog gespeichert: {sample_path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(path_type=Path),
              help="Pfad zur YAML-Konfiguration.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe (DEBUG).")
@click.pass_context
def cli(ctx, config_path: Optional[Path], verbose: bool):
    """Studienplaner: Kursreihenfolge aus Voraussetzungen berechnen."""
    from config.manager import ConfigManager

    mgr = ConfigManager()
    try:
        config = mgr.load_or_default(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    _setup_logging("DEBUG" if verbose else config.output.log_level.value)
    ctx.meta["config_manager"] = mgr
    ctx.meta["config_path"] = config_path
    ctx.obj = config


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_schedule)
cli.add_command(cmd_list)
cli.add_command(cmd_show)
cli.add_command(cmd_validate)
cli.add_command(cmd_menu)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
