from config.schema import (
    ImportConfig,
    LogLevel,
    OutputConfig,
    PlannerConfig,
    TreeConfig,
    TreeInsertOrder,
)


def default_planner_config() -> PlannerConfig:
    """Standardkonfiguration.

    - CSV mit Komma, UTF-8, ohne Kopfzeile (Format: Nummer,Name,Vorauss1,...)
    - Unbekannte Voraussetzungen brechen den Import ab
    - Baum: Kurse mit den meisten Voraussetzungen zuerst einfügen
    """
    return PlannerConfig(
        importer=ImportConfig(
            delimiter=",",
            encoding="utf-8",
            strict_prerequisites=True,
            has_header=False,
        ),
        tree=TreeConfig(insert_order=TreeInsertOrder.MOST_PREREQUISITES_FIRST),
        output=OutputConfig(show_prerequisites=True, log_level=LogLevel.WARNING),
    )


# Beispielkatalog (ABCU-Informatik), genutzt von `main.py config init --sample`
SAMPLE_CATALOG_ROWS: list[list[str]] = [
    ["MATH201", "Discrete Mathematics"],
    ["CSCI300", "Introduction to Algorithms", "CSCI200", "MATH201"],
    ["CSCI350", "Operating Systems", "CSCI300"],
    ["CSCI101", "Introduction to Programming in C++", "CSCI100"],
    ["CSCI100", "Introduction to Computer Science"],
    ["CSCI301", "Advanced Programming in C++", "CSCI101"],
    ["CSCI400", "Large Software Development", "CSCI301", "CSCI350"],
    ["CSCI200", "Data Structures", "CSCI101"],
]
