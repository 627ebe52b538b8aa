from pydantic import BaseModel, Field, field_validator
from enum import Enum


class TreeInsertOrder(str, Enum):
    AS_LOADED = "as_loaded"
    MOST_PREREQUISITES_FIRST = "most_prerequisites_first"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─── IMPORT (Kurskatalog als CSV) ───

class ImportConfig(BaseModel):
    """Einstellungen für den CSV-Import des Kurskatalogs."""
    # Trennzeichen der CSV-Datei
    delimiter: str = Field(",", min_length=1, max_length=1,
        description="Trennzeichen der CSV-Datei")
    # Encoding der CSV-Datei
    encoding: str = Field("utf-8",
        description="Encoding der CSV-Datei")
    # Unbekannte Voraussetzungen: True = Import bricht ab, False = Kante verwerfen + Warnung
    strict_prerequisites: bool = Field(True,
        description="Import bei unbekannten Voraussetzungen abbrechen")
    # Erste Zeile ist eine Kopfzeile und wird übersprungen
    has_header: bool = Field(False,
        description="Erste Zeile als Kopfzeile überspringen")


# ─── BAUM ───

class TreeConfig(BaseModel):
    """Einstellungen für den Voraussetzungs-Baum."""
    # Reihenfolge, in der Kurse in den Baum eingefügt werden
    insert_order: TreeInsertOrder = Field(TreeInsertOrder.MOST_PREREQUISITES_FIRST,
        description="Einfügereihenfolge (most_prerequisites_first / as_loaded)")


# ─── AUSGABE ───

class OutputConfig(BaseModel):
    """Einstellungen für die Terminal-Ausgabe."""
    # Voraussetzungen in der Kursliste mit anzeigen
    show_prerequisites: bool = Field(True,
        description="Voraussetzungen in Listen anzeigen")
    # Log-Level für die Konsole
    log_level: LogLevel = Field(LogLevel.WARNING,
        description="Log-Level (DEBUG/INFO/WARNING/ERROR)")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v


# ─── GESAMT-CONFIG ───

class PlannerConfig(BaseModel):
    """Gesamtkonfiguration des Studienplaners."""
    # Import-Einstellungen
    importer: ImportConfig = Field(default_factory=ImportConfig)
    # Baum-Einstellungen
    tree: TreeConfig = Field(default_factory=TreeConfig)
    # Ausgabe-Einstellungen
    output: OutputConfig = Field(default_factory=OutputConfig)
