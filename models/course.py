"""Datenmodell für einen Kurs aus dem Kurskatalog (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, field_validator


class CourseRecord(BaseModel):
    """Ein geladener Kurs. Nach dem Laden unveränderlich."""

    model_config = ConfigDict(frozen=True)

    number: str                                 # Kursnummer ("CSCI200"), eindeutig
    name: str                                   # "Data Structures"
    prerequisite_numbers: tuple[str, ...] = ()  # Voraussetzungen, Reihenfolge wie geladen

    @field_validator("number", "name")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    @field_validator("prerequisite_numbers", mode="before")
    @classmethod
    def _clean_prerequisites(cls, v):
        if v is None:
            return ()
        return tuple(p.strip() for p in v if p and p.strip())

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisite_numbers)

    def __str__(self) -> str:
        return f"{self.number}: {self.name}"


def is_prerequisite_of(a: CourseRecord, b: CourseRecord) -> bool:
    """True wenn Kurs a eine Voraussetzung von Kurs b ist."""
    return a.number in b.prerequisite_numbers
