"""Fehlertypen des Planers.

Die Kernstrukturen werfen diese Fehler nicht, sondern liefern sie als
``Err(...)`` zurück. ``Result.unwrap()`` wirft sie bei Bedarf.
"""


class PlannerError(Exception):
    """Basisklasse aller Planer-Fehler."""


class UnknownCourse(PlannerError):
    """Eine Kante verweist auf eine Kursnummer, die nicht vorhanden ist."""

    def __init__(self, missing: list[str], prerequisite: str = "", course: str = "") -> None:
        self.missing = list(missing)
        self.prerequisite = prerequisite
        self.course = course
        super().__init__(
            f"Kurs(e) nicht vorhanden: {', '.join(self.missing)}"
            + (f" (Kante {prerequisite} → {course} verworfen)" if course else "")
        )


class CycleDetected(PlannerError):
    """Die Kurse lassen sich nicht linearisieren (zyklische Voraussetzungen)."""

    def __init__(self, remaining: list[str]) -> None:
        self.remaining = list(remaining)
        super().__init__(
            "Zyklus erkannt, kein gültiger Studienplan möglich. "
            f"Nicht planbar: {', '.join(self.remaining)}"
        )


class DuplicateCourse(PlannerError):
    """Eine Kursnummer ist bereits in der Struktur vorhanden."""

    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(f"Vermutlich doppelter Kurs: {number}")
