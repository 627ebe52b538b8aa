"""Ok/Err-Ergebnistyp für die Kernoperationen des Planers."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from planner.errors import PlannerError

T = TypeVar("T")
E = TypeVar("E", bound=PlannerError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Erfolgreiches Ergebnis."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Fehlgeschlagenes Ergebnis mit strukturiertem Fehler."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Wirft den enthaltenen Fehler."""
        raise self.error


Result = Union[Ok[T], Err[E]]
