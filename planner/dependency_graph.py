"""Abhängigkeitsgraph der Kurse + Studienplan via Kahn-Algorithmus.

Architektur:
  - Arena: genau ein Dict Kursnummer -> GraphNode besitzt alle Knoten
  - Kanten sind Kursnummern, keine Referenzen (dependent → prerequisite)
  - Rückwärtsindex prerequisite -> dependents wird beim Einfügen der Kante
    gepflegt, damit get_schedule() nicht pro Knoten den ganzen Graphen scannt
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from models.course import CourseRecord
from planner.errors import CycleDetected, UnknownCourse
from planner.result import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass
class GraphNode:
    """Ein Kurs im Graphen.

    Invariante außerhalb eines Planungslaufs: in_degree == len(dependencies).
    """

    number: str
    name: str
    in_degree: int = 0
    # Voraussetzungen (Kursnummern), Einfügereihenfolge bleibt erhalten
    dependencies: dict[str, None] = field(default_factory=dict)

    @property
    def is_schedulable(self) -> bool:
        """True wenn keine offenen Voraussetzungen bestehen."""
        return self.in_degree == 0


class DependencyGraph:
    """Gerichteter Graph aller Kurse mit ihren Voraussetzungen.

    Verwendung:
        graph = DependencyGraph()
        graph.add_course(record)
        graph.add_prerequisite("CSCI100", "CSCI200")
        result = graph.get_schedule()
    """

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        # prerequisite -> dependents (Kursnummern)
        self._dependents: dict[str, dict[str, None]] = {}
        # Beim Aufbau verworfene Kanten (siehe planner.resolver.build_graph)
        self.rejected_edges: list[UnknownCourse] = []

    # ─── Aufbau ───

    def add_course(self, record: CourseRecord) -> bool:
        """Fügt einen Kurs ein. Bereits vorhandene Nummer: kein Fehler, nichts passiert.

        Returns:
            True wenn ein neuer Knoten angelegt wurde.
        """
        if record.number in self._nodes:
            logger.debug(f"Kurs {record.number} bereits im Graphen – übersprungen")
            return False
        self._nodes[record.number] = GraphNode(number=record.number, name=record.name)
        self._dependents[record.number] = {}
        return True

    def add_prerequisite(
        self, prerequisite_number: str, course_number: str
    ) -> Result[None, UnknownCourse]:
        """Fügt die Kante course_number → prerequisite_number ein.

        Fehlt einer der beiden Kurse, bleibt der Graph unverändert und
        Err(UnknownCourse) wird zurückgegeben.
        """
        missing = [n for n in (prerequisite_number, course_number) if n not in self._nodes]
        if missing:
            error = UnknownCourse(missing, prerequisite_number, course_number)
            logger.warning(f"Voraussetzung nicht eingefügt: {error}")
            return Err(error)

        node = self._nodes[course_number]
        if prerequisite_number in node.dependencies:
            return Ok(None)

        node.dependencies[prerequisite_number] = None
        node.in_degree += 1
        self._dependents[prerequisite_number][course_number] = None
        return Ok(None)

    # ─── Abfragen ───

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, number: object) -> bool:
        return number in self._nodes

    def get(self, number: str) -> Optional[GraphNode]:
        return self._nodes.get(number)

    @property
    def numbers(self) -> list[str]:
        return list(self._nodes)

    def prerequisites_of(self, number: str) -> Result[list[str], UnknownCourse]:
        """Direkte Voraussetzungen eines Kurses."""
        node = self._nodes.get(number)
        if node is None:
            return Err(UnknownCourse([number]))
        return Ok(list(node.dependencies))

    def dependents_of(self, number: str) -> Result[list[str], UnknownCourse]:
        """Kurse, die den Kurs direkt voraussetzen."""
        if number not in self._nodes:
            return Err(UnknownCourse([number]))
        return Ok(list(self._dependents[number]))

    def edges(self) -> list[tuple[str, str]]:
        """Alle Kanten als (dependent, prerequisite)."""
        return [
            (node.number, prereq)
            for node in self._nodes.values()
            for prereq in node.dependencies
        ]

    # ─── Studienplan ───

    def get_schedule(self) -> Result[list[str], CycleDetected]:
        """Gültige Kursreihenfolge nach Kahn, O(V + E).

        Arbeitet auf einer Kopie der Eingangsgrade; der Graph selbst wird
        nicht verändert, ein zweiter Aufruf liefert dasselbe Ergebnis.
        """
        in_degree = {number: node.in_degree for number, node in self._nodes.items()}

        # Kurse ohne Voraussetzungen zuerst, in Einfügereihenfolge
        queue = deque(number for number, degree in in_degree.items() if degree == 0)
        schedule: list[str] = []

        while queue:
            current = queue.popleft()
            schedule.append(current)
            for dependent in self._dependents[current]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    queue.append(dependent)

        if len(schedule) < len(self._nodes):
            remaining = [number for number, degree in in_degree.items() if degree > 0]
            error = CycleDetected(remaining)
            logger.error(f"Studienplan nicht möglich: {error}")
            return Err(error)

        logger.debug(f"Studienplan mit {len(schedule)} Kursen erstellt")
        return Ok(schedule)

    def __repr__(self) -> str:
        return f"DependencyGraph({len(self._nodes)} Kurse, {len(self.edges())} Kanten)"
