"""Voraussetzungs-Baum: geordneter Binärbaum über Kurse.

Einfügeregel:
  - Zuerst wird im aktuellen Teilbaum der "verwandteste" Knoten gesucht
    (umgekehrte In-Order: rechts, selbst, links). Verwandt heißt: einer der
    beiden Kurse ist Voraussetzung des anderen.
  - Ist der neue Kurs Voraussetzung des verwandten Knotens → linker Slot,
    setzt er ihn voraus → rechter Slot.
  - Ohne Verwandtschaft entscheidet der lexikalische Vergleich der
    Kursnummern gegen die Wurzel des aktuellen Teilbaums.

Das ist keine totale Ordnung. search() durchläuft deshalb den ganzen Baum,
und die In-Order-Liste ist nur in typischen Fällen eine gültige
Kursreihenfolge. Für einen garantiert gültigen Studienplan den
DependencyGraph verwenden.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from models.course import CourseRecord, is_prerequisite_of
from planner.errors import DuplicateCourse
from planner.result import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    """Baumknoten; die Kindknoten gehören ausschließlich diesem Knoten."""

    record: CourseRecord
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def number(self) -> str:
        return self.record.number


def _is_related(a: CourseRecord, b: CourseRecord) -> bool:
    return is_prerequisite_of(a, b) or is_prerequisite_of(b, a)


class InOrderView:
    """Lazy In-Order-Sicht auf den Baum; jede Iteration beginnt von vorn."""

    def __init__(self, tree: "PrerequisiteTree") -> None:
        self._tree = tree

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for node in self._tree._walk():
            yield node.record.number, node.record.name

    def __len__(self) -> int:
        return len(self._tree)


class PrerequisiteTree:
    """Binärbaum, dessen Ordnung von den Voraussetzungen bestimmt wird."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        # Abgewiesene Einfügungen (siehe planner.resolver.build_tree)
        self.rejected: list[DuplicateCourse] = []

    # ─── Einfügen ───

    def insert(self, record: CourseRecord) -> Result[None, DuplicateCourse]:
        """Fügt einen Kurs ein. Doppelte Kurse werden gemeldet und nicht eingefügt."""
        if self.root is None:
            self.root = TreeNode(record)
            self._size = 1
            return Ok(None)

        if self.search(record.number) is not None:
            return self._reject(record)

        current = self.root
        while True:
            related = self._find_related_node(current, record)
            if related is None:
                target = current
                if record.number < current.number:
                    slot = "left"
                elif record.number > current.number:
                    slot = "right"
                else:
                    return self._reject(record)
            elif is_prerequisite_of(related.record, record):
                target, slot = related, "right"
            else:
                target, slot = related, "left"

            child = getattr(target, slot)
            if child is None:
                setattr(target, slot, TreeNode(record))
                self._size += 1
                return Ok(None)
            current = child

    def _reject(self, record: CourseRecord) -> Err[DuplicateCourse]:
        error = DuplicateCourse(record.number)
        logger.warning(f"{error} – nicht eingefügt")
        return Err(error)

    def _find_related_node(
        self, start: TreeNode, record: CourseRecord
    ) -> Optional[TreeNode]:
        """Erster verwandter Knoten im Teilbaum in umgekehrter In-Order."""
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = start
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            if _is_related(node.record, record):
                return node
            node = node.left
        return None

    # ─── Traversierung ───

    def _walk(self) -> Iterator[TreeNode]:
        """In-Order (links, selbst, rechts) mit explizitem Stack."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def in_order(self) -> InOrderView:
        """(Kursnummer, Name)-Paare in In-Order-Reihenfolge."""
        return InOrderView(self)

    def search(self, number: str) -> Optional[CourseRecord]:
        """Sucht einen Kurs per vollständiger Traversierung.

        Eine binäre Suche ist wegen der Voraussetzungs-Ordnung nicht möglich.
        """
        for node in self._walk():
            if node.record.number == number:
                return node.record
        return None

    def find_dependent(self, record: CourseRecord) -> Optional[CourseRecord]:
        """Erster Kurs (In-Order), der record als Voraussetzung führt."""
        for node in self._walk():
            if is_prerequisite_of(record, node.record):
                return node.record
        return None

    def dependents_of(self, number: str) -> list[CourseRecord]:
        """Alle Kurse (In-Order), die die Kursnummer als Voraussetzung führen."""
        return [n.record for n in self._walk() if number in n.record.prerequisite_numbers]

    def height(self) -> int:
        """Anzahl Ebenen; leerer Baum = 0."""
        if self.root is None:
            return 0
        levels = 0
        queue = deque([self.root])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return levels

    def __len__(self) -> int:
        return self._size

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.search(number) is not None

    def __repr__(self) -> str:
        return f"PrerequisiteTree({self._size} Kurse, Höhe {self.height()})"
