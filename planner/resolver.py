"""Einstiegspunkte für Loader und CLI: Graph/Baum aufbauen und abfragen."""

import logging
from typing import Iterable, Optional

from models.course import CourseRecord
from planner.dependency_graph import DependencyGraph
from planner.errors import CycleDetected, UnknownCourse
from planner.prerequisite_tree import InOrderView, PrerequisiteTree
from planner.result import Result

logger = logging.getLogger(__name__)

# Einfügereihenfolgen für build_tree
ORDER_AS_LOADED = "as_loaded"
ORDER_MOST_PREREQUISITES_FIRST = "most_prerequisites_first"
TREE_ORDERS = (ORDER_AS_LOADED, ORDER_MOST_PREREQUISITES_FIRST)


def build_graph(records: Iterable[CourseRecord]) -> DependencyGraph:
    """Baut den Abhängigkeitsgraphen: erst alle Kurse, dann alle Kanten.

    Kanten zu unbekannten Kursen werden übersprungen und in
    graph.rejected_edges gesammelt.
    """
    records = list(records)
    graph = DependencyGraph()
    for record in records:
        graph.add_course(record)
    for record in records:
        for prereq in record.prerequisite_numbers:
            result = graph.add_prerequisite(prereq, record.number)
            if not result.is_ok:
                graph.rejected_edges.append(result.error)

    logger.info(
        f"Graph aufgebaut: {len(graph)} Kurse, {len(graph.edges())} Kanten, "
        f"{len(graph.rejected_edges)} verworfen"
    )
    return graph


def add_edge(graph: DependencyGraph, prerequisite: str, course: str) -> Result[None, UnknownCourse]:
    return graph.add_prerequisite(prerequisite, course)


def schedule(graph: DependencyGraph) -> Result[list[str], CycleDetected]:
    return graph.get_schedule()


def build_tree(
    records: Iterable[CourseRecord], order: str = ORDER_MOST_PREREQUISITES_FIRST
) -> PrerequisiteTree:
    """Baut den Voraussetzungs-Baum.

    Args:
        records: Geladene Kurse.
        order: ORDER_MOST_PREREQUISITES_FIRST (Kurse mit den meisten
            Voraussetzungen zuerst, stabil) oder ORDER_AS_LOADED.

    Returns:
        PrerequisiteTree; abgewiesene Duplikate stehen in tree.rejected.
    """
    if order not in TREE_ORDERS:
        raise ValueError(f"Unbekannte Einfügereihenfolge: {order!r} (erlaubt: {TREE_ORDERS})")

    records = list(records)
    if order == ORDER_MOST_PREREQUISITES_FIRST:
        records.sort(key=lambda r: len(r.prerequisite_numbers), reverse=True)

    tree = PrerequisiteTree()
    for record in records:
        result = tree.insert(record)
        if not result.is_ok:
            tree.rejected.append(result.error)

    logger.info(f"Baum aufgebaut: {len(tree)} Kurse, Höhe {tree.height()}")
    return tree


def lookup(tree: PrerequisiteTree, number: str) -> Optional[CourseRecord]:
    return tree.search(number)


def in_order(tree: PrerequisiteTree) -> InOrderView:
    return tree.in_order()
