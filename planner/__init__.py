"""Planer-Modul: Abhängigkeitsgraph (Kahn) und Voraussetzungs-Baum."""

from .errors import PlannerError, UnknownCourse, CycleDetected, DuplicateCourse
from .result import Ok, Err, Result
from .dependency_graph import DependencyGraph, GraphNode
from .prerequisite_tree import PrerequisiteTree, TreeNode
from .resolver import build_graph, add_edge, schedule, build_tree, lookup, in_order

__all__ = [
    "PlannerError",
    "UnknownCourse",
    "CycleDetected",
    "DuplicateCourse",
    "Ok",
    "Err",
    "Result",
    "DependencyGraph",
    "GraphNode",
    "PrerequisiteTree",
    "TreeNode",
    "build_graph",
    "add_edge",
    "schedule",
    "build_tree",
    "lookup",
    "in_order",
]
