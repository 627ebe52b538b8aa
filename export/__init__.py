"""Export-Modul: Terminal-Darstellung (Rich) für Studienplan und Kurse."""

from export.renderer import render_course_table, render_course_detail

__all__ = ["render_course_table", "render_course_detail"]
