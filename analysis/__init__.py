"""Prüfung von Kursreihenfolgen."""
