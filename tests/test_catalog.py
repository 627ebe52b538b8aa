"""Tests für Kursmodell, Katalog-Prüfung und Reihenfolge-Prüfung."""

import pytest
from pydantic import ValidationError

from analysis.schedule_validator import validate_order
from config.defaults import SAMPLE_CATALOG_ROWS
from models.catalog import CourseCatalog
from models.course import CourseRecord, is_prerequisite_of


def make_catalog(*specs: tuple) -> CourseCatalog:
    return CourseCatalog(courses=[
        CourseRecord(number=s[0], name=f"Kurs {s[0]}", prerequisite_numbers=s[1:])
        for s in specs
    ])


def sample_catalog() -> CourseCatalog:
    return CourseCatalog(courses=[
        CourseRecord(number=r[0], name=r[1], prerequisite_numbers=r[2:])
        for r in SAMPLE_CATALOG_ROWS
    ])


# ─── CourseRecord ─────────────────────────────────────────────────────────────

class TestCourseRecord:

    def test_strips_whitespace(self):
        r = CourseRecord(number=" CSCI200 ", name=" Data Structures ",
                         prerequisite_numbers=[" CSCI101", "", "  "])
        assert r.number == "CSCI200"
        assert r.name == "Data Structures"
        assert r.prerequisite_numbers == ("CSCI101",)

    def test_is_frozen(self):
        r = CourseRecord(number="A", name="Alpha")
        with pytest.raises(ValidationError):
            r.name = "Beta"

    def test_default_no_prerequisites(self):
        r = CourseRecord(number="A", name="Alpha")
        assert r.prerequisite_numbers == ()
        assert r.has_prerequisites is False
        assert str(r) == "A: Alpha"

    def test_is_prerequisite_of(self):
        a = CourseRecord(number="A", name="Alpha")
        b = CourseRecord(number="B", name="Beta", prerequisite_numbers=["A"])
        assert is_prerequisite_of(a, b)
        assert not is_prerequisite_of(b, a)


# ─── CourseCatalog ────────────────────────────────────────────────────────────

class TestCourseCatalog:

    def test_lookup(self):
        cat = sample_catalog()
        assert len(cat) == 8
        assert cat.get("CSCI200").name == "Data Structures"
        assert cat.get(" CSCI200 ") is not None
        assert cat.get("CSCI999") is None
        assert "MATH201" in cat

    def test_prerequisites_and_dependents(self):
        cat = sample_catalog()
        assert [c.number for c in cat.prerequisites_of("CSCI300")] == ["CSCI200", "MATH201"]
        assert [c.number for c in cat.dependents_of("CSCI101")] == ["CSCI301", "CSCI200"]
        assert cat.prerequisites_of("CSCI999") == []

    def test_ordered_by_prerequisite_count_is_stable(self):
        cat = sample_catalog()
        ordered = [c.number for c in cat.ordered_by_prerequisite_count()]
        assert ordered[:2] == ["CSCI300", "CSCI400"]
        assert ordered[-2:] == ["MATH201", "CSCI100"]

    def test_sample_catalog_valid(self):
        report = sample_catalog().validate_catalog()
        assert report.is_valid
        assert report.errors == []

    def test_unknown_prerequisite_is_error(self):
        report = make_catalog(("A",), ("B", "A", "GHOST")).validate_catalog()
        assert not report.is_valid
        assert any("GHOST" in e for e in report.errors)

    def test_duplicate_number_is_error(self):
        report = make_catalog(("A",), ("A",)).validate_catalog()
        assert not report.is_valid

    def test_self_prerequisite_is_warning(self):
        report = make_catalog(("A", "A"),).validate_catalog()
        assert report.is_valid
        assert len(report.warnings) == 1


# ─── Reihenfolge-Prüfung ──────────────────────────────────────────────────────

class TestValidateOrder:

    def test_valid_order(self):
        cat = make_catalog(("A",), ("B", "A"), ("C", "A", "B"))
        report = validate_order(cat, ["A", "B", "C"])
        assert report.is_valid
        assert report.violations == []

    def test_prerequisite_after_dependent(self):
        cat = make_catalog(("A",), ("B", "A"))
        report = validate_order(cat, ["B", "A"])
        assert not report.is_valid
        assert [v.constraint for v in report.violations] == ["prerequisite_order"]
        assert report.violations[0].entity == "B"

    def test_missing_and_repeated(self):
        cat = make_catalog(("A",), ("B",), ("C",))
        report = validate_order(cat, ["A", "A", "B"])
        constraints = sorted(v.constraint for v in report.violations)
        assert constraints == ["missing_course", "repeated_course"]

    def test_unknown_course_is_warning(self):
        cat = make_catalog(("A",))
        report = validate_order(cat, ["A", "Z"])
        assert report.is_valid
        assert report.violations[0].severity == "warning"
