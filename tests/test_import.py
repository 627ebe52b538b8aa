"""Tests für den CSV-Import des Kurskatalogs."""

from pathlib import Path

import pytest

from config.defaults import SAMPLE_CATALOG_ROWS
from config.schema import ImportConfig
from data.csv_import import CsvImportError, import_from_csv, write_csv


def write(tmp_path: Path, text: str, name: str = "katalog.csv") -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


class TestCsvImport:

    def test_sample_catalog_roundtrip(self, tmp_path: Path):
        p = write_csv(tmp_path / "abcu.csv", SAMPLE_CATALOG_ROWS)
        catalog, report = import_from_csv(p)
        assert len(catalog) == 8
        assert report.courses_imported == 8
        assert report.prerequisites_imported == 8
        assert catalog.get("CSCI400").prerequisite_numbers == ("CSCI301", "CSCI350")
        assert catalog.source == str(p)

    def test_blank_lines_and_whitespace(self, tmp_path: Path):
        p = write(tmp_path, "A, Alpha\n\n B ,Beta, A \n,,\n")
        catalog, report = import_from_csv(p)
        assert catalog.numbers == ["A", "B"]
        assert catalog.get("B").prerequisite_numbers == ("A",)
        assert report.warnings == []

    def test_unknown_prerequisite_strict_raises(self, tmp_path: Path):
        p = write(tmp_path, "A,Alpha,GHOST\n")
        with pytest.raises(CsvImportError, match="GHOST"):
            import_from_csv(p)

    def test_unknown_prerequisite_lenient_drops_edge(self, tmp_path: Path):
        p = write(tmp_path, "A,Alpha,GHOST\nB,Beta,A\n")
        catalog, report = import_from_csv(p, ImportConfig(strict_prerequisites=False))
        assert catalog.get("A").prerequisite_numbers == ()
        assert report.prerequisites_dropped == 1
        assert len(report.warnings) == 1

    def test_missing_name_strict_raises(self, tmp_path: Path):
        p = write(tmp_path, "A\n")
        with pytest.raises(CsvImportError):
            import_from_csv(p)

    def test_missing_name_lenient_skips(self, tmp_path: Path):
        p = write(tmp_path, "A\nB,Beta\n")
        catalog, report = import_from_csv(p, ImportConfig(strict_prerequisites=False))
        assert catalog.numbers == ["B"]
        assert len(report.warnings) == 1

    def test_duplicate_row_skipped(self, tmp_path: Path):
        p = write(tmp_path, "A,Alpha\nA,Alpha 2\n")
        catalog, report = import_from_csv(p)
        assert len(catalog) == 1
        assert catalog.get("A").name == "Alpha"
        assert "doppelt" in report.warnings[0]

    def test_header_and_delimiter(self, tmp_path: Path):
        p = write(tmp_path, "nummer;name;voraussetzung\nA;Alpha\nB;Beta;A\n")
        settings = ImportConfig(delimiter=";", has_header=True)
        catalog, _ = import_from_csv(p, settings)
        assert catalog.numbers == ["A", "B"]

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(CsvImportError, match="nicht gefunden"):
            import_from_csv(tmp_path / "fehlt.csv")
