"""Konfiguration: Schema (Pydantic), Standardwerte und YAML-Manager."""
