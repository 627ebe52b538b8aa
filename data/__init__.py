"""Import des Kurskatalogs."""
