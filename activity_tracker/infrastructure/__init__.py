"""Infrastructure layer: persistence and database access."""
