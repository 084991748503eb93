"""Domain model: entities and errors."""
