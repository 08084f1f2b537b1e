"""Domain layer: entities, error messages and ports (protocols)."""
