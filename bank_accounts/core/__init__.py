"""Core package: Result types, errors, enums, configuration and container."""
