"""Core layer: constants, enums, errors, Result type, settings and container."""
