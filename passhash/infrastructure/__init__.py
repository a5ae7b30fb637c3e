"""Infrastructure layer: bcrypt and structlog adapters."""
