"""Builder for consistent, related seed records for tests."""

__version__ = "0.1.0"
__all__ = ["builder", "errors", "models"]