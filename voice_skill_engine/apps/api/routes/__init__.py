"""Router namespace exports for FastAPI include hooks."""

from . import health, skill

__all__ = ["health", "skill"]
