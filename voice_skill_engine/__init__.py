"""Voice skill engine: request validation and dispatch for voice-assistant skills."""

SKILL_ENGINE_VERSION = "0.1.0"

__all__ = ["SKILL_ENGINE_VERSION"]
