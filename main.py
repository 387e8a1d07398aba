"""Uvicorn entrypoint: ``uvicorn main:app``."""

from voice_skill_engine.api_factory import create_app

app = create_app()
