"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Fallbacks only; tests that care patch config explicitly.
os.environ.setdefault("SKILL_NAME", "Hello World")
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "test")
os.environ.setdefault("HEALTHCHECK_AUTH_ENABLED", "true")
