"""Architectural fitness functions for the package layering.

The core layer holds models, configuration and logging and must stay free of
web framework imports; the validator must not depend on the host adapters.
"""

import re
from pathlib import Path

ROOT = Path(__file__).parent.parent
PACKAGE_DIR = ROOT / "voice_skill_engine"


def test_no_python_modules_at_root():
    """Only entry points and test configuration may live at the repository root."""
    allowed = {"conftest.py", "main.py", "__main__.py"}
    violations = [f.name for f in ROOT.glob("*.py") if f.name not in allowed]

    assert not violations, f"Unexpected Python modules at root: {violations}"


def test_root_files_are_not_imported():
    """Root-level entry points must be leaf nodes, never imported by the package."""
    violations = []
    for py_file in ROOT.glob("*.py"):
        module_name = py_file.stem
        if module_name == "conftest":
            continue
        for src_file in PACKAGE_DIR.rglob("*.py"):
            content = src_file.read_text()
            for pattern in (rf"^from {module_name} import", rf"^import {module_name}\b"):
                if re.search(pattern, content, re.MULTILINE):
                    violations.append(f"{src_file.relative_to(ROOT)} imports {py_file.name}")

    assert not violations, "\n".join(violations)


def test_no_fastapi_in_core():
    """Core layer must not import FastAPI."""
    violations = [
        py_file.relative_to(PACKAGE_DIR)
        for py_file in (PACKAGE_DIR / "core").rglob("*.py")
        if "import fastapi" in py_file.read_text() or "from fastapi" in py_file.read_text()
    ]

    assert not violations, f"Core layer imports FastAPI: {violations}"


def test_validator_does_not_depend_on_adapters():
    """The validator takes plain inputs; only the adapter knows the envelope graph."""
    for name in ("validator.py", "predicates.py"):
        content = (PACKAGE_DIR / "services" / name).read_text()
        assert "voice_skill_engine.adapters" not in content, name
        assert "fastapi" not in content, name
