"""Shared pytest fixtures for the modgen test suite.

Provides reusable fixtures for:
- Target directories that do not exist yet
- Resolved Java and Kotlin generation requests
- A generator with the default toolchain config
"""

from __future__ import annotations

from pathlib import Path

import pytest

from modgen.config import Config
from modgen.scaffolder import GenerationRequest, ProjectGenerator, resolve_request


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """A not-yet-existing project directory inside a temp dir (auto-cleanup)."""
    return tmp_path / "mymod"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def java_request(target_dir: Path) -> GenerationRequest:
    """Java variant with every default applied."""
    return resolve_request(target_dir, mod_name="My Mod")


@pytest.fixture
def kotlin_request(tmp_path: Path) -> GenerationRequest:
    """Kotlin variant with explicit id and main class."""
    return resolve_request(
        tmp_path / "foo",
        mod_name="Foo Mod",
        mod_id="foomod",
        use_kotlin=True,
        main_class="com.example.Foo",
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def generator() -> ProjectGenerator:
    """A ProjectGenerator using the default toolchain versions."""
    return ProjectGenerator(Config())
