"""Integration tests for the resolve-then-scaffold flow.

These tests drive the CLI end to end against a temp directory and verify the
generated project is complete and well-formed for both language variants.
The git test shells out to a real ``git`` and is skipped when it is absent.

No network access or Gradle installation is required.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from modgen.cli import run
from modgen.scaffolder import DEFAULT_MAIN_CLASS


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _tree(root: Path) -> list[str]:
    """All files under *root* as sorted posix paths."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldScenarios:
    """The generated tree for the documented scenarios."""

    def test_java_defaults(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        assert run(["./mymod", "--name", "My Mod"]) == 0

        root = tmp_path / "mymod"
        assert _tree(root) == [
            ".gitignore",
            "build.gradle",
            "gradle.properties",
            "settings.gradle",
            "src/main/java/net/fabricmc/example/ExampleMod.java",
            "src/main/resources/fabric.mod.json",
            "src/main/resources/mymod.mixins.json",
        ]
        meta = json.loads((root / "src/main/resources/fabric.mod.json").read_text(encoding="utf-8"))
        assert meta["id"] == "mymod"
        assert meta["entrypoints"]["main"] == [DEFAULT_MAIN_CLASS]

    def test_kotlin_explicit(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        code = run(["./foo", "-n", "Foo Mod", "-i", "foomod", "-k", "-m", "com.example.Foo"])
        assert code == 0

        root = tmp_path / "foo"
        files = _tree(root)
        assert "src/main/kotlin/com/example/Foo.kt" in files
        assert not any(f.endswith(".java") for f in files)

        source = (root / "src/main/kotlin/com/example/Foo.kt").read_text(encoding="utf-8")
        assert "class Foo" in source

        build = (root / "build.gradle").read_text(encoding="utf-8")
        assert "foomod" in build
        assert "Foo Mod" in build

        meta = json.loads((root / "src/main/resources/fabric.mod.json").read_text(encoding="utf-8"))
        assert meta["id"] == "foomod"
        assert meta["name"] == "Foo Mod"

        props = (root / "gradle.properties").read_text(encoding="utf-8")
        assert "maven_group=com\n" in props
        assert "archives_base_name=example\n" in props

    def test_missing_name_leaves_no_trace(self, tmp_path: Path) -> None:
        target = tmp_path / "nameless"
        assert run([str(target), "-k"]) == 1
        assert not target.exists()

    def test_rerun_without_force_is_refused(self, tmp_path: Path) -> None:
        target = tmp_path / "mymod"
        assert run([str(target), "-n", "My Mod"]) == 0
        before = {p: (target / p).read_bytes() for p in _tree(target)}

        assert run([str(target), "-n", "Other Mod"]) == 1
        assert {p: (target / p).read_bytes() for p in _tree(target)} == before

    def test_rerun_with_force_is_byte_identical(self, tmp_path: Path) -> None:
        target = tmp_path / "mymod"
        assert run([str(target), "-n", "My Mod", "-k"]) == 0
        before = {p: (target / p).read_bytes() for p in _tree(target)}

        assert run([str(target), "-n", "My Mod", "-k", "--force"]) == 0
        assert {p: (target / p).read_bytes() for p in _tree(target)} == before


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
class TestGitInit:
    def test_git_repository_created(self, tmp_path: Path) -> None:
        target = tmp_path / "gitmod"
        assert run([str(target), "-n", "Git Mod", "--git"]) == 0
        assert (target / ".git").is_dir()
        assert (target / "build.gradle").is_file()
