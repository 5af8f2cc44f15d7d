"""Shared fixtures: a throwaway repository with two stacks."""

from __future__ import annotations

from pathlib import Path

import pytest

from stack_guides.core.config import BuildConfig, StackConfig

ERROR_HANDLING = """---
description: Error handling conventions
globs:
  - "src/**/*.py"
  - tests/**/*.py
alwaysApply: true
---

# Error Handling

Raise **specific** exceptions.
"""

NAMING = """---
description: Naming
alwaysApply: false
---
Use `snake_case`.
"""

PLAIN = "No header here.\n"


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def stack_configs() -> tuple[StackConfig, ...]:
    return (
        StackConfig(
            id="python",
            name="Python",
            directory="Python",
            icon="icons/python.png",
            summary="General Python development",
            focus="Readability",
        ),
        StackConfig(
            id="rust",
            name="Rust",
            directory="Rust",
            icon="icons/rust.png",
            summary="Systems programming with Rust",
            focus="Memory safety",
        ),
    )


@pytest.fixture
def stacks_repo(tmp_path: Path) -> Path:
    """Python has three guides and a README; Rust has one guide, no README."""
    rules = tmp_path / "Python" / ".cursor" / "rules"
    _write(rules / "naming.mdc", NAMING)
    _write(rules / "error-handling.mdc", ERROR_HANDLING)
    _write(rules / "plain_notes.mdc", PLAIN)
    _write(rules / "ignored.txt", "not a guide")
    _write(tmp_path / "Python" / "README.md", "# Python\n\nOverview.\n")

    _write(tmp_path / "Rust" / ".cursor" / "rules" / "ownership.mdc", "Borrow wisely.\n")
    return tmp_path


@pytest.fixture
def build_config(stacks_repo: Path) -> BuildConfig:
    return BuildConfig(repo_root=stacks_repo)
