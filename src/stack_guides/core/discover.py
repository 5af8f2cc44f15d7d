"""File discovery — list the guide documents of one stack."""

from __future__ import annotations

from pathlib import Path

_DEFAULT_IGNORE_FILES = frozenset({".DS_Store"})


def list_guide_files(rules_dir: Path, extension: str = ".mdc") -> list[Path]:
    """Return the guide files directly inside *rules_dir*, sorted by name.

    Sorting fixes the directory-read order so that equal titles tie-break
    the same way on every platform.

    Raises
    ------
    OSError
        If *rules_dir* is missing or cannot be listed.
    """
    suffix = extension.lower()
    results: list[Path] = []
    for p in rules_dir.iterdir():
        if p.name in _DEFAULT_IGNORE_FILES:
            continue
        if not p.name.lower().endswith(suffix):
            continue
        if not p.is_file():
            continue
        results.append(p)
    return sorted(results, key=lambda p: p.name)
