"""Assembler — walks every configured stack and builds the Snapshot.

This is the **only** entry point that wires discovery → frontmatter →
model → serialized snapshot.  A failure on any stack aborts the run; the
snapshot file is replaced only after the whole build succeeded.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

import jsonschema

from stack_guides.contracts.load import SNAPSHOT_SCHEMA, validate_instance
from stack_guides.core.config import BuildConfig, StackConfig
from stack_guides.core.discover import list_guide_files
from stack_guides.core.frontmatter import parse_frontmatter
from stack_guides.model.guide import Guide
from stack_guides.model.snapshot import Snapshot, Stack, sort_guides
from stack_guides.utils.determinism import deterministic_timestamp
from stack_guides.utils.json_norm import stable_json_dumps

_logger = logging.getLogger(__name__)


class SnapshotBuildError(RuntimeError):
    """Raised when a stack cannot be read or the snapshot cannot be written."""


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def load_guide(path: Path) -> Guide:
    """Read and parse one guide document."""
    frontmatter, body = parse_frontmatter(_read_text(path))
    return Guide.from_parts(path.name, frontmatter, body)


def _read_readme(path: Path) -> str:
    try:
        return _read_text(path)
    except FileNotFoundError:
        _logger.debug("no overview document at %s", path)
        return ""


def build_stack(stack: StackConfig, config: BuildConfig) -> Stack:
    """Assemble one stack from ``<repo_root>/<directory>/<rules_subdir>``."""
    stack_dir = config.resolve(Path(stack.directory))
    rules_dir = stack_dir / config.rules_subdir

    try:
        files = list_guide_files(rules_dir, config.guide_extension)
        guides = [load_guide(p) for p in files]
        readme = _read_readme(stack_dir / config.readme_name)
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotBuildError(
            f"stack {stack.id!r}: cannot read {stack_dir}: {exc}"
        ) from exc

    _logger.debug("stack %s: %d guides", stack.id, len(guides))
    return Stack(
        id=stack.id,
        name=stack.name,
        directory=stack.directory,
        icon=stack.icon,
        summary=stack.summary,
        focus=stack.focus,
        readme=readme,
        guides=sort_guides(guides),
    )


def build_snapshot(
    stacks: Sequence[StackConfig],
    config: BuildConfig,
    *,
    ci_mode: bool = False,
    generated_at: str | None = None,
) -> Snapshot:
    """Build a fresh :class:`Snapshot` with stacks in configuration order.

    Raises
    ------
    SnapshotBuildError
        If any stack's rules directory or guide file cannot be read.
    """
    built = tuple(build_stack(s, config) for s in stacks)
    return Snapshot(
        generated_at=generated_at or deterministic_timestamp(ci_mode),
        stacks=built,
    )


def write_snapshot(snapshot: Snapshot, out_path: Path) -> Path:
    """Validate and atomically write *snapshot* as JSON to *out_path*.

    A schema mismatch raises :class:`SnapshotBuildError` before anything
    is written.

    The data goes to a temporary file beside *out_path* which then replaces
    it, so readers never observe a half-written snapshot.
    """
    payload = snapshot.to_dict()
    try:
        validate_instance(payload, SNAPSHOT_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise SnapshotBuildError(f"snapshot does not match schema: {exc.message}") from exc
    text = stable_json_dumps(payload, indent=2)

    tmp_name: str | None = None
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=out_path.parent,
            prefix=f".{out_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
        os.replace(tmp_name, out_path)
        tmp_name = None
    except OSError as exc:
        raise SnapshotBuildError(f"cannot write snapshot to {out_path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    _logger.info(
        "wrote %s: %d stacks, %d guides",
        out_path,
        len(snapshot.stacks),
        snapshot.guide_count,
    )
    return out_path
