"""
stack_guides.api
================

Programmatic entrypoints for building and reading the guides snapshot.

Goals:
  - No argparse / CLI dependencies
  - Deterministic mode support (ci_mode=True)
  - Stable, JSON-friendly outputs that match the snapshot schema

Non-goals:
  - Owning presentation (styling, download UX) — the UI renders results

Usage::

    from stack_guides.api import build_guides_data, load_snapshot, render_guide

    snapshot = build_guides_data(".", ci_mode=True)
    html = render_guide(snapshot, "python", "error-handling")
"""

from __future__ import annotations

import html
import json
from pathlib import Path
from typing import Optional, Sequence

from stack_guides.core.assembler import build_snapshot, write_snapshot
from stack_guides.core.config import DEFAULT_STACKS, BuildConfig, StackConfig
from stack_guides.core.frontmatter import serialize_frontmatter
from stack_guides.core.markdown import render_markdown
from stack_guides.model.guide import Guide
from stack_guides.model.snapshot import Snapshot


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── build ───────────────────────────────────────────────────────────


def build_guides_data(
    repo_root: str | Path = ".",
    *,
    stacks: Sequence[StackConfig] = DEFAULT_STACKS,
    out_path: Optional[str | Path] = None,
    ci_mode: bool = False,
) -> Snapshot:
    """Build the snapshot for *stacks* and write it to disk.

    Parameters
    ----------
    repo_root:
        Directory holding one sub-directory per stack.
    stacks:
        Ordered stack table. Defaults to :data:`DEFAULT_STACKS`.
    out_path:
        Snapshot destination. Default: ``<repo_root>/docs/data/guides.json``.
    ci_mode:
        If True, ``generatedAt`` is fixed so output is byte-deterministic.

    Raises
    ------
    SnapshotBuildError
        If a stack cannot be read or the file cannot be written. Nothing
        is written in that case.
    """
    config = BuildConfig(repo_root=_to_path(repo_root))
    if out_path is not None:
        config = BuildConfig(repo_root=config.repo_root, out_path=_to_path(out_path))

    snapshot = build_snapshot(stacks, config, ci_mode=ci_mode)
    write_snapshot(snapshot, config.snapshot_path)
    return snapshot


# ── read ────────────────────────────────────────────────────────────


def load_snapshot(path: str | Path) -> Snapshot:
    """Load a serialized snapshot file."""
    data = json.loads(_to_path(path).read_text(encoding="utf-8"))
    return Snapshot.from_dict(data)


def _text(value: str, escape_html: bool) -> str:
    return html.escape(value, quote=False) if escape_html else value


def render_guide_header(guide: Guide, *, escape_html: bool = False) -> str:
    """HTML shown above a guide body: description, auto-apply note, globs.

    Returns ``""`` when the guide has none of the three.
    """
    parts: list[str] = []
    if guide.description:
        parts.append(
            f'<p class="guide-description">{_text(guide.description, escape_html)}</p>'
        )
    if guide.always_apply:
        parts.append(
            '<div class="guide-auto-applied"><strong>Auto-Applied:</strong> '
            "This rule is automatically applied to all AI interactions.</div>"
        )
    if guide.globs:
        globs = _text(", ".join(guide.globs), escape_html)
        parts.append(
            f'<div class="guide-globs"><strong>Applies to:</strong> <code>{globs}</code></div>'
        )
    return "\n".join(parts)


def render_guide(
    snapshot: Snapshot,
    stack_id: str,
    guide_id: str,
    *,
    escape_html: bool = False,
    with_header: bool = False,
) -> Optional[str]:
    """Render one guide's body to HTML, or ``None`` if it does not exist.

    With *with_header* the :func:`render_guide_header` block is prepended.
    """
    stack = snapshot.find_stack(stack_id)
    if stack is None:
        return None
    guide = stack.find_guide(guide_id)
    if guide is None:
        return None
    body = render_markdown(guide.content, escape_html=escape_html)
    if not with_header:
        return body
    return "\n".join(p for p in (render_guide_header(guide, escape_html=escape_html), body) if p)


def render_stack_readme(
    snapshot: Snapshot,
    stack_id: str,
    *,
    escape_html: bool = False,
) -> Optional[str]:
    """Render a stack's overview document; ``None`` for an unknown stack."""
    stack = snapshot.find_stack(stack_id)
    if stack is None:
        return None
    return render_markdown(stack.readme, escape_html=escape_html)


def export_guide_text(guide: Guide) -> str:
    """Re-assemble a guide into its on-disk ``.mdc`` form."""
    return serialize_frontmatter(guide.frontmatter, guide.content)
