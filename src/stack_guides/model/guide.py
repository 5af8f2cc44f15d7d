"""Guide — one parsed rule document inside a stack."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from . import GUIDE_EXTENSION, Frontmatter

_EXTENSION_RE = re.compile(re.escape(GUIDE_EXTENSION) + r"$", re.IGNORECASE)
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def strip_extension(file_name: str) -> str:
    return _EXTENSION_RE.sub("", file_name)


def slugify(text: str) -> str:
    """Lowercase *text* and collapse every non-alphanumeric run to ``-``."""
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def titleize(file_name: str) -> str:
    """``api-error_handling.mdc`` → ``Api Error Handling``.

    Only the first character of each word is changed, so acronyms keep
    their casing (``REST-api`` → ``REST Api``).
    """
    words = strip_extension(file_name).replace("-", " ").replace("_", " ").split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words)


def _always_apply(frontmatter: Frontmatter) -> bool:
    value = frontmatter.get("alwaysApply")
    return value is True or value == "true"


def _globs(frontmatter: Frontmatter) -> tuple[str, ...]:
    value = frontmatter.get("globs")
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(v) for v in value)
    return ()


@dataclass(frozen=True, slots=True)
class Guide:
    """Immutable guide record.

    Corresponds to ``stacks[].guides[]`` in ``guides_snapshot.schema.json``.
    """

    id: str
    title: str
    file_name: str
    frontmatter: Frontmatter = field(default_factory=dict)
    content: str = ""
    always_apply: bool = False
    globs: tuple[str, ...] = ()

    @classmethod
    def from_parts(
        cls, file_name: str, frontmatter: Frontmatter, content: str
    ) -> Guide:
        """Derive id/title/alwaysApply/globs from a parsed document."""
        return cls(
            id=slugify(strip_extension(file_name)),
            title=titleize(file_name),
            file_name=file_name,
            frontmatter=frontmatter,
            content=content,
            always_apply=_always_apply(frontmatter),
            globs=_globs(frontmatter),
        )

    @property
    def description(self) -> str:
        value = self.frontmatter.get("description", "")
        return value if isinstance(value, str) else ""

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "fileName": self.file_name,
            "frontmatter": {
                k: list(v) if isinstance(v, list) else v
                for k, v in self.frontmatter.items()
            },
            "content": self.content,
            "alwaysApply": self.always_apply,
            "globs": list(self.globs),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Guide:
        return cls(
            id=data["id"],
            title=data["title"],
            file_name=data["fileName"],
            frontmatter=dict(data.get("frontmatter") or {}),
            content=data.get("content", ""),
            always_apply=bool(data.get("alwaysApply", False)),
            globs=tuple(data.get("globs") or ()),
        )
