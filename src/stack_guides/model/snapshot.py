"""Stack and Snapshot — the aggregate written to ``guides.json``."""

from __future__ import annotations

import locale
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Iterable

from stack_guides.model import README_NAME
from stack_guides.model.guide import Guide


def _fold(title: str) -> str:
    """Case- and accent-insensitive form of *title* (``Émile`` → ``emile``)."""
    decomposed = unicodedata.normalize("NFKD", title.casefold())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _collation_key(guide: Guide) -> tuple[int, str, str]:
    if guide.file_name == README_NAME:
        return (0, "", "")
    # Folded form first: under the C locale strxfrm is plain codepoint order.
    return (1, _fold(guide.title), locale.strxfrm(guide.title.casefold()))


def sort_guides(guides: Iterable[Guide]) -> tuple[Guide, ...]:
    """Overview document first, then by title in locale collation order.

    ``sorted`` is stable, so equal titles keep directory-read order.
    """
    return tuple(sorted(guides, key=_collation_key))


@dataclass(frozen=True, slots=True)
class Stack:
    """One statically configured collection of guides."""

    id: str
    name: str
    directory: str = ""
    icon: str = ""
    summary: str = ""
    focus: str = ""
    readme: str = ""
    guides: tuple[Guide, ...] = ()

    @property
    def always_apply_count(self) -> int:
        return sum(1 for g in self.guides if g.always_apply)

    def find_guide(self, guide_id: str) -> Guide | None:
        return next((g for g in self.guides if g.id == guide_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "directory": self.directory,
            "icon": self.icon,
            "summary": self.summary,
            "focus": self.focus,
            "readme": self.readme,
            "guides": [g.to_dict() for g in self.guides],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Stack:
        return cls(
            id=data["id"],
            name=data["name"],
            directory=data.get("directory", ""),
            icon=data.get("icon", ""),
            summary=data.get("summary", ""),
            focus=data.get("focus", ""),
            readme=data.get("readme", ""),
            guides=tuple(Guide.from_dict(g) for g in data.get("guides", [])),
        )


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable aggregate root: every stack in configuration order.

    Rebuilt wholesale on each build run, never patched.
    """

    generated_at: str
    stacks: tuple[Stack, ...] = field(default_factory=tuple)

    @property
    def guide_count(self) -> int:
        return sum(len(s.guides) for s in self.stacks)

    def find_stack(self, stack_id: str) -> Stack | None:
        return next((s for s in self.stacks if s.id == stack_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generatedAt": self.generated_at,
            "stacks": [s.to_dict() for s in self.stacks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Snapshot:
        return cls(
            generated_at=data["generatedAt"],
            stacks=tuple(Stack.from_dict(s) for s in data.get("stacks", [])),
        )
