"""Frontmatter parsing — split a guide into its header mapping and body.

Expected document shape::

    ---
    description: Error handling conventions
    globs:
      - "src/**/*.ts"
      - "tests/**/*.ts"
    alwaysApply: false
    ---

    # Body starts here

The header is a flat mapping. Values are strings, the unquoted literals
``true``/``false`` (coerced to booleans), or a list opened by a bare
``key:`` line and filled by the ``- item`` lines that follow it.

Parsing is tolerant: a missing closing delimiter or an unrecognised line
never raises, it only drops what could not be understood.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Mapping

from stack_guides.model import Frontmatter, FrontmatterValue

DELIMITER = "---"

# ── regexes ───────────────────────────────────────────────────────────

_CLOSING = re.compile(r"\r?\n---[ \t]*(?:\r?\n|$)")
_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")
_LIST_ITEM = re.compile(r"^\s*-\s*(.*?)\s*$")
_KEY_LINE = re.compile(r"^\s*([^:\s][^:]*?)\s*:(.*)$")

_BOOLEANS = {"true": True, "false": False}


class _State(Enum):
    SCALAR = "scalar"    # expecting `key: value` or `key:`
    LIST = "list"        # consuming `- item` lines for the open key


def _unquote(value: str) -> tuple[str, bool]:
    """Strip one pair of matching surrounding quotes.

    Returns the value and whether it was quoted.
    """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1], True
    return value, False


def _scalar(raw: str) -> FrontmatterValue:
    value, quoted = _unquote(raw)
    if not quoted and value in _BOOLEANS:
        return _BOOLEANS[value]
    return value


def parse_header_block(block: str) -> Frontmatter:
    """Decode the lines between the two delimiters into a mapping."""
    frontmatter: Frontmatter = {}
    state = _State.SCALAR
    list_key: str | None = None

    for line in block.splitlines():
        if not line.strip():
            continue

        item = _LIST_ITEM.match(line)
        if item:
            if state is _State.LIST and list_key is not None:
                value, _ = _unquote(item.group(1))
                frontmatter[list_key].append(value)  # type: ignore[union-attr]
            continue

        key_line = _KEY_LINE.match(line)
        if key_line is None:
            state, list_key = _State.SCALAR, None
            continue

        key, raw_value = key_line.group(1), key_line.group(2).strip()
        if raw_value:
            frontmatter[key] = _scalar(raw_value)
            state, list_key = _State.SCALAR, None
        else:
            frontmatter[key] = []
            state, list_key = _State.LIST, key

    return frontmatter


def parse_frontmatter(raw_text: str) -> tuple[Frontmatter, str]:
    """Split *raw_text* into ``(frontmatter, body)``.

    Documents that do not open with ``---``, or whose header is never
    closed, come back unchanged as body with an empty mapping.
    """
    if not raw_text.startswith(DELIMITER):
        return {}, raw_text

    closing = _CLOSING.search(raw_text, len(DELIMITER))
    if closing is None:
        return {}, raw_text

    block = raw_text[len(DELIMITER):closing.start()].strip()
    body = _LEADING_BLANK_LINES.sub("", raw_text[closing.end():])
    return parse_header_block(block), body


# ── serialisation ─────────────────────────────────────────────────────


def _needs_quotes(value: str) -> bool:
    return (
        value == ""
        or value in _BOOLEANS
        or value != value.strip()
        or value[0] in ("'", '"')
    )


def _format_scalar(value: str) -> str:
    return f'"{value}"' if _needs_quotes(value) else value


def serialize_frontmatter(frontmatter: Mapping[str, FrontmatterValue], body: str = "") -> str:
    """Render *frontmatter* back into a ``---`` block followed by *body*.

    ``parse_frontmatter(serialize_frontmatter(fm, body))`` yields an
    equivalent mapping and the identical body for any body that does not
    itself start with blank lines.
    """
    lines = [DELIMITER]
    for key, value in frontmatter.items():
        if isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        elif isinstance(value, (list, tuple)):
            lines.append(f"{key}:")
            lines.extend(f"  - {_format_scalar(str(v))}" for v in value)
        else:
            lines.append(f"{key}: {_format_scalar(str(value))}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n\n" + body
