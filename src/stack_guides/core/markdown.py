"""Markdown → HTML rendering for guide bodies.

Supports the small dialect the guides are written in:

  - fenced code blocks (```` ```lang ````)
  - ATX headings ``#`` … ``######``
  - horizontal rules (``---`` / ``***``)
  - block quotes, one ``<blockquote>`` per ``> `` line
  - ordered (``1.``) and unordered (``-`` / ``*`` / ``+``) lists
  - ``***bold italic***``, ``**bold**`` / ``__bold__``, ``*italic*`` / ``_italic_``
  - inline ``code`` spans, ``[links](url)`` and ``![images](src)``,
    including linked images ``[![alt](src)](url)``

Rendering happens in two passes.  :func:`parse_blocks` splits the text into
block nodes; :func:`render_inline` then formats the text of headings,
quotes, list items and paragraphs.  Code block content never reaches the
inline pass, and code spans / links are stashed behind placeholders before
emphasis runs, so markers inside them are left alone.

Only fenced code content is HTML-escaped by default.  Other text passes
through verbatim so that guides may embed markup; pass
``escape_html=True`` to escape everything and keep only the constructs
listed above.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Union

# ── block-level patterns ──────────────────────────────────────────────

_FENCE_OPEN = re.compile(r"^```([\w+#.-]*)\s*$")
_FENCE_CLOSE = re.compile(r"^```\s*$")
_HEADING = re.compile(r"^(#{1,6}) (.*)$")
_RULE = re.compile(r"^(?:---|\*\*\*)$")
_QUOTE = re.compile(r"^> (.*)$")
_ORDERED_ITEM = re.compile(r"^\d+\.\s+(.*)$")
_UNORDERED_ITEM = re.compile(r"^[-*+]\s+(.*)$")
_RAW_BLOCK = re.compile(r"^<(h[1-6]|p|pre|ul|ol|blockquote|hr|div)\b", re.IGNORECASE)

# ── inline patterns (applied in this order) ───────────────────────────

_CODE_SPAN = re.compile(r"`([^`]+)`")
_IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\)")
_LINK = re.compile(r"\[([^\]]*)\]\(([^)\s]+)\)")
_EMPHASIS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*\*(?!\s)(.+?)(?<!\s)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"(?<!\w)___(?!\s)(.+?)(?<!\s)___(?!\w)"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(?!\s)(.+?)(?<!\s)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"(?<!\w)__(?!\s)(.+?)(?<!\s)__(?!\w)"), r"<strong>\1</strong>"),
    (re.compile(r"\*(?!\s)(.+?)(?<!\s)\*"), r"<em>\1</em>"),
    (re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)"), r"<em>\1</em>"),
)
_PLACEHOLDER = re.compile("\x00(\\d+)\x00")

# A paragraph holding nothing but one bare tag (e.g. an image) is unwrapped.
_LONE_TAG = re.compile(r"^<[^>]+>$")


# ── block nodes ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CodeBlock:
    code: str
    language: str = ""


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True, slots=True)
class Rule:
    pass


@dataclass(frozen=True, slots=True)
class Quote:
    text: str


@dataclass(frozen=True, slots=True)
class ListBlock:
    ordered: bool
    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RawHtml:
    html: str


Block = Union[CodeBlock, Heading, Rule, Quote, ListBlock, Paragraph, RawHtml]


def _list_item(line: str) -> tuple[bool, str] | None:
    m = _ORDERED_ITEM.match(line)
    if m:
        return True, m.group(1)
    m = _UNORDERED_ITEM.match(line)
    if m:
        return False, m.group(1)
    return None


def _find_fence_close(lines: list[str], start: int) -> int | None:
    for j in range(start, len(lines)):
        if _FENCE_CLOSE.match(lines[j]):
            return j
    return None


def parse_blocks(text: str, *, allow_raw_html: bool = True) -> list[Block]:
    """Split *text* into block nodes in document order."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    blocks: list[Block] = []
    paragraph: list[str] = []
    list_items: list[str] = []
    list_ordered = False

    def flush() -> None:
        nonlocal list_items
        if paragraph:
            first = paragraph[0].strip()
            if allow_raw_html and _RAW_BLOCK.match(first):
                blocks.append(RawHtml("\n".join(l.strip() for l in paragraph)))
            else:
                blocks.append(Paragraph(tuple(l.strip() for l in paragraph)))
            paragraph.clear()
        if list_items:
            blocks.append(ListBlock(list_ordered, tuple(list_items)))
            list_items = []

    i = 0
    while i < len(lines):
        line = lines[i]

        fence = _FENCE_OPEN.match(line)
        if fence:
            close = _find_fence_close(lines, i + 1)
            if close is not None:
                flush()
                body = lines[i + 1:close]
                code = "\n".join(body) + "\n" if body else ""
                blocks.append(CodeBlock(code, fence.group(1)))
                i = close + 1
                continue

        if not line.strip():
            flush()
            i += 1
            continue

        heading = _HEADING.match(line)
        if heading:
            flush()
            blocks.append(Heading(len(heading.group(1)), heading.group(2).strip()))
        elif _RULE.match(line):
            flush()
            blocks.append(Rule())
        elif (quote := _QUOTE.match(line)) is not None:
            flush()
            blocks.append(Quote(quote.group(1)))
        elif (item := _list_item(line)) is not None:
            if paragraph:
                flush()
            ordered, item_text = item
            if not list_items:
                list_ordered = ordered
            list_items.append(item_text)
        else:
            if list_items:
                flush()
            paragraph.append(line)
        i += 1

    flush()
    return blocks


# ── inline pass ───────────────────────────────────────────────────────


def _attr(value: str) -> str:
    return value.replace('"', "&quot;")


def render_inline(text: str, *, escape_html: bool = False) -> str:
    """Format code spans, links, images and emphasis inside one line."""
    text = text.replace("\x00", "")
    if escape_html:
        text = html.escape(text, quote=False)
    stash: list[str] = []

    def keep(fragment: str) -> str:
        stash.append(fragment)
        return f"\x00{len(stash) - 1}\x00"

    text = _CODE_SPAN.sub(lambda m: keep(f"<code>{m.group(1)}</code>"), text)

    # Images first, so a linked image becomes a link around a placeholder.
    text = _IMAGE.sub(
        lambda m: keep(f'<img src="{_attr(m.group(2))}" alt="{_attr(m.group(1))}">'),
        text,
    )

    def link(m: re.Match[str]) -> str:
        label, target = m.groups()
        if not label:
            return m.group(0)
        return keep(
            f'<a href="{_attr(target)}" target="_blank" rel="noopener noreferrer">'
            f"{_emphasis(label)}</a>"
        )

    text = _LINK.sub(link, text)
    text = _emphasis(text)

    # Placeholders may nest (link labels holding code spans or images).
    while _PLACEHOLDER.search(text):
        text = _PLACEHOLDER.sub(lambda m: stash[int(m.group(1))], text)
    return text


def _emphasis(text: str) -> str:
    for pattern, replacement in _EMPHASIS:
        text = pattern.sub(replacement, text)
    return text


# ── output ────────────────────────────────────────────────────────────


def _render_block(block: Block, escape_html: bool) -> str:
    def inline(s: str) -> str:
        return render_inline(s, escape_html=escape_html)

    if isinstance(block, CodeBlock):
        return f"<pre><code>{html.escape(block.code, quote=False)}</code></pre>"
    if isinstance(block, Heading):
        return f"<h{block.level}>{inline(block.text)}</h{block.level}>"
    if isinstance(block, Rule):
        return "<hr>"
    if isinstance(block, Quote):
        return f"<blockquote>{inline(block.text)}</blockquote>"
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "\n".join(f"<li>{inline(item)}</li>" for item in block.items)
        return f"<{tag}>\n{items}\n</{tag}>"
    if isinstance(block, RawHtml):
        return block.html

    content = "<br>".join(inline(line) for line in block.lines)
    if not content:
        return ""
    if _LONE_TAG.match(content):
        return content
    return f"<p>{content}</p>"


def render_markdown(text: str | None, *, escape_html: bool = False) -> str:
    """Render a guide body to an HTML fragment.

    Pure and deterministic; unrecognised input becomes paragraph text.
    """
    if not text:
        return ""
    blocks = parse_blocks(text, allow_raw_html=not escape_html)
    rendered = (_render_block(b, escape_html) for b in blocks)
    return "\n".join(r for r in rendered if r)
