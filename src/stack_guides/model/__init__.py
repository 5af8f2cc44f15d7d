"""Types shared across the parser, assembler and web layers."""

from __future__ import annotations

from typing import Union

# A frontmatter value is a scalar string, a coerced boolean, or a flat list.
FrontmatterValue = Union[str, bool, list[str]]
Frontmatter = dict[str, FrontmatterValue]

GUIDE_EXTENSION = ".mdc"
README_NAME = "README.md"
