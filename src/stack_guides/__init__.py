"""stack_guides — per-stack coding guidelines, parsed, bundled and rendered."""

__all__ = [
    "__version__",
    "build_guides_data",
    "load_snapshot",
    "render_guide",
    "render_markdown",
    "parse_frontmatter",
]
__version__ = "0.1.0"

from stack_guides.api import (  # noqa: E402, F401
    build_guides_data,
    load_snapshot,
    render_guide,
)
from stack_guides.core.frontmatter import parse_frontmatter  # noqa: E402, F401
from stack_guides.core.markdown import render_markdown  # noqa: E402, F401
