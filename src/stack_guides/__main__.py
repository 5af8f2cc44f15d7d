"""CLI entry-point for stack_guides.

Usage:
    python -m stack_guides build [--root DIR] [--out FILE] [--ci]
    python -m stack_guides serve [--docs DIR] [--host HOST] [--port PORT]
    python -m stack_guides render <file> [--escape-html]
    python -m stack_guides validate <snapshot.json>
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from stack_guides import __version__
from stack_guides.api import build_guides_data
from stack_guides.contracts.load import validate_file
from stack_guides.core.assembler import SnapshotBuildError
from stack_guides.core.frontmatter import parse_frontmatter
from stack_guides.core.markdown import render_markdown
from stack_guides.utils.determinism import is_ci_mode, set_ci_mode
from stack_guides.utils.exit_codes import ExitCode

_LOG_LEVEL_ENV = "STACK_GUIDES_LOG_LEVEL"


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv(_LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stack-guides",
        description="Build, serve and render per-stack coding guides.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = p.add_subparsers(dest="command")

    build_p = sub.add_parser(
        "build", help="Build docs/data/guides.json from every stack directory."
    )
    build_p.add_argument(
        "--root", default=".", help="Repository root holding the stack directories."
    )
    build_p.add_argument(
        "--out", default=None, help="Snapshot path (default: docs/data/guides.json)."
    )
    build_p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        help="Fix generatedAt so repeated builds are byte-identical.",
    )

    serve_p = sub.add_parser("serve", help="Serve the docs directory over HTTP.")
    serve_p.add_argument("--docs", default=None, help="Directory to serve.")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument(
        "--port", type=int, default=None, help="Port (default: $PORT or 8080)."
    )

    render_p = sub.add_parser("render", help="Print a guide body as HTML.")
    render_p.add_argument("file", help="Guide document (.mdc / .md).")
    render_p.add_argument(
        "--escape-html",
        action="store_true",
        help="Escape markup outside code blocks too.",
    )

    val_p = sub.add_parser("validate", help="Validate a snapshot against its schema.")
    val_p.add_argument("snapshot", help="Path to guides.json.")

    return p


def _handle_build(args: argparse.Namespace) -> int:
    ci_mode = bool(args.ci_mode) or is_ci_mode()
    set_ci_mode(ci_mode)
    try:
        snapshot = build_guides_data(
            Path(args.root),
            out_path=args.out,
            ci_mode=ci_mode,
        )
    except SnapshotBuildError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print(
        f"Built guides data: {len(snapshot.stacks)} stacks, "
        f"{snapshot.guide_count} guides"
    )
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    from stack_guides.web_api.config import settings

    if args.docs:
        settings.DOCS_DIR = args.docs
        settings.SNAPSHOT_PATH = str(Path(args.docs) / "data" / "guides.json")

    from stack_guides.web_api.main import run

    port = args.port or settings.PORT
    print(f"Local server running at: http://localhost:{port}", file=sys.stderr)
    run(host=args.host, port=port)
    return ExitCode.SUCCESS


def _handle_render(args: argparse.Namespace) -> int:
    try:
        raw = Path(args.file).read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    _, body = parse_frontmatter(raw)
    print(render_markdown(body, escape_html=args.escape_html))
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    import jsonschema

    try:
        validate_file(Path(args.snapshot))
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


_HANDLERS = {
    "build": _handle_build,
    "serve": _handle_serve,
    "render": _handle_render,
    "validate": _handle_validate,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = invalid, 2 = error)."""
    parser = _build_parser()
    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    args = parser.parse_args(effective_argv)
    _configure_logging(args.verbose)

    # No subcommand: build, matching the no-argument build entry point.
    if args.command is None:
        args = parser.parse_args([*effective_argv, "build"])
    return int(_HANDLERS[args.command](args))


if __name__ == "__main__":
    raise SystemExit(main())
