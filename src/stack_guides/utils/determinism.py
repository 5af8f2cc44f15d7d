"""Determinism utilities for reproducible snapshot builds.

When --ci / --deterministic mode is enabled the snapshot's ``generatedAt``
is fixed to a known epoch, so two builds over unchanged inputs produce
byte-identical files.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone

# Fixed timestamp for CI mode (ISO 8601 with timezone)
FIXED_TIMESTAMP = "2000-01-01T00:00:00+00:00"

# Module-level state for ci_mode (set by CLI)
_ci_mode: bool = False


def set_ci_mode(enabled: bool) -> None:
    """Set the global CI mode flag.

    Called by CLI when --ci or --deterministic is passed.
    """
    global _ci_mode
    _ci_mode = enabled


def is_ci_mode() -> bool:
    """Check if CI/deterministic mode is enabled.

    True when CI_MODE or DETERMINISTIC is set to 1/true/yes, or when the
    CLI called :func:`set_ci_mode`.
    """
    if os.environ.get("CI_MODE", "").lower() in ("1", "true", "yes"):
        return True
    if os.environ.get("DETERMINISTIC", "").lower() in ("1", "true", "yes"):
        return True

    return _ci_mode


def deterministic_timestamp(ci_mode: bool = False) -> str:
    """Return a timestamp string.

    In CI mode, returns FIXED_TIMESTAMP.
    Otherwise returns current UTC time in ISO 8601 format.
    """
    if ci_mode or is_ci_mode():
        return FIXED_TIMESTAMP
    return datetime.now(timezone.utc).isoformat()
