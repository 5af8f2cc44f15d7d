"""Process exit codes shared by every ``stack-guides`` subcommand.

  0   SUCCESS    snapshot built, page rendered, or snapshot valid
  1   VIOLATION  snapshot file does not match guides_snapshot.schema.json
  2   ERROR      unreadable stack directory, bad path, write failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
