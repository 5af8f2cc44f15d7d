"""Canonical JSON serialization — single dump path for the snapshot artifact.

Guarantees:
  - Optional stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - ``Path`` objects → POSIX strings
  - Dataclasses → dicts (via ``to_dict()`` when present, else ``asdict``)
"""

from __future__ import annotations

import json
from dataclasses import is_dataclass, asdict
from pathlib import Path
from typing import Any, Mapping


def _to_builtin(obj: Any) -> Any:
    """Convert common non-JSON types into JSON-safe builtins."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, bool, float)):
        return obj
    if isinstance(obj, Path):
        return obj.as_posix()
    if is_dataclass(obj) and not isinstance(obj, type):
        to_dict = getattr(obj, "to_dict", None)
        if callable(to_dict):
            return _to_builtin(to_dict())
        return _to_builtin(asdict(obj))
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_to_builtin(v) for v in obj]
    # Fall back to string (keeps the build resilient)
    return str(obj)


def stable_json_dumps(
    obj: Any,
    *,
    indent: int | None = 2,
    sort_keys: bool = False,
) -> str:
    """
    Canonical JSON serialization used for the snapshot and CLI output.

    Guarantees:
      - stable newline at EOF
      - insertion order kept unless ``sort_keys`` is set
      - conversion of Paths/dataclasses/tuples
    """
    built = _to_builtin(obj)
    s = json.dumps(
        built,
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=False,
    )
    return s + "\n"
