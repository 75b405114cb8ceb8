"""Compact text form of JSON values."""

from __future__ import annotations

import json
from typing import Any


def json_to_string(value: Any) -> str:
    """Serialise ``value`` as compact JSON with keys in sorted order."""
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)