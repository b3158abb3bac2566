"""Value normalization helpers shared by providers and parameter definitions."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Optional


def trim_name(name: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace from a parameter name, keeping ``None`` as is."""
    if name is None:
        return None
    return name.strip()


def choice_to_string(value: Any) -> str:
    """
    Convert a script-produced value into its choice text.

    Conversion rules:
    - ``str`` is returned verbatim
    - ``bool`` becomes ``"true"`` / ``"false"``
    - ``int`` and ``Decimal`` use their decimal representation
    - ``float`` uses the shortest round-trip form (``1.0`` stays ``"1.0"``)
    - ``bytes`` are decoded as UTF-8, undecodable bytes replaced
    - lists, tuples and dicts become compact JSON
    - anything else falls back to ``str()``
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), default=choice_to_string)
    return str(value)


__all__ = ["choice_to_string", "trim_name"]
