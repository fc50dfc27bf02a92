"""Scalar classification and text rendering.

Every value written to the document goes through this module: row and list
leaves are named after :func:`classify`, and attribute values pass the
omission policy in :func:`is_kept`.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

from .enums import ValueType

# A-z also spans [ \ ] ^ _ and the backtick; the viewer's colors are matched this loosely.
COLOR_PATTERN = re.compile(r"[A-z0-9]{6}")
NUMERIC_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def render_text(value: Any) -> str:  # noqa: ANN401
    """Render a scalar as element or attribute text.

    Args:
        value: Any scalar

    Returns:
        ``""`` for None, ``"true"``/``"false"`` for booleans, integral floats
        without a fractional part, ``str(value)`` otherwise
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def is_numeric(value: Any) -> bool:  # noqa: ANN401
    """Return True for real numbers and numeric strings; booleans are not numeric."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return not isinstance(value, complex)
    if isinstance(value, str):
        return NUMERIC_PATTERN.fullmatch(value) is not None
    return False


def classify(value: Any) -> ValueType:  # noqa: ANN401
    """Classify a scalar into its chart data type.

    The color check runs first, so six-digit numbers such as ``123456`` are
    colors rather than numbers.

    Args:
        value: Any scalar

    Returns:
        The value's type tag
    """
    if value is None:
        return ValueType.NULL
    if not isinstance(value, bool) and COLOR_PATTERN.fullmatch(render_text(value)):
        return ValueType.COLOR
    if is_numeric(value):
        return ValueType.NUMBER
    return ValueType.STRING


def attribute_value(value: Any) -> Any:  # noqa: ANN401
    """Convert booleans to the viewer's ``"true"``/``"false"`` tokens."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def is_kept(value: Any) -> bool:  # noqa: ANN401
    """Return whether an attribute value is written.

    None, empty strings, numeric zero and the string ``"0"`` are omitted. Call
    :func:`attribute_value` first where ``False`` must survive as ``"false"``.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value not in {"", "0"}
    if isinstance(value, numbers.Number):
        return value != 0
    return bool(value)
