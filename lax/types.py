"""Runtime values for Lax.

Lax has four kinds of value, mapped onto Python objects:

* Number  -> ``float``
* String  -> ``str``
* Boolean -> ``bool``
* Nil     -> ``None``

The same values are used as token literal payloads and as the results the
interpreter produces.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

Value = Union[float, str, bool, None]


def is_number(value: Value) -> bool:
    # bool is a subclass of int, never of float, but numbers arrive as float
    return isinstance(value, float)


def number_to_string(value: float) -> str:
    """Shortest round-trip digits, always written positionally (no exponent)."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = format(Decimal(repr(value)), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def to_string(value: Value) -> str:
    """Convert a Lax value to its canonical textual form.

    This is the form used by ``print`` statements and by the AST printer.
    Strings keep their surrounding double quotes so that a printed string
    is distinguishable from a printed number or keyword.
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return number_to_string(value)
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)
