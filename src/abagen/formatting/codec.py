"""Field codec: renders one value into a fixed-width slice.

Nothing here raises on bad input. Values are coerced, padded and cut to the
declared width so that a line always comes out at its schema width.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation, localcontext
from typing import Any

from abagen.models.schema import FieldSpec, FieldType, Padding

_NAN = Decimal("NaN")
_CENTS = Decimal(100)
_WHOLE = Decimal(1)
_BSB_SEPARATORS = re.compile(r"[\s-]+")


def to_decimal(value: Any) -> Decimal:
    """Coerce a value to Decimal: blank is zero, anything unusable is NaN."""
    if value is None or value is False:
        return Decimal(0)
    if isinstance(value, Decimal):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return Decimal(0)
        try:
            number = Decimal(text)
        except InvalidOperation:
            return _NAN
    return number if number.is_finite() else _NAN


def to_minor_units(value: Any) -> str:
    """Major-unit amount to a whole count of cents, rounded half away from zero."""
    number = to_decimal(value)
    if number.is_nan():
        return "NaN"
    with localcontext() as ctx:
        # Enough precision to hold every whole digit of the cents value.
        ctx.prec = max(ctx.prec, number.adjusted() + 4)
        try:
            return format((number * _CENTS).quantize(_WHOLE, rounding=ROUND_HALF_UP), "f")
        except DecimalException:
            return "NaN"


def as_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def format_bsb(value: str) -> str:
    """Normalise a BSB to ``NNN-NNN``; blank stays blank."""
    digits = _BSB_SEPARATORS.sub("", value, count=1).strip()
    return f"{digits[:3]}-{digits[3:6]}" if digits else ""


def _fit(text: str, width: int, *, fill: str = " ", align_left: bool = False) -> str:
    padded = text.ljust(width, fill) if align_left else text.rjust(width, fill)
    return padded[:width]


def render_field(value: Any, spec: FieldSpec) -> str:
    """Render ``value`` as exactly ``spec.width`` characters."""
    width = spec.width

    if spec.type is FieldType.MONEY:
        return _fit(to_minor_units(value), width, fill="0")

    text = as_text(value)

    if spec.type is FieldType.STRING:
        return _fit(text, width, align_left=spec.padding is Padding.LEFT)
    if spec.type is FieldType.INTEGER:
        return _fit(text, width, fill="0")
    if spec.type is FieldType.BSB:
        return _fit(format_bsb(text), width)
    return _fit(text, width)
