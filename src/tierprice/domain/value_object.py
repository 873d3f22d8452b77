"""ValueObject — value without identity; equality by fields."""
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True)
class ValueObject:
    """Value object: equality by all fields (via dataclass)."""
    pass


def to_decimal(value: Any) -> Decimal:
    """Coerce int/str/float/Decimal to a finite Decimal. Floats go through str() to keep their printed value."""
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, float):
        value = str(value)
    if not isinstance(value, (Decimal, int, str)):
        raise TypeError(f"cannot convert {type(value).__name__} to Decimal")
    try:
        result = Decimal(value.strip() if isinstance(value, str) else value)
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return result


def widen(ctx: Context, value: Decimal, exponent: int) -> Context:
    """Raise ctx precision and exponent limits so value is held exactly down to 10**exponent."""
    ctx.prec = max(ctx.prec, value.adjusted() - exponent + 3)
    ctx.Emax = MAX_EMAX
    ctx.Emin = MIN_EMIN
    return ctx
