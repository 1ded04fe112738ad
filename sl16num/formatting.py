"""Text formatting of sl16 values."""

from __future__ import annotations

from .core import FRAC_MASK, INT_OFF, SIGN_MASK, Sl16Math

_ULLONG_MAX = (1 << 64) - 1


def _sign(a: int, flags: str) -> str:
    if a & SIGN_MASK:
        return "-"
    if "+" in flags:
        return "+"
    if " " in flags:
        return " "
    return ""


def _sane_shift(n: int, s: int) -> int:
    if s >= 0:
        return (n << s) & _ULLONG_MAX if s < 64 else 0
    return n >> -s if -s < 64 else 0


def fmt_f(math: Sl16Math, a: int, flags: str = "", prec: int = 6) -> str:
    """Format ``a`` in fixed-point decimal with ``prec`` fractional digits."""
    if prec < 0:
        raise ValueError("precision must not be negative")
    exp10 = 1
    for _ in range(prec):
        if exp10 > _ULLONG_MAX // 10:
            raise OverflowError(f"precision {prec} is too large")
        exp10 *= 10
    a &= 0xFFFF
    sign = _sign(a, flags)
    n = math.into_unsigned((a + 0x0352 * prec) & 0xFFFF, 64)
    if prec:
        return f"{sign}{n // exp10}.{n % exp10:0{prec}d}"
    return f"{sign}{n}." if "#" in flags else f"{sign}{n}"


def fmt_e(a: int, flags: str = "", prec: int = 6) -> str:
    """Format ``a`` as ``1p<exponent>`` with a binary exponent in decimal."""
    if prec < 0:
        raise ValueError("precision must not be negative")
    exp5 = 1
    for _ in range(prec):
        if exp5 > _sane_shift(_ULLONG_MAX, INT_OFF - prec) // FRAC_MASK // 5:
            raise OverflowError(f"precision {prec} is too large")
        exp5 *= 5
    a &= 0xFFFF
    sign = _sign(a, flags)
    negative = bool(a & 0x8000)
    e_sign = "-" if negative else "+"
    e_abs = (-a) & 0xFFFF if negative else a
    whole = e_abs >> INT_OFF
    if prec:
        frac = _sane_shift((e_abs & FRAC_MASK) * exp5, prec - INT_OFF)
        return f"{sign}1p{e_sign}{whole}.{frac:0{prec}d}"
    return f"{sign}1p{e_sign}{whole}." if "#" in flags else f"{sign}1p{e_sign}{whole}"