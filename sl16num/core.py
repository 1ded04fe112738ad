"""Sign-logarithm 16-bit numbers.

An sl16 value is a ``uint16`` that stores ``log2(|x|)`` in signed 8.7 fixed
point, with the lowest bit holding the sign of ``x``.
"""

from __future__ import annotations

import enum

WIDTH = 16
INT_OFF = 8
FRAC_OFF = 1
SIGN_OFF = 0
INT_MASK = 0xFF00
FRAC_MASK = 0x00FE
SIGN_MASK = 0x0001

MIN = 0x8000
MAX = 0x7FFE
ONE = 0x0000
TWO = 0x0100
THREE = 0x0194
HALF = 0xFF00
THIRD = 0xFE6A
SQRT2 = 0x0080
SQRT3 = 0x00CA
CBRT2 = 0x0054
CBRT3 = 0x0086
LOG2 = 0xFF78
LOG3 = 0x0022
TAU = 0x02A6
PI = 0x01A6
E = 0x0170

_WIDTHS = (8, 16, 32, 64)


def _u16(value: int) -> int:
    return value & 0xFFFF


def _i16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _signed(value: int, width: int) -> int:
    value &= (1 << width) - 1
    return value - (1 << width) if value >> (width - 1) else value


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("sl16 root of degree zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _check_width(width: int) -> None:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported integer width {width}; expected one of {_WIDTHS}")


def monotonic(a: int) -> int:
    """Key used for relational comparison of two sl16 values."""
    a = _u16(a)
    return _u16((a >> FRAC_OFF) ^ (0x0000 if a & SIGN_MASK else 0xFFFF))


class Approximation(enum.Enum):
    """Piecewise-polynomial approximation used for integer conversion."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"

    @property
    def sigma(self) -> int:
        return 0x000A if self is Approximation.LINEAR else 0xFFFE

    def log_poly(self, x: int) -> int:
        if self is Approximation.LINEAR:
            return _i16(x)
        x2 = _i16(x * x >> INT_OFF)
        return _i16(x + ((x - x2) >> 2) + ((x - x2) >> 3))

    def exp_poly(self, x: int) -> int:
        if self is Approximation.LINEAR:
            return _i16(x)
        x2 = _i16(x * x >> INT_OFF)
        return _i16(x + ((x2 - x) >> 2) + ((x2 - x) >> 3))


class Sl16Math:
    """Arithmetic on sl16 values under a chosen approximation."""

    def __init__(self, approximation: Approximation = Approximation.LINEAR) -> None:
        self.approximation = Approximation(approximation)

    def from_unsigned(self, n: int, width: int = 32) -> int:
        _check_width(width)
        if not 0 <= n < 1 << width:
            raise ValueError(f"{n} does not fit in an unsigned {width}-bit integer")
        if n == 0:
            return MIN
        e = n.bit_length() - 1
        shift = INT_OFF - e
        shifted = n << shift if shift >= 0 else n >> -shift
        if shift >= width:
            shifted = 0
        log_poly = self.approximation.log_poly(shifted & 0xFF)
        return _u16(((e << INT_OFF) | (log_poly & FRAC_MASK)) + self.approximation.sigma)

    def into_unsigned(self, a: int, width: int = 32) -> int:
        _check_width(width)
        a = _u16(a - self.approximation.sigma)
        exp_poly = self.approximation.exp_poly(a & 0xFF)
        mask = (1 << width) - 1
        value = (exp_poly | 1 << INT_OFF) & mask
        shift = (_i16(a) >> INT_OFF) - INT_OFF
        if shift >= 0:
            return (value << shift) & mask if shift < width else 0
        return value >> -shift if -shift < width else 0

    def from_int(self, n: int, width: int = 32) -> int:
        _check_width(width)
        if not -(1 << (width - 1)) <= n < 1 << (width - 1):
            raise ValueError(f"{n} does not fit in a signed {width}-bit integer")
        if n < 0:
            return self.from_unsigned(-n & ((1 << width) - 1), width) | SIGN_MASK
        return self.from_unsigned(n, width)

    def into_int(self, a: int, width: int = 32) -> int:
        a = _u16(a)
        if a & SIGN_MASK:
            return _signed(-self.into_unsigned(a & ~SIGN_MASK, width), width)
        return _signed(self.into_unsigned(a, width), width)

    def add(self, a: int, b: int) -> int:
        a, b = _u16(a), _u16(b)
        e_max = (a if _i16(a) > _i16(b) else b) & INT_MASK
        e_max = _u16(e_max - (1 << INT_OFF))
        total = self.exp2(a - e_max) + self.exp2(b - e_max)
        return _u16(self.log2(total) + e_max)

    def sub(self, a: int, b: int) -> int:
        return self.add(a, _u16(b) ^ SIGN_MASK)

    def neg(self, a: int) -> int:
        return _u16(a) ^ SIGN_MASK

    def mul(self, a: int, b: int) -> int:
        return _u16(a + b)

    def div(self, a: int, b: int) -> int:
        return _u16(a - b)

    def inv(self, a: int) -> int:
        return _u16(-_u16(a))

    def log2(self, a: int) -> int:
        return _u16(self.from_int(_i16(a), 16) - (INT_OFF << INT_OFF))

    def exp2(self, a: int) -> int:
        return self.into_int(_u16(a) + (INT_OFF << INT_OFF), 16) & ~SIGN_MASK & 0xFFFF

    def log(self, a: int) -> int:
        return _u16(self.log2(a) + LOG2)

    def exp(self, a: int) -> int:
        return self.exp2(_u16(a) - LOG2)

    def powi(self, a: int, n: int) -> int:
        return _u16(_i16(a) * n)

    def rooti(self, a: int, n: int) -> int:
        return _c_div(_i16(a), n) & ~SIGN_MASK & 0xFFFF

    def pow(self, a: int, b: int) -> int:
        return (_i16(a) * self.exp2(b)) >> INT_OFF & ~SIGN_MASK & 0xFFFF

    def root(self, a: int, b: int) -> int:
        return self.pow(a, _u16(-_u16(b)))

    def square(self, a: int) -> int:
        return _u16(_u16(a) << 1)

    def cube(self, a: int) -> int:
        a = _u16(a)
        return _u16(a + (a << 1))

    def sqrt(self, a: int) -> int:
        return _c_div(_i16(a), 2) & ~SIGN_MASK & 0xFFFF

    def cbrt(self, a: int) -> int:
        return _c_div(_i16(a), 3) & ~SIGN_MASK & 0xFFFF

    def hypot(self, a: int, b: int) -> int:
        return self.sqrt(self.add(self.square(a), self.square(b)))

    def min(self, a: int, b: int) -> int:
        return _u16(a) if monotonic(a) < monotonic(b) else _u16(b)

    def max(self, a: int, b: int) -> int:
        return _u16(a) if monotonic(a) > monotonic(b) else _u16(b)

    def abs(self, a: int) -> int:
        return _u16(a) & ~SIGN_MASK