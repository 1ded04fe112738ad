"""Side-by-side comparison of double-precision and sl16 results."""

from __future__ import annotations

import argparse
import math as m
import sys

from . import core as c
from .core import Approximation, Sl16Math
from .formatting import fmt_f


def _exp2(x: float) -> float:
    return 2.0**x


def comparison_rows(math: Sl16Math) -> list[list[tuple[float, str]]]:
    """Return sections of (float result, formatted sl16 result) pairs."""
    s = math
    f = s.from_int
    dbl_min = sys.float_info.min
    tau = 8.0 * m.atan(1.0)
    sections = [
        [
            (1.0 / 10.0 + 2.0 / 10.0, s.add(s.div(c.ONE, f(10)), s.div(c.TWO, f(10)))),
            (m.pi * 7.0**2.0, s.mul(c.PI, s.square(f(7)))),
            (2.0 * m.sqrt(m.e), s.mul(c.TWO, s.sqrt(c.E))),
            (-1.0, s.neg(c.ONE)),
            (0.0, f(0)),
            (dbl_min, c.MIN),
            (-dbl_min, s.neg(c.MIN)),
            (m.log2(sys.float_info.max), s.log2(c.MAX)),
        ],
        [
            (1.0 + 2.0, s.add(c.ONE, c.TWO)),
            (1.0 + 1.0, s.add(c.ONE, c.ONE)),
            (1.0 + 0.5, s.add(c.ONE, c.HALF)),
            (1.0 + 0.0, s.add(c.ONE, c.MIN)),
            (1.0 - 0.5, s.sub(c.ONE, c.HALF)),
            (1.0 - 1.0, s.sub(c.ONE, c.ONE)),
            (1.0 - 2.0, s.sub(c.ONE, c.TWO)),
            (1.0 - 3.0, s.sub(c.ONE, c.THREE)),
            (0.0 + 2.0, s.add(c.MIN, c.TWO)),
        ],
        [
            (0.5 * 3.0, s.mul(c.HALF, c.THREE)),
            (-0.5 * 3.0, s.mul(s.neg(c.HALF), c.THREE)),
            (0.5 * -3.0, s.mul(c.HALF, s.neg(c.THREE))),
            (-0.5 * -3.0, s.mul(s.neg(c.HALF), s.neg(c.THREE))),
            (1.0 / 3.0, s.div(c.ONE, c.THREE)),
            (-1.0 / 3.0, s.div(s.neg(c.ONE), c.THREE)),
            (1.0 / -3.0, s.div(c.ONE, s.neg(c.THREE))),
            (-1.0 / -3.0, s.div(s.neg(c.ONE), s.neg(c.THREE))),
            (22.0 / 7.0, s.div(f(22), f(7))),
        ],
        [
            (m.log2(5236.0), s.log2(f(5236))),
            (_exp2(8.0), s.exp2(f(8))),
            (_exp2(tau), s.exp2(c.TAU)),
            (_exp2(-3.0), s.exp2(s.neg(c.THREE))),
            (_exp2(1.0), s.exp2(c.ONE)),
            (_exp2(0.5), s.exp2(c.HALF)),
            (_exp2(0.0), s.exp2(c.MIN)),
            (m.log(923), s.log(f(923))),
            (m.exp(5.0), s.exp(f(5))),
        ],
        [
            (0.5**1.0, s.powi(c.HALF, 1)),
            (0.5**2.0, s.powi(c.HALF, 2)),
            (0.5**3.0, s.powi(c.HALF, 3)),
            ((-3.0) ** 1.0, s.powi(s.neg(c.THREE), 1)),
            ((-3.0) ** 2.0, s.powi(s.neg(c.THREE), 2)),
            ((-3.0) ** 3.0, s.powi(s.neg(c.THREE), 3)),
            (0.5**1.0, s.pow(c.HALF, c.ONE)),
            (0.5**2.0, s.pow(c.HALF, c.TWO)),
            (0.5**3.0, s.pow(c.HALF, c.THREE)),
            ((-3.0) ** 1.0, s.pow(s.neg(c.THREE), c.ONE)),
            ((-3.0) ** 2.0, s.pow(s.neg(c.THREE), c.TWO)),
            ((-3.0) ** 3.0, s.pow(s.neg(c.THREE), c.THREE)),
            (3.0**m.e, s.pow(c.THREE, c.E)),
        ],
        [
            (0.333333 ** (1.0 / 1.0), s.rooti(c.THIRD, 1)),
            (0.333333 ** (1.0 / 2.0), s.rooti(c.THIRD, 2)),
            (0.333333 ** (1.0 / 3.0), s.rooti(c.THIRD, 3)),
            (2.0 ** (1.0 / 1.0), s.rooti(c.TWO, 1)),
            (2.0 ** (1.0 / 2.0), s.rooti(c.TWO, 2)),
            (2.0 ** (1.0 / 3.0), s.rooti(c.TWO, 3)),
            (0.333333 ** (1.0 / 1.0), s.root(c.THIRD, c.ONE)),
            (0.333333 ** (1.0 / 2.0), s.root(c.THIRD, c.TWO)),
            (0.333333 ** (1.0 / 3.0), s.root(c.THIRD, c.THREE)),
            (2.0 ** (1.0 / 1.0), s.root(c.TWO, c.ONE)),
            (2.0 ** (1.0 / 2.0), s.root(c.TWO, c.TWO)),
            (2.0 ** (1.0 / 3.0), s.root(c.TWO, c.THREE)),
        ],
        [
            (-2.0 * -2.0, s.square(s.neg(c.TWO))),
            (-2.0 * -2.0 * -2.0, s.cube(s.neg(c.TWO))),
            (m.sqrt(0.5), s.sqrt(c.HALF)),
            (0.5 ** (1.0 / 3.0), s.cbrt(c.HALF)),
            (min(0.5, 1.0), s.min(c.HALF, c.ONE)),
            (min(-0.5, 1.0), s.min(s.neg(c.HALF), c.ONE)),
            (min(0.5, -1.0), s.min(c.HALF, s.neg(c.ONE))),
            (min(-0.5, -1.0), s.min(s.neg(c.HALF), s.neg(c.ONE))),
            (m.hypot(3.0, 4.0), s.hypot(f(3), f(4))),
        ],
    ]
    return [[(value, fmt_f(s, a, "", 6)) for value, a in section] for section in sections]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare double and sl16 arithmetic.")
    parser.add_argument(
        "--approximation",
        choices=[a.value for a in Approximation],
        default=Approximation.LINEAR.value,
    )
    args = parser.parse_args(argv)
    sections = comparison_rows(Sl16Math(Approximation(args.approximation)))
    for index, section in enumerate(sections):
        if index:
            print()
        for value, text in section:
            print("%12f %12s" % (value, text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())