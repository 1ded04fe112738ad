# sl16num

`sl16num` implements a compact 16-bit *sign-logarithm* number format. Each
value is a 16-bit word holding the base-2 logarithm of its magnitude as signed
fixed point (8 integer bits above bit 8, 7 fractional bits), with the sign of
the number in the lowest bit. Because values are kept as logarithms,
multiplication, division, powers and roots reduce to integer addition,
subtraction and scaling, while addition and subtraction go through a cheap
piecewise-polynomial approximation of `log2` and `exp2`.

The format trades precision for size and speed: results are approximate, and
the package makes it easy to see by how much.

## Installation

```
pip install sl16num
```

To run the test suite:

```
pip install "sl16num[test]"
pytest
```

## Library overview

Encoded values are plain `int`s holding the 16-bit word (`0..0xFFFF`). The
package has three modules.

### `sl16num.core`

- Layout constants: `WIDTH`, `INT_OFF`, `FRAC_OFF`, `SIGN_OFF`, `INT_MASK`,
  `FRAC_MASK`, `SIGN_MASK`.
- Encoded constants: `MIN` (the smallest magnitude, standing in for zero),
  `MAX`, `ONE`, `TWO`, `THREE`, `HALF`, `THIRD`, `SQRT2`, `SQRT3`, `CBRT2`,
  `CBRT3`, `LOG2`, `LOG3`, `TAU`, `PI`, `E`.
- `Approximation` is an enum with members `LINEAR` and `QUADRATIC`, selecting
  the piecewise polynomial used when converting between integers and the
  logarithmic representation. The two give slightly different rounding.
- `Sl16Math(approximation=Approximation.LINEAR)` bundles every operation for
  the chosen approximation:
  - Conversions: `from_int(n, width=32)`, `into_int(a, width=32)`,
    `from_unsigned(n, width=32)`, `into_unsigned(a, width=32)`. `width` is the
    bit width of the integer being converted and must be 8, 16, 32 or 64;
    any other width, or an `n` that does not fit in it, raises `ValueError`.
    Converting `0` gives `MIN`.
  - Arithmetic: `add`, `sub`, `neg`, `mul`, `div`, `inv`, `abs`.
  - Exponentials and logarithms: `log2`, `exp2`, `log`, `exp`.
  - Powers and roots: `powi(a, n)` and `rooti(a, n)` with a plain integer `n`
    (`rooti` with `n == 0` raises `ZeroDivisionError`), `pow(a, b)` and
    `root(a, b)` with an encoded exponent, plus `square`, `cube`, `sqrt`,
    `cbrt` and `hypot`.
  - Ordering: `min` and `max`.
- `monotonic(a)` maps an encoded value to an unsigned key whose ordering
  matches the numeric ordering of the values, so encoded numbers can be sorted
  or compared with ordinary relational operators.

```python
from sl16num.core import Sl16Math, Approximation, ONE, TWO
from sl16num.formatting import fmt_f

s = Sl16Math(Approximation.QUADRATIC)
print(fmt_f(s, s.add(ONE, TWO), "", 6))
print(s.into_int(s.div(s.from_int(22), s.from_int(7))))
```

### `sl16num.formatting`

- `fmt_f(math, a, flags="", prec=6)` renders a value in fixed notation with
  `prec` digits after the decimal point, in the spirit of `printf("%f")`.
  `math` is the `Sl16Math` instance used to convert the value to an integer.
- `fmt_e(a, flags="", prec=6)` renders the stored binary exponent of a value as
  a power of two written `1p<sign><exponent>`, with `prec` decimal digits of
  the fractional part of the exponent.

`flags` is a string that may contain `+` (print `+` for positive values), a
space (print a space for positive values) and `#` (keep the decimal point when
`prec` is zero). A negative `prec` raises `ValueError`; a `prec` too large for
the 64-bit intermediate arithmetic raises `OverflowError`.

### `sl16num.compare`

- `comparison_rows(math)` returns a list of sections; each section is a list of
  `(float result, formatted sl16 result)` pairs for a fixed battery of
  expressions, the float computed with ordinary double-precision arithmetic
  and the other evaluated with `math` and formatted with `fmt_f` to six places.
- `main(argv=None)` prints that battery as a two-column table.

## Command line

Print the floating-point versus 16-bit comparison table:

```
sl16-compare
sl16-compare --approximation quadratic
```

`--approximation` takes `linear` (the default) or `quadratic`. Each line shows
the double-precision result on the left and the `sl16num` result on the right;
blank lines separate the groups (basic values, addition and subtraction,
multiplication and division, exponentials and logarithms, powers, roots, and
miscellaneous functions).

## Limitations

Operations never check for overflow or underflow: results simply wrap within
the 16-bit word, as do the integer conversions within the chosen width. There
is no number class with operator overloading; all work goes through
`Sl16Math` methods on plain integers.