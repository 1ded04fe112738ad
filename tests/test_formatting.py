import pytest

from sl16num import core
from sl16num.core import Approximation, Sl16Math
from sl16num.formatting import fmt_e, fmt_f


@pytest.mark.parametrize("mode", list(Approximation))
@pytest.mark.parametrize("k", [0, 3, 10, 40])
def test_fmt_f_powers_of_two(mode, k):
    s = Sl16Math(mode)
    a = s.from_unsigned(1 << k, 64)
    assert fmt_f(s, a, "", 0) == str(1 << k)
    assert fmt_f(s, a, "+", 0) == "+" + str(1 << k)
    assert fmt_f(s, a, " ", 0) == " " + str(1 << k)
    assert fmt_f(s, a, "#", 0) == str(1 << k) + "."
    assert fmt_f(s, s.neg(a), "+", 0).startswith("-")


def test_fmt_f_precision_shape():
    s = Sl16Math()
    text = fmt_f(s, core.TWO, "", 6)
    whole, frac = text.split(".")
    assert len(frac) == 6 and whole.isdigit()


def test_fmt_f_zero():
    assert fmt_f(Sl16Math(), core.MIN, "", 6) == "0.000000"


def test_fmt_f_precision_limits():
    s = Sl16Math()
    assert len(fmt_f(s, core.ONE, "", 19).split(".")[1]) == 19
    with pytest.raises(OverflowError):
        fmt_f(s, core.ONE, "", 20)
    with pytest.raises(ValueError):
        fmt_f(s, core.ONE, "", -1)


@pytest.mark.parametrize("k", range(0, 120, 7))
def test_fmt_e_exponents(k):
    assert fmt_e(k << 8, "", 0) == f"1p+{k}"
    assert fmt_e((-(k + 1) << 8) & 0xFFFF, "", 0) == f"1p-{k + 1}"


def test_fmt_e_flags():
    assert fmt_e(core.ONE, "+", 0) == "+1p+0"
    assert fmt_e(core.ONE, "#", 0) == "1p+0."
    assert fmt_e(core.HALF, "", 0) == "1p-1"
    assert fmt_e(core.TWO | core.SIGN_MASK, "", 0) == "-1p+1"
    assert fmt_e(core.TWO, "", 3) == "1p+1.000"


def test_fmt_e_overflow():
    with pytest.raises(OverflowError):
        fmt_e(core.ONE, "", 30)
    with pytest.raises(ValueError):
        fmt_e(core.ONE, "", -2)