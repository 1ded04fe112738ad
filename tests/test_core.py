import pytest
from hypothesis import given, strategies as st

from sl16num import core
from sl16num.core import Approximation, Sl16Math, monotonic

MODES = list(Approximation)
values = st.integers(min_value=0, max_value=0xFFFF)


@pytest.mark.parametrize("mode", MODES)
@pytest.mark.parametrize("k", range(0, 63))
def test_powers_of_two_round_trip(mode, k):
    s = Sl16Math(mode)
    assert s.into_unsigned(s.from_unsigned(1 << k, 64), 64) == 1 << k


@pytest.mark.parametrize("mode", MODES)
@pytest.mark.parametrize("k", range(0, 30))
def test_negative_powers_of_two_round_trip(mode, k):
    s = Sl16Math(mode)
    assert s.into_int(s.from_int(-(1 << k), 32), 32) == -(1 << k)


@pytest.mark.parametrize("mode", MODES)
def test_zero_maps_to_min(mode):
    assert Sl16Math(mode).from_int(0) == core.MIN


@pytest.mark.parametrize("mode", MODES)
def test_powers_of_two_encode_exponent(mode):
    s = Sl16Math(mode)
    for k in range(8):
        assert s.from_unsigned(1 << k, 8) == ((k << 8) + mode.sigma) & 0xFFFF


def test_invalid_width_and_range():
    s = Sl16Math()
    with pytest.raises(ValueError):
        s.from_int(1, 12)
    with pytest.raises(ValueError):
        s.from_int(128, 8)
    with pytest.raises(ValueError):
        s.from_unsigned(-1, 16)


def test_rooti_by_zero():
    with pytest.raises(ZeroDivisionError):
        Sl16Math().rooti(core.TWO, 0)


@given(values)
def test_neg_is_involution(a):
    s = Sl16Math()
    assert s.neg(s.neg(a)) == a
    assert s.neg(a) & core.SIGN_MASK != a & core.SIGN_MASK


@given(values, values)
def test_mul_div_inverse(a, b):
    s = Sl16Math()
    assert s.div(s.mul(a, b), b) == a


@given(values)
def test_cube_is_a_times_square(a):
    s = Sl16Math()
    assert s.cube(a) == s.mul(a, s.square(a))


@given(values, values)
def test_root_is_pow_of_inverse(a, b):
    s = Sl16Math()
    assert s.root(a, b) == s.pow(a, s.inv(b))


@given(values)
def test_abs_and_unit_powers(a):
    s = Sl16Math()
    assert s.abs(a) == a & 0xFFFE
    assert s.powi(a, 1) == a
    assert s.powi(a, 0) == core.ONE
    assert s.rooti(a, 1) == a & 0xFFFE


@given(st.integers(min_value=-0x2000, max_value=0x1FFF))
def test_sqrt_of_square(half):
    s = Sl16Math()
    a = (half * 2) & 0xFFFF
    assert s.sqrt(s.square(a)) == a


@given(values, values)
def test_min_max_pick_arguments(a, b):
    s = Sl16Math()
    if monotonic(a) != monotonic(b):
        assert {s.min(a, b), s.max(a, b)} == {a, b}
        assert monotonic(s.min(a, b)) < monotonic(s.max(a, b))
    else:
        assert s.min(a, b) == b