import math

import pytest

from alfy.expected_shulen import (
    binomial,
    expected_aggregate_shulen,
    factorial,
    max_shulen,
    max_shulen_new,
    shustring_sum,
    sum_new,
)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == pytest.approx(math.factorial(n))


@pytest.mark.parametrize("n,k", [(5, 0), (5, 2), (10, 3), (20, 10)])
def test_binomial_matches_comb(n, k):
    assert binomial(n, k) == pytest.approx(math.comb(n, k))


def test_binomial_symmetry():
    assert binomial(12, 5) == pytest.approx(binomial(12, 7))


def test_sum_at_zero_length_is_zero():
    assert shustring_sum(0, 0.5, 10) == 0.0


def test_sum_uniform_gc_closed_form():
    # With gc = 0.5 every word has probability 4**-x.
    for x in (1, 2, 3, 5):
        assert shustring_sum(x, 0.5, 10) == pytest.approx((1 - 4.0 ** -x) ** 9)


def test_sum_is_capped_and_tends_to_one():
    value = shustring_sum(40, 0.5, 100)
    assert value <= 1.0
    assert value == pytest.approx(1.0)


def test_sum_new_uniform_closed_form():
    for x in (1, 2, 4):
        assert sum_new(x, 0.25, 0.25, 10) == pytest.approx((1 - 4.0 ** -x) ** 10)


def test_sum_new_bounded():
    for x in range(0, 15):
        assert 0.0 <= sum_new(x, 0.2, 0.3, 1000) <= 1.0


def test_max_shulen_is_first_length_reaching_p():
    n, gc, p = 1000, 0.5, 0.95
    r = max_shulen(p, n, gc)
    assert r is not None
    assert shustring_sum(r, gc, n) >= p - 1e-12
    assert shustring_sum(r - 1, gc, n) < p


def test_max_shulen_unreachable_returns_none():
    assert max_shulen(2.0, 50, 0.5) is None


def test_max_shulen_new_is_first_length_reaching_p():
    n, p = 1000, 0.95
    r = max_shulen_new(p, n, 0.5, 0.5)
    assert r is not None
    assert sum_new(r, 0.25, 0.25, n) >= p - 1e-12
    assert sum_new(r - 1, 0.25, 0.25, n) < p


def test_max_shulen_new_matches_old_for_equal_gc_shape():
    assert max_shulen_new(2.0, 50, 0.4, 0.4) is None


def test_expected_aggregate_shulen_single_character_is_zero():
    assert expected_aggregate_shulen(1, 100, 0.5, 0) == 0.0


def test_expected_aggregate_shulen_positive_and_ignores_edges():
    a = expected_aggregate_shulen(200, 50, 0.5, 0)
    b = expected_aggregate_shulen(200, 50, 0.5, 7)
    assert a > 0.0
    assert a == b


def test_expected_aggregate_shulen_grows_with_window():
    small = expected_aggregate_shulen(200, 10, 0.5, 0)
    large = expected_aggregate_shulen(200, 1000, 0.5, 0)
    assert large > small