"""Expected lengths of shortest unique substrings (shulens) under randomness."""

from __future__ import annotations

import math
from typing import Optional

MAX_N = 200
THRESHOLD_AE = 0.0001


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def factorial(n: int) -> float:
    """Return n! as a float."""
    p = 1.0
    i = 2.0
    while i <= n:
        p *= i
        i += 1.0
    return p


def binomial(n: int, k: int) -> float:
    """Return n choose k as a float."""
    return factorial(n) / factorial(n - k) / factorial(k)


def shustring_sum(x: float, p: float, l: float) -> float:
    """Probability-like sum for shustrings of length x; p is the GC content.

    The result is capped at 1.
    """
    s = 0.0
    k = 0.0
    while k <= x:
        p_xk = _pow((1.0 - p) / 2.0, x - k) * _pow(p / 2.0, k)
        s += _pow(2.0, x) * p_xk * _pow(1.0 - p_xk, l - 1.0) * binomial(int(x), int(k))
        k += 1.0
    return min(s, 1.0) if s > 1.0 else s


def sum_new(x: float, p_query: float, p_subject: float, l_subject: float) -> float:
    """Sum using both the query's and the subject's GC/2; capped at 1."""
    s = 0.0
    k = 0.0
    while k <= x:
        p_xk = _pow(p_query, k) * _pow(0.5 - p_query, x - k)
        q_xk = _pow(p_subject, k) * _pow(0.5 - p_subject, x - k)
        s += _pow(2.0, x) * binomial(int(x), int(k)) * p_xk * _pow(1.0 - q_xk, l_subject)
        if s > 1.0:
            break
        k += 1.0
    return 1.0 if s > 1.0 else s


def expected_aggregate_shulen(
    num_characters: int, window_len: int, gc: float, num_edges: int = 0
) -> float:
    """Expected sum of shulens over a window of window_len positions.

    num_edges is accepted for compatibility and does not change the result.
    """
    past_peak = False
    aggregate = 0.0
    l = float(num_characters)
    for i in range(1, num_characters):
        s1 = shustring_sum(float(i), gc, l)
        s2 = shustring_sum(float(i - 1), gc, l)
        num_shustrings = (s1 - s2) * float(window_len)
        if num_shustrings < THRESHOLD_AE and past_peak:
            break
        if not past_peak and num_shustrings > THRESHOLD_AE:
            past_peak = True
        aggregate += num_shustrings * i
    return aggregate


def max_shulen(p: float, num_characters: int, gc: float) -> Optional[int]:
    """Smallest shulen whose cumulative chance probability reaches p.

    Returns None when no length below num_characters reaches p.
    """
    l = float(num_characters)
    cp = 0.0
    s2 = shustring_sum(0.0, gc, l)
    for i in range(1, num_characters):
        s1 = shustring_sum(float(i), gc, l)
        cp += s1 - s2
        if cp >= p:
            return i
        s2 = s1
    return None


def max_shulen_new(
    p: float, l_subject: int, gc_query: float, gc_subject: float
) -> Optional[int]:
    """Like max_shulen, but using the query's and the subject's GC content.

    Returns None when no length below l_subject reaches p.
    """
    p_query = gc_query / 2
    p_subject = gc_subject / 2
    ls = float(l_subject)
    cp = 0.0
    s2 = sum_new(0.0, p_query, p_subject, ls)
    for i in range(1, l_subject):
        s1 = sum_new(float(i), p_query, p_subject, ls)
        cp += s1 - s2
        if cp >= p:
            return i
        s2 = s1
    return None