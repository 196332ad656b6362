"""Analysis helpers: observed and expected shulen sums and Ir values."""

from __future__ import annotations

import math
import warnings
from typing import List, NamedTuple, Optional, Sequence as Seq, TextIO, Tuple

from .sequence import Sequence
from .sequence_union import SequenceUnion

NONMISSING_NN = 0.05
GCTOLERANCE = 0.05

_NUCLEOTIDES = frozenset("TCAG")


class MaxResult(NamedTuple):
    """The maximal normalised Ir and the subjects that share it."""

    value: float
    subjects: List[int]


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _normalized_ir(s: float, ae: float, max_ao: float) -> float:
    return _div(_log(_div(s, ae)), _log(_div(max_ao, ae)))


def max_sum(
    s: Seq[float], ae: Seq[float], threshold: bool, max_ao: Seq[float]
) -> MaxResult:
    """Find the maximal normalised Ir over all subjects and who shares it.

    With threshold set, subjects whose observed sum does not exceed the
    expected one are ignored.
    """
    subjects: List[int] = []
    best = 0.0
    if not threshold or s[0] > ae[0]:
        best = _normalized_ir(s[0], ae[0], max_ao[0])
        subjects = [0]
    for i in range(1, len(s)):
        if threshold and not s[i] > ae[i]:
            continue
        if max_ao[i] == ae[i]:
            warnings.warn(
                f"[WARNING] Max(Ao) = {max_ao[i]:f} equals Ae({i})!",
                RuntimeWarning,
                stacklevel=2,
            )
        ir = _normalized_ir(s[i], ae[i], max_ao[i])
        if ir > best:
            best = ir
            subjects = [i]
        elif ir == best:
            subjects.append(i)
    return MaxResult(best, subjects)


def print_max_s(
    fp: TextIO,
    midpoint: float,
    max_subjects: Seq[int],
    max_s: float,
    nn: int,
    window_length: int,
) -> None:
    """Write one sliding-window line with the winning subjects (1-based)."""
    fp.write(f"{int(midpoint + 1):8d}\t")
    if _div(nn, window_length) < NONMISSING_NN:
        fp.write(
            f"[ERROR] Number of nucleotides ({nn}) considerably less than window size!"
        )
    elif max_subjects:
        fp.write(f"{max_s:8f}\t")
        fp.write("".join(f"{k + 1}\t" for k in max_subjects))
        if nn < window_length:
            fp.write(f"[WARNING] number of nucleotides ({nn}) less than window size!")
        fp.write("\n")
    else:
        fp.write("        \n")


def _query_positions(query: Sequence):
    start = 0
    for i in range(query.num_query):
        for k in range(start, query.borders[i]):
            if query.seq[k] in _NUCLEOTIDES:
                yield k
        start = query.borders[i] + 1


def query_ao(
    seq_union: SequenceUnion, sl: Seq[Seq[int]], query: Sequence
) -> List[float]:
    """Sum the shulens of every query nucleotide, forward and reverse, per subject."""
    ao = [0.0] * seq_union.num_of_subjects
    mirror = seq_union.seq_borders[0] - 1
    for k in _query_positions(query):
        for j in range(seq_union.num_of_subjects):
            ao[j] += sl[j][k]
            ao[j] += sl[j][mirror - k]
    return ao


def effective_query_ao(
    seq_union: SequenceUnion,
    sl: Seq[Seq[int]],
    query: Sequence,
    ml: Seq[int],
) -> Tuple[List[float], List[int]]:
    """Sum only shulens longer than ml[j] per subject.

    Returns the sums and the number of positions counted (two per nucleotide).
    """
    n = seq_union.num_of_subjects
    ao = [0.0] * n
    eff_ao = [0] * n
    mirror = seq_union.seq_borders[0] - 1
    for k in _query_positions(query):
        for j in range(n):
            if sl[j][k] > ml[j]:
                ao[j] += sl[j][k]
                ao[j] += sl[j][mirror - k]
                eff_ao[j] += 2
    return ao, eff_ao


def effective_query_ae(
    seq_union: SequenceUnion,
    sl: Seq[Seq[int]],
    query: Sequence,
    eff_ao: Seq[int],
) -> List[float]:
    """Sum shulens per subject over as many positions as eff_ao[j] allows.

    Summation stops altogether as soon as one subject has used up its share.
    """
    n = seq_union.num_of_subjects
    ae = [0.0] * n
    counts = [0] * n
    mirror = seq_union.seq_borders[0] - 1
    for k in _query_positions(query):
        for j in range(n):
            if counts[j] < eff_ao[j]:
                ae[j] += sl[j][k]
                ae[j] += sl[j][mirror - k]
                counts[j] += 2
            else:
                return ae
    return ae


def print_ir(
    fp: TextIO,
    midpoint: float,
    nn: int,
    window_length: int,
    s: Seq[float],
    ae: Seq[float],
    seq_union: SequenceUnion,
    max_ao: Seq[float],
) -> None:
    """Write one sliding-window line with the normalised Ir of every subject."""
    fp.write(f"{int(midpoint + 1):8d}")
    if _div(nn, window_length) < NONMISSING_NN:
        fp.write(
            f"[ERROR] Number of nucleotides ({nn}) considerably less than window size!\n"
        )
        return
    for k in range(seq_union.num_of_subjects):
        fp.write(f"\t{_normalized_ir(s[k], ae[k], max_ao[k]):.5f}")
    fp.write("\n")


def gc_content(seq: Sequence, i: int) -> Tuple[float, int]:
    """Return the GC content of entry i and its number of A, C, G and T."""
    tab = seq.freq_tab[i]
    gc = tab["G"] + tab["C"]
    num_char = gc + tab["A"] + tab["T"]
    return _div(gc, num_char), num_char