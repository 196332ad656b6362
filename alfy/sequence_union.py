"""A query and its subjects held in one concatenated sequence string."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, MutableSequence

from .mtrandom import MersenneTwister
from .sequence import Sequence


def _half_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


@dataclass
class SequenceUnion:
    """One query (optional) and one or more subjects in a single Sequence.

    The query occupies positions 0..seq_borders[0]; subject i (counted
    from 1 when there is a query) ends at seq_borders[i]. Every member
    is laid out as its forward strand, a border, its reverse strand and
    a border.
    """

    seq_union: Sequence
    num_of_subjects: int
    num_of_queries: int = 0
    seq_borders: List[int] = field(default_factory=list)
    borders_within_seq: List[List[int]] = field(default_factory=list)
    gc: List[float] = field(default_factory=list)

    @property
    def length(self) -> int:
        """Length of the concatenated sequence string."""
        return len(self.seq_union.seq)

    def randomize_subjects(self, rng: MersenneTwister) -> None:
        """Shuffle every subject in place, leaving the query untouched."""
        chars = list(self.seq_union.seq)
        lo = self.seq_borders[0] + 1
        for i in range(1, self.num_of_subjects + 1):
            hi = self.seq_borders[i]
            _shuffle_strand(chars, lo, hi, rng)
            lo = hi + 1
        self.seq_union.seq = "".join(chars)

    def randomize_subjects_without_query(self, rng: MersenneTwister) -> None:
        """Shuffle every subject in place when the union holds no query."""
        chars = list(self.seq_union.seq)
        lo = 0
        for i in range(self.num_of_subjects):
            hi = self.seq_borders[i]
            _shuffle_strand(chars, lo, hi, rng)
            lo = hi + 1
        self.seq_union.seq = "".join(chars)

    def randomize_strand(self, lo: int, hi: int, rng: MersenneTwister) -> None:
        """Shuffle the forward strand in [lo, hi] and mirror it on the reverse strand."""
        chars = list(self.seq_union.seq)
        _shuffle_strand(chars, lo, hi, rng)
        self.seq_union.seq = "".join(chars)


def _shuffle_strand(
    chars: MutableSequence[str], lo: int, hi: int, rng: MersenneTwister
) -> None:
    fwd_border = lo + _half_toward_zero(hi - lo - 1)
    for j in range(lo, fwd_border):
        r1 = rng.rand_min_max_int(j, fwd_border - 1)
        chars[r1], chars[j] = chars[j], chars[r1]
        j2 = hi - j + lo - 1
        r2 = hi - r1 + lo - 1
        chars[j2], chars[r2] = chars[r2], chars[j2]