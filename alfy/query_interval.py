"""Query intervals: stretches of a query most closely related to certain subjects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class QueryInterval:
    """A stretch [lb, rb] of a query with its shulen and winning subjects.

    subject_index is a bit set: bit i is set when subject i is among the
    most closely related subjects on the interval.
    """

    sl: int
    sl_avg: int
    lb: int
    rb: int
    subject_index: int = 0
    id: int = 0
    prev: Optional["QueryInterval"] = field(default=None, repr=False)
    next: Optional["QueryInterval"] = field(default=None, repr=False)

    def update(self, sl: int, sl_avg: int, lb: int, rb: int, subject_index: int) -> None:
        """Overwrite the interval's values and detach it from its neighbours."""
        self.lb = lb
        self.rb = rb
        self.sl = sl
        self.sl_avg = sl_avg
        self.subject_index = subject_index
        self.prev = None
        self.next = None

    def subjects(self) -> Iterator[int]:
        """Yield the indices of the subjects flagged on this interval."""
        bits = self.subject_index
        i = 0
        while bits:
            if bits & 1:
                yield i
            bits >>= 1
            i += 1


class QueryIntervalPool:
    """Creates query intervals, numbering them and counting how many are alive."""

    def __init__(self) -> None:
        self.live = 0
        self.next_id = 0

    def create(
        self, sl: int, sl_avg: int, lb: int, rb: int, subject_index: int
    ) -> QueryInterval:
        """Create a detached query interval with the next id."""
        self.live += 1
        self.next_id += 1
        return QueryInterval(
            sl=sl,
            sl_avg=sl_avg,
            lb=lb,
            rb=rb,
            subject_index=subject_index,
            id=self.next_id,
        )

    def release(self, interval: Optional[QueryInterval]) -> None:
        """Mark a query interval as no longer alive; None is ignored."""
        if interval is not None:
            interval.prev = None
            interval.next = None
            self.live -= 1