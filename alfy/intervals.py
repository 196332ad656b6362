"""Lcp-intervals used while traversing an lcp tree, and a pool that tracks them."""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .errors import AlphabetError, DepthLimitExceeded, format_message


class IntervalKind(enum.Enum):
    """The flavour of interval a pool hands out."""

    BASIC = "basic"
    KR = "kr"
    PHYLO = "phylo"


@dataclass(eq=False)
class _IntervalBase:
    lcp: int
    lb: int
    rb: int
    id: int = 0
    parent: Optional["_IntervalBase"] = field(default=None, repr=False)
    children: list = field(default_factory=list, repr=False)

    @property
    def num_children(self) -> int:
        """Number of children attached to this interval."""
        return len(self.children)


@dataclass(eq=False)
class Interval(_IntervalBase):
    """An lcp-interval for 1:N comparison, recording its subjects as a bit set."""

    num_of_subjects: int = 0
    subject_index: int = 0
    is_query: bool = False
    is_subject: bool = False

    def add_child(self, child: "Interval") -> None:
        """Append a child interval."""
        self.children.append(child)

    def _check_subject(self, i: int) -> None:
        if not 0 <= i < self.num_of_subjects:
            raise IndexError(
                f"subject {i} out of range for {self.num_of_subjects} subjects"
            )

    def set_subject(self, i: int) -> None:
        """Mark the interval as belonging to subject i."""
        self._check_subject(i)
        self.subject_index |= 1 << i

    def has_subject(self, i: int) -> bool:
        """Tell whether the interval belongs to subject i."""
        self._check_subject(i)
        return bool(self.subject_index >> i & 1)

    def subjects(self) -> Iterator[int]:
        """Yield the indices of the subjects the interval belongs to."""
        bits = self.subject_index
        i = 0
        while bits:
            if bits & 1:
                yield i
            bits >>= 1
            i += 1


@dataclass(eq=False)
class _CountedInterval(_IntervalBase):
    """Interval that counts unresolved positions per subject.

    subject_index[i] is -1 when the interval does not belong to subject i,
    0 when it belongs without unresolved positions, and the number of
    unresolved positions otherwise.
    """

    subject_index: list = field(default_factory=list)
    num_subjects: int = 0

    def _check_room(self, max_children: int) -> bool:
        return len(self.children) < max_children


@dataclass(eq=False)
class KrInterval(_CountedInterval):
    """Interval used by the kr analysis; at most max_children children."""

    def add_child(self, child: "KrInterval", max_children: int) -> None:
        """Append a child; more than max_children children is an alphabet error."""
        if not self._check_room(max_children):
            raise AlphabetError(
                format_message(
                    "ERROR[kr 2]: The alphabet of the input sequences should be "
                    "restricted to the four canonical bases A, C, G, and T!"
                )
            )
        self.children.append(child)


@dataclass(eq=False)
class PhyloInterval(_CountedInterval):
    """Interval used by the phylogeny analysis."""

    def add_child(self, child: "PhyloInterval", max_children: int) -> None:
        """Append a child, warning when the interval already has max_children."""
        if not self._check_room(max_children):
            warnings.warn(
                "ERROR[phylo]: interval has maximum number of children: "
                f"{max_children}. No more children can be added!",
                RuntimeWarning,
                stacklevel=2,
            )
        self.children.append(child)


AnyInterval = Union[Interval, KrInterval, PhyloInterval]


class IntervalPool:
    """Creates intervals of one kind, numbering them and limiting how many are alive."""

    def __init__(self, kind: IntervalKind, num_subjects: int, max_depth: int) -> None:
        self.kind = IntervalKind(kind)
        self.num_subjects = num_subjects
        self.max_depth = max_depth
        self.live = 0
        self.next_id = 0

    def create(
        self,
        lcp: int,
        lb: int,
        rb: int,
        child: Optional[AnyInterval] = None,
        parent: Optional[AnyInterval] = None,
    ) -> AnyInterval:
        """Create an interval, optionally with a first child and a parent.

        Raises DepthLimitExceeded when more than max_depth intervals would be alive.
        """
        if self.live + 1 > self.max_depth:
            label = {
                IntervalKind.BASIC: "getInterval",
                IntervalKind.KR: "kr2 getInterval",
                IntervalKind.PHYLO: "phylo getInterval",
            }[self.kind]
            raise DepthLimitExceeded(
                format_message(
                    f"WARNING [{label}]: program terminated with Warning Code 1; "
                    "see documentation for further details"
                )
            )
        self.live += 1
        self.next_id += 1
        children = [] if child is None else [child]
        if self.kind is IntervalKind.BASIC:
            return Interval(
                lcp=lcp,
                lb=lb,
                rb=rb,
                id=self.next_id,
                parent=parent,
                children=children,
                num_of_subjects=self.num_subjects,
            )
        cls = KrInterval if self.kind is IntervalKind.KR else PhyloInterval
        return cls(
            lcp=lcp,
            lb=lb,
            rb=rb,
            id=self.next_id,
            parent=parent,
            children=children,
            subject_index=[-1] * self.num_subjects,
            num_subjects=0,
        )

    def release(self, interval: Optional[AnyInterval]) -> None:
        """Mark an interval as no longer alive; None is ignored."""
        if interval is not None:
            interval.children = []
            self.live -= 1