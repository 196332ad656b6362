"""Sequence, interval, random and statistics primitives for alignment-free local homology detection."""

__version__ = "1.5.0"

__all__ = [
    "analysis",
    "errors",
    "expected_shulen",
    "filelist",
    "intervals",
    "mtrandom",
    "query_interval",
    "sequence",
    "sequence_union",
    "stack",
    "stringutil",
]