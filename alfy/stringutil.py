"""String helpers and subject file naming."""

from __future__ import annotations

from typing import TextIO

HASHSIZE = 101
MAXFIELDS = 5000
NAMELENGTH = 30

_UINT64_MASK = (1 << 64) - 1


def chomp(line: str) -> str:
    """Cut the line at its first newline or carriage return."""
    for pos, ch in enumerate(line):
        if ch in "\n\r":
            return line[:pos]
    return line


def truncate(text: str, n: int) -> str:
    """Return at most n characters of text, followed by '...' if it was cut."""
    n = max(n, 0)
    if n < len(text):
        return text[:n] + "..."
    return text


def write_truncated(fp: TextIO, text: str, n: int) -> None:
    """Write at most n characters of text to fp, adding '...' if it was cut."""
    fp.write(truncate(text, n))


def reverse(text: str) -> str:
    """Return text reversed."""
    return text[::-1]


def replace_char(text: str, original: str, replacement: str) -> str:
    """Replace every occurrence of one character with another."""
    return text.replace(original, replacement)


def hash_string(text: str) -> int:
    """Hash a string into the range [0, HASHSIZE)."""
    value = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (signed + 31 * value) & _UINT64_MASK
    return value % HASHSIZE


def subject_file_name(subject_name: str, i: int) -> str:
    """Return the name of the i-th subject (counted from 0), e.g. Subject1."""
    if i < 0:
        raise ValueError(f"subject index must not be negative: {i}")
    return f"{subject_name}{i + 1}"