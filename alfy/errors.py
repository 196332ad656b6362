"""Error types and helpers for reporting failures."""

from __future__ import annotations

from typing import IO, Optional

_program_name: Optional[str] = None


class AlfyError(Exception):
    """Base class for every error raised by the package."""


class DepthLimitExceeded(AlfyError):
    """Raised when more intervals are alive than the configured maximum depth allows."""


class AlphabetError(AlfyError):
    """Raised when input sequences use characters outside the permitted alphabet."""


def set_program_name(name: Optional[str]) -> None:
    """Store the program name used as a prefix in error messages."""
    global _program_name
    _program_name = None if name is None else str(name)


def program_name() -> Optional[str]:
    """Return the stored program name, or None if none was set."""
    return _program_name


def format_message(message: str, error: Optional[BaseException] = None) -> str:
    """Build an error message.

    The stored program name, if any, is put in front. When the message ends
    with a colon and an error is given, the error's description is appended.
    """
    text = message
    if _program_name is not None:
        text = f"{_program_name}: {text}"
    if message.endswith(":") and error is not None:
        detail = getattr(error, "strerror", None) or str(error)
        text = f"{text} {detail}"
    return text


def open_file(path, mode: str = "r") -> IO:
    """Open a file, raising AlfyError with a descriptive message on failure."""
    try:
        return open(path, mode)
    except OSError as exc:
        raise AlfyError(
            format_message(f"open_file({path}, {mode}) failed:", exc)
        ) from exc