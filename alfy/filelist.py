"""Listing FASTA files in a directory."""

from __future__ import annotations

import os

from .errors import AlfyError, format_message

FASTA_EXTENSIONS = frozenset({".fasta", ".fa", ".faa", ".fna"})


def is_fasta_file(name: str) -> bool:
    """Tell whether a file name carries a FASTA extension."""
    if name in (".", ".."):
        return False
    dot = name.rfind(".")
    if dot < 0:
        return False
    return name[dot:] in FASTA_EXTENSIONS


def list_fasta_files(directory: str) -> list[str]:
    """Return the sorted paths of the FASTA files in a directory.

    Raises AlfyError when the directory cannot be read or holds no FASTA file.
    """
    try:
        with os.scandir(directory) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if is_fasta_file(entry.name) and not entry.is_dir()
            )
    except OSError as exc:
        raise AlfyError(format_message("No files in this directory!")) from exc
    if not names:
        raise AlfyError(format_message("No files in this directory!"))
    return [os.path.join(directory, name) for name in names]