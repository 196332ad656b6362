"""Reading FASTA data and manipulating concatenated sequence strings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from os import PathLike
from typing import IO, List, Union

from .errors import AlfyError, format_message, open_file

SEQLINE = 1000
SEQBUFFER = 5000000
DICSIZE = 256
BORDER = "Z"
HEADER_LIMIT = 8192
DEFAULT_ID = "strId"

_COMPLEMENT = str.maketrans("ACGT", "TGCA")


@dataclass
class Sequence:
    """One or more FASTA entries held in a single string.

    Each entry is followed by the BORDER character; borders[i] is the
    position of the last character (the border) of entry i.
    """

    seq: str = ""
    id: str = DEFAULT_ID
    num_seq: int = 0
    num_query: int = 0
    borders: List[int] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)
    freq_tab: List[Counter] = field(default_factory=list)
    num_query_nuc: int = 0
    num_sbjct_nuc: int = 0
    num_nuc: int = 0
    query_start: int = -1
    query_end: int = -1

    def __len__(self) -> int:
        return len(self.seq)

    @property
    def length(self) -> int:
        """Length of the sequence string, borders included."""
        return len(self.seq)

    def clone(self) -> "Sequence":
        """Return a copy; only the first num_seq borders are carried over."""
        return Sequence(
            seq=self.seq,
            id=self.id,
            num_seq=self.num_seq,
            num_query=self.num_query,
            borders=list(self.borders[: self.num_seq]),
            headers=list(self.headers[: self.num_seq]),
            freq_tab=[Counter(tab) for tab in self.freq_tab[: self.num_seq]],
            num_query_nuc=self.num_query_nuc,
            num_sbjct_nuc=self.num_sbjct_nuc,
            num_nuc=self.num_nuc,
            query_start=self.query_start,
            query_end=self.query_end,
        )


def revcomp(seq: Sequence) -> Sequence:
    """Return the reverse complement of a sequence string; other characters stay."""
    return Sequence(seq=seq.seq[::-1].translate(_COMPLEMENT), id=seq.id)


def _clean_header(text: str) -> str:
    printable = "".join(ch for ch in text if " " <= ch <= "~")
    return printable[:HEADER_LIMIT]


def read_fasta(stream: IO) -> Sequence:
    """Read FASTA data from a text or binary stream into one Sequence.

    Every '>' starts a new entry, whose header runs to the end of the line
    and keeps the '>'. Entries are joined with BORDER and one BORDER ends
    the string. Raises AlfyError when no entry is found or sequence data
    comes before the first header.
    """
    data = stream.read()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")

    leading, *records = data.split(">")
    if not records:
        raise AlfyError(format_message("ERROR [readFasta]: no FASTA entry found"))
    if leading.replace("\n", ""):
        raise AlfyError(
            format_message("ERROR [readFasta]: sequence data before first header")
        )

    result = Sequence()
    parts: List[str] = []
    position = 0
    for record in records:
        header, newline, body = record.partition("\n")
        residues = body.replace("\n", "") if newline else ""
        result.headers.append(_clean_header(">" + header))
        result.freq_tab.append(Counter(residues))
        parts.append(residues)
        position += len(residues)
        result.borders.append(position)
        position += 1
    result.num_seq = len(records)
    result.seq = BORDER.join(parts) + BORDER
    return result


def read_fasta_file(path: Union[str, PathLike]) -> Sequence:
    """Read a FASTA file; raises AlfyError when it cannot be opened or parsed."""
    with open_file(path, "rb") as handle:
        return read_fasta(handle)


def sequence_element(seq: Sequence, i: int, start: int) -> Sequence:
    """Return entry i of seq, which begins at position start, as its own Sequence."""
    length = seq.borders[i] - start + 1
    return Sequence(
        seq=seq.seq[start : start + length],
        id=seq.id,
        num_seq=1,
        num_query=0,
        borders=[length - 1],
        headers=[seq.headers[i]],
        freq_tab=[Counter(seq.freq_tab[i])],
        num_query_nuc=0,
        num_sbjct_nuc=length - 1,
        num_nuc=length - 1,
        query_start=-1,
        query_end=-1,
    )


def split_sequences(seq: Sequence) -> List[Sequence]:
    """Split a Sequence into one Sequence per entry."""
    elements = []
    start = 0
    for i in range(seq.num_seq):
        elements.append(sequence_element(seq, i, start))
        start = seq.borders[i] + 1
    return elements


def prepare_seq(seq: Sequence) -> None:
    """Upper-case seq and append its reverse complement, in place.

    A string F1 Z F2 Z becomes F1 Z F2 Z R2 Z R1 Z, and borders grows to
    2 * num_seq entries. num_nuc is reset to zero and num_sbjct_nuc doubled;
    the frequency tables are left as they are.
    """
    seq.seq = seq.seq.upper()
    original_len = len(seq.seq)
    reverse = revcomp(seq).seq
    seq.seq = seq.seq + reverse[1:original_len] + BORDER
    new_len = len(seq.seq)

    n = seq.num_seq
    borders = list(seq.borders[:n]) + [0] * n
    for i in range(1, n):
        borders[2 * n - i - 1] = new_len - borders[i - 1] - 2
    borders[2 * n - 1] = new_len - 1
    seq.borders = borders

    seq.num_nuc = 0
    seq.num_sbjct_nuc *= 2


def cat_seq(seq1: Sequence, seq2: Sequence, flag: str) -> Sequence:
    """Concatenate two prepared Sequences.

    flag 'Q' marks seq1 as the query, anything else as a subject; seq2 is
    always a subject. Both must carry 2 * num_seq borders.
    """
    for name, part in (("first", seq1), ("second", seq2)):
        if len(part.borders) < 2 * part.num_seq:
            raise ValueError(
                f"{name} sequence needs {2 * part.num_seq} borders, "
                f"has {len(part.borders)}; call prepare_seq first"
            )
    offset = seq1.borders[2 * seq1.num_seq - 1] + 1
    borders = list(seq1.borders[: 2 * seq1.num_seq]) + [
        offset + b for b in seq2.borders[: 2 * seq2.num_seq]
    ]
    cat = Sequence(
        seq=seq1.seq + seq2.seq,
        id=DEFAULT_ID,
        num_seq=seq1.num_seq + seq2.num_seq,
        borders=borders,
        headers=list(seq1.headers[: seq1.num_seq]) + list(seq2.headers[: seq2.num_seq]),
        freq_tab=[Counter(t) for t in seq1.freq_tab[: seq1.num_seq]]
        + [Counter(t) for t in seq2.freq_tab[: seq2.num_seq]],
    )
    if flag == "Q":
        cat.num_query_nuc = seq1.num_nuc
        cat.num_sbjct_nuc = seq2.num_nuc
        cat.num_nuc = seq1.num_nuc + seq2.num_nuc
    else:
        cat.num_query_nuc = 0
        cat.num_nuc = cat.num_sbjct_nuc = seq1.num_nuc + seq2.num_nuc
    return cat