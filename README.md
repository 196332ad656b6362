# alfy

Building blocks for alignment-free detection of local homology between a
query genome and a set of subject genomes, based on shortest unique
substring lengths (shulens).

The package has no runtime dependencies.

## What is in it

- `alfy.sequence` – the `Sequence` dataclass (entries joined by the border
  character `Z`, with `borders`, `headers` and per-entry `freq_tab`
  counters), FASTA reading from a stream or a path (`read_fasta`,
  `read_fasta_file`), reverse complements (`revcomp`), `prepare_seq`, which
  upper-cases a sequence in place and appends its reverse complement,
  `cat_seq` for joining two prepared sequences, and `split_sequences` /
  `sequence_element` for taking entries apart. `Sequence.clone()` copies one.
- `alfy.sequence_union` – `SequenceUnion`, a query (optional) and subjects
  held in one `Sequence` with their end positions in `seq_borders`, and
  in-place shuffling of subject strands (`randomize_subjects`,
  `randomize_subjects_without_query`, `randomize_strand`); the reverse
  strand is shuffled as the mirror of the forward one.
- `alfy.expected_shulen` – `factorial`, `binomial`, the sums `shustring_sum`
  and `sum_new`, the expected aggregate shulen of a window
  (`expected_aggregate_shulen`) and the smallest shulen whose cumulative
  chance probability reaches a given level (`max_shulen`, `max_shulen_new`;
  both return `None` when no such length exists).
- `alfy.analysis` – observed sums of shulens per subject (`query_ao`,
  `effective_query_ao`, `effective_query_ae`), the maximal normalised `Ir`
  and the subjects sharing it (`max_sum`, returning a `MaxResult`), GC
  content of an entry (`gc_content`, returning the fraction and the count of
  A, C, G and T) and sliding-window report lines written to a text stream
  (`print_max_s`, `print_ir`).
- `alfy.intervals` – lcp-interval objects: `Interval` (subjects as a bit
  set, `set_subject`, `has_subject`, `subjects`), `KrInterval` and
  `PhyloInterval` (per-subject counters). `IntervalPool` creates intervals of
  one `IntervalKind`, numbers them and raises `DepthLimitExceeded` when more
  than `max_depth` would be alive at once. Adding too many children to a
  `KrInterval` raises `AlphabetError`; a `PhyloInterval` only warns.
- `alfy.stack` – `IntervalStack`, a LIFO stack with `push`, `pop`, `top`,
  `is_empty` and `clear(release)`.
- `alfy.query_interval` – `QueryInterval`, a stretch of the query with its
  shulen, average shulen and winning subjects as a bit set, and
  `QueryIntervalPool`, which numbers them and counts those alive.
- `alfy.mtrandom` – `MersenneTwister`, a seedable MT19937 generator with
  integer and float draws, `rand_normal` for standard normal variates and
  `rand_min_max_int(low, high)` for bounded integers.
- `alfy.filelist` – `is_fasta_file` and `list_fasta_files`, which returns the
  `.fasta`, `.fa`, `.faa` and `.fna` files of a directory sorted by name and
  raises `AlfyError` when there are none.
- `alfy.stringutil` – small string helpers (`chomp`, `truncate`,
  `write_truncated`, `reverse`, `replace_char`, `hash_string`) and
  `subject_file_name("Subject", 0) == "Subject1"`.
- `alfy.errors` – the exceptions `AlfyError`, `DepthLimitExceeded` and
  `AlphabetError`, plus `set_program_name`, `format_message` and
  `open_file`.

## Example

```python
import io

from alfy.analysis import gc_content
from alfy.expected_shulen import max_shulen
from alfy.mtrandom import MersenneTwister
from alfy.sequence import prepare_seq, read_fasta
from alfy.sequence_union import SequenceUnion

subject = read_fasta(io.StringIO(">s1\nACGTTGCA\n"))
gc, num_chars = gc_content(subject, 0)

threshold = max_shulen(0.05, num_chars, gc)  # an int, or None

prepare_seq(subject)  # seq is now "ACGTTGCAZTGCAACGTZ"
union = SequenceUnion(
    seq_union=subject,
    num_of_subjects=1,
    seq_borders=[len(subject.seq) - 1],
)
union.randomize_subjects_without_query(MersenneTwister(5489))
```

The same seed always gives the same shuffle.

## What it does not do

The package does not build suffix arrays or lcp arrays and does not compute
shulens from sequences: the analysis functions take the shulens per subject
and query position as input. There is no command-line program; the pieces
are meant to be used from Python.

## Tests

```
pip install .[test]
pytest
```