import io
import math

import pytest

from alfy.analysis import (
    effective_query_ae,
    effective_query_ao,
    gc_content,
    max_sum,
    print_ir,
    print_max_s,
    query_ao,
)
from alfy.sequence import cat_seq, prepare_seq, read_fasta
from alfy.sequence_union import SequenceUnion


def _setup(query_text=">q\nAAAC\n"):
    query = read_fasta(io.StringIO(query_text))
    prepare_seq(query)
    query.num_query = 1
    subject = read_fasta(io.StringIO(">s\nACGGTAC\n"))
    prepare_seq(subject)
    cat = cat_seq(query, subject, "Q")
    border = query.borders[1]
    union = SequenceUnion(
        seq_union=cat,
        num_of_subjects=1,
        num_of_queries=1,
        seq_borders=[border, len(cat.seq) - 1],
    )
    return union, query


def test_max_sum_subject_reaching_max_ao_wins():
    result = max_sum([8.0, 4.0], [2.0, 2.0], False, [8.0, 8.0])
    assert result.value == pytest.approx(1.0)
    assert result.subjects == [0]


def test_max_sum_ties_share_the_maximum():
    result = max_sum([4.0, 4.0, 4.0], [2.0, 2.0, 2.0], False, [8.0, 8.0, 8.0])
    assert result.subjects == [0, 1, 2]


def test_max_sum_threshold_skips_subjects_below_expectation():
    result = max_sum([1.0, 8.0], [2.0, 2.0], True, [8.0, 8.0])
    assert result.subjects == [1]
    assert result.value == pytest.approx(1.0)


def test_max_sum_nothing_above_threshold():
    result = max_sum([1.0, 2.0], [2.0, 2.0], True, [8.0, 8.0])
    assert result.subjects == []
    assert result.value == 0


def test_max_sum_warns_when_max_ao_equals_ae():
    with pytest.warns(RuntimeWarning, match="equals Ae"):
        result = max_sum([8.0, 3.0], [2.0, 2.0], False, [8.0, 2.0])
    assert result.subjects == [1]
    assert math.isinf(result.value)


def test_print_max_s_full_window():
    out = io.StringIO()
    print_max_s(out, 9.0, [0, 2], 0.5, 100, 100)
    assert out.getvalue() == "      10\t0.500000\t1\t3\t\n"


def test_print_max_s_short_window_warns():
    out = io.StringIO()
    print_max_s(out, 9.0, [0], 0.5, 99, 100)
    text = out.getvalue()
    assert text.startswith("      10\t0.500000\t1\t")
    assert "[WARNING] number of nucleotides (99)" in text
    assert text.endswith("\n")


def test_print_max_s_too_few_nucleotides():
    out = io.StringIO()
    print_max_s(out, 9.0, [0], 0.5, 1, 100)
    assert out.getvalue() == (
        "      10\t[ERROR] Number of nucleotides (1) considerably less than window size!"
    )


def test_print_max_s_no_subjects():
    out = io.StringIO()
    print_max_s(out, 9.0, [], 0.0, 100, 100)
    assert out.getvalue() == "      10\t        \n"


def test_query_ao_counts_each_nucleotide_on_both_strands():
    union, query = _setup()
    sl = [[1] * len(union.seq_union.seq)]
    assert query_ao(union, sl, query) == [2.0 * 4]


def test_query_ao_skips_undefined_characters():
    union, query = _setup(">q\nAANC\n")
    sl = [[1] * len(union.seq_union.seq)]
    assert query_ao(union, sl, query) == [2.0 * 3]


def test_effective_query_ao_matches_query_ao_without_cutoff():
    union, query = _setup()
    sl = [list(range(len(union.seq_union.seq)))]
    ao, eff = effective_query_ao(union, sl, query, [-1])
    assert ao == query_ao(union, sl, query)
    assert eff == [2 * 4]


def test_effective_query_ao_cutoff_excludes_short_shulens():
    union, query = _setup()
    sl = [[1] * len(union.seq_union.seq)]
    ao, eff = effective_query_ao(union, sl, query, [5])
    assert ao == [0.0]
    assert eff == [0]


def test_effective_query_ae_stops_at_effective_count():
    union, query = _setup()
    sl = [[1] * len(union.seq_union.seq)]
    ae = effective_query_ae(union, sl, query, [4])
    assert ae == [4.0]


def test_effective_query_ae_uses_all_positions_when_allowed():
    union, query = _setup()
    sl = [list(range(len(union.seq_union.seq)))]
    ae = effective_query_ae(union, sl, query, [100])
    assert ae == query_ao(union, sl, query)


def test_print_ir_normalised_value():
    union, _ = _setup()
    out = io.StringIO()
    print_ir(out, 9.0, 100, 100, [8.0], [2.0], union, [8.0])
    assert out.getvalue() == "      10\t1.00000\n"


def test_print_ir_too_few_nucleotides():
    union, _ = _setup()
    out = io.StringIO()
    print_ir(out, 9.0, 2, 100, [8.0], [2.0], union, [8.0])
    assert out.getvalue() == (
        "      10[ERROR] Number of nucleotides (2) considerably less than window size!\n"
    )


def test_gc_content_of_entry():
    seq = read_fasta(io.StringIO(">a\nGCAT\n>b\nGGGN\n"))
    gc, num_char = gc_content(seq, 0)
    assert gc == pytest.approx(0.5)
    assert num_char == 4
    gc_b, num_b = gc_content(seq, 1)
    assert gc_b == 1.0
    assert num_b == 3


def test_gc_content_without_nucleotides_is_nan():
    seq = read_fasta(io.StringIO(">a\nNNN\n"))
    gc, num_char = gc_content(seq, 0)
    assert math.isnan(gc)
    assert num_char == 0