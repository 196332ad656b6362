import os

import pytest

from alfy.errors import AlfyError
from alfy.filelist import is_fasta_file, list_fasta_files


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.fasta", True),
        ("a.fa", True),
        ("a.faa", True),
        ("a.fna", True),
        ("a.txt", False),
        ("fasta", False),
        ("a.fasta.bak", False),
        (".", False),
        ("..", False),
    ],
)
def test_is_fasta_file(name, expected):
    assert is_fasta_file(name) is expected


def test_list_fasta_files_sorted_and_filtered(tmp_path):
    for name in ["b.fa", "a.fasta", "notes.txt", "c.fna"]:
        (tmp_path / name).write_text(">x\nACGT\n")
    (tmp_path / "sub.fa").mkdir()
    result = list_fasta_files(str(tmp_path))
    assert result == [
        os.path.join(str(tmp_path), "a.fasta"),
        os.path.join(str(tmp_path), "b.fa"),
        os.path.join(str(tmp_path), "c.fna"),
    ]


def test_list_fasta_files_paths_exist(tmp_path):
    (tmp_path / "s.faa").write_text(">x\nAC\n")
    result = list_fasta_files(str(tmp_path))
    assert len(result) == 1
    assert all(os.path.isfile(p) for p in result)


def test_list_fasta_files_empty_dir(tmp_path):
    (tmp_path / "readme.txt").write_text("hi")
    with pytest.raises(AlfyError, match="No files"):
        list_fasta_files(str(tmp_path))


def test_list_fasta_files_missing_dir(tmp_path):
    with pytest.raises(AlfyError):
        list_fasta_files(str(tmp_path / "absent"))