import pytest

from alfy import errors
from alfy.errors import (
    AlfyError,
    AlphabetError,
    DepthLimitExceeded,
    format_message,
    open_file,
    program_name,
    set_program_name,
)


@pytest.fixture(autouse=True)
def _restore_name():
    saved = program_name()
    set_program_name(None)
    yield
    set_program_name(saved)


def test_program_name_round_trip():
    set_program_name("alfy")
    assert program_name() == "alfy"


def test_program_name_unset_by_default():
    assert program_name() is None


def test_format_message_without_name():
    assert format_message("something broke") == "something broke"


def test_format_message_with_name_prefix():
    set_program_name("alfy")
    assert format_message("bad input") == "alfy: bad input"


def test_format_message_appends_error_after_colon():
    err = OSError(2, "No such file or directory")
    assert format_message("open failed:", err) == "open failed: No such file or directory"


def test_format_message_no_append_without_colon():
    err = OSError(2, "No such file or directory")
    assert format_message("open failed", err) == "open failed"


def test_open_file_reads(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("ACGT\n")
    with open_file(str(path), "r") as fh:
        assert fh.read() == "ACGT\n"


def test_open_file_missing_raises(tmp_path):
    missing = tmp_path / "missing.fa"
    with pytest.raises(AlfyError, match="failed"):
        open_file(str(missing), "r")


def test_open_file_message_contains_program_name(tmp_path):
    set_program_name("alfy")
    with pytest.raises(AlfyError) as info:
        open_file(str(tmp_path / "nope"), "r")
    assert str(info.value).startswith("alfy: ")


@pytest.mark.parametrize(
    "cls, message",
    [(DepthLimitExceeded, "too deep"), (AlphabetError, "bad alphabet")],
)
def test_error_hierarchy(cls, message):
    exc = cls(message)
    assert isinstance(exc, errors.AlfyError)
    assert str(exc) == message