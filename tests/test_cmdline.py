import gzip
import io

import pytest

from moar.cmdline import (
    combine_flags,
    get_target_line,
    no_line_numbers_default,
    pump_to_stdout,
    try_open,
)


def test_target_line_found_and_removed():
    line, remaining = get_target_line(["--wrap", "+1", "file.txt"])
    assert line == 0
    assert remaining == ["--wrap", "file.txt"]


def test_target_line_is_zero_based():
    first, _ = get_target_line(["+1"])
    tenth, _ = get_target_line(["+10"])
    assert tenth - first == 9


@pytest.mark.parametrize("arg", ["+0", "+abc", "+", "+-3", "+99999999999"])
def test_target_line_invalid_treated_as_filename(arg):
    line, remaining = get_target_line([arg, "x"])
    assert line is None
    assert remaining == [arg, "x"]


def test_target_line_none():
    line, remaining = get_target_line(["a", "b"])
    assert line is None
    assert remaining == ["a", "b"]


def test_target_line_first_valid_wins():
    line, remaining = get_target_line(["+zz", "+1", "+2"])
    assert line == 0
    assert remaining == ["+zz", "+2"]


def test_combine_flags_with_env():
    flags = combine_flags(["moar", "file"], {"MOAR": "  --wrap  --follow "})
    assert flags == ["--wrap", "--follow", "file"]


def test_combine_flags_without_env():
    assert combine_flags(["moar", "--wrap", "f"], {}) == ["--wrap", "f"]
    assert combine_flags(["moar", "f"], {"MOAR": "   "}) == ["f"]


def test_try_open_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        try_open(str(tmp_path / "missing"))


def test_try_open_empty_file_is_fine(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert try_open(str(path)) is None


def test_try_open_directory(tmp_path):
    with pytest.raises(OSError):
        try_open(str(tmp_path))


def test_pump_files_concatenated_and_decompressed(tmp_path):
    plain = tmp_path / "a.txt"
    plain.write_bytes(b"hello\n")
    packed = tmp_path / "b.txt.gz"
    packed.write_bytes(gzip.compress(b"world\n"))

    output = io.BytesIO()
    pump_to_stdout([str(plain), str(packed)], output, io.BytesIO(b"ignored"))
    assert output.getvalue() == b"hello\nworld\n"


def test_pump_stdin_when_no_files():
    output = io.BytesIO()
    pump_to_stdout([], output, io.BytesIO(b"from stdin"))
    assert output.getvalue() == b"from stdin"


def test_pump_missing_file(tmp_path):
    missing = str(tmp_path / "nope")
    with pytest.raises(OSError, match="Failed to open"):
        pump_to_stdout([missing], io.BytesIO(), io.BytesIO())


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"MANPATH": "/usr/share/man"}, True),
        ({"MAN_PN": "ls(1)"}, True),
        ({"MANPATH": ""}, False),
        ({}, False),
    ],
)
def test_no_line_numbers_default(environ, expected):
    assert no_line_numbers_default(environ) is expected