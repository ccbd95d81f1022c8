import io
import sys

import pytest

from grep_lite import InputError, Line, open_lines


def test_reads_file_and_strips_terminators(tmp_path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"first\r\nsecond\n\nlast")
    with open_lines(str(path)) as lines:
        assert list(lines) == [
            Line(0, "first"),
            Line(1, "second"),
            Line(2, ""),
            Line(3, "last"),
        ]


def test_reads_stdin_for_dash(monkeypatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"one\ntwo\n"), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    with open_lines("-") as lines:
        assert [line.text for line in lines] == ["one", "two"]
    assert not stdin.closed


def test_missing_file_raises_input_error(tmp_path) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(InputError) as excinfo:
        with open_lines(str(missing)):
            pass
    assert excinfo.value.path == str(missing)


def test_decode_error_names_the_line(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\nstill ok\n\xff\xfe broken\nnever read\n")
    seen = []
    with pytest.raises(InputError) as excinfo:
        with open_lines(str(path)) as lines:
            for line in lines:
                seen.append(line.text)
    assert seen == ["ok", "still ok"]
    assert excinfo.value.line_number == 3


def test_file_closed_after_early_exit(tmp_path, monkeypatch) -> None:
    path = tmp_path / "input.txt"
    path.write_text("a\nb\nc\n")
    opened = []
    real_open = open

    def tracking_open(*args, **kwargs):
        handle = real_open(*args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr("builtins.open", tracking_open)
    with open_lines(str(path)) as lines:
        next(lines)
    assert opened and opened[0].closed


class _FailingStream(io.BytesIO):
    def __init__(self, data: bytes, fail_on: int) -> None:
        super().__init__(data)
        self._calls = 0
        self._fail_on = fail_on

    def readline(self, *args):
        self._calls += 1
        if self._calls == self._fail_on:
            raise OSError(5, "Input/output error")
        return super().readline(*args)


def test_read_error_names_the_line(monkeypatch) -> None:
    stdin = io.TextIOWrapper(_FailingStream(b"first\nsecond\n", fail_on=2), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    with pytest.raises(InputError) as excinfo:
        with open_lines("-") as lines:
            assert next(lines) == Line(0, "first")
            next(lines)
    assert excinfo.value.line_number == 2
    assert excinfo.value.reason == "Input/output error"
    assert "(standard input):2" in str(excinfo.value)
