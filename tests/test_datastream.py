import io

import pytest

from deskdemos.datastream import (
    load_answer,
    main,
    read_int32,
    read_string,
    save_answer,
    write_int32,
    write_string,
)


def test_int32_wire_bytes():
    buffer = io.BytesIO()
    write_int32(buffer, 42)
    assert buffer.getvalue() == b"\x00\x00\x00\x2a"


def test_null_string_wire_bytes():
    buffer = io.BytesIO()
    write_string(buffer, None)
    assert buffer.getvalue() == b"\xff\xff\xff\xff"
    buffer.seek(0)
    assert read_string(buffer) is None


def test_string_wire_bytes():
    buffer = io.BytesIO()
    write_string(buffer, "the answer is")
    data = buffer.getvalue()
    assert data[:4] == b"\x00\x00\x00\x1a"
    assert data[4:] == "the answer is".encode("utf-16-be")


@pytest.mark.parametrize("text", ["", "the answer is", "日本語", "emoji \U0001f600"])
def test_string_round_trip(text):
    buffer = io.BytesIO()
    write_string(buffer, text)
    buffer.seek(0)
    assert read_string(buffer) == text
    assert buffer.read() == b""


@pytest.mark.parametrize("value", [0, 42, -1, -(2**31), 2**31 - 1])
def test_int32_round_trip(value):
    buffer = io.BytesIO()
    write_int32(buffer, value)
    buffer.seek(0)
    assert read_int32(buffer) == value


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1])
def test_int32_overflow(value):
    with pytest.raises(OverflowError):
        write_int32(io.BytesIO(), value)


def test_mixed_sequence_round_trip():
    buffer = io.BytesIO()
    write_string(buffer, "a")
    write_int32(buffer, -7)
    write_string(buffer, "b")
    buffer.seek(0)
    assert (read_string(buffer), read_int32(buffer), read_string(buffer)) == ("a", -7, "b")


def test_truncated_string_raises():
    buffer = io.BytesIO()
    write_string(buffer, "hello")
    with pytest.raises(EOFError):
        read_string(io.BytesIO(buffer.getvalue()[:-1]))


def test_truncated_int_raises():
    with pytest.raises(EOFError):
        read_int32(io.BytesIO(b"\x00\x01"))


def test_odd_length_rejected():
    with pytest.raises(ValueError):
        read_string(io.BytesIO(b"\x00\x00\x00\x03abc"))


def test_save_and_load(tmp_path):
    path = tmp_path / "file.dat"
    save_answer(path, "the answer is", 42)
    assert load_answer(path) == ("the answer is", 42)


def test_main_prints_answer(tmp_path, capsys):
    assert main([str(tmp_path / "file.dat")]) == 0
    assert capsys.readouterr().out == '"the answer is" 42\n'