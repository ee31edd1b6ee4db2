import pytest

from deskdemos.filesystem import (
    list_directory,
    main,
    make_directory,
    read_text_file,
    remove_path,
)


@pytest.fixture
def populated(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    (tmp_path / ".hidden").write_text("h")
    return tmp_path


def test_list_directory_sorted_without_hidden(populated):
    assert list_directory(populated) == ["a.txt", "b.txt", "sub"]


def test_list_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(tmp_path / "missing")


def test_make_directory_creates_it(tmp_path):
    created = make_directory(tmp_path, "new")
    assert created == tmp_path / "new"
    assert created.is_dir()
    assert list_directory(tmp_path) == ["new"]


def test_make_existing_directory_fails(tmp_path):
    make_directory(tmp_path, "new")
    with pytest.raises(FileExistsError):
        make_directory(tmp_path, "new")


def test_make_directory_needs_a_name(tmp_path):
    with pytest.raises(ValueError):
        make_directory(tmp_path, "")


def test_make_directory_in_a_file_fails(populated):
    with pytest.raises(NotADirectoryError):
        make_directory(populated / "a.txt", "x")


def test_remove_file_and_empty_directory(populated):
    remove_path(populated / "a.txt")
    remove_path(populated / "sub")
    assert list_directory(populated) == ["b.txt"]


def test_remove_non_empty_directory_fails(populated):
    (populated / "sub" / "inner.txt").write_text("x")
    with pytest.raises(OSError):
        remove_path(populated / "sub")
    assert (populated / "sub").is_dir()


def test_remove_missing_path_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        remove_path(tmp_path / "missing")


def test_read_text_file_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert read_text_file(path) == "line one\nline two\n"


def test_read_missing_file_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_file(tmp_path / "missing.txt")


def test_main_prints_entries(populated, capsys):
    assert main([str(populated)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.strip('"') for line in lines] == list_directory(populated)


def test_main_reports_missing_directory(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1