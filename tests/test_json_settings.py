import json

import pytest

from deskdemos.json_settings import (
    SAMPLE_JSON,
    Settings,
    format_settings,
    main,
    parse_settings,
)


def test_parse_sample():
    assert parse_settings(SAMPLE_JSON) == Settings(
        encoding="UTF-8",
        plugins=["python", "c++", "ruby"],
        indent_length=3,
        use_space=True,
    )


def test_format_sample():
    assert format_settings(parse_settings(SAMPLE_JSON)).splitlines() == [
        'encoding: "UTF-8"',
        "plugins:",
        '\t- "python"',
        '\t- "c++"',
        '\t- "ruby"',
        "length: 3",
        "use_space: true",
    ]


def test_empty_object_gives_defaults():
    assert parse_settings("{}") == Settings()


def test_bytes_input_accepted():
    assert parse_settings(SAMPLE_JSON.encode("utf-8")).encoding == "UTF-8"


def test_loose_types_are_converted():
    text = json.dumps({"encoding": 8, "plug-ins": "x", "indent": {"length": "4", "use_space": "false"}})
    settings = parse_settings(text)
    assert settings.encoding == "8"
    assert settings.plugins == []
    assert settings.indent_length == 4
    assert settings.use_space is False


def test_malformed_json_raises():
    with pytest.raises(ValueError):
        parse_settings('{"encoding": ')


def test_non_object_raises():
    with pytest.raises(ValueError):
        parse_settings('["python", "ruby"]')


def test_main_uses_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == 'encoding: "UTF-8"'


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"encoding": "latin-1"}), encoding="utf-8")
    assert main([str(path)]) == 0
    assert 'encoding: "latin-1"' in capsys.readouterr().out


def test_main_reports_bad_file(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("not json", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err != ""