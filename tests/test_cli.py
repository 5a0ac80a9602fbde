"""
Tests for the arffdoc command line.
"""

import json

import pytest

from arffdoc.__main__ import main
from arffdoc.examples import WEATHER_ARFF


@pytest.fixture
def weather_file(tmp_path):
    path = tmp_path / "weather.arff"
    path.write_text(WEATHER_ARFF, encoding="utf-8")
    return str(path)


def test_summary(weather_file, capsys):
    assert main([weather_file]) == 0
    out = capsys.readouterr().out
    assert "Relation:   weather" in out
    assert "Rows:       14" in out
    assert "play (nominal): 2 distinct [yes=9, no=5]" in out


def test_json(weather_file, capsys):
    assert main([weather_file, "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["relation"] == "weather"
    assert len(data["rows"]) == 14


def test_csv(weather_file, capsys):
    assert main([weather_file, "--format", "csv"]) == 0
    assert capsys.readouterr().out.startswith("outlook,temperature,humidity,windy,play\n")


def test_arff(weather_file, capsys):
    assert main([weather_file, "--format", "arff"]) == 0
    assert capsys.readouterr().out.startswith("@RELATION weather\n")


def test_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.arff"
    path.write_text("@RELATION a\n@RELATION b\n@DATA\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "line 2" in err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.arff")]) == 1
    assert "not found" in capsys.readouterr().err


def test_allow_relational(tmp_path, capsys):
    path = tmp_path / "bag.arff"
    path.write_text("@RELATION r\n@ATTRIBUTE bag RELATIONAL\n@DATA\nx\n")
    assert main([str(path)]) == 1
    capsys.readouterr()
    with pytest.warns(UserWarning):
        assert main([str(path), "--allow-relational"]) == 0


def test_config_file(tmp_path, capsys):
    config = tmp_path / "options.yaml"
    config.write_text("relational: placeholder\n")
    path = tmp_path / "bag.arff"
    path.write_text("@RELATION r\n@ATTRIBUTE bag RELATIONAL\n@DATA\nx\n")
    with pytest.warns(UserWarning):
        assert main([str(path), "--config", str(config), "--format", "yaml"]) == 0
    assert "relational" in capsys.readouterr().out


def test_unknown_encoding(weather_file, capsys):
    assert main([weather_file, "--encoding", "bogus"]) == 1
    assert "Unknown encoding" in capsys.readouterr().err


def test_encoding_option(tmp_path, capsys):
    path = tmp_path / "latin.arff"
    path.write_bytes("@RELATION café\n@DATA\n".encode("latin-1"))
    assert main([str(path), "--encoding", "latin-1"]) == 0
    assert "Relation:   café" in capsys.readouterr().out
