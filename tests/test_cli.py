import pytest

from heistgrid.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments(capsys):
    assert main([]) == 5
    out = capsys.readouterr()
    assert out.out == "Error\n"
    assert "No map specified" in out.err


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 7
    assert "Too many arguments given" in capsys.readouterr().err


def test_wrong_suffix(capsys):
    assert main(["map.txt"]) == 5
    assert "File does not end in '.ber'" in capsys.readouterr().err


def test_missing_file(workdir, capsys):
    assert main(["missing.ber"]) == 2
    assert "Could not open file" in capsys.readouterr().err


def test_invalid_character(workdir, capsys):
    (workdir / "bad.ber").write_text("11111\n1PCX1\n1E001\n11111\n")
    assert main(["bad.ber"]) == 5
    assert "Invalid character found in map" in capsys.readouterr().err


def test_valid_map_without_textures(workdir, capsys):
    (workdir / "ok.ber").write_text("111111\n1PCUE1\n111111\n")
    assert main(["ok.ber"]) == 2
    assert "Couldnt open all textures" in capsys.readouterr().err