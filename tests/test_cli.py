"""Tests for the command line interface."""

import json

import pytest

from colorscheme_generator.cli import main


def test_generates_colorscheme(theme_file, tmp_path, capsys):
    out_dir = tmp_path / "out"
    main([str(theme_file), "-o", str(out_dir)])

    init_lua = out_dir / "lua" / "tiny" / "init.lua"
    colors_lua = out_dir / "colors" / "tiny.lua"
    assert init_lua.exists()
    assert colors_lua.read_text() == 'require("tiny").init()\n'
    assert 'vim.g.colors_name = "tiny"' in init_lua.read_text()
    assert not (out_dir / "palette-tiny.json").exists()

    out = capsys.readouterr().out
    assert "Exported:" in out
    assert str(init_lua) in out


def test_json_and_report(theme_file, tmp_path, capsys):
    main([str(theme_file), "-o", str(tmp_path), "--json", "--report"])

    data = json.loads((tmp_path / "palette-tiny.json").read_text())
    assert data["bg"] == "#161822"
    assert "READABILITY REPORT" in (tmp_path / "readability_report-tiny.txt").read_text()
    assert "PALETTE: tiny" in capsys.readouterr().out


def test_theme_error_exits(tmp_path, capsys):
    path = tmp_path / "broken.toml"
    path.write_text(
        'name = "broken"\nbackground = "dark"\n[colors]\na = "lighten(b, 0.1)"\n[highlights]\n'
    )
    with pytest.raises(SystemExit) as exc_info:
        main([str(path), "-o", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "error: Referenced color 'b' is not present in palette" in capsys.readouterr().err
    assert not (tmp_path / "colors").exists()


def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.toml")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    "filename,content",
    [
        ("bad.toml", b'name = "x"\nbackground = dark\n'),
        ("bad.json", b"{not json"),
        ("latin.toml", b'name = "caf\xe9"\n'),
    ],
)
def test_unparseable_theme_exits(tmp_path, capsys, filename, content):
    path = tmp_path / filename
    path.write_bytes(content)
    with pytest.raises(SystemExit) as exc_info:
        main([str(path), "-o", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "error: Could not parse theme file" in capsys.readouterr().err


def test_directory_theme_exits(tmp_path, capsys):
    path = tmp_path / "dir.toml"
    path.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        main([str(path), "-o", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "error:" in capsys.readouterr().err
