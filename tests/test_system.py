import sys
from pathlib import Path

from furnace.system import executable_directory, executable_path


def test_executable_path_resolves_program(tmp_path, monkeypatch):
    program = tmp_path / "bin" / "furnace"
    program.parent.mkdir()
    program.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(program), "--flag"])
    assert executable_path() == program.resolve()
    assert executable_path().is_absolute()


def test_executable_directory_is_parent(tmp_path, monkeypatch):
    program = tmp_path / "furnace"
    program.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [str(program)])
    assert executable_directory() == tmp_path.resolve()
    assert executable_directory() == executable_path().parent


def test_relative_program_is_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["furnace"])
    assert executable_path() == (tmp_path / "furnace").resolve()


def test_empty_argv_gives_empty_path(monkeypatch):
    monkeypatch.setattr(sys, "argv", [])
    assert executable_path() == Path()
    assert executable_directory() == Path()


def test_blank_program_name_gives_empty_path(monkeypatch):
    monkeypatch.setattr(sys, "argv", [""])
    assert executable_path() == Path()