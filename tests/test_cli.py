"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from packrat import __version__
from packrat.cli.main_cli import main_app

runner = CliRunner()


def test_version():
    result = runner.invoke(main_app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_compress_then_decompress(project_tree, tmp_path):
    archive = tmp_path / "my-project.tar.gz"
    result = runner.invoke(main_app, [
        str(project_tree / "headers"), str(project_tree / "Makefile"), "-o", str(archive),
    ])
    assert result.exit_code == 0, result.output
    assert archive.exists()

    out = tmp_path / "Videos"
    result = runner.invoke(main_app, [str(archive), "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert (out / "headers" / "lib.h").exists()


def test_undecompressible_input_fails(tmp_path):
    result = runner.invoke(main_app, ["readme.txt"])
    assert result.exit_code == 1
    assert "readme.txt" in result.output


def test_missing_input_fails(tmp_path):
    result = runner.invoke(main_app, [str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out.zip")])
    assert result.exit_code == 1
    assert not (tmp_path / "out.zip").exists()


def test_overwrite_flag(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("hello")
    archive = tmp_path / "notes.zip"
    archive.write_bytes(b"stale")

    result = runner.invoke(main_app, [str(source), "-o", str(archive)])
    assert result.exit_code == 1

    result = runner.invoke(main_app, [str(source), "-o", str(archive), "--overwrite"])
    assert result.exit_code == 0, result.output


def test_inputs_are_required():
    result = runner.invoke(main_app, [])
    assert result.exit_code != 0


def test_unreadable_input_exits_cleanly(tmp_path):
    """A directory named like an archive cannot be read as one."""
    (tmp_path / "data.zip").mkdir()

    result = runner.invoke(main_app, [str(tmp_path / "data.zip"), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "could not access" in result.output


def test_uncreatable_output_directory_exits_cleanly(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("a")
    # A regular file cannot hold a directory
    output = tmp_path / "a.txt" / "nested" / "a.gz"

    result = runner.invoke(main_app, [str(source), "-o", str(output)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
