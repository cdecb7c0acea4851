"""
Tests for inferring compression or decompression from path strings.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from packrat.core.errors import InputsMustHaveBeenDecompressible, InvalidInput
from packrat.inference import infer
from packrat.schemas.command import Command, Compression, Decompression
from packrat.schemas.extension import CompressionFormat, parse
from packrat.schemas.file import File

TAR = CompressionFormat.TAR
GZIP = CompressionFormat.GZIP
ZIP = CompressionFormat.ZIP


def test_decompress_into_directory():
    """movies.tar.gz classes.zip -o Videos/"""
    command = infer(["movies.tar.gz", "classes.zip"], "Videos/")

    assert isinstance(command.kind, Decompression)
    movies, classes = command.kind.files
    assert movies.path == Path("movies.tar.gz")
    assert movies.extension.formats == (TAR, GZIP)
    assert classes.path == Path("classes.zip")
    assert classes.extension.formats == (ZIP,)
    assert command.output.path == Path("Videos/")
    assert command.output.extension is None


def test_compress_project_into_tarball():
    """headers/ sources/ Makefile -o my-project.tar.gz"""
    command = infer(["headers/", "sources/", "Makefile"], "my-project.tar.gz")

    assert command.kind == Compression(files=(Path("headers/"), Path("sources/"), Path("Makefile")))
    assert command.output.path == Path("my-project.tar.gz")
    assert command.output.extension.formats == (TAR, GZIP)
    assert command.is_compression


def test_compress_images_into_zip():
    command = infer(["image1.jpeg", "image2.jpeg"], "images.zip")

    assert isinstance(command.kind, Compression)
    assert command.kind.files == (Path("image1.jpeg"), Path("image2.jpeg"))
    assert command.output.extension.formats == (ZIP,)


def test_compression_ignores_input_extensions():
    """Inputs that are themselves compressed are still compressed."""
    command = infer(["old.tar.gz", "new.zip"], "both.tar")
    assert isinstance(command.kind, Compression)


def test_undecompressible_input_without_output():
    with pytest.raises(InputsMustHaveBeenDecompressible) as excinfo:
        infer(["readme.txt"], None)
    assert excinfo.value.path == Path("readme.txt")


def test_first_offender_is_reported():
    with pytest.raises(InputsMustHaveBeenDecompressible) as excinfo:
        infer(["a.tar.gz", "b.txt"], None)
    assert excinfo.value.path == Path("b.txt")


def test_first_offender_in_input_order():
    with pytest.raises(InputsMustHaveBeenDecompressible) as excinfo:
        infer(["a.txt", "b.zip", "c.txt"], "out")
    assert excinfo.value.path == Path("a.txt")


def test_decompress_without_output():
    command = infer(["a.tar.gz", "b.zip"])

    assert isinstance(command.kind, Decompression)
    assert [f.extension.formats for f in command.kind.files] == [(TAR, GZIP), (ZIP,)]
    assert command.output is None
    assert not command.is_compression


def test_decompression_inputs_have_no_contents_yet():
    command = infer(["a.tar.gz"], "out/")
    assert all(f.contents_in_memory is None for f in command.kind.files)


def test_empty_inputs_are_invalid():
    with pytest.raises(InvalidInput):
        infer([], "out.zip")
    with pytest.raises(InvalidInput):
        infer([])


def test_dotted_directory_output_is_flagged(caplog):
    """v1.2.3/ is not an extension, so it is a decompression target; say so."""
    with caplog.at_level(logging.WARNING, logger="packrat.inference.engine"):
        command = infer(["release.tar.gz"], "v1.2.3")

    assert isinstance(command.kind, Decompression)
    assert command.output.path == Path("v1.2.3")
    assert "v1.2.3" in caplog.text


def test_plain_directory_output_is_not_flagged(caplog):
    with caplog.at_level(logging.WARNING, logger="packrat.inference.engine"):
        infer(["release.tar.gz"], "Videos")
    assert caplog.text == ""


def test_decompression_output_must_not_carry_extension():
    with pytest.raises(ValidationError):
        Command(
            kind=Decompression(files=(File.from_path("a.zip", parse("a.zip")),)),
            output=File.from_path("b.zip", parse("b.zip")),
        )


def test_decompression_inputs_must_carry_extension():
    with pytest.raises(ValidationError):
        Decompression(files=(File.from_path("a.txt"),))


def test_command_is_immutable():
    command = infer(["a.zip"])
    with pytest.raises(ValidationError):
        command.output = File.from_path("elsewhere")
