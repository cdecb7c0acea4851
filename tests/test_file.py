"""
Tests for the File descriptor.
"""

from pathlib import Path

import pytest

from packrat.core.errors import InvalidInput
from packrat.schemas.extension import parse
from packrat.schemas.file import File


def test_from_path_has_no_contents():
    file = File.from_path("movies.tar.gz", parse("movies.tar.gz"))
    assert file.path == Path("movies.tar.gz")
    assert file.extension == parse("movies.tar.gz")
    assert file.contents_in_memory is None


def test_from_path_without_extension():
    assert File.from_path("Videos/").extension is None


def test_take_contents_moves_the_buffer():
    file = File(path=Path("notes.txt"), contents_in_memory=b"hello")
    assert file.take_contents() == b"hello"
    assert file.contents_in_memory is None


def test_take_contents_twice_fails():
    file = File(path=Path("notes.txt"), contents_in_memory=b"hello")
    file.take_contents()
    with pytest.raises(InvalidInput):
        file.take_contents()
