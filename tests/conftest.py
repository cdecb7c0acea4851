"""
Shared fixtures for the packrat test suite.
"""

import pytest

from packrat.core.config import Settings


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, default_output_dir=str(tmp_path / "default-out"))


@pytest.fixture
def project_tree(tmp_path):
    """A small project: two directories and a Makefile."""
    root = tmp_path / "project"
    (root / "headers").mkdir(parents=True)
    (root / "sources").mkdir()
    (root / "headers" / "lib.h").write_text("int lib(void);\n")
    (root / "sources" / "lib.c").write_text('#include "lib.h"\nint lib(void) { return 42; }\n')
    (root / "Makefile").write_text("all:\n\tcc -c sources/lib.c\n")
    return root
