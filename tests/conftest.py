"""Test configuration and fixtures for codeclip."""

import builtins
from pathlib import Path

import pytest

from codeclip.settings import Settings

_real_open = builtins.open


@pytest.fixture
def make_settings():
    """Build Settings with test-friendly defaults: .cs files only, bin/obj skipped, 500 KiB cap."""

    def _make(**overrides):
        values = {
            "include_extensions": [".cs"],
            "skip_directories": ["bin", "obj"],
            "max_file_size_kb": 500,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def source_tree(tmp_path):
    """Create a small project tree.

    project/
        Program.cs
        notes.txt
        bin/Debug.cs
        Models/User.cs
        Models/Address.cs
        Services/Api.cs
    """
    root = tmp_path / "project"
    (root / "bin").mkdir(parents=True)
    (root / "Models").mkdir()
    (root / "Services").mkdir()
    (root / "Program.cs").write_text("class Program {}\n", encoding="utf-8")
    (root / "notes.txt").write_text("not code\n", encoding="utf-8")
    (root / "bin" / "Debug.cs").write_text("// build output\n", encoding="utf-8")
    (root / "Models" / "User.cs").write_text("record User;\n", encoding="utf-8")
    (root / "Models" / "Address.cs").write_text("record Address;\n", encoding="utf-8")
    (root / "Services" / "Api.cs").write_text("class Api {}\n", encoding="utf-8")
    return root


@pytest.fixture
def deny_read(monkeypatch):
    """Make the source reader fail with a permission error for the given file names."""

    def _deny(*names):
        def fake_open(file, *args, **kwargs):
            if Path(file).name in names:
                raise PermissionError(13, "Permission denied", str(file))
            return _real_open(file, *args, **kwargs)

        monkeypatch.setattr("codeclip.source_reader.open", fake_open, raising=False)

    return _deny
