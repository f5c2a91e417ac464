"""Unit tests for the CLI main module."""

import json
import os
from unittest.mock import patch

import pyperclip
import pytest

from codeclip.cli.argparser import create_parser
from codeclip.cli.main import apply_overrides, format_counts, main, select_sink
from codeclip.cli.output_sink import ClipboardSink, FileSink, StdoutSink
from codeclip.settings import Settings


@pytest.fixture
def config(tmp_path, source_tree):
    """Write a settings file pointing at the sample project."""

    def _config(**values):
        data = {
            "SourcePath": str(source_tree),
            "IncludeExtensions": [".cs"],
            "SkipDirectories": ["bin", "obj"],
            "MaxFileSizeKb": 500,
            "MinifyOutput": False,
        }
        data.update(values)
        path = tmp_path / "appsettings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _config


def run_main(argv):
    """Run main and return its exit code, 0 when it returns normally."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


def test_stdout_output(config, source_tree, capsys):
    assert run_main(["-c", config(), "--stdout"]) == 0

    captured = capsys.readouterr()
    assert captured.out.startswith(f"Code Tree for: {source_tree}\n=====================================\n")
    assert "├── 📄 Program.cs\n" in captured.out
    assert "Debug.cs" not in captured.out
    assert "Code Tree Generator" in captured.err
    assert "The code tree has been written to stdout." in captured.err


def test_clipboard_is_default(config):
    with patch("codeclip.cli.output_sink.pyperclip.copy") as mock_copy:
        assert run_main(["-c", config()]) == 0

    mock_copy.assert_called_once()
    assert "📁 project/" in mock_copy.call_args[0][0]


def test_clipboard_unavailable(config, capsys):
    with patch(
        "codeclip.cli.output_sink.pyperclip.copy", side_effect=pyperclip.PyperclipException("no mechanism")
    ):
        assert run_main(["-c", config()]) == 1

    err = capsys.readouterr().err
    assert "Error: Could not copy to the clipboard: no mechanism" in err
    assert "--stdout" in err


def test_output_file(config, tmp_path, capsys):
    target = tmp_path / "tree.txt"

    assert run_main(["-c", config(), "-o", str(target)]) == 0

    assert target.read_text(encoding="utf-8").startswith("Code Tree for: ")
    assert capsys.readouterr().out == ""


def test_directory_argument_overrides_source_path(config, source_tree, capsys):
    models = source_tree / "Models"

    assert run_main(["-c", config(SourcePath=""), "--stdout", str(models)]) == 0

    out = capsys.readouterr().out
    assert out.startswith(f"Code Tree for: {models}\n")
    assert "📁 Models/" in out
    assert "Program.cs" not in out


def test_blank_source_path_uses_working_directory(config, source_tree, capsys, monkeypatch):
    settings_file = config(SourcePath="")
    monkeypatch.chdir(source_tree)

    assert run_main(["-c", settings_file, "--stdout"]) == 0

    assert capsys.readouterr().out.startswith(f"Code Tree for: {os.getcwd()}\n")


def test_minify_from_settings(config, capsys):
    assert run_main(["-c", config(MinifyOutput=True), "--stdout"]) == 0

    out = capsys.readouterr().out
    assert "\n" not in out
    assert out.startswith("Code Tree for: ")


def test_minify_flags_override_settings(config, capsys):
    assert run_main(["-c", config(MinifyOutput=False), "--stdout", "--minify"]) == 0
    assert "\n" not in capsys.readouterr().out

    assert run_main(["-c", config(MinifyOutput=True), "--stdout", "--no-minify"]) == 0
    assert "\n" in capsys.readouterr().out


def test_summary(config, capsys):
    assert run_main(["-c", config(), "--stdout", "-s"]) == 0

    err = capsys.readouterr().err
    assert "Directories: 2" in err
    assert "Files: 4" in err
    assert "Lines: " in err
    assert "Characters: " in err


def test_ignore_patterns_from_command_line(config, capsys):
    assert run_main(["-c", config(), "--stdout", "-i", "Models/"]) == 0

    out = capsys.readouterr().out
    assert "Models" not in out
    assert "Services" in out


def test_ignore_patterns_from_rules_file(config, tmp_path, capsys):
    rules = tmp_path / "extra.ignore"
    rules.write_text("User.cs\n")

    assert run_main(["-c", config(), "--stdout", "-e", str(rules)]) == 0

    out = capsys.readouterr().out
    assert "User.cs" not in out
    assert "Address.cs" in out


def test_max_size_override(config, source_tree, capsys):
    (source_tree / "Big.cs").write_bytes(b"x" * 4096)

    assert run_main(["-c", config(), "--stdout", "-m", "2KiB"]) == 0
    assert "Big.cs" not in capsys.readouterr().out

    assert run_main(["-c", config(MaxFileSizeKb=1), "--stdout", "-m", "0"]) == 0
    assert "Big.cs" in capsys.readouterr().out


def test_missing_settings_file(tmp_path, capsys):
    assert run_main(["-c", str(tmp_path / "missing.json"), "--stdout"]) == 1

    captured = capsys.readouterr()
    assert "Error: " in captured.err
    assert "settings file not found" in captured.err
    assert captured.out == ""


def test_invalid_settings(config, capsys):
    assert run_main(["-c", config(IncludeExtensions=".cs"), "--stdout"]) == 1

    assert "IncludeExtensions must be a list of strings" in capsys.readouterr().err


def test_missing_root(config, tmp_path, capsys):
    missing = tmp_path / "missing"

    assert run_main(["-c", config(), "--stdout", str(missing)]) == 1

    captured = capsys.readouterr()
    assert f"Error: The specified directory does not exist: {missing}" in captured.err
    assert captured.out == ""


def test_unlistable_directory(config, capsys, monkeypatch):
    real_listdir = os.listdir

    def fake_listdir(path):
        if os.path.basename(path) == "Models":
            raise PermissionError(13, "Permission denied", str(path))
        return real_listdir(path)

    monkeypatch.setattr("codeclip.file_system_tree.file_system_tree.os.listdir", fake_listdir)

    assert run_main(["-c", config(), "--stdout"]) == 126
    assert "Access denied to" in capsys.readouterr().err

    assert run_main(["-c", config(), "--stdout", "-P", "ignore"]) == 0
    assert "📁 Models/" in capsys.readouterr().out


def test_vanished_directory_is_not_a_permission_failure(config, capsys, monkeypatch):
    real_listdir = os.listdir

    def fake_listdir(path):
        if os.path.basename(path) == "Services":
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return real_listdir(path)

    monkeypatch.setattr("codeclip.file_system_tree.file_system_tree.os.listdir", fake_listdir)

    assert run_main(["-c", config(), "--stdout"]) == 1
    assert "No such file or directory" in capsys.readouterr().err


def test_broken_pipe(config, monkeypatch):
    monkeypatch.setattr("codeclip.cli.main._silence_stdout", lambda: None)

    with patch.object(StdoutSink, "deliver", side_effect=BrokenPipeError):
        assert run_main(["-c", config(), "--stdout"]) == 141


def test_small_max_size_rejected(config, capsys):
    assert run_main(["-c", config(), "--stdout", "-m", "100"]) == 1

    assert "--max-size must be 0 or at least 1KiB" in capsys.readouterr().err


def test_invalid_arguments_exit_2(capsys):
    assert run_main(["--stdout", "-o", "out.txt"]) == 2
    assert run_main(["-m", "lots"]) == 2


def test_format_counts():
    assert format_counts(1, 2, "a\nbc\n") == "Directories: 1\nFiles: 2\nLines: 2\nCharacters: 5"


def test_apply_overrides(tmp_path):
    rules = tmp_path / "rules"
    rules.write_text("*.tmp\n")
    args = create_parser().parse_args(
        ["--minify", "-m", "3KiB", "-e", str(rules), "-i", "*.log", str(tmp_path)]
    )
    settings = Settings(source_path="elsewhere", max_file_size_kb=10, ignore_patterns=["*.bak"])

    updated = apply_overrides(settings, args)

    assert updated.source_path == str(tmp_path)
    assert updated.minify_output is True
    assert updated.max_file_size_kb == 3
    assert updated.ignore_patterns == ("*.bak", "*.tmp", "*.log")


def test_apply_overrides_keeps_settings_without_flags():
    settings = Settings(source_path="here", max_file_size_kb=10, minify_output=True)

    updated = apply_overrides(settings, create_parser().parse_args([]))

    assert updated == settings


def test_select_sink(tmp_path):
    parser = create_parser()

    assert isinstance(select_sink(parser.parse_args([])), ClipboardSink)
    assert isinstance(select_sink(parser.parse_args(["--stdout"])), StdoutSink)
    sink = select_sink(parser.parse_args(["-o", str(tmp_path / "x.txt")]))
    assert isinstance(sink, FileSink)
    assert sink.path == tmp_path / "x.txt"
