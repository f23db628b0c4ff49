#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Unit tests for the md2tex command entry point."""

import pytest

from md2tex.cli import main
from md2tex.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2tex.exceptions import (
    ConfigError,
    DependencyError,
    FileNotFoundError,
    OutputWriteError,
    ParsingError,
)


@pytest.fixture
def workdir(temp_dir, monkeypatch, clean_env):
    """Run the command from an empty temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test the main command flow."""

    def test_missing_input(self, workdir, capsys):
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "Input file is required" in capsys.readouterr().err

    def test_converts_to_default_output(self, workdir, capsys):
        source = workdir / "notes.md"
        source.write_text("# Title\n\nCosts $5.", encoding="utf-8")

        assert main(["notes.md", "--no-config"]) == EXIT_SUCCESS

        output = workdir / "notes.tex"
        assert output.read_text(encoding="utf-8") == "\\chapter{Title}\nCosts \\$5.\n\n"
        assert "Converted notes.md to notes.tex" in capsys.readouterr().out

    def test_explicit_output_path(self, workdir):
        (workdir / "notes.md").write_text("## Section", encoding="utf-8")
        assert main(["notes.md", "chapter.tex", "--no-config"]) == EXIT_SUCCESS
        assert (workdir / "chapter.tex").read_text(encoding="utf-8") == "\\section{Section}"
        assert not (workdir / "notes.tex").exists()

    def test_missing_input_file(self, workdir, capsys):
        assert main(["absent.md", "--no-config"]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err
        assert not (workdir / "absent.tex").exists()

    def test_output_directory_missing(self, workdir, capsys):
        (workdir / "notes.md").write_text("x", encoding="utf-8")
        assert main(["notes.md", "missing/out.tex", "--no-config"]) == EXIT_RENDERING_ERROR
        assert "Failed to write output file" in capsys.readouterr().err

    def test_refuses_to_overwrite_input(self, workdir, capsys):
        (workdir / "notes.tex").write_text("# x", encoding="utf-8")
        assert main(["notes.tex", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert "overwrite the input" in capsys.readouterr().err
        assert (workdir / "notes.tex").read_text(encoding="utf-8") == "# x"

    def test_no_restore_math_flag(self, workdir):
        (workdir / "m.md").write_text("Inline $x$", encoding="utf-8")
        assert main(["m.md", "--no-config", "--no-restore-math"]) == EXIT_SUCCESS
        assert (workdir / "m.tex").read_text(encoding="utf-8") == "Inline $x$\n\n"

    def test_default_restores_math(self, workdir):
        (workdir / "m.md").write_text("Inline $x$", encoding="utf-8")
        assert main(["m.md", "--no-config"]) == EXIT_SUCCESS
        assert (workdir / "m.tex").read_text(encoding="utf-8") == "Inline \\(x\\)\n\n"

    def test_environment_variable_default(self, workdir, monkeypatch):
        monkeypatch.setenv("MD2TEX_RESTORE_MATH", "false")
        (workdir / "m.md").write_text("Inline $x$", encoding="utf-8")
        assert main(["m.md", "--no-config"]) == EXIT_SUCCESS
        assert (workdir / "m.tex").read_text(encoding="utf-8") == "Inline $x$\n\n"

    def test_no_escape_special_flag(self, workdir):
        (workdir / "e.md").write_text("50% off", encoding="utf-8")
        assert main(["e.md", "--no-config", "--no-escape-special"]) == EXIT_SUCCESS
        assert (workdir / "e.tex").read_text(encoding="utf-8") == "50% off\n\n"

    def test_config_file_applied(self, workdir):
        (workdir / ".md2tex.toml").write_text('[latex]\nfigure_placement = "htbp"\n', encoding="utf-8")
        (workdir / "f.md").write_text("![A](a.png)", encoding="utf-8")
        assert main(["f.md"]) == EXIT_SUCCESS
        assert "\\begin{figure}[htbp]" in (workdir / "f.tex").read_text(encoding="utf-8")

    def test_no_config_ignores_discovered_file(self, workdir):
        (workdir / ".md2tex.toml").write_text('[latex]\nfigure_placement = "htbp"\n', encoding="utf-8")
        (workdir / "f.md").write_text("![A](a.png)", encoding="utf-8")
        assert main(["f.md", "--no-config"]) == EXIT_SUCCESS
        assert "\\begin{figure}[h]" in (workdir / "f.tex").read_text(encoding="utf-8")

    def test_invalid_config(self, workdir, capsys):
        config = workdir / "bad.toml"
        config.write_text("[latex]\nunknown_key = 1\n", encoding="utf-8")
        (workdir / "f.md").write_text("x", encoding="utf-8")
        assert main(["f.md", "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "unknown_key" in capsys.readouterr().err
        assert not (workdir / "f.tex").exists()


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parsing."""

    def test_boolean_flags_default_to_none(self, clean_env):
        args = create_parser().parse_args(["in.md"])
        assert args.restore_math is None
        assert args.parse_math is None
        assert args.output is None

    def test_flag_sets_false(self, clean_env):
        args = create_parser().parse_args(["in.md", "--no-parse-tables"])
        assert args.parse_tables is False

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("md2tex ")

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("MD2TEX_LOG_LEVEL", "DEBUG")
        assert create_parser().parse_args(["in.md"]).log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("markdown", [("mistune", ">=3.0.0")]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ConfigError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x.md"), EXIT_FILE_ERROR),
            (ParsingError("bad bytes"), EXIT_PARSING_ERROR),
            (OutputWriteError("x.tex"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        assert get_exit_code_for_exception(exception) == code
