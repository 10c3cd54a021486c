"""Tests for compiler command assembly and process invocation."""

import re
from pathlib import Path
from unittest.mock import patch

import pytest

from minibuild.build.compiler import Compiler, run_command
from minibuild.build.errors import CompilationError, ProcessError


class TestBuildCommand:
    """Test Compiler.build_command()."""

    def test_sources_then_output_flag(self):
        """Test argument order: executable, sources, flag, destination."""
        compiler = Compiler()
        cmd = compiler.build_command(
            [Path("framework/src/a/A.java"), Path("framework/src/B.java")],
            Path("dist/framework"),
        )
        assert cmd == [
            "javac",
            str(Path("framework/src/a/A.java")),
            str(Path("framework/src/B.java")),
            "-d",
            str(Path("dist/framework")),
        ]

    def test_custom_executable_and_flag(self):
        """Test non-default compiler settings."""
        compiler = Compiler("kotlinc", "-output")
        assert compiler.build_command([Path("Main.kt")], Path("out")) == ["kotlinc", "Main.kt", "-output", "out"]

    def test_no_sources(self):
        """Test that an empty source list still produces a command."""
        assert Compiler().build_command([], Path("out")) == ["javac", "-d", "out"]


class TestCompile:
    """Test Compiler.compile()."""

    @patch("minibuild.build.compiler.run_command")
    def test_creates_destination_and_runs(self, mock_run, tmp_path):
        """Test that the destination exists before the compiler is run."""
        dest = tmp_path / "dist" / "app"

        def check_dest(cmd):
            assert dest.is_dir()

        mock_run.side_effect = check_dest
        Compiler().compile([tmp_path / "Main.java"], dest)

        mock_run.assert_called_once_with(["javac", str(tmp_path / "Main.java"), "-d", str(dest)])

    @patch("minibuild.build.compiler.run_command")
    def test_uncreatable_destination_raises(self, mock_run, tmp_path):
        """Test that a destination blocked by a file is a process error."""
        blocker = tmp_path / "dist"
        blocker.write_text("in the way")

        with pytest.raises(ProcessError):
            Compiler().compile([], blocker / "app")

        mock_run.assert_not_called()


class TestRunCommand:
    """Test run_command()."""

    @patch("minibuild.build.compiler.run_inherited", return_value=0)
    def test_success_prints_timing(self, mock_run, capsys):
        """Test that a zero exit prints the labeled timing line."""
        run_command(["javac", "A.java", "-d", "out"])

        mock_run.assert_called_once_with(["javac", "A.java", "-d", "out"])
        out = capsys.readouterr().out
        assert re.fullmatch(r"Command 'javac A\.java -d out' executed in \d+\.\d\d seconds\n", out)

    @patch("minibuild.build.compiler.run_inherited", return_value=2)
    def test_nonzero_exit_raises(self, mock_run, capsys):
        """Test that a non-zero exit is a compilation error naming the command."""
        with pytest.raises(CompilationError) as exc_info:
            run_command(["javac", "A.java", "-d", "out"])

        assert exc_info.value.exit_code == 2
        assert exc_info.value.command == ["javac", "A.java", "-d", "out"]
        assert str(exc_info.value) == "Command failed (exitCode=2): javac A.java -d out"
        assert capsys.readouterr().out == ""

    @patch("minibuild.build.compiler.run_inherited", side_effect=FileNotFoundError(2, "No such file or directory"))
    def test_missing_executable_raises(self, mock_run):
        """Test that a launch failure is a process error."""
        with pytest.raises(ProcessError) as exc_info:
            run_command(["no-such-compiler", "-d", "out"])

        assert str(exc_info.value).startswith("Cannot run command no-such-compiler: FileNotFoundError")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @patch("minibuild.build.compiler.run_inherited", side_effect=KeyboardInterrupt)
    def test_interrupted_wait_raises(self, mock_run):
        """Test that an interrupted wait is a process error."""
        with pytest.raises(ProcessError) as exc_info:
            run_command(["javac", "-d", "out"])

        assert str(exc_info.value) == "Cannot run command javac: KeyboardInterrupt"
