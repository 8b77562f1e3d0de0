"""Tests for jays.vcs.runner module."""

import subprocess
from unittest.mock import MagicMock

import pytest

from jays.vcs.exceptions import CommandError, MissingDependencyError
from jays.vcs.runner import _command_succeeds, _run_command, _run_passthrough


class TestRunCommand:
    """Tests for _run_command function."""

    def test_successful_command(self, mocker):
        """Test successful command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_result.returncode = 0

        mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_command(["jj", "bookmark", "list"])
        assert result == "output"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises CommandError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "jj", stderr="error: no repo\n")
        )

        with pytest.raises(CommandError) as exc_info:
            _run_command(["jj", "bookmark", "list"])

        assert "Command failed: jj bookmark list" in str(exc_info.value)
        assert exc_info.value.command == ["jj", "bookmark", "list"]
        assert exc_info.value.stderr == "error: no repo"
        assert exc_info.value.returncode == 1

    def test_missing_executable_raises_error(self, mocker):
        """Test that a missing executable raises MissingDependencyError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(MissingDependencyError) as exc_info:
            _run_command(["jj", "st"])

        assert "jj is not installed" in str(exc_info.value)


class TestRunPassthrough:
    """Tests for _run_passthrough function."""

    def test_success_returns_none(self, mock_subprocess_run):
        """Test that a zero exit status is accepted."""
        mock_subprocess_run.return_value = MagicMock(returncode=0)

        assert _run_passthrough(["jj", "st"]) is None
        mock_subprocess_run.assert_called_once_with(["jj", "st"], check=False)

    def test_nonzero_exit_raises_error(self, mock_subprocess_run):
        """Test that a non-zero exit status raises CommandError."""
        mock_subprocess_run.return_value = MagicMock(returncode=2)

        with pytest.raises(CommandError) as exc_info:
            _run_passthrough(["jj", "squash"])

        assert exc_info.value.returncode == 2
        assert exc_info.value.command == ["jj", "squash"]

    def test_missing_executable_raises_error(self, mock_subprocess_run):
        """Test that a missing executable raises MissingDependencyError."""
        mock_subprocess_run.side_effect = FileNotFoundError()

        with pytest.raises(MissingDependencyError):
            _run_passthrough(["git", "switch", "main"])


class TestCommandSucceeds:
    """Tests for _command_succeeds function."""

    def test_zero_exit(self, mock_subprocess_run):
        """Test that exit status 0 is success."""
        mock_subprocess_run.return_value = MagicMock(returncode=0)
        assert _command_succeeds(["gh", "auth", "status"]) is True

    def test_nonzero_exit(self, mock_subprocess_run):
        """Test that a non-zero exit status is failure."""
        mock_subprocess_run.return_value = MagicMock(returncode=1)
        assert _command_succeeds(["gh", "auth", "status"]) is False

    def test_missing_executable(self, mock_subprocess_run):
        """Test that a missing executable is failure, not an exception."""
        mock_subprocess_run.side_effect = FileNotFoundError()
        assert _command_succeeds(["gh", "auth", "status"]) is False
