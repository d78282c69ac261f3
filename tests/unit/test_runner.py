"""Tests for ChezmoiRunner class."""

from unittest.mock import MagicMock, patch

import pytest

from chezdesk.chezmoi.runner import ChezmoiRunner
from chezdesk.chezmoi.types import ChezmoiError, CommandResult


class TestRun:
    """Tests for the run method."""

    def test_success_captures_output(self):
        """Zero exit gives a successful result with both streams."""
        runner = ChezmoiRunner()

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(
                returncode=0, stdout=".bashrc\n", stderr=""
            )
            result = runner.run("managed")

        assert result == CommandResult(
            stdout=".bashrc\n", stderr="", success=True
        )
        assert mock_run.call_args[0][0] == ["chezmoi", "managed"]

    def test_decodes_utf8_with_replacement(self):
        """Output is decoded as UTF-8, replacing invalid bytes."""
        runner = ChezmoiRunner()

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
            runner.run("status")

        kwargs = mock_run.call_args[1]
        assert kwargs["capture_output"] is True
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"
        assert kwargs["check"] is False

    def test_non_zero_exit_is_not_an_error(self):
        """A failing command is reported, not raised."""
        runner = ChezmoiRunner()

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(
                returncode=1, stdout="", stderr="chezmoi: .nope: not managed\n"
            )
            result = runner.run("diff", "/home/u/.nope")

        assert result.success is False
        assert "not managed" in result.stderr

    def test_missing_binary_raises(self):
        """A process that cannot start raises ChezmoiError."""
        runner = ChezmoiRunner()

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError(
                2, "No such file or directory"
            )
            with pytest.raises(ChezmoiError, match="Failed to run chezmoi"):
                runner.run("status")

    def test_permission_denied_raises(self):
        runner = ChezmoiRunner(binary="/opt/chezmoi")

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.side_effect = PermissionError(13, "Permission denied")
            with pytest.raises(ChezmoiError, match="/opt/chezmoi"):
                runner.run("status")

    def test_global_args_come_before_subcommand(self):
        """--source and similar flags precede the subcommand."""
        runner = ChezmoiRunner(
            binary="/usr/bin/chezmoi",
            global_args=["--source", "/src/dots"],
        )

        with patch("chezdesk.chezmoi.runner.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
            runner.run("status")

        assert mock_run.call_args[0][0] == [
            "/usr/bin/chezmoi",
            "--source",
            "/src/dots",
            "status",
        ]


class TestGit:
    """Tests for the git method."""

    def test_arguments_follow_double_dash(self):
        """git arguments are separated from chezmoi's by '--'."""
        runner = ChezmoiRunner()

        with patch.object(runner, "run") as mock_run:
            runner.git("status", "--porcelain")

        mock_run.assert_called_once_with("git", "--", "status", "--porcelain")
