"""Tests for the passmint command-line interface."""

from unittest.mock import patch

from passmint import REVEAL_STAGGER_MS
from passmint.cli import main


def _passwords(out: str) -> list[str]:
    return [line.split()[0] for line in out.splitlines() if line.strip()]


class TestGenerate:
    def test_length_and_count(self, capsys):
        assert main(["generate", "-n", "10", "-c", "3"]) == 0
        pwds = _passwords(capsys.readouterr().out)
        assert len(pwds) == 3
        assert all(len(p) == 10 for p in pwds)

    def test_length_clamped(self, capsys):
        main(["generate", "-n", "99"])
        assert len(_passwords(capsys.readouterr().out)[0]) == 32

    def test_seed_reproducible(self, capsys):
        main(["generate", "--seed", "9", "-a"])
        first = capsys.readouterr().out
        main(["generate", "--seed", "9", "-a"])
        assert capsys.readouterr().out == first

    def test_numbers_only(self, capsys):
        args = ["generate", "-n", "5", "-a", "--no-uppercase", "--no-lowercase", "--no-symbols"]
        main(args)
        out = capsys.readouterr().out
        assert set(_passwords(out)[0]) <= set("23456789")
        assert "Very Weak" in out

    def test_no_selection(self, capsys):
        args = ["generate", "--no-uppercase", "--no-lowercase", "--no-numbers", "--no-symbols"]
        assert main(args) == 0
        captured = capsys.readouterr()
        assert "Select an option" in captured.out
        assert captured.err == ""

    @patch("passmint.cli.copy_password", return_value=True)
    def test_copy(self, mock_copy, capsys):
        main(["generate", "--copy"])
        out = capsys.readouterr().out
        mock_copy.assert_called_once_with(_passwords(out)[0])
        assert "Copied" in out

    @patch("passmint.cli.copy_password", return_value=False)
    def test_copy_failure_still_succeeds(self, mock_copy, capsys):
        assert main(["generate", "--copy"]) == 0
        assert "Could not copy" in capsys.readouterr().err

    @patch("passmint.cli.time.sleep")
    def test_animate(self, mock_sleep, capsys):
        main(["generate", "-n", "8", "--animate"])
        assert mock_sleep.call_count == 8
        mock_sleep.assert_called_with(REVEAL_STAGGER_MS / 1000)
        assert len(_passwords(capsys.readouterr().out)[0]) == 8


class TestScore:
    def test_labels(self, capsys):
        assert main(["score", "aB3!defgh", "alllowercase"]) == 0
        out = capsys.readouterr().out
        assert "Strong" in out
        assert "Medium" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
