"""Test the command file runner."""

import pytest

from run_commands import main


class TestRunCommands:
    """Tests for run_commands.main."""

    def test_bundled_commands(self, seed_path, capsys):
        """The bundled command file runs against the bundled seed."""
        commands = seed_path.parent / "commands.txt"
        assert main([str(commands), "--data", str(seed_path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "CHILD_ADDED",
            "Dominique Minerva",
            "Victoire Dominique Louis",
            "Darcy Alice",
            "James",
            "PERSON_NOT_FOUND",
            "PERSON_NOT_FOUND",
            "CHILD_ADDITION_FAILED",
            "RELATIONSHIP_NOT_HANDLED",
        ]

    def test_missing_command_file(self, seed_path, tmp_path, capsys):
        """Missing files exit with status 1."""
        assert main([str(tmp_path / "nope.txt"), "--data", str(seed_path)]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_bad_seed(self, tmp_path, capsys):
        """Invalid seeds exit with status 1."""
        seed = tmp_path / "seed.json"
        seed.write_text("[{\"name\": \"Ada\"}]", encoding="utf-8")
        assert main([str(tmp_path / "c.txt"), "--data", str(seed)]) == 1
        assert "Invalid family data" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self, seed_path, capsys):
        """Lower-case log levels are accepted."""
        commands = seed_path.parent / "commands.txt"
        assert main([str(commands), "--data", str(seed_path), "--log-level", "error"]) == 0

    def test_invalid_log_level(self, seed_path):
        """Unknown log levels are rejected by the argument parser."""
        with pytest.raises(SystemExit) as exc:
            main(["--data", str(seed_path), "--log-level", "loud"])
        assert exc.value.code == 2
