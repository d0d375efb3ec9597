"""Integration tests for the command-line entry point."""

import json

from loguru import logger
import pytest

from keyla.__main__ import main


@pytest.fixture
def dictionaries_dir(tmp_path):
    base = tmp_path / "dictionaries"
    (base / "english").mkdir(parents=True)
    (base / "italian").mkdir()
    (base / "english" / "common.txt").write_text("the\nof\nand\nto\nin\n", encoding="utf-8")
    (base / "english" / "programming.txt").write_text("def\nclass\nlambda\n", encoding="utf-8")
    (base / "italian" / "comune.txt").write_text("il\ndi\nche\n", encoding="utf-8")
    return base


class TestCliIntegration:
    """Integration tests for python -m keyla."""

    @pytest.mark.slow
    def test_list_prints_dictionaries(self, dictionaries_dir, capsys):
        """--list prints every dictionary as language/name."""
        main(["--dictionaries-dir", str(dictionaries_dir), "--list"])
        assert capsys.readouterr().out.split() == [
            "english/common",
            "english/programming",
            "italian/comune",
        ]

    @pytest.mark.slow
    def test_compose_prints_requested_word_count(self, dictionaries_dir, capsys):
        """Composing prints at most word-count words on one line."""
        main(["--dictionaries-dir", str(dictionaries_dir), "--source", "common", "--word-count", "3"])
        assert len(capsys.readouterr().out.split()) == 3

    @pytest.mark.slow
    def test_same_seed_same_output(self, dictionaries_dir, capsys):
        """Two runs with the same seed print the same words."""
        argv = [
            "--dictionaries-dir",
            str(dictionaries_dir),
            "--source",
            "common",
            "--merge",
            "randomMix",
            "programming",
            "--seed",
            "11",
        ]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first

    @pytest.mark.slow
    def test_merger_parameters_from_flags(self, dictionaries_dir, capsys):
        """Probabilistic merging draws merge-size words."""
        main(
            [
                "--dictionaries-dir",
                str(dictionaries_dir),
                "--source",
                "common",
                "--merge",
                "probabilistic",
                "programming",
                "--probability",
                "0.5",
                "--merge-size",
                "4",
            ]
        )
        assert len(capsys.readouterr().out.split()) == 4

    @pytest.mark.slow
    def test_modifiers_are_applied(self, dictionaries_dir, capsys):
        """Modifiers transform every printed word."""
        main(
            [
                "--dictionaries-dir",
                str(dictionaries_dir),
                "--source",
                "programming",
                "--modifier",
                "uppercase",
                "--modifier",
                "addSuffix:!",
            ]
        )
        assert sorted(capsys.readouterr().out.split()) == ["CLASS!", "DEF!", "LAMBDA!"]

    @pytest.mark.slow
    def test_language_from_config_file(self, dictionaries_dir, tmp_path, capsys):
        """The JSON config selects dictionaries and language."""
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps({"dictionaries_dir": str(dictionaries_dir), "default_language": "italian"}),
            encoding="utf-8",
        )
        main(["-c", str(config), "--source", "comune"])
        assert sorted(capsys.readouterr().out.split()) == ["che", "di", "il"]

    @pytest.mark.slow
    def test_unknown_dictionary_exits_with_error(self, dictionaries_dir):
        """An unknown source returns a non-zero status."""
        assert main(["--dictionaries-dir", str(dictionaries_dir), "--source", "klingon"]) == 1

    @pytest.mark.slow
    def test_unknown_modifier_exits_with_error(self, dictionaries_dir):
        """An unknown modifier returns a non-zero status."""
        argv = ["--dictionaries-dir", str(dictionaries_dir), "--source", "common", "--modifier", "x"]
        assert main(argv) == 1

    @pytest.mark.slow
    def test_exhausted_merge_exits_with_error(self, dictionaries_dir):
        """A probabilistic merge larger than both files returns a non-zero status."""
        argv = [
            "--dictionaries-dir",
            str(dictionaries_dir),
            "--source",
            "common",
            "--merge",
            "probabilistic",
            "programming",
            "--probability",
            "0.5",
            "--merge-size",
            "50",
        ]
        assert main(argv) == 1

    @pytest.mark.slow
    def test_missing_source_is_usage_error(self, dictionaries_dir):
        """Running without --source or --list is a usage error."""
        with pytest.raises(SystemExit):
            main(["--dictionaries-dir", str(dictionaries_dir)])

    @pytest.mark.slow
    def test_log_file_receives_messages(self, dictionaries_dir, tmp_path):
        """--log-file writes log messages to the given file."""
        log_file = tmp_path / "logs" / "keyla.log"
        main(
            [
                "--dictionaries-dir",
                str(dictionaries_dir),
                "--source",
                "klingon",
                "--log-file",
                str(log_file),
            ]
        )
        logger.remove()
        assert "klingon" in log_file.read_text(encoding="utf-8")
