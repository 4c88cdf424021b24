"""
Tests for the command-line driver.

Verified: 2026-10-18
"""

import json

import pytest

from exam_toolkit.cli import build_parser, main


class TestParser:

    def test_parse_when_topic_unknown_then_exits(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["generate", "--topic", "Cooking"])

        assert "Unknown topic" in capsys.readouterr().err

    def test_parse_when_topic_loose_label_then_resolved(self):
        args = build_parser().parse_args(["generate", "--topic", "linked_lists"])

        assert [t.value for t in args.topics] == ["Linked Lists"]


class TestMain:

    def test_generate_when_defaults_then_lists_questions(self, capsys):
        code = main(["--seed", "1", "generate", "-n", "6"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("(id=") == 6

    def test_generate_when_shortfall_then_reported_on_stderr(self, capsys):
        code = main(["--seed", "1", "generate", "-n", "50"])

        captured = capsys.readouterr()
        assert code == 0
        assert "Only 10 of 50" in captured.err

    def test_generate_when_answers_then_answer_lines(self, capsys):
        main(["--seed", "1", "generate", "-n", "10", "--topic", "Searching", "--answers"])

        out = capsys.readouterr().out
        assert "a) O(n)" in out
        assert "Answer: O(log n)" in out

    def test_generate_when_zero_weights_then_exit_two(self, capsys):
        code = main(["generate", "--easy", "0", "--medium", "0", "--hard", "0"])

        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_stats_when_samples_then_totals(self, capsys):
        code = main(["stats"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Total: 10" in out
        assert "Medium: 4" in out

    def test_related_when_unknown_id_then_exit_one(self, capsys):
        assert main(["related", "nope"]) == 1
        assert "Unknown question id" in capsys.readouterr().err

    def test_related_when_no_neighbours_then_message(self, capsys):
        assert main(["related", "1"]) == 0
        assert "No related questions" in capsys.readouterr().out

    def test_bank_when_jsonl_file_then_loaded(self, tmp_path, capsys):
        # Arrange
        path = tmp_path / "bank.jsonl"
        rows = [
            {"id": f"g{i}", "text": f"Graph question {i}", "difficulty": "Hard", "topic": "Graphs"}
            for i in range(3)
        ]
        path.write_text("\n".join(json.dumps(r) for r in rows) + "\n", encoding="utf-8")

        # Act
        code = main(["--bank", str(path), "--seed", "4", "related", "g0"])

        # Assert
        out = capsys.readouterr().out
        assert code == 0
        assert out.count("(id=g") == 2

    def test_bank_when_missing_file_then_exit_two(self, tmp_path, capsys):
        code = main(["--bank", str(tmp_path / "missing.jsonl"), "stats"])

        assert code == 2
        assert "Could not load questions" in capsys.readouterr().err

    def test_bank_when_invalid_utf8_then_exit_two(self, tmp_path, capsys):
        path = tmp_path / "bank.jsonl"
        path.write_bytes(b'{"id": "\xff"}\n')

        code = main(["--bank", str(path), "stats"])

        assert code == 2
        assert "Error parsing line 1" in capsys.readouterr().err

    def test_bank_when_directory_then_exit_two(self, tmp_path, capsys):
        code = main(["--bank", str(tmp_path), "stats"])

        assert code == 2
        assert "Could not load questions" in capsys.readouterr().err
