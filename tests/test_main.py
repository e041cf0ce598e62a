"""Tests for the command line entry point."""

from pathlib import Path

from escoba.main import main

SAMPLE_RECORD = Path(__file__).parent.parent / "records" / "sample_match.yaml"


class TestMain:
    """Tests for main function."""

    def test_replay(self, capsys):
        assert main([str(SAMPLE_RECORD)]) == 0
        out = capsys.readouterr().out
        assert "MATCH sample_match" in out
        assert "Luis: 5 points" in out
        assert "Winner: Luis" in out

    def test_show_hands_and_log(self, tmp_path, capsys):
        log_path = tmp_path / "match.jsonl"
        code = main([
            str(SAMPLE_RECORD),
            "--show-hands",
            "--match-id",
            "final",
            "--match-log",
            str(log_path),
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "Captured:" in out
        assert "MATCH final" in out
        assert log_path.exists()

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(SAMPLE_RECORD.read_text().replace("rank: 11}]", "rank: 1}]", 1))
        assert main([str(path)]) == 1

    def test_missing_record(self, tmp_path):
        assert main([str(tmp_path / "missing.yaml")]) == 1
