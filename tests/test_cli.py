"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from plagscan.cli.main import cli
from plagscan.core.detector import PlagiarismDetector

TEXT1 = "Machine learning is powerful"
TEXT2 = "Machine learning is very powerful and useful"


class TestCli:
    """Test cases for the plagscan commands."""

    def test_demo(self):
        result = CliRunner().invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "Similarity Percentage:" in result.output
        assert "Plagiarism Level:" in result.output

    def test_quick_compare(self):
        result = CliRunner().invoke(cli, ["quick-compare", TEXT1, TEXT2, "--min-size", "5"])
        assert result.exit_code == 0
        assert "Similarity Percentage: 100.00%" in result.output
        assert "Rolling Hash Substring Matches: 2" in result.output
        assert "Largest Substring: \"machine learning is \"" in result.output
        assert "Plagiarism Level: HIGH" in result.output

    def test_invalid_min_size(self):
        result = CliRunner().invoke(cli, ["quick-compare", TEXT1, TEXT2, "--min-size", "0"])
        assert result.exit_code == 1

    def test_compare_json(self, tmp_path):
        source = tmp_path / "a.txt"
        target = tmp_path / "b.txt"
        source.write_text(TEXT2, encoding="utf-8")
        target.write_text(TEXT1, encoding="utf-8")

        result = CliRunner().invoke(cli, ["compare", str(source), str(target), "-f", "json", "-m", "5"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["largest_substring"] == "machine learning is "
        assert 0 < data["similarity"] < 100

    def test_compare_text_with_output(self, tmp_path):
        source = tmp_path / "a.txt"
        target = tmp_path / "b.txt"
        output = tmp_path / "report.txt"
        source.write_text(TEXT1, encoding="utf-8")
        target.write_text(TEXT2, encoding="utf-8")

        result = CliRunner().invoke(
            cli, ["compare", str(source), str(target), "-f", "text", "-m", "5", "-o", str(output)]
        )
        assert result.exit_code == 0
        assert "TEXT OVERLAP REPORT" in result.output
        assert "Plagiarism Level: HIGH" in output.read_text(encoding="utf-8")

    def test_compare_rich(self, tmp_path):
        source = tmp_path / "a.txt"
        target = tmp_path / "b.txt"
        source.write_text(TEXT1, encoding="utf-8")
        target.write_text(TEXT2, encoding="utf-8")

        result = CliRunner().invoke(cli, ["compare", str(source), str(target), "-m", "5"])
        assert result.exit_code == 0
        assert "Analysis complete!" in result.output
        assert "Longest shared substring:" in result.output

    def test_analyze(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("The cat, sat on the mat!", encoding="utf-8")

        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 0
        assert "Normalized length: 22 characters" in result.output
        assert "Words: 6" in result.output
        assert "Unique 3-word phrases: 4" in result.output

    def test_quick_compare_uses_environment_defaults(self, monkeypatch):
        """PLAGSCAN_MIN_SIZE applies when --min-size is not given."""
        monkeypatch.setenv("PLAGSCAN_MIN_SIZE", "5")
        result = CliRunner().invoke(cli, ["quick-compare", TEXT1, TEXT2])
        assert result.exit_code == 0
        assert "Similarity Percentage: 100.00%" in result.output

    def test_option_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("PLAGSCAN_MIN_SIZE", "5")
        result = CliRunner().invoke(cli, ["quick-compare", TEXT1, TEXT2, "--min-size", "30"])
        assert result.exit_code == 0
        assert "Similarity Percentage: 0.00%" in result.output

    def test_analyze_uses_environment_phrase_length(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PLAGSCAN_PHRASE_LENGTH", "2")
        path = tmp_path / "doc.txt"
        path.write_text("The cat, sat on the mat!", encoding="utf-8")

        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 0
        assert "Unique 2-word phrases: 5" in result.output

    def test_invalid_environment_value(self, monkeypatch):
        """A malformed environment value is reported, not raised."""
        monkeypatch.setenv("PLAGSCAN_MIN_SIZE", "abc")
        result = CliRunner().invoke(cli, ["demo"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)

    def test_compare_rich_reads_each_file_once(self, monkeypatch, tmp_path):
        """Rich output reuses the text already read; read errors exit cleanly."""
        source = tmp_path / "a.txt"
        target = tmp_path / "b.txt"
        source.write_text(TEXT1, encoding="utf-8")
        target.write_text(TEXT2, encoding="utf-8")

        calls = []
        original = PlagiarismDetector.read_file

        def counting_read(self, file_path):
            calls.append(file_path)
            return original(self, file_path)

        monkeypatch.setattr(PlagiarismDetector, "read_file", counting_read)
        result = CliRunner().invoke(cli, ["compare", str(source), str(target), "-m", "5"])
        assert result.exit_code == 0
        assert calls == [str(source), str(target)]

        def failing_read(self, file_path):
            raise ValueError(f"Could not decode file {file_path} with any known encoding")

        monkeypatch.setattr(PlagiarismDetector, "read_file", failing_read)
        result = CliRunner().invoke(cli, ["compare", str(source), str(target)])
        assert result.exit_code == 1
        assert "Could not decode file" in result.output
