"""Score aggregation and report generation for comparison results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any

from .config import Config
from .types import PlagiarismLevel, PlagiarismResult, SubstringMatchResult


def classify_similarity(similarity: float, config: Optional[Config] = None) -> PlagiarismLevel:
    """
    Map a similarity percentage to a plagiarism level.

    Thresholds are exclusive: with the defaults, exactly 70.0 is MODERATE.

    Args:
        similarity: Similarity percentage (0-100)
        config: Supplies the thresholds (defaults if omitted)

    Returns:
        PlagiarismLevel
    """
    config = config or Config()
    if similarity > config.high_threshold:
        return PlagiarismLevel.HIGH
    elif similarity > config.moderate_threshold:
        return PlagiarismLevel.MODERATE
    elif similarity > config.low_threshold:
        return PlagiarismLevel.LOW
    return PlagiarismLevel.NONE


def aggregate(
    substring_result: SubstringMatchResult,
    phrase_matches: int,
    text2_length: int = 0,
    config: Optional[Config] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> PlagiarismResult:
    """
    Merge the outputs of both matchers into one result.

    Args:
        substring_result: Output of SubstringMatcher.match
        phrase_matches: Output of PhraseMatcher.count
        text2_length: Length of normalized text2
        config: Supplies the label thresholds
        metadata: Extra information to attach to the result

    Returns:
        PlagiarismResult
    """
    return PlagiarismResult(
        similarity=substring_result.similarity,
        rolling_matches=substring_result.matched_count,
        phrase_matches=phrase_matches,
        largest_substring_length=substring_result.largest_substring_length,
        largest_substring=substring_result.largest_substring,
        level=classify_similarity(substring_result.similarity, config),
        matched_chars=substring_result.total_matched_chars,
        text1_length=substring_result.text1_length,
        text2_length=text2_length,
        metadata=dict(metadata or {})
    )


def format_report(result: PlagiarismResult) -> str:
    """
    Human-readable summary of a result.

    Args:
        result: PlagiarismResult to describe

    Returns:
        Multi-line text
    """
    lines = [
        f"Similarity Percentage: {result.similarity:.2f}%",
        f"Rolling Hash Substring Matches: {result.rolling_matches}",
        f"KMP Phrase Matches: {result.phrase_matches}",
        f"Largest Matching Substring Length: {result.largest_substring_length}",
        f"Largest Substring: \"{result.largest_substring}\"",
        f"Plagiarism Level: {result.level.value}",
    ]
    return "\n".join(lines)


class ReportGenerator:
    """Generates text and JSON reports for comparison results."""

    def generate_json(self, result: PlagiarismResult, indent: int = 2) -> str:
        """
        Generate JSON format report.

        Args:
            result: PlagiarismResult object
            indent: JSON indentation level

        Returns:
            JSON string
        """
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=indent)

    def generate_text(self, result: PlagiarismResult) -> str:
        """
        Generate plain text format report.

        Args:
            result: PlagiarismResult object

        Returns:
            Plain text report
        """
        lines = []
        lines.append("=" * 60)
        lines.append("TEXT OVERLAP REPORT")
        lines.append("=" * 60)
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")

        # Input information
        lines.append("INPUTS:")
        lines.append(f"  Text 1: {result.metadata.get('source', 'text1')}")
        lines.append(f"          Normalized length: {result.text1_length:,} characters")
        lines.append(f"  Text 2: {result.metadata.get('target', 'text2')}")
        lines.append(f"          Normalized length: {result.text2_length:,} characters")
        lines.append("")

        # Settings
        lines.append("SETTINGS:")
        lines.append(f"  Minimum Substring Size: {result.metadata.get('min_size', 'N/A')}")
        lines.append(f"  Phrase Length: {result.metadata.get('phrase_length', 'N/A')}")
        lines.append("")

        lines.append("RESULTS:")
        for line in format_report(result).splitlines():
            lines.append(f"  {line}")
        lines.append(f"  Matched Characters: {result.matched_chars:,}")

        return "\n".join(lines)

    def save_report(
        self,
        result: PlagiarismResult,
        output_path: str,
        format: str = "text"
    ):
        """
        Save report to file.

        Args:
            result: PlagiarismResult object
            output_path: Path to save the report
            format: Output format (json, text)
        """
        if format == "json":
            content = self.generate_json(result)
        elif format == "text":
            content = self.generate_text(result)
        else:
            raise ValueError(f"Unsupported format: {format}")

        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
