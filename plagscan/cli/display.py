"""Rich-based display module for comparison results."""

from typing import Optional
from rich.console import Console
from rich.text import Text
from rich.style import Style
from rich.table import Table

from ..core.types import PlagiarismLevel, PlagiarismResult


def create_console() -> Console:
    """Create a rich Console instance."""
    return Console()


def get_level_style(level: PlagiarismLevel) -> Style:
    """
    Get color style for a plagiarism level.

    Args:
        level: PlagiarismLevel of the result

    Returns:
        Rich Style object
    """
    if level == PlagiarismLevel.HIGH:
        return Style(color="red", bold=True)
    elif level == PlagiarismLevel.MODERATE:
        return Style(color="yellow", bold=True)
    elif level == PlagiarismLevel.LOW:
        return Style(color="cyan", bold=True)
    return Style(color="green", bold=True)


def highlight_substring(text: str, substring: str, max_length: int = 300) -> Text:
    """
    Highlight the first occurrence of substring in text.

    Args:
        text: The text to show
        substring: The part to highlight
        max_length: Maximum length of the shown text

    Returns:
        Rich Text object with the highlight
    """
    pos = text.find(substring) if substring else -1
    if pos == -1:
        shown = text[:max_length] + ("..." if len(text) > max_length else "")
        return Text(shown)

    # Center the window on the match
    end = pos + len(substring)
    context = max(0, (max_length - len(substring)) // 2)
    start = max(0, pos - context)
    stop = min(len(text), max(end, start + max_length))

    rich_text = Text()
    if start > 0:
        rich_text.append("...")
    rich_text.append(text[start:pos])
    rich_text.append(text[pos:end], style="bold yellow")
    rich_text.append(text[end:stop])
    if stop < len(text):
        rich_text.append("...")
    return rich_text


def summary_table(result: PlagiarismResult) -> Table:
    """Two-column table with the counts of a result."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("field", style="dim")
    table.add_column("value")
    table.add_row("Similarity", Text(f"{result.similarity:.2f}%", style=get_level_style(result.level)))
    table.add_row("Substring matches", str(result.rolling_matches))
    table.add_row("Phrase matches", str(result.phrase_matches))
    table.add_row("Matched characters", f"{result.matched_chars:,} / {result.text1_length:,}")
    table.add_row("Longest substring", f"{result.largest_substring_length} characters")
    table.add_row("Level", Text(result.level.value, style=get_level_style(result.level)))
    return table


def display_result(
    result: PlagiarismResult,
    normalized_text1: Optional[str] = None,
    output_path: Optional[str] = None
):
    """
    Display a comparison result with rich formatting.

    Args:
        result: PlagiarismResult object
        normalized_text1: Normalized text1, used to show the longest match in context
        output_path: Path where the report was saved, if any
    """
    console = create_console()

    console.print("Analysis complete!", style="bold green")
    console.print()
    console.print(summary_table(result))
    console.print()

    if result.largest_substring:
        console.print("Longest shared substring:", style="bold")
        if normalized_text1:
            console.print(highlight_substring(normalized_text1, result.largest_substring))
        else:
            console.print(f"\"{result.largest_substring}\"", style="yellow")
        console.print()
    else:
        console.print("No shared substring found.", style="bold green")
        console.print()

    if output_path:
        console.print(f"Full report saved to: {output_path}", style="cyan")
