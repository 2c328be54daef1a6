"""Command-line interface for plagscan."""

import sys
import logging
from typing import Optional
from pathlib import Path
import click
from pydantic import ValidationError

from ..core import (
    Config,
    PlagiarismDetector,
    ReportGenerator,
    extract_phrases,
    format_report,
    normalize,
    split_words,
)
from ..core.log import set_logger
from .display import display_result

SAMPLE_TEXT1 = (
    "Artificial intelligence and machine learning are transforming the world. "
    "They help automate tasks and provide valuable insights in many domains."
)
SAMPLE_TEXT2 = (
    "Machine learning and artificial intelligence are transforming the world and helping automate tasks. "
    "They provide valuable insights for many industries."
)


def setup_logging(verbose: bool):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    set_logger('plagscan', level=level, datefmt='%H:%M:%S', remove_handlers=True)


def build_config(min_size: Optional[int] = None, phrase_length: Optional[int] = None) -> Config:
    """Create a Config from the CLI options that were given, exiting on invalid values."""
    overrides = {"min_size": min_size, "phrase_length": phrase_length}
    try:
        return Config(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        click.echo(f"Error: invalid settings: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="plagscan")
def cli():
    """Text overlap detection using rolling-hash substrings and KMP phrase matching."""
    pass


@cli.command()
@click.argument('source_file', type=click.Path(exists=True, path_type=Path))
@click.argument('target_file', type=click.Path(exists=True, path_type=Path))
@click.option('--output', '-o', type=click.Path(path_type=Path), help='Output file path')
@click.option('--format', '-f', type=click.Choice(['rich', 'text', 'json']), default='rich', help='Output format')
@click.option('--min-size', '-m', type=int, default=None, help='Minimum shared substring length [env: PLAGSCAN_MIN_SIZE, default 10]')
@click.option('--phrase-length', '-p', type=int, default=None, help='Words per phrase [env: PLAGSCAN_PHRASE_LENGTH, default 3]')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def compare(
    source_file: Path,
    target_file: Path,
    output: Path,
    format: str,
    min_size: int,
    phrase_length: int,
    verbose: bool
):
    """
    Compare two files for textual overlap.

    SOURCE_FILE: Path to the document being checked
    TARGET_FILE: Path to the document to check against
    """
    setup_logging(verbose)
    config = build_config(min_size, phrase_length)
    detector = PlagiarismDetector(config)

    try:
        source_text = detector.read_file(str(source_file))
        target_text = detector.read_file(str(target_file))
    except (OSError, ValueError) as e:
        click.echo(f"Error during comparison: {str(e)}", err=True)
        sys.exit(1)

    result = detector.compare_texts(source_text, target_text, source=str(source_file), target=str(target_file))

    generator = ReportGenerator()
    if output:
        report_format = 'json' if format == 'json' else 'text'
        generator.save_report(result, str(output), report_format)

    if format == 'json':
        click.echo(generator.generate_json(result))
    elif format == 'text':
        click.echo(generator.generate_text(result))
    else:
        display_result(result, normalize(source_text), str(output) if output else None)


@cli.command()
@click.argument('text1')
@click.argument('text2')
@click.option('--min-size', '-m', type=int, default=None, help='Minimum shared substring length [env: PLAGSCAN_MIN_SIZE, default 10]')
@click.option('--phrase-length', '-p', type=int, default=None, help='Words per phrase [env: PLAGSCAN_PHRASE_LENGTH, default 3]')
def quick_compare(text1: str, text2: str, min_size: int, phrase_length: int):
    """
    Quick comparison of two text strings.

    TEXT1: Text being checked
    TEXT2: Text to check against
    """
    config = build_config(min_size, phrase_length)
    result = PlagiarismDetector(config).compare_texts(text1, text2)
    click.echo(format_report(result))


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, path_type=Path))
@click.option('--phrase-length', '-p', type=int, default=None, help='Words per phrase [env: PLAGSCAN_PHRASE_LENGTH, default 3]')
def analyze(file_path: Path, phrase_length: int):
    """
    Show normalization statistics for a file without running a comparison.

    FILE_PATH: Path to the file to analyze
    """
    config = build_config(phrase_length=phrase_length)

    try:
        text = PlagiarismDetector(config).read_file(str(file_path))
    except (OSError, ValueError) as e:
        click.echo(f"Error reading file: {str(e)}", err=True)
        sys.exit(1)

    normalized = normalize(text)
    words = split_words(normalized)
    phrases = extract_phrases(normalized, config.phrase_length)

    click.echo(f"File: {file_path}")
    click.echo(f"   Raw length: {len(text):,} characters")
    click.echo(f"   Normalized length: {len(normalized):,} characters")
    click.echo(f"   Words: {len(words):,}")
    click.echo(f"   Unique {config.phrase_length}-word phrases: {len(phrases):,}")

    if normalized:
        preview = normalized[:100]
        if len(normalized) > 100:
            preview += "..."
        click.echo(f"\n   Preview: {preview}")


@cli.command()
def demo():
    """Compare the two built-in sample documents."""
    click.echo("=== Plagiarism Checker using Rolling Hash + KMP ===")
    result = PlagiarismDetector(build_config()).compare_texts(SAMPLE_TEXT1, SAMPLE_TEXT2)
    click.echo(format_report(result))


if __name__ == "__main__":
    cli()
