"""Text normalization shared by both matchers."""

from typing import List


def normalize(text: str) -> str:
    """
    Canonicalize raw text for comparison.

    Alphanumeric characters are lowercased, every whitespace character
    becomes a single space and everything else is dropped. Runs of spaces
    are kept as they are and nothing is trimmed.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    chars = []
    for c in text:
        if c.isalnum():
            # lower() may expand to several code points (e.g. 'İ')
            chars.extend(x for x in c.lower() if x.isalnum())
        elif c.isspace():
            chars.append(' ')
    return ''.join(chars)


def split_words(text: str) -> List[str]:
    """Split normalized text into words, discarding empty tokens."""
    return text.split()
