"""Exact phrase matching with the Knuth-Morris-Pratt search."""

from typing import List

from .log import base_logger
from .normalizer import normalize, split_words
from .types import PhraseMatch

logger = base_logger.getChild('phrase')


def build_lps_table(pattern: str) -> List[int]:
    """
    Longest proper prefix of pattern[:i + 1] that is also its suffix, for every i.

    Args:
        pattern: Non-empty search pattern

    Returns:
        Failure table of the same length as pattern
    """
    m = len(pattern)
    lps = [0] * m
    length, i = 0, 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> List[int]:
    """
    Find every start offset of pattern in text, overlapping occurrences included.

    Args:
        text: Text to scan
        pattern: Non-empty pattern

    Returns:
        Start offsets in increasing order
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    lps = build_lps_table(pattern)
    matches = []
    n, m = len(text), len(pattern)
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            matches.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1
    return matches


def extract_phrases(text: str, phrase_length: int) -> List[str]:
    """
    Unique phrases of phrase_length consecutive words, in first-seen order.

    A phrase repeated in text is returned once.
    """
    if phrase_length <= 0:
        raise ValueError("phrase_length must be positive")

    words = split_words(text)
    windows = (
        ' '.join(words[i:i + phrase_length])
        for i in range(len(words) - phrase_length + 1)
    )
    return list(dict.fromkeys(windows))


class PhraseMatcher:
    """Counts occurrences in text2 of the word phrases of text1."""

    def __init__(self, phrase_length: int = 3):
        if phrase_length <= 0:
            raise ValueError("phrase_length must be positive")
        self.phrase_length = phrase_length

    def find(self, text1: str, text2: str) -> List[PhraseMatch]:
        """
        Locate the phrases of normalized text1 inside normalized text2.

        Args:
            text1: Normalized text the phrases are taken from
            text2: Normalized text that is searched

        Returns:
            PhraseMatch for every phrase found at least once
        """
        phrases = extract_phrases(text1, self.phrase_length)
        found = []
        for phrase in phrases:
            positions = kmp_search(text2, phrase)
            if positions:
                found.append(PhraseMatch(phrase=phrase, positions=positions))

        logger.debug(f"{len(found)} of {len(phrases)} unique phrases found in text2")
        return found

    def count(self, text1: str, text2: str) -> int:
        """Total occurrences in text2 across the unique phrases of text1."""
        return sum(match.count for match in self.find(text1, text2))


def count_phrase_matches(text1: str, text2: str, phrase_length: int = 3) -> int:
    """
    Count phrase matches between two raw texts.

    Args:
        text1: Raw text the phrases are taken from
        text2: Raw text that is searched
        phrase_length: Words per phrase

    Returns:
        Total number of occurrences
    """
    matcher = PhraseMatcher(phrase_length)
    return matcher.count(normalize(text1), normalize(text2))
