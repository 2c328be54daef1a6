"""Rolling-hash substring matching with greedy non-overlapping selection."""

from collections import defaultdict
from typing import Dict, List, Optional

from .config import Config
from .log import base_logger
from .normalizer import normalize
from .report import aggregate
from .rolling_hash import RollingHashIndex, DEFAULT_BASE, DEFAULT_MODULUS
from .types import MatchSpan, SubstringMatchResult, PlagiarismResult

logger = base_logger.getChild('substring')


class SubstringMatcher:
    """
    Finds long substrings of text1 that also occur in text2.

    text1 is scanned left to right. At every unmatched position the longest
    substring of at least min_size characters that also occurs in text2 is
    taken, its characters are marked as matched, and the scan resumes right
    after it. Matches therefore never overlap, and a region is never
    revisited once taken.
    """

    def __init__(
        self,
        min_size: int = 10,
        base: int = DEFAULT_BASE,
        modulus: int = DEFAULT_MODULUS
    ):
        """
        Initialize the matcher.

        Args:
            min_size: Minimum length of a match in characters
            base: Rolling hash base
            modulus: Rolling hash modulus
        """
        if min_size <= 0:
            raise ValueError("min_size must be positive")

        self.min_size = min_size
        self.base = base
        self.modulus = modulus

    def match(self, text1: str, text2: str) -> SubstringMatchResult:
        """
        Match two normalized texts.

        Args:
            text1: Normalized text being checked
            text2: Normalized text it is checked against

        Returns:
            SubstringMatchResult with regions, coverage and longest match
        """
        result = SubstringMatchResult(text1_length=len(text1))
        if not text1 or not text2:
            return result

        index1 = RollingHashIndex(text1, self.base, self.modulus)
        index2 = RollingHashIndex(text2, self.base, self.modulus)
        windows = self._index_windows(index2)

        n1 = len(text1)
        matched = [False] * n1
        i = 0
        while i < n1:
            max_len = self._longest_match_at(index1, index2, windows, i)
            if not max_len:
                i += 1
                continue

            for k in range(i, i + max_len):
                matched[k] = True
            result.spans.append(MatchSpan(start=i, end=i + max_len))
            result.matched_count += 1
            if max_len > result.largest_substring_length:
                result.largest_substring_length = max_len
                result.largest_substring = text1[i:i + max_len]

            i += max_len

        result.total_matched_chars = sum(matched)
        result.similarity = result.total_matched_chars / n1 * 100

        logger.debug(
            f"{result.matched_count} regions, {result.total_matched_chars}/{n1} chars matched, "
            f"longest {result.largest_substring_length}"
        )
        return result

    def _index_windows(self, index: RollingHashIndex) -> Dict[int, List[int]]:
        """Map the hash of every min_size window of the text to its start positions."""
        windows: Dict[int, List[int]] = defaultdict(list)
        for start in range(len(index) - self.min_size + 1):
            windows[index.hash_of(start, start + self.min_size)].append(start)
        return windows

    def _longest_match_at(
        self,
        index1: RollingHashIndex,
        index2: RollingHashIndex,
        windows: Dict[int, List[int]],
        i: int
    ) -> int:
        """
        Length of the longest substring starting at text1[i] that occurs in text2.

        Returns 0 when no such substring reaches min_size.
        """
        n1 = len(index1)
        if i + self.min_size > n1:
            return 0

        candidates = windows.get(index1.hash_of(i, i + self.min_size))
        if not candidates:
            return 0

        best = 0
        n2 = len(index2)
        for pos in candidates:
            limit = min(n1 - i, n2 - pos)
            if limit <= best:
                continue
            length = self._common_prefix(index1, i, index2, pos, limit)
            if length >= self.min_size and length > best:
                best = length
        return best

    @staticmethod
    def _common_prefix(
        index1: RollingHashIndex,
        i: int,
        index2: RollingHashIndex,
        j: int,
        limit: int
    ) -> int:
        """
        Longest common prefix of text1[i:] and text2[j:], capped at limit.

        Binary search on hash agreement gives an upper bound that is exact
        unless hashes collide; the literal comparison settles it.
        """
        lo, hi = 0, limit + 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if index1.hash_of(i, i + mid) == index2.hash_of(j, j + mid):
                lo = mid
            else:
                hi = mid

        text1, text2 = index1.text, index2.text
        if text1[i:i + lo] == text2[j:j + lo]:
            return lo

        logger.debug(f"Hash collision at text1[{i}] / text2[{j}], comparing literally")
        length = 0
        while length < limit and text1[i + length] == text2[j + length]:
            length += 1
        return length


def compute_similarity(
    text1: str,
    text2: str,
    min_size: int = 10,
    config: Optional[Config] = None
) -> PlagiarismResult:
    """
    Rolling-hash similarity of two raw texts.

    The phrase match count of the returned result is 0; PlagiarismDetector
    fills it in when both matchers run.

    Args:
        text1: Raw text being checked
        text2: Raw text it is checked against
        min_size: Minimum length of a shared substring
        config: Hash parameters and label thresholds (defaults if omitted)

    Returns:
        PlagiarismResult
    """
    config = config or Config()
    proc1 = normalize(text1)
    proc2 = normalize(text2)

    matcher = SubstringMatcher(min_size, config.hash_base, config.hash_modulus)
    substring_result = matcher.match(proc1, proc2)
    return aggregate(substring_result, 0, text2_length=len(proc2), config=config)
