"""Core modules for text overlap detection."""

from .config import Config
from .types import MatchSpan, SubstringMatchResult, PhraseMatch, PlagiarismLevel, PlagiarismResult
from .normalizer import normalize, split_words
from .rolling_hash import RollingHashIndex
from .substring import SubstringMatcher, compute_similarity
from .phrase import PhraseMatcher, build_lps_table, kmp_search, extract_phrases, count_phrase_matches
from .report import ReportGenerator, aggregate, classify_similarity, format_report
from .detector import PlagiarismDetector

__all__ = [
    "Config",
    "MatchSpan",
    "SubstringMatchResult",
    "PhraseMatch",
    "PlagiarismLevel",
    "PlagiarismResult",
    "normalize",
    "split_words",
    "RollingHashIndex",
    "SubstringMatcher",
    "compute_similarity",
    "PhraseMatcher",
    "build_lps_table",
    "kmp_search",
    "extract_phrases",
    "count_phrase_matches",
    "ReportGenerator",
    "aggregate",
    "classify_similarity",
    "format_report",
    "PlagiarismDetector",
]
