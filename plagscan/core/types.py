"""Shared data types and models for the text overlap engine."""

from enum import Enum
from typing import List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class MatchSpan(BaseModel):
    """A half-open range [start, end) into a normalized text."""

    start: int = Field(ge=0, description="First index covered by the match")
    end: int = Field(ge=0, description="Index one past the last covered character")

    model_config = ConfigDict(frozen=True)

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, pos: int) -> bool:
        return self.start <= pos < self.end


class SubstringMatchResult(BaseModel):
    """Outcome of rolling-hash substring matching on normalized texts."""

    matched_count: int = Field(default=0, description="Number of matched regions in text1")
    total_matched_chars: int = Field(default=0, description="Characters of text1 covered by matches")
    largest_substring: str = Field(default="", description="Longest shared substring found")
    largest_substring_length: int = Field(default=0, description="Length of the longest shared substring")
    similarity: float = Field(default=0.0, description="Covered share of text1 in percent")
    text1_length: int = Field(default=0, description="Length of normalized text1")
    spans: List[MatchSpan] = Field(default_factory=list, description="Matched regions, in scan order")


class PhraseMatch(BaseModel):
    """A phrase of text1 together with its occurrences in text2."""

    phrase: str = Field(description="Space-joined word phrase")
    positions: List[int] = Field(default_factory=list, description="Start offsets in normalized text2")

    @property
    def count(self) -> int:
        return len(self.positions)


class PlagiarismLevel(str, Enum):
    """Qualitative label derived from the similarity percentage."""

    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"
    NONE = "NONE"


class PlagiarismResult(BaseModel):
    """Complete comparison report."""

    similarity: float = Field(default=0.0, ge=0.0, le=100.0, description="Similarity percentage (0-100)")
    rolling_matches: int = Field(default=0, description="Number of rolling-hash match regions")
    phrase_matches: int = Field(default=0, description="Number of phrase occurrences found")
    largest_substring_length: int = Field(default=0, description="Length of the longest shared substring")
    largest_substring: str = Field(default="", description="Longest shared substring")
    level: PlagiarismLevel = Field(default=PlagiarismLevel.NONE, description="Qualitative plagiarism level")
    matched_chars: int = Field(default=0, description="Characters of text1 covered by matches")
    text1_length: int = Field(default=0, description="Length of normalized text1")
    text2_length: int = Field(default=0, description="Length of normalized text2")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Comparison settings and sources")
