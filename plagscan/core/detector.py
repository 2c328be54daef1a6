"""Comparison pipeline combining both matchers."""

import chardet
from pathlib import Path
from typing import Optional

from .config import Config
from .types import PlagiarismResult
from .normalizer import normalize
from .substring import SubstringMatcher
from .phrase import PhraseMatcher
from .report import aggregate
from .log import base_logger

logger = base_logger.getChild('detector')


class PlagiarismDetector:
    """Main text overlap engine."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the detector.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or Config()
        self.substring_matcher = SubstringMatcher(
            min_size=self.config.min_size,
            base=self.config.hash_base,
            modulus=self.config.hash_modulus
        )
        self.phrase_matcher = PhraseMatcher(phrase_length=self.config.phrase_length)

    def read_file(self, file_path: str) -> str:
        """
        Read a file with automatic encoding detection.

        Args:
            file_path: Path to the file

        Returns:
            File contents as string
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        raw_data = path.read_bytes()
        detected = chardet.detect(raw_data)
        encoding = detected['encoding'] or 'utf-8'
        confidence = detected['confidence'] or 0

        logger.debug(f"Detected encoding for {file_path}: {encoding} (confidence: {confidence:.2f})")

        # Detected encoding first, then common fallbacks
        encodings_to_try = [encoding, 'utf-8', 'gb2312', 'gbk', 'gb18030', 'big5']

        for enc in encodings_to_try:
            try:
                text = raw_data.decode(enc)
            except (UnicodeDecodeError, LookupError):
                continue
            logger.info(f"Read {file_path} with encoding: {enc}")
            return text

        raise ValueError(f"Could not decode file {file_path} with any known encoding")

    def compare_texts(
        self,
        text1: str,
        text2: str,
        source: str = "text1",
        target: str = "text2"
    ) -> PlagiarismResult:
        """
        Compare two raw texts with both matchers.

        Args:
            text1: Text being checked
            text2: Text it is checked against
            source: Label of text1 recorded in the metadata
            target: Label of text2 recorded in the metadata

        Returns:
            PlagiarismResult
        """
        proc1 = normalize(text1)
        proc2 = normalize(text2)
        logger.info(f"Comparing {source} ({len(proc1)} chars) with {target} ({len(proc2)} chars)")

        substring_result = self.substring_matcher.match(proc1, proc2)
        phrase_matches = self.phrase_matcher.count(proc1, proc2)

        result = aggregate(
            substring_result,
            phrase_matches,
            text2_length=len(proc2),
            config=self.config,
            metadata={
                "source": source,
                "target": target,
                "min_size": self.config.min_size,
                "phrase_length": self.config.phrase_length,
            }
        )

        logger.info(
            f"Comparison complete: {result.similarity:.2f}% similar, "
            f"{result.rolling_matches} substring matches, {result.phrase_matches} phrase matches"
        )
        return result

    def compare_files(self, source_file: str, target_file: str) -> PlagiarismResult:
        """
        Compare two documents on disk.

        Args:
            source_file: Path to the document being checked
            target_file: Path to the document it is checked against

        Returns:
            PlagiarismResult
        """
        source_text = self.read_file(source_file)
        target_text = self.read_file(target_file)
        return self.compare_texts(source_text, target_text, source=str(source_file), target=str(target_file))
