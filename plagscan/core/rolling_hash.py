"""Polynomial rolling hash over prefixes of a text."""

from typing import List

DEFAULT_BASE = 256
DEFAULT_MODULUS = 1_000_000_007


class RollingHashIndex:
    """
    Substring hash oracle for a single text.

    After O(n) preprocessing, hash_of(l, r) returns the hash of text[l:r]
    in O(1). Two indexes built with the same base and modulus produce
    directly comparable values; equal values still have to be confirmed
    against the literal text because of collisions.
    """

    def __init__(self, text: str, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS):
        if base < 2:
            raise ValueError("base must be at least 2")
        if modulus < 2:
            raise ValueError("modulus must be at least 2")

        self.text = text
        self.base = base
        self.modulus = modulus

        n = len(text)
        prefix: List[int] = [0] * (n + 1)
        powers: List[int] = [1] * (n + 1)
        for i, c in enumerate(text):
            prefix[i + 1] = (prefix[i] * base + ord(c)) % modulus
            powers[i + 1] = (powers[i] * base) % modulus

        self._prefix = prefix
        self._powers = powers

    def __len__(self) -> int:
        return len(self.text)

    def hash_of(self, l: int, r: int) -> int:
        """
        Hash of the substring text[l:r].

        Args:
            l: Start index (inclusive)
            r: End index (exclusive)

        Returns:
            Hash value in [0, modulus)
        """
        if not 0 <= l <= r <= len(self.text):
            raise IndexError(f"invalid range [{l}, {r}) for text of length {len(self.text)}")
        return (self._prefix[r] - self._prefix[l] * self._powers[r - l]) % self.modulus

    def compatible_with(self, other: "RollingHashIndex") -> bool:
        """Whether hashes of both indexes can be compared."""
        return self.base == other.base and self.modulus == other.modulus
