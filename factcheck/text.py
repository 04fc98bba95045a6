"""
Tokenizer and Feature Scanner

Splits text into words and sentences, and counts case-insensitive
whole-word occurrences of the fixed term lists in the policy table.
Counts are raw; `FeatureScan.ratio` applies the word-count
normalization and the fixed multiplier.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Optional

from nltk.tokenize import RegexpTokenizer

from factcheck.policy import DEFAULT_POLICY, TextPolicy

_word_tokenizer = RegexpTokenizer(r"[A-Za-z0-9_]+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def tokenize(text: str) -> list[str]:
    """Word tokens: runs of letters, digits and underscores."""
    return _word_tokenizer.tokenize(text)


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop blank pieces (kept unstripped)."""
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def split_words(text: str) -> list[str]:
    """Whitespace-separated words."""
    return text.split()


def raw_word_count(text: str) -> int:
    """
    Whitespace word count used as a density denominator.

    Never zero, so density ratios stay defined for empty text.
    """
    return max(1, len(split_words(text)))


@lru_cache(maxsize=512)
def _term_regex(term: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(term.lower()) + r"\b")


def count_term(text: str, term: str) -> int:
    """Case-insensitive whole-word occurrences of `term`."""
    return len(_term_regex(term).findall(text.lower()))


def count_terms(text: str, terms: Iterable[str]) -> int:
    lower = text.lower()
    return sum(len(_term_regex(t).findall(lower)) for t in terms)


@dataclass
class FeatureScan:
    """Raw term counts per category plus the word count they are scaled by."""
    word_count: int
    counts: dict[str, int] = field(default_factory=dict)
    multiplier: float = 1.5

    def ratio(self, category: str) -> float:
        if self.word_count == 0:
            return 0.0
        raw = self.counts.get(category, 0) / self.word_count * self.multiplier
        return min(1.0, raw)

    def ratios(self) -> dict[str, float]:
        return {c: round(self.ratio(c), 4) for c in self.counts}


def scan_features(text: str, policy: Optional[TextPolicy] = None) -> FeatureScan:
    """Count every scanner term list in `text`. Empty text yields zeros."""
    policy = policy or DEFAULT_POLICY.text
    return FeatureScan(
        word_count=len(split_words(text)),
        counts={
            category: count_terms(text, terms)
            for category, terms in policy.scanner_lists().items()
        },
        multiplier=policy.scan_multiplier,
    )
