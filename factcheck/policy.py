"""
Scoring Policy — Term Lists and Coefficients

Every term list, weight, threshold and canned text used by the
credibility pipeline lives here. None of these values are derived
from data: they are policy constants, grouped by the stage that
consumes them so each stage can be audited and tested on its own.

Sections:
  1. TextPolicy        — feature scanner, sentiment/entity extractor, readability
  2. ClassifierPolicy  — the term-frequency classifier and claim veracity
  3. ReportPolicy      — criteria, fact checks, recommendations, outward buckets

A policy is immutable. Overrides produce a new instance:

    policy = DEFAULT_POLICY.with_overrides({
        "classifier": {"conspiracy_weight": 0.1},
        "report": {"reliable_sources": ["bbc.com", "example.org"]},
    })
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


# ============================================================
# TEXT POLICY (feature scanner, extractor, readability)
# ============================================================

@dataclass(frozen=True)
class TextPolicy:
    # --- Feature scanner term lists ---
    emotional_terms: tuple[str, ...] = (
        "shocking", "amazing", "terrible", "wonderful", "awful", "incredible",
        "devastating", "outrageous", "horrific", "fantastic", "tragedy", "miracle",
        "disaster", "catastrophe", "breakthrough", "bombshell", "crisis", "epic",
        "terrifying", "stunning", "jaw-dropping", "mind-blowing", "explosive",
    )
    bias_terms: tuple[str, ...] = (
        "obviously", "clearly", "undoubtedly", "certainly", "absolutely",
        "everyone knows", "as everyone can see", "without question",
        "of course", "naturally", "surely", "always", "never",
        "completely", "totally", "definitely", "guaranteed",
    )
    factual_terms: tuple[str, ...] = (
        "according to", "study shows", "research indicates", "evidence suggests",
        "data from", "experts say", "statistics show", "survey found",
        "investigation revealed", "analysis of", "findings suggest",
    )
    evidence_terms: tuple[str, ...] = (
        "study", "data", "research", "evidence", "survey", "poll",
        "statistics", "sources", "experts", "citation", "reference",
        "professor", "scientist", "researcher", "published",
    )
    clickbait_phrases: tuple[str, ...] = (
        "you won't believe", "shocking", "mind-blowing", "stunning",
        "jaw-dropping", "unbelievable", "amazing", "incredible",
        "will change your life", "what happens next", "secret", "this is why",
    )
    conspiracy_terms: tuple[str, ...] = (
        "conspiracy", "cover-up", "they don't want you to know",
        "government is hiding", "what they won't tell you",
        "suppressed", "censored", "mainstream media won't report",
    )
    anti_science_terms: tuple[str, ...] = (
        "despite what scientists claim", "scientists are wrong",
        "science has it wrong", "challenging science", "debunking science",
        "science doesn't know", "experts are wrong",
    )
    scan_multiplier: float = 1.5

    # --- Sentiment ---
    emotional_baseline: float = 0.2
    bias_density: float = 0.02
    exclamation_density: float = 0.05
    all_caps_density: float = 0.03
    clickbait_cap: int = 5
    polarity_range: tuple[float, float] = (-1.0, 1.0)

    # --- Entities ---
    person_titles: tuple[str, ...] = (
        "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "President", "Senator",
    )
    organization_suffixes: tuple[str, ...] = (
        "Government", "University", "Corporation", "Company", "Association",
        "Institute", "Committee", "Foundation", "Organization", "Department",
    )
    countries: tuple[str, ...] = (
        "United States", "China", "Russia", "Canada", "Brazil", "Australia",
        "India", "Japan",
    )
    entity_consistency_divisor: int = 10
    entity_consistency_default: float = 0.5

    # --- Claims ---
    claim_cues: tuple[str, ...] = (
        " is ", " are ", " was ", " were ", " will ", " should ", " must ",
        " found that ", " shows that ", " proves ",
    )
    claim_min_length: int = 10
    claim_limit: int = 5

    # --- Keywords ---
    stopwords: tuple[str, ...] = (
        "the", "a", "an", "and", "but", "or", "for", "nor", "on", "at", "to",
        "by", "is", "are", "was", "were",
    )
    keyword_min_length: int = 3
    keyword_limit: int = 20

    # --- Readability (Flesch-Kincaid grade, rescaled) ---
    grade_words_per_sentence: float = 0.39
    grade_syllables_per_word: float = 11.8
    grade_intercept: float = -15.59
    grade_scale: float = 5.0
    readability_default: int = 50

    def scanner_lists(self) -> dict[str, tuple[str, ...]]:
        """Term lists scanned by the feature scanner, keyed by category."""
        return {
            "emotional": self.emotional_terms,
            "bias": self.bias_terms,
            "factual": self.factual_terms,
            "evidence": self.evidence_terms,
            "sensational": self.clickbait_phrases,
            "conspiracy": self.conspiracy_terms,
            "anti_science": self.anti_science_terms,
        }


# ============================================================
# CLASSIFIER POLICY
# ============================================================

@dataclass(frozen=True)
class ClassifierPolicy:
    sensational_terms: tuple[str, ...] = (
        "shocking", "bombshell", "mind-blowing", "you won't believe",
        "incredible", "unbelievable", "breaking", "urgent", "emergency",
        "scandal", "controversial", "secret", "exposed", "reveals",
    )
    factual_terms: tuple[str, ...] = (
        "according to", "study shows", "research indicates", "evidence suggests",
        "data from", "experts say", "statistics show", "survey found",
        "investigation revealed", "analysis of", "findings suggest",
    )
    evidence_terms: tuple[str, ...] = (
        "study", "data", "research", "evidence", "survey", "poll",
        "statistics", "sources", "experts", "citation", "reference",
        "professor", "scientist", "researcher", "published",
    )
    emotional_terms: tuple[str, ...] = (
        "terrible", "amazing", "awful", "wonderful", "horrible", "fantastic",
        "devastating", "extraordinary", "disaster", "triumph", "catastrophe",
        "miracle", "tragedy", "outrage", "frightening", "terrifying",
    )
    bias_terms: tuple[str, ...] = (
        "should", "must", "need to", "have to", "obviously", "clearly",
        "undoubtedly", "certainly", "absolutely", "worst", "best",
        "only", "always", "never", "everyone", "nobody",
    )
    conspiracy_terms: tuple[str, ...] = (
        "conspiracy", "cover-up", "truth", "they don't want you to know",
        "government is hiding", "secret", "what they won't tell you",
        "suppressed", "censored", "mainstream media won't report",
    )
    anti_science_terms: tuple[str, ...] = (
        "despite what scientists claim", "scientists are wrong",
        "science has it wrong", "challenging science", "debunking science",
        "science doesn't know", "experts are wrong",
    )

    # Score added per present term
    sensational_weight: float = 0.05
    factual_weight: float = 0.05
    evidence_weight: float = 0.04
    emotional_weight: float = 0.05
    bias_weight: float = 0.04
    conspiracy_weight: float = 0.08
    anti_science_weight: float = 0.06

    # Combination
    emotional_factor: float = 0.7
    bias_factor: float = 0.8
    base_score: float = 0.5
    positive_weight: float = 0.3
    negative_weight: float = 0.4
    score_floor: float = 0.1
    score_ceiling: float = 0.9

    # Confidence grows with the amount of signal detected
    confidence_base: float = 0.6
    confidence_per_signal: float = 0.05
    confidence_ceiling: float = 0.95

    normalize_multiplier: float = 1.5

    # Internal bucketing of the 0-1 score (outward buckets are in ReportPolicy)
    reliable_threshold: float = 0.7
    misleading_threshold: float = 0.4

    # --- Claim veracity ---
    claim_cues: tuple[str, ...] = (
        " is ", " are ", " will ", " shows ", " proves ", " found ",
        " according to ",
    )
    claim_min_length: int = 15
    claim_limit: int = 5
    verified_above: float = 0.7
    misleading_above: float = 0.3
    explanations: Mapping[str, str] = field(default_factory=lambda: {
        "verified": "Multiple independent sources confirm this information",
        "misleading": "This claim contains elements of truth but lacks important context",
        "false": "This claim contradicts available evidence and reliable sources",
    })


# ============================================================
# REPORT POLICY (criteria, fact checks, recommendations)
# ============================================================

_COMMON_RECOMMENDATIONS = (
    "Always verify information with multiple credible sources",
    "Check the publication date to ensure content is current",
    "Consider the expertise and authority of the author",
)


@dataclass(frozen=True)
class ReportPolicy:
    reliable_sources: tuple[str, ...] = (
        "bbc.com", "npr.org", "reuters.com", "apnews.com",
        "nytimes.com", "wsj.com", "economist.com",
    )
    unreliable_sources: tuple[str, ...] = (
        "fakenews.com", "conspiracytheory.net", "clickbait.co",
        "sensationalnews.org",
    )

    # Outward buckets, applied to the 0-100 integer score
    reliable_score: int = 75
    misleading_score: int = 40

    # Criteria buckets
    factual_high: float = 0.7
    factual_medium: float = 0.4
    evidence_high: float = 0.7
    evidence_medium: float = 0.4
    emotional_low: float = 0.3
    emotional_medium: float = 0.6

    fact_check_limit: int = 3
    no_claims_explanation: str = "Analysis could not identify specific claims to verify"
    fallback_explanation: str = (
        "Analysis could not be completed. Exercise caution with this content."
    )
    fallback_description: str = "Could not fully evaluate this criterion"

    recommendations: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: {
        "reliable": _COMMON_RECOMMENDATIONS + (
            "Share responsibly, as even reliable sources occasionally make errors",
        ),
        "potentially_misleading": (
            "Verify claims with alternative credible sources",
            "Check original research cited in the article",
            "Consider the potential bias of the source",
            "Look for context that might be missing from the article",
        ),
        "likely_false": (
            "Seek information from established fact-checking organizations",
            "Check if other reputable sources are reporting similar information",
            "Be cautious about sharing this content with others",
            "Look for emotional language that may be trying to manipulate readers",
        ),
    })


# ============================================================
# COMBINED POLICY
# ============================================================

@dataclass(frozen=True)
class ScoringPolicy:
    text: TextPolicy = field(default_factory=TextPolicy)
    classifier: ClassifierPolicy = field(default_factory=ClassifierPolicy)
    report: ReportPolicy = field(default_factory=ReportPolicy)

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> ScoringPolicy:
        """
        Return a copy with per-section fields replaced.

        Lists are stored as tuples. Unknown sections or fields raise
        ValueError.
        """
        sections: dict[str, Any] = {}
        for section_name, values in overrides.items():
            if section_name not in _SECTIONS:
                raise ValueError(f"Unknown policy section: {section_name!r}")
            if not isinstance(values, Mapping):
                raise ValueError(f"Policy section {section_name!r} must be a mapping")

            section = getattr(self, section_name)
            known = {f.name for f in dataclasses.fields(section)}
            unknown = sorted(set(values) - known)
            if unknown:
                raise ValueError(
                    f"Unknown fields for policy section {section_name!r}: {', '.join(unknown)}"
                )
            sections[section_name] = dataclasses.replace(
                section, **{k: _freeze(v) for k, v in values.items()},
            )
        return dataclasses.replace(self, **sections)

    def describe(self) -> dict:
        """JSON-safe view of every section, for auditing."""
        return {
            name: {
                f.name: _thaw(getattr(getattr(self, name), f.name))
                for f in dataclasses.fields(getattr(self, name))
            }
            for name in _SECTIONS
        }


_SECTIONS = ("text", "classifier", "report")


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, Mapping):
        return {k: _freeze(v) for k, v in value.items()}
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


def load_policy(path: str | Path, base: ScoringPolicy | None = None) -> ScoringPolicy:
    """Load a JSON override file on top of `base` (default policy if omitted)."""
    base = base or DEFAULT_POLICY
    try:
        overrides = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Policy file {path} is not valid JSON: {e}") from e
    if not isinstance(overrides, dict):
        raise ValueError(f"Policy file {path} must contain a JSON object")
    return base.with_overrides(overrides)


DEFAULT_POLICY = ScoringPolicy()
