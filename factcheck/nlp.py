"""
Sentiment, Entity and Readability Extraction

Lexicon sentiment, regex-only entity extraction, claim and source
spotting, keywords and a Flesch-Kincaid style readability score.

None of this is real NLP: entities come from capitalization patterns
and title/suffix lists, claims from a handful of verb cues. Every
public function falls back to a neutral default on failure.
"""

from __future__ import annotations

import re
from collections import Counter
from functools import lru_cache
from typing import Optional

from nltk.stem import PorterStemmer
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from factcheck.logging import get_logger
from factcheck.models import EntityProfile, NamedEntities, SentimentProfile
from factcheck.policy import DEFAULT_POLICY, TextPolicy
from factcheck.text import (
    count_terms,
    raw_word_count,
    split_sentences,
    split_words,
    tokenize,
)

logger = get_logger("nlp")

_stemmer = PorterStemmer()

_ALL_CAPS = re.compile(r"\b[A-Z]{4,}\b")
_NON_VOWELS = re.compile(r"[^aeiouy]+")
_VOWEL = re.compile(r"[aeiouy]")

_DATE_PATTERNS = (
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"),
    re.compile(r"\b\d{1,2}-\d{1,2}-\d{2,4}\b"),
    re.compile(
        r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s\d{1,2}"
        r"(?:st|nd|rd|th)?,?\s\d{4}\b"
    ),
)

_SOURCE_PATTERNS = (
    re.compile(r"according to ([^,.;:]+)", re.IGNORECASE),
    re.compile(r"cited by ([^,.;:]+)", re.IGNORECASE),
    re.compile(r"reported by ([^,.;:]+)", re.IGNORECASE),
    re.compile(r"says ([^,.;:]+)", re.IGNORECASE),
    re.compile(r"([^,.;:]+) reported", re.IGNORECASE),
)

_IN_LOCATION = re.compile(r"\bin\s([A-Z][a-z]+(?:\s[A-Z][a-z]+)*)")


def _unique(items) -> list[str]:
    """De-duplicate, keeping first-seen order."""
    return list(dict.fromkeys(items))


# ============================================================
# SENTIMENT
# ============================================================

@lru_cache(maxsize=1)
def _stemmed_lexicon() -> dict[str, float]:
    """VADER valences keyed by Porter stem. First entry wins on collisions."""
    lexicon: dict[str, float] = {}
    for word, valence in SentimentIntensityAnalyzer().lexicon.items():
        lexicon.setdefault(_stemmer.stem(word), float(valence))
    return lexicon


def lexicon_polarity(tokens: list[str]) -> float:
    """Mean stemmed-lexicon valence per token. Zero for no tokens."""
    if not tokens:
        return 0.0
    lexicon = _stemmed_lexicon()
    total = sum(lexicon.get(_stemmer.stem(t), 0.0) for t in tokens)
    return total / len(tokens)


def normalize_polarity(score: float, low: float = -1.0, high: float = 1.0) -> float:
    """
    Affine map from [low, high] onto [0, 1], clamped.

    Lexicon valences run past +/-1, so the unclamped value can leave
    the unit interval.
    """
    return max(0.0, min(1.0, (score - low) / (high - low)))


def detect_bias(text: str, policy: Optional[TextPolicy] = None) -> float:
    policy = policy or DEFAULT_POLICY.text
    bias_count = count_terms(text, policy.bias_terms)
    return min(1.0, bias_count / (raw_word_count(text) * policy.bias_density))


def detect_sensationalism(text: str, policy: Optional[TextPolicy] = None) -> float:
    """Mean of exclamation density, all-caps density and clickbait presence."""
    policy = policy or DEFAULT_POLICY.text
    word_count = raw_word_count(text)

    exclamations = text.count("!")
    all_caps = len(_ALL_CAPS.findall(text))
    lower = text.lower()
    clickbait = sum(1 for phrase in policy.clickbait_phrases if phrase in lower)

    exclamation_score = min(1.0, exclamations / (word_count * policy.exclamation_density))
    all_caps_score = min(1.0, all_caps / (word_count * policy.all_caps_density))
    clickbait_score = min(1.0, clickbait / policy.clickbait_cap)

    return (exclamation_score + all_caps_score + clickbait_score) / 3


def analyze_sentiment(text: str, policy: Optional[TextPolicy] = None) -> SentimentProfile:
    policy = policy or DEFAULT_POLICY.text
    try:
        tokens = tokenize(text)
        polarity = lexicon_polarity(tokens)

        emotional_words = count_terms(text, policy.emotional_terms)
        emotional_ratio = emotional_words / len(tokens) if tokens else 0.0

        low, high = policy.polarity_range
        return SentimentProfile(
            overall_sentiment=normalize_polarity(polarity, low, high),
            emotional_tone=max(emotional_ratio, policy.emotional_baseline),
            bias_indicators=detect_bias(text, policy),
            sensationalism=detect_sensationalism(text, policy),
            raw_polarity=polarity,
        )
    except Exception as e:
        logger.warning(
            "Sentiment analysis failed, using neutral defaults",
            extra={"stage": "sentiment", "error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        return SentimentProfile(
            overall_sentiment=0.0,
            emotional_tone=0.5,
            bias_indicators=0.5,
            sensationalism=0.5,
        )


# ============================================================
# ENTITIES
# ============================================================

def extract_people(text: str, policy: Optional[TextPolicy] = None) -> list[str]:
    policy = policy or DEFAULT_POLICY.text
    titles = "|".join(re.escape(t) for t in policy.person_titles)
    pattern = re.compile(rf"(?:{titles})\s[A-Z][a-z]+(?:\s[A-Z][a-z]+)?")
    return _unique(pattern.findall(text))


def extract_organizations(text: str, policy: Optional[TextPolicy] = None) -> list[str]:
    policy = policy or DEFAULT_POLICY.text
    suffixes = "|".join(re.escape(s) for s in policy.organization_suffixes)
    pattern = re.compile(
        rf"[A-Z][a-z]+(?:\s(?:[A-Z][a-z]+|of|the|and))*\s(?:{suffixes})"
    )
    return _unique(pattern.findall(text))


def extract_locations(text: str, policy: Optional[TextPolicy] = None) -> list[str]:
    policy = policy or DEFAULT_POLICY.text
    locations = [c for c in policy.countries if c in text]
    locations.extend(
        m for m in _IN_LOCATION.findall(text) if m not in policy.countries
    )
    return _unique(locations)


def extract_dates(text: str) -> list[str]:
    dates: list[str] = []
    for pattern in _DATE_PATTERNS:
        dates.extend(pattern.findall(text))
    return _unique(dates)


def extract_sources(text: str) -> list[str]:
    sources: list[str] = []
    for pattern in _SOURCE_PATTERNS:
        sources.extend(m.strip() for m in pattern.findall(text) if m.strip())
    return _unique(sources)


def extract_claims(text: str, policy: Optional[TextPolicy] = None) -> list[str]:
    """Sentences carrying a copular/modal cue, in order, capped."""
    policy = policy or DEFAULT_POLICY.text
    claims = []
    for sentence in split_sentences(text):
        sentence = sentence.strip()
        if len(sentence) <= policy.claim_min_length:
            continue
        lower = sentence.lower()
        if any(cue in lower for cue in policy.claim_cues):
            claims.append(sentence)
        if len(claims) >= policy.claim_limit:
            break
    return claims


def entity_consistency(entities: NamedEntities, policy: Optional[TextPolicy] = None) -> float:
    """More distinct people/orgs/places reads as a more specific article."""
    policy = policy or DEFAULT_POLICY.text
    all_entities = entities.people + entities.organizations + entities.locations
    if not all_entities:
        return policy.entity_consistency_default
    return min(1.0, len(set(all_entities)) / policy.entity_consistency_divisor)


def analyze_entities(text: str, policy: Optional[TextPolicy] = None) -> EntityProfile:
    policy = policy or DEFAULT_POLICY.text
    try:
        entities = NamedEntities(
            people=extract_people(text, policy),
            organizations=extract_organizations(text, policy),
            locations=extract_locations(text, policy),
            dates=extract_dates(text),
        )
        return EntityProfile(
            entities=entities,
            sources_cited=extract_sources(text),
            claims=extract_claims(text, policy),
            entity_consistency=entity_consistency(entities, policy),
        )
    except Exception as e:
        logger.warning(
            "Entity analysis failed, using empty entities",
            extra={"stage": "entities", "error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        return EntityProfile(
            entities=NamedEntities(),
            sources_cited=[],
            claims=[],
            entity_consistency=policy.entity_consistency_default,
        )


# ============================================================
# KEYWORDS
# ============================================================

def extract_keywords(text: str, policy: Optional[TextPolicy] = None) -> list[dict]:
    """Most frequent non-stopword tokens with relative frequency."""
    policy = policy or DEFAULT_POLICY.text
    try:
        stopwords = set(policy.stopwords)
        tokens = [
            t for t in tokenize(text.lower())
            if t not in stopwords and len(t) >= policy.keyword_min_length
        ]
        if not tokens:
            return []
        counts = Counter(tokens)
        ranked = sorted(counts.items(), key=lambda kv: -kv[1])[:policy.keyword_limit]
        return [
            {"word": word, "relevance": count / len(tokens)}
            for word, count in ranked
        ]
    except Exception as e:
        logger.warning(
            "Keyword extraction failed",
            extra={"stage": "keywords", "error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        return []


# ============================================================
# READABILITY
# ============================================================

def count_syllables(text: str) -> int:
    """Vowel groups per word, minus a silent trailing e, at least one per word."""
    total = 0
    for word in text.lower().split():
        groups = _NON_VOWELS.sub(" ", word).strip().split(" ")
        count = len(groups)
        if len(word) > 2 and word.endswith("e") and not _VOWEL.match(word[-2]):
            count -= 1
        total += max(1, count)
    return total


def readability_score(text: str, policy: Optional[TextPolicy] = None) -> int:
    """0-100, higher is easier to read. Empty or unparseable text scores the default."""
    policy = policy or DEFAULT_POLICY.text
    try:
        sentence_count = len(split_sentences(text))
        word_count = len(split_words(text))
        if sentence_count == 0 or word_count == 0:
            return policy.readability_default

        words_per_sentence = word_count / sentence_count
        syllables_per_word = count_syllables(text) / word_count

        grade = (
            policy.grade_words_per_sentence * words_per_sentence
            + policy.grade_syllables_per_word * syllables_per_word
            + policy.grade_intercept
        )
        score = max(0.0, min(100.0, 100 - grade * policy.grade_scale))
        return int(score + 0.5)
    except Exception as e:
        logger.warning(
            "Readability scoring failed",
            extra={"stage": "readability", "error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        return policy.readability_default
