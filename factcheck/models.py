"""
Core Records

Plain dataclasses passed between pipeline stages. Nothing here is
persisted by the pipeline itself; the store keeps the JSON form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


CATEGORIES = ("reliable", "potentially_misleading", "likely_false")
RATINGS = ("high", "medium", "low")
STATUSES = ("good", "warning", "bad")
VERDICTS = ("verified", "misleading", "false")


@dataclass(frozen=True)
class Article:
    """An article as submitted for analysis. Never mutated."""
    url: str
    title: str
    content: str
    source: str
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[int] = None

    @property
    def full_text(self) -> str:
        return f"{self.title}\n\n{self.content}"


@dataclass
class SentimentProfile:
    overall_sentiment: float    # 0 (negative) to 1 (positive)
    emotional_tone: float       # emotional terms per token, floored at the baseline
    bias_indicators: float      # 0 to 1
    sensationalism: float       # 0 to 1
    raw_polarity: float = 0.0   # mean lexicon valence before normalization


@dataclass
class NamedEntities:
    people: list[str] = field(default_factory=list)
    organizations: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "people": self.people,
            "organizations": self.organizations,
            "locations": self.locations,
            "dates": self.dates,
        }


@dataclass
class EntityProfile:
    entities: NamedEntities
    sources_cited: list[str]
    claims: list[str]
    entity_consistency: float


@dataclass
class ClaimAssessment:
    text: str
    veracity: float
    verdict: str
    explanation: str


@dataclass
class Classification:
    """Output of the term-frequency classifier. Scores are 0-1."""
    credibility_score: float
    confidence: float
    factual: float
    evidence: float
    emotional: float
    bias: float
    sensational: float
    conspiracy: float
    claims: list[ClaimAssessment]
    category: str


@dataclass
class FeatureBundle:
    """Normalized per-request scores, each in [0, 1]."""
    sentiment: float
    emotional_tone: float
    bias: float
    sensationalism: float
    factual: float
    evidence: float
    entity_consistency: float

    def to_dict(self) -> dict:
        return {
            "sentiment": self.sentiment,
            "emotionalTone": self.emotional_tone,
            "bias": self.bias,
            "sensationalism": self.sensationalism,
            "factual": self.factual,
            "evidence": self.evidence,
            "entityConsistency": self.entity_consistency,
        }


@dataclass
class Criterion:
    name: str
    rating: str
    description: str
    status: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rating": self.rating,
            "description": self.description,
            "status": self.status,
        }


@dataclass
class FactCheck:
    claim: str
    verdict: str
    explanation: str

    def to_dict(self) -> dict:
        return {
            "claim": self.claim,
            "verdict": self.verdict,
            "explanation": self.explanation,
        }


@dataclass
class AnalysisResponse:
    credibility_score: int
    classification: str
    confidence: int
    criteria: list[Criterion]
    fact_checks: list[FactCheck]
    recommendations: list[str]

    def to_dict(self) -> dict:
        """The externally visible JSON shape."""
        return {
            "credibilityScore": self.credibility_score,
            "classification": self.classification,
            "confidence": self.confidence,
            "criteria": [c.to_dict() for c in self.criteria],
            "factChecks": [f.to_dict() for f in self.fact_checks],
            "recommendations": list(self.recommendations),
        }
