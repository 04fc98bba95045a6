"""
Shared builders for pipeline records.
"""

from factcheck.models import ClaimAssessment, Classification, SentimentProfile


class SequenceRandom:
    """Stands in for random.Random, returning fixed values in order."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self._values.pop(0)


def make_classification(**overrides) -> Classification:
    values = dict(
        credibility_score=0.5,
        confidence=0.6,
        factual=0.0,
        evidence=0.0,
        emotional=0.0,
        bias=0.0,
        sensational=0.0,
        conspiracy=0.0,
        claims=[],
        category="potentially_misleading",
    )
    values.update(overrides)
    return Classification(**values)


def make_sentiment(emotional_tone: float = 0.2) -> SentimentProfile:
    return SentimentProfile(
        overall_sentiment=0.5,
        emotional_tone=emotional_tone,
        bias_indicators=0.0,
        sensationalism=0.0,
    )


def make_claim(text: str, verdict: str = "misleading") -> ClaimAssessment:
    return ClaimAssessment(text=text, veracity=0.5, verdict=verdict, explanation="x")
