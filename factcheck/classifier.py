"""
Credibility Classifier — Term-Frequency Heuristics

Not a learned model. Seven fixed term lists are checked for presence,
each present term adding its list weight. "Positive" signals (factual,
evidence) push the score up, "negative" signals (sensational, emotional,
bias, conspiracy, anti-science) push it down:

    positive    = min(1, factual + evidence)
    negative    = min(1, sensational + 0.7*emotional + 0.8*bias
                         + conspiracy + anti_science)
    credibility = clamp(0.1, 0.9, 0.5 + 0.3*positive - 0.4*negative)
    confidence  = min(0.95, 0.6 + 0.05*total_signals)

Claim veracity is NOT a function of the text. Each extracted claim
draws its veracity from the injected random source, so the same claim
can get a different verdict on every run. Seed the source (or pass a
seeded random.Random) for reproducible output.
"""

from __future__ import annotations

import random
from typing import Optional

from factcheck.logging import get_logger
from factcheck.models import ClaimAssessment, Classification
from factcheck.policy import DEFAULT_POLICY, ClassifierPolicy
from factcheck.text import split_sentences

logger = get_logger("classifier")


class CredibilityClassifier:
    """
    Deterministic credibility scoring plus randomized claim veracity.

    Holds no mutable state beyond the random source it was given.
    """

    def __init__(
        self,
        policy: Optional[ClassifierPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.policy = policy or DEFAULT_POLICY.classifier
        self._rng = rng or random.Random()

    def classify(self, text: str, assess_claims: bool = True) -> Classification:
        """
        Score `text`. Any failure yields the neutral classification.

        With assess_claims=False no veracity is drawn and `claims` is empty.
        """
        try:
            return self._classify(text, assess_claims)
        except Exception as e:
            logger.warning(
                "Classification failed, using neutral defaults",
                extra={"stage": "classifier", "error": str(e), "error_type": type(e).__name__},
                exc_info=True,
            )
            return self.neutral()

    def neutral(self) -> Classification:
        return Classification(
            credibility_score=0.5,
            confidence=0.6,
            factual=0.5,
            evidence=0.5,
            emotional=0.5,
            bias=0.5,
            sensational=0.5,
            conspiracy=0.5,
            claims=[],
            category="potentially_misleading",
        )

    def _classify(self, text: str, assess_claims: bool = True) -> Classification:
        p = self.policy
        lower = text.lower()

        sensational = self._presence_score(lower, p.sensational_terms, p.sensational_weight)
        factual = self._presence_score(lower, p.factual_terms, p.factual_weight)
        evidence = self._presence_score(lower, p.evidence_terms, p.evidence_weight)
        emotional = self._presence_score(lower, p.emotional_terms, p.emotional_weight)
        bias = self._presence_score(lower, p.bias_terms, p.bias_weight)
        conspiracy = self._presence_score(lower, p.conspiracy_terms, p.conspiracy_weight)
        anti_science = self._presence_score(lower, p.anti_science_terms, p.anti_science_weight)

        positive = min(1.0, factual + evidence)
        negative = min(1.0, (
            sensational
            + emotional * p.emotional_factor
            + bias * p.bias_factor
            + conspiracy
            + anti_science
        ))

        credibility = max(p.score_floor, min(p.score_ceiling,
            p.base_score + positive * p.positive_weight - negative * p.negative_weight
        ))

        total_signals = (
            factual + evidence + sensational + emotional + bias + conspiracy + anti_science
        )
        confidence = min(p.confidence_ceiling, p.confidence_base + total_signals * p.confidence_per_signal)

        return Classification(
            credibility_score=credibility,
            confidence=confidence,
            factual=self._normalize(factual),
            evidence=self._normalize(evidence),
            emotional=self._normalize(emotional),
            bias=self._normalize(bias),
            sensational=self._normalize(sensational),
            conspiracy=self._normalize(conspiracy),
            claims=self.analyze_claims(text) if assess_claims else [],
            category=self.category_for(credibility),
        )

    @staticmethod
    def _presence_score(lower_text: str, terms, weight: float) -> float:
        return sum(weight for term in terms if term in lower_text)

    def _normalize(self, score: float) -> float:
        return min(1.0, score * self.policy.normalize_multiplier)

    def category_for(self, score: float) -> str:
        """Internal bucketing of the 0-1 score (0.7 / 0.4)."""
        if score >= self.policy.reliable_threshold:
            return "reliable"
        if score >= self.policy.misleading_threshold:
            return "potentially_misleading"
        return "likely_false"

    # ============================================================
    # CLAIMS
    # ============================================================

    def analyze_claims(self, text: str) -> list[ClaimAssessment]:
        """First few cue-bearing sentences, each with a random veracity."""
        p = self.policy
        candidates = []
        for sentence in split_sentences(text):
            sentence = sentence.strip()
            if len(sentence) <= p.claim_min_length:
                continue
            lower = sentence.lower()
            if any(cue in lower for cue in p.claim_cues):
                candidates.append(sentence)
            if len(candidates) >= p.claim_limit:
                break

        return [self.assess_claim(claim) for claim in candidates]

    def assess_claim(self, claim: str) -> ClaimAssessment:
        veracity = self._rng.random()
        verdict = self.verdict_for(veracity)
        return ClaimAssessment(
            text=claim,
            veracity=veracity,
            verdict=verdict,
            explanation=self.policy.explanations[verdict],
        )

    def verdict_for(self, veracity: float) -> str:
        if veracity > self.policy.verified_above:
            return "verified"
        if veracity > self.policy.misleading_above:
            return "misleading"
        return "false"


# ============================================================
# SINGLETON — default policy, unseeded veracity source
# ============================================================

classifier = CredibilityClassifier()
