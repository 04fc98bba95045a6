"""
Criteria, Fact-Check and Recommendation Synthesis

Pure mapping functions from classifier and sentiment output to the
human-readable parts of the response. No randomness here: verdicts
arrive already decided by the classifier.
"""

from __future__ import annotations

from typing import Optional

from factcheck.models import (
    ClaimAssessment,
    Classification,
    Criterion,
    FactCheck,
    SentimentProfile,
)
from factcheck.policy import DEFAULT_POLICY, ReportPolicy

CRITERIA_ORDER = (
    "Source Credibility",
    "Factual Accuracy",
    "Evidence Quality",
    "Emotional Language",
)

_STATUS_FOR_RATING = {"high": "good", "medium": "warning", "low": "bad"}

_DESCRIPTIONS = {
    "Factual Accuracy": {
        "high": "Claims are generally factual and verifiable",
        "medium": "Some claims may be misleading or lacking context",
        "low": "Multiple claims appear to be false or misleading",
    },
    "Evidence Quality": {
        "high": "References scientific studies and expert opinions",
        "medium": "Some evidence provided but may be selective",
        "low": "Little or no evidence to support claims",
    },
    "Emotional Language": {
        "low": "Uses neutral language focused on facts",
        "medium": "Some emotional language present",
        "high": "Uses emotional language that may influence perception",
    },
}


def _bucket(score: float, high: float, medium: float) -> str:
    if score > high:
        return "high"
    if score > medium:
        return "medium"
    return "low"


def source_criterion(source: str, policy: Optional[ReportPolicy] = None) -> Criterion:
    """Reliable list wins over unreliable list; neither means unknown."""
    policy = policy or DEFAULT_POLICY.report
    source = source or ""
    if any(s in source for s in policy.reliable_sources):
        return Criterion(
            name="Source Credibility",
            rating="high",
            description="Source has history of factual reporting",
            status="good",
        )
    if any(s in source for s in policy.unreliable_sources):
        return Criterion(
            name="Source Credibility",
            rating="low",
            description="Source has history of publishing misleading content",
            status="bad",
        )
    return Criterion(
        name="Source Credibility",
        rating="medium",
        description="Source has limited verification history",
        status="warning",
    )


def build_criteria(
    source: str,
    sentiment: SentimentProfile,
    classification: Classification,
    policy: Optional[ReportPolicy] = None,
) -> list[Criterion]:
    """The four criteria, always in CRITERIA_ORDER."""
    policy = policy or DEFAULT_POLICY.report

    factual = _bucket(classification.factual, policy.factual_high, policy.factual_medium)
    evidence = _bucket(classification.evidence, policy.evidence_high, policy.evidence_medium)

    # Emotional language is inverted: more emotion is worse
    tone = sentiment.emotional_tone
    if tone < policy.emotional_low:
        emotional = "low"
    elif tone < policy.emotional_medium:
        emotional = "medium"
    else:
        emotional = "high"
    emotional_status = {"low": "good", "medium": "warning", "high": "bad"}[emotional]

    return [
        source_criterion(source, policy),
        Criterion(
            name="Factual Accuracy",
            rating=factual,
            description=_DESCRIPTIONS["Factual Accuracy"][factual],
            status=_STATUS_FOR_RATING[factual],
        ),
        Criterion(
            name="Evidence Quality",
            rating=evidence,
            description=_DESCRIPTIONS["Evidence Quality"][evidence],
            status=_STATUS_FOR_RATING[evidence],
        ),
        Criterion(
            name="Emotional Language",
            rating=emotional,
            description=_DESCRIPTIONS["Emotional Language"][emotional],
            status=emotional_status,
        ),
    ]


def neutral_criteria(policy: Optional[ReportPolicy] = None) -> list[Criterion]:
    """Four medium/warning criteria for when analysis could not run."""
    policy = policy or DEFAULT_POLICY.report
    return [
        Criterion(
            name=name,
            rating="medium",
            description=policy.fallback_description,
            status="warning",
        )
        for name in CRITERIA_ORDER
    ]


def build_fact_checks(
    claims: list[ClaimAssessment],
    policy: Optional[ReportPolicy] = None,
) -> list[FactCheck]:
    policy = policy or DEFAULT_POLICY.report
    if not claims:
        return [FactCheck(
            claim="Article content",
            verdict="misleading",
            explanation=policy.no_claims_explanation,
        )]
    return [
        FactCheck(claim=c.text, verdict=c.verdict, explanation=c.explanation)
        for c in claims[:policy.fact_check_limit]
    ]


def classify_score(score: int, policy: Optional[ReportPolicy] = None) -> str:
    """Outward bucketing of the 0-100 score (75 / 40)."""
    policy = policy or DEFAULT_POLICY.report
    if score >= policy.reliable_score:
        return "reliable"
    if score >= policy.misleading_score:
        return "potentially_misleading"
    return "likely_false"


def recommendations_for(category: str, policy: Optional[ReportPolicy] = None) -> list[str]:
    """One fixed list per category; anything unrecognized reads as likely_false."""
    policy = policy or DEFAULT_POLICY.report
    recs = policy.recommendations.get(category, policy.recommendations["likely_false"])
    return list(recs)
