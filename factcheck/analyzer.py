"""
Analyzer — Pipeline Orchestrator

Runs the stages over an article's title + content:

  1. Sentiment       — lexicon polarity, emotional tone, bias, sensationalism
  2. Entities        — people, orgs, places, dates, sources, claims
  3. Readability     — grade level rescaled to 0-100
  4. Keywords        — most frequent content words
  5. Classification  — credibility score, confidence, claim veracity
  6. Synthesis       — criteria, fact checks, recommendations

Single pass, synchronous, no shared state. Each stage substitutes its
own neutral default on failure; if anything beyond that breaks, the
whole call returns FALLBACK. The response shape is the same either
way, so callers cannot tell a low-confidence result from a fallback.
Only the logs can.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Optional

from factcheck.classifier import CredibilityClassifier, classifier as default_classifier
from factcheck.logging import get_logger
from factcheck.models import AnalysisResponse, Article, FactCheck, FeatureBundle
from factcheck.nlp import (
    analyze_entities,
    analyze_sentiment,
    extract_keywords,
    readability_score,
)
from factcheck.policy import DEFAULT_POLICY, ScoringPolicy
from factcheck.synthesizer import (
    build_criteria,
    build_fact_checks,
    classify_score,
    neutral_criteria,
    recommendations_for,
)
from factcheck.text import scan_features

logger = get_logger("analyzer")


def to_percent(score: float) -> int:
    """0-1 score to a 0-100 integer, halves rounded up."""
    return int(math.floor(score * 100 + 0.5))


def analyze_article(
    article: Article,
    *,
    policy: Optional[ScoringPolicy] = None,
    classifier: Optional[CredibilityClassifier] = None,
) -> AnalysisResponse:
    """
    Score an article for credibility.

    Args:
        article: The article to analyze. Title and content are joined.
        policy: Scoring policy. Defaults to DEFAULT_POLICY.
        classifier: Classifier to use. Pass one built with a seeded
            random.Random for reproducible fact-check verdicts.

    Returns:
        AnalysisResponse. Never raises.
    """
    policy = policy or DEFAULT_POLICY
    if classifier is None:
        classifier = (
            default_classifier if policy is DEFAULT_POLICY
            else CredibilityClassifier(policy.classifier)
        )

    start = time.time()
    try:
        text = article.full_text

        sentiment = analyze_sentiment(text, policy.text)
        entities = analyze_entities(text, policy.text)
        readability = readability_score(text, policy.text)
        keywords = extract_keywords(text, policy.text)

        classification = classifier.classify(text)

        credibility_score = to_percent(classification.credibility_score)
        category = classify_score(credibility_score, policy.report)

        response = AnalysisResponse(
            credibility_score=credibility_score,
            classification=category,
            confidence=to_percent(classification.confidence),
            criteria=build_criteria(article.source, sentiment, classification, policy.report),
            fact_checks=build_fact_checks(classification.claims, policy.report),
            recommendations=recommendations_for(category, policy.report),
        )
    except Exception as e:
        logger.error(
            "Analysis pipeline failed, returning fallback response",
            extra={
                "article_id": article.id,
                "error": str(e),
                "error_type": type(e).__name__,
            },
            exc_info=True,
        )
        return fallback_response(policy)

    logger.debug(
        f"Analyzed article: score={response.credibility_score} "
        f"readability={readability} entities={len(entities.entities.people)} "
        f"keywords={len(keywords)}",
        extra={
            "article_id": article.id,
            "credibility_score": response.credibility_score,
            "classification": response.classification,
            "confidence": response.confidence,
            "duration_ms": round((time.time() - start) * 1000, 1),
        },
    )
    return response


def fallback_response(policy: Optional[ScoringPolicy] = None) -> AnalysisResponse:
    """The fixed response returned when the pipeline itself fails."""
    policy = policy or DEFAULT_POLICY
    return AnalysisResponse(
        credibility_score=50,
        classification="potentially_misleading",
        confidence=60,
        criteria=neutral_criteria(policy.report),
        fact_checks=[FactCheck(
            claim="Article content",
            verdict="misleading",
            explanation=policy.report.fallback_explanation,
        )],
        recommendations=recommendations_for("potentially_misleading", policy.report),
    )


# ============================================================
# FEATURE REPORT (auditing)
# ============================================================

@dataclass
class FeatureReport:
    bundle: FeatureBundle
    readability: int
    keywords: list[dict]
    entities: dict
    sources_cited: list[str]
    claims: list[str]
    term_ratios: dict[str, float]
    raw_polarity: float
    credibility_score: float
    category: str

    def to_dict(self) -> dict:
        return {
            "features": self.bundle.to_dict(),
            "readability": self.readability,
            "keywords": self.keywords,
            "entities": self.entities,
            "sourcesCited": self.sources_cited,
            "claims": self.claims,
            "termRatios": self.term_ratios,
            "rawPolarity": self.raw_polarity,
            "credibilityScore": self.credibility_score,
            "category": self.category,
        }


def extract_features(text: str, policy: Optional[ScoringPolicy] = None) -> FeatureReport:
    """
    Everything the pipeline computes about `text`, before synthesis.

    Claim veracity is left out: it says nothing about the text.
    """
    policy = policy or DEFAULT_POLICY
    sentiment = analyze_sentiment(text, policy.text)
    entity_profile = analyze_entities(text, policy.text)
    classification = CredibilityClassifier(policy.classifier).classify(text, assess_claims=False)

    bundle = FeatureBundle(
        sentiment=sentiment.overall_sentiment,
        emotional_tone=min(1.0, sentiment.emotional_tone),
        bias=sentiment.bias_indicators,
        sensationalism=sentiment.sensationalism,
        factual=classification.factual,
        evidence=classification.evidence,
        entity_consistency=entity_profile.entity_consistency,
    )
    return FeatureReport(
        bundle=bundle,
        readability=readability_score(text, policy.text),
        keywords=extract_keywords(text, policy.text),
        entities=entity_profile.entities.to_dict(),
        sources_cited=entity_profile.sources_cited,
        claims=entity_profile.claims,
        term_ratios=scan_features(text, policy.text).ratios(),
        raw_polarity=sentiment.raw_polarity,
        credibility_score=classification.credibility_score,
        category=classification.category,
    )
