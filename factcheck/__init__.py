"""
FactCheck — Heuristic Credibility Scoring for News Articles

Keyword-counting heuristics and fixed thresholds dressed as an NLP
pipeline. Deterministic except for claim veracity, which is drawn
from a random source.

Public API:
  - analyze_article:       Article -> AnalysisResponse (never raises)
  - extract_features:      Raw feature scores for a piece of text
  - CredibilityClassifier: Term-frequency scoring + claim veracity
  - ScoringPolicy:         Term lists and coefficients, overridable
  - MemoryStore:           Append-only articles/results store
  - LatestResultSlot:      Single-slot holder for the latest response

Usage:
    from factcheck import Article, analyze_article
    response = analyze_article(Article(url, title, content, source))
    response.to_dict()
"""

__version__ = "1.0.0"

from factcheck.models import (
    Article,
    AnalysisResponse,
    Classification,
    Criterion,
    FactCheck,
    FeatureBundle,
)
from factcheck.policy import DEFAULT_POLICY, ScoringPolicy, load_policy
from factcheck.classifier import CredibilityClassifier, classifier
from factcheck.analyzer import analyze_article, extract_features, fallback_response
from factcheck.store import MemoryStore, store
from factcheck.cache import LatestResultSlot, latest_result

__all__ = [
    "Article",
    "AnalysisResponse",
    "Classification",
    "Criterion",
    "FactCheck",
    "FeatureBundle",
    "DEFAULT_POLICY",
    "ScoringPolicy",
    "load_policy",
    "CredibilityClassifier",
    "classifier",
    "analyze_article",
    "extract_features",
    "fallback_response",
    "MemoryStore",
    "store",
    "LatestResultSlot",
    "latest_result",
]
