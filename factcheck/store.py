"""
Memory Store — Append-Only Articles and Analysis Results

In-memory storage keyed by auto-incrementing integers starting at 1.
Records are created once and never updated or deleted. Analysis
results are kept as the JSON blobs that were returned to the caller.

Guarded by a lock so ids stay unique under concurrent requests.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from factcheck.models import Article


@dataclass(frozen=True)
class StoredAnalysis:
    id: int
    article_id: int
    credibility_score: int
    classification: str
    confidence: int
    criteria: list[dict]
    fact_checks: list[dict]
    analyzed_at: datetime


@dataclass(frozen=True)
class StoredReport:
    id: int
    analysis_id: int
    details: str
    received_at: datetime


class MemoryStore:
    """Append-only in-memory store."""

    def __init__(self):
        self._lock = threading.Lock()
        self._articles: dict[int, Article] = {}
        self._analyses: dict[int, StoredAnalysis] = {}
        self._reports: dict[int, StoredReport] = {}
        self._next_article_id = 1
        self._next_analysis_id = 1
        self._next_report_id = 1

    # --- Articles ---

    def create_article(self, url: str, title: str, content: str, source: str) -> Article:
        with self._lock:
            article = Article(
                url=url,
                title=title,
                content=content,
                source=source,
                analyzed_at=datetime.now(timezone.utc),
                id=self._next_article_id,
            )
            self._articles[article.id] = article
            self._next_article_id += 1
            return article

    def get_article(self, article_id: int) -> Optional[Article]:
        return self._articles.get(article_id)

    def get_article_by_url(self, url: str) -> Optional[Article]:
        with self._lock:
            for article in self._articles.values():
                if article.url == url:
                    return article
        return None

    # --- Analysis results ---

    def create_analysis_result(
        self,
        article_id: int,
        credibility_score: int,
        classification: str,
        confidence: int,
        criteria: list[dict],
        fact_checks: list[dict],
    ) -> StoredAnalysis:
        with self._lock:
            stored = StoredAnalysis(
                id=self._next_analysis_id,
                article_id=article_id,
                credibility_score=credibility_score,
                classification=classification,
                confidence=confidence,
                criteria=[dict(c) for c in criteria],
                fact_checks=[dict(f) for f in fact_checks],
                analyzed_at=datetime.now(timezone.utc),
            )
            self._analyses[stored.id] = stored
            self._next_analysis_id += 1
            return stored

    def get_analysis_result(self, analysis_id: int) -> Optional[StoredAnalysis]:
        return self._analyses.get(analysis_id)

    def get_analysis_result_by_article_id(self, article_id: int) -> Optional[StoredAnalysis]:
        with self._lock:
            for stored in self._analyses.values():
                if stored.article_id == article_id:
                    return stored
        return None

    # --- Reports ---

    def create_report(self, analysis_id: int, details: str) -> StoredReport:
        with self._lock:
            report = StoredReport(
                id=self._next_report_id,
                analysis_id=analysis_id,
                details=details,
                received_at=datetime.now(timezone.utc),
            )
            self._reports[report.id] = report
            self._next_report_id += 1
            return report

    def counts(self) -> dict:
        with self._lock:
            return {
                "articles": len(self._articles),
                "analyses": len(self._analyses),
                "reports": len(self._reports),
            }


# Singleton — shared across the application
store = MemoryStore()
