"""
Tests for criteria, fact-check and recommendation synthesis.
"""

import pytest

from factcheck.policy import DEFAULT_POLICY
from factcheck.synthesizer import (
    CRITERIA_ORDER,
    build_criteria,
    build_fact_checks,
    classify_score,
    neutral_criteria,
    recommendations_for,
    source_criterion,
)
from tests.helpers import make_claim, make_classification, make_sentiment


class TestSourceCredibility:

    @pytest.mark.parametrize("source", ["bbc.com", "www.reuters.com", "apnews.com"])
    def test_reliable(self, source):
        c = source_criterion(source)
        assert (c.rating, c.status) == ("high", "good")

    @pytest.mark.parametrize("source", ["fakenews.com", "www.clickbait.co"])
    def test_unreliable(self, source):
        c = source_criterion(source)
        assert (c.rating, c.status) == ("low", "bad")

    def test_unknown(self):
        c = source_criterion("example.org")
        assert (c.rating, c.status) == ("medium", "warning")

    def test_empty_source_is_unknown(self):
        assert source_criterion("").rating == "medium"

    def test_reliable_list_checked_first(self):
        assert source_criterion("bbc.com.fakenews.com").rating == "high"


class TestCriteria:

    def test_four_in_fixed_order(self):
        criteria = build_criteria("bbc.com", make_sentiment(), make_classification())
        assert tuple(c.name for c in criteria) == CRITERIA_ORDER

    @pytest.mark.parametrize("score,expected", [
        (0.75, "high"),
        (0.7, "medium"),
        (0.5, "medium"),
        (0.4, "low"),
        (0.0, "low"),
    ])
    def test_factual_buckets(self, score, expected):
        criteria = build_criteria("", make_sentiment(), make_classification(factual=score))
        assert criteria[1].rating == expected

    def test_evidence_bucket_and_status(self):
        criteria = build_criteria("", make_sentiment(), make_classification(evidence=0.9))
        assert (criteria[2].rating, criteria[2].status) == ("high", "good")

    @pytest.mark.parametrize("tone,rating,status", [
        (0.2, "low", "good"),
        (0.3, "medium", "warning"),
        (0.59, "medium", "warning"),
        (0.6, "high", "bad"),
    ])
    def test_emotional_language_inverted(self, tone, rating, status):
        criteria = build_criteria("", make_sentiment(tone), make_classification())
        assert (criteria[3].rating, criteria[3].status) == (rating, status)

    def test_neutral_criteria(self):
        criteria = neutral_criteria()
        assert tuple(c.name for c in criteria) == CRITERIA_ORDER
        assert all((c.rating, c.status) == ("medium", "warning") for c in criteria)


class TestFactChecks:

    def test_no_claims_gives_generic_entry(self):
        checks = build_fact_checks([])
        assert len(checks) == 1
        assert checks[0].claim == "Article content"
        assert checks[0].verdict == "misleading"

    def test_capped_at_three(self):
        claims = [make_claim(f"claim {i}") for i in range(5)]
        checks = build_fact_checks(claims)
        assert [c.claim for c in checks] == ["claim 0", "claim 1", "claim 2"]

    def test_verdict_carried_through(self):
        checks = build_fact_checks([make_claim("x", verdict="verified")])
        assert checks[0].verdict == "verified"


class TestOutwardClassification:

    @pytest.mark.parametrize("score,expected", [
        (100, "reliable"),
        (75, "reliable"),
        (74, "potentially_misleading"),
        (40, "potentially_misleading"),
        (39, "likely_false"),
        (0, "likely_false"),
    ])
    def test_boundaries(self, score, expected):
        assert classify_score(score) == expected


class TestRecommendations:

    def test_three_distinct_sets(self):
        sets = {tuple(recommendations_for(c)) for c in
                ("reliable", "potentially_misleading", "likely_false")}
        assert len(sets) == 3

    def test_reliable_set(self):
        recs = recommendations_for("reliable")
        assert len(recs) == 4
        assert recs[0] == "Always verify information with multiple credible sources"

    def test_unknown_category_reads_as_likely_false(self):
        assert recommendations_for("bogus") == recommendations_for("likely_false")

    def test_returns_fresh_list(self):
        recs = recommendations_for("reliable")
        recs.append("mutated")
        assert "mutated" not in DEFAULT_POLICY.report.recommendations["reliable"]
