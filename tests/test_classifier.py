"""
Tests for the term-frequency credibility classifier.

Scoring is deterministic; claim veracity is driven by the injected
random source, so those tests pass a stub or a seeded Random.
"""

import random

import pytest

from factcheck.classifier import CredibilityClassifier
from factcheck.policy import DEFAULT_POLICY
from tests.helpers import SequenceRandom


NEUTRAL = "The meeting is scheduled for Tuesday afternoon."
SOURCED = ("According to a study published by researchers, the data and evidence "
           "from the survey are clear.")
CONSPIRATORIAL = ("SHOCKING bombshell: the secret conspiracy and cover-up they don't "
                  "want you to know! Scientists are wrong.")


@pytest.fixture
def clf():
    return CredibilityClassifier(rng=random.Random(7))


class TestScoring:

    def test_no_signals_scores_base(self, clf):
        result = clf.classify(NEUTRAL)
        assert result.credibility_score == pytest.approx(0.5)
        assert result.confidence == pytest.approx(0.6)
        assert result.category == "potentially_misleading"

    def test_factual_and_evidence_raise_score(self, clf):
        # factual: "according to"; evidence: 7 terms at 0.04
        result = clf.classify(SOURCED)
        assert result.credibility_score == pytest.approx(0.5 + 0.33 * 0.3)
        assert result.confidence == pytest.approx(0.6 + 0.33 * 0.05)
        assert result.factual == pytest.approx(0.075)
        assert result.evidence == pytest.approx(0.42)

    def test_conspiracy_language_lowers_score(self, clf):
        result = clf.classify(CONSPIRATORIAL)
        assert result.credibility_score == pytest.approx(0.3)
        assert result.category == "likely_false"

    def test_score_floor(self, clf):
        p = DEFAULT_POLICY.classifier
        text = " ".join(p.conspiracy_terms + p.sensational_terms)
        assert clf.classify(text).credibility_score == 0.1

    @pytest.mark.parametrize("text", [NEUTRAL, SOURCED, CONSPIRATORIAL, "", "!!!"])
    def test_score_always_in_bounds(self, clf, text):
        result = clf.classify(text)
        assert 0.1 <= result.credibility_score <= 0.9
        assert result.confidence <= 0.95

    def test_term_presence_not_frequency(self, clf):
        once = clf.classify("The data says so.")
        many = clf.classify("The data data data data says so.")
        assert once.credibility_score == many.credibility_score

    def test_confidence_ceiling(self):
        policy = DEFAULT_POLICY.with_overrides({"classifier": {"confidence_per_signal": 2.0}})
        clf = CredibilityClassifier(policy.classifier)
        assert clf.classify(SOURCED).confidence == 0.95

    def test_normalized_subscores_capped(self, clf):
        p = DEFAULT_POLICY.classifier
        result = clf.classify(" ".join(p.conspiracy_terms))
        assert result.conspiracy == 1.0

    def test_scores_are_deterministic(self):
        a = CredibilityClassifier(rng=random.Random(1)).classify(CONSPIRATORIAL)
        b = CredibilityClassifier(rng=random.Random(99)).classify(CONSPIRATORIAL)
        assert a.credibility_score == b.credibility_score
        assert a.confidence == b.confidence


class TestInternalCategory:

    @pytest.mark.parametrize("score,expected", [
        (0.9, "reliable"),
        (0.7, "reliable"),
        (0.69, "potentially_misleading"),
        (0.4, "potentially_misleading"),
        (0.39, "likely_false"),
        (0.1, "likely_false"),
    ])
    def test_thresholds(self, clf, score, expected):
        assert clf.category_for(score) == expected


class TestClaims:

    @pytest.mark.parametrize("veracity,expected", [
        (0.71, "verified"),
        (0.7, "misleading"),
        (0.31, "misleading"),
        (0.3, "false"),
        (0.0, "false"),
    ])
    def test_verdict_cut_points(self, clf, veracity, expected):
        assert clf.verdict_for(veracity) == expected

    def test_same_claim_can_get_different_verdicts(self):
        clf = CredibilityClassifier(rng=SequenceRandom([0.9, 0.1]))
        claim = "The bridge will reopen next spring"
        first = clf.assess_claim(claim)
        second = clf.assess_claim(claim)
        assert first.verdict == "verified"
        assert second.verdict == "false"
        assert first.explanation != second.explanation

    def test_seeded_source_reproduces_verdicts(self):
        text = " ".join(f"Claim number {i} is probably true." for i in range(5))
        a = CredibilityClassifier(rng=random.Random(42)).classify(text)
        b = CredibilityClassifier(rng=random.Random(42)).classify(text)
        assert [c.verdict for c in a.claims] == [c.verdict for c in b.claims]
        assert [c.veracity for c in a.claims] == [c.veracity for c in b.claims]

    def test_claims_capped_and_ordered(self, clf):
        text = " ".join(f"Claim number {i} is probably true." for i in range(8))
        claims = clf.analyze_claims(text)
        assert len(claims) == 5
        assert claims[0].text == "Claim number 0 is probably true"

    def test_short_sentences_skipped(self, clf):
        assert clf.analyze_claims("It is so. This is it.") == []

    def test_explanation_matches_verdict(self, clf):
        for claim in clf.analyze_claims(NEUTRAL * 3):
            assert claim.explanation == DEFAULT_POLICY.classifier.explanations[claim.verdict]


class TestScoreOnly:

    def test_no_veracity_drawn(self):
        rng = SequenceRandom([])
        clf = CredibilityClassifier(rng=rng)
        result = clf.classify(NEUTRAL, assess_claims=False)
        assert result.claims == []
        assert rng.calls == 0

    def test_scores_unchanged(self, clf):
        full = clf.classify(CONSPIRATORIAL)
        scored = clf.classify(CONSPIRATORIAL, assess_claims=False)
        assert scored.credibility_score == full.credibility_score
        assert scored.confidence == full.confidence
        assert scored.category == full.category


class TestFailure:

    def test_failure_returns_neutral(self, clf, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("broken")
        monkeypatch.setattr(clf, "_classify", boom)
        result = clf.classify("anything")
        assert result.credibility_score == 0.5
        assert result.confidence == 0.6
        assert result.claims == []
        assert result.category == "potentially_misleading"
