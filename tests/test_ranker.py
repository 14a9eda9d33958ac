"""
Tests for ranking and recommendation bookkeeping.
"""

from datetime import timedelta

import pytest

from carematch.models import ApplicantProfile, JobPosting
from carematch.ranker import Recommendations, annotate, rank, ranking_key
from carematch.scorer import score_job


@pytest.fixture
def local():
    """Applicant scored on location and education only."""
    return ApplicantProfile(city="Boston", state="MA", education_level="Bachelor's")


def _job(id, city, state, requirements=None):
    return JobPosting(id=id, title=f"Posting {id}", city=city, state=state, requirements=requirements)


class TestRank:
    """rank() filtering, ordering and truncation."""

    def test_filters_low_scores(self, local, now):
        postings = [
            _job("same-state", "Springfield", "MA"),   # 15
            _job("nearby", "South Boston", "NY"),      # 10, dropped
            _job("far", "Chicago", "IL"),              # 0, dropped
            _job("same-city", "Boston", "MA"),         # 25
        ]
        result = rank(local, postings, now=now)
        assert [s.job.id for s in result] == ["same-city", "same-state"]
        assert all(s.match_score > 10 for s in result)

    def test_ties_keep_input_order(self, local, now):
        postings = [
            _job("C", "Springfield", "MA"),
            _job("A", "Boston", "MA", "BSN"),
            _job("B", "Boston", "MA", "BSN"),
        ]
        result = rank(local, postings, now=now)
        assert [s.job.id for s in result] == ["A", "B", "C"]
        assert [s.match_score for s in result] == [40, 40, 15]

    def test_limit(self, local, now):
        postings = [_job(str(i), "Boston", "MA") for i in range(8)]
        result = rank(local, postings, now=now)
        assert [s.job.id for s in result] == ["0", "1", "2", "3", "4", "5"]

    def test_custom_threshold_and_limit(self, local, now):
        postings = [_job("a", "Boston", "MA"), _job("b", "Springfield", "MA"), _job("c", "Boston", "MA", "BSN")]
        result = rank(local, postings, min_score=20, limit=1, now=now)
        assert [s.job.id for s in result] == ["c"]

    def test_empty(self, local, now):
        assert rank(local, [], now=now) == []

    def test_sorted_descending(self, senior_nurse, senior_nurse_job, local, now):
        postings = [_job("x", "Springfield", "MA"), senior_nurse_job, _job("y", "Boston", "MA")]
        scores = [s.match_score for s in rank(senior_nurse, postings, now=now)]
        assert scores == sorted(scores, reverse=True)


class TestAnnotate:
    """annotate() keeps every posting in order."""

    def test_keeps_all_in_order(self, local, now):
        postings = [_job("far", "Chicago", "IL"), _job("same-city", "Boston", "MA")]
        result = annotate(local, postings, now=now)
        assert [s.job.id for s in result] == ["far", "same-city"]
        assert [s.match_score for s in result] == [0, 25]

    def test_agrees_with_rank_and_scorer(self, senior_nurse, senior_nurse_job, now):
        postings = [senior_nurse_job, _job("y", "Boston", "MA")]
        annotated = {s.job.id: s.result for s in annotate(senior_nurse, postings, now=now)}
        ranked = {s.job.id: s.result for s in rank(senior_nurse, postings, now=now)}
        for job_id, result in ranked.items():
            assert annotated[job_id] == result
        assert annotated["job-1"] == score_job(senior_nurse, senior_nurse_job, now=now)


class TestRecommendations:
    """Recompute triggers."""

    def test_initial_lists(self, local):
        recs = Recommendations(local, [_job("a", "Boston", "MA"), _job("b", "Chicago", "IL")])
        assert [s.job.id for s in recs.recommended] == ["a"]
        assert [s.job.id for s in recs.annotated] == ["a", "b"]

    def test_non_ranking_edit_does_not_recompute(self, local):
        recs = Recommendations(local, [_job("a", "Boston", "MA")])
        before = recs.recommended
        renamed = ApplicantProfile(
            city="Boston", state="MA", education_level="Bachelor's", name="Someone", id="42",
        )
        assert recs.update_applicant(renamed) is False
        assert recs.recommended is before
        assert recs.applicant is renamed

    def test_case_only_edit_does_not_recompute(self, local):
        recs = Recommendations(local, [_job("a", "Boston", "MA")])
        edited = ApplicantProfile(city="BOSTON", state="ma", education_level="bachelor's")
        assert recs.update_applicant(edited) is False

    def test_location_change_recomputes(self, local):
        recs = Recommendations(local, [_job("a", "Boston", "MA"), _job("b", "Chicago", "IL")])
        moved = ApplicantProfile(city="Chicago", state="IL")
        assert recs.update_applicant(moved) is True
        assert [s.job.id for s in recs.recommended] == ["b"]

    def test_replace_postings(self, local):
        recs = Recommendations(local, [])
        assert recs.recommended == []
        assert recs.replace_postings([_job("a", "Boston", "MA")]) is True
        assert [s.job.id for s in recs.recommended] == ["a"]
        assert len(recs.annotated) == 1

    def test_ranking_key_fields(self):
        a = ApplicantProfile(profession="RN", experience_level="5", city="X", state="Y", certifications="BLS")
        b = ApplicantProfile(profession="rn ", experience_level="5", city="x", state="y", certifications="bls",
                             name="different")
        assert ranking_key(a) == ranking_key(b)
        assert ranking_key(a) != ranking_key(ApplicantProfile(profession="RN"))

    def test_scores_each_posting_once(self, local, monkeypatch, now):
        calls = []

        def counting(applicant, job, now=None):
            calls.append(job.id)
            return score_job(applicant, job, now=now)

        monkeypatch.setattr("carematch.ranker.score_job", counting)
        recs = Recommendations(local, [_job("a", "Boston", "MA"), _job("b", "Chicago", "IL")], now=now)
        assert calls == ["a", "b"]
        recs.replace_postings([_job("c", "Boston", "MA")], now=now)
        assert calls == ["a", "b", "c"]

    def test_recommended_shares_annotated_results(self, local):
        recs = Recommendations(local, [_job("a", "Boston", "MA"), _job("b", "Chicago", "IL")])
        assert recs.recommended[0] is recs.annotated[0]

    def test_constructor_now(self, local, now):
        fresh = JobPosting(id="a", city="Boston", state="MA", posted_date=now - timedelta(days=2))
        recs = Recommendations(local, [fresh], now=now)
        assert "Recently posted" in recs.annotated[0].match_reasons
