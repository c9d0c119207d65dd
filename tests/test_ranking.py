"""
Tests for candidate ranking and match explanations.
"""

import pytest

from tunebridge.core.config import ScoringConfig
from tunebridge.core.models import SimilarityMetrics
from tunebridge.core.ranking import CandidateRanker, explain_similarity
from tests.helpers import make_track


@pytest.fixture
def candidates(shape_of_you):
    return [
        shape_of_you,
        make_track("spotify-8", "Perfect", "Ed Sheeran", genre="Pop",
                   acousticness=0.678, danceability=0.456, energy=0.389, valence=0.789, tempo=95.0),
        make_track("yt-2", "Shape of You - Official Video", "Ed Sheeran", source="youtube"),
        make_track("spotify-7", "Someone Like You", "Adele", genre="Pop",
                   acousticness=0.892, danceability=0.389, energy=0.234, valence=0.178, tempo=67.5),
        make_track("x-1", "Zzz", "Nobody"),
    ]


class TestCandidateRanker:
    """Self-exclusion, threshold, ordering and limit."""

    def test_excludes_reference_id(self, shape_of_you, candidates):
        results = CandidateRanker().rank(shape_of_you, candidates, limit=10, min_similarity=0.0)
        assert shape_of_you.id not in [r.track.id for r in results]

    def test_threshold_filters(self, shape_of_you, candidates):
        results = CandidateRanker().rank(shape_of_you, candidates, limit=10, min_similarity=0.05)
        assert "x-1" not in [r.track.id for r in results]
        assert all(r.similarity >= 0.05 for r in results)

    def test_threshold_is_inclusive(self, shape_of_you):
        unrelated = make_track("x-1", "Zzz", "Nobody")
        results = CandidateRanker().rank(shape_of_you, [unrelated], limit=10, min_similarity=0.0)
        assert [r.track.id for r in results] == ["x-1"]

    def test_sorted_descending(self, shape_of_you, candidates):
        results = CandidateRanker().rank(shape_of_you, candidates, limit=10, min_similarity=0.05)
        scores = [r.similarity for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0].track.artist == "Ed Sheeran"

    @pytest.mark.parametrize("limit", [1, 2, 10])
    def test_limit(self, shape_of_you, candidates, limit):
        ranker = CandidateRanker()
        results, total = ranker.rank_with_total(shape_of_you, candidates, limit=limit, min_similarity=0.05)
        assert total == 3
        assert len(results) == min(limit, total)

    def test_ties_keep_input_order(self, shape_of_you):
        a = make_track("a", "Other", "Ed Sheeran", popularity=10)
        b = make_track("b", "Other", "Ed Sheeran", popularity=90)
        results = CandidateRanker().rank(shape_of_you, [a, b], limit=10, min_similarity=0.0)
        assert [r.track.id for r in results] == ["a", "b"]

    def test_popularity_tie_break(self, shape_of_you):
        a = make_track("a", "Other", "Ed Sheeran", popularity=10)
        b = make_track("b", "Other", "Ed Sheeran", popularity=90)
        ranker = CandidateRanker(ScoringConfig(tie_break="popularity"))
        results = ranker.rank(shape_of_you, [a, b], limit=10, min_similarity=0.0)
        assert [r.track.id for r in results] == ["b", "a"]

    def test_unknown_tie_break(self):
        with pytest.raises(ValueError):
            CandidateRanker(ScoringConfig(tie_break="alphabetical"))

    def test_every_result_is_explained(self, shape_of_you, candidates):
        results = CandidateRanker().rank(shape_of_you, candidates, limit=10, min_similarity=0.0)
        assert all(r.explanations for r in results)

    def test_same_song_other_source(self, shape_of_you, candidates):
        results = CandidateRanker().rank(shape_of_you, candidates, limit=10, min_similarity=0.6)
        by_id = {r.track.id: r for r in results}
        assert "yt-2" in by_id
        assert "Strong title/artist match" in by_id["yt-2"].explanations


class TestExplanations:
    """Explanation strings derived from the metrics breakdown."""

    def test_strong_signals(self):
        metrics = SimilarityMetrics(text=0.8, audio=0.9, genre=1.0, overall=0.9)
        assert explain_similarity(metrics) == [
            "Strong title/artist match", "Same genre", "Very similar audio features",
        ]

    def test_partial_signals_at_upper_bounds(self):
        metrics = SimilarityMetrics(text=0.7, audio=0.8, genre=0.7, overall=0.6)
        assert explain_similarity(metrics) == [
            "Partial title/artist match", "Similar genre", "Similar audio features",
        ]

    def test_fallback(self):
        metrics = SimilarityMetrics(text=0.3, audio=0.6, genre=0.5, overall=0.2)
        assert explain_similarity(metrics) == ["General similarity"]
