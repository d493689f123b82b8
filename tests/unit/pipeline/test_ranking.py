"""
Unit tests for the ranking pipeline and its live views.

Tests coverage:
- Filtering of chosen labels (exact match)
- Sorting by score then text
- Top-K truncation, including K = 0
- Invalidation on pool replacement and chosen-labels mutation
- Coalescing of successive changes into one recompute
"""

import pytest

from label_suggestions.pipeline.chosen import ChosenLabels
from label_suggestions.pipeline.pool import SuggestionPool
from label_suggestions.pipeline.ranking import RankingPipeline, SuggestionView


@pytest.fixture
def chosen():
    return ChosenLabels()


@pytest.fixture
def pool(chosen):
    pool = SuggestionPool(chosen.lock)
    pool.replace_all({"coffee": 10000, "rent": 9900, "salary": 100, "friends": 100, "change": 1})
    return pool


@pytest.fixture
def pipeline(pool, chosen):
    return RankingPipeline(pool, chosen, top_suggestions_count=3)


@pytest.mark.unit
class TestRankingPipeline:
    """Tests for RankingPipeline derivation."""

    def test_sorted_by_score_then_text(self, pipeline):
        assert pipeline.all_suggestions() == ("coffee", "rent", "friends", "salary", "change")

    def test_top_is_truncated_prefix(self, pipeline):
        assert pipeline.top_suggestions() == ("coffee", "rent", "friends")

    def test_top_larger_than_pool(self, pool, chosen):
        pipeline = RankingPipeline(pool, chosen, top_suggestions_count=50)

        assert pipeline.top_suggestions() == pipeline.all_suggestions()

    def test_zero_top_count_is_always_empty(self, pool, chosen):
        pipeline = RankingPipeline(pool, chosen, top_suggestions_count=0)

        assert pipeline.top_suggestions() == ()
        chosen.append("coffee")
        pool.replace_all({"new": 5})
        assert pipeline.top_suggestions() == ()
        assert pipeline.all_suggestions() == ("new",)

    def test_negative_top_count_rejected(self, pool, chosen):
        with pytest.raises(ValueError):
            RankingPipeline(pool, chosen, top_suggestions_count=-1)

    def test_non_integer_top_count_rejected(self, pool, chosen):
        with pytest.raises(TypeError):
            RankingPipeline(pool, chosen, top_suggestions_count="3")

    def test_chosen_labels_are_filtered(self, pipeline, chosen):
        chosen.append("rent")

        assert "rent" not in pipeline.all_suggestions()
        assert pipeline.top_suggestions() == ("coffee", "friends", "salary")

    def test_filter_is_exact_match(self, pipeline, chosen):
        chosen.append("RENT")

        assert "rent" in pipeline.all_suggestions()

    def test_removed_chosen_label_reappears(self, pipeline, chosen):
        chosen.append("coffee")
        assert pipeline.top_suggestions()[0] == "rent"

        chosen.remove("coffee")

        assert pipeline.top_suggestions()[0] == "coffee"

    def test_chosen_label_not_in_pool_is_harmless(self, pipeline, chosen):
        chosen.append("unknown")

        assert len(pipeline.all_suggestions()) == 5

    def test_pool_replacement_is_reflected(self, pipeline, pool):
        pool.replace_all({"groceries": 7})

        assert pipeline.all_suggestions() == ("groceries",)
        assert pipeline.top_suggestions() == ("groceries",)

    def test_does_not_mutate_inputs(self, pipeline, pool, chosen):
        chosen.append("rent")
        before = pool.entries

        pipeline.all_suggestions()
        pipeline.top_suggestions()

        assert pool.entries == before
        assert chosen == ["rent"]

    def test_successive_changes_recompute_once(self, pipeline, chosen, monkeypatch):
        pipeline.all_suggestions()
        calls = []
        original = pipeline._recompute

        def counting_recompute():
            calls.append(1)
            original()

        monkeypatch.setattr(pipeline, "_recompute", counting_recompute)

        chosen.append("rent")
        chosen.append("coffee")
        chosen.remove("rent")

        assert pipeline.all_suggestions() == ("rent", "friends", "salary", "change")
        assert pipeline.top_suggestions() == ("rent", "friends", "salary")
        assert len(calls) == 1

    def test_subscribers_told_of_invalidation(self, pipeline, pool, chosen):
        calls = []
        pipeline.subscribe(lambda: calls.append(1))

        chosen.append("rent")
        pool.replace_all({"a": 1})

        assert len(calls) == 2

    def test_close_stops_observing(self, pipeline, chosen):
        assert "rent" in pipeline.all_suggestions()

        pipeline.close()
        chosen.append("rent")

        assert "rent" in pipeline.all_suggestions()


@pytest.mark.unit
class TestSuggestionView:
    """Tests for the live read-only view."""

    def test_view_is_live(self, pipeline, chosen):
        view = SuggestionView(pipeline.all_suggestions)
        assert len(view) == 5

        chosen.append("coffee")

        assert len(view) == 4
        assert view[0] == "rent"
        assert "coffee" not in view
        assert list(view) == ["rent", "friends", "salary", "change"]

    def test_view_equality_and_repr(self, pipeline):
        view = SuggestionView(pipeline.top_suggestions)

        assert view == ["coffee", "rent", "friends"]
        assert view == ("coffee", "rent", "friends")
        assert view == SuggestionView(pipeline.top_suggestions)
        assert repr(view) == "SuggestionView(['coffee', 'rent', 'friends'])"

    def test_view_is_read_only(self, pipeline):
        view = SuggestionView(pipeline.all_suggestions)

        with pytest.raises(TypeError):
            view[0] = "x"

    def test_view_supports_slicing_and_index(self, pipeline):
        view = SuggestionView(pipeline.all_suggestions)

        assert view[:2] == ("coffee", "rent")
        assert view.index("salary") == 3
