"""Unit tests for the keyword sentiment scorer."""

import pytest

from internal.model.constant import SENTIMENT_CATEGORIES
from internal.sentiment_analysis import (
    Config,
    ErrInvalidInput,
    Input,
    New,
    SentimentAnalysis,
)
from internal.sentiment_analysis.usecase.helpers import raw_score, threshold, unit_score


@pytest.fixture
def scorer() -> SentimentAnalysis:
    return New()


class TestWordCounting:
    """Positive/negative list matching."""

    def test_no_matches_is_neutral(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="Flight to Mumbai at noon"))

        assert output.overall_sentiment == 0
        assert output.raw_score == 0
        assert output.sentiment_score == 0.5
        assert output.positive_matches == []
        assert output.negative_matches == []

    def test_empty_text_is_neutral(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text=""))
        assert output.overall_sentiment == 0
        assert all(v is None for v in output.categories.values())

    def test_reference_complaint(self, scorer: SentimentAnalysis) -> None:
        """'lost' is not a sentiment word; terrible and delayed are."""
        output = scorer.process(Input(text="Lost my baggage, terrible service, delayed"))

        assert output.negative_matches == ["terrible", "delayed"]
        assert output.positive_matches == []
        assert output.overall_sentiment == -1
        assert output.sentiment_score == 0.0
        assert output.categories["luggage_handling"] is not None
        assert output.categories["luggage_handling"] == -1

    def test_positive_text(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="Great lounge, excellent food, smooth security"))

        assert output.overall_sentiment == 1
        assert output.sentiment_score == 1.0
        assert output.categories["lounge"] == 1
        assert output.categories["amenities"] == 1
        assert output.categories["security"] == 1

    def test_mixed_text_within_threshold_is_neutral(self, scorer: SentimentAnalysis) -> None:
        # 3 positive, 2 negative -> raw = 0.2, not > 0.2
        output = scorer.process(
            Input(text="good great best but bad and slow")
        )
        assert output.raw_score == pytest.approx(0.2)
        assert output.overall_sentiment == 0

    def test_whole_tokens_only(self, scorer: SentimentAnalysis) -> None:
        """'badge' and 'goodbye' contain list words but are not list words."""
        output = scorer.process(Input(text="Show your badge and say goodbye"))
        assert output.overall_sentiment == 0

    def test_repeated_word_counts_each_time(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="bad bad good"))
        assert output.negative_matches == ["bad", "bad"]
        assert output.raw_score == pytest.approx(-1 / 3)
        assert output.overall_sentiment == -1


class TestCategories:
    """Category gating by keyword presence."""

    def test_every_category_present_in_output(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="anything"))
        assert set(output.categories) == set(SENTIMENT_CATEGORIES)

    def test_absent_keyword_is_none(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="terrible lounge"))
        assert output.categories["lounge"] == -1
        assert output.categories["security"] is None
        assert output.categories["check_in"] is None

    def test_multi_word_keyword(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="the boarding pass kiosk was awesome"))
        assert output.categories["check_in"] == 1

    def test_neutral_category_is_zero_not_none(self, scorer: SentimentAnalysis) -> None:
        output = scorer.process(Input(text="security was okay"))
        assert output.categories["security"] == 0

    def test_custom_category_keywords(self) -> None:
        scorer = New(Config(category_keywords={"parking": ["parking", "car park"]}))
        output = scorer.process(Input(text="Car park was horrible"))
        assert output.categories == {"parking": -1}


class TestAnalyze:
    def test_returns_model_type(self, scorer: SentimentAnalysis) -> None:
        result = scorer.analyze("awful queue")
        assert result.overall_sentiment == -1
        assert result.categories["security"] == -1

    def test_rejects_non_input(self, scorer: SentimentAnalysis) -> None:
        with pytest.raises(ErrInvalidInput):
            scorer.process("text")  # type: ignore[arg-type]


class TestHelpers:
    @pytest.mark.parametrize(
        "pos,neg,expected",
        [(0, 0, 0.0), (1, 0, 1.0), (0, 2, -1.0), (3, 1, 0.5)],
    )
    def test_raw_score(self, pos: int, neg: int, expected: float) -> None:
        assert raw_score(pos, neg) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw,expected",
        [(0.21, 1.0), (0.2, 0.0), (-0.2, 0.0), (-0.21, -1.0), (0.0, 0.0)],
    )
    def test_threshold_boundaries(self, raw: float, expected: float) -> None:
        assert threshold(raw, 0.2, -0.2) == expected

    def test_unit_score_range(self) -> None:
        assert unit_score(-1.0) == 0.0
        assert unit_score(0.0) == 0.5
        assert unit_score(1.0) == 1.0


class TestConfig:
    def test_inverted_thresholds_rejected(self) -> None:
        with pytest.raises(ValueError):
            Config(threshold_positive=-0.5, threshold_negative=0.5)

    def test_new_rejects_wrong_config(self) -> None:
        with pytest.raises(ValueError):
            New(config={"threshold_positive": 0.2})  # type: ignore[arg-type]
