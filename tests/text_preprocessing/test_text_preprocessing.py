"""Unit tests for the text normalizer."""

import pytest

from internal.text_preprocessing import Config, ErrInvalidInput, Input, New, TextProcessing


@pytest.fixture
def normalizer() -> TextProcessing:
    return New()


class TestNormalize:
    """Removal rules."""

    def test_empty_input_yields_empty_output(self, normalizer: TextProcessing) -> None:
        assert normalizer.normalize("") == ""
        assert normalizer.normalize("   \n\t ") == ""

    def test_none_is_treated_as_empty(self, normalizer: TextProcessing) -> None:
        assert normalizer.normalize(None) == ""

    def test_strips_html_tags(self, normalizer: TextProcessing) -> None:
        assert normalizer.normalize("<p>Great <b>lounge</b></p>") == "Great lounge"

    def test_strips_urls(self, normalizer: TextProcessing) -> None:
        text = "Queue photo https://t.co/abc123 and www.example.com/x done"
        assert normalizer.normalize(text) == "Queue photo and done"

    def test_strips_mentions_and_hashtags(self, normalizer: TextProcessing) -> None:
        text = "@IndiGo6E lost my bag #fail #BLR"
        assert normalizer.normalize(text) == "lost my bag"

    def test_collapses_whitespace_and_trims(self, normalizer: TextProcessing) -> None:
        assert normalizer.normalize("  slow \n\n security   line  ") == "slow security line"

    def test_preserves_case(self, normalizer: TextProcessing) -> None:
        assert normalizer.normalize("Air India") == "Air India"

    def test_applies_nfkc(self, normalizer: TextProcessing) -> None:
        # Fullwidth letters fold to ASCII
        assert normalizer.normalize("ＢＬＲ airport") == "BLR airport"

    def test_rejects_non_string(self, normalizer: TextProcessing) -> None:
        with pytest.raises(ErrInvalidInput):
            normalizer.normalize(123)  # type: ignore[arg-type]

    def test_disabled_rules_are_kept(self) -> None:
        normalizer = New(Config(strip_hashtags=False))
        assert normalizer.normalize("#BLR <i>rocks</i>") == "#BLR rocks"


class TestIdempotence:
    """normalize(normalize(x)) == normalize(x)."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain text",
            "<<b>b>nested</b> tags",
            "#<i></i>tag glued after tag removal",
            "@<b>x</b>user and e<b></b>́ accent",
            "url:https://a.b/c?d=<e>&f=g end",
            "ﬁ ligature and 　 ideographic space",
            "Lost my baggage, terrible service, delayed",
            "<a href='http://x.y'>link</a> @a #b\n\n\tdone",
        ],
    )
    def test_second_pass_is_noop(self, normalizer: TextProcessing, text: str) -> None:
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once


class TestProcess:
    """process() returns the clean text plus removal stats."""

    def test_reports_removed_counts(self, normalizer: TextProcessing) -> None:
        output = normalizer.process(
            Input(text="<b>Hi</b> @a @b #c see https://x.io")
        )

        assert output.clean_text == "Hi see"
        assert output.stats.html_tags_removed == 2
        assert output.stats.mentions_removed == 2
        assert output.stats.hashtags_removed == 1
        assert output.stats.urls_removed == 1
        assert output.stats.original_length > output.stats.clean_length
        assert 0.0 < output.stats.reduction_ratio < 1.0

    def test_empty_text_has_zero_ratio(self, normalizer: TextProcessing) -> None:
        output = normalizer.process(Input(text=""))
        assert output.clean_text == ""
        assert output.stats.reduction_ratio == 0.0

    def test_rejects_wrong_input_type(self, normalizer: TextProcessing) -> None:
        with pytest.raises(ErrInvalidInput):
            normalizer.process("not an Input")  # type: ignore[arg-type]
