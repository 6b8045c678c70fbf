"""Unit tests for airport configuration loading and keyword helpers."""

import json

import pytest

from internal.airport_config import (
    AirportProfile,
    ErrConfigNotFound,
    ErrInvalidConfig,
    Load,
    compile_keyword_pattern,
)

MINIMAL = {
    "airport": {
        "code": "BLR",
        "city": "Bangalore",
        "alternateCity": "Bengaluru",
        "airportName": "Kempegowda International Airport",
        "locationSlug": "bangalore_airport",
        "synonyms": ["bangalore airport", "kempegowda airport"],
    },
    "airlines": {
        "indigo": {"displayName": "IndiGo", "keywords": ["indigo", "6e"]},
        "air_india": {"displayName": "Air India", "keywords": ["air india", "ai"]},
    },
    "categories": {"lounge": ["lounge"]},
    "dataCollection": {"defaultQueryTemplate": "${airportSynonyms} OR ${airlines}"},
}


class TestLoad:
    def test_loads_shipped_yaml(self, airport: AirportProfile) -> None:
        assert airport.config.airport.code == "BLR"
        assert "luggage_handling" in airport.category_keywords()
        assert "indigo" in airport.airline_keywords()

    def test_loads_json(self, tmp_path) -> None:
        path = tmp_path / "airport.json"
        path.write_text(json.dumps(MINIMAL), encoding="utf-8")

        profile = Load(str(path))

        assert profile.config.airport.city == "Bangalore"
        assert [a.slug for a in profile.config.airlines] == ["indigo", "air_india"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ErrConfigNotFound):
            Load(str(tmp_path / "nope.yaml"))

    def test_unsupported_suffix(self, tmp_path) -> None:
        path = tmp_path / "airport.txt"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(ErrInvalidConfig):
            Load(str(path))

    def test_missing_airport_section(self, tmp_path) -> None:
        path = tmp_path / "airport.json"
        path.write_text(json.dumps({"airlines": {}}), encoding="utf-8")
        with pytest.raises(ErrInvalidConfig):
            Load(str(path))


@pytest.fixture
def profile(tmp_path) -> AirportProfile:
    path = tmp_path / "airport.json"
    path.write_text(json.dumps(MINIMAL), encoding="utf-8")
    return Load(str(path))


class TestTemplates:
    def test_format_template_fills_airport_vars(self, profile: AirportProfile) -> None:
        assert profile.format_template("${city} (${code})") == "Bangalore (BLR)"

    def test_format_template_extra_vars_and_unknown(self, profile: AirportProfile) -> None:
        result = profile.format_template("${topic} at ${airportName} ${missing}", topic="wifi")
        assert result == "wifi at Kempegowda International Airport ${missing}"

    def test_default_query(self, profile: AirportProfile) -> None:
        assert profile.build_default_query() == (
            "bangalore airport OR kempegowda airport OR indigo OR air india"
        )

    def test_shipped_default_query_mentions_airport_and_airlines(
        self, airport: AirportProfile
    ) -> None:
        query = airport.build_default_query()
        assert query.startswith("bangalore airport OR bengaluru airport")
        assert "spicejet" in query
        assert "${" not in query

    def test_reddit_terms_are_formatted(self, airport: AirportProfile) -> None:
        terms = airport.reddit_search_terms()
        assert terms[0] == "Bangalore airport"
        assert all("${" not in t for t in terms)


class TestExtraction:
    def test_location_focus(self, profile: AirportProfile) -> None:
        assert profile.extract_location_focus("Landed at Bengaluru today") == "bangalore_airport"
        assert profile.extract_location_focus("Landed in Delhi") is None
        assert profile.extract_location_focus("") is None

    def test_airline_mention_uses_slug(self, profile: AirportProfile) -> None:
        assert profile.extract_airline_mention("Flew AIR INDIA yesterday") == "air_india"
        assert profile.extract_airline_mention("6E 123 was late") == "indigo"

    def test_short_codes_need_word_boundary(self, profile: AirportProfile) -> None:
        assert profile.extract_airline_mention("She said the wait was long") is None

    def test_first_configured_airline_wins(self, profile: AirportProfile) -> None:
        assert profile.extract_airline_mention("air india vs indigo") == "indigo"

    def test_display_name(self, profile: AirportProfile) -> None:
        assert profile.airline_display_name("air_india") == "Air India"
        assert profile.airline_display_name("go_first") == "Go First"


class TestKeywordPattern:
    def test_empty_list_gives_none(self) -> None:
        assert compile_keyword_pattern([]) is None
        assert compile_keyword_pattern(["  "]) is None

    def test_multi_word_matches_any_whitespace(self) -> None:
        pattern = compile_keyword_pattern(["wait time"])
        assert pattern.search("the WAIT   time was long")
        assert not pattern.search("waittime")

    def test_escapes_regex_characters(self) -> None:
        pattern = compile_keyword_pattern(["check-in", "c++"])
        assert pattern.search("online check-in failed")
        assert pattern.search("I code c++ daily")


class TestToDict:
    def test_serializable_shape(self, airport: AirportProfile) -> None:
        data = airport.to_dict()
        assert data["airport"]["code"] == "BLR"
        assert data["airlines"]["indigo"]["displayName"] == "IndiGo"
        assert data["dataCollection"]["defaultQuery"] == airport.build_default_query()
        json.dumps(data)
