"""Tests for domain models: recognition results, weather reports, intents."""

from __future__ import annotations

import pytest

from core.domain.intents import Intent
from core.domain.models import Entity, LookupOutcome, RecognitionResult, WeatherReport

from .conftest import owm_payload


class TestIntentParse:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("GetWeather", Intent.GET_WEATHER),
            ("None", Intent.NONE),
            ("Greeting", Intent.UNRECOGNIZED),
            ("getweather", Intent.UNRECOGNIZED),
            ("", Intent.UNRECOGNIZED),
            (None, Intent.UNRECOGNIZED),
        ],
    )
    def test_parse_is_exact_and_total(self, label: str | None, expected: Intent) -> None:
        assert Intent.parse(label) is expected


class TestRecognitionResult:
    def test_top_intent_picks_highest_score(self) -> None:
        result = RecognitionResult(intents={"None": 0.2, "GetWeather": 0.7, "Greeting": 0.1})
        assert result.top_intent() == "GetWeather"

    def test_top_intent_defaults_to_none_label(self) -> None:
        assert RecognitionResult().top_intent() == "None"

    def test_top_intent_respects_min_score(self) -> None:
        result = RecognitionResult(intents={"GetWeather": 0.3})
        assert result.top_intent(min_score=0.5) == "None"
        assert result.top_intent(default="Fallback", min_score=0.5) == "Fallback"

    def test_entities_keep_order_and_expose_value(self) -> None:
        result = RecognitionResult(
            entities=[Entity(entity="Paris"), Entity(entity="Tokyo", type="Weather.Location")]
        )
        assert [e.value for e in result.entities] == ["Paris", "Tokyo"]
        assert result.entities[0].type == "City"

    @pytest.mark.parametrize(("raw", "expected"), [(1.01, 1.0), (-0.02, 0.0), (0.42, 0.42), (None, None)])
    def test_entity_score_is_clamped(self, raw: float | None, expected: float | None) -> None:
        assert Entity(entity="Paris", score=raw).score == expected


class TestWeatherReport:
    def test_from_provider_payload(self) -> None:
        report = WeatherReport.from_provider_payload(
            owm_payload("Paris", description="light rain", temp=12.3, feels_like=11.0, humidity=81, wind_speed=4.1)
        )
        assert report.city == "Paris"
        assert report.description == "light rain"
        assert report.temperature == 12.3
        assert report.feels_like == 11.0
        assert report.humidity == 81
        assert report.wind_speed == 4.1

    def test_wind_speed_converted_to_kmh(self) -> None:
        report = WeatherReport.from_provider_payload(owm_payload("Paris", wind_speed=10.0))
        assert report.wind_kmh == 36

    def test_wind_kmh_rounds_to_nearest(self) -> None:
        report = WeatherReport.from_provider_payload(owm_payload("Oslo", wind_speed=4.1))
        # 4.1 * 3.6 = 14.76
        assert report.wind_kmh == 15

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"name": "Paris"},
            {**owm_payload("Paris"), "weather": []},
            {**owm_payload("Paris"), "main": None},
            {**owm_payload("Paris"), "wind": "calm"},
            {**owm_payload("Paris"), "name": None},
            {**owm_payload("Paris"), "main": {"temp": "warm", "feels_like": 1, "humidity": 2}},
        ],
    )
    def test_malformed_payload_raises_value_error(self, payload: object) -> None:
        with pytest.raises(ValueError):
            WeatherReport.from_provider_payload(payload)


def test_lookup_outcome_ok_flag() -> None:
    report = WeatherReport.from_provider_payload(owm_payload("Paris"))
    assert LookupOutcome(city="paris", report=report).ok
    assert not LookupOutcome(city="Atlantis", error="HTTP 404").ok
