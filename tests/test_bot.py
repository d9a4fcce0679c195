"""Tests for WeatherBot message and membership handlers."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from adapters.recognizers import KeywordRecognizer
from core.config import AppSettings
from core.domain.models import Entity, RecognitionResult
from core.errors import MissingWeatherApiKeyError, RecognitionError
from core.services.bot import ChannelMember, WeatherBot, build_bot
from core.services.dispatcher import IntentDispatcher
from core.services.weather_lookup import WeatherLookupService

from .conftest import RecordingContext, city_handler, owm_payload, weather_client


@pytest.fixture
def dispatcher() -> MagicMock:
    mock = MagicMock(spec=IntentDispatcher)
    mock.dispatch = AsyncMock()
    return mock


class TestOnMessage:
    async def test_dispatches_top_intent(self, dispatcher: MagicMock, context: RecordingContext) -> None:
        result = RecognitionResult(
            text="weather in Paris",
            intents={"None": 0.1, "GetWeather": 0.8},
            entities=[Entity(entity="Paris")],
        )
        recognizer = MagicMock()
        recognizer.recognize = AsyncMock(return_value=result)
        bot = WeatherBot(recognizer=recognizer, dispatcher=dispatcher)

        await bot.on_message(context, "weather in Paris")

        recognizer.recognize.assert_awaited_once_with("weather in Paris")
        dispatcher.dispatch.assert_awaited_once_with(context, "GetWeather", result)

    async def test_recognition_errors_propagate(self, dispatcher: MagicMock, context: RecordingContext) -> None:
        recognizer = MagicMock()
        recognizer.recognize = AsyncMock(side_effect=RecognitionError("provider down"))
        bot = WeatherBot(recognizer=recognizer, dispatcher=dispatcher)

        with pytest.raises(RecognitionError):
            await bot.on_message(context, "weather in Paris")
        dispatcher.dispatch.assert_not_called()

    async def test_end_to_end_with_keyword_recognizer(
        self, settings: AppSettings, context: RecordingContext
    ) -> None:
        handler = city_handler({"Paris": owm_payload("Paris"), "Tokyo": owm_payload("Tokyo")})
        async with weather_client(handler) as client:
            bot = WeatherBot(
                recognizer=KeywordRecognizer(),
                dispatcher=IntentDispatcher(WeatherLookupService(settings, client=client)),
            )
            await bot.on_message(context, "What's the weather in Paris, Atlantis and Tokyo?")

        assert len(context.sent) == 2
        assert context.sent[0].startswith("👉 Current weather for Paris")
        assert context.sent[1].startswith("👉 Current weather for Tokyo")


class TestOnMembersAdded:
    async def test_welcomes_each_new_member_but_not_the_bot(
        self, dispatcher: MagicMock, context: RecordingContext
    ) -> None:
        bot = WeatherBot(recognizer=KeywordRecognizer(), dispatcher=dispatcher, bot_id="bot-1")

        await bot.on_members_added(
            context,
            [ChannelMember(id="bot-1"), ChannelMember(id="alice"), ChannelMember(id="bob")],
        )

        assert context.sent == [
            "Welcome to Sobota. Why not asking a question about the weather in your city?",
        ] * 2

    async def test_only_bot_added_sends_nothing(self, dispatcher: MagicMock, context: RecordingContext) -> None:
        bot = WeatherBot(recognizer=KeywordRecognizer(), dispatcher=dispatcher, bot_id="bot-1")

        await bot.on_members_added(context, [ChannelMember(id="bot-1")])

        assert context.sent == []


class TestBuildBot:
    def test_uses_keyword_recognizer_without_ai_key(self, settings: AppSettings) -> None:
        bot = build_bot(settings)
        assert isinstance(bot, WeatherBot)
        assert bot.bot_name == "Sobota"

    def test_requires_weather_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SOBOTA_WEATHER_API_KEY", raising=False)
        monkeypatch.delenv("OpenWeatherMapAPI", raising=False)
        with pytest.raises(MissingWeatherApiKeyError):
            build_bot(AppSettings(_env_file=None))
