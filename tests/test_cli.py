"""Tests for the Typer CLI commands."""

from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.recognizers import KeywordRecognizer
from core.config import AppSettings
from core.services.bot import WeatherBot
from core.services.dispatcher import IntentDispatcher
from core.services.weather_lookup import WeatherLookupService

from .conftest import city_handler, owm_payload

runner = CliRunner()


@pytest.fixture
def mock_transport() -> httpx.MockTransport:
    return httpx.MockTransport(city_handler({"Paris": owm_payload("Paris")}))


@pytest.fixture
def patched_service(
    monkeypatch: pytest.MonkeyPatch, settings: AppSettings, mock_transport: httpx.MockTransport
) -> None:
    def factory(_settings: AppSettings) -> WeatherLookupService:
        return WeatherLookupService(settings, client=httpx.AsyncClient(transport=mock_transport))

    monkeypatch.setattr(cli_main, "WeatherLookupService", factory)


def test_weather_command_success(patched_service: None) -> None:
    result = runner.invoke(cli_main.app, ["weather", "Paris", "Atlantis"])
    assert result.exit_code == 0, result.output


def test_weather_command_all_failed(patched_service: None) -> None:
    result = runner.invoke(cli_main.app, ["weather", "Atlantis"])
    assert result.exit_code == 2


def test_ask_command_sends_reply(monkeypatch: pytest.MonkeyPatch, settings: AppSettings) -> None:
    bot = WeatherBot(
        recognizer=KeywordRecognizer(),
        dispatcher=IntentDispatcher(WeatherLookupService(settings)),
    )
    monkeypatch.setattr(cli_main, "build_bot", lambda _settings: bot)

    result = runner.invoke(cli_main.app, ["ask", "tell me a joke"])

    assert result.exit_code == 0, result.output
    assert "learning" in result.output
