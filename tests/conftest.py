"""Pytest configuration and fixtures for the Sobota test-suite."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

WEATHER_URL = "https://owm.test/data/2.5/weather"


class RecordingContext:
    """TurnContext double that keeps every outbound message."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    async def send_activity(self, text: str) -> None:
        self.sent.append(text)


def owm_payload(
    name: str,
    *,
    description: str = "clear sky",
    temp: float = 21.5,
    feels_like: float = 20.0,
    humidity: int = 60,
    wind_speed: float = 10.0,
) -> dict[str, Any]:
    """Minimal OpenWeatherMap current-weather body."""
    return {
        "name": name,
        "weather": [{"id": 800, "main": "Clear", "description": description}],
        "main": {"temp": temp, "feels_like": feels_like, "humidity": humidity, "pressure": 1012},
        "wind": {"speed": wind_speed, "deg": 90},
    }


def weather_client(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by `handler`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def city_handler(
    payloads: dict[str, dict[str, Any]],
    *,
    seen: list[str] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Answer with the payload registered for `q`, 404 for unknown cities."""

    def handler(request: httpx.Request) -> httpx.Response:
        city = request.url.params["q"]
        if seen is not None:
            seen.append(city)
        if city in payloads:
            return httpx.Response(200, json=payloads[city])
        return httpx.Response(404, json={"cod": "404", "message": "city not found"})

    return handler


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        weather_api_key="test-key",
        weather_base_url=WEATHER_URL,
        ai_api_key=None,
    )


@pytest.fixture
def context() -> RecordingContext:
    return RecordingContext()
