"""Despacho de intents.

Responsabilidad:
- `GetWeather`: consultar cada ciudad reconocida y enviar un mensaje por reporte.
- `None`: el modelo no vio nada accionable; pedimos disculpas.
- Cualquier otro label: se registra en el log y se envía el mensaje genérico.

Por qué pasar por `Intent.parse`:
- La tabla de handlers cubre todo el enum, así que no existe label para el
  que el dispatcher no responda o lance una excepción.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from core.domain.intents import Intent
from core.domain.models import RecognitionResult
from core.interfaces.channel import TurnContext
from core.services.rendering import render_weather_report
from core.services.weather_lookup import WeatherLookupService

logger = logging.getLogger(__name__)

NONE_INTENT_MESSAGE = "I can't understand this yet, but I'm learning, sorry!"
UNRECOGNIZED_INTENT_MESSAGE = "Sorry, for now I can't understand that request."

_Handler = Callable[[TurnContext, str, RecognitionResult], Awaitable[None]]


class IntentDispatcher:
    def __init__(self, weather: WeatherLookupService) -> None:
        self._weather = weather
        self._handlers: dict[Intent, _Handler] = {
            Intent.GET_WEATHER: self._handle_get_weather,
            Intent.NONE: self._handle_none,
            Intent.UNRECOGNIZED: self._handle_unrecognized,
        }

    async def dispatch(self, context: TurnContext, intent: str, result: RecognitionResult) -> None:
        handler = self._handlers[Intent.parse(intent)]
        await handler(context, intent, result)

    async def _handle_get_weather(self, context: TurnContext, intent: str, result: RecognitionResult) -> None:
        cities = [entity.value for entity in result.entities]
        if not cities:
            return

        reports = await self._weather.fetch_all(cities)
        logger.info("Weather for %d/%d requested cities", len(reports), len(cities))
        for report in reports:
            await context.send_activity(render_weather_report(report))

    async def _handle_none(self, context: TurnContext, intent: str, result: RecognitionResult) -> None:
        await context.send_activity(NONE_INTENT_MESSAGE)

    async def _handle_unrecognized(self, context: TurnContext, intent: str, result: RecognitionResult) -> None:
        logger.info("Dispatch unrecognized intent: %s.", intent)
        await context.send_activity(UNRECOGNIZED_INTENT_MESSAGE)
