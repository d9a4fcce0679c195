"""Handlers de conversación: mensajes entrantes y altas de miembros.

Por qué una capa tan delgada:
- El canal (consola u otro) solo conoce `WeatherBot`; reconocimiento y
  despacho quedan en el Core.
- No hay estado entre turnos: cada mensaje se reconoce y despacha por sí solo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from adapters.recognizers import build_recognizer
from core.config import AppSettings
from core.interfaces.channel import TurnContext
from core.interfaces.recognizer import Recognizer
from core.services.dispatcher import IntentDispatcher
from core.services.weather_lookup import WeatherLookupService

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Why not asking a question about the weather in your city?"


@dataclass(frozen=True)
class ChannelMember:
    """Participante de la conversación, tal como lo reporta el canal."""

    id: str
    name: str | None = None


class WeatherBot:
    def __init__(
        self,
        *,
        recognizer: Recognizer,
        dispatcher: IntentDispatcher,
        bot_id: str = "sobota",
        bot_name: str = "Sobota",
    ) -> None:
        self._recognizer = recognizer
        self._dispatcher = dispatcher
        self.bot_id = bot_id
        self.bot_name = bot_name

    @property
    def welcome_message(self) -> str:
        return f"Welcome to {self.bot_name}. {WELCOME_TEXT}"

    async def on_message(self, context: TurnContext, text: str) -> None:
        """Reconoce `text` y despacha según su intent principal.

        Los errores de reconocimiento se propagan al llamador.
        """

        logger.debug("Processing message activity")
        result = await self._recognizer.recognize(text)
        intent = result.top_intent()
        await self._dispatcher.dispatch(context, intent, result)

    async def on_members_added(self, context: TurnContext, members: Iterable[ChannelMember]) -> None:
        """Saluda a cada miembro nuevo, excepto al propio bot."""

        for member in members:
            if member.id != self.bot_id:
                await context.send_activity(self.welcome_message)


def build_bot(settings: AppSettings, *, recognizer: Recognizer | None = None) -> WeatherBot:
    """Arma reconocedor, servicio de clima y dispatcher desde la config.

    Lanza `MissingWeatherApiKeyError` si no hay API key de clima configurada.
    """

    weather = WeatherLookupService(settings)
    return WeatherBot(
        recognizer=recognizer or build_recognizer(settings),
        dispatcher=IntentDispatcher(weather),
        bot_name=settings.bot_name,
    )
