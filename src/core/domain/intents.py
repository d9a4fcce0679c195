"""Intents que Sobota entiende.

Por qué un enum cerrado:
- El reconocedor entrega labels libres; al mapearlos aquí el dispatcher es
  exhaustivo y cada label cae en exactamente un miembro.
- `UNRECOGNIZED` recoge lo que el modelo conoce pero el bot no maneja.
"""

from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    """Intents soportados más el cajón de sastre."""

    GET_WEATHER = "GetWeather"
    NONE = "None"
    UNRECOGNIZED = "__unrecognized__"

    @classmethod
    def parse(cls, label: str | None) -> "Intent":
        """Mapea un label crudo a un miembro (coincidencia exacta, nunca lanza)."""

        if label == cls.GET_WEATHER.value:
            return cls.GET_WEATHER
        if label == cls.NONE.value:
            return cls.NONE
        return cls.UNRECOGNIZED
