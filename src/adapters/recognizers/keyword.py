"""Reconocedor heurístico (sin red, sin modelo).

Se usa cuando no hay proveedor IA configurado. Cubre las frases típicas:
- "What's the weather in Paris?"
- "weather for Paris, Tokyo and Lima right now"
- "hello" -> intent `Greeting` (el bot no lo maneja: cae al fallback)

Todo lo demás es `None`.
"""

from __future__ import annotations

import re

from core.domain.models import Entity, RecognitionResult
from core.interfaces.recognizer import Recognizer

_WEATHER_RE = re.compile(
    r"\b(weather|forecast|temperature|temp|rain(?:ing|y)?|sunny|snow(?:ing)?|humid(?:ity)?|wind(?:y)?|hot|cold)\b",
    re.IGNORECASE,
)
_GREETING_RE = re.compile(r"^\s*(hi|hello|hey|good (?:morning|afternoon|evening))\b", re.IGNORECASE)
_PREPOSITION_RE = re.compile(r"\b(?:in|for|at)\b", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r",|;|&|\band\b|\bor\b", re.IGNORECASE)
_TERMINATOR_RE = re.compile(r"[?!.]")

_STOPWORDS: set[str] = {
    "now",
    "right",
    "today",
    "tonight",
    "tomorrow",
    "currently",
    "please",
    "the",
    "moment",
    "this",
    "week",
}


def _clean_city(raw: str) -> str | None:
    tokens = raw.split()
    while tokens and tokens[-1].lower() in _STOPWORDS:
        tokens.pop()
    while tokens and tokens[0].lower() in _STOPWORDS:
        tokens.pop(0)
    city = " ".join(tokens).strip(" '\"")
    return city or None


def extract_cities(text: str) -> list[str]:
    """Ciudades mencionadas tras 'in/for/at', en orden de aparición."""

    segments = _PREPOSITION_RE.split(_TERMINATOR_RE.split(text, maxsplit=1)[0])
    cities: list[str] = []
    for segment in segments[1:]:
        for part in _SEPARATOR_RE.split(segment):
            city = _clean_city(part)
            if city:
                cities.append(city)
    return cities


class KeywordRecognizer(Recognizer):
    """Clasifica por palabras clave; entidades por posición tras preposiciones."""

    async def recognize(self, text: str) -> RecognitionResult:
        if _WEATHER_RE.search(text):
            entities = [Entity(entity=city, type="City") for city in extract_cities(text)]
            return RecognitionResult(
                text=text,
                intents={"GetWeather": 0.9, "None": 0.1},
                entities=entities,
            )

        if _GREETING_RE.search(text):
            return RecognitionResult(text=text, intents={"Greeting": 0.8, "None": 0.2})

        return RecognitionResult(text=text, intents={"None": 1.0})
