"""Contrato del reconocedor NLU.

Por qué Protocol:
- El Core trata el reconocimiento como una caja negra: texto in,
  `RecognitionResult` out.
- Permite intercambiar el reconocedor LLM por el heurístico (o por un mock
  en tests) sin herencia rígida.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RecognitionResult


@runtime_checkable
class Recognizer(Protocol):
    """Contrato mínimo de un reconocedor.

    Reglas de diseño:
    - `recognize` es asíncrono porque típicamente hará I/O (HTTP).
    - Los errores se propagan: el Core no los absorbe.
    """

    async def recognize(self, text: str) -> RecognitionResult:
        """Clasifica `text` y devuelve intents + entidades."""

        ...
