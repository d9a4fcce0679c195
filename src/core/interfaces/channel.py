"""Contrato del canal de conversación.

El dispatcher solo necesita enviar texto plano de vuelta; cualquier canal
(consola, Telegram, Bot Framework...) que implemente `send_activity` sirve.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TurnContext(Protocol):
    """Handle del turno actual: por aquí salen las respuestas."""

    async def send_activity(self, text: str) -> None:
        ...
