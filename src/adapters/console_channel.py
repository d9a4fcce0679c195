"""Canal de consola (Rich).

Implementa `TurnContext` imprimiendo cada respuesta del bot como un panel.
Guarda lo enviado en `sent` para que la CLI (y los tests) puedan inspeccionarlo.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.interfaces.channel import TurnContext


class ConsoleTurnContext(TurnContext):
    def __init__(self, console: Console, *, bot_name: str = "Sobota") -> None:
        self._console = console
        self._bot_name = bot_name
        self.sent: list[str] = []

    async def send_activity(self, text: str) -> None:
        self.sent.append(text)
        self._console.print(
            Panel(Text(text.rstrip()), title=Text(self._bot_name, style="bold cyan"), border_style="cyan")
        )
