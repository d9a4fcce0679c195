"""Configuración de logging para los entry-points de la CLI.

Por qué aquí:
- Los módulos de librería solo llaman `logging.getLogger(__name__)`.
- Los handlers se instalan una sola vez, desde quien es dueño del proceso.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: str | int = "INFO", *, console: Console | None = None) -> None:
    """Envía el logging estándar a través de Rich (stderr por defecto)."""

    global _CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    if _CONFIGURED:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    # httpx registra cada request en INFO; demasiado ruido para un chat.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _CONFIGURED = True
