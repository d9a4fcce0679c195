"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LookupOutcome


def print_banner(console: Console, *, bot_name: str = "Sobota") -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (one-shot).
    """

    title = Text(bot_name.upper(), style="bold cyan")
    subtitle = Text("Weather chat • OpenWeatherMap • type 'exit' to leave", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcomes_table(outcomes: Sequence[LookupOutcome]) -> Table:
    """Tabla Rich con el resultado de cada ciudad (incluye las fallidas)."""

    table = Table(title="Current Weather")
    table.add_column("Query", style="cyan", no_wrap=True)
    table.add_column("City", style="white")
    table.add_column("Conditions", style="white")
    table.add_column("Temp °C", justify="right", style="green")
    table.add_column("Feels °C", justify="right", style="green")
    table.add_column("Humidity", justify="right")
    table.add_column("Wind km/h", justify="right")
    table.add_column("Error", style="red")

    for outcome in outcomes:
        report = outcome.report
        if report is None:
            table.add_row(outcome.city, "", "", "", "", "", "", outcome.error or "failed")
            continue
        table.add_row(
            outcome.city,
            report.city,
            report.description,
            f"{report.temperature:g}",
            f"{report.feels_like:g}",
            f"{report.humidity:g}%",
            str(report.wind_kmh),
            "",
        )
    return table
