"""CLI de Sobota (Typer + Rich).

Comandos:
- `chat`: conversación interactiva en consola.
- `ask`: un único mensaje, útil en scripts.
- `weather`: consulta directa de ciudades, sin pasar por el reconocedor.
- `doctor`: diagnóstico y configuración.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.console_channel import ConsoleTurnContext
from cli import doctor
from cli.ui_components import build_outcomes_table, print_banner
from core.config import AppSettings
from core.errors import SobotaError
from core.logging_config import configure_logging
from core.services.bot import ChannelMember, WeatherBot, build_bot
from core.services.weather_lookup import WeatherLookupService

app = typer.Typer(no_args_is_help=True, help="Sobota: ask about the weather in one or more cities.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

_EXIT_WORDS = {"exit", "quit", "bye"}


def _load_bot(settings: AppSettings) -> WeatherBot:
    try:
        return build_bot(settings)
    except SobotaError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


async def _chat_loop(bot: WeatherBot, settings: AppSettings) -> None:
    context = ConsoleTurnContext(_console, bot_name=settings.bot_name)
    await bot.on_members_added(context, [ChannelMember(id="console-user", name="you")])

    while True:
        try:
            text = await asyncio.to_thread(_console.input, "[bold green]you>[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            break
        text = text.strip()
        if not text:
            continue
        if text.lower() in _EXIT_WORDS:
            break
        try:
            await bot.on_message(context, text)
        except SobotaError as exc:
            _console.print(f"[red]Error:[/red] {exc}")


@app.command()
def chat() -> None:
    """Start an interactive conversation."""

    settings = AppSettings()
    bot = _load_bot(settings)
    print_banner(_console, bot_name=settings.bot_name)
    asyncio.run(_chat_loop(bot, settings))


@app.command()
def ask(text: str = typer.Argument(..., help="Message to send to the bot.")) -> None:
    """Send a single message and print the replies."""

    settings = AppSettings()
    bot = _load_bot(settings)
    context = ConsoleTurnContext(_console, bot_name=settings.bot_name)
    try:
        asyncio.run(bot.on_message(context, text))
    except SobotaError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def weather(cities: list[str] = typer.Argument(..., help="One or more city names.")) -> None:
    """Look up cities directly and show every outcome, failures included."""

    settings = AppSettings()
    try:
        service = WeatherLookupService(settings)
    except SobotaError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    outcomes = asyncio.run(service.fetch_outcomes(cities))
    _console.print(build_outcomes_table(outcomes))
    if not any(outcome.ok for outcome in outcomes):
        raise typer.Exit(code=2)


def run() -> None:
    app()
