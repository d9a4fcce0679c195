"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.recognizers import LLMRecognizer, build_recognizer
from core.config import AppSettings, write_user_env_vars
from core.services.weather_lookup import WEATHER_UNITS

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, type(exc).__name__


async def _check_weather_key(settings: AppSettings) -> tuple[bool, str]:
    """One real lookup; 401 means the key is wrong, not the network."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(
                settings.weather_base_url,
                params={"q": "London", "appid": settings.weather_api_key, "units": WEATHER_UNITS},
            )
    except Exception as exc:
        return False, type(exc).__name__
    if response.status_code == 401:
        return False, "Key rejected (HTTP 401)"
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Sobota Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if (settings.weather_api_key or "").strip():
        ok_key, detail_key = asyncio.run(_check_weather_key(settings))
        table.add_row("Weather key", "OK" if ok_key else "FAIL", detail_key)
    else:
        table.add_row("Weather key", "MISSING", "Run `sobota doctor setup-weather`")
    table.add_row("Weather endpoint", "OK", settings.weather_base_url)

    recognizer = build_recognizer(settings)
    if isinstance(recognizer, LLMRecognizer):
        table.add_row("Recognizer", "OK", f"LLM {settings.ai_model} @ {settings.ai_base_url}")
    else:
        table.add_row("Recognizer", "OPTIONAL", "No AI key set -> keyword recognizer fallback")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http("https://api.openweathermap.org", settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-weather")
def setup_weather() -> None:
    """Store the OpenWeatherMap API key in the user config .env."""

    api_key = typer.prompt("OpenWeatherMap API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("api key is required")

    env_path = write_user_env_vars({"SOBOTA_WEATHER_API_KEY": api_key})
    _console.print(f"[green]Saved weather config to:[/green] {env_path}")


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI recognizer setup (stores config in the user config .env)."""

    provider = typer.prompt(
        "AI provider",
        default="openai",
        show_default=True,
    ).strip().lower()

    presets: dict[str, dict[str, str]] = {
        "openai": {"SOBOTA_AI_BASE_URL": "https://api.openai.com/v1", "SOBOTA_AI_MODEL": "gpt-4o-mini"},
        "groq": {"SOBOTA_AI_BASE_URL": "https://api.groq.com/openai/v1", "SOBOTA_AI_MODEL": "llama-3.1-8b-instant"},
        "deepseek": {"SOBOTA_AI_BASE_URL": "https://api.deepseek.com", "SOBOTA_AI_MODEL": "deepseek-chat"},
        "ollama": {"SOBOTA_AI_BASE_URL": "http://localhost:11434/v1", "SOBOTA_AI_MODEL": "llama3"},
    }

    values = presets.get(provider, {}).copy()
    if not values:
        _console.print("[yellow]Unknown provider preset. You can still enter custom values.[/yellow]")

    base_url = typer.prompt("AI base URL", default=values.get("SOBOTA_AI_BASE_URL", ""), show_default=True).strip()
    model = typer.prompt("AI model", default=values.get("SOBOTA_AI_MODEL", ""), show_default=True).strip()
    api_key = typer.prompt("AI API key", default="", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not model:
        raise typer.BadParameter("base_url and model are required")

    env_path = write_user_env_vars(
        {
            "SOBOTA_AI_BASE_URL": base_url,
            "SOBOTA_AI_MODEL": model,
            "SOBOTA_AI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
