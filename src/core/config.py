"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/IA) y servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "sobota"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "sobota"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "sobota"
    return Path.home() / ".config" / "sobota"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Sobota user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters/servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOBOTA_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    bot_name: str = Field(
        default="Sobota",
        min_length=1,
        description="Nombre con el que el bot se presenta.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="sobota/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las consultas al proveedor de clima.",
    )

    # OpenWeatherMap. `OpenWeatherMapAPI` se mantiene por compatibilidad con
    # despliegues existentes del bot.
    weather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "SOBOTA_WEATHER_API_KEY",
            "OpenWeatherMapAPI",
            "weather_api_key",
        ),
        description="API key de OpenWeatherMap (appid).",
    )
    weather_base_url: str = Field(
        default="http://api.openweathermap.org/data/2.5/weather",
        min_length=8,
        description="Endpoint de condiciones actuales.",
    )
    weather_max_concurrency: int = Field(
        default=8,
        ge=1,
        le=100,
        description="Máximo de consultas de ciudad en vuelo a la vez.",
    )

    ai_api_key: str | None = Field(
        default=None,
        description="API key para el reconocedor LLM (compatible OpenAI).",
    )
    ai_base_url: str = Field(
        default="https://api.openai.com/v1",
        min_length=8,
        description="Base URL compatible OpenAI.",
    )
    ai_model: str = Field(
        default="gpt-4o-mini",
        min_length=1,
        description="Modelo usado para clasificar intents.",
    )
    ai_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout para llamadas al proveedor IA (segundos).",
    )
