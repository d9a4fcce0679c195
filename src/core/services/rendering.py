"""Render en texto plano de reportes de clima (un mensaje por ciudad).

Por qué texto plano:
- Cualquier canal puede enviarlo tal cual; los emojis son el único adorno.
"""

from __future__ import annotations

from core.domain.models import WeatherReport


def _fmt(value: float) -> str:
    # 21.0 -> "21", 21.53 -> "21.53"
    if float(value).is_integer():
        return str(int(value))
    return format(value, "g")


def render_weather_report(report: WeatherReport) -> str:
    return (
        f"👉 Current weather for {report.city}: {report.description}.\n\n"
        f"🌡️ Temperature in {report.city}: {_fmt(report.temperature)}°C, "
        f"feels like {_fmt(report.feels_like)}°C\n\n"
        f"☁️ Humidity level: {_fmt(report.humidity)}%\n\n"
        f"🌬️ Wind: {report.wind_kmh}km/h\n\n"
    )
