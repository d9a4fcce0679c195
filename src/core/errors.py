"""Errores propios de Sobota.

Solo se lanzan hacia fuera errores de configuración y de reconocimiento.
Los fallos de consulta de clima nunca salen del servicio: se registran en el
log y la ciudad se omite de la respuesta.
"""

from __future__ import annotations


class SobotaError(Exception):
    """Base de todos los errores de la aplicación."""


class ConfigurationError(SobotaError):
    """La configuración no permite construir un componente."""


class MissingWeatherApiKeyError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "No OpenWeatherMap API key configured. "
            "Set SOBOTA_WEATHER_API_KEY (or OpenWeatherMapAPI) or run `sobota doctor setup-weather`."
        )


class RecognitionError(SobotaError):
    """El reconocedor no pudo producir un `RecognitionResult` válido."""
