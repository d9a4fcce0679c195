"""Consulta de clima actual para varias ciudades.

Por qué así:
- Un GET por ciudad, todos lanzados a la vez y unidos antes de renderizar.
- Una ciudad que falla (error de red, status no-2xx, cuerpo ilegible o
  incompleto, o cualquier otra excepción de esa request) se registra en el
  log y se omite; sus hermanas no se ven afectadas.
- Los reportes que sobreviven mantienen el orden de entrada, duplicados
  incluidos.

Nota:
- La concurrencia se limita con un semáforo (`weather_max_concurrency`) para
  no abrir conexiones sin límite con listas largas. Por debajo del límite es
  indistinguible de lanzar todo a la vez.
- Las unidades son siempre métricas: el render asume °C y m/s.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import LookupOutcome, WeatherReport
from core.errors import MissingWeatherApiKeyError

logger = logging.getLogger(__name__)

WEATHER_UNITS = "metric"


def _describe_error(exc: Exception, api_key: str) -> str:
    # Nunca repetimos la URL de la request: lleva el appid.
    if isinstance(exc, httpx.HTTPError):
        return type(exc).__name__
    return f"{type(exc).__name__}: {exc}".replace(api_key, "***")


class WeatherLookupService:
    """Obtiene `WeatherReport`s de OpenWeatherMap para una lista de ciudades."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        api_key = (self._settings.weather_api_key or "").strip()
        if not api_key:
            raise MissingWeatherApiKeyError()
        self._api_key = api_key
        self._client = client
        self._max_concurrency = max(1, max_concurrency or self._settings.weather_max_concurrency)

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    async def fetch_all(self, cities: Sequence[str]) -> list[WeatherReport]:
        """Reportes de las ciudades cuya consulta tuvo éxito, en orden de entrada."""

        outcomes = await self.fetch_outcomes(cities)
        return [outcome.report for outcome in outcomes if outcome.report is not None]

    async def fetch_outcomes(self, cities: Sequence[str]) -> list[LookupOutcome]:
        """Un `LookupOutcome` por ciudad pedida, o `[]` si falla el lote entero."""

        if not cities:
            return []

        try:
            if self._client is not None:
                return await self._gather(self._client, cities)
            async with build_async_client(self._settings) as client:
                return await self._gather(client, cities)
        except Exception:
            logger.exception("Weather batch for %d cities failed", len(cities))
            return []

    async def _gather(self, client: httpx.AsyncClient, cities: Sequence[str]) -> list[LookupOutcome]:
        sem = asyncio.Semaphore(self._max_concurrency)
        tasks = [self._fetch_one(client, sem, city) for city in cities]
        return list(await asyncio.gather(*tasks))

    async def _fetch_one(
        self,
        client: httpx.AsyncClient,
        sem: asyncio.Semaphore,
        city: str,
    ) -> LookupOutcome:
        params = {
            "q": city,
            "appid": self._api_key,
            "units": WEATHER_UNITS,
        }
        async with sem:
            try:
                resp = await client.get(self._settings.weather_base_url, params=params)
                if not resp.is_success:
                    logger.warning("Weather lookup for %r failed: HTTP %s", city, resp.status_code)
                    return LookupOutcome(city=city, error=f"HTTP {resp.status_code}")
                report = WeatherReport.from_provider_payload(resp.json())
            except Exception as exc:
                reason = _describe_error(exc, self._api_key)
                logger.warning("Weather lookup for %.80r failed: %s", city, reason)
                return LookupOutcome(city=city, error=reason)

        logger.debug("Weather lookup for %r succeeded (%s)", city, report.city)
        return LookupOutcome(city=city, report=report)
