"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validamos el JSON del proveedor de clima en el borde: si falta un campo,
  la ciudad se considera fallida en vez de romper el render más adelante.
- El reconocedor (LLM o heurístico) produce la misma estructura tipada.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Nada aquí se persiste: todo se crea por mensaje y se descarta al responder.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Entity(BaseModel):
    """Un fragmento reconocido en el texto del usuario (aquí: una ciudad)."""

    model_config = ConfigDict(extra="ignore")

    entity: str = Field(
        ...,
        min_length=1,
        description="Texto del fragmento tal como lo extrajo el reconocedor.",
    )
    type: str = Field(
        default="City",
        description="Tipo de entidad (p.ej. 'City', 'Weather.Location').",
    )
    score: float | None = Field(
        default=None,
        description="Confianza del reconocedor (0..1), si la reporta.",
    )

    @field_validator("score")
    @classmethod
    def _clamp_score(cls, value: float | None) -> float | None:
        # Los LLM a veces devuelven 1.01 o -0.0x; no es motivo para descartar todo.
        if value is None:
            return None
        return min(1.0, max(0.0, value))

    @property
    def value(self) -> str:
        return self.entity


class RecognitionResult(BaseModel):
    """Salida del paso de NLU para un mensaje.

    Por qué guardamos todos los intents:
    - `top_intent` se decide aquí, con el mismo umbral para todos los
      reconocedores, en lugar de que cada adaptador elija a su manera.
    """

    text: str = Field(default="", description="Mensaje original del usuario.")
    intents: dict[str, float] = Field(
        default_factory=dict,
        description="Label -> score (0..1).",
    )
    entities: list[Entity] = Field(
        default_factory=list,
        description="Entidades en el orden producido por el reconocedor.",
    )

    def top_intent(self, default: str = "None", min_score: float = 0.0) -> str:
        """Label con mayor score, o `default` si ninguno alcanza `min_score`."""

        best_label = default
        best_score = -1.0
        for label, score in self.intents.items():
            if score >= min_score and score > best_score:
                best_label = label
                best_score = score
        return best_label


class WeatherReport(BaseModel):
    """Condiciones actuales de una ciudad (una consulta exitosa)."""

    city: str = Field(..., min_length=1, description="Nombre de la ciudad según el proveedor.")
    description: str = Field(..., description="Descripción textual (p.ej. 'clear sky').")
    temperature: float = Field(..., description="Temperatura actual (°C).")
    feels_like: float = Field(..., description="Sensación térmica (°C).")
    humidity: float = Field(..., ge=0, le=100, description="Humedad relativa (%).")
    wind_speed: float = Field(..., ge=0, description="Velocidad del viento cruda (m/s).")

    @property
    def wind_kmh(self) -> int:
        return round(self.wind_speed * 3.6)

    @classmethod
    def from_provider_payload(cls, data: Any) -> "WeatherReport":
        """Construye el reporte desde el JSON de OpenWeatherMap.

        Lanza `ValueError` (incluye `ValidationError`) si el cuerpo no trae
        los campos mínimos; el servicio lo trata como fallo de esa ciudad.
        """

        if not isinstance(data, dict):
            raise ValueError("Weather payload is not a JSON object.")

        weather = data.get("weather")
        main = data.get("main")
        wind = data.get("wind")
        if not isinstance(weather, list) or not weather or not isinstance(weather[0], dict):
            raise ValueError("Weather payload has no 'weather[0]' entry.")
        if not isinstance(main, dict):
            raise ValueError("Weather payload has no 'main' section.")
        if not isinstance(wind, dict):
            raise ValueError("Weather payload has no 'wind' section.")

        return cls.model_validate(
            {
                "city": data.get("name"),
                "description": weather[0].get("description"),
                "temperature": main.get("temp"),
                "feels_like": main.get("feels_like"),
                "humidity": main.get("humidity"),
                "wind_speed": wind.get("speed"),
            }
        )


class LookupOutcome(BaseModel):
    """Resultado de la consulta de una ciudad: éxito (report) o fallo (error)."""

    city: str = Field(..., description="Ciudad tal como se pidió.")
    report: WeatherReport | None = Field(default=None)
    error: str | None = Field(default=None, description="Motivo del fallo, para logs.")

    @property
    def ok(self) -> bool:
        return self.report is not None
