"""Selección del reconocedor según la configuración."""

from __future__ import annotations

from adapters.recognizers.keyword import KeywordRecognizer
from adapters.recognizers.llm import LLMRecognizer, is_local_base_url
from core.config import AppSettings
from core.interfaces.recognizer import Recognizer


def build_recognizer(settings: AppSettings | None = None) -> Recognizer:
    """LLM si hay API key (o un provider local), heurístico en otro caso."""

    settings = settings or AppSettings()
    api_key = (settings.ai_api_key or "").strip()
    if api_key or is_local_base_url(settings.ai_base_url):
        return LLMRecognizer(settings)
    return KeywordRecognizer()
