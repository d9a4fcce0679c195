"""Reconocedores NLU (implementaciones de `core.interfaces.recognizer.Recognizer`).

Por qué dos:
- `LLMRecognizer` usa un proveedor compatible OpenAI cuando hay API key.
- `KeywordRecognizer` funciona offline y sirve de fallback sin configuración.
"""

from adapters.recognizers.factory import build_recognizer
from adapters.recognizers.keyword import KeywordRecognizer
from adapters.recognizers.llm import LLMRecognizer

__all__ = [
	"KeywordRecognizer",
	"LLMRecognizer",
	"build_recognizer",
]
