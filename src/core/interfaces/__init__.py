"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (reconocedores NLU, canales de conversación).
- Permite invertir dependencias: el Core depende de abstracciones.
"""
