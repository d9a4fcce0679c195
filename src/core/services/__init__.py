"""Servicios del Core: lookup de clima, render, dispatch de intents y handlers del bot."""
