"""Adaptadores de I/O: HTTP, reconocedores NLU y canales."""
