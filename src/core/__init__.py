"""Core de Sobota: dominio, configuración y servicios (sin I/O de UI)."""
