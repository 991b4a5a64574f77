"""Configuración y datos de referencia."""
