"""Adaptadores de I/O: construcción de peticiones, HTTP y accesores."""
