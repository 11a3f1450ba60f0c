"""Modelos y errores del dominio.

Por qué:
- Aquí viven el esquema del perfil (Pydantic v2) y la taxonomía de errores.
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
