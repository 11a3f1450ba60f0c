"""Interfaces/abstracciones del Core.

Por qué:
- Contratos (Protocol) para el cliente HTTP y el servicio de perfiles.
- El view model y el servicio dependen de abstracciones, no de httpx.
"""
