# domain/exceptions.py
"""
Excepciones del dominio.

Propósito:
- Distinguir invariantes rotas de entidades (dominio) de errores de entrada del usuario,
  que se devuelven como valores (ver application.comandos.errores).
"""


class DomainError(Exception):
    """Error base del dominio."""


class ValidationError(DomainError):
    """Entidad o valor en estado inválido."""
