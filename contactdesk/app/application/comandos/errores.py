from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TipoErrorBusqueda(str, Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    UNRECOGNIZED_PREFIX = "UNRECOGNIZED_PREFIX"
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"


@dataclass(frozen=True, slots=True)
class ErrorBusqueda:
    """Rechazo de una entrada del usuario.

    ``causa`` conserva el tipo original cuando el parser lo resume en un
    mensaje de uso genérico.
    """

    tipo: TipoErrorBusqueda
    mensaje: str
    causa: TipoErrorBusqueda | None = None

    def __str__(self) -> str:
        return self.mensaje
