from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from contactdesk.app.application.comandos.errores import ErrorBusqueda, TipoErrorBusqueda

if TYPE_CHECKING:
    from contactdesk.app.application.modelo_contactos import ModeloContactos


@dataclass(frozen=True, slots=True)
class ResultadoComando:
    mensaje: str


class Comando(ABC):
    """Acción lista para ejecutarse contra el modelo de contactos."""

    __slots__ = ()

    @abstractmethod
    def ejecutar(self, modelo: "ModeloContactos") -> ResultadoComando:
        raise NotImplementedError


C = TypeVar("C", bound=Comando)


@dataclass(frozen=True, slots=True)
class ResultadoConstruccion(Generic[C]):
    """Comando construido o motivo del rechazo; nunca ambos."""

    comando: C | None = None
    error: ErrorBusqueda | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def exito(cls, comando: C) -> "ResultadoConstruccion[C]":
        return cls(comando=comando)

    @classmethod
    def fallo(
        cls,
        tipo: TipoErrorBusqueda,
        mensaje: str,
        causa: TipoErrorBusqueda | None = None,
    ) -> "ResultadoConstruccion[C]":
        return cls(error=ErrorBusqueda(tipo=tipo, mensaje=mensaje, causa=causa))


def requerir_modelo(modelo: "ModeloContactos | None") -> "ModeloContactos":
    if modelo is None:
        raise ValueError("modelo requerido para ejecutar el comando")
    return modelo
