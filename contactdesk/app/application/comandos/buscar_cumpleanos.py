"""Comando: buscar contactos por fecha de nacimiento ('AAAA-MM-DD')."""

from __future__ import annotations

from dataclasses import dataclass

from contactdesk.app.application.comandos.base import (
    Comando,
    ResultadoComando,
    ResultadoConstruccion,
    requerir_modelo,
)
from contactdesk.app.application.comandos.errores import TipoErrorBusqueda
from contactdesk.app.application.modelo_contactos import ModeloContactos
from contactdesk.app.domain.contactos import Contacto
from contactdesk.app.domain.value_objects import es_fecha_canonica

PALABRA_COMANDO = "search b/"

MENSAJE_USO = (
    PALABRA_COMANDO
    + ": Searches for clients whose birthday is on the specified date.\n"
    + "Parameters: DATE (must be in yyyy-MM-dd format)\n"
    + "Example: "
    + PALABRA_COMANDO
    + " 1990-01-01"
)
MENSAJE_EXITO = "Listed all clients with birthday on %s"
MENSAJE_FORMATO_INVALIDO = "The date format is invalid. Please use yyyy-MM-dd format."


@dataclass(frozen=True, slots=True)
class BuscarCumpleanosComando(Comando):
    fecha: str

    def __post_init__(self) -> None:
        if not es_fecha_canonica(self.fecha):
            raise ValueError(MENSAJE_FORMATO_INVALIDO)

    @classmethod
    def crear(cls, fecha: str) -> ResultadoConstruccion["BuscarCumpleanosComando"]:
        if fecha is None:
            raise TypeError("fecha no puede ser None")
        if not es_fecha_canonica(fecha):
            return ResultadoConstruccion.fallo(TipoErrorBusqueda.INVALID_DATE_FORMAT, MENSAJE_FORMATO_INVALIDO)
        return ResultadoConstruccion.exito(cls(fecha))

    def coincide(self, contacto: Contacto) -> bool:
        if contacto.fecha_nacimiento is None:
            return False
        return contacto.fecha_nacimiento.isoformat() == self.fecha

    def ejecutar(self, modelo: ModeloContactos) -> ResultadoComando:
        requerir_modelo(modelo).actualizar_filtro(self.coincide)
        return ResultadoComando(MENSAJE_EXITO % self.fecha)
