"""
Comando: buscar contactos por cita.

Compara el texto introducido con la forma canónica de la cita de cada contacto
('AAAA-MM-DD HH:MM'). Los contactos sin cita nunca coinciden.
"""

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
from contactdesk.app.domain.value_objects import es_fecha_hora_canonica

PALABRA_COMANDO = "search a/"

MENSAJE_USO = (
    PALABRA_COMANDO
    + ": Searches for clients who have appointments on the specified date and time.\n"
    + "Parameters: DATE TIME (must be in yyyy-MM-dd HH:mm format)\n"
    + "Example: "
    + PALABRA_COMANDO
    + " 2023-12-31 14:30"
)
MENSAJE_EXITO = "Listed all clients with appointments on %s"
MENSAJE_FORMATO_INVALIDO = "The date format is invalid. Please use yyyy-MM-dd HH:mm format."


@dataclass(frozen=True, slots=True)
class BuscarCitaComando(Comando):
    fecha_hora: str

    def __post_init__(self) -> None:
        if not es_fecha_hora_canonica(self.fecha_hora):
            raise ValueError(MENSAJE_FORMATO_INVALIDO)

    @classmethod
    def crear(cls, fecha_hora: str) -> ResultadoConstruccion["BuscarCitaComando"]:
        """Construye el comando o devuelve INVALID_DATE_FORMAT. Guarda el texto tal cual."""
        if fecha_hora is None:
            raise TypeError("fecha_hora no puede ser None")
        if not es_fecha_hora_canonica(fecha_hora):
            return ResultadoConstruccion.fallo(TipoErrorBusqueda.INVALID_DATE_FORMAT, MENSAJE_FORMATO_INVALIDO)
        return ResultadoConstruccion.exito(cls(fecha_hora))

    def coincide(self, contacto: Contacto) -> bool:
        if contacto.cita is None:
            return False
        return str(contacto.cita) == self.fecha_hora

    def ejecutar(self, modelo: ModeloContactos) -> ResultadoComando:
        requerir_modelo(modelo).actualizar_filtro(self.coincide)
        return ResultadoComando(MENSAJE_EXITO % self.fecha_hora)
