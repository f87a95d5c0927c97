"""
Parser del comando `search`.

Decide entre búsqueda por cumpleaños (`b/`) y por cita (`a/`):
- La búsqueda del marcador es por contención, no por prefijo.
- `b/` se evalúa antes que `a/`: si aparecen ambos, gana cumpleaños.
- Los rechazos del constructor del comando destino se resumen en el mensaje de
  uso de ese comando; el tipo original queda en `causa`.
"""

from __future__ import annotations

from typing import Callable

from contactdesk.app.application.comandos import buscar_cita, buscar_cumpleanos
from contactdesk.app.application.comandos.base import Comando, ResultadoConstruccion
from contactdesk.app.application.comandos.buscar_cita import BuscarCitaComando
from contactdesk.app.application.comandos.buscar_cumpleanos import BuscarCumpleanosComando
from contactdesk.app.application.comandos.errores import TipoErrorBusqueda
from contactdesk.app.bootstrap_logging import get_logger
from contactdesk.app.common.search_utils import normalize_search_text, text_after_marker

PREFIJO_CUMPLEANOS = "b/"
PREFIJO_CITA = "a/"

MENSAJE_FORMATO_COMANDO_INVALIDO = "Invalid command format! \n%s"
MENSAJE_BUSQUEDA_VACIA = "Search command cannot be empty."
MENSAJE_PREFIJO_INVALIDO = "Invalid prefix. Use 'b/' for birthday or 'a/' for appointment."

LOGGER = get_logger(__name__)

_Constructor = Callable[[str], ResultadoConstruccion]


class ParserBusqueda:
    def parse(self, args: str) -> ResultadoConstruccion[Comando]:
        texto = normalize_search_text(args)
        if texto is None:
            return ResultadoConstruccion.fallo(TipoErrorBusqueda.EMPTY_INPUT, MENSAJE_BUSQUEDA_VACIA)

        if PREFIJO_CUMPLEANOS in texto:
            argumento = text_after_marker(texto, PREFIJO_CUMPLEANOS)
            LOGGER.debug("busqueda_despachada tipo=cumpleanos")
            return _construir(argumento, BuscarCumpleanosComando.crear, buscar_cumpleanos.MENSAJE_USO)

        if PREFIJO_CITA in texto:
            argumento = text_after_marker(texto, PREFIJO_CITA)
            LOGGER.debug("busqueda_despachada tipo=cita")
            return _construir(argumento, BuscarCitaComando.crear, buscar_cita.MENSAJE_USO)

        return ResultadoConstruccion.fallo(TipoErrorBusqueda.UNRECOGNIZED_PREFIX, MENSAJE_PREFIJO_INVALIDO)


def _construir(argumento: str, constructor: _Constructor, mensaje_uso: str) -> ResultadoConstruccion[Comando]:
    mensaje = MENSAJE_FORMATO_COMANDO_INVALIDO % mensaje_uso
    if not argumento:
        return ResultadoConstruccion.fallo(TipoErrorBusqueda.MISSING_ARGUMENT, mensaje)

    resultado = constructor(argumento)
    if resultado.ok:
        return resultado
    return ResultadoConstruccion.fallo(
        TipoErrorBusqueda.MISSING_ARGUMENT,
        mensaje,
        causa=resultado.error.tipo if resultado.error else None,
    )
