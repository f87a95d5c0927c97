from __future__ import annotations

from contactdesk.app.application.comandos import listar
from contactdesk.app.application.comandos.base import Comando, ResultadoConstruccion
from contactdesk.app.application.comandos.errores import TipoErrorBusqueda
from contactdesk.app.application.comandos.listar import ListarContactosComando
from contactdesk.app.application.parsers.buscar_parser import ParserBusqueda

PALABRA_BUSCAR = "search"

MENSAJE_ENTRADA_VACIA = "Please enter a command."
MENSAJE_COMANDO_DESCONOCIDO = "Unknown command"


class ParserComandos:
    """Separa la palabra de comando y delega el resto de la línea."""

    def __init__(self, parser_busqueda: ParserBusqueda | None = None) -> None:
        self._parser_busqueda = parser_busqueda or ParserBusqueda()

    def parse(self, entrada: str) -> ResultadoConstruccion[Comando]:
        texto = (entrada or "").strip()
        if not texto:
            return ResultadoConstruccion.fallo(TipoErrorBusqueda.EMPTY_INPUT, MENSAJE_ENTRADA_VACIA)

        palabra, *resto_partes = texto.split(maxsplit=1)
        resto = resto_partes[0] if resto_partes else ""
        if palabra == PALABRA_BUSCAR:
            return self._parser_busqueda.parse(resto)
        if palabra == listar.PALABRA_COMANDO:
            return ResultadoConstruccion.exito(ListarContactosComando())
        return ResultadoConstruccion.fallo(TipoErrorBusqueda.UNKNOWN_COMMAND, MENSAJE_COMANDO_DESCONOCIDO)
