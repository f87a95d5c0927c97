from __future__ import annotations

from dataclasses import dataclass

from contactdesk.app.application.comandos.errores import ErrorBusqueda
from contactdesk.app.application.modelo_contactos import ModeloContactos
from contactdesk.app.application.parsers.comandos_parser import ParserComandos
from contactdesk.app.bootstrap_logging import get_logger, reset_command_context, set_command_context
from contactdesk.app.domain.contactos import Contacto

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ResultadoEntrada:
    ok: bool
    mensaje: str
    error: ErrorBusqueda | None = None


class ContactosController:
    """Ejecuta la línea de comandos escrita por el usuario contra el modelo."""

    def __init__(self, modelo: ModeloContactos, parser: ParserComandos | None = None) -> None:
        self._modelo = modelo
        self._parser = parser or ParserComandos()

    @property
    def contactos_visibles(self) -> tuple[Contacto, ...]:
        return self._modelo.contactos_filtrados

    @property
    def total_contactos(self) -> int:
        return len(self._modelo.contactos)

    def ejecutar_entrada(self, texto: str) -> ResultadoEntrada:
        palabras = (texto or "").split(maxsplit=1)
        token = set_command_context(palabras[0] if palabras else None)
        try:
            construccion = self._parser.parse(texto)
            if not construccion.ok or construccion.comando is None:
                error = construccion.error
                LOGGER.warning(
                    "comando_rechazado tipo=%s causa=%s",
                    error.tipo.value if error else "-",
                    error.causa.value if error and error.causa else "-",
                )
                return ResultadoEntrada(ok=False, mensaje=str(error or ""), error=error)

            resultado = construccion.comando.ejecutar(self._modelo)
            LOGGER.info(
                "comando_ejecutado comando=%s visibles=%s",
                type(construccion.comando).__name__,
                len(self._modelo.contactos_filtrados),
            )
            return ResultadoEntrada(ok=True, mensaje=resultado.mensaje)
        finally:
            reset_command_context(token)
