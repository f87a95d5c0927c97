from __future__ import annotations

from dataclasses import dataclass

from contactdesk.app.application.comandos.base import Comando, ResultadoComando, requerir_modelo
from contactdesk.app.application.modelo_contactos import PREDICADO_MOSTRAR_TODOS, ModeloContactos

PALABRA_COMANDO = "list"
MENSAJE_EXITO = "Listed all clients"


@dataclass(frozen=True, slots=True)
class ListarContactosComando(Comando):
    def ejecutar(self, modelo: ModeloContactos) -> ResultadoComando:
        requerir_modelo(modelo).actualizar_filtro(PREDICADO_MOSTRAR_TODOS)
        return ResultadoComando(MENSAJE_EXITO)
