from __future__ import annotations

from typing import Callable, Iterable

from contactdesk.app.bootstrap_logging import get_logger
from contactdesk.app.domain.contactos import Contacto

PredicadoContacto = Callable[[Contacto], bool]

LOGGER = get_logger(__name__)


def _mostrar_todos(_contacto: Contacto) -> bool:
    return True


PREDICADO_MOSTRAR_TODOS: PredicadoContacto = _mostrar_todos


class ModeloContactos:
    """Colección de contactos en memoria y la vista filtrada que ve la UI.

    La vista filtrada siempre se calcula sobre la colección completa: cada
    filtro reemplaza al anterior en lugar de combinarse con él.
    """

    def __init__(self, contactos: Iterable[Contacto] = ()) -> None:
        self._contactos: list[Contacto] = []
        for contacto in contactos:
            contacto.validar()
            self._contactos.append(contacto)
        self._filtrados: tuple[Contacto, ...] = tuple(self._contactos)

    @property
    def contactos(self) -> tuple[Contacto, ...]:
        return tuple(self._contactos)

    @property
    def contactos_filtrados(self) -> tuple[Contacto, ...]:
        return self._filtrados

    def agregar_contacto(self, contacto: Contacto) -> None:
        contacto.validar()
        self._contactos.append(contacto)
        self._filtrados = tuple(self._contactos)

    def actualizar_filtro(self, predicado: PredicadoContacto) -> None:
        # Se publica de una vez: ningún lector ve una vista a medio construir.
        nueva_vista = tuple(contacto for contacto in self._contactos if predicado(contacto))
        self._filtrados = nueva_vista
        LOGGER.debug("vista_filtrada_actualizada visibles=%s total=%s", len(nueva_vista), len(self._contactos))
