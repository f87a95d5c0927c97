from __future__ import annotations

from datetime import date, datetime

import pytest

from contactdesk.app.application.modelo_contactos import ModeloContactos
from contactdesk.app.domain.contactos import Cita, Contacto


def _contacto(id_: int, nombre: str, cita: datetime | None, nacimiento: date | None = None) -> Contacto:
    return Contacto(
        id=id_,
        nombre=nombre,
        apellidos="Prueba",
        telefono="600111222",
        email=f"{nombre.lower()}@example.com",
        fecha_nacimiento=nacimiento,
        cita=Cita(cita) if cita else None,
    )


@pytest.fixture()
def contactos_abc() -> list[Contacto]:
    return [
        _contacto(1, "Ana", datetime(2023, 12, 31, 14, 30), date(1990, 1, 1)),
        _contacto(2, "Bruno", None, date(1985, 6, 15)),
        _contacto(3, "Carla", datetime(2024, 1, 1, 9, 0), date(1990, 1, 1)),
    ]


@pytest.fixture()
def modelo(contactos_abc: list[Contacto]) -> ModeloContactos:
    return ModeloContactos(contactos_abc)
