from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta

from contactdesk.app.domain.contactos import Cita, Contacto

_FIRST_NAMES = [
    "Lucia", "Mateo", "Sofia", "Hugo", "Valeria", "Leo", "Daniela", "Pablo", "Martina", "Alvaro",
    "Elena", "Nicolas", "Irene", "Diego", "Carmen", "Javier", "Marta", "Adrian", "Noa", "Andres",
]
_LAST_NAMES = [
    "Garcia", "Rodriguez", "Fernandez", "Lopez", "Martinez", "Sanchez", "Perez", "Gomez", "Martin",
    "Ruiz", "Diaz", "Moreno", "Alonso", "Navarro", "Torres", "Vazquez", "Castro", "Serrano", "Ortega", "Gil",
]
_SLOTS = [time(9, 0), time(9, 30), time(10, 0), time(11, 15), time(12, 0), time(16, 0), time(17, 30)]
_APPOINTMENT_RATIO = 0.6


def generar_contactos(n: int, seed: int, desde: date | None = None) -> list[Contacto]:
    """Contactos de demostración reproducibles; ~60% con cita en los 30 días desde *desde*."""
    if n < 0:
        raise ValueError("n no puede ser negativo.")
    rng = random.Random(seed)
    inicio = desde or date.today()
    return [_build_contacto(i, rng, inicio) for i in range(n)]


def _build_contacto(index: int, rng: random.Random, inicio: date) -> Contacto:
    nombre = rng.choice(_FIRST_NAMES)
    apellidos = f"{rng.choice(_LAST_NAMES)} {rng.choice(_LAST_NAMES)}"
    contacto = Contacto(
        id=index + 1,
        nombre=nombre,
        apellidos=apellidos,
        telefono=f"6{rng.randint(10_000_000, 99_999_999)}",
        email=f"{nombre.lower()}.{index + 1}@example.com",
        fecha_nacimiento=date(rng.randint(1950, 2005), rng.randint(1, 12), rng.randint(1, 28)),
        cita=_build_cita(rng, inicio),
    )
    contacto.validar()
    return contacto


def _build_cita(rng: random.Random, inicio: date) -> Cita | None:
    if rng.random() >= _APPOINTMENT_RATIO:
        return None
    dia = inicio + timedelta(days=rng.randint(0, 29))
    return Cita(datetime.combine(dia, rng.choice(_SLOTS)))
