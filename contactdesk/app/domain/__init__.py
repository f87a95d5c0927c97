from contactdesk.app.domain.contactos import Cita, Contacto
from contactdesk.app.domain.exceptions import *  # noqa: F401,F403

__all__ = [
    "Cita",
    "Contacto",
]
