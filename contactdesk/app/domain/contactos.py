"""Entidades de dominio de la libreta de contactos."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from contactdesk.app.domain.exceptions import ValidationError
from contactdesk.app.domain.value_objects import (
    FORMATO_FECHA_HORA,
    _require_non_empty,
    _strip_or_none,
    _validate_email_basic,
    _validate_phone_basic,
    es_fecha_hora_canonica,
    formatear_fecha_hora,
)


@dataclass(frozen=True, slots=True)
class Cita:
    """Cita de un contacto. Precisión de minuto; sin zona horaria."""

    fecha_hora: datetime

    def __post_init__(self) -> None:
        if self.fecha_hora.second or self.fecha_hora.microsecond:
            object.__setattr__(self, "fecha_hora", self.fecha_hora.replace(second=0, microsecond=0))

    @classmethod
    def desde_texto(cls, texto: str) -> "Cita":
        if not es_fecha_hora_canonica(texto):
            raise ValidationError("Cita: formato inválido. Usa AAAA-MM-DD HH:MM (ej: 2023-12-31 14:30).")
        return cls(datetime.strptime(texto, FORMATO_FECHA_HORA))

    def __str__(self) -> str:
        return formatear_fecha_hora(self.fecha_hora)


@dataclass(slots=True)
class Contacto:
    """Cliente de la libreta. La cita es opcional: None significa 'sin cita'."""

    id: Optional[int] = None
    nombre: str = ""
    apellidos: str = ""
    telefono: Optional[str] = None
    email: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    cita: Optional[Cita] = None

    def validar(self) -> None:
        self.nombre = _require_non_empty(self.nombre, "nombre")
        self.apellidos = (self.apellidos or "").strip()

        self.telefono = _strip_or_none(self.telefono)
        self.email = _strip_or_none(self.email)

        _validate_phone_basic(self.telefono)
        _validate_email_basic(self.email)

    def nombre_completo(self) -> str:
        """Nombre completo para listados."""
        return f"{self.nombre} {self.apellidos}".strip()

    def tiene_cita(self) -> bool:
        return self.cita is not None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["fecha_nacimiento"] = self.fecha_nacimiento.isoformat() if self.fecha_nacimiento else None
        data["cita"] = str(self.cita) if self.cita else None
        return data
