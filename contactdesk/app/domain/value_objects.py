"""Utilidades internas de dominio."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from contactdesk.app.domain.exceptions import ValidationError

FORMATO_FECHA_HORA = "%Y-%m-%d %H:%M"
FORMATO_FECHA = "%Y-%m-%d"


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    """Normaliza strings opcionales: devuelve None si queda vacío tras strip()."""
    if value is None:
        return None
    v = value.strip()
    return v if v else None


def _require_non_empty(value: str, field_name: str) -> str:
    """Exige string no vacío; lanza ValidationError si no cumple."""
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"Campo obligatorio: {field_name}.")
    return v


def _validate_email_basic(email: Optional[str]) -> None:
    if email is None:
        return
    if "@" not in email or "." not in email:
        raise ValidationError("Email no parece válido.")


def _validate_phone_basic(phone: Optional[str]) -> None:
    if phone is None:
        return
    if not phone.lstrip("+").isdigit():
        raise ValidationError("Teléfono debe ser numérico si se indica.")


def formatear_fecha_hora(valor: datetime) -> str:
    """Forma canónica 'AAAA-MM-DD HH:MM'; el año siempre con cuatro dígitos."""
    return valor.isoformat(sep=" ", timespec="minutes")


def es_fecha_hora_canonica(texto: str) -> bool:
    """True si *texto* es exactamente 'AAAA-MM-DD HH:MM' y representa un instante real del calendario."""
    try:
        valor = datetime.strptime(texto, FORMATO_FECHA_HORA)
    except ValueError:
        return False
    # strptime acepta campos sin relleno ("2023-1-5 9:00"); solo vale la forma canónica.
    return formatear_fecha_hora(valor) == texto


def es_fecha_canonica(texto: str) -> bool:
    """True si *texto* es una fecha ISO 'AAAA-MM-DD' válida."""
    try:
        valor = date.fromisoformat(texto)
    except ValueError:
        return False
    return valor.isoformat() == texto
