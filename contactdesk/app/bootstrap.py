# bootstrap.py
"""
Configuración de arranque de ContactDesk.

Responsabilidades:
- Leer la configuración desde variables de entorno (con valores por defecto)
- Resolver rutas de logs

Los valores inválidos se recogen en `AppSettings.fallbacks` y se registran con
`log_setting_fallbacks` cuando el logging ya está configurado.

No contiene lógica de dominio ni de aplicación.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import getenv
from pathlib import Path

from contactdesk.app.bootstrap_logging import get_logger

LOGGER = get_logger(__name__)

_IDIOMAS = ("es", "en")
_NIVELES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VERDADEROS = ("1", "true", "yes", "si", "sí")
_FALSOS = ("0", "false", "no")


@dataclass(frozen=True, slots=True)
class SettingFallback:
    name: str
    value: str
    fallback: object


@dataclass(frozen=True, slots=True)
class AppSettings:
    log_dir: Path = Path("./logs")
    log_level: str = "INFO"
    log_json: bool = True
    language: str = "es"
    demo_contactos: int = 25
    demo_seed: int = 7
    fallbacks: tuple[SettingFallback, ...] = field(default=(), compare=False)


def load_settings() -> AppSettings:
    """Lee CONTACTDESK_* del entorno. Los valores inválidos vuelven al defecto."""
    defaults = AppSettings()
    fallbacks: list[SettingFallback] = []
    return AppSettings(
        log_dir=_env_path("CONTACTDESK_LOG_DIR", defaults.log_dir),
        log_level=_env_choice("CONTACTDESK_LOG_LEVEL", _NIVELES, defaults.log_level, fallbacks, upper=True),
        log_json=_env_bool("CONTACTDESK_LOG_JSON", defaults.log_json, fallbacks),
        language=_env_choice("CONTACTDESK_LANG", _IDIOMAS, defaults.language, fallbacks),
        demo_contactos=_env_int("CONTACTDESK_DEMO_CONTACTOS", defaults.demo_contactos, fallbacks, minimo=0),
        demo_seed=_env_int("CONTACTDESK_DEMO_SEED", defaults.demo_seed, fallbacks),
        fallbacks=tuple(fallbacks),
    )


def log_setting_fallbacks(settings: AppSettings) -> None:
    for item in settings.fallbacks:
        LOGGER.warning("setting_invalid name=%s value=%s fallback=%s", item.name, item.value, item.fallback)


# ---------------------------------------------------------------------
# Lectura de variables
# ---------------------------------------------------------------------


def _env_path(name: str, default: Path) -> Path:
    raw = (getenv(name) or "").strip()
    if not raw:
        return default
    return Path(raw).expanduser()


def _env_choice(
    name: str,
    options: tuple[str, ...],
    default: str,
    fallbacks: list[SettingFallback],
    *,
    upper: bool = False,
) -> str:
    raw = (getenv(name) or "").strip()
    if not raw:
        return default
    value = raw.upper() if upper else raw.lower()
    if value in options:
        return value
    fallbacks.append(SettingFallback(name, raw, default))
    return default


def _env_bool(name: str, default: bool, fallbacks: list[SettingFallback]) -> bool:
    raw = (getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _VERDADEROS:
        return True
    if raw in _FALSOS:
        return False
    fallbacks.append(SettingFallback(name, raw, default))
    return default


def _env_int(name: str, default: int, fallbacks: list[SettingFallback], *, minimo: int | None = None) -> int:
    raw = (getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        fallbacks.append(SettingFallback(name, raw, default))
        return default
    if minimo is not None and value < minimo:
        fallbacks.append(SettingFallback(name, raw, default))
        return default
    return value
