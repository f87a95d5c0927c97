from __future__ import annotations

_TRANSLATIONS: dict[str, dict[str, str]] = {
    "es": {
        "app.titulo": "ContactDesk",
        "comandos.placeholder": "Escribe un comando (ej: search a/2023-12-31 14:30)",
        "comandos.ejecutar": "Ejecutar",
        "contactos.sin_cita": "sin cita",
        "contactos.contador": "Mostrando {mostrados} de {totales}",
        "idioma.etiqueta": "Idioma",
        "error.inesperado": "Ha ocurrido un error inesperado. Consulta el log.",
    },
    "en": {
        "app.titulo": "ContactDesk",
        "comandos.placeholder": "Type a command (e.g. search a/2023-12-31 14:30)",
        "comandos.ejecutar": "Run",
        "contactos.sin_cita": "no appointment",
        "contactos.contador": "Showing {mostrados} of {totales}",
        "idioma.etiqueta": "Language",
        "error.inesperado": "An unexpected error occurred. Check the log.",
    },
}
