from __future__ import annotations

from typing import Callable

from contactdesk.app.i18n_catalog import _TRANSLATIONS


class I18nManager:
    def __init__(self, language: str = "es") -> None:
        self._language = language if language in _TRANSLATIONS else "es"
        self._listeners: list[Callable[[], None]] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def available_languages(self) -> tuple[str, ...]:
        return tuple(_TRANSLATIONS)

    def set_language(self, language: str) -> None:
        if language not in _TRANSLATIONS or language == self._language:
            return
        self._language = language
        for listener in list(self._listeners):
            listener()

    def t(self, key: str, **params: object) -> str:
        text = _TRANSLATIONS.get(self._language, {}).get(key, key)
        return text.format(**params) if params else text

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)
