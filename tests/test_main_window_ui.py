from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
try:
    from PySide6.QtWidgets import QApplication
except ImportError as exc:  # pragma: no cover - depende de librerías del sistema
    pytest.skip(f"PySide6 no disponible: {exc}", allow_module_level=True)

from contactdesk.app.application.modelo_contactos import ModeloContactos
from contactdesk.app.controllers.contactos_controller import ContactosController
from contactdesk.app.i18n import I18nManager
from contactdesk.app.ui.main_window import MainWindow


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


def _textos(window: MainWindow) -> list[str]:
    return [window.lista_contactos.item(i).text() for i in range(window.lista_contactos.count())]


def test_ventana_muestra_todos_y_filtra_por_cita(qapp: QApplication, modelo: ModeloContactos) -> None:
    del qapp
    window = MainWindow(ContactosController(modelo), I18nManager("en"))
    try:
        assert window.lista_contactos.count() == 3
        assert "no appointment" in _textos(window)[1]

        window.txt_comando.setText("search a/2023-12-31 14:30")
        window.btn_ejecutar.click()

        assert _textos(window) == ["Ana Prueba  |  2023-12-31 14:30"]
        assert window.lbl_resultado.text() == "Listed all clients with appointments on 2023-12-31 14:30"
        assert window.lbl_contador.text() == "Showing 1 of 3"
        assert window.txt_comando.text() == ""
    finally:
        window.close()


def test_ventana_conserva_entrada_rechazada(qapp: QApplication, modelo: ModeloContactos) -> None:
    del qapp
    window = MainWindow(ContactosController(modelo), I18nManager("en"))
    try:
        window.txt_comando.setText("search x/foo")
        window.btn_ejecutar.click()

        assert window.txt_comando.text() == "search x/foo"
        assert "Invalid prefix" in window.lbl_resultado.text()
        assert window.lista_contactos.count() == 3
    finally:
        window.close()


def test_cambio_de_idioma_retraduce(qapp: QApplication, modelo: ModeloContactos) -> None:
    del qapp
    i18n = I18nManager("es")
    window = MainWindow(ContactosController(modelo), i18n)
    try:
        assert window.btn_ejecutar.text() == "Ejecutar"

        window.cbo_idioma.setCurrentIndex(window.cbo_idioma.findData("en"))

        assert i18n.language == "en"
        assert window.btn_ejecutar.text() == "Run"
        assert window.lbl_contador.text() == "Showing 3 of 3"
    finally:
        window.close()


def test_ventana_cerrada_no_se_retraduce(qapp: QApplication, modelo: ModeloContactos) -> None:
    del qapp
    i18n = I18nManager("es")
    window = MainWindow(ContactosController(modelo), i18n)
    window.show()

    window.close()
    i18n.set_language("en")

    assert window.btn_ejecutar.text() == "Ejecutar"
