from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from contactdesk.app.bootstrap_logging import get_logger
from contactdesk.app.controllers.contactos_controller import ContactosController
from contactdesk.app.domain.contactos import Contacto
from contactdesk.app.i18n import I18nManager

LOGGER = get_logger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: ContactosController, i18n: I18nManager) -> None:
        super().__init__()
        self._controller = controller
        self._i18n = i18n

        self.resize(900, 600)
        self._build_ui()
        self._i18n.subscribe(self._retranslate)
        self._retranslate()

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)

        top_row = QHBoxLayout()
        self.txt_comando = QLineEdit()
        self.txt_comando.returnPressed.connect(self._on_ejecutar)
        self.btn_ejecutar = QPushButton()
        self.btn_ejecutar.clicked.connect(self._on_ejecutar)
        self.lbl_idioma = QLabel()
        self.cbo_idioma = QComboBox()
        for idioma in self._i18n.available_languages:
            self.cbo_idioma.addItem(idioma.upper(), idioma)
        self.cbo_idioma.setCurrentIndex(max(self.cbo_idioma.findData(self._i18n.language), 0))
        self.cbo_idioma.currentIndexChanged.connect(self._on_idioma_cambiado)
        top_row.addWidget(self.txt_comando, 1)
        top_row.addWidget(self.btn_ejecutar)
        top_row.addWidget(self.lbl_idioma)
        top_row.addWidget(self.cbo_idioma)
        layout.addLayout(top_row)

        self.lbl_resultado = QLabel()
        self.lbl_resultado.setWordWrap(True)
        self.lbl_resultado.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.lbl_resultado)

        self.lista_contactos = QListWidget()
        layout.addWidget(self.lista_contactos, 1)

        self.lbl_contador = QLabel()
        layout.addWidget(self.lbl_contador)

    def _retranslate(self) -> None:
        self.setWindowTitle(self._i18n.t("app.titulo"))
        self.txt_comando.setPlaceholderText(self._i18n.t("comandos.placeholder"))
        self.btn_ejecutar.setText(self._i18n.t("comandos.ejecutar"))
        self.lbl_idioma.setText(self._i18n.t("idioma.etiqueta"))
        self.refrescar_lista()

    def refrescar_lista(self) -> None:
        visibles = self._controller.contactos_visibles
        self.lista_contactos.clear()
        for contacto in visibles:
            item = QListWidgetItem(self._texto_contacto(contacto))
            item.setData(Qt.UserRole, contacto.id)
            self.lista_contactos.addItem(item)
        self.lbl_contador.setText(
            self._i18n.t("contactos.contador", mostrados=len(visibles), totales=self._controller.total_contactos)
        )

    def _texto_contacto(self, contacto: Contacto) -> str:
        cita = str(contacto.cita) if contacto.cita else self._i18n.t("contactos.sin_cita")
        return f"{contacto.nombre_completo()}  |  {cita}"

    def _on_ejecutar(self) -> None:
        texto = self.txt_comando.text()
        try:
            resultado = self._controller.ejecutar_entrada(texto)
        except Exception:
            LOGGER.exception("ui_comando_error_inesperado")
            QMessageBox.critical(self, self._i18n.t("app.titulo"), self._i18n.t("error.inesperado"))
            return

        self.lbl_resultado.setText(resultado.mensaje)
        if resultado.ok:
            self.txt_comando.clear()
            self.refrescar_lista()

    def _on_idioma_cambiado(self) -> None:
        self._i18n.set_language(self.cbo_idioma.currentData())

    def closeEvent(self, event: QCloseEvent) -> None:
        self._i18n.unsubscribe(self._retranslate)
        super().closeEvent(event)
