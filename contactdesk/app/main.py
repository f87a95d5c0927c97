from __future__ import annotations

import sys
import uuid

from PySide6.QtWidgets import QApplication

from contactdesk.app.application.demo_data.contactos import generar_contactos
from contactdesk.app.application.modelo_contactos import ModeloContactos
from contactdesk.app.bootstrap import load_settings, log_setting_fallbacks
from contactdesk.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from contactdesk.app.controllers.contactos_controller import ContactosController
from contactdesk.app.crash_handler import install_global_exception_hook
from contactdesk.app.i18n import I18nManager
from contactdesk.app.ui.main_window import MainWindow

LOGGER = get_logger(__name__)


def main() -> int:
    settings = load_settings()
    configure_logging("contactdesk-ui", settings.log_dir, level=settings.log_level, json=settings.log_json)
    set_run_context(uuid.uuid4().hex[:8])
    log_setting_fallbacks(settings)
    install_global_exception_hook(LOGGER)

    app = QApplication(sys.argv)

    modelo = ModeloContactos(generar_contactos(settings.demo_contactos, settings.demo_seed))
    LOGGER.info("modelo_cargado contactos=%s", len(modelo.contactos))
    controller = ContactosController(modelo)

    window = MainWindow(controller, I18nManager(settings.language))
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
