from contactdesk.app.application.demo_data.contactos import generar_contactos

__all__ = ["generar_contactos"]
