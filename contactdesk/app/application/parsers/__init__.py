from contactdesk.app.application.parsers.buscar_parser import ParserBusqueda
from contactdesk.app.application.parsers.comandos_parser import ParserComandos

__all__ = ["ParserBusqueda", "ParserComandos"]
