from contactdesk.app.application.comandos.base import Comando, ResultadoComando, ResultadoConstruccion
from contactdesk.app.application.comandos.buscar_cita import BuscarCitaComando
from contactdesk.app.application.comandos.buscar_cumpleanos import BuscarCumpleanosComando
from contactdesk.app.application.comandos.errores import ErrorBusqueda, TipoErrorBusqueda
from contactdesk.app.application.comandos.listar import ListarContactosComando

__all__ = [
    "BuscarCitaComando",
    "BuscarCumpleanosComando",
    "Comando",
    "ErrorBusqueda",
    "ListarContactosComando",
    "ResultadoComando",
    "ResultadoConstruccion",
    "TipoErrorBusqueda",
]
