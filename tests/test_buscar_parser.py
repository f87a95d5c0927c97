from __future__ import annotations

import pytest

from contactdesk.app.application.comandos import buscar_cita, buscar_cumpleanos
from contactdesk.app.application.comandos.buscar_cita import BuscarCitaComando
from contactdesk.app.application.comandos.buscar_cumpleanos import BuscarCumpleanosComando
from contactdesk.app.application.comandos.errores import TipoErrorBusqueda
from contactdesk.app.application.parsers.buscar_parser import (
    MENSAJE_BUSQUEDA_VACIA,
    MENSAJE_FORMATO_COMANDO_INVALIDO,
    MENSAJE_PREFIJO_INVALIDO,
    ParserBusqueda,
)


@pytest.fixture()
def parser() -> ParserBusqueda:
    return ParserBusqueda()


def test_prefijo_b_construye_busqueda_de_cumpleanos(parser: ParserBusqueda) -> None:
    resultado = parser.parse("b/1990-01-01")

    assert resultado.ok
    assert resultado.comando == BuscarCumpleanosComando("1990-01-01")


def test_prefijo_a_construye_busqueda_de_cita(parser: ParserBusqueda) -> None:
    resultado = parser.parse("  a/2023-12-31 14:30  ")

    assert resultado.ok
    assert resultado.comando == BuscarCitaComando("2023-12-31 14:30")


def test_espacios_tras_el_prefijo_se_recortan(parser: ParserBusqueda) -> None:
    resultado = parser.parse("a/   2023-12-31 14:30")

    assert resultado.comando == BuscarCitaComando("2023-12-31 14:30")


def test_prefijo_no_anclado_se_acepta(parser: ParserBusqueda) -> None:
    resultado = parser.parse("cita a/2023-12-31 14:30")

    assert resultado.ok
    assert resultado.comando == BuscarCitaComando("2023-12-31 14:30")


def test_con_ambos_prefijos_gana_cumpleanos(parser: ParserBusqueda) -> None:
    resultado = parser.parse("b/1990-01-01 a/2023-12-31 14:30")

    # El argumento de cumpleaños incluye el resto de la línea y no es una fecha válida.
    assert resultado.ok is False
    assert resultado.error is not None
    assert resultado.error.tipo is TipoErrorBusqueda.MISSING_ARGUMENT
    assert resultado.error.mensaje == MENSAJE_FORMATO_COMANDO_INVALIDO % buscar_cumpleanos.MENSAJE_USO


def test_con_ambos_prefijos_y_cita_primero_sigue_ganando_cumpleanos(parser: ParserBusqueda) -> None:
    resultado = parser.parse("a/2023-12-31 14:30 b/1990-01-01")

    assert resultado.ok
    assert resultado.comando == BuscarCumpleanosComando("1990-01-01")


@pytest.mark.parametrize("entrada", ["", "   ", "\t\n"])
def test_entrada_vacia(parser: ParserBusqueda, entrada: str) -> None:
    resultado = parser.parse(entrada)

    assert resultado.error is not None
    assert resultado.error.tipo is TipoErrorBusqueda.EMPTY_INPUT
    assert resultado.error.mensaje == MENSAJE_BUSQUEDA_VACIA


def test_prefijo_desconocido(parser: ParserBusqueda) -> None:
    resultado = parser.parse("x/foo")

    assert resultado.error is not None
    assert resultado.error.tipo is TipoErrorBusqueda.UNRECOGNIZED_PREFIX
    assert resultado.error.mensaje == MENSAJE_PREFIJO_INVALIDO


@pytest.mark.parametrize(
    ("entrada", "uso"),
    [("a/", buscar_cita.MENSAJE_USO), ("b/   ", buscar_cumpleanos.MENSAJE_USO)],
)
def test_argumento_vacio_devuelve_uso(parser: ParserBusqueda, entrada: str, uso: str) -> None:
    resultado = parser.parse(entrada)

    assert resultado.error is not None
    assert resultado.error.tipo is TipoErrorBusqueda.MISSING_ARGUMENT
    assert resultado.error.causa is None
    assert resultado.error.mensaje == MENSAJE_FORMATO_COMANDO_INVALIDO % uso


def test_formato_invalido_se_resume_en_uso_y_conserva_causa(parser: ParserBusqueda) -> None:
    resultado = parser.parse("a/2023-13-01 10:00")

    assert resultado.error is not None
    assert resultado.error.tipo is TipoErrorBusqueda.MISSING_ARGUMENT
    assert resultado.error.causa is TipoErrorBusqueda.INVALID_DATE_FORMAT
    assert resultado.error.mensaje == MENSAJE_FORMATO_COMANDO_INVALIDO % buscar_cita.MENSAJE_USO
    assert "yyyy-MM-dd HH:mm" in str(resultado.error)
