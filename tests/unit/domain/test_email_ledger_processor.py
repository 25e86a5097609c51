"""
Tests para bank_ledger.domain.services.email_ledger_processor

Se usa el registro real (BCP + Interbank) y un almacén de libros en
memoria: cada libro es un Workbook de openpyxl con las 12 pestañas.
"""

from datetime import date
from decimal import Decimal

import pytest
from openpyxl import Workbook

from bank_ledger.adapters.output.ledger.openpyxl_book import OpenpyxlBook
from bank_ledger.domain.exceptions import RecursoBloqueadoError
from bank_ledger.domain.models import Correo
from bank_ledger.domain.ports.ledger_section import LedgerBook
from bank_ledger.domain.ports.ledger_store import LedgerStore
from bank_ledger.domain.services.email_ledger_processor import EmailLedgerProcessor
from bank_ledger.domain.shared.layout_hoja import COL_FECHA, COL_NUM_OP
from bank_ledger.domain.shared.month_map import MONTH_NAMES
from bank_ledger.infrastructure.registry import create_default_registry

REMITENTE_BCP = "notificaciones@notificacionesbcp.com.pe"
REMITENTE_INTERBANK = "bancaporinternet@empresas.interbank.pe"


class MemoryLedgerStore(LedgerStore):
    """Libros en memoria. `meses` define qué pestañas trae la "plantilla"."""

    def __init__(self, meses: list[str] | None = None, bloqueados: set | None = None) -> None:
        self._meses = meses if meses is not None else MONTH_NAMES
        self._bloqueados = bloqueados or set()
        self.libros: dict[tuple, Workbook] = {}

    def _plantilla(self) -> Workbook:
        wb = Workbook()
        wb.remove(wb.active)
        for mes in self._meses:
            ws = wb.create_sheet(mes.capitalize())
            ws["A1"] = "MOVIMIENTOS {BANK} {CURRENCY}"
            ws["A2"] = "{MES} {AÑO}"
        return wb

    def abrir(self, banco: str, moneda: str, año: int) -> LedgerBook:
        wb = self.libros.get((banco, moneda, año))
        if wb is None:
            wb = self._plantilla()
        return OpenpyxlBook(wb, nombre=f"{banco} {moneda} {año}")

    def guardar(self, libro: LedgerBook, banco: str, moneda: str, año: int) -> str:
        if (banco, moneda, año) in self._bloqueados:
            raise RecursoBloqueadoError(f"{banco} {moneda} {año}", "423 Locked")
        self.libros[(banco, moneda, año)] = libro.workbook
        return f"memoria://{banco}/{moneda}/{año}"


def _correo_bcp(html_bcp, origen: str, **kwargs) -> Correo:
    return Correo(html=html_bcp(**kwargs), remitente=REMITENTE_BCP, origen=origen)


def _correo_interbank(html_interbank, origen: str, **kwargs) -> Correo:
    return Correo(html=html_interbank(**kwargs), remitente=REMITENTE_INTERBANK, origen=origen)


class TestEmailLedgerProcessor:
    @pytest.fixture
    def store(self):
        return MemoryLedgerStore()

    @pytest.fixture
    def processor(self, store, memory_logger):
        return EmailLedgerProcessor(
            registry=create_default_registry(logger=memory_logger),
            store=store,
            logger=memory_logger,
        )

    # === Fase 1: correos ===

    def test_correo_valido(self, processor, html_bcp, memory_logger):
        resultados = processor.procesar_correos([_correo_bcp(html_bcp, "a.eml")])

        assert len(resultados) == 1
        resultado = resultados[0]
        assert resultado.banco == "BCP"
        assert resultado.moneda == "SOLES"
        assert resultado.movimientos[0].cargo == Decimal("300.00")
        assert resultado.movimientos[0].num_operacion == "00012345"
        assert ("aceptado", "a.eml", "BCP", "ENERO 2026") in memory_logger.eventos

    def test_monto_cero_se_descarta(self, processor, html_bcp, memory_logger):
        resultados = processor.procesar_correos([_correo_bcp(html_bcp, "a.eml", monto="S/ 0.00")])

        assert resultados == []
        assert memory_logger.de_tipo("descartado")[0][1] == "a.eml"

    def test_moneda_no_detectada_se_descarta(self, processor, html_bcp, memory_logger):
        correo = _correo_bcp(html_bcp, "a.eml", monto="300.00")
        assert processor.procesar_correos([correo]) == []
        assert memory_logger.de_tipo("descartado") == [("descartado", "a.eml", "moneda no detectada")]

    def test_correo_no_detectado_no_aborta_el_lote(self, processor, html_bcp, memory_logger):
        correos = [
            Correo(html="<html><body><p>Boletín de ofertas</p></body></html>",
                   remitente="promo@tienda.pe", origen="promo.eml"),
            _correo_bcp(html_bcp, "b.eml"),
        ]

        resultados = processor.procesar_correos(correos)

        assert [r.origen for r in resultados] == ["b.eml"]
        assert memory_logger.de_tipo("no_identificado") == [
            ("no_identificado", "promo.eml", "promo@tienda.pe")
        ]

    def test_fecha_invalida_es_error_del_correo(self, processor, html_bcp, memory_logger):
        correos = [
            _correo_bcp(html_bcp, "malo.eml", fecha="31/02/2026 - 10:00 a. m."),
            _correo_bcp(html_bcp, "bueno.eml", num_operacion="2"),
        ]

        resultados = processor.procesar_correos(correos)

        assert [r.origen for r in resultados] == ["bueno.eml"]
        assert memory_logger.de_tipo("error")[0][1] == "malo.eml"

    def test_remitente_no_permitido(self, store, memory_logger, html_bcp):
        processor = EmailLedgerProcessor(
            registry=create_default_registry(),
            store=store,
            logger=memory_logger,
            remitentes_permitidos=[REMITENTE_INTERBANK],
        )
        correo = _correo_bcp(html_bcp, "a.eml")

        assert processor.procesar_correos([correo]) == []
        assert "remitente no permitido" in memory_logger.de_tipo("descartado")[0][2]

    def test_sin_remitente_se_acepta(self, store, memory_logger, html_bcp):
        processor = EmailLedgerProcessor(
            registry=create_default_registry(),
            store=store,
            logger=memory_logger,
            remitentes_permitidos=[REMITENTE_BCP],
        )
        correo = Correo(html=html_bcp(), origen="cuerpo.html")
        assert len(processor.procesar_correos([correo])) == 1

    # === Fase 2: libros ===

    def test_agrupa_por_banco_moneda_año(self, processor, store, html_bcp, html_interbank):
        correos = [
            _correo_bcp(html_bcp, "1.eml", num_operacion="1"),
            _correo_bcp(html_bcp, "2.eml", num_operacion="2", monto="US$ 45.00"),
            _correo_interbank(html_interbank, "3.eml"),
            _correo_bcp(html_bcp, "4.eml", num_operacion="4", fecha="30/12/2025 - 09:00 a. m."),
        ]

        _, unidades = processor.procesar(correos)

        claves = [(u.banco, u.moneda, u.año) for u in unidades]
        assert claves == [
            ("BCP", "DOLARES", 2026),
            ("BCP", "SOLES", 2025),
            ("BCP", "SOLES", 2026),
            ("INTERBANK", "SOLES", 2026),
        ]
        assert all(u.exitosa for u in unidades)
        assert set(store.libros) == set(claves)

    def test_pestaña_por_mes_y_marcadores(self, processor, store, html_bcp):
        correos = [
            _correo_bcp(html_bcp, "1.eml", num_operacion="1", fecha="13/01/2026 - 10:00 a. m."),
            _correo_bcp(html_bcp, "2.eml", num_operacion="2", fecha="02/02/2026 - 10:00 a. m."),
        ]

        _, unidades = processor.procesar(correos)

        assert list(unidades[0].fusiones) == ["ENERO", "FEBRERO"]
        wb = store.libros[("BCP", "SOLES", 2026)]
        assert wb["Enero"].cell(row=7, column=COL_NUM_OP).value == "1"
        assert wb["Febrero"].cell(row=7, column=COL_NUM_OP).value == "2"
        assert wb["Febrero"].cell(row=7, column=COL_FECHA).value == "02/02/2026"
        assert wb["Enero"]["A1"].value == "MOVIMIENTOS BCP SOLES"
        assert wb["Enero"]["A2"].value == "ENERO 2026"
        # Las pestañas sin movimientos conservan sus marcadores
        assert wb["Marzo"]["A2"].value == "{MES} {AÑO}"

    def test_segunda_corrida_no_duplica(self, processor, store, html_bcp):
        correos = [_correo_bcp(html_bcp, "1.eml")]

        processor.procesar(correos)
        _, unidades = processor.procesar(correos)

        assert unidades[0].total_insertados == 0
        assert unidades[0].fusiones["ENERO"].omitidos_duplicados == 1

    def test_pestaña_faltante_aborta_solo_ese_libro(self, memory_logger, html_bcp, html_interbank):
        store = MemoryLedgerStore(meses=["FEBRERO"])
        processor = EmailLedgerProcessor(create_default_registry(), store, memory_logger)
        correos = [
            _correo_bcp(html_bcp, "1.eml"),  # enero
            _correo_interbank(html_interbank, "2.eml", fecha="03/02/2026"),
        ]

        _, unidades = processor.procesar(correos)

        bcp, interbank = unidades
        assert not bcp.exitosa
        assert "ENERO" in bcp.error
        assert bcp.fusiones == {}
        assert interbank.exitosa
        assert ("BCP", "SOLES", 2026) not in store.libros

    def test_libro_bloqueado(self, memory_logger, html_bcp):
        store = MemoryLedgerStore(bloqueados={("BCP", "SOLES", 2026)})
        processor = EmailLedgerProcessor(create_default_registry(), store, memory_logger)

        _, unidades = processor.procesar([_correo_bcp(html_bcp, "1.eml")])

        assert not unidades[0].exitosa
        omitido = memory_logger.de_tipo("libro_omitido")[0]
        assert "bloqueado" in omitido[4]
        assert "vuelva a ejecutar" in omitido[4]

    def test_combinacion_no_habilitada(self, store, memory_logger, html_interbank):
        processor = EmailLedgerProcessor(
            create_default_registry(),
            store,
            memory_logger,
            combinaciones={"BCP": ["SOLES"]},
        )

        _, unidades = processor.procesar([_correo_interbank(html_interbank, "1.eml")])

        assert unidades[0].error == "combinación banco/moneda no habilitada"
        assert store.libros == {}

    def test_filtro_de_periodo(self, processor, store, html_bcp):
        correos = [
            _correo_bcp(html_bcp, "1.eml", num_operacion="1", fecha="13/01/2026 - 10:00 a. m."),
            _correo_bcp(html_bcp, "2.eml", num_operacion="2", fecha="02/02/2026 - 10:00 a. m."),
        ]

        _, unidades = processor.procesar(correos, año=2026, mes=2)

        assert list(unidades[0].fusiones) == ["FEBRERO"]

    def test_unidades_ignora_resultados_invalidos(self, processor, html_bcp):
        registry = create_default_registry()
        cero = registry.parse_one(html_bcp(monto="S/ 0.00", num_operacion="1"))
        valido = registry.parse_one(html_bcp(num_operacion="2"))

        unidades = processor.procesar_unidades([cero, valido])

        assert unidades[0].correos == 1
        assert unidades[0].total_insertados == 1

    def test_guardado_informa_insertados(self, processor, memory_logger, html_bcp):
        correos = [
            _correo_bcp(html_bcp, "1.eml", num_operacion="1"),
            _correo_bcp(html_bcp, "2.eml", num_operacion="2"),
        ]
        processor.procesar(correos)

        assert memory_logger.de_tipo("guardado") == [("guardado", "memoria://BCP/SOLES/2026", 2)]
        assert memory_logger.get_summary()["movimientos_insertados"] == 2

    def test_sin_correos(self, processor):
        resultados, unidades = processor.procesar([])
        assert resultados == []
        assert unidades == []


def test_fecha_del_movimiento_no_del_sistema(html_bcp, memory_logger):
    """Un correo de diciembre procesado en otro mes va a DICIEMBRE."""
    store = MemoryLedgerStore()
    processor = EmailLedgerProcessor(create_default_registry(), store, memory_logger)

    resultados, _ = processor.procesar(
        [_correo_bcp(html_bcp, "1.eml", fecha="31/12/2025 - 11:59 p. m.")]
    )

    assert resultados[0].movimientos[0].fecha == date(2025, 12, 31)
    assert store.libros[("BCP", "SOLES", 2025)]["Diciembre"].cell(row=7, column=COL_NUM_OP).value == "00012345"
