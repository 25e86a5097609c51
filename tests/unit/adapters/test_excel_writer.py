"""Tests para el reporte de corrida (ExcelWriter)."""

from datetime import date
from decimal import Decimal

import pandas as pd
import pytest
from openpyxl import load_workbook

from bank_ledger.adapters.output.writers.excel_writer import ExcelWriter
from bank_ledger.domain.exceptions import OutputError
from bank_ledger.domain.models import (
    DatosCorreo,
    EstadoCuenta,
    Movimiento,
    ResultadoParseo,
    ResumenFusion,
    ResumenUnidad,
)


def _resultado(num_operacion: str = "00012345", origen: str = "a.eml") -> ResultadoParseo:
    mov = Movimiento(
        fecha=date(2026, 1, 13),
        detalle="194-XXXXXX4-0-19",
        cargo=Decimal("300.00"),
        num_operacion=num_operacion,
        observacion="PULSO SAC",
    )
    estado = EstadoCuenta(
        banco="BCP", moneda="SOLES", cuenta="194-XXXXXX4-0-19", mes="ENERO", año=2026, movimientos=[mov]
    )
    return ResultadoParseo(banco="BCP", moneda="SOLES", datos=DatosCorreo(), estado_cuenta=estado, origen=origen)


def _unidades() -> list[ResumenUnidad]:
    ok = ResumenUnidad(
        "BCP",
        "SOLES",
        2026,
        correos=1,
        fusiones={"ENERO": ResumenFusion(considerados=1, existentes=4, filas_vacias=1, insertados_en_vacias=1)},
        ruta="/libros/MOVIMIENTOS DE BANCO BCP SOLES 2026.xlsx",
    )
    fallida = ResumenUnidad("INTERBANK", "SOLES", 2026, correos=2, error="Archivo bloqueado")
    return [ok, fallida]


class TestExcelWriter:
    @pytest.fixture
    def writer(self):
        return ExcelWriter()

    def test_genera_dos_hojas(self, writer, tmp_path):
        ruta = writer.write_report([_resultado()], _unidades(), tmp_path / "reporte.xlsx")

        assert ruta.exists()
        assert load_workbook(ruta).sheetnames == ["Movimientos", "Resumen"]

    def test_agrega_extension(self, writer, tmp_path):
        ruta = writer.write_report([_resultado()], [], tmp_path / "reporte")
        assert ruta.suffix == ".xlsx"

    def test_num_op_como_texto(self, writer, tmp_path):
        ruta = writer.write_report([_resultado("00061864")], [], tmp_path / "r.xlsx")

        ws = load_workbook(ruta)["Movimientos"]
        assert ws["F1"].value == "Num Op"
        assert ws["F2"].value == "00061864"
        assert ws["F2"].number_format == "@"

    def test_movimientos(self, writer, tmp_path):
        ruta = writer.write_report([_resultado(origen="x.eml")], [], tmp_path / "r.xlsx")

        df = pd.read_excel(ruta, sheet_name="Movimientos", dtype={"Num Op": str})
        fila = df.iloc[0]
        assert fila["Banco"] == "BCP"
        assert fila["Fecha"] == "13/01/2026"
        assert fila["Cargo"] == 300.0
        assert fila["Origen"] == "x.eml"

    def test_resumen_incluye_libros_fallidos(self, writer, tmp_path):
        ruta = writer.write_report([], _unidades(), tmp_path / "r.xlsx")

        df = pd.read_excel(ruta, sheet_name="Resumen")
        assert list(df["Banco"]) == ["BCP", "INTERBANK"]
        assert df.iloc[0]["Mes"] == "ENERO"
        assert df.iloc[0]["En vacías"] == 1
        assert df.iloc[1]["Error"] == "Archivo bloqueado"

    def test_sin_datos_genera_encabezados(self, writer, tmp_path):
        ruta = writer.write_report([], [], tmp_path / "vacio.xlsx")
        ws = load_workbook(ruta)["Resumen"]
        assert ws["A1"].value == "Banco"

    def test_error_de_escritura(self, writer, tmp_path):
        bloqueo = tmp_path / "archivo"
        bloqueo.write_text("no soy un directorio")

        with pytest.raises(OutputError):
            writer.write_report([], [], bloqueo / "reporte.xlsx")
