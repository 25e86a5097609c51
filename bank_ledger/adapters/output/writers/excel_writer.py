"""
Adaptador de salida: Reporte de corrida en Excel.

Los libros de movimientos se editan en sitio con openpyxl. Este reporte,
en cambio, se genera desde cero en cada corrida con pandas + xlsxwriter:

- Hoja "Movimientos": un renglón por correo válido.
- Hoja "Resumen": un renglón por pestaña fusionada (o por libro fallido)
  con los contadores de la fusión.
"""

from pathlib import Path

import pandas as pd

from bank_ledger.domain.exceptions import OutputError
from bank_ledger.domain.models.resultado_parseo import ResultadoParseo
from bank_ledger.domain.models.resumen import ResumenUnidad
from bank_ledger.domain.ports.output_writer import OutputWriter
from bank_ledger.domain.shared.layout_hoja import FORMATO_FECHA

COLUMNAS_MOVIMIENTOS: list[str] = [
    "Banco",
    "Moneda",
    "Fecha",
    "Detalle",
    "Cargo",
    "Num Op",
    "Observación",
    "Documento",
    "Origen",
]

COLUMNAS_RESUMEN: list[str] = [
    "Banco",
    "Moneda",
    "Año",
    "Mes",
    "Considerados",
    "Existentes",
    "Filas vacías",
    "En vacías",
    "Al final",
    "Duplicados",
    "Sin operación",
    "Archivo",
    "Error",
]


class ExcelWriter(OutputWriter):
    """Genera el reporte de corrida con formato estandarizado."""

    def write_report(
        self,
        resultados: list[ResultadoParseo],
        unidades: list[ResumenUnidad],
        output_path: Path,
    ) -> Path:
        # Asegurar extensión .xlsx
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(resultados, unidades, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    @staticmethod
    def filas_movimientos(resultados: list[ResultadoParseo]) -> list[dict]:
        filas = []
        for resultado in resultados:
            for mov in resultado.movimientos:
                filas.append(
                    {
                        "Banco": resultado.banco,
                        "Moneda": resultado.moneda or "",
                        "Fecha": mov.fecha.strftime(FORMATO_FECHA),
                        "Detalle": mov.detalle,
                        "Cargo": float(mov.cargo) if mov.cargo is not None else None,
                        "Num Op": mov.num_operacion,
                        "Observación": mov.observacion,
                        "Documento": mov.documento,
                        "Origen": resultado.origen,
                    }
                )
        return filas

    @staticmethod
    def filas_resumen(unidades: list[ResumenUnidad]) -> list[dict]:
        filas = []
        for unidad in unidades:
            base = {
                "Banco": unidad.banco,
                "Moneda": unidad.moneda,
                "Año": unidad.año,
                "Archivo": unidad.ruta or "",
                "Error": unidad.error or "",
            }

            # Un libro que falló no tiene fusiones: igual se reporta
            if not unidad.fusiones:
                filas.append({**base, "Mes": "", "Considerados": unidad.correos})
                continue

            for mes, fusion in unidad.fusiones.items():
                filas.append(
                    {
                        **base,
                        "Mes": mes,
                        "Considerados": fusion.considerados,
                        "Existentes": fusion.existentes,
                        "Filas vacías": fusion.filas_vacias,
                        "En vacías": fusion.insertados_en_vacias,
                        "Al final": fusion.insertados_al_final,
                        "Duplicados": fusion.omitidos_duplicados,
                        "Sin operación": fusion.omitidos_sin_operacion,
                    }
                )
        return filas

    def _escribir_excel(
        self,
        resultados: list[ResultadoParseo],
        unidades: list[ResumenUnidad],
        output_path: Path,
    ) -> None:
        df_movimientos = pd.DataFrame(self.filas_movimientos(resultados), columns=COLUMNAS_MOVIMIENTOS)
        df_resumen = pd.DataFrame(self.filas_resumen(unidades), columns=COLUMNAS_RESUMEN)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_movimientos.to_excel(writer, index=False, sheet_name="Movimientos")
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")

            workbook = writer.book
            ws_movimientos = writer.sheets["Movimientos"]
            ws_resumen = writer.sheets["Resumen"]

            # Texto: conserva los ceros iniciales del número de operación
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            # --- Hoja Movimientos ---
            ws_movimientos.set_column("A:B", 10)  # Banco, Moneda
            ws_movimientos.set_column("C:C", 12)  # Fecha
            ws_movimientos.set_column("D:D", 20, text_format)  # Detalle (cuenta)
            ws_movimientos.set_column("E:E", 15, money_format)  # Cargo
            ws_movimientos.set_column("F:F", 14, text_format)  # Num Op
            ws_movimientos.set_column("G:H", 35)  # Observación, Documento
            ws_movimientos.set_column("I:I", 30)  # Origen

            # Num Op siempre como celda de texto
            for fila, num_op in enumerate(df_movimientos["Num Op"], start=1):
                ws_movimientos.write_string(fila, 5, str(num_op), text_format)

            # --- Hoja Resumen ---
            ws_resumen.set_column("A:D", 10)
            ws_resumen.set_column("E:K", 13)
            ws_resumen.set_column("L:L", 50)  # Archivo
            ws_resumen.set_column("M:M", 60)  # Error
