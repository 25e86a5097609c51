"""
Adaptador de salida: Libro de movimientos sobre openpyxl.

El reporte de corrida se genera desde cero con xlsxwriter, pero los libros
de movimientos ya existen y hay que EDITARLOS en sitio (conservando el
encabezado, estilos y filas manuales). Para eso se usa openpyxl.
"""

from typing import Any

from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from bank_ledger.domain.exceptions import HojaNoEncontradaError
from bank_ledger.domain.ports.ledger_section import LedgerBook, LedgerSection
from bank_ledger.domain.shared.layout_hoja import FORMATO_TEXTO


class OpenpyxlSection(LedgerSection):
    """Pestaña mensual respaldada por una Worksheet de openpyxl."""

    def __init__(self, worksheet: Worksheet) -> None:
        self._ws = worksheet

    @property
    def worksheet(self) -> Worksheet:
        return self._ws

    @property
    def nombre(self) -> str:
        return self._ws.title

    @property
    def ultima_fila(self) -> int:
        # openpyxl reporta max_row=1 en una hoja recién creada sin celdas
        if self._ws.max_row == 1 and self._ws.cell(row=1, column=1).value is None:
            return 0
        return self._ws.max_row

    def leer(self, fila: int, columna: int) -> Any:
        return self._ws.cell(row=fila, column=columna).value

    def escribir(self, fila: int, columna: int, valor: Any) -> None:
        self._ws.cell(row=fila, column=columna).value = valor

    def escribir_texto(self, fila: int, columna: int, valor: str) -> None:
        celda = self._ws.cell(row=fila, column=columna)
        celda.value = str(valor)
        celda.number_format = FORMATO_TEXTO


class OpenpyxlBook(LedgerBook):
    """Libro banco/moneda/año respaldado por un Workbook de openpyxl."""

    def __init__(self, workbook: Workbook, nombre: str = "") -> None:
        self._wb = workbook
        self._nombre = nombre

    @property
    def workbook(self) -> Workbook:
        return self._wb

    @property
    def nombre(self) -> str:
        return self._nombre

    def seccion(self, nombre_mes: str) -> OpenpyxlSection:
        """Busca la pestaña por nombre exacto, sin importar mayúsculas."""
        buscado = nombre_mes.strip().lower()
        for ws in self._wb.worksheets:
            if ws.title.strip().lower() == buscado:
                return OpenpyxlSection(ws)
        raise HojaNoEncontradaError(self._nombre, nombre_mes)

    def reemplazar_marcadores(self, seccion: LedgerSection, valores: dict[str, str]) -> None:
        """Reemplaza marcadores como {MES} o {AÑO} en las celdas de texto.

        Args:
            seccion: Pestaña obtenida con seccion().
            valores: Marcador → valor. Ej: {"{MES}": "ENERO", "{AÑO}": "2026"}.
        """
        ws = seccion.worksheet if isinstance(seccion, OpenpyxlSection) else self.seccion(seccion.nombre).worksheet

        for row in ws.iter_rows():
            for cell in row:
                if not isinstance(cell.value, str) or "{" not in cell.value:
                    continue
                nuevo = cell.value
                for marcador, valor in valores.items():
                    nuevo = nuevo.replace(marcador, valor)
                if nuevo != cell.value:
                    cell.value = nuevo
