"""
Adaptador de salida: Libros de movimientos en un directorio local.

Cada combinación banco/moneda/año vive en su propio archivo:

    MOVIMIENTOS DE BANCO BCP SOLES 2026.xlsx

Si el archivo aún no existe (primer correo del año), se parte de la
plantilla, que trae las 12 pestañas de meses con el encabezado y los
marcadores {MES}, {AÑO}, {BANK} y {CURRENCY}.
"""

import zipfile
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from bank_ledger.adapters.output.ledger.openpyxl_book import OpenpyxlBook
from bank_ledger.domain.exceptions import LibroNoDisponibleError, OutputError, RecursoBloqueadoError
from bank_ledger.domain.ports.ledger_section import LedgerBook
from bank_ledger.domain.ports.ledger_store import LedgerStore

NOMBRE_ARCHIVO: str = "MOVIMIENTOS DE BANCO {bank} {currency} {year}.xlsx"


def nombre_archivo(banco: str, moneda: str, año: int, patron: str = NOMBRE_ARCHIVO) -> str:
    """Nombre del libro para una combinación banco/moneda/año."""
    return patron.format(bank=banco.upper(), currency=moneda.upper(), year=año)


class LocalLedgerStore(LedgerStore):
    """Abre y guarda libros .xlsx en un directorio."""

    def __init__(
        self,
        output_dir: Path,
        template_path: Path | None = None,
        patron_nombre: str = NOMBRE_ARCHIVO,
    ) -> None:
        """
        Args:
            output_dir: Directorio donde viven los libros.
            template_path: Plantilla para crear libros nuevos. Sin plantilla
                solo se pueden abrir libros que ya existen.
            patron_nombre: Patrón del nombre de archivo, con {bank},
                {currency} y {year}.
        """
        self._output_dir = Path(output_dir)
        self._template_path = Path(template_path) if template_path else None
        self._patron = patron_nombre

    def ruta(self, banco: str, moneda: str, año: int) -> Path:
        return self._output_dir / nombre_archivo(banco, moneda, año, self._patron)

    def abrir(self, banco: str, moneda: str, año: int) -> LedgerBook:
        ruta = self.ruta(banco, moneda, año)

        if ruta.exists():
            origen = ruta
        elif self._template_path is not None and self._template_path.exists():
            origen = self._template_path
        else:
            raise LibroNoDisponibleError(
                str(ruta),
                "no existe el libro ni la plantilla"
                + (f" ({self._template_path})" if self._template_path else ""),
            )

        try:
            workbook = load_workbook(origen)
        except PermissionError as e:
            raise RecursoBloqueadoError(str(origen), str(e))
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
            raise LibroNoDisponibleError(str(origen), str(e))

        return OpenpyxlBook(workbook, nombre=ruta.name)

    def guardar(self, libro: LedgerBook, banco: str, moneda: str, año: int) -> str:
        ruta = self.ruta(banco, moneda, año)

        if not isinstance(libro, OpenpyxlBook):
            raise OutputError(str(ruta), f"tipo de libro no soportado: {type(libro).__name__}")

        try:
            ruta.parent.mkdir(parents=True, exist_ok=True)
            libro.workbook.save(ruta)
        except PermissionError as e:
            raise RecursoBloqueadoError(str(ruta), str(e))
        except OSError as e:
            raise OutputError(str(ruta), str(e))

        return str(ruta)
