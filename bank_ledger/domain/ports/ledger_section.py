"""
Puertos de salida: Libro de movimientos y su pestaña mensual.

El motor de fusión (LedgerMerger) solo necesita leer y escribir celdas de
una pestaña. No sabe si detrás hay openpyxl, otra librería, o una hoja
en memoria para tests.

    LedgerBook     → un archivo banco/moneda/año con 12 pestañas
    LedgerSection  → una pestaña (un mes)
"""

from abc import ABC, abstractmethod
from typing import Any


class LedgerSection(ABC):
    """Una pestaña mensual del libro. Filas y columnas son 1-indexed."""

    @property
    @abstractmethod
    def nombre(self) -> str:
        """Nombre de la pestaña (ej: 'ENERO')."""
        ...

    @property
    @abstractmethod
    def ultima_fila(self) -> int:
        """Última fila usada de la pestaña (incluye filas con formato pero
        sin valor). 0 si la pestaña está vacía."""
        ...

    @abstractmethod
    def leer(self, fila: int, columna: int) -> Any:
        """Valor crudo de la celda. None si está vacía."""
        ...

    @abstractmethod
    def escribir(self, fila: int, columna: int, valor: Any) -> None:
        """Escribe un valor con el formato que ya tenga la celda."""
        ...

    @abstractmethod
    def escribir_texto(self, fila: int, columna: int, valor: str) -> None:
        """Escribe un valor como TEXTO literal (formato "@").

        Se usa para el número de operación: "00061864" debe quedar como
        texto, no como el número 61864.
        """
        ...


class LedgerBook(ABC):
    """Un libro banco/moneda/año."""

    @property
    @abstractmethod
    def nombre(self) -> str:
        """Nombre del archivo del libro (para mensajes de error)."""
        ...

    @abstractmethod
    def seccion(self, nombre_mes: str) -> LedgerSection:
        """Devuelve la pestaña del mes. Búsqueda exacta, case-insensitive.

        Raises:
            HojaNoEncontradaError: Si el libro no tiene esa pestaña.
        """
        ...

    @abstractmethod
    def reemplazar_marcadores(self, seccion: LedgerSection, valores: dict[str, str]) -> None:
        """Reemplaza marcadores de la plantilla ({MES}, {AÑO}, ...) en la
        pestaña por sus valores."""
        ...
