"""
Puerto de salida: Almacén de libros de movimientos.

Abre y guarda el libro de un banco/moneda/año. La implementación local
trabaja sobre archivos .xlsx en un directorio; una implementación remota
(SharePoint, Drive) bajaría y subiría el archivo. El dominio no lo sabe.
"""

from abc import ABC, abstractmethod

from bank_ledger.domain.ports.ledger_section import LedgerBook


class LedgerStore(ABC):
    """Interfaz para cargar y guardar libros de movimientos."""

    @abstractmethod
    def abrir(self, banco: str, moneda: str, año: int) -> LedgerBook:
        """Carga el libro existente o, si no existe, una copia nueva de la
        plantilla.

        Raises:
            LibroNoDisponibleError: No hay libro ni plantilla, o el archivo
                está dañado.
        """
        ...

    @abstractmethod
    def guardar(self, libro: LedgerBook, banco: str, moneda: str, año: int) -> str:
        """Persiste el libro y devuelve dónde quedó.

        Raises:
            RecursoBloqueadoError: Otro escritor tiene el archivo abierto.
            OutputError: Cualquier otra falla de escritura.
        """
        ...
