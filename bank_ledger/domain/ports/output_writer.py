"""
Puerto de salida: Escritor del reporte de corrida.

Además de fusionar en los libros, cada corrida puede dejar un reporte
con lo que se parseó y lo que se insertó. El dominio no decide el
formato; hoy es Excel, mañana podría ser CSV.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from bank_ledger.domain.models.resultado_parseo import ResultadoParseo
from bank_ledger.domain.models.resumen import ResumenUnidad


class OutputWriter(ABC):
    """Interfaz para escribir el reporte de una corrida."""

    @abstractmethod
    def write_report(
        self,
        resultados: list[ResultadoParseo],
        unidades: list[ResumenUnidad],
        output_path: Path,
    ) -> Path:
        """Escribe el reporte.

        Args:
            resultados: Correos válidos parseados en la corrida.
            unidades: Resumen de cada libro banco/moneda/año procesado.
            output_path: Ruta del archivo a crear.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
