"""
Modelo de dominio: Resúmenes de la fusión.

- ResumenFusion: contadores de UNA fusión (una pestaña).
- ResumenUnidad: lo que pasó con un libro banco/moneda/año completo.

Alimentan la bitácora y la hoja "Resumen" del reporte de corrida.
Los descartes silenciosos (duplicados, movimientos sin número de
operación) se cuentan aquí para que la pérdida de datos sea visible.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResumenFusion:
    """Contadores de una fusión de movimientos en una pestaña."""

    considerados: int
    """Movimientos recibidos para esta pestaña."""

    existentes: int
    """Números de operación que ya estaban en la hoja."""

    filas_vacias: int
    """Filas vacías disponibles antes de insertar."""

    insertados_en_vacias: int = 0

    insertados_al_final: int = 0

    omitidos_duplicados: int = 0
    """Ya estaban en la hoja o se repetían dentro del mismo lote."""

    omitidos_sin_operacion: int = 0
    """Sin número de operación: no fusionables."""

    @property
    def insertados(self) -> int:
        return self.insertados_en_vacias + self.insertados_al_final

    @property
    def omitidos(self) -> int:
        return self.omitidos_duplicados + self.omitidos_sin_operacion


@dataclass
class ResumenUnidad:
    """Resultado del procesamiento de un libro banco/moneda/año."""

    banco: str
    moneda: str
    año: int
    correos: int = 0
    """Correos válidos que cayeron en esta unidad."""

    fusiones: dict[str, ResumenFusion] = field(default_factory=dict)
    """Resumen por pestaña (nombre del mes)."""

    ruta: str | None = None
    """Dónde quedó guardado el libro. None si no se guardó."""

    error: str | None = None
    """Mensaje del error que abortó la unidad, si lo hubo."""

    @property
    def exitosa(self) -> bool:
        return self.error is None and self.ruta is not None

    @property
    def total_insertados(self) -> int:
        return sum(f.insertados for f in self.fusiones.values())
