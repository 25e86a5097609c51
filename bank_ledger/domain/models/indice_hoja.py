"""
Modelo de dominio: Índice de la hoja del mes.

Se recalcula en CADA fusión escaneando la columna NUM OP de la hoja;
nunca se persiste por separado.
"""

from dataclasses import dataclass, field

from bank_ledger.domain.shared.layout_hoja import FILA_INICIO_DATOS


@dataclass
class IndiceHoja:
    """Lo que ya hay en la hoja antes de insertar."""

    operaciones_existentes: set[str] = field(default_factory=set)
    """Números de operación ya registrados (como texto, sin espacios)."""

    filas_vacias: list[int] = field(default_factory=list)
    """Filas (1-indexed) desde FILA_INICIO_DATOS sin número de operación,
    en orden ascendente. Se reutilizan antes de agregar filas al final."""

    ultima_fila_con_datos: int = FILA_INICIO_DATOS - 1
    """Última fila con número de operación. Si la hoja está vacía es la
    fila anterior al inicio de datos (6)."""
