"""
Modelo de dominio: Estado de cuenta.

Agrupa movimientos que comparten banco, moneda y periodo (mes/año).
El periodo se infiere de la fecha de sus propios movimientos, nunca de
la fecha del sistema: un correo de enero procesado en febrero va a la
pestaña ENERO.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_ledger.domain.models.movimiento import Movimiento
from bank_ledger.domain.shared.month_map import MONTH_NAMES, month_to_int


@dataclass(frozen=True)
class EstadoCuenta:
    """Lote de movimientos de un banco/moneda en un mes."""

    banco: str
    """Nombre del banco en mayúsculas: 'BCP', 'INTERBANK'."""

    moneda: str | None
    """'SOLES' o 'DOLARES'. None si el correo no traía marcadores de moneda."""

    cuenta: str
    """Cuenta de origen del primer movimiento. Puede estar vacía."""

    mes: str
    """Nombre del mes en mayúsculas: 'ENERO' ... 'DICIEMBRE'.
    Es también el nombre de la pestaña del libro."""

    año: int

    movimientos: list[Movimiento] = field(default_factory=list)

    saldo_inicial: Decimal = Decimal("0")
    """No se calcula: la conciliación de saldos entre meses no es parte
    de este sistema."""

    @property
    def numero_mes(self) -> int:
        return month_to_int(self.mes)

    @property
    def periodo(self) -> str:
        """Periodo como 'YYYY-MM'."""
        return f"{self.año:04d}-{self.numero_mes:02d}"

    def __post_init__(self) -> None:
        if self.mes not in MONTH_NAMES:
            raise ValueError(f"Mes no reconocido: '{self.mes}'. Esperado uno de {MONTH_NAMES}")
        if self.año < 2000 or self.año > 2100:
            raise ValueError(f"Año fuera de rango razonable: {self.año}")
