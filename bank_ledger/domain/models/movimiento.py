"""
Modelo de dominio: Movimiento bancario.

Un Movimiento es UNA fila del libro de movimientos: cada correo de
notificación del banco produce exactamente un movimiento.

Decisiones de diseño:
- `Decimal` para montos, nunca `float`.
- `date` (no `str`) para la fecha, así se puede ordenar cronológicamente.
- `num_operacion` es `str`: es la llave de deduplicación y debe conservar
  los ceros iniciales ("00061864" no es lo mismo que 61864).
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Movimiento:
    """Representa un movimiento bancario destinado al libro."""

    fecha: date
    """Fecha del movimiento (sin hora). Del correo: "Fecha y hora"."""

    detalle: str
    """Cuenta de origen o descriptor libre. Del correo: "Cuenta"."""

    cargo: Decimal | None
    """Monto del cargo. Del correo: "Monto". Siempre >= 0 si existe."""

    num_operacion: str
    """Número de operación tal cual aparece en el correo.
    Cadena vacía si el correo no lo trae (el movimiento no es fusionable)."""

    observacion: str = ""
    """Beneficiario o contraparte."""

    documento: str = ""
    """Mensaje libre que acompaña la operación."""

    abono: Decimal | None = None
    """Existe en el layout del libro pero este sistema nunca lo llena."""

    saldo: Decimal | None = None
    """Existe en el layout del libro pero este sistema nunca lo llena."""

    @property
    def es_fusionable(self) -> bool:
        """Un movimiento sin número de operación no se puede deduplicar
        en corridas posteriores, así que nunca se escribe en el libro."""
        return bool(self.num_operacion.strip())

    @property
    def llave(self) -> str:
        """Número de operación normalizado para comparar contra el libro."""
        return self.num_operacion.strip()

    def __post_init__(self) -> None:
        if self.cargo is not None and self.cargo < Decimal("0"):
            raise ValueError(f"cargo no puede ser negativo: {self.cargo}")
