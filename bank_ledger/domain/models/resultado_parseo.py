"""
Modelo de dominio: Resultado del parseo de un correo.

Es el objeto que fluye del registro de parsers hacia el filtro de
validez y de ahí al agrupador por banco/moneda/año.
"""

from dataclasses import dataclass

from bank_ledger.domain.models.datos_correo import DatosCorreo
from bank_ledger.domain.models.estado_cuenta import EstadoCuenta
from bank_ledger.domain.models.movimiento import Movimiento


@dataclass(frozen=True)
class ResultadoParseo:
    """Resultado completo del parseo de un correo de notificación."""

    banco: str
    """Banco del parser que reconoció el correo."""

    moneda: str | None
    """Moneda detectada en el cuerpo. None = no detectada; el pipeline
    omite estos correos en lugar de adivinar."""

    datos: DatosCorreo
    """Los 6 campos crudos, útiles para la bitácora y el reporte."""

    estado_cuenta: EstadoCuenta
    """Estado de cuenta normalizado (un movimiento por correo)."""

    origen: str = ""
    """Etiqueta del correo original para trazabilidad."""

    @property
    def movimientos(self) -> list[Movimiento]:
        return self.estado_cuenta.movimientos

    @property
    def año(self) -> int:
        return self.estado_cuenta.año

    @property
    def mes(self) -> str:
        return self.estado_cuenta.mes
