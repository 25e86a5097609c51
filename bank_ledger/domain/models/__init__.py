"""
Modelos de dominio del proyecto bank-email-ledger.

Dataclasses que representan los datos del negocio sin dependencias externas.

Uso:
    from bank_ledger.domain.models import Movimiento, EstadoCuenta, ResultadoParseo
"""

from bank_ledger.domain.models.correo import Correo
from bank_ledger.domain.models.datos_correo import DatosCorreo
from bank_ledger.domain.models.estado_cuenta import EstadoCuenta
from bank_ledger.domain.models.indice_hoja import IndiceHoja
from bank_ledger.domain.models.movimiento import Movimiento
from bank_ledger.domain.models.resultado_parseo import ResultadoParseo
from bank_ledger.domain.models.resumen import ResumenFusion, ResumenUnidad

__all__ = [
    "Correo",
    "DatosCorreo",
    "EstadoCuenta",
    "IndiceHoja",
    "Movimiento",
    "ResultadoParseo",
    "ResumenFusion",
    "ResumenUnidad",
]
