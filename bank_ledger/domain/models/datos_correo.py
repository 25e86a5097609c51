"""
Modelo de dominio: Datos crudos extraídos de un correo.

Cada parser de banco produce un DatosCorreo con los 6 campos que van
al libro, tal como aparecen en el correo (sin normalizar):

    1. Fecha y hora          → fecha
    2. Cuenta (origen)       → cuenta
    3. Monto                 → monto
    4. Número de operación   → num_operacion
    5. Beneficiario          → beneficiario
    6. Mensaje               → mensaje

Puede venir parcialmente vacío: si el banco cambia una etiqueta, solo
ese campo queda en "" (o en 0 para el monto).
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DatosCorreo:
    """Los 6 campos crudos de un correo de notificación."""

    fecha: str = ""
    """Texto de fecha y hora. Ejemplo: '13/01/2026 - 10:35 a. m.'"""

    cuenta: str = ""
    """Cuenta de origen. Ejemplo: '194-XXXXXX4-0-19'."""

    monto: Decimal = Decimal("0")
    """Monto ya convertido a número. Decimal("0") si no había dígitos."""

    num_operacion: str = ""
    """Número de operación, sin tocar. Ejemplo: '00061864'."""

    beneficiario: str = ""

    mensaje: str = ""
