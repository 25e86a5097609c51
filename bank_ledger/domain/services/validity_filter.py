"""
Servicio de dominio: Filtro de validez.

Muchos correos del banco son notificaciones sin dinero de por medio
(cambios de clave, avisos) o correos cuyo parseo falló parcialmente y
quedó con monto 0. Guardarlos llenaría el libro de filas sin sentido,
imposibles de distinguir después de una operación real por 0.
"""

from collections.abc import Iterable
from decimal import Decimal

from bank_ledger.domain.models.resultado_parseo import ResultadoParseo


def es_valido(resultado: ResultadoParseo | None) -> bool:
    """True si el resultado tiene un movimiento con monto distinto de cero.

    Se descarta cuando:
    - el resultado es None (no detectado o con error),
    - no tiene estado de cuenta o no tiene movimientos,
    - el monto (cargo) es None o cero.
    """
    if resultado is None or resultado.estado_cuenta is None:
        return False

    movimientos = resultado.estado_cuenta.movimientos
    if not movimientos:
        return False

    for movimiento in movimientos:
        if movimiento.cargo is None or movimiento.cargo == Decimal("0"):
            return False

    return True


def filtrar_validos(resultados: Iterable[ResultadoParseo | None]) -> list[ResultadoParseo]:
    """Conserva solo los resultados válidos, en el mismo orden."""
    return [r for r in resultados if r is not None and es_valido(r)]
