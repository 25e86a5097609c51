"""
Conversión de fechas de los correos bancarios.

Los correos traen fecha y hora juntas, con formatos distintos por banco:

- BCP:       "13/01/2026 - 10:35 a. m."
- Interbank: "21/01/2026 - 11:16 A.M."  (armado por el parser desde
             "Fecha: 21/01/2026 Hora: 11:16 A.M.")

Al libro solo va la fecha (sin hora). Dos pasos:
1. extraer_fecha_sin_hora: corta la parte dd/mm/yyyy del inicio.
2. parse_fecha_correo: la convierte en `date`, validando día y mes.
"""

import re
from datetime import date

from bank_ledger.domain.exceptions import FechaInvalidaError

_LEADING_DATE: re.Pattern[str] = re.compile(r"^\s*(\d{1,2}/\d{1,2}/\d{4})")

_NUMERIC_DATE: re.Pattern[str] = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}|\d{4})$")


def extraer_fecha_sin_hora(fecha_hora: str) -> str:
    """Extrae la parte dd/mm/yyyy del inicio de un texto fecha-hora.

    Si el texto no empieza con ese patrón se devuelve tal cual; la
    validación real la hace parse_fecha_correo.

    Ejemplos:
        >>> extraer_fecha_sin_hora("13/01/2026 - 10:35 a. m.")
        '13/01/2026'
        >>> extraer_fecha_sin_hora("ayer")
        'ayer'
    """
    match = _LEADING_DATE.match(fecha_hora)
    return match.group(1) if match else fecha_hora


def parse_fecha_correo(fecha_texto: str) -> date:
    """Convierte "dd/mm/yyyy" (o "dd/mm/yy") en un objeto date.

    Raises:
        FechaInvalidaError: Si el texto está vacío, no tiene el formato o
            la combinación día/mes no existe (ej: 31/02/2026).

    Ejemplos:
        >>> parse_fecha_correo("13/01/2026")
        datetime.date(2026, 1, 13)
        >>> parse_fecha_correo("05/10/24")
        datetime.date(2024, 10, 5)
    """
    text = fecha_texto.strip()

    if not text:
        raise FechaInvalidaError(fecha_texto, "el texto de fecha está vacío")

    m = _NUMERIC_DATE.match(text)
    if not m:
        raise FechaInvalidaError(fecha_texto, "formato esperado dd/mm/yyyy")

    day = int(m.group(1))
    month = int(m.group(2))
    year = _expand_year(int(m.group(3)))

    return _build_date(year, month, day, fecha_texto)


# ============================================================
# FUNCIONES INTERNAS
# ============================================================


def _expand_year(year_short: int) -> int:
    """Expande un año de 2 dígitos a 4 dígitos.

    Regla: 00-49 → 2000-2049, 50-99 → 1950-1999.
    Si ya tiene 4 dígitos, lo devuelve tal cual.
    """
    if year_short >= 100:
        return year_short
    if year_short < 50:
        return 2000 + year_short
    return 1900 + year_short


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un date; las combinaciones imposibles (31 de febrero,
    mes 13) se reportan con el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise FechaInvalidaError(original_text, f"año={year}, mes={month}, día={day}: {e}")
