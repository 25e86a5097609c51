"""
Utilidades para manejo de montos monetarios.

Los correos traen el monto como texto con símbolo de moneda:
"S/ 300.00", "S/. 1,250.50", "US$ 45.00", "$ 10,592.00".

Dos funciones con contratos distintos:
- parse_money: estricta, lanza ValueError ante texto no numérico.
- extraer_monto: tolerante, usada por los parsers de correo. Nunca lanza;
  si no hay dígitos devuelve Decimal("0") y el filtro de validez descarta
  el movimiento después.
"""

import re
from decimal import Decimal, InvalidOperation

# Primer número del texto: dígitos con comas de miles opcionales y decimales.
_NUMBER_PATTERN: re.Pattern[str] = re.compile(r"\d[\d,]*(?:\.\d+)?")


def parse_money(text: str) -> Decimal:
    """Convierte un texto con formato monetario a Decimal.

    Maneja:
    - Con símbolo: "S/ 1,234.56", "US$ 1,234.56", "$1,234.56"
    - Sin símbolo: "1,234.56", "1234.56"
    - Negativo: "-1,234.56"

    Raises:
        TypeError: Si no recibe str.
        ValueError: Si el texto no se puede convertir a un monto válido.

    Ejemplos:
        >>> parse_money("S/ 300.00")
        Decimal('300.00')
        >>> parse_money("-1,234.56")
        Decimal('-1234.56')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    negativo = text.strip().startswith("-")
    match = _NUMBER_PATTERN.search(text)
    if not match:
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    cleaned = match.group(0).replace(",", "")
    try:
        result = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")

    return -result if negativo else result


def extraer_monto(text: str | None) -> Decimal:
    """Versión tolerante para los campos "Monto" de los correos.

    Quita símbolos de moneda, espacios y comas de miles y toma el primer
    número. Si no hay dígitos devuelve Decimal("0"). Nunca devuelve
    negativos: en los correos el signo no existe, el monto es un cargo.

    Ejemplos:
        >>> extraer_monto("S/ 300.00")
        Decimal('300.00')
        >>> extraer_monto("S/. 10,592.00")
        Decimal('10592.00')
        >>> extraer_monto("")
        Decimal('0')
        >>> extraer_monto("pendiente")
        Decimal('0')
    """
    if not text:
        return Decimal("0")

    try:
        return abs(parse_money(text))
    except ValueError:
        return Decimal("0")
