"""
Nombres de meses en español.

Los nombres en mayúsculas son, a la vez, los nombres de las pestañas del
libro (ENERO ... DICIEMBRE). El lookup por nombre es case-insensitive.
"""

MONTH_NAMES: list[str] = [
    "ENERO",
    "FEBRERO",
    "MARZO",
    "ABRIL",
    "MAYO",
    "JUNIO",
    "JULIO",
    "AGOSTO",
    "SEPTIEMBRE",
    "OCTUBRE",
    "NOVIEMBRE",
    "DICIEMBRE",
]

# Nombre → número de mes.
_MONTH_MAP: dict[str, int] = {nombre: numero for numero, nombre in enumerate(MONTH_NAMES, start=1)}


def month_name(month: int) -> str:
    """Devuelve el nombre del mes (1-12) en mayúsculas.

    Ejemplos:
        >>> month_name(1)
        'ENERO'
        >>> month_name(12)
        'DICIEMBRE'

    Raises:
        ValueError: Si el mes no está entre 1 y 12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mes inválido: {month}. Debe estar entre 1 y 12.")
    return MONTH_NAMES[month - 1]


def month_to_int(month_name: str) -> int:
    """Convierte un nombre de mes a su número 1-12.

    El lookup es case-insensitive: 'enero', 'ENERO', 'Enero' → 1.

    Raises:
        ValueError: Si el nombre no se reconoce.
    """
    normalized = month_name.strip().upper()
    result = _MONTH_MAP.get(normalized)
    if result is None:
        raise ValueError(f"Mes no reconocido: '{month_name}'. Valores válidos: {MONTH_NAMES}")
    return result
