"""
Detección léxica de moneda en el texto de un correo.

Los dos bancos soportados marcan la moneda igual ("S/ 300.00",
"Corriente Soles", "US$ 45.00", "Dólares"). Si no aparece ningún
marcador se devuelve None: el pipeline omite el correo en vez de
adivinar la moneda.
"""

SOLES = "SOLES"
DOLARES = "DOLARES"

_MARCADORES_SOLES: tuple[str, ...] = ("Soles", "S/")
_MARCADORES_DOLARES: tuple[str, ...] = ("Dólares", "Dolares", "USD", "US$")


def detectar_moneda(texto: str) -> str | None:
    """Devuelve 'SOLES', 'DOLARES' o None.

    Soles se evalúa primero.

    Ejemplos:
        >>> detectar_moneda("Monto S/ 300.00")
        'SOLES'
        >>> detectar_moneda("Monto US$ 45.00")
        'DOLARES'
        >>> detectar_moneda("Cambio de clave") is None
        True
    """
    if any(marcador in texto for marcador in _MARCADORES_SOLES):
        return SOLES
    if any(marcador in texto for marcador in _MARCADORES_DOLARES):
        return DOLARES
    return None
