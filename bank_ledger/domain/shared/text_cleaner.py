"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto que sale del HTML de los
correos antes de compararlo con etiquetas ("Número de operación", "Monto").

Estas funciones NO tienen lógica de negocio (no saben de bancos ni montos).
"""

import re


def clean_whitespace(text: str) -> str:
    """Reemplaza espacios, tabs, saltos de línea y &nbsp; por un solo
    espacio y hace strip.

    Los correos HTML suelen partir las etiquetas en varias líneas y meter
    espacios no separables.

    Ejemplos:
        >>> clean_whitespace("  Número de\\n   operación ")
        'Número de operación'
        >>> clean_whitespace("S/\\xa0300.00")
        'S/ 300.00'
    """
    return re.sub(r"\s+", " ", text.replace("\xa0", " ")).strip()


def normalizar_etiqueta(text: str) -> str:
    """Normaliza una etiqueta de tabla para compararla.

    Limpia espacios y quita los dos puntos finales que algunos bancos
    agregan ("Monto:" → "Monto").

    Ejemplos:
        >>> normalizar_etiqueta(" Monto: ")
        'Monto'
    """
    return clean_whitespace(text).rstrip(":").strip()
