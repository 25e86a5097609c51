"""
Modelo de dominio: Correo de notificación bancaria.

Es el "puente" entre la fuente de correos (buzón, carpeta de .eml, etc.)
y el registro de parsers. El dominio no sabe de dónde vino el correo;
solo recibe el cuerpo y el remitente.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Correo:
    """Un correo recibido, listo para parsear."""

    html: str
    """Cuerpo del correo. Normalmente HTML; si el correo no tiene parte
    HTML, la fuente entrega el texto plano aquí."""

    remitente: str = ""
    """Dirección del remitente. Vacía si la fuente no la conoce."""

    asunto: str = ""

    origen: str = ""
    """Etiqueta para trazabilidad en la bitácora (nombre del .eml, id del mensaje)."""
