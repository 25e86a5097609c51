"""
Puerto de entrada: Fuente de correos.

Entrega los correos a procesar. La obtención real (Microsoft Graph, IMAP)
queda fuera del dominio; aquí solo se define qué se recibe.
"""

from abc import ABC, abstractmethod

from bank_ledger.domain.models.correo import Correo


class EmailSource(ABC):
    """Interfaz para obtener correos de notificación."""

    @abstractmethod
    def fetch(self) -> list[Correo]:
        """Devuelve los correos disponibles, en el orden en que se leyeron."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para logging."""
        ...
