"""
Puerto de entrada: Parser de correos de notificación bancaria.

Define el contrato que cada banco soportado debe cumplir. Hay exactamente
un BankEmailParser por formato de correo:

    BankEmailParser (interfaz)
    ├── BCPEmailParser
    ├── InterbankEmailParser
    └── ...etc (uno por banco)

Agregar un banco = crear una clase nueva y registrarla en el registro.
Los parsers existentes no se tocan.

El `documento` que reciben los métodos es el árbol lxml del cuerpo del
correo. El registro lo carga UNA vez por correo y lo comparte entre todos
los parsers que prueba.
"""

from abc import ABC, abstractmethod

from lxml.html import HtmlElement

from bank_ledger.domain.models.datos_correo import DatosCorreo


class BankEmailParser(ABC):
    """Interfaz para reconocer y parsear el correo de un banco específico."""

    @property
    @abstractmethod
    def bank_name(self) -> str:
        """Nombre del banco en mayúsculas: 'BCP', 'INTERBANK'.

        Se usa como clave en el registro y como nombre del libro destino.
        """
        ...

    def detect(self, documento: HtmlElement, remitente: str = "") -> bool:
        """Indica si este parser reconoce el correo.

        Orden de verificación: primero el remitente (barato y preciso),
        luego una frase que identifique al banco en el cuerpo.

        Args:
            documento: Árbol HTML del cuerpo del correo.
            remitente: Dirección del remitente. Puede estar vacía.
        """
        return self.detect_sender(remitente) or self.detect_body(documento)

    @abstractmethod
    def detect_sender(self, remitente: str) -> bool:
        """Reconoce el correo solo por la dirección del remitente.

        Un remitente vacío nunca coincide.
        """
        ...

    @abstractmethod
    def detect_body(self, documento: HtmlElement) -> bool:
        """Reconoce el correo por una frase propia del banco en el cuerpo.

        Las frases no deben poder aparecer en correos de otro banco
        (por ejemplo, en el beneficiario de una transferencia).
        """
        ...

    @abstractmethod
    def detect_currency(self, documento: HtmlElement) -> str | None:
        """Detecta la moneda por marcadores en el texto del cuerpo.

        Returns:
            'SOLES', 'DOLARES', o None si no hay marcadores. Nunca adivina.
        """
        ...

    @abstractmethod
    def parse(self, documento: HtmlElement) -> DatosCorreo:
        """Extrae los 6 campos crudos del correo.

        Es un parseo de "mejor esfuerzo": si una etiqueta no aparece, ese
        campo queda vacío (o en 0 para el monto). No debe lanzar excepción
        porque falte una fila o cambie el diseño del correo.
        """
        ...
