"""
Adaptador de entrada: Parser de correos BCP (Banco de Crédito del Perú).

Remitente típico: notificaciones@notificacionesbcp.com.pe

FORMATO DEL CORREO:
Los datos vienen en tablas de etiqueta/valor. Cada fila del BCP tiene
4 celdas, con celdas separadoras vacías:

    | (vacía) | Monto               | (vacía) | S/ 300.00        |
    | (vacía) | Número de operación | (vacía) | 00061864         |

La etiqueta va en la celda 1 y el valor en la celda 3. Las filas de 2 o 3
celdas se leen como | etiqueta | valor |.

La etiqueta "Cuenta" aparece dos veces (Datos de origen y Datos de
destino); la primera es la cuenta de origen y es la que se guarda.
"""

from lxml.html import HtmlElement

from bank_ledger.adapters.input.email_parsers.currency import detectar_moneda
from bank_ledger.adapters.input.email_parsers.html_utils import celdas, filas, texto, texto_body
from bank_ledger.domain.models.datos_correo import DatosCorreo
from bank_ledger.domain.ports.bank_email_parser import BankEmailParser
from bank_ledger.domain.shared.money import extraer_monto
from bank_ledger.domain.shared.text_cleaner import normalizar_etiqueta


class BCPEmailParser(BankEmailParser):
    """Parser de correos de constancia de operación del BCP."""

    _SENDER_TOKEN: str = "bcp"

    # Sin "BCP" suelto: puede aparecer en el beneficiario de correos de otros bancos
    _BODY_PHRASES: tuple[str, ...] = ("Banco de Crédito", "notificacionesbcp")

    # Etiqueta del correo → campo de DatosCorreo
    _LABELS: dict[str, str] = {
        "Fecha y hora": "fecha",
        "Número de operación": "num_operacion",
        "Cuenta": "cuenta",
        "Beneficiario": "beneficiario",
        "Monto": "monto",
        "Mensaje": "mensaje",
    }

    @property
    def bank_name(self) -> str:
        return "BCP"

    def detect_sender(self, remitente: str) -> bool:
        return bool(remitente) and self._SENDER_TOKEN in remitente.lower()

    def detect_body(self, documento: HtmlElement) -> bool:
        cuerpo = texto_body(documento)
        return any(frase in cuerpo for frase in self._BODY_PHRASES)

    def detect_currency(self, documento: HtmlElement) -> str | None:
        return detectar_moneda(texto_body(documento))

    def parse(self, documento: HtmlElement) -> DatosCorreo:
        """Recorre TODAS las filas de TODAS las tablas buscando etiquetas.

        Se recorren también las tablas anidadas (el BCP maqueta con
        tablas dentro de tablas).
        """
        campos: dict[str, str] = {}

        for fila in filas(documento):
            par = self._etiqueta_valor(fila)
            if par is None:
                continue

            etiqueta, valor = par
            campo = self._LABELS.get(etiqueta)
            if campo is None:
                continue

            # Primera "Cuenta" = cuenta de origen
            if campo == "cuenta" and campos.get("cuenta"):
                continue

            campos[campo] = valor

        return DatosCorreo(
            fecha=campos.get("fecha", ""),
            cuenta=campos.get("cuenta", ""),
            monto=extraer_monto(campos.get("monto", "")),
            num_operacion=campos.get("num_operacion", ""),
            beneficiario=campos.get("beneficiario", ""),
            mensaje=campos.get("mensaje", ""),
        )

    @staticmethod
    def _etiqueta_valor(fila: HtmlElement) -> tuple[str, str] | None:
        """Devuelve (etiqueta, valor) de la fila o None si no aplica."""
        tds = celdas(fila)

        if len(tds) >= 4:
            return normalizar_etiqueta(tds[1].text_content()), texto(tds[3])
        if len(tds) >= 2:
            return normalizar_etiqueta(tds[0].text_content()), texto(tds[1])
        return None
