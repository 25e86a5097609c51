"""
Adaptador de entrada: Parser de correos INTERBANK (Banca por Internet Empresas).

Remitente típico: bancaporinternet@empresas.interbank.pe

FORMATO DEL CORREO (distinto al BCP):
1. Un bloque centrado dentro de `.content` con el número de solicitud y
   la fecha/hora en texto corrido:

       Número de solicitud: 123456
       Fecha: 21/01/2026 Hora: 11:16 A.M.

2. Una tabla `table.detail` de dos columnas etiqueta/valor:

       | Cuenta de cargo | Corriente Soles **********2540 |
       | Para            | PULSO CORPORACION MEDICA SAC   |
       | Monto           | S/ 10,592.00                   |

Interbank no trae campo "Mensaje" en este formato.
"""

import re

from lxml.html import HtmlElement

from bank_ledger.adapters.input.email_parsers.currency import detectar_moneda
from bank_ledger.adapters.input.email_parsers.html_utils import (
    celdas,
    filas,
    texto,
    texto_body,
    xpath_clase,
)
from bank_ledger.domain.models.datos_correo import DatosCorreo
from bank_ledger.domain.ports.bank_email_parser import BankEmailParser
from bank_ledger.domain.shared.money import extraer_monto
from bank_ledger.domain.shared.text_cleaner import clean_whitespace


class InterbankEmailParser(BankEmailParser):
    """Parser de correos de constancia de Interbank Empresas."""

    _SENDER_TOKEN: str = "interbank"

    # Bloque centrado dentro de .content (el estilo puede venir con o sin espacio)
    _CENTER_XPATH: str = (
        f"//*[{xpath_clase('content')}]"
        "//div[contains(translate(@style, ' ', ''), 'text-align:center')]"
    )

    _DETAIL_ROWS_XPATH: str = f"//table[{xpath_clase('detail')}]//tr"

    _NUM_SOLICITUD_PATTERN: re.Pattern[str] = re.compile(r"Número de solicitud:\s*(\d+)")

    _FECHA_HORA_PATTERN: re.Pattern[str] = re.compile(
        r"Fecha:\s*([\d/]+)\s+Hora:\s*([\d:]+\s*[AP]\.M\.)", re.IGNORECASE
    )

    # "Corriente Soles **********2540" → últimos dígitos visibles
    _MASKED_ACCOUNT_PATTERN: re.Pattern[str] = re.compile(r"\*+(\d+)")

    @property
    def bank_name(self) -> str:
        return "INTERBANK"

    def detect_sender(self, remitente: str) -> bool:
        return bool(remitente) and self._SENDER_TOKEN in remitente.lower()

    def detect_body(self, documento: HtmlElement) -> bool:
        return self._SENDER_TOKEN in texto_body(documento).lower()

    def detect_currency(self, documento: HtmlElement) -> str | None:
        return detectar_moneda(texto_body(documento))

    def parse(self, documento: HtmlElement) -> DatosCorreo:
        num_operacion, fecha = self._parse_bloque_central(documento)
        cuenta, beneficiario, monto = self._parse_tabla_detalle(documento)

        return DatosCorreo(
            fecha=fecha,
            cuenta=cuenta,
            monto=extraer_monto(monto),
            num_operacion=num_operacion,
            beneficiario=beneficiario,
            mensaje="",
        )

    # =================================================================
    # Bloque centrado: número de solicitud + fecha/hora
    # =================================================================

    def _parse_bloque_central(self, documento: HtmlElement) -> tuple[str, str]:
        """Devuelve (num_operacion, fecha) o cadenas vacías si no están."""
        bloques = documento.xpath(self._CENTER_XPATH)
        texto_central = clean_whitespace(" ".join(b.text_content() for b in bloques))

        num_operacion = ""
        match = self._NUM_SOLICITUD_PATTERN.search(texto_central)
        if match:
            num_operacion = match.group(1)

        fecha = ""
        match = self._FECHA_HORA_PATTERN.search(texto_central)
        if match:
            fecha = f"{match.group(1)} - {match.group(2)}"

        return num_operacion, fecha

    # =================================================================
    # Tabla de detalle
    # =================================================================

    def _parse_tabla_detalle(self, documento: HtmlElement) -> tuple[str, str, str]:
        """Devuelve (cuenta, beneficiario, texto_monto)."""
        cuenta = ""
        beneficiario = ""
        monto = ""

        for fila in filas(documento, self._DETAIL_ROWS_XPATH):
            tds = celdas(fila)
            if len(tds) < 2:
                continue

            etiqueta = texto(tds[0])
            valor = texto(tds[1])

            if "Cuenta de cargo" in etiqueta:
                match = self._MASKED_ACCOUNT_PATTERN.search(valor)
                cuenta = f"**********{match.group(1)}" if match else valor
            elif "Para" in etiqueta:
                beneficiario = valor
            elif "Monto" in etiqueta:
                monto = valor

        return cuenta, beneficiario, monto
