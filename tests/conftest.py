"""
Fixtures compartidas.

- Cuerpos HTML de ejemplo con la estructura real de cada banco (los
  datos son ficticios).
- MemoryLogger: ProcessLogger que acumula los eventos en una lista.
"""

import pytest

from bank_ledger.domain.models.resumen import ResumenFusion
from bank_ledger.domain.ports.process_logger import ProcessLogger

REMITENTE_BCP = "notificaciones@notificacionesbcp.com.pe"
REMITENTE_INTERBANK = "bancaporinternet@empresas.interbank.pe"


def construir_html_bcp(
    monto: str = "S/ 300.00",
    num_operacion: str = "00012345",
    fecha: str = "13/01/2026 - 10:35 a. m.",
    cuenta_origen: str = "194-XXXXXX4-0-19",
    cuenta_destino: str = "193-XXXXXX8-0-55",
    beneficiario: str = "PULSO CORPORACION MEDICA SAC",
    mensaje: str = "Pago factura F001-123",
) -> str:
    """Constancia de transferencia del BCP: filas de 4 celdas con
    separadores vacíos, tablas anidadas y la etiqueta "Cuenta" dos veces."""

    def fila(etiqueta: str, valor: str) -> str:
        return (
            "<tr><td width='10'></td>"
            f"<td class='label'>{etiqueta}</td>"
            "<td width='10'></td>"
            f"<td class='value'>{valor}</td></tr>"
        )

    return f"""<html>
<head><meta charset="utf-8"><title>Constancia de operación</title></head>
<body>
<table width="600"><tr><td>
  <p>Banco de Crédito BCP</p>
  <p>Hola, realizaste una transferencia a terceros.</p>
  <table>
    {fila("Fecha y hora", fecha)}
    {fila("Número de operación", num_operacion)}
    {fila("Monto", monto)}
  </table>
  <p>Datos de origen</p>
  <table>
    {fila("Cuenta", cuenta_origen)}
  </table>
  <p>Datos de destino</p>
  <table>
    {fila("Beneficiario", beneficiario)}
    {fila("Cuenta", cuenta_destino)}
    {fila("Mensaje", mensaje)}
  </table>
</td></tr></table>
</body>
</html>"""


def construir_html_interbank(
    monto: str = "S/ 10,592.00",
    num_solicitud: str = "123456",
    fecha: str = "21/01/2026",
    hora: str = "11:16 A.M.",
    cuenta: str = "Corriente Soles **********2540",
    beneficiario: str = "PULSO CORPORACION MEDICA SAC",
) -> str:
    """Constancia de Interbank Empresas: bloque centrado + table.detail."""
    return f"""<html>
<head><meta charset="utf-8"></head>
<body>
<div class="container">
  <div class="content">
    <div style="text-align: center;">
      <p>Número de solicitud: {num_solicitud}</p>
      <p>Fecha: {fecha} Hora: {hora}</p>
    </div>
    <table class="detail">
      <tr><td>Cuenta de cargo</td><td>{cuenta}</td></tr>
      <tr><td>Para</td><td>{beneficiario}</td></tr>
      <tr><td>Monto</td><td>{monto}</td></tr>
    </table>
  </div>
  <p>Interbank - Banca por Internet Empresas</p>
</div>
</body>
</html>"""


class MemoryLogger(ProcessLogger):
    """Acumula (evento, datos...) en `eventos`."""

    def __init__(self) -> None:
        self.eventos: list[tuple] = []

    def nombres(self) -> list[str]:
        return [e[0] for e in self.eventos]

    def de_tipo(self, nombre: str) -> list[tuple]:
        return [e for e in self.eventos if e[0] == nombre]

    def log_email_received(self, origen: str, remitente: str) -> None:
        self.eventos.append(("recibido", origen, remitente))

    def log_bank_identified(self, origen: str, bank_name: str, moneda: str | None) -> None:
        self.eventos.append(("identificado", origen, bank_name, moneda))

    def log_bank_not_identified(self, origen: str, remitente: str) -> None:
        self.eventos.append(("no_identificado", origen, remitente))

    def log_email_accepted(self, origen: str, banco: str, periodo: str) -> None:
        self.eventos.append(("aceptado", origen, banco, periodo))

    def log_email_discarded(self, origen: str, reason: str) -> None:
        self.eventos.append(("descartado", origen, reason))

    def log_error(self, origen: str, error: Exception) -> None:
        self.eventos.append(("error", origen, error))

    def log_unit_start(self, banco: str, moneda: str, año: int, num_correos: int) -> None:
        self.eventos.append(("libro", banco, moneda, año, num_correos))

    def log_section_merged(self, banco: str, moneda: str, mes: str, resumen: ResumenFusion) -> None:
        self.eventos.append(("fusion", banco, moneda, mes, resumen))

    def log_unit_skipped(self, banco: str, moneda: str, año: int, reason: str) -> None:
        self.eventos.append(("libro_omitido", banco, moneda, año, reason))

    def log_unit_saved(self, ruta: str, insertados: int) -> None:
        self.eventos.append(("guardado", ruta, insertados))

    def get_summary(self) -> dict:
        return {
            "correos_recibidos": len(self.de_tipo("recibido")),
            "correos_validos": len(self.de_tipo("aceptado")),
            "correos_descartados": len(self.de_tipo("descartado")),
            "no_detectados": len(self.de_tipo("no_identificado")),
            "correos_con_error": len(self.de_tipo("error")),
            "movimientos_insertados": sum(e[2] for e in self.de_tipo("guardado")),
            "libros_guardados": len(self.de_tipo("guardado")),
            "errores": [{"origen": e[1], "error": str(e[2])} for e in self.de_tipo("error")],
        }


@pytest.fixture
def memory_logger():
    return MemoryLogger()


@pytest.fixture
def html_bcp():
    return construir_html_bcp


@pytest.fixture
def html_interbank():
    return construir_html_interbank
