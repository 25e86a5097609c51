"""
Adaptador de entrada: Correos guardados como archivos .eml.

Sirve para correr el sistema sin conexión al buzón: se exportan los
correos de notificación desde el cliente de correo (Outlook, Thunderbird)
y se procesan desde disco. También acepta archivos .html sueltos (el
cuerpo ya extraído); en ese caso no hay remitente.
"""

from email import policy
from email.message import EmailMessage
from email.parser import BytesParser
from email.utils import parseaddr
from pathlib import Path

from bank_ledger.domain.models.correo import Correo
from bank_ledger.domain.ports.email_source import EmailSource


class EmlDirectorySource(EmailSource):
    """Lee correos de un archivo .eml/.html o de un directorio (recursivo)."""

    EXTENSIONES: tuple[str, ...] = (".eml", ".html", ".htm")

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return f"eml:{self._path}"

    def fetch(self) -> list[Correo]:
        """Lee todos los archivos soportados, ordenados por ruta.

        Raises:
            FileNotFoundError: Si la ruta no existe.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"No existe: {self._path}")

        if self._path.is_file():
            archivos = [self._path]
        else:
            archivos = sorted(
                p for p in self._path.glob("**/*")
                if p.is_file() and p.suffix.lower() in self.EXTENSIONES
            )

        return [self.leer(archivo) for archivo in archivos]

    @staticmethod
    def leer(archivo: Path) -> Correo:
        """Convierte un archivo en Correo."""
        if archivo.suffix.lower() in (".html", ".htm"):
            return Correo(
                html=archivo.read_text(encoding="utf-8", errors="replace"),
                origen=archivo.name,
            )

        with open(archivo, "rb") as f:
            mensaje = BytesParser(policy=policy.default).parse(f)

        _, remitente = parseaddr(str(mensaje.get("From", "")))

        return Correo(
            html=_cuerpo(mensaje),
            remitente=remitente,
            asunto=str(mensaje.get("Subject", "")),
            origen=archivo.name,
        )


def _cuerpo(mensaje: EmailMessage) -> str:
    """Cuerpo HTML del correo; texto plano si no hay parte HTML."""
    parte = mensaje.get_body(preferencelist=("html", "plain"))
    if parte is None:
        return ""
    try:
        return parte.get_content()
    except (LookupError, UnicodeDecodeError):
        # Charset declarado que Python no conoce: se decodifica a mano
        payload = parte.get_payload(decode=True) or b""
        return payload.decode("utf-8", errors="replace")
