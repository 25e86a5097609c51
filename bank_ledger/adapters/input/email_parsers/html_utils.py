"""
Helpers de lxml compartidos por los parsers de correo.

Solo envuelven operaciones de lxml que todos los parsers repiten
(cargar el HTML, texto del body, celdas de una fila). No saben de bancos.
"""

from lxml import etree, html
from lxml.html import HtmlElement

from bank_ledger.domain.shared.text_cleaner import clean_whitespace


def cargar_html(contenido: str) -> HtmlElement:
    """Carga el cuerpo del correo como documento HTML completo.

    Raises:
        ValueError: Si el contenido está vacío o lxml no lo puede leer.
    """
    if not contenido or not contenido.strip():
        raise ValueError("El cuerpo del correo está vacío")
    try:
        return html.document_fromstring(contenido)
    except ValueError:
        # lxml rechaza str con declaración <?xml encoding=...?>; en bytes sí lo acepta.
        return _cargar_bytes(contenido.encode("utf-8"))
    except etree.ParserError as e:
        raise ValueError(f"HTML ilegible: {e}")


def _cargar_bytes(contenido: bytes) -> HtmlElement:
    try:
        return html.document_fromstring(contenido)
    except (etree.ParserError, ValueError) as e:
        raise ValueError(f"HTML ilegible: {e}")


def texto_body(documento: HtmlElement) -> str:
    """Texto completo del <body> (o del documento si no hay body)."""
    body = documento.find("body")
    return (body if body is not None else documento).text_content()


def texto(elemento: HtmlElement) -> str:
    """Texto de un elemento con espacios normalizados."""
    return clean_whitespace(elemento.text_content())


def filas(documento: HtmlElement, xpath: str = "//tr") -> list[HtmlElement]:
    """Filas <tr> que coinciden con el xpath (por defecto, todas)."""
    return documento.xpath(xpath)


def celdas(fila: HtmlElement) -> list[HtmlElement]:
    """Celdas directas de una fila (<td> y <th>), sin bajar a tablas anidadas."""
    return fila.xpath("./td | ./th")


def xpath_clase(clase: str) -> str:
    """Predicado xpath equivalente al selector CSS `.clase`."""
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {clase} ')"
