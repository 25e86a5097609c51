"""
Registro de parsers de correo disponibles.

Agregar un nuevo banco al sistema requiere solo 2 pasos:
1. Crear la clase XxxEmailParser que implemente BankEmailParser.
2. Registrarla en create_default_registry().

La detección es en dos pasadas: primero el remitente contra TODOS los
parsers, luego las frases del cuerpo. Solo en la segunda pasada importa
el ORDEN de registro: find_parser devuelve el PRIMER parser cuyo
detect_body() acepta el correo (no busca el "mejor"). Las frases de
detección de cada banco deben ser lo bastante específicas para no
chocar con las de otro.

No hay instancia global: quien necesite un registro lo construye
(create_default_registry) y lo pasa. Los tests arman registros con
solo los parsers que necesitan.
"""

from lxml.html import HtmlElement

from bank_ledger.adapters.input.email_parsers.html_utils import cargar_html
from bank_ledger.domain.exceptions import BancoNoIdentificadoError, ParseError
from bank_ledger.domain.models.resultado_parseo import ResultadoParseo
from bank_ledger.domain.ports.bank_email_parser import BankEmailParser
from bank_ledger.domain.ports.process_logger import ProcessLogger
from bank_ledger.domain.services.normalizer import Normalizer


class BankEmailParserRegistry:
    """Registro ordenado de parsers de correo."""

    def __init__(
        self,
        normalizer: Normalizer | None = None,
        logger: ProcessLogger | None = None,
    ) -> None:
        """
        Args:
            normalizer: Normalizador de datos crudos. Default: BCP como banco
                de respaldo y sin moneda de respaldo.
            logger: Bitácora donde se reportan correos no detectados y
                errores. Opcional.
        """
        self._parsers: list[BankEmailParser] = []
        self._normalizer = normalizer or Normalizer()
        self._logger = logger
        self.no_detectados: int = 0
        self.con_error: int = 0

    def register(self, parser: BankEmailParser) -> None:
        """Agrega un parser al final del orden de evaluación.

        Raises:
            ValueError: Si ya existe un parser para ese banco.
        """
        name = parser.bank_name.upper()
        for existente in self._parsers:
            if existente.bank_name.upper() == name:
                raise ValueError(
                    f"Ya existe un parser registrado para '{name}': "
                    f"{type(existente).__name__}. "
                    f"No se puede registrar {type(parser).__name__}."
                )
        self._parsers.append(parser)

    def find_parser(self, documento: HtmlElement, remitente: str = "") -> BankEmailParser | None:
        """Parser que reconoce el correo: por remitente y, si ninguno, por cuerpo."""
        for parser in self._parsers:
            if parser.detect_sender(remitente):
                return parser
        for parser in self._parsers:
            if parser.detect_body(documento):
                return parser
        return None

    def parse_one(self, html: str, remitente: str = "", origen: str = "") -> ResultadoParseo | None:
        """Detecta, extrae y normaliza UN correo.

        Nunca lanza: un correo malo no debe abortar el lote.

        Returns:
            ResultadoParseo si el correo se reconoció y normalizó.
            None si no se detectó el banco (se cuenta en `no_detectados`)
            o si falló la extracción/normalización (se cuenta en `con_error`).
        """
        try:
            documento = cargar_html(html)
        except ValueError as e:
            self._no_detectado(origen, remitente, str(e))
            return None

        parser = self.find_parser(documento, remitente)
        if parser is None:
            self._no_detectado(origen, remitente)
            return None

        try:
            datos = parser.parse(documento)
            moneda = parser.detect_currency(documento)
            estado_cuenta = self._normalizer.normalizar(datos, parser.bank_name, moneda)
        except Exception as e:
            self.con_error += 1
            if self._logger is not None:
                self._logger.log_error(origen, ParseError(parser.bank_name, origen, str(e)))
            return None

        if self._logger is not None:
            self._logger.log_bank_identified(origen, parser.bank_name, estado_cuenta.moneda)

        return ResultadoParseo(
            banco=parser.bank_name,
            moneda=estado_cuenta.moneda,
            datos=datos,
            estado_cuenta=estado_cuenta,
            origen=origen,
        )

    @property
    def available_banks(self) -> list[str]:
        """Bancos registrados, en orden de evaluación."""
        return [p.bank_name.upper() for p in self._parsers]

    def __len__(self) -> int:
        return len(self._parsers)

    def _no_detectado(self, origen: str, remitente: str, detalle: str = "") -> None:
        self.no_detectados += 1
        if self._logger is not None:
            self._logger.log_bank_not_identified(origen, remitente)
            if detalle:
                self._logger.log_error(origen, BancoNoIdentificadoError(origen, detalle))


def create_default_registry(
    normalizer: Normalizer | None = None,
    logger: ProcessLogger | None = None,
) -> BankEmailParserRegistry:
    """Crea un registro con todos los parsers disponibles.

    Orden: BCP, INTERBANK.
    """
    registry = BankEmailParserRegistry(normalizer=normalizer, logger=logger)

    # Se importan aquí para que un error de importación en un parser no
    # rompa el módulo del registro.

    from bank_ledger.adapters.input.email_parsers.bcp_parser import BCPEmailParser

    registry.register(BCPEmailParser())

    from bank_ledger.adapters.input.email_parsers.interbank_parser import InterbankEmailParser

    registry.register(InterbankEmailParser())

    return registry
