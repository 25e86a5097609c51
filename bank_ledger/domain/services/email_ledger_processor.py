"""
Servicio de dominio: Procesador de correos hacia los libros de movimientos.

Orquesta una corrida completa:
1. Recibe los correos (Correo) de la fuente.
2. Parsea cada uno con el registro de parsers.
3. Descarta los no válidos (monto 0, sin moneda, remitente no permitido).
4. Agrupa los válidos por libro (banco, moneda, año) y, dentro del libro,
   por pestaña (mes de la fecha del movimiento).
5. Por libro: abre, fusiona cada pestaña, guarda.

Un correo malo no aborta el lote. Un libro malo (sin pestaña, bloqueado,
sin plantilla) aborta SOLO ese libro; los demás se procesan igual.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence

from bank_ledger.domain.exceptions import LedgerBaseError, RecursoBloqueadoError
from bank_ledger.domain.models.correo import Correo
from bank_ledger.domain.models.movimiento import Movimiento
from bank_ledger.domain.models.resultado_parseo import ResultadoParseo
from bank_ledger.domain.models.resumen import ResumenFusion, ResumenUnidad
from bank_ledger.domain.ports.ledger_store import LedgerStore
from bank_ledger.domain.ports.process_logger import ProcessLogger
from bank_ledger.domain.services.ledger_merger import LedgerMerger
from bank_ledger.domain.services.validity_filter import es_valido, filtrar_validos
from bank_ledger.domain.shared.month_map import month_name, month_to_int
from bank_ledger.infrastructure.registry import BankEmailParserRegistry

Unidad = tuple[str, str, int]


class EmailLedgerProcessor:
    """Lleva los correos de notificación hasta los libros por banco/moneda/año.

    Recibe sus dependencias por constructor. No sabe si los libros están
    en disco o en la nube: solo conoce el puerto LedgerStore.
    """

    def __init__(
        self,
        registry: BankEmailParserRegistry,
        store: LedgerStore,
        logger: ProcessLogger,
        merger: LedgerMerger | None = None,
        combinaciones: Mapping[str, Sequence[str]] | None = None,
        remitentes_permitidos: Sequence[str] | None = None,
    ) -> None:
        """
        Args:
            registry: Registro de parsers de correo.
            store: Almacén de libros de movimientos.
            logger: Bitácora de la corrida.
            merger: Motor de fusión. Default: LedgerMerger().
            combinaciones: Banco → monedas habilitadas. Ej:
                {"BCP": ["SOLES", "DOLARES"], "INTERBANK": ["SOLES"]}.
                None habilita todas.
            remitentes_permitidos: Direcciones aceptadas. Vacío o None
                acepta cualquier remitente. Un correo sin remitente
                siempre se acepta.
        """
        self._registry = registry
        self._store = store
        self._logger = logger
        self._merger = merger or LedgerMerger()
        self._combinaciones = (
            {b.upper(): {m.upper() for m in monedas} for b, monedas in combinaciones.items()}
            if combinaciones is not None
            else None
        )
        self._remitentes = {r.strip().lower() for r in (remitentes_permitidos or [])}

    def procesar(
        self,
        correos: Iterable[Correo],
        año: int | None = None,
        mes: int | None = None,
    ) -> tuple[list[ResultadoParseo], list[ResumenUnidad]]:
        """Corrida completa: parseo + fusión.

        Returns:
            (resultados válidos, resumen por libro).
        """
        resultados = self.procesar_correos(correos)
        unidades = self.procesar_unidades(resultados, año=año, mes=mes)
        return resultados, unidades

    # =================================================================
    # Fase 1: correos → resultados válidos
    # =================================================================

    def procesar_correos(self, correos: Iterable[Correo]) -> list[ResultadoParseo]:
        """Parsea y filtra los correos. Conserva el orden de llegada."""
        validos: list[ResultadoParseo] = []

        for correo in correos:
            self._logger.log_email_received(correo.origen, correo.remitente)

            if not self._remitente_permitido(correo.remitente):
                self._logger.log_email_discarded(
                    correo.origen, f"remitente no permitido: {correo.remitente}"
                )
                continue

            resultado = self._registry.parse_one(correo.html, correo.remitente, correo.origen)
            if resultado is None:
                continue

            if not es_valido(resultado):
                self._logger.log_email_discarded(correo.origen, "monto 0 o sin movimientos")
                continue

            if resultado.moneda is None:
                self._logger.log_email_discarded(correo.origen, "moneda no detectada")
                continue

            self._logger.log_email_accepted(
                correo.origen, resultado.banco, f"{resultado.mes} {resultado.año}"
            )
            validos.append(resultado)

        return validos

    def _remitente_permitido(self, remitente: str) -> bool:
        if not self._remitentes or not remitente:
            return True
        return remitente.strip().lower() in self._remitentes

    # =================================================================
    # Fase 2: resultados → libros
    # =================================================================

    def procesar_unidades(
        self,
        resultados: Iterable[ResultadoParseo],
        año: int | None = None,
        mes: int | None = None,
    ) -> list[ResumenUnidad]:
        """Fusiona los resultados en sus libros.

        Args:
            resultados: Resultados de procesar_correos. Los que no pasan el
                filtro de validez (monto 0, sin movimientos) se ignoran.
            año: Si se indica, solo se procesan movimientos de ese año.
            mes: Si se indica (1-12), solo se procesan movimientos de ese mes.

        Returns:
            Un ResumenUnidad por libro banco/moneda/año, en orden de
            banco, moneda y año.
        """
        nombre_mes = month_name(mes) if mes is not None else None
        grupos: dict[Unidad, list[ResultadoParseo]] = defaultdict(list)

        for resultado in filtrar_validos(resultados):
            if año is not None and resultado.año != año:
                continue
            if nombre_mes is not None and resultado.mes != nombre_mes:
                continue
            grupos[(resultado.banco, resultado.moneda, resultado.año)].append(resultado)

        unidades: list[ResumenUnidad] = []
        for unidad in sorted(grupos):
            banco, moneda, año_unidad = unidad
            if not self._habilitada(banco, moneda):
                resumen = ResumenUnidad(
                    banco, moneda, año_unidad, correos=len(grupos[unidad]),
                    error="combinación banco/moneda no habilitada",
                )
                self._logger.log_unit_skipped(banco, moneda, año_unidad, resumen.error)
                unidades.append(resumen)
                continue
            unidades.append(self._procesar_unidad(unidad, grupos[unidad]))

        return unidades

    def _habilitada(self, banco: str, moneda: str) -> bool:
        if self._combinaciones is None:
            return True
        return moneda in self._combinaciones.get(banco, set())

    def _procesar_unidad(self, unidad: Unidad, resultados: list[ResultadoParseo]) -> ResumenUnidad:
        """Abre el libro, fusiona cada pestaña y lo guarda.

        Los errores del libro se registran y quedan en el resumen; no se
        propagan.
        """
        banco, moneda, año = unidad
        resumen = ResumenUnidad(banco, moneda, año, correos=len(resultados))
        self._logger.log_unit_start(banco, moneda, año, len(resultados))

        fusiones: dict[str, ResumenFusion] = {}
        try:
            libro = self._store.abrir(banco, moneda, año)

            for mes, movimientos in self._agrupar_por_mes(resultados):
                seccion = libro.seccion(mes)
                libro.reemplazar_marcadores(
                    seccion,
                    {"{MES}": mes, "{AÑO}": str(año), "{BANK}": banco, "{CURRENCY}": moneda},
                )
                fusion = self._merger.fusionar(seccion, movimientos)
                fusiones[mes] = fusion
                self._logger.log_section_merged(banco, moneda, mes, fusion)

            ruta = self._store.guardar(libro, banco, moneda, año)
        except RecursoBloqueadoError as e:
            resumen.error = str(e)
            self._logger.log_unit_skipped(
                banco, moneda, año, f"{e}. Cierre el archivo y vuelva a ejecutar."
            )
            return resumen
        except LedgerBaseError as e:
            resumen.error = str(e)
            self._logger.log_unit_skipped(banco, moneda, año, str(e))
            return resumen

        resumen.fusiones = fusiones
        resumen.ruta = ruta
        self._logger.log_unit_saved(ruta, resumen.total_insertados)
        return resumen

    @staticmethod
    def _agrupar_por_mes(resultados: list[ResultadoParseo]) -> list[tuple[str, list[Movimiento]]]:
        """(mes, movimientos) en orden de calendario; dentro del mes, orden de llegada."""
        por_mes: dict[str, list[Movimiento]] = defaultdict(list)
        for resultado in resultados:
            por_mes[resultado.mes].extend(resultado.movimientos)
        return sorted(por_mes.items(), key=lambda item: month_to_int(item[0]))
