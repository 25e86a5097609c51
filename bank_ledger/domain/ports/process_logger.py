"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio de una corrida, no niveles de log:
- "Se recibió un correo"
- "No se pudo identificar el banco"
- "Se fusionaron N movimientos en la pestaña ENERO"

La implementación puede imprimir a consola, escribir a archivo o
acumular en memoria para los tests.
"""

from abc import ABC, abstractmethod

from bank_ledger.domain.models.resumen import ResumenFusion


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Parseo de correos ---

    @abstractmethod
    def log_email_received(self, origen: str, remitente: str) -> None:
        """Registra que se recibió un correo para procesar."""
        ...

    @abstractmethod
    def log_bank_identified(self, origen: str, bank_name: str, moneda: str | None) -> None:
        """Registra que un parser reconoció el correo."""
        ...

    @abstractmethod
    def log_bank_not_identified(self, origen: str, remitente: str) -> None:
        """Registra que ningún parser reconoció el correo (no fatal)."""
        ...

    @abstractmethod
    def log_email_accepted(self, origen: str, banco: str, periodo: str) -> None:
        """Registra que el correo pasó el filtro y entra a la fusión.

        Args:
            origen: Etiqueta del correo.
            banco: Banco detectado.
            periodo: Mes y año del movimiento. Ej: "ENERO 2026".
        """
        ...

    @abstractmethod
    def log_email_discarded(self, origen: str, reason: str) -> None:
        """Registra que un correo parseado se descartó.

        Args:
            origen: Etiqueta del correo.
            reason: Ej: "monto 0", "moneda no detectada".
        """
        ...

    @abstractmethod
    def log_error(self, origen: str, error: Exception) -> None:
        """Registra un error de un correo o de un libro."""
        ...

    # --- Fase 2: Fusión en libros ---

    @abstractmethod
    def log_unit_start(self, banco: str, moneda: str, año: int, num_correos: int) -> None:
        """Registra el inicio del procesamiento de un libro banco/moneda/año."""
        ...

    @abstractmethod
    def log_section_merged(self, banco: str, moneda: str, mes: str, resumen: ResumenFusion) -> None:
        """Registra el resultado de fusionar en una pestaña."""
        ...

    @abstractmethod
    def log_unit_skipped(self, banco: str, moneda: str, año: int, reason: str) -> None:
        """Registra que un libro no se pudo procesar o guardar."""
        ...

    @abstractmethod
    def log_unit_saved(self, ruta: str, insertados: int) -> None:
        """Registra dónde quedó guardado un libro y cuántos movimientos se
        le agregaron."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de toda la corrida.

        Returns:
            Diccionario con métricas:
            {
                'correos_recibidos': int,
                'correos_validos': int,
                'correos_descartados': int,
                'no_detectados': int,
                'correos_con_error': int,
                'movimientos_insertados': int,
                'libros_guardados': int,
                'errores': List[dict],  # [{origen, error}]
            }
        """
        ...
