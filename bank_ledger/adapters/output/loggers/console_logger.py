"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final de la corrida.

Útil para:
- Ejecución manual desde terminal.
- Revisar qué correos se descartaron y por qué.
"""

from bank_ledger.domain.models.resumen import ResumenFusion
from bank_ledger.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si es False solo se imprimen errores, libros omitidos
                y el resumen final.
        """
        self._verbose = verbose
        self._correos_recibidos: int = 0
        self._correos_validos: int = 0
        self._correos_descartados: int = 0
        self._no_detectados: int = 0
        self._movimientos_insertados: int = 0
        self._libros_guardados: int = 0
        self._errores: list[dict] = []

    def _print(self, linea: str) -> None:
        if self._verbose:
            print(linea)

    # --- Fase 1: Parseo de correos ---

    def log_email_received(self, origen: str, remitente: str) -> None:
        self._correos_recibidos += 1
        self._print(f"  📧 Recibido: {origen} ({remitente or 'sin remitente'})")

    def log_bank_identified(self, origen: str, bank_name: str, moneda: str | None) -> None:
        self._print(f"  🏦 Banco identificado: {bank_name} {moneda or '(moneda ?)'} — {origen}")

    def log_bank_not_identified(self, origen: str, remitente: str) -> None:
        self._no_detectados += 1
        self._print(f"  ❓ Banco NO identificado: {origen} ({remitente or 'sin remitente'})")

    def log_email_accepted(self, origen: str, banco: str, periodo: str) -> None:
        self._correos_validos += 1
        self._print(f"  ✅ Válido: {origen} → {banco} {periodo}")

    def log_email_discarded(self, origen: str, reason: str) -> None:
        self._correos_descartados += 1
        self._print(f"  ⏭️  Descartado: {origen} — {reason}")

    def log_error(self, origen: str, error: Exception) -> None:
        self._errores.append({"origen": origen, "error": str(error)})
        print(f"  ❌ Error: {origen} — {error}")

    # --- Fase 2: Fusión en libros ---

    def log_unit_start(self, banco: str, moneda: str, año: int, num_correos: int) -> None:
        self._print(f"\n📒 {banco} {moneda} {año}: {num_correos} correos")

    def log_section_merged(self, banco: str, moneda: str, mes: str, resumen: ResumenFusion) -> None:
        self._print(
            f"  📄 {mes}: {resumen.insertados} insertados "
            f"({resumen.insertados_en_vacias} en filas vacías, "
            f"{resumen.insertados_al_final} al final), "
            f"{resumen.omitidos_duplicados} duplicados, "
            f"{resumen.omitidos_sin_operacion} sin N° operación"
        )

    def log_unit_skipped(self, banco: str, moneda: str, año: int, reason: str) -> None:
        self._errores.append({"origen": f"{banco} {moneda} {año}", "error": reason})
        print(f"  ⚠️  Libro omitido: {banco} {moneda} {año} — {reason}")

    def log_unit_saved(self, ruta: str, insertados: int) -> None:
        self._libros_guardados += 1
        self._movimientos_insertados += insertados
        self._print(f"  💾 Guardado: {ruta}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "correos_recibidos": self._correos_recibidos,
            "correos_validos": self._correos_validos,
            "correos_descartados": self._correos_descartados,
            "no_detectados": self._no_detectados,
            "correos_con_error": len(self._errores),
            "movimientos_insertados": self._movimientos_insertados,
            "libros_guardados": self._libros_guardados,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Correos recibidos:      {self._correos_recibidos}")
        print(f"  Correos válidos:        {self._correos_validos}")
        print(f"  Correos descartados:    {self._correos_descartados}")
        print(f"  Bancos no detectados:   {self._no_detectados}")
        print(f"  Errores:                {len(self._errores)}")
        print(f"  Movimientos insertados: {self._movimientos_insertados}")
        print(f"  Libros guardados:       {self._libros_guardados}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['origen']}: {err['error']}")

        print("=" * 60)
