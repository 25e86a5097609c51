"""
Punto de entrada CLI: bank-ledger.

Uso:
    # Procesar una carpeta con correos .eml exportados
    bank-ledger /ruta/correos -o /ruta/libros

    # Solo los movimientos de enero 2026, con otra plantilla
    bank-ledger /ruta/correos -y 2026 -m 1 -t ./plantilla/plantilla.xlsx

    # Además, dejar un reporte de la corrida
    bank-ledger /ruta/correo.eml --report /ruta/reporte.xlsx

Los valores por defecto salen de la configuración (variables
MOVIMIENTOS_* o .env); los flags tienen prioridad.

Este módulo es el ÚNICO lugar donde se ensamblan los componentes.
No contiene lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from bank_ledger.adapters.input.email_sources.eml_directory import EmlDirectorySource
from bank_ledger.adapters.output.ledger.local_store import LocalLedgerStore
from bank_ledger.adapters.output.loggers.console_logger import ConsoleLogger
from bank_ledger.adapters.output.writers.excel_writer import ExcelWriter
from bank_ledger.domain.exceptions import OutputError
from bank_ledger.domain.services.email_ledger_processor import EmailLedgerProcessor
from bank_ledger.domain.services.normalizer import Normalizer
from bank_ledger.infrastructure.config import get_settings
from bank_ledger.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)
    settings = get_settings()

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else settings.output_dir
    template_path = Path(args.template) if args.template else settings.template_path

    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=settings.verbose and not args.quiet)
    normalizer = Normalizer(
        banco_por_defecto=settings.banco_por_defecto,
        moneda_por_defecto=settings.moneda_por_defecto,
    )
    registry = create_default_registry(normalizer=normalizer, logger=logger)
    store = LocalLedgerStore(output_dir, template_path, patron_nombre=settings.patron_nombre)
    source = EmlDirectorySource(input_path)

    processor = EmailLedgerProcessor(
        registry=registry,
        store=store,
        logger=logger,
        combinaciones=settings.bancos,
        remitentes_permitidos=[] if args.any_sender else settings.allowed_senders,
    )

    print("=" * 60)
    print("BANK EMAIL LEDGER")
    print("=" * 60)
    print(f"  Entrada:   {input_path}")
    print(f"  Libros:    {output_dir}")
    print(f"  Plantilla: {template_path}")
    print(f"  Bancos disponibles: {', '.join(registry.available_banks)}")
    habilitadas = ", ".join(f"{b} {m}" for b, m in settings.combinaciones_habilitadas())
    print(f"  Habilitados: {habilitadas}")
    if args.year or args.month:
        print(f"  Periodo:   {args.month or 'todos los meses'} / {args.year or 'todos los años'}")
    print()

    # --- Procesar ---
    correos = source.fetch()
    if not correos:
        print(f"❌ No se encontraron correos en {input_path}")
        sys.exit(1)

    resultados, unidades = processor.procesar(correos, año=args.year, mes=args.month)

    if args.report:
        try:
            ruta = ExcelWriter().write_report(resultados, unidades, Path(args.report))
            print(f"\n📁 Reporte generado: {ruta}")
        except OutputError as e:
            logger.log_error(args.report, e)

    # --- Resumen final ---
    logger.print_summary()

    if not resultados:
        sys.exit(1)


def _mes(valor: str) -> int:
    mes = int(valor)
    if not 1 <= mes <= 12:
        raise argparse.ArgumentTypeError(f"Mes inválido: {valor}. Debe estar entre 1 y 12.")
    return mes


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Registra las notificaciones bancarias (BCP, Interbank) "
        "en los libros de movimientos por banco, moneda y año",
        epilog="Ejemplo: bank-ledger /ruta/correos -o /ruta/libros",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo .eml/.html o a un directorio con correos",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de los libros de movimientos. "
        "Default: MOVIMIENTOS_OUTPUT_DIR o ./debug-output",
    )

    parser.add_argument(
        "-t",
        "--template",
        help="Plantilla para libros nuevos. "
        "Default: MOVIMIENTOS_TEMPLATE_PATH o ./plantilla/plantilla.xlsx",
    )

    parser.add_argument("-y", "--year", type=int, help="Procesar solo movimientos de este año")

    parser.add_argument("-m", "--month", type=_mes, help="Procesar solo movimientos de este mes (1-12)")

    parser.add_argument("--report", help="Ruta del reporte .xlsx de la corrida")

    parser.add_argument(
        "--any-sender",
        action="store_true",
        help="No filtrar por remitente (útil para correos reenviados)",
    )

    parser.add_argument("-q", "--quiet", action="store_true", help="Solo errores y resumen final")

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
