"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from bank_ledger.domain.ports import BankEmailParser, LedgerSection, ProcessLogger
"""

from bank_ledger.domain.ports.bank_email_parser import BankEmailParser
from bank_ledger.domain.ports.email_source import EmailSource
from bank_ledger.domain.ports.ledger_section import LedgerBook, LedgerSection
from bank_ledger.domain.ports.ledger_store import LedgerStore
from bank_ledger.domain.ports.output_writer import OutputWriter
from bank_ledger.domain.ports.process_logger import ProcessLogger

__all__ = [
    "BankEmailParser",
    "EmailSource",
    "LedgerBook",
    "LedgerSection",
    "LedgerStore",
    "OutputWriter",
    "ProcessLogger",
]
