"""bank-email-ledger: notificaciones bancarias por correo → libros de movimientos."""

__version__ = "0.1.0"
