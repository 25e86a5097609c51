"""
Utilidades compartidas del dominio.

Estas funciones son usadas por varios parsers y servicios y no dependen
de ninguna librería externa. Solo operan sobre tipos nativos de Python.

Uso:
    from bank_ledger.domain.shared.money import extraer_monto, parse_money
    from bank_ledger.domain.shared.month_map import month_name, month_to_int
    from bank_ledger.domain.shared.date_parser import parse_fecha_correo
    from bank_ledger.domain.shared.text_cleaner import clean_whitespace
    from bank_ledger.domain.shared.layout_hoja import FILA_INICIO_DATOS
"""
