"""
Layout fijo de las pestañas mensuales del libro de movimientos.

Este layout debe coincidir bit a bit con los libros que ya existen
(mantenidos a mano junto con las filas automáticas):

    Fila 1-6: encabezado / metadatos de la plantilla
    Fila 7+:  datos

    A       B        C       D       E       F       G            H
    FECHA   DETALLE  CARGOS  ABONOS  SALDOS  NUM OP  OBSERVACION  DOCUMENTO
"""

FILA_INICIO_DATOS: int = 7

COL_FECHA: int = 1
COL_DETALLE: int = 2
COL_CARGOS: int = 3
COL_ABONOS: int = 4
COL_SALDOS: int = 5
COL_NUM_OP: int = 6
COL_OBSERVACION: int = 7
COL_DOCUMENTO: int = 8

# Formato de número "Texto" de Excel. Evita que "00061864" se convierta en 61864.
FORMATO_TEXTO: str = "@"

# Formato en que las fechas se guardan en la columna FECHA.
FORMATO_FECHA: str = "%d/%m/%Y"
