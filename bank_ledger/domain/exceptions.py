"""
Excepciones de dominio del proyecto bank-email-ledger.

Permiten que el orquestador distinga entre fallas de UN correo (se
registran y el lote continúa) y fallas de un libro completo (se aborta
solo esa combinación banco/moneda/año).

Jerarquía:
    LedgerBaseError
    ├── BancoNoIdentificadoError    → Ningún parser reconoce el correo
    ├── FechaInvalidaError          → La fecha extraída no es una fecha real
    ├── ParseError                  → Falla al extraer/normalizar un correo
    ├── HojaNoEncontradaError       → El libro no tiene la pestaña del mes
    ├── LibroNoDisponibleError      → No hay libro existente ni plantilla
    ├── RecursoBloqueadoError       → Otro usuario tiene el archivo abierto
    └── OutputError                 → Error al generar un archivo de salida
"""


class LedgerBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Un solo `except LedgerBaseError` en el orquestador captura cualquier
    error conocido del proyecto.
    """


class BancoNoIdentificadoError(LedgerBaseError):
    """Ningún parser registrado reconoce el formato del correo.

    Es un error NO fatal: el correo se cuenta como "no detectado" y el
    lote sigue con el siguiente.
    """

    def __init__(self, origen: str, detalle: str = ""):
        self.origen = origen
        self.detalle = detalle
        mensaje = f"No se pudo identificar el banco del correo: {origen}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class FechaInvalidaError(LedgerBaseError, ValueError):
    """La fecha del correo no corresponde a una fecha de calendario válida.

    Ejemplos: "31/02/2026", "sin fecha", cadena vacía.
    El movimiento se rechaza completo: sin fecha no se sabe en qué
    pestaña (mes) debe ir.
    """

    def __init__(self, texto: str, detalle: str = ""):
        self.texto = texto
        self.detalle = detalle
        mensaje = f"Fecha inválida: '{texto}'"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class ParseError(LedgerBaseError):
    """Falla interna al procesar el correo de un banco identificado.

    Esto puede pasar porque:
    - El banco cambió el diseño del correo.
    - La fecha extraída no se puede interpretar.
    - El HTML viene truncado.
    """

    def __init__(self, banco: str, origen: str, causa: str):
        self.banco = banco
        self.origen = origen
        self.causa = causa
        super().__init__(f"Error parseando correo {banco} '{origen}': {causa}")


class HojaNoEncontradaError(LedgerBaseError):
    """El libro no contiene la pestaña del mes solicitado.

    La plantilla debe traer las 12 pestañas (ENERO ... DICIEMBRE). Es fatal
    para el libro banco/moneda/año, no para el resto de la corrida.
    """

    def __init__(self, libro: str, hoja: str):
        self.libro = libro
        self.hoja = hoja
        super().__init__(
            f'No se encontró la pestaña "{hoja}" en el libro {libro}. '
            f"La plantilla debe tener las 12 pestañas de meses (ENERO, ..., DICIEMBRE)."
        )


class LibroNoDisponibleError(LedgerBaseError):
    """No se pudo cargar el libro: no existe el archivo ni la plantilla,
    o el archivo está dañado."""

    def __init__(self, ruta: str, causa: str):
        self.ruta = ruta
        self.causa = causa
        super().__init__(f"No se pudo cargar el libro '{ruta}': {causa}")


class RecursoBloqueadoError(LedgerBaseError):
    """El archivo está bloqueado por otro escritor (alguien lo tiene abierto).

    No es corrupción de datos: basta con cerrar el archivo y volver a
    ejecutar para esa combinación banco/moneda.
    """

    def __init__(self, ruta: str, causa: str = ""):
        self.ruta = ruta
        self.causa = causa
        mensaje = f"Archivo bloqueado (alguien lo tiene abierto): {ruta}"
        if causa:
            mensaje += f" ({causa})"
        super().__init__(mensaje)


class OutputError(LedgerBaseError):
    """Se lanza cuando falla la generación de un archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
