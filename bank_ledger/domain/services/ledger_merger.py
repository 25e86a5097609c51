"""
Servicio de dominio: Motor de fusión de movimientos en una pestaña.

El libro se mantiene a mano junto con las filas automáticas: hay filas
borradas o dejadas en blanco como separador. La fusión:

1. ESCANEA la columna NUM OP desde la fila 7 hasta la última fila usada
   → IndiceHoja (operaciones existentes, filas vacías, última fila con datos).
2. DEDUPLICA: fuera los movimientos sin número de operación, los que ya
   están en la hoja y los repetidos dentro del lote (gana el primero).
3. ORDENA por fecha ascendente (orden estable: en empate se respeta el
   orden de llegada).
4. PLANIFICA: primero las filas vacías (ascendente), luego filas nuevas
   después de la última fila usada.
5. ESCRIBE el plan completo. Nada se escribe antes de tener el plan.

Nunca borra ni reordena filas existentes. Correr dos veces el mismo lote
no cambia nada la segunda vez.
"""

from collections.abc import Sequence

from bank_ledger.domain.models.indice_hoja import IndiceHoja
from bank_ledger.domain.models.movimiento import Movimiento
from bank_ledger.domain.models.resumen import ResumenFusion
from bank_ledger.domain.ports.ledger_section import LedgerSection
from bank_ledger.domain.shared.layout_hoja import (
    COL_CARGOS,
    COL_DETALLE,
    COL_DOCUMENTO,
    COL_FECHA,
    COL_NUM_OP,
    COL_OBSERVACION,
    FILA_INICIO_DATOS,
    FORMATO_FECHA,
)


class LedgerMerger:
    """Fusiona movimientos nuevos en una pestaña mensual del libro."""

    def fusionar(self, seccion: LedgerSection, movimientos: Sequence[Movimiento]) -> ResumenFusion:
        """Ejecuta escaneo, deduplicación, orden, plan y escritura.

        Args:
            seccion: Pestaña del mes destino.
            movimientos: Movimientos candidatos, en orden de llegada.

        Returns:
            ResumenFusion con los contadores de la operación.
        """
        indice = self.escanear(seccion)

        nuevos, omitidos_duplicados, omitidos_sin_operacion = self.filtrar_duplicados(
            movimientos, indice.operaciones_existentes
        )
        ordenados = self.ordenar_por_fecha(nuevos)
        plan = self.planificar(ordenados, indice)
        self.escribir(seccion, plan)

        filas_vacias = set(indice.filas_vacias)
        en_vacias = sum(1 for fila, _ in plan if fila in filas_vacias)

        return ResumenFusion(
            considerados=len(movimientos),
            existentes=len(indice.operaciones_existentes),
            filas_vacias=len(indice.filas_vacias),
            insertados_en_vacias=en_vacias,
            insertados_al_final=len(plan) - en_vacias,
            omitidos_duplicados=omitidos_duplicados,
            omitidos_sin_operacion=omitidos_sin_operacion,
        )

    # =================================================================
    # Paso 1: Escaneo
    # =================================================================

    def escanear(self, seccion: LedgerSection) -> IndiceHoja:
        """Recorre la columna NUM OP y arma el índice de la hoja."""
        indice = IndiceHoja()

        for fila in range(FILA_INICIO_DATOS, seccion.ultima_fila + 1):
            valor = self._texto_operacion(seccion.leer(fila, COL_NUM_OP))
            if valor:
                indice.operaciones_existentes.add(valor)
                indice.ultima_fila_con_datos = fila
            else:
                indice.filas_vacias.append(fila)

        return indice

    # =================================================================
    # Paso 2: Deduplicación
    # =================================================================

    @staticmethod
    def filtrar_duplicados(
        movimientos: Sequence[Movimiento],
        existentes: set[str],
    ) -> tuple[list[Movimiento], int, int]:
        """Descarta movimientos ya registrados, repetidos o sin número de operación.

        Returns:
            (nuevos, omitidos_duplicados, omitidos_sin_operacion)
        """
        vistos: set[str] = set()
        nuevos: list[Movimiento] = []
        duplicados = 0
        sin_operacion = 0

        for movimiento in movimientos:
            if not movimiento.es_fusionable:
                sin_operacion += 1
                continue

            llave = movimiento.llave
            if llave in existentes or llave in vistos:
                duplicados += 1
                continue

            vistos.add(llave)
            nuevos.append(movimiento)

        return nuevos, duplicados, sin_operacion

    # =================================================================
    # Paso 3: Orden
    # =================================================================

    @staticmethod
    def ordenar_por_fecha(movimientos: Sequence[Movimiento]) -> list[Movimiento]:
        """Orden ascendente por fecha. sorted() es estable."""
        return sorted(movimientos, key=lambda m: m.fecha)

    # =================================================================
    # Paso 4: Plan de filas
    # =================================================================

    @staticmethod
    def planificar(movimientos: Sequence[Movimiento], indice: IndiceHoja) -> list[tuple[int, Movimiento]]:
        """Asigna una fila destino a cada movimiento.

        Primero se consumen las filas vacías en orden ascendente. Agotadas,
        se agregan filas después de la última fila ocupada hasta ese
        momento: si la última fila vacía usada estaba después de los datos
        (filas con formato al final de la plantilla), se continúa desde ahí.
        """
        plan: list[tuple[int, Movimiento]] = []
        vacias = iter(indice.filas_vacias)
        ultima = indice.ultima_fila_con_datos

        for movimiento in movimientos:
            fila = next(vacias, None)
            if fila is None:
                fila = ultima + 1
            ultima = max(ultima, fila)
            plan.append((fila, movimiento))

        return plan

    # =================================================================
    # Paso 5: Escritura
    # =================================================================

    @staticmethod
    def escribir(seccion: LedgerSection, plan: Sequence[tuple[int, Movimiento]]) -> None:
        """Escribe cada movimiento en su fila. ABONOS y SALDOS no se tocan."""
        for fila, movimiento in plan:
            seccion.escribir(fila, COL_FECHA, movimiento.fecha.strftime(FORMATO_FECHA))
            seccion.escribir(fila, COL_DETALLE, movimiento.detalle)
            seccion.escribir(
                fila,
                COL_CARGOS,
                float(movimiento.cargo) if movimiento.cargo is not None else None,
            )
            seccion.escribir_texto(fila, COL_NUM_OP, movimiento.llave)
            seccion.escribir(fila, COL_OBSERVACION, movimiento.observacion)
            seccion.escribir(fila, COL_DOCUMENTO, movimiento.documento)

    # =================================================================
    # Helpers
    # =================================================================

    @staticmethod
    def _texto_operacion(valor: object) -> str:
        """Normaliza el valor de la celda NUM OP a texto.

        Filas viejas pudieron quedar como número (61864 o 61864.0); se
        comparan como "61864". Los textos se respetan tal cual.
        """
        if valor is None:
            return ""
        if isinstance(valor, float) and valor.is_integer():
            return str(int(valor))
        return str(valor).strip()
