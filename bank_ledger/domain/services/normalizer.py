"""
Servicio de dominio: Normalización de datos crudos.

Convierte los 6 campos crudos de un correo (DatosCorreo) en un
EstadoCuenta con UN movimiento:

    DatosCorreo.fecha         → Movimiento.fecha (sin hora) + mes/año del libro
    DatosCorreo.cuenta        → Movimiento.detalle
    DatosCorreo.monto         → Movimiento.cargo
    DatosCorreo.num_operacion → Movimiento.num_operacion (verbatim)
    DatosCorreo.beneficiario  → Movimiento.observacion
    DatosCorreo.mensaje       → Movimiento.documento

Si la fecha no se puede interpretar, el movimiento se RECHAZA. No se
usa el mes actual como respaldo: eso archivaría el movimiento en un
periodo equivocado.
"""

from bank_ledger.domain.models.datos_correo import DatosCorreo
from bank_ledger.domain.models.estado_cuenta import EstadoCuenta
from bank_ledger.domain.models.movimiento import Movimiento
from bank_ledger.domain.shared.date_parser import extraer_fecha_sin_hora, parse_fecha_correo
from bank_ledger.domain.shared.month_map import month_name


class Normalizer:
    """Convierte DatosCorreo + banco/moneda detectados en EstadoCuenta."""

    def __init__(
        self,
        banco_por_defecto: str = "BCP",
        moneda_por_defecto: str | None = None,
    ) -> None:
        """
        Args:
            banco_por_defecto: Se usa solo si el banco no fue detectado.
            moneda_por_defecto: Último recurso si la moneda no fue detectada.
                None (default) deja la moneda como "no detectada" y el
                pipeline omite el correo en lugar de adivinar.
        """
        self._banco_por_defecto = banco_por_defecto
        self._moneda_por_defecto = moneda_por_defecto

    def resolver_moneda(self, moneda: str | None) -> str | None:
        """Moneda detectada, o la de respaldo configurada, o None."""
        return moneda or self._moneda_por_defecto

    def normalizar(
        self,
        datos: DatosCorreo,
        banco: str | None = None,
        moneda: str | None = None,
    ) -> EstadoCuenta:
        """Normaliza un correo.

        La moneda puede quedar en None (no detectada y sin respaldo); el
        pipeline descarta esos estados de cuenta.

        Raises:
            FechaInvalidaError: Si la fecha no es una fecha real.
        """
        fecha_texto = extraer_fecha_sin_hora(datos.fecha or "")
        fecha = parse_fecha_correo(fecha_texto)

        moneda_final = self.resolver_moneda(moneda)

        movimiento = Movimiento(
            fecha=fecha,
            detalle=datos.cuenta or "",
            cargo=datos.monto if datos.monto else None,
            num_operacion=datos.num_operacion or "",
            observacion=datos.beneficiario or "",
            documento=datos.mensaje or "",
        )

        return EstadoCuenta(
            banco=(banco or self._banco_por_defecto).upper(),
            moneda=moneda_final.upper() if moneda_final else None,
            cuenta=datos.cuenta or "",
            mes=month_name(fecha.month),
            año=fecha.year,
            movimientos=[movimiento],
        )
