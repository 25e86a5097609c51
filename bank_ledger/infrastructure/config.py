"""Configuración centralizada, cargada de variables de entorno y .env.

Todas las variables llevan el prefijo MOVIMIENTOS_. Ej:

    MOVIMIENTOS_TEMPLATE_PATH=./plantilla/plantilla.xlsx
    MOVIMIENTOS_OUTPUT_DIR=./salida
    MOVIMIENTOS_BANCOS={"BCP": ["SOLES"]}

Los flags del CLI tienen prioridad sobre estos valores.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bank_ledger.adapters.output.ledger.local_store import NOMBRE_ARCHIVO


class Settings(BaseSettings):
    """Parámetros de una corrida."""

    template_path: Path = Path("./plantilla/plantilla.xlsx")
    output_dir: Path = Path("./debug-output")
    patron_nombre: str = NOMBRE_ARCHIVO

    banco_por_defecto: str = "BCP"
    moneda_por_defecto: str | None = None

    bancos: dict[str, list[str]] = Field(
        default_factory=lambda: {"BCP": ["SOLES", "DOLARES"], "INTERBANK": ["SOLES"]}
    )
    allowed_senders: list[str] = Field(
        default_factory=lambda: [
            "notificaciones@notificacionesbcp.com.pe",
            "bancaporinternet@empresas.interbank.pe",
        ]
    )
    verbose: bool = True

    model_config = SettingsConfigDict(
        env_prefix="MOVIMIENTOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("banco_por_defecto", mode="after")
    @classmethod
    def upper_banco(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("moneda_por_defecto", mode="after")
    @classmethod
    def upper_moneda(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip().upper()

    @field_validator("bancos", mode="after")
    @classmethod
    def upper_bancos(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {banco.upper(): [m.upper() for m in monedas] for banco, monedas in v.items()}

    def combinaciones_habilitadas(self) -> list[tuple[str, str]]:
        """Pares (banco, moneda) que se procesan, en orden de configuración."""
        return [(banco, moneda) for banco, monedas in self.bancos.items() for moneda in monedas]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna una única instancia de Settings para toda la aplicación."""
    return Settings()
