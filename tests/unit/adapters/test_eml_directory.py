"""Tests para EmlDirectorySource (correos .eml exportados a disco)."""

from email.message import EmailMessage

import pytest

from bank_ledger.adapters.input.email_sources.eml_directory import EmlDirectorySource


def _escribir_eml(ruta, html: str | None, texto: str | None = None, remitente: str = "BCP <notificaciones@notificacionesbcp.com.pe>") -> None:
    mensaje = EmailMessage()
    mensaje["From"] = remitente
    mensaje["To"] = "tesoreria@empresa.pe"
    mensaje["Subject"] = "Constancia de Transferencia"
    if texto is not None:
        mensaje.set_content(texto)
    if html is not None:
        if texto is None:
            mensaje.set_content(html, subtype="html")
        else:
            mensaje.add_alternative(html, subtype="html")
    ruta.write_bytes(bytes(mensaje))


class TestEmlDirectorySource:
    def test_lee_un_archivo(self, tmp_path, html_bcp):
        archivo = tmp_path / "constancia.eml"
        _escribir_eml(archivo, html_bcp())

        correos = EmlDirectorySource(archivo).fetch()

        assert len(correos) == 1
        correo = correos[0]
        assert correo.remitente == "notificaciones@notificacionesbcp.com.pe"
        assert correo.asunto == "Constancia de Transferencia"
        assert correo.origen == "constancia.eml"
        assert "Número de operación" in correo.html

    def test_prefiere_la_parte_html(self, tmp_path):
        archivo = tmp_path / "multi.eml"
        _escribir_eml(archivo, "<html><body><p>version html</p></body></html>", texto="version texto")

        assert "version html" in EmlDirectorySource(archivo).fetch()[0].html

    def test_texto_plano_si_no_hay_html(self, tmp_path):
        archivo = tmp_path / "plano.eml"
        _escribir_eml(archivo, None, texto="Monto: S/ 10.00")

        assert "Monto: S/ 10.00" in EmlDirectorySource(archivo).fetch()[0].html

    def test_directorio_recursivo_y_ordenado(self, tmp_path, html_bcp):
        (tmp_path / "enero").mkdir()
        _escribir_eml(tmp_path / "b.eml", html_bcp())
        _escribir_eml(tmp_path / "a.eml", html_bcp())
        _escribir_eml(tmp_path / "enero" / "c.eml", html_bcp())
        (tmp_path / "notas.txt").write_text("ignorar")

        correos = EmlDirectorySource(tmp_path).fetch()

        assert [c.origen for c in correos] == ["a.eml", "b.eml", "c.eml"]

    def test_html_suelto_sin_remitente(self, tmp_path, html_interbank):
        archivo = tmp_path / "cuerpo.html"
        archivo.write_text(html_interbank(), encoding="utf-8")

        correo = EmlDirectorySource(archivo).fetch()[0]

        assert correo.remitente == ""
        assert "Número de solicitud" in correo.html

    def test_directorio_vacio(self, tmp_path):
        assert EmlDirectorySource(tmp_path).fetch() == []

    def test_ruta_inexistente(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EmlDirectorySource(tmp_path / "no_existe").fetch()

    def test_nombre(self, tmp_path):
        assert EmlDirectorySource(tmp_path).name.startswith("eml:")
