"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente.
"""

from dataclasses import FrozenInstanceError

import pytest

from iban_helper.domain.models import (
    CountryStructure,
    FieldToken,
    IbanCheckStatus,
    PageText,
    ResultadoValidacion,
)
from iban_helper.domain.shared.charset import CharsetClass


class TestFieldToken:
    """Pruebas para el modelo FieldToken."""

    def test_crear_token(self):
        token = FieldToken(format_letter="U", length=4)
        assert token.token == "U04"
        assert token.charset_class == CharsetClass.UPPER

    def test_letra_desconocida_lanza_error(self):
        with pytest.raises(ValueError, match="no reconocida"):
            FieldToken(format_letter="X", length=4)

    @pytest.mark.parametrize("length", [0, 100, -1])
    def test_longitud_fuera_de_rango_lanza_error(self, length):
        with pytest.raises(ValueError, match="fuera de rango"):
            FieldToken(format_letter="F", length=length)

    def test_es_inmutable(self):
        token = FieldToken(format_letter="F", length=4)
        with pytest.raises(FrozenInstanceError):
            token.length = 5


class TestCountryStructure:
    """Pruebas para el modelo CountryStructure."""

    def test_reino_unido(self):
        gb = CountryStructure(country_code="GB", total_length=22, inner_structure="U04F06F08")
        assert gb.bban_length == 18
        assert [t.token for t in gb.field_tokens] == ["U04", "F06", "F08"]
        assert gb.is_consistent is True

    def test_suma_de_campos_distinta_de_la_longitud(self):
        roto = CountryStructure(country_code="GB", total_length=22, inner_structure="U04F06F07")
        assert roto.is_consistent is False

    def test_token_mal_formado_aparece_como_none(self):
        roto = CountryStructure(country_code="ZZ", total_length=10, inner_structure="F03X03")
        assert roto.field_tokens[0] == FieldToken(format_letter="F", length=3)
        assert roto.field_tokens[1] is None
        assert roto.is_consistent is False

    def test_resto_final_incompleto(self):
        roto = CountryStructure(country_code="ZZ", total_length=10, inner_structure="F04F0")
        assert roto.field_tokens[-1] is None

    def test_estructura_vacia_no_es_consistente(self):
        vacio = CountryStructure(country_code="ZZ", total_length=4, inner_structure="")
        assert vacio.field_tokens == []
        assert vacio.is_consistent is False

    @pytest.mark.parametrize("total_length", [0, -5])
    def test_longitud_no_positiva_lanza_error(self, total_length):
        with pytest.raises(ValueError, match="Longitud de IBAN inválida"):
            CountryStructure(country_code="ZZ", total_length=total_length, inner_structure="F04")


class TestIbanCheckStatus:

    def test_solo_valid_iban_es_valido(self):
        validos = [s for s in IbanCheckStatus if s.is_valid]
        assert validos == [IbanCheckStatus.VALID_IBAN]

    def test_ocho_resultados(self):
        assert len(IbanCheckStatus) == 8

    def test_valores_legibles(self):
        assert IbanCheckStatus.INVALID_CHECKSUM.value == "InvalidChecksum"


class TestPageText:
    """Pruebas para el modelo PageText."""

    def test_pagina_con_texto(self):
        page = PageText(page_num=1, text="IBAN: GB82 WEST 1234 5698 7654 32")
        assert not page.is_empty

    def test_pagina_vacia(self):
        assert PageText(page_num=1, text="").is_empty

    def test_pagina_solo_espacios(self):
        assert PageText(page_num=1, text="   \n  \n  ").is_empty


class TestResultadoValidacion:
    """Pruebas para el modelo ResultadoValidacion."""

    def test_propiedades_derivadas(self):
        resultado = ResultadoValidacion(
            iban="GB82WEST12345698765432",
            estado=IbanCheckStatus.VALID_IBAN,
            archivo_origen="factura.pdf",
            pagina=2,
        )
        assert resultado.es_valida is True
        assert resultado.codigo_pais == "GB"
        assert resultado.formato_impresion == "GB82 WEST 1234 5698 7654 32"

    def test_resultado_invalido(self):
        resultado = ResultadoValidacion(
            iban="GB83WEST12345698765432", estado=IbanCheckStatus.INVALID_CHECKSUM
        )
        assert resultado.es_valida is False
        assert resultado.archivo_origen == ""
        assert resultado.pagina == 1

    def test_iban_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            ResultadoValidacion(iban="", estado=IbanCheckStatus.INVALID_COUNTRY_CODE)

    def test_pagina_cero_lanza_error(self):
        with pytest.raises(ValueError, match="Página fuera de rango"):
            ResultadoValidacion(
                iban="GB82WEST12345698765432", estado=IbanCheckStatus.VALID_IBAN, pagina=0
            )
