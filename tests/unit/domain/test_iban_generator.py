"""
Tests para IbanGenerator.

Los IBANs esperados son ejemplos publicados (GB29NWBK..., IE29AIBK...,
NL91ABNA...) o se calcularon aparte con MOD97-10.
"""

import pytest

from iban_helper.adapters.input.structure_catalogs.builtin_catalog import BuiltinStructureCatalog
from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.services.iban_generator import IbanGenerator
from iban_helper.domain.services.iban_validator import IbanValidator


@pytest.fixture(scope="module")
def catalog():
    return BuiltinStructureCatalog()


@pytest.fixture(scope="module")
def generator(catalog):
    return IbanGenerator(catalog)


@pytest.fixture(scope="module")
def validator(catalog):
    return IbanValidator(catalog)


class TestGeneracion:

    @pytest.mark.parametrize(
        "account, bic, expected",
        [
            ("60161331926819", "NWBKGB2L", "GB29NWBK60161331926819"),
            ("93115212345678", "AIBKIE2D", "IE29AIBK93115212345678"),
            ("417164300", "ABNANL2A", "NL91ABNA0417164300"),
        ],
    )
    def test_ejemplos_conocidos(self, generator, account, bic, expected):
        assert generator.generate(account, bic) == expected

    def test_bic_de_11_caracteres(self, generator):
        """La sucursal (últimos 3 caracteres) no afecta al IBAN."""
        assert generator.generate("417164300", "ABNANL2AXXX") == "NL91ABNA0417164300"

    def test_cuenta_se_rellena_con_ceros(self, generator):
        iban = generator.generate("417164300", "ABNANL2A")
        assert iban[8:] == "0417164300"

    @pytest.mark.parametrize(
        "account, bic, expected",
        [
            ("417164314", "ABNANL2A", "NL04ABNA0417164314"),
            ("12345679", "NWBKGB2L", "GB09NWBK00000012345679"),
        ],
    )
    def test_digitos_de_control_menores_que_10_llevan_cero(self, generator, account, bic, expected):
        iban = generator.generate(account, bic)
        assert iban == expected
        assert len(iban) == len(expected)

    def test_es_determinista(self, generator):
        primero = generator.generate("60161331926819", "NWBKGB2L")
        segundo = generator.generate("60161331926819", "NWBKGB2L")
        assert primero == segundo


class TestFallos:

    @pytest.mark.parametrize("bic", ["NWBKGB2", "NWBKGB2LX", "NWBKGB2LXX", "NWBKGB2LXXXX", ""])
    def test_bic_de_longitud_invalida(self, generator, bic):
        assert generator.generate("60161331926819", bic) == ""

    def test_cuenta_vacia(self, generator):
        assert generator.generate("", "NWBKGB2L") == ""

    def test_pais_desconocido(self, generator):
        assert generator.generate("60161331926819", "NWBKZZ2L") == ""

    def test_pais_del_bic_en_minusculas(self, generator):
        assert generator.generate("60161331926819", "NWBKgb2L") == ""

    @pytest.mark.parametrize("account", ["6016-1331926819", "6016 1331", "60161331926819."])
    def test_cuenta_con_caracteres_no_alfanumericos(self, generator, account):
        assert generator.generate(account, "NWBKGB2L") == ""

    @pytest.mark.parametrize("account", ["ß", "1234ı", "ﬁ99"])
    def test_cuenta_con_letras_no_ascii(self, generator, account):
        assert generator.generate(account, "NWBKGB2L") == ""

    def test_codigo_de_banco_no_ascii(self, generator):
        assert generator.generate("60161331926819", "NWBßGB2L") == ""


class TestCuentaMasLarga:
    """Una cuenta que no cabe en el BBAN se usa tal cual, sin recortar."""

    def test_no_se_recorta(self, generator):
        iban = generator.generate("12345678901", "ABNANL2A")
        assert iban == "NL85ABNA12345678901"
        assert len(iban) == 19

    def test_el_resultado_no_valida_por_longitud(self, generator, validator):
        iban = generator.generate("12345678901", "ABNANL2A")
        assert validator.validate(iban) == IbanCheckStatus.INVALID_LENGTH


class TestIdaYVuelta:

    @pytest.mark.parametrize(
        "account, bic",
        [
            ("60161331926819", "NWBKGB2L"),
            ("1", "NWBKGB2L"),
            ("93115212345678", "AIBKIE2D"),
            ("417164314", "ABNANL2A"),
            ("417164300", "ABNANL2AXXX"),
        ],
    )
    def test_generado_valida(self, generator, validator, account, bic):
        """Países cuyo BBAN empieza con el código de banco de 4 letras."""
        iban = generator.generate(account, bic)
        assert iban
        assert validator.validate(iban) == IbanCheckStatus.VALID_IBAN

    def test_pais_sin_codigo_de_banco_en_letras(self, generator, validator):
        """DE es F08F10: el código de banco del BIC no cabe en un campo numérico."""
        iban = generator.generate("532013000", "DEUTDEFF")
        assert iban == "DE05DEUT00000532013000"
        assert validator.validate(iban) == IbanCheckStatus.INVALID_INNER_STRUCTURE
