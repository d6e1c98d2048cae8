"""
Servicio de dominio: Generador de IBANs a partir de cuenta + BIC.

El BIC (ISO 9362) aporta el código de banco (posiciones 0-3) y el país
(posiciones 4-5). Con la estructura del país se rellena la cuenta con
ceros a la izquierda, se calculan los dígitos de control y se arma:

    país + dígitos de control + código de banco + cuenta

Solo produce IBANs válidos para países cuyo BBAN empieza con el código
de banco de 4 letras (GB, NL, IE, ...). Para el resto el resultado
tiene la forma correcta pero no pasa la validación de estructura.

Los fallos se reportan devolviendo cadena vacía, no con excepciones.
"""

from iban_helper.domain.models.country_structure import IBAN_PREFIX_LENGTH
from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.shared.mod97 import compute_check_digits, transliterate

# ISO 9362:2009: el BIC tiene 8 u 11 caracteres.
BIC_LENGTHS = (8, 11)


class IbanGenerator:
    """Genera IBANs usando un catálogo de estructuras inyectado."""

    def __init__(self, catalog: StructureCatalog) -> None:
        self._catalog = catalog

    def generate(self, account_number: str, bic: str) -> str:
        """Construye el IBAN de una cuenta.

        Args:
            account_number: Número de cuenta. Se rellena con ceros a la
                izquierda hasta ocupar el BBAN. Si ya es más largo, se
                usa tal cual (no se recorta).
            bic: Código BIC/SWIFT de 8 u 11 caracteres.

        Returns:
            El IBAN en formato electrónico, o "" si la cuenta está vacía,
            el BIC no tiene 8 u 11 caracteres, el país del BIC no está en
            el catálogo, o la cuenta/código de banco tienen caracteres no
            alfanuméricos.

        Ejemplos:
            >>> generator.generate("60161331926819", "NWBKGB2L")
            'GB29NWBK60161331926819'
            >>> generator.generate("60161331926819", "NWBKGB2")
            ''
        """
        if not account_number:
            return ""

        if len(bic) not in BIC_LENGTHS:
            return ""

        country_code = bic[4:6]
        bank_code = bic[:4]

        structure = self._catalog.lookup(country_code)
        if structure is None:
            return ""

        required_length = structure.total_length - IBAN_PREFIX_LENGTH - len(bank_code)
        padded_account = account_number.rjust(required_length, "0")

        iban_without_checksum = f"{country_code}00{bank_code}{padded_account}"
        if not transliterate(iban_without_checksum):
            return ""

        checksum = compute_check_digits(iban_without_checksum)

        return f"{country_code}{checksum:02d}{bank_code}{padded_account}"
