"""
Servicio de dominio: Validador de IBANs.

Ejecuta las comprobaciones en orden estricto y devuelve el resultado de
la PRIMERA que falla:

    1. Caracteres       → solo A-Z, a-z, 0-9          (INVALID_CHARACTERS)
    2. País             → existe en el catálogo         (INVALID_COUNTRY_CODE)
    3. Inicio           → 2 mayúsculas + 2 dígitos      (INVALID_START_BYTES)
    4. BBAN             → no vacío                      (INVALID_BANK_ACCOUNT)
    5. Estructura       → cada campo cumple su token    (INVALID_INNER_STRUCTURE)
    6. Longitud         → la del país                   (INVALID_LENGTH)
    7. Dígitos control  → MOD97-10                      (INVALID_CHECKSUM)

Las comprobaciones baratas van primero y el cálculo MOD97-10 al final.
validate() no lanza excepciones con ningún string de entrada, ni con
datos de catálogo mal formados: eso se reporta como estructura inválida.
"""

from iban_helper.domain.models.country_structure import IBAN_PREFIX_LENGTH, CountryStructure
from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.shared.charset import CharsetClass, matches
from iban_helper.domain.shared.field_format import conforms_to_format
from iban_helper.domain.shared.mod97 import compute_check_digits


class IbanValidator:
    """Valida IBANs en formato electrónico contra un catálogo de estructuras.

    Recibe el catálogo por constructor. No sabe de dónde salen los datos
    (tabla incluida, CSV...), solo conoce el puerto StructureCatalog.
    """

    def __init__(self, catalog: StructureCatalog) -> None:
        self._catalog = catalog

    def validate(self, iban: str) -> IbanCheckStatus:
        """Valida un IBAN y devuelve el resultado de la primera comprobación fallida.

        El IBAN debe venir en formato electrónico: sin espacios. Esta
        función no corrige la entrada ("GB82 WEST..." es
        INVALID_CHARACTERS); para texto libre usar find_iban_candidates.

        Ejemplos:
            >>> validator.validate("GB82WEST12345698765432")
            <IbanCheckStatus.VALID_IBAN: 'ValidIban'>
            >>> validator.validate("GB82-WEST")
            <IbanCheckStatus.INVALID_CHARACTERS: 'InvalidCharacters'>
        """
        if not matches(iban, CharsetClass.ALNUM_MIXED):
            return IbanCheckStatus.INVALID_CHARACTERS

        structure = self._catalog.lookup(iban[:2])
        if structure is None:
            return IbanCheckStatus.INVALID_COUNTRY_CODE

        if not self._has_valid_start_bytes(iban[:IBAN_PREFIX_LENGTH]):
            return IbanCheckStatus.INVALID_START_BYTES

        bban = iban[IBAN_PREFIX_LENGTH:]
        if not bban:
            return IbanCheckStatus.INVALID_BANK_ACCOUNT

        if not self._conforms_to_structure(bban, structure):
            return IbanCheckStatus.INVALID_INNER_STRUCTURE

        if len(iban) != structure.total_length:
            return IbanCheckStatus.INVALID_LENGTH

        if int(iban[2:4]) != compute_check_digits(iban):
            return IbanCheckStatus.INVALID_CHECKSUM

        return IbanCheckStatus.VALID_IBAN

    def is_valid(self, iban: str) -> bool:
        return self.validate(iban).is_valid

    def expected_length(self, country_code: str) -> int | None:
        """Longitud total del IBAN del país según el catálogo, o None."""
        structure = self._catalog.lookup(country_code)
        return structure.total_length if structure is not None else None

    @staticmethod
    def _has_valid_start_bytes(start: str) -> bool:
        """'GB82' sí; 'gb82', 'GBXX' o 'GB8' no."""
        return (
            len(start) == IBAN_PREFIX_LENGTH
            and matches(start[:2], CharsetClass.UPPER)
            and matches(start[2:], CharsetClass.DIGITS)
        )

    @staticmethod
    def _conforms_to_structure(bban: str, structure: CountryStructure) -> bool:
        """Recorre los tokens del país consumiendo el BBAN campo por campo.

        Si el BBAN es más corto que la suma de los campos, el fragmento
        sale recortado y falla por longitud. Un BBAN más largo pasa esta
        comprobación y lo rechaza después la de longitud total.
        """
        tokens = structure.field_tokens
        if not tokens:
            return False

        offset = 0
        for token in tokens:
            if token is None:
                return False
            part = bban[offset : offset + token.length]
            if not conforms_to_format(part, token.token):
                return False
            offset += token.length

        return True
