"""
Modelo de dominio: Resultado de la validación de un IBAN.

Es un conjunto CERRADO de resultados. La validación nunca lanza
excepciones: cada defecto se reporta con uno de estos valores, y cuando
hay varios defectos gana el de la primera comprobación que falla
(ver IbanValidator).
"""

from enum import Enum


class IbanCheckStatus(Enum):
    """Resultado de IbanValidator.validate()."""

    VALID_IBAN = "ValidIban"
    INVALID_COUNTRY_CODE = "InvalidCountryCode"
    INVALID_BANK_ACCOUNT = "InvalidBankAccount"
    INVALID_CHECKSUM = "InvalidChecksum"
    INVALID_INNER_STRUCTURE = "InvalidInnerStructure"
    INVALID_START_BYTES = "InvalidStartBytes"
    INVALID_CHARACTERS = "InvalidCharacters"
    INVALID_LENGTH = "InvalidLength"

    @property
    def is_valid(self) -> bool:
        return self is IbanCheckStatus.VALID_IBAN
