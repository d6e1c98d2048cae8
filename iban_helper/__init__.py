"""
iban-helper: validación y generación de IBANs (ISO 13616 / ISO 7064 MOD97-10).

Uso:
    from iban_helper import validate, generate, conforms_to_format, IbanCheckStatus
"""

from iban_helper.api import conforms_to_format, generate, validate
from iban_helper.domain.models.iban_check_status import IbanCheckStatus

__all__ = [
    "IbanCheckStatus",
    "conforms_to_format",
    "generate",
    "validate",
]
