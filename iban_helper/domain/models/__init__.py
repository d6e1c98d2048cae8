"""
Modelos de dominio del proyecto iban-helper.

Todos los modelos son dataclasses inmutables (frozen=True) o enums, sin
dependencias externas.

Uso:
    from iban_helper.domain.models import CountryStructure, IbanCheckStatus
"""

from iban_helper.domain.models.country_structure import CountryStructure
from iban_helper.domain.models.field_token import FieldToken
from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.models.resultado_validacion import ResultadoValidacion

__all__ = [
    "CountryStructure",
    "FieldToken",
    "IbanCheckStatus",
    "PageText",
    "ResultadoValidacion",
]
