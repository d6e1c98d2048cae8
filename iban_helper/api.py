"""
API pública de iban-helper.

Funciones de módulo que usan el catálogo incluido en el paquete. El
catálogo se construye una sola vez por proceso y después solo se lee,
así que estas funciones se pueden llamar desde varios hilos.

Uso:
    from iban_helper import validate, generate, IbanCheckStatus

    validate("GB82WEST12345698765432")   # IbanCheckStatus.VALID_IBAN
    generate("60161331926819", "NWBKGB2L")  # 'GB29NWBK60161331926819'

Para usar otro catálogo, construir IbanValidator / IbanGenerator con él.
"""

from functools import lru_cache

from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.services.iban_generator import IbanGenerator
from iban_helper.domain.services.iban_validator import IbanValidator
from iban_helper.domain.shared.field_format import conforms_to_format
from iban_helper.infrastructure.registry import create_structure_catalog

__all__ = ["conforms_to_format", "default_catalog", "generate", "validate"]


@lru_cache(maxsize=1)
def default_catalog() -> StructureCatalog:
    """Catálogo incluido en el paquete (se construye en la primera llamada)."""
    return create_structure_catalog()


def validate(iban: str) -> IbanCheckStatus:
    """Valida un IBAN en formato electrónico. Ver IbanValidator.validate()."""
    return IbanValidator(default_catalog()).validate(iban)


def generate(account_number: str, bic: str) -> str:
    """Genera el IBAN de una cuenta a partir del BIC. "" si no se puede."""
    return IbanGenerator(default_catalog()).generate(account_number, bic)
