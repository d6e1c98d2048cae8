"""
Validación de un campo del BBAN contra su token de formato.

Es la primitiva reutilizable sobre la que se construye la validación de
la estructura interna: dado un fragmento del BBAN y su token ("F04",
"U04", "B12"...), indica si el fragmento tiene exactamente la longitud
declarada y solo caracteres de la clase indicada por la letra.
"""

from iban_helper.domain.models.field_token import FieldToken
from iban_helper.domain.shared.charset import matches


def parse_field_token(token: str) -> FieldToken | None:
    """Parsea un token '<letra><2 dígitos>'. None si está mal formado."""
    return FieldToken.parse(token)


def conforms_to_format(value: str, token: str) -> bool:
    """Indica si `value` cumple el formato descrito por `token`.

    Reglas:
    - Falso si `value` o `token` están vacíos.
    - Falso si el token no parsea (tamaño, longitud o letra inválidos).
    - Falso si len(value) no es exactamente la longitud del token.
    - Si no, depende de la clase de caracteres de la letra.

    Ejemplos:
        >>> conforms_to_format("AB12", "A04")
        True
        >>> conforms_to_format("AB1", "A04")
        False
        >>> conforms_to_format("ab1", "U03")
        False
    """
    if not value or not token:
        return False

    field_token = parse_field_token(token)
    if field_token is None:
        return False

    if len(value) != field_token.length:
        return False

    return matches(value, field_token.charset_class)
