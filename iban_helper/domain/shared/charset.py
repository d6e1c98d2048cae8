"""
Clases de caracteres para validar IBANs y campos del BBAN.

Cada país define su BBAN como una secuencia de campos, y cada campo
admite solo una clase de caracteres: dígitos, mayúsculas, alfanuméricos,
etc. Este módulo define esas clases y el predicado que comprueba si un
texto completo pertenece a una de ellas.

No se usa `re`: cada clase es un frozenset de caracteres ASCII y la
comprobación es carácter por carácter. El resultado equivale a un regex
anclado `^[...]*$` (el texto vacío también coincide).
"""

import string
from enum import Enum

_DIGITS = frozenset(string.digits)
_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)


class CharsetClass(Enum):
    """Lenguajes de caracteres reconocidos.

    El valor de cada miembro es el conjunto de caracteres permitidos.
    """

    ALNUM_MIXED = _UPPER | _LOWER | _DIGITS
    """A-Z, a-z, 0-9."""

    ALNUM_UPPER = _UPPER | _DIGITS
    """A-Z, 0-9."""

    ALNUM_LOWER = _LOWER | _DIGITS
    """a-z, 0-9."""

    ALPHA_MIXED = _UPPER | _LOWER
    """A-Z, a-z."""

    DIGITS = _DIGITS
    """0-9."""

    LOWER = _LOWER
    """a-z."""

    UPPER = _UPPER
    """A-Z."""

    @property
    def allowed(self) -> frozenset[str]:
        return self.value


def matches(value: str, charset_class: CharsetClass) -> bool:
    """Indica si TODOS los caracteres de `value` pertenecen a la clase.

    Un texto vacío coincide con cualquier clase. Quien necesite rechazar
    el vacío (por ejemplo, un campo del BBAN) debe comprobarlo antes.

    Ejemplos:
        >>> matches("AB12", CharsetClass.ALNUM_UPPER)
        True
        >>> matches("ab12", CharsetClass.ALNUM_UPPER)
        False
        >>> matches("", CharsetClass.DIGITS)
        True
    """
    allowed = charset_class.allowed
    return all(char in allowed for char in value)
