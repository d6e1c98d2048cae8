"""
Dígitos de control del IBAN: ISO 7064 MOD97-10.

Pasos (ISO 13616):
1. Mover los 4 primeros caracteres al final, con los dígitos de control
   sustituidos por "00":  BBAN + país + "00".
2. Sustituir cada letra por dos dígitos: A=10, B=11, ..., Z=35
   (mayúsculas y minúsculas por igual).
3. Calcular el resto módulo 97 del número resultante.
4. Dígitos de control = 98 - resto.

El número del paso 2 puede tener más de 60 dígitos. En lugar de
construir un entero enorme se procesa dígito a dígito manteniendo solo
el resto: r = (r * 10 + d) % 97. El resultado es el mismo.
"""

from iban_helper.domain.shared.charset import CharsetClass, matches

# Valor numérico de 'A' en la transliteración (A=10 ... Z=35)
_LETTER_OFFSET = ord("A") - 10


def transliterate(value: str) -> str:
    """Convierte un texto alfanumérico en una cadena solo de dígitos.

    Los dígitos pasan igual; cada letra (tras pasar a mayúsculas) se
    sustituye por su valor de dos dígitos. Si hay cualquier otro carácter
    el texto no es transliterable y se devuelve cadena vacía.

    La comprobación ASCII va ANTES de str.upper(): Unicode convierte
    'ß' en 'SS' e 'ı' en 'I', y pasarían como letras válidas.

    Ejemplos:
        >>> transliterate("WEST12")
        '3214282912'
        >>> transliterate("gb")
        '1611'
        >>> transliterate("GB-82")
        ''
    """
    if not matches(value, CharsetClass.ALNUM_MIXED):
        return ""

    upper = value.upper()
    return "".join(char if char.isdigit() else str(ord(char) - _LETTER_OFFSET) for char in upper)


def mod97_10(digits: str) -> int:
    """Resto módulo 97 de un número decimal arbitrariamente largo.

    Args:
        digits: Cadena solo de dígitos ASCII. Cadena vacía → 0.

    Raises:
        ValueError: Si `digits` contiene algo que no sea un dígito.
    """
    if not matches(digits, CharsetClass.DIGITS):
        raise ValueError(f"mod97_10 espera solo dígitos, recibió: '{digits}'")

    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + int(digit)) % 97
    return remainder


def compute_check_digits(iban: str) -> int:
    """Calcula los dígitos de control esperados en las posiciones 2-3.

    Los dígitos de control que ya tenga `iban` se ignoran (se fuerzan a
    "00"), así que sirve tanto para validar como para generar.

    Ejemplos:
        >>> compute_check_digits("GB82WEST12345698765432")
        82
        >>> compute_check_digits("GB00WEST12345698765432")
        82
    """
    rearranged = iban[4:] + iban[:2] + "00"
    return 98 - mod97_10(transliterate(rearranged))
