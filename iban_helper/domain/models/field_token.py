"""
Modelo de dominio: Token de formato de un campo del BBAN.

La estructura interna de cada país se describe como una cadena de tokens
de 3 caracteres concatenados, por ejemplo "U04F06F08" (Reino Unido):

    U04 → 4 letras mayúsculas (código de banco)
    F06 → 6 dígitos (sort code)
    F08 → 8 dígitos (número de cuenta)

La primera letra indica la clase de caracteres y los dos dígitos
siguientes la longitud exacta del campo (con cero a la izquierda).
"""

from dataclasses import dataclass

from iban_helper.domain.shared.charset import CharsetClass, matches

# Letra de formato → clase de caracteres que admite el campo.
FORMAT_LETTERS: dict[str, CharsetClass] = {
    "A": CharsetClass.ALNUM_MIXED,
    "B": CharsetClass.ALNUM_UPPER,
    "C": CharsetClass.ALPHA_MIXED,
    "F": CharsetClass.DIGITS,
    "L": CharsetClass.LOWER,
    "U": CharsetClass.UPPER,
    "W": CharsetClass.ALNUM_LOWER,
}

TOKEN_SIZE = 3


@dataclass(frozen=True)
class FieldToken:
    """Un campo del BBAN: clase de caracteres + longitud exacta."""

    format_letter: str
    """Una de A, B, C, F, L, U, W."""

    length: int
    """Longitud exacta del campo (1-99)."""

    def __post_init__(self) -> None:
        if self.format_letter not in FORMAT_LETTERS:
            raise ValueError(
                f"Letra de formato no reconocida: '{self.format_letter}'. "
                f"Esperado una de: {''.join(FORMAT_LETTERS)}"
            )
        if not 1 <= self.length <= 99:
            raise ValueError(f"Longitud de campo fuera de rango: {self.length}. Debe ser 1-99.")

    @property
    def charset_class(self) -> CharsetClass:
        return FORMAT_LETTERS[self.format_letter]

    @property
    def token(self) -> str:
        """Forma textual del token. Ejemplo: FieldToken("F", 4).token == "F04"."""
        return f"{self.format_letter}{self.length:02d}"

    @classmethod
    def parse(cls, token: str) -> "FieldToken | None":
        """Parsea un token textual de 3 caracteres.

        Devuelve None (no lanza excepción) si el token está mal formado:
        tamaño distinto de 3, longitud no numérica o cero, o letra
        desconocida. El validador traduce ese None en INVALID_INNER_STRUCTURE.

        Ejemplos:
            >>> FieldToken.parse("F04")
            FieldToken(format_letter='F', length=4)
            >>> FieldToken.parse("X04") is None
            True
        """
        if len(token) != TOKEN_SIZE:
            return None

        letter, digits = token[0], token[1:]
        if letter not in FORMAT_LETTERS:
            return None
        if not matches(digits, CharsetClass.DIGITS):
            return None

        length = int(digits)
        if length == 0:
            return None

        return cls(format_letter=letter, length=length)
