"""
Modelo de dominio: Estructura del IBAN de un país.

Cada registro del catálogo de estructuras describe:
- El código de país ISO 3166 (2 letras).
- La longitud total del IBAN en ese país.
- La estructura interna del BBAN como cadena de tokens ("F08F10" para DE).

El núcleo de validación solo LEE estas estructuras. Las construyen los
adaptadores de catálogo (tabla incluida, CSV, etc.).
"""

from dataclasses import dataclass

from iban_helper.domain.models.field_token import TOKEN_SIZE, FieldToken

# Código de país (2) + dígitos de control (2)
IBAN_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class CountryStructure:
    """Estructura del IBAN para un país."""

    country_code: str
    """Código ISO de 2 letras mayúsculas. Ejemplo: 'DE', 'GB'."""

    total_length: int
    """Longitud total del IBAN, incluyendo país y dígitos de control."""

    inner_structure: str
    """Tokens concatenados que describen el BBAN. Ejemplo: 'U04F06F08'."""

    @property
    def bban_length(self) -> int:
        """Longitud esperada del BBAN (todo lo que sigue a los 4 primeros caracteres)."""
        return self.total_length - IBAN_PREFIX_LENGTH

    @property
    def field_tokens(self) -> list[FieldToken | None]:
        """Tokens del BBAN en orden, parseados bajo demanda.

        Un token mal formado aparece como None en su posición, y un resto
        final de menos de 3 caracteres también. Así el validador puede
        rechazar la estructura sin lanzar excepciones.
        """
        raw = self.inner_structure
        return [FieldToken.parse(raw[i : i + TOKEN_SIZE]) for i in range(0, len(raw), TOKEN_SIZE)]

    @property
    def is_consistent(self) -> bool:
        """True si todos los tokens parsean y suman bban_length."""
        tokens = self.field_tokens
        if not tokens or any(token is None for token in tokens):
            return False
        return sum(token.length for token in tokens) == self.bban_length

    def __post_init__(self) -> None:
        if self.total_length <= 0:
            raise ValueError(
                f"Longitud de IBAN inválida para {self.country_code}: {self.total_length}"
            )
