"""
Puerto de entrada: Catálogo de estructuras IBAN por país.

Define el contrato para obtener la estructura (longitud total y campos
del BBAN) de un país. El validador y el generador solo conocen esta
interfaz; de dónde salen los datos (tabla incluida, CSV, base de datos)
lo decide el adaptador.

Las implementaciones cargan sus datos UNA vez (al construirse) y después
son de solo lectura, así que una misma instancia se puede compartir
entre hilos sin coordinación.
"""

from abc import ABC, abstractmethod

from iban_helper.domain.models.country_structure import CountryStructure


class StructureCatalog(ABC):
    """Interfaz de consulta de estructuras IBAN."""

    @abstractmethod
    def lookup(self, country_code: str) -> CountryStructure | None:
        """Devuelve la estructura del país o None si no se conoce.

        La búsqueda es exacta: 'de' no encuentra 'DE'. El validador no
        corrige la entrada, y un código en minúsculas no es válido.

        Args:
            country_code: Código ISO de 2 letras. Ejemplo: 'DE'.
        """
        ...

    @property
    @abstractmethod
    def country_codes(self) -> list[str]:
        """Códigos de país disponibles, ordenados."""
        ...

    def __contains__(self, country_code: object) -> bool:
        return isinstance(country_code, str) and self.lookup(country_code) is not None
