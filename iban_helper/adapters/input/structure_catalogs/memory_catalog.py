"""
Adaptador de entrada: Catálogo de estructuras en memoria.

Base de los catálogos concretos: guarda las estructuras en un dict
indexado por código de país. Se llena una sola vez en el constructor y
después es de solo lectura, así que se puede compartir entre hilos.
"""

from collections.abc import Iterable
from types import MappingProxyType

from iban_helper.domain.models.country_structure import CountryStructure
from iban_helper.domain.ports.structure_catalog import StructureCatalog


class InMemoryStructureCatalog(StructureCatalog):
    """Catálogo respaldado por un diccionario inmutable."""

    def __init__(self, structures: Iterable[CountryStructure]) -> None:
        """
        Args:
            structures: Estructuras a registrar. Si un país aparece dos
                       veces, se lanza ValueError.
        """
        por_pais: dict[str, CountryStructure] = {}
        for structure in structures:
            if structure.country_code in por_pais:
                raise ValueError(
                    f"Ya existe una estructura registrada para '{structure.country_code}'"
                )
            por_pais[structure.country_code] = structure
        self._structures = MappingProxyType(por_pais)

    def lookup(self, country_code: str) -> CountryStructure | None:
        return self._structures.get(country_code)

    @property
    def country_codes(self) -> list[str]:
        return sorted(self._structures.keys())

    def __len__(self) -> int:
        return len(self._structures)
