"""
Adaptador de entrada: Catálogo de estructuras IBAN desde un archivo CSV.

Permite actualizar el catálogo (nuevos países, cambios del registro
SWIFT) sin tocar el código. El CSV necesita estas columnas (puede tener
otras, que se ignoran):

    Country,Length,InnerStructure
    DE,22,F08F10
    GB,22,U04F06F08

Se lee con pandas. Todas las columnas se leen como texto y sin
conversión de "NA" a NaN, porque "NA" es el código de Namibia.

El archivo se carga una sola vez, en el constructor. Cualquier defecto
del archivo se reporta con CatalogoInvalidoError indicando la fila.
"""

from pathlib import Path

import pandas as pd

from iban_helper.adapters.input.structure_catalogs.memory_catalog import (
    InMemoryStructureCatalog,
)
from iban_helper.domain.exceptions import CatalogoInvalidoError
from iban_helper.domain.models.country_structure import CountryStructure
from iban_helper.domain.shared.charset import CharsetClass, matches

REQUIRED_COLUMNS = ("Country", "Length", "InnerStructure")


class CsvStructureCatalog(InMemoryStructureCatalog):
    """Catálogo cargado desde un CSV con columnas Country, Length, InnerStructure."""

    def __init__(self, csv_path: Path) -> None:
        """
        Args:
            csv_path: Ruta al archivo CSV.

        Raises:
            CatalogoInvalidoError: Si el archivo no existe, no se puede
                leer o tiene filas inválidas.
        """
        self._csv_path = csv_path
        super().__init__(self._leer_estructuras(csv_path))

    @property
    def source(self) -> Path:
        return self._csv_path

    @staticmethod
    def _leer_estructuras(csv_path: Path) -> list[CountryStructure]:
        origen = str(csv_path)

        if not csv_path.is_file():
            raise CatalogoInvalidoError(origen, "El archivo no existe")

        try:
            df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            raise CatalogoInvalidoError(origen, "El archivo está vacío")
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise CatalogoInvalidoError(origen, f"No se pudo leer el CSV: {e}")

        faltantes = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if faltantes:
            raise CatalogoInvalidoError(origen, f"Faltan columnas: {', '.join(faltantes)}")

        structures: list[CountryStructure] = []
        vistos: set[str] = set()

        # +2: la fila 1 del archivo es el encabezado
        for num_fila, fila in enumerate(df[list(REQUIRED_COLUMNS)].to_dict("records"), start=2):
            country_code = fila["Country"].strip()
            length_text = fila["Length"].strip()
            inner_structure = fila["InnerStructure"].strip()

            if len(country_code) != 2 or not matches(country_code, CharsetClass.UPPER):
                raise CatalogoInvalidoError(
                    origen, f"Fila {num_fila}: código de país inválido '{country_code}'"
                )

            if not length_text or not matches(length_text, CharsetClass.DIGITS):
                raise CatalogoInvalidoError(
                    origen, f"Fila {num_fila}: longitud no numérica '{length_text}'"
                )

            total_length = int(length_text)
            if total_length <= 0:
                raise CatalogoInvalidoError(
                    origen, f"Fila {num_fila}: la longitud debe ser positiva"
                )

            if country_code in vistos:
                raise CatalogoInvalidoError(
                    origen, f"Fila {num_fila}: país repetido '{country_code}'"
                )
            vistos.add(country_code)

            structures.append(
                CountryStructure(
                    country_code=country_code,
                    total_length=total_length,
                    inner_structure=inner_structure,
                )
            )

        return structures
