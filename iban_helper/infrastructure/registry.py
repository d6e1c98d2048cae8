"""
Registro de componentes concretos disponibles.

Centraliza qué adaptador se usa para cada puerto:
- Catálogo de estructuras: tabla incluida o CSV externo.
- Extractores de texto: texto plano, pdfplumber y, opcionalmente, OCR.

El CLI y la fachada `iban_helper.api` piden aquí sus componentes; el
dominio no sabe cuáles existen.
"""

from pathlib import Path

from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.ports.text_extractor import TextExtractor


def create_structure_catalog(csv_path: Path | None = None) -> StructureCatalog:
    """Crea el catálogo de estructuras.

    Args:
        csv_path: Si se indica, se carga ese CSV (Country, Length,
                 InnerStructure). Si no, se usa la tabla incluida.

    Raises:
        CatalogoInvalidoError: Si el CSV no se puede cargar.
    """
    # Imports aquí para no cargar pandas si no se usa un CSV.
    if csv_path is not None:
        from iban_helper.adapters.input.structure_catalogs.csv_catalog import (
            CsvStructureCatalog,
        )

        return CsvStructureCatalog(csv_path)

    from iban_helper.adapters.input.structure_catalogs.builtin_catalog import (
        BuiltinStructureCatalog,
    )

    return BuiltinStructureCatalog()


def create_text_extractors(enable_ocr: bool = False) -> list[TextExtractor]:
    """Crea los extractores de texto en orden de prioridad.

    OCR va siempre después de pdfplumber: es lento y menos preciso, y
    solo se usa para las páginas que pdfplumber devuelve vacías.
    """
    from iban_helper.adapters.input.text_extractors.pdfplumber_extractor import (
        PdfplumberExtractor,
    )
    from iban_helper.adapters.input.text_extractors.plain_text_extractor import (
        PlainTextExtractor,
    )

    extractors: list[TextExtractor] = [PlainTextExtractor(), PdfplumberExtractor()]

    if enable_ocr:
        from iban_helper.adapters.input.text_extractors.ocr_extractor import OcrExtractor

        extractors.append(OcrExtractor())

    return extractors
