"""
Modelo de dominio: Texto extraído de una página.

Es el "puente" entre los adaptadores de extracción de texto (pdfplumber,
OCR, archivos de texto) y el escáner de IBANs. El número de página se
conserva para que el reporte indique dónde se encontró cada IBAN.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageText:
    """Texto extraído de una página individual de un documento.

    Para archivos sin concepto de "páginas" (.txt, .csv) el extractor
    devuelve una sola PageText con page_num=1.
    """

    page_num: int
    """Número de página (1-indexed). La primera página es 1, no 0."""

    text: str
    """Texto completo de la página. Puede contener saltos de línea."""

    @property
    def is_empty(self) -> bool:
        """Indica si la página no tiene texto útil."""
        return not self.text.strip()
