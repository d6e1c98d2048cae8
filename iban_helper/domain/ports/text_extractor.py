"""
Puerto de entrada: Extractor de texto.

Define el contrato para extraer texto de un archivo donde se buscarán
IBANs. Cada tipo de archivo tiene su propio adaptador:

    TextExtractor (interfaz)
    ├── PlainTextExtractor      → .txt / .csv
    ├── PdfplumberExtractor     → PDFs nativos (texto embebido)
    └── OcrExtractor            → PDFs escaneados (pytesseract)
"""

from abc import ABC, abstractmethod
from pathlib import Path

from iban_helper.domain.models.page_text import PageText


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        IbanBatchProcessor prueba los extractores en orden de prioridad
        y usa los que devuelvan True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto del archivo, separado por páginas.

        Returns:
            Lista de PageText, una por cada página del documento.
            Para archivos sin páginas (.txt) se devuelve una sola PageText.

        Raises:
            ExtractionError: Si falla la extracción (archivo corrupto,
                            librería no disponible, etc.)
            FormatoInvalidoError: Si el archivo no existe o no tiene la
                            extensión esperada.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Ejemplo: 'pdfplumber', 'ocr-tesseract'."""
        ...
