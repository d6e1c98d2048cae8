"""
Adaptador de entrada: Extractor de texto para archivos .txt y .csv.

Lee el archivo completo como una sola página. Sirve para listas de IBANs
exportadas de otros sistemas (uno por línea, o columnas de un CSV).
"""

from pathlib import Path

from iban_helper.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.ports.text_extractor import TextExtractor
from iban_helper.domain.shared.text_cleaner import clean_pdf_text

_SUFFIXES = (".txt", ".csv")


class PlainTextExtractor(TextExtractor):
    """Lee archivos de texto plano, probando varias codificaciones."""

    def __init__(self, encodings: tuple[str, ...] = ("utf-8-sig", "latin-1")) -> None:
        """
        Args:
            encodings: Codificaciones a probar en orden. latin-1 nunca
                      falla, así que como última opción garantiza lectura.
        """
        self._encodings = encodings

    @property
    def name(self) -> str:
        return "texto-plano"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in _SUFFIXES

    def extract(self, file_path: Path) -> list[PageText]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "TXT/CSV", "El archivo no existe")

        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "TXT/CSV",
                f"Extensión inesperada: {file_path.suffix}",
            )

        raw = file_path.read_bytes()
        for encoding in self._encodings:
            try:
                text = raw.decode(encoding)
            except UnicodeDecodeError:
                continue
            return [PageText(page_num=1, text=clean_pdf_text(text))]

        raise ExtractionError(
            str(file_path),
            f"No se pudo decodificar con ninguna de: {', '.join(self._encodings)}",
        )
