"""
Adaptador de entrada: OCR de PDFs escaneados (pdf2image + pytesseract).

Solo entra en juego cuando PdfplumberExtractor no encuentra texto en una
o más páginas: formularios de domiciliación firmados y escaneados,
fotos de un recibo, etc. Cada página se rasteriza con pdf2image
(poppler) y se pasa a Tesseract.

Tesseract se limita a letras latinas y dígitos (los espacios entre
palabras se conservan). Así no "inventa" guiones o puntos dentro de un
IBAN y el buscador de candidatos lo reconoce en formato impresión. El
resto del texto de la página pierde la puntuación.

Requiere los binarios tesseract y poppler-utils en el sistema.
"""

import platform
import string
from pathlib import Path

from iban_helper.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.ports.text_extractor import TextExtractor
from iban_helper.domain.shared.text_cleaner import clean_pdf_text

try:
    import pytesseract

    # El instalador de Windows no agrega tesseract.exe al PATH.
    if platform.system() == "Windows":
        for _candidate in (
            Path.home() / "AppData/Local/Programs/Tesseract-OCR/tesseract.exe",
            Path(r"C:\Program Files\Tesseract-OCR\tesseract.exe"),
        ):
            if _candidate.exists():
                pytesseract.pytesseract.tesseract_cmd = str(_candidate)
                break

except ImportError:
    pytesseract = None  # type: ignore[assignment]

try:
    from pdf2image import convert_from_path
except ImportError:
    convert_from_path = None  # type: ignore[assignment]

IBAN_CHAR_WHITELIST = string.ascii_letters + string.digits

# --psm 6: la página como un bloque de texto uniforme.
# preserve_interword_spaces: conserva los espacios entre bloques del IBAN.
_TESSERACT_CONFIG = (
    f"--psm 6 -c preserve_interword_spaces=1 -c tessedit_char_whitelist={IBAN_CHAR_WHITELIST}"
)


class OcrExtractor(TextExtractor):
    """Lee el texto de PDFs escaneados con Tesseract."""

    def __init__(self, dpi: int = 300, lang: str = "eng") -> None:
        """
        Args:
            dpi: Resolución de rasterizado. Por debajo de 300 Tesseract
                 confunde 0/O y 1/I, y eso rompe los dígitos de control.
            lang: Modelo de idioma de Tesseract. Para IBANs basta "eng".
        """
        self._dpi = dpi
        self._lang = lang

    @property
    def name(self) -> str:
        return "ocr-tesseract"

    def can_handle(self, file_path: Path) -> bool:
        """Solo PDFs. Va registrado después de PdfplumberExtractor."""
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Rasteriza cada página y le aplica OCR.

        Raises:
            ExtractionError: Falta pytesseract o pdf2image, poppler no
                            puede rasterizar el PDF, o Tesseract falla.
            FormatoInvalidoError: El archivo no existe o no es .pdf.
        """
        archivo = str(file_path)

        for libreria, modulo in (("pytesseract", pytesseract), ("pdf2image", convert_from_path)):
            if modulo is None:
                raise ExtractionError(
                    archivo,
                    f"{libreria} no está instalado. Instalar con: pip install iban-helper[scan]",
                )

        if not file_path.is_file():
            raise FormatoInvalidoError(archivo, "PDF", "El archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(archivo, "PDF", f"Extensión inesperada: {file_path.suffix}")

        try:
            images = convert_from_path(str(file_path), dpi=self._dpi)
        except Exception as e:
            raise ExtractionError(archivo, f"No se pudo rasterizar el PDF: {e}")

        if not images:
            raise ExtractionError(archivo, "El PDF no tiene páginas")

        return [
            PageText(page_num=page_num, text=clean_pdf_text(self._ocr_page(archivo, page_num, image)))
            for page_num, image in enumerate(images, start=1)
        ]

    def _ocr_page(self, archivo: str, page_num: int, image) -> str:
        try:
            return pytesseract.image_to_string(image, lang=self._lang, config=_TESSERACT_CONFIG)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise ExtractionError(archivo, f"OCR falló en la página {page_num}: {e}")
