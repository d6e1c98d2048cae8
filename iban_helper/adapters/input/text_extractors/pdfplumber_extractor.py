"""
Adaptador de entrada: Texto de PDFs nativos con pdfplumber.

Facturas, estados de cuenta y mandatos SEPA generados por software
llevan el texto embebido: pdfplumber lo lee tal cual, sin errores de
reconocimiento. Una página que sea solo imagen sale con texto vacío y
el IbanBatchProcessor la completa con el extractor siguiente (OCR).
"""

from pathlib import Path

from iban_helper.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.ports.text_extractor import TextExtractor
from iban_helper.domain.shared.text_cleaner import clean_pdf_text

# Validar IBANs no necesita pdfplumber: si falta, solo falla la lectura de PDFs.
try:
    import pdfplumber
except ImportError:
    pdfplumber = None  # type: ignore[assignment]

# Distancia horizontal (puntos) bajo la cual dos caracteres van en la
# misma palabra. Con el valor por defecto (3) se pegan los bloques del
# IBAN en formato impresión de algunas facturas.
_X_TOLERANCE = 1.5


class PdfplumberExtractor(TextExtractor):
    """Lee el texto embebido de PDFs, página por página."""

    def __init__(self, password: str | None = None) -> None:
        """
        Args:
            password: Contraseña para PDFs cifrados (algunos bancos
                     protegen los estados de cuenta). None si no hay.
        """
        self._password = password

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Devuelve una PageText por página, vacía si la página es imagen.

        Raises:
            ExtractionError: pdfplumber no está instalado, el PDF está
                            cifrado sin contraseña válida o está dañado.
            FormatoInvalidoError: El archivo no existe o no es .pdf.
        """
        archivo = str(file_path)

        if pdfplumber is None:
            raise ExtractionError(
                archivo, "pdfplumber no está instalado. Instalar con: pip install iban-helper[scan]"
            )
        if not file_path.is_file():
            raise FormatoInvalidoError(archivo, "PDF", "El archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(archivo, "PDF", f"Extensión inesperada: {file_path.suffix}")

        try:
            with pdfplumber.open(file_path, password=self._password) as pdf:
                textos = [page.extract_text(x_tolerance=_X_TOLERANCE) or "" for page in pdf.pages]
        except Exception as e:
            # pdfminer lanza PDFSyntaxError, PDFPasswordIncorrect, etc.
            detalle = str(e).lower()
            if "password" in detalle or "encrypt" in detalle or type(e).__name__.startswith(
                "PDFPassword"
            ):
                raise ExtractionError(archivo, "El PDF está protegido con contraseña")
            raise ExtractionError(archivo, f"PDF dañado o ilegible: {e}")

        if not textos:
            raise ExtractionError(archivo, "El PDF no tiene páginas")

        return [
            PageText(page_num=page_num, text=clean_pdf_text(texto))
            for page_num, texto in enumerate(textos, start=1)
        ]
