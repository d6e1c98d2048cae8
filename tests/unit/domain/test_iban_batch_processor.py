"""
Tests para IbanBatchProcessor.

Se usan extractores y bitácora falsos en memoria para no depender de
pdfplumber ni de Tesseract. Cubren:
- Búsqueda y validación de candidatos página por página.
- Fallback entre extractores y merge de PDFs híbridos.
- Errores de extracción: se registran y el lote continúa.
"""

from pathlib import Path

import pytest

from iban_helper.adapters.input.structure_catalogs.builtin_catalog import BuiltinStructureCatalog
from iban_helper.domain.exceptions import ExtractionError
from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.ports.process_logger import ProcessLogger
from iban_helper.domain.ports.text_extractor import TextExtractor
from iban_helper.domain.services.iban_batch_processor import IbanBatchProcessor
from iban_helper.domain.services.iban_validator import IbanValidator


class FakeExtractor(TextExtractor):
    """Devuelve páginas fijas, o lanza ExtractionError si falla=True."""

    def __init__(self, name: str, pages: list[PageText], suffixes=(".pdf",), falla=False):
        self._name = name
        self._pages = pages
        self._suffixes = suffixes
        self._falla = falla
        self.llamadas = 0

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self._suffixes

    def extract(self, file_path: Path) -> list[PageText]:
        self.llamadas += 1
        if self._falla:
            raise ExtractionError(str(file_path), "fallo simulado")
        return self._pages

    @property
    def name(self) -> str:
        return self._name


class MemoryLogger(ProcessLogger):
    """Acumula los eventos en listas para inspeccionarlos."""

    def __init__(self):
        self.eventos: list[tuple] = []
        self.errores: list[dict] = []

    def log_file_received(self, file_path, file_type):
        self.eventos.append(("recibido", file_path.name, file_type))

    def log_file_skipped(self, file_path, reason):
        self.eventos.append(("descartado", file_path.name, reason))

    def log_extraction_start(self, file_path, extractor_name):
        self.eventos.append(("extraccion", file_path.name, extractor_name))

    def log_candidates_found(self, file_path, num_pages, num_candidates):
        self.eventos.append(("candidatos", file_path.name, num_pages, num_candidates))

    def log_iban_checked(self, file_path, iban, status):
        self.eventos.append(("validado", iban, status))

    def log_error(self, file_path, error):
        self.errores.append({"archivo": file_path.name, "error": str(error)})

    def log_report_written(self, output_path, num_rows):
        self.eventos.append(("reporte", output_path.name, num_rows))

    def get_summary(self):
        return {"errores": self.errores}

    def tipos(self) -> list[str]:
        return [evento[0] for evento in self.eventos]


@pytest.fixture(scope="module")
def validator():
    return IbanValidator(BuiltinStructureCatalog())


@pytest.fixture
def logger():
    return MemoryLogger()


def _processor(extractors, validator, logger):
    return IbanBatchProcessor(text_extractors=extractors, validator=validator, logger=logger)


class TestValidatePages:

    def test_un_resultado_por_candidato(self, validator, logger):
        processor = _processor([], validator, logger)
        pages = [
            PageText(page_num=1, text="Beneficiario: GB82 WEST 1234 5698 7654 32"),
            PageText(page_num=2, text="Otra cuenta: GB83 WEST 1234 5698 7654 32"),
        ]

        resultados = processor.validate_pages(pages, file_name="factura.pdf")

        assert [(r.iban, r.estado, r.pagina) for r in resultados] == [
            ("GB82WEST12345698765432", IbanCheckStatus.VALID_IBAN, 1),
            ("GB83WEST12345698765432", IbanCheckStatus.INVALID_CHECKSUM, 2),
        ]
        assert all(r.archivo_origen == "factura.pdf" for r in resultados)

    def test_repetido_en_otra_pagina_se_reporta_una_vez(self, validator, logger):
        processor = _processor([], validator, logger)
        pages = [
            PageText(page_num=1, text="NL91ABNA0417164300"),
            PageText(page_num=2, text="Repetido: NL91 ABNA 0417 1643 00"),
        ]

        resultados = processor.validate_pages(pages)

        assert len(resultados) == 1
        assert resultados[0].pagina == 1

    def test_paginas_sin_candidatos(self, validator, logger):
        processor = _processor([], validator, logger)
        assert processor.validate_pages([PageText(page_num=1, text="Nada aquí")]) == []

    def test_iban_seguido_de_palabras_sigue_siendo_valido(self, validator, logger):
        processor = _processor([], validator, logger)
        pages = [
            PageText(page_num=1, text="Transferir a ES91 2100 0418 4502 0005 1332 para el pago"),
            PageText(page_num=2, text="IBAN BE68 5390 0754 7034 Pago mensual"),
        ]

        resultados = processor.validate_pages(pages)

        assert [(r.iban, r.estado) for r in resultados] == [
            ("ES9121000418450200051332", IbanCheckStatus.VALID_IBAN),
            ("BE68539007547034", IbanCheckStatus.VALID_IBAN),
        ]


class TestProcessFile:

    def test_archivo_con_texto_nativo(self, validator, logger):
        pdf = FakeExtractor("pdfplumber", [PageText(1, "IBAN DE89 3704 0044 0532 0130 00")])
        ocr = FakeExtractor("ocr-tesseract", [PageText(1, "no debería usarse")])
        processor = _processor([pdf, ocr], validator, logger)

        resultados = processor.process_file(Path("extracto.pdf"))

        assert [r.iban for r in resultados] == ["DE89370400440532013000"]
        assert resultados[0].es_valida
        assert ocr.llamadas == 0
        assert logger.tipos() == ["recibido", "extraccion", "candidatos", "validado"]

    def test_sin_extractor_compatible(self, validator, logger):
        pdf = FakeExtractor("pdfplumber", [PageText(1, "x")])
        processor = _processor([pdf], validator, logger)

        assert processor.process_file(Path("foto.png")) is None
        assert logger.eventos[-1][0] == "descartado"

    def test_pdf_escaneado_usa_ocr(self, validator, logger):
        pdf = FakeExtractor("pdfplumber", [PageText(1, ""), PageText(2, "  ")])
        ocr = FakeExtractor(
            "ocr-tesseract",
            [PageText(1, "BE68 5390 0754 7034"), PageText(2, "")],
        )
        processor = _processor([pdf, ocr], validator, logger)

        resultados = processor.process_file(Path("escaneado.pdf"))

        assert [r.iban for r in resultados] == ["BE68539007547034"]
        assert ocr.llamadas == 1

    def test_pdf_hibrido_mezcla_paginas(self, validator, logger):
        """Página 1 con texto nativo, página 2 solo imagen."""
        pdf = FakeExtractor(
            "pdfplumber",
            [PageText(1, "GB82 WEST 1234 5698 7654 32"), PageText(2, "")],
        )
        ocr = FakeExtractor(
            "ocr-tesseract",
            [PageText(1, "GB82 WEST 1234 5698 7654 3Z"), PageText(2, "NL91 ABNA 0417 1643 00")],
        )
        processor = _processor([pdf, ocr], validator, logger)

        resultados = processor.process_file(Path("hibrido.pdf"))

        assert [(r.iban, r.pagina) for r in resultados] == [
            ("GB82WEST12345698765432", 1),
            ("NL91ABNA0417164300", 2),
        ]
        assert any("PDF híbrido" in str(e[-1]) for e in logger.eventos if e[0] == "descartado")

    def test_hibrido_sin_ocr_devuelve_resultado_parcial(self, validator, logger):
        pdf = FakeExtractor(
            "pdfplumber",
            [PageText(1, "GB82 WEST 1234 5698 7654 32"), PageText(2, "")],
        )
        processor = _processor([pdf], validator, logger)

        resultados = processor.process_file(Path("hibrido.pdf"))

        assert [r.iban for r in resultados] == ["GB82WEST12345698765432"]

    def test_error_de_extraccion_prueba_el_siguiente(self, validator, logger):
        pdf = FakeExtractor("pdfplumber", [], falla=True)
        ocr = FakeExtractor("ocr-tesseract", [PageText(1, "NO93 8601 1117 947")])
        processor = _processor([pdf, ocr], validator, logger)

        resultados = processor.process_file(Path("roto.pdf"))

        assert [r.iban for r in resultados] == ["NO9386011117947"]
        assert len(logger.errores) == 1
        assert "fallo simulado" in logger.errores[0]["error"]

    def test_todos_fallan(self, validator, logger):
        pdf = FakeExtractor("pdfplumber", [], falla=True)
        processor = _processor([pdf], validator, logger)

        assert processor.process_file(Path("roto.pdf")) is None
        assert logger.eventos[-1] == ("descartado", "roto.pdf", "Archivo sin texto extraíble")


class TestProcessDirectory:

    def test_recorre_subdirectorios_y_filtra_extensiones(self, tmp_path, validator, logger):
        (tmp_path / "sub").mkdir()
        (tmp_path / "a.txt").write_text("x")
        (tmp_path / "sub" / "b.csv").write_text("x")
        (tmp_path / "c.docx").write_text("x")

        texto = FakeExtractor(
            "texto-plano",
            [PageText(1, "GB29 NWBK 6016 1331 9268 19")],
            suffixes=(".txt", ".csv"),
        )
        processor = _processor([texto], validator, logger)

        resultados = processor.process_directory(tmp_path)

        assert [r.archivo_origen for r in resultados] == ["a.txt", "b.csv"]
        assert texto.llamadas == 2
        assert "c.docx" not in [e[1] for e in logger.eventos]

    def test_no_es_directorio(self, tmp_path, validator, logger):
        archivo = tmp_path / "a.txt"
        archivo.write_text("x")
        processor = _processor([], validator, logger)

        with pytest.raises(ValueError, match="No es un directorio"):
            processor.process_directory(archivo)


class TestMergeHybridPages:
    """Tests unitarios para IbanBatchProcessor._merge_hybrid_pages()."""

    def test_paginas_vacias_se_rellenan_con_ocr(self):
        primary = [PageText(1, "Texto nativo"), PageText(2, ""), PageText(3, "")]
        secondary = [PageText(1, "OCR 1"), PageText(2, "OCR 2"), PageText(3, "OCR 3")]

        merged = IbanBatchProcessor._merge_hybrid_pages(primary, secondary)

        assert [p.text for p in merged] == ["Texto nativo", "OCR 2", "OCR 3"]

    def test_texto_nativo_tiene_prioridad(self):
        """El OCR confunde 0/O y 1/I, y eso rompe los dígitos de control."""
        primary = [PageText(1, "NL91 ABNA 0417 1643 00")]
        secondary = [PageText(1, "NL91 ABNA O417 I643 OO")]

        merged = IbanBatchProcessor._merge_hybrid_pages(primary, secondary)

        assert merged[0].text == "NL91 ABNA 0417 1643 00"

    def test_secondary_mas_corto_que_primary(self):
        primary = [PageText(1, "Pág 1"), PageText(2, ""), PageText(3, "")]
        secondary = [PageText(1, "OCR Pág 1")]

        merged = IbanBatchProcessor._merge_hybrid_pages(primary, secondary)

        assert len(merged) == 3
        assert merged[1].is_empty
        assert merged[2].is_empty
