"""
Servicio de dominio: Escáner de IBANs por lotes.

Orquesta la validación de todos los IBANs que aparecen en documentos:
1. Recibe una ruta a un archivo (.pdf, .txt, .csv).
2. Selecciona los TextExtractor que pueden manejarlo (can_handle).
3. Extrae el texto de las páginas, con fallback a OCR si hace falta.
4. Busca candidatos a IBAN en cada página.
5. Valida cada candidato con IbanValidator.
6. Devuelve un ResultadoValidacion por candidato.

Los errores de un archivo (PDF corrupto, OCR no instalado) se registran
en la bitácora y el lote sigue con el siguiente archivo.
"""

from collections.abc import Sequence
from pathlib import Path

from iban_helper.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_helper.domain.models.page_text import PageText
from iban_helper.domain.models.resultado_validacion import ResultadoValidacion
from iban_helper.domain.ports.process_logger import ProcessLogger
from iban_helper.domain.ports.text_extractor import TextExtractor
from iban_helper.domain.services.iban_validator import IbanValidator
from iban_helper.domain.shared.iban_text import find_iban_candidates

SUPPORTED_SUFFIXES = (".pdf", ".txt", ".csv")


class IbanBatchProcessor:
    """Escanea archivos y valida los IBANs que contienen.

    Recibe sus dependencias por constructor. No sabe qué extractores
    concretos se usan ni de dónde sale el catálogo del validador.
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        validator: IbanValidator,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            text_extractors: Extractores disponibles, en orden de prioridad.
                            Para un mismo tipo de archivo se prueban en
                            este orden (pdfplumber antes que OCR).
            validator: Validador ya configurado con su catálogo.
            logger: Bitácora de procesamiento.
        """
        self._extractors = text_extractors
        self._validator = validator
        self._logger = logger

    def process_file(self, file_path: Path) -> list[ResultadoValidacion] | None:
        """Escanea un archivo y valida los IBANs encontrados.

        Returns:
            Lista de ResultadoValidacion (vacía si no hay candidatos).
            None si el archivo fue descartado o no se pudo extraer texto.
        """
        self._logger.log_file_received(file_path, file_path.suffix)
        pages = self._extract_with_fallback(file_path)
        if pages is None:
            return None

        resultados = self.validate_pages(pages, file_name=file_path.name)
        self._logger.log_candidates_found(file_path, len(pages), len(resultados))
        for resultado in resultados:
            self._logger.log_iban_checked(file_path, resultado.iban, resultado.estado)

        return resultados

    def process_directory(self, dir_path: Path) -> list[ResultadoValidacion]:
        """Escanea todos los archivos soportados de un directorio (recursivo).

        Raises:
            ValueError: Si dir_path no es un directorio.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            path
            for path in dir_path.glob("**/*")
            if path.is_file() and path.suffix.lower() in SUPPORTED_SUFFIXES
        )

        resultados: list[ResultadoValidacion] = []
        for archivo in archivos:
            resultado = self.process_file(archivo)
            if resultado is not None:
                resultados.extend(resultado)

        return resultados

    def validate_pages(
        self, pages: Sequence[PageText], file_name: str = ""
    ) -> list[ResultadoValidacion]:
        """Busca y valida candidatos en páginas ya extraídas.

        Un mismo IBAN repetido en varias páginas se reporta solo la
        primera vez que aparece.
        """
        resultados: list[ResultadoValidacion] = []
        vistos: set[str] = set()

        for page in pages:
            for candidato in find_iban_candidates(page.text, self._validator.expected_length):
                if candidato in vistos:
                    continue
                vistos.add(candidato)
                resultados.append(
                    ResultadoValidacion(
                        iban=candidato,
                        estado=self._validator.validate(candidato),
                        archivo_origen=file_name,
                        pagina=page.page_num,
                    )
                )

        return resultados

    def _extract_with_fallback(self, file_path: Path) -> list[PageText] | None:
        """Intenta extraer texto probando los extractores compatibles en orden.

        Si el primero (pdfplumber) devuelve algunas páginas vacías, se
        usa el siguiente (OCR) solo para esas páginas y se mezclan los
        resultados. Las páginas con texto nativo se conservan siempre.

        Returns:
            Lista de PageText si algún extractor tuvo éxito.
            None si ningún extractor pudo extraer texto.
        """
        extractores_compatibles = [e for e in self._extractors if e.can_handle(file_path)]

        if not extractores_compatibles:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        first_result: list[PageText] | None = None

        for extractor in extractores_compatibles:
            self._logger.log_extraction_start(file_path, extractor.name)

            try:
                pages = extractor.extract(file_path)
            except (ExtractionError, FormatoInvalidoError) as e:
                self._logger.log_error(file_path, e)
                continue

            # Resultado parcial previo (PDF híbrido): rellenar las vacías
            if first_result is not None and pages:
                merged = self._merge_hybrid_pages(first_result, pages)
                if not any(p.is_empty for p in merged):
                    return merged
                first_result = merged
                continue

            if pages and not any(p.is_empty for p in pages):
                return pages

            if pages and not all(p.is_empty for p in pages):
                empty_count = sum(1 for p in pages if p.is_empty)
                first_result = pages
                self._logger.log_file_skipped(
                    file_path,
                    f"PDF híbrido: {empty_count}/{len(pages)} páginas "
                    f"sin texto con {extractor.name}, probando siguiente extractor...",
                )
                continue

            self._logger.log_file_skipped(
                file_path,
                f"Sin texto con {extractor.name}, probando siguiente extractor...",
            )

        if first_result is not None:
            return first_result

        self._logger.log_file_skipped(file_path, "Archivo sin texto extraíble")
        return None

    @staticmethod
    def _merge_hybrid_pages(
        primary: list[PageText],
        secondary: list[PageText],
    ) -> list[PageText]:
        """Mezcla páginas de dos extractores para PDFs híbridos.

        Para cada página usa el texto del extractor primario si lo hay;
        si está vacía, el del secundario. La longitud es la del primario.
        """
        merged: list[PageText] = []

        for i, page in enumerate(primary):
            if not page.is_empty:
                merged.append(page)
            elif i < len(secondary) and not secondary[i].is_empty:
                merged.append(secondary[i])
            else:
                merged.append(page)

        return merged
