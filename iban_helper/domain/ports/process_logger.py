"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS del escaneo por lotes ("se recibió un archivo", "se
validó un IBAN"), no niveles de log. La implementación puede imprimir a
consola, escribir a archivo o acumular en memoria para los tests.

El núcleo de validación no registra nada: validate() y generate() son
funciones puras sin E/S.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from iban_helper.domain.models.iban_check_status import IbanCheckStatus


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para escanear.

        Args:
            file_path: Ruta del archivo.
            file_type: Extensión detectada: '.pdf', '.txt', '.csv'.
        """
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado o necesitó otro extractor."""
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        ...

    # --- Validación ---

    @abstractmethod
    def log_candidates_found(self, file_path: Path, num_pages: int, num_candidates: int) -> None:
        """Registra cuántos candidatos a IBAN se encontraron en un archivo."""
        ...

    @abstractmethod
    def log_iban_checked(self, file_path: Path, iban: str, status: IbanCheckStatus) -> None:
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento de un archivo."""
        ...

    # --- Salida ---

    @abstractmethod
    def log_report_written(self, output_path: Path, num_rows: int) -> None:
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'ibans_validos': int,
                'ibans_invalidos': int,
                'errores': list[dict],  # [{archivo, error}]
            }
        """
        ...
