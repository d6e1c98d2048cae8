"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime cada evento en una
línea con formato consistente y, al final, un resumen del escaneo.
"""

from pathlib import Path

from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.ports.process_logger import ProcessLogger
from iban_helper.domain.shared.iban_text import to_print_format


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si False, solo se imprimen errores y el resumen final.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._ibans_validos: int = 0
        self._ibans_invalidos: int = 0
        self._errores: list[dict] = []

    def _print(self, mensaje: str) -> None:
        if self._verbose:
            print(mensaje)

    # --- Entrada ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        self._print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        self._print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        self._print(f"  🔍 Extrayendo texto ({extractor_name}): {file_path.name}")

    # --- Validación ---

    def log_candidates_found(self, file_path: Path, num_pages: int, num_candidates: int) -> None:
        self._archivos_procesados += 1
        self._print(
            f"  ✅ Escaneado: {file_path.name}: "
            f"{num_pages} páginas, {num_candidates} IBANs encontrados"
        )

    def log_iban_checked(self, file_path: Path, iban: str, status: IbanCheckStatus) -> None:
        if status.is_valid:
            self._ibans_validos += 1
            self._print(f"     ✔ {to_print_format(iban)}")
        else:
            self._ibans_invalidos += 1
            self._print(f"     ✘ {to_print_format(iban)} ({status.value})")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name}: {error}")

    # --- Salida ---

    def log_report_written(self, output_path: Path, num_rows: int) -> None:
        self._print(f"\n📁 Reporte generado: {output_path} ({num_rows} filas)")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "ibans_validos": self._ibans_validos,
            "ibans_invalidos": self._ibans_invalidos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del escaneo."""
        print("\n" + "=" * 60)
        print("RESUMEN DE VALIDACIÓN")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos escaneados:  {self._archivos_procesados}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  IBANs válidos:        {self._ibans_validos}")
        print(f"  IBANs inválidos:      {self._ibans_invalidos}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
