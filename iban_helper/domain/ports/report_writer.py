"""
Puerto de salida: Escritor del reporte de validación.

El escáner por lotes produce una lista de ResultadoValidacion y se la
pasa a quien implemente este puerto. Hoy es Excel; podría ser CSV o una
base de datos sin cambiar el dominio.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from iban_helper.domain.models.resultado_validacion import ResultadoValidacion


class ReportWriter(ABC):
    """Interfaz para escribir resultados de validación."""

    @abstractmethod
    def write_report(self, resultados: list[ResultadoValidacion], output_path: Path) -> Path:
        """Escribe el reporte de todos los IBANs validados.

        Args:
            resultados: Resultados a reportar, en el orden en que se encontraron.
            output_path: Ruta donde crear el archivo.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
