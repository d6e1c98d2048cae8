"""
Modelo de dominio: Resultado de validar un IBAN encontrado en un documento.

Es el objeto que fluye entre el escáner por lotes y el reporte:
- Lo PRODUCE IbanBatchProcessor (uno por candidato encontrado).
- Lo CONSUME el ReportWriter (una fila por resultado).
"""

from dataclasses import dataclass

from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.shared.iban_text import to_print_format


@dataclass(frozen=True)
class ResultadoValidacion:
    """Un candidato a IBAN y el resultado de validarlo."""

    iban: str
    """IBAN en formato electrónico (sin espacios), tal como se validó."""

    estado: IbanCheckStatus
    """Resultado de IbanValidator.validate()."""

    archivo_origen: str = ""
    """Nombre del archivo donde se encontró. Vacío si vino de la línea de comandos."""

    pagina: int = 1
    """Página del documento donde se encontró."""

    @property
    def es_valida(self) -> bool:
        return self.estado.is_valid

    @property
    def codigo_pais(self) -> str:
        return self.iban[:2]

    @property
    def formato_impresion(self) -> str:
        """IBAN en bloques de 4 caracteres. Ejemplo: 'GB82 WEST 1234 5698 7654 32'."""
        return to_print_format(self.iban)

    def __post_init__(self) -> None:
        if not self.iban:
            raise ValueError("El IBAN no puede estar vacío")
        if self.pagina < 1:
            raise ValueError(f"Página fuera de rango: {self.pagina}. Debe ser >= 1.")
