"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from iban_helper.domain.ports import StructureCatalog, TextExtractor
"""

from iban_helper.domain.ports.process_logger import ProcessLogger
from iban_helper.domain.ports.report_writer import ReportWriter
from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.ports.text_extractor import TextExtractor

__all__ = [
    "ProcessLogger",
    "ReportWriter",
    "StructureCatalog",
    "TextExtractor",
]
