"""
Adaptador de entrada: Catálogo de estructuras IBAN incluido en el paquete.

Contiene la estructura de los países del registro IBAN de SWIFT
(ISO 13616). Cada entrada es: país → (longitud total, estructura interna).

Notación de la estructura interna (3 caracteres por campo):
    F = dígitos            (n en el registro SWIFT)
    U = letras mayúsculas  (a)
    B = mayúsculas+dígitos (c)
    A, C, L, W = alfanumérico mixto, letras mixtas, minúsculas,
                 minúsculas+dígitos (no los usa ningún país del registro,
                 pero un catálogo CSV propio puede usarlos)

Para usar datos más recientes sin cambiar el código, cargar un CSV con
CsvStructureCatalog.
"""

from iban_helper.adapters.input.structure_catalogs.memory_catalog import (
    InMemoryStructureCatalog,
)
from iban_helper.domain.models.country_structure import CountryStructure

_IBAN_STRUCTURES: dict[str, tuple[int, str]] = {
    # --- Europa ---
    "AD": (24, "F04F04B12"),
    "AL": (28, "F08B16"),
    "AT": (20, "F05F11"),
    "BA": (20, "F03F03F08F02"),
    "BE": (16, "F03F07F02"),
    "BG": (22, "U04F04F02B08"),
    "BY": (28, "B04F04B16"),
    "CH": (21, "F05B12"),
    "CY": (28, "F03F05B16"),
    "CZ": (24, "F04F06F10"),
    "DE": (22, "F08F10"),
    "DK": (18, "F04F09F01"),
    "EE": (20, "F02F02F11F01"),
    "ES": (24, "F04F04F01F01F10"),
    "FI": (18, "F03F11"),
    "FO": (18, "F04F09F01"),
    "FR": (27, "F05F05B11F02"),
    "GB": (22, "U04F06F08"),
    "GI": (23, "U04B15"),
    "GL": (18, "F04F09F01"),
    "GR": (27, "F03F04B16"),
    "HR": (21, "F07F10"),
    "HU": (28, "F03F04F01F15F01"),
    "IE": (22, "U04F06F08"),
    "IS": (26, "F04F02F06F10"),
    "IT": (27, "U01F05F05B12"),
    "LI": (21, "F05B12"),
    "LT": (20, "F05F11"),
    "LU": (20, "F03B13"),
    "LV": (21, "U04B13"),
    "MC": (27, "F05F05B11F02"),
    "MD": (24, "B02B18"),
    "ME": (22, "F03F13F02"),
    "MK": (19, "F03B10F02"),
    "MT": (31, "U04F05B18"),
    "NL": (18, "U04F10"),
    "NO": (15, "F04F06F01"),
    "PL": (28, "F08F16"),
    "PT": (25, "F04F04F11F02"),
    "RO": (24, "U04B16"),
    "RS": (22, "F03F13F02"),
    "SE": (24, "F03F16F01"),
    "SI": (19, "F05F08F02"),
    "SK": (24, "F04F06F10"),
    "SM": (27, "U01F05F05B12"),
    "UA": (29, "F06B19"),
    "VA": (22, "F03F15"),
    "XK": (20, "F04F10F02"),
    # --- Oriente Medio y Asia ---
    "AE": (23, "F03F16"),
    "AZ": (28, "U04B20"),
    "BH": (22, "U04B14"),
    "GE": (22, "U02F16"),
    "IL": (23, "F03F03F13"),
    "IQ": (23, "U04F03F12"),
    "JO": (30, "U04F04B18"),
    "KW": (30, "U04B22"),
    "KZ": (20, "F03B13"),
    "LB": (28, "F04B20"),
    "PK": (24, "U04B16"),
    "PS": (29, "U04B21"),
    "QA": (29, "U04B21"),
    "SA": (24, "F02B18"),
    "TL": (23, "F03F14F02"),
    "TR": (26, "F05F01B16"),
    # --- África ---
    "EG": (29, "F04F04F17"),
    "MR": (27, "F05F05F11F02"),
    "MU": (30, "U04F02F02F12F03U03"),
    "SC": (31, "U04F02F02F16U03"),
    "ST": (25, "F04F04F11F02"),
    "TN": (24, "F02F03F13F02"),
    # --- América ---
    "BR": (29, "F08F05F10U01B01"),
    "CR": (22, "F04F14"),
    "DO": (28, "B04F20"),
    "GT": (28, "B04B20"),
    "LC": (32, "U04B24"),
    "SV": (28, "U04F20"),
    "VG": (24, "U04F16"),
}


class BuiltinStructureCatalog(InMemoryStructureCatalog):
    """Catálogo con la tabla de países incluida en el paquete."""

    def __init__(self) -> None:
        super().__init__(
            CountryStructure(
                country_code=country_code,
                total_length=total_length,
                inner_structure=inner_structure,
            )
            for country_code, (total_length, inner_structure) in _IBAN_STRUCTURES.items()
        )
