"""
Utilidades de limpieza de texto.

Normalizan el texto extraído de PDFs y archivos de texto antes de buscar
IBANs en él. No saben nada de IBANs: solo operan sobre strings.
"""


def remove_non_printable(text: str) -> str:
    """Sustituye caracteres de control por espacio, excepto \\n, \\r, \\t.

    El OCR a veces inserta caracteres de control invisibles en medio de
    un IBAN, y entonces el buscador de candidatos no lo reconoce.

    Ejemplos:
        >>> remove_non_printable("GB82\\x00WEST")
        'GB82 WEST'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_spaces(text: str) -> str:
    """Colapsa espacios y tabs repetidos en un solo espacio, línea por línea.

    pdfplumber separa a veces los bloques de un IBAN en formato impresión
    con dos o más espacios. Los saltos de línea se conservan.

    Ejemplos:
        >>> normalize_spaces("GB82  WEST\\t1234")
        'GB82 WEST 1234'
    """
    return "\n".join(" ".join(line.split()) for line in text.split("\n"))


def clean_pdf_text(text: str) -> str:
    """Aplica todas las limpiezas en secuencia.

    Es la función que los text extractors llaman sobre el texto crudo,
    ANTES de pasarlo al buscador de candidatos.
    """
    text = remove_non_printable(text)
    text = normalize_line_endings(text)
    text = normalize_spaces(text)
    return text
