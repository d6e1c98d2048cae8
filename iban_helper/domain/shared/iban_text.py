"""
Utilidades de texto para IBANs dentro de documentos.

Los IBANs aparecen en dos formas (ISO 13616):
- Formato electrónico: sin espacios, "GB82WEST12345698765432".
- Formato impresión: bloques de 4, "GB82 WEST 1234 5698 7654 32".

El validador solo acepta el formato electrónico (no corrige la entrada).
Estas funciones sirven para el escaneo de documentos: localizar
candidatos en texto libre y pasarlos a formato electrónico antes de
validarlos, y para mostrar resultados en formato impresión.
"""

import re
from collections.abc import Callable

# Código de país + dígitos de control, seguido de bloques opcionalmente
# separados por un espacio. El BBAN más largo (30 caracteres) cabe en
# 7 bloques de 4 más un resto de 1-3.
_CANDIDATE_RE = re.compile(
    r"\b[A-Z]{2}[0-9]{2}(?: ?[A-Za-z0-9]{4}){2,7}(?: ?[A-Za-z0-9]{1,3})?\b"
)

# Noruega tiene el IBAN más corto: 15 caracteres.
MIN_IBAN_LENGTH = 15
MAX_IBAN_LENGTH = 34

_GROUP_SIZE = 4

_BLOCK_RE = re.compile(r"\S+")


def to_electronic_format(text: str) -> str:
    """Quita los espacios de un IBAN en formato impresión.

    Ejemplos:
        >>> to_electronic_format("GB82 WEST 1234 5698 7654 32")
        'GB82WEST12345698765432'
    """
    return re.sub(r"\s+", "", text)


def to_print_format(iban: str) -> str:
    """Agrupa un IBAN en bloques de 4 caracteres separados por espacio.

    Ejemplos:
        >>> to_print_format("GB82WEST12345698765432")
        'GB82 WEST 1234 5698 7654 32'
    """
    compact = to_electronic_format(iban)
    return " ".join(compact[i : i + _GROUP_SIZE] for i in range(0, len(compact), _GROUP_SIZE))


def find_iban_candidates(
    text: str, expected_length: Callable[[str], int | None] | None = None
) -> list[str]:
    """Busca textos con forma de IBAN y los devuelve en formato electrónico.

    No valida nada: solo localiza secuencias con la forma "2 letras +
    2 dígitos + bloques alfanuméricos" de longitud plausible. Cada
    candidato aparece una sola vez, en el orden en que se encontró.

    Args:
        text: Texto libre (una página ya limpia).
        expected_length: Longitud del IBAN de un país, o None si no se
            conoce. Con el formato impresión, las palabras que siguen al
            IBAN tienen la misma forma que un bloque ("ES91 ... 1332 para
            el pago"). Si se indica, cada coincidencia se corta en el
            bloque donde se alcanza la longitud del país, y el texto que
            sobra se vuelve a escanear.

    Ejemplos:
        >>> find_iban_candidates("Pagar a GB82 WEST 1234 5698 7654 32 antes del 5")
        ['GB82WEST12345698765432']
        >>> lengths = {"BE": 16}
        >>> find_iban_candidates("IBAN BE68 5390 0754 7034 Pago mensual", lengths.get)
        ['BE68539007547034']
    """
    candidates: list[str] = []
    pos = 0
    while True:
        match = _CANDIDATE_RE.search(text, pos)
        if match is None:
            break

        raw = match.group(0)
        keep = _cut_at_expected_length(raw, expected_length)
        pos = match.start() + keep

        compact = to_electronic_format(raw[:keep])
        if not MIN_IBAN_LENGTH <= len(compact) <= MAX_IBAN_LENGTH:
            continue
        if compact not in candidates:
            candidates.append(compact)

    return candidates


def _cut_at_expected_length(
    raw: str, expected_length: Callable[[str], int | None] | None
) -> int:
    """Cantidad de caracteres de `raw` que forman el IBAN.

    Recorre los bloques separados por espacio acumulando su longitud y
    corta en el primero que completa la longitud del país. Si ningún
    corte coincide exactamente, se conserva la coincidencia entera.
    """
    if expected_length is None:
        return len(raw)

    expected = expected_length(raw[:2])
    if expected is None:
        return len(raw)

    accumulated = 0
    for block in _BLOCK_RE.finditer(raw):
        accumulated += len(block.group(0))
        if accumulated == expected:
            return block.end()
        if accumulated > expected:
            break

    return len(raw)
