"""
Utilidades compartidas del dominio.

Funciones puras que no dependen de ninguna librería externa ni de los
puertos. Solo operan sobre tipos nativos de Python.

Uso:
    from iban_helper.domain.shared.charset import CharsetClass, matches
    from iban_helper.domain.shared.field_format import conforms_to_format
    from iban_helper.domain.shared.mod97 import compute_check_digits
    from iban_helper.domain.shared.iban_text import find_iban_candidates
    from iban_helper.domain.shared.text_cleaner import clean_pdf_text
"""
