"""
Excepciones de dominio del proyecto iban-helper.

La validación y la generación de IBANs NO usan excepciones: validate()
devuelve un IbanCheckStatus y generate() devuelve "" cuando falla. Estas
excepciones son para las capas externas (catálogos, extractores,
reportes), donde el error sí es excepcional y hay que informar la causa.

Jerarquía:
    IbanHelperError
    ├── CatalogoInvalidoError       → El catálogo de estructuras no se pudo cargar
    ├── FormatoInvalidoError        → El archivo no tiene el formato esperado
    ├── ExtractionError             → Error al extraer texto del archivo
    └── OutputError                 → Error al generar el reporte de salida
"""


class IbanHelperError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class CatalogoInvalidoError(IbanHelperError):
    """Se lanza cuando un catálogo de estructuras IBAN no se puede cargar.

    Esto puede pasar porque:
    - El archivo no existe o no se puede leer.
    - Faltan las columnas Country, Length o InnerStructure.
    - Una longitud no es un entero positivo.
    - Un código de país no son 2 letras mayúsculas, o está repetido.
    """

    def __init__(self, origen: str, causa: str):
        self.origen = origen
        self.causa = causa
        super().__init__(f"Catálogo de estructuras inválido '{origen}': {causa}")


class FormatoInvalidoError(IbanHelperError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un PDF pero el archivo es un .docx.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class ExtractionError(IbanHelperError):
    """Se lanza cuando falla la extracción de texto de un archivo.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña.
    - pdfplumber no puede leer el archivo.
    - Tesseract no está instalado pero se intentó OCR.
    - El archivo de texto no está en una codificación soportada.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class OutputError(IbanHelperError):
    """Se lanza cuando falla la generación del reporte de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
