"""
Punto de entrada CLI: iban-helper.

Uso:
    # Validar uno o varios IBANs (formato electrónico, sin espacios)
    iban-helper validate GB82WEST12345698765432 DE89370400440532013000

    # Generar un IBAN a partir de cuenta + BIC
    iban-helper generate 60161331926819 NWBKGB2L

    # Escanear PDFs / TXT / CSV y generar un Excel con los IBANs encontrados
    iban-helper scan /ruta/documentos -o /ruta/salida --ocr

    # Ver los países del catálogo
    iban-helper countries

    # Cualquier comando con un catálogo propio
    iban-helper validate XX00... --catalog estructuras.csv

Aquí se ensamblan los componentes del CLI: pide los adaptadores
concretos al registro y los inyecta en los servicios. La fachada
`iban_helper.api` hace lo mismo para el uso como librería. No contiene
lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from iban_helper.adapters.output.loggers.console_logger import ConsoleLogger
from iban_helper.domain.exceptions import CatalogoInvalidoError, OutputError
from iban_helper.domain.ports.structure_catalog import StructureCatalog
from iban_helper.domain.services.iban_batch_processor import IbanBatchProcessor
from iban_helper.domain.services.iban_generator import IbanGenerator
from iban_helper.domain.services.iban_validator import IbanValidator
from iban_helper.domain.shared.iban_text import to_print_format
from iban_helper.infrastructure.registry import (
    create_structure_catalog,
    create_text_extractors,
)

REPORT_FILE_NAME = "validacion_iban.xlsx"


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI. Devuelve el código de salida."""
    args = _parse_args(argv)

    try:
        catalog = create_structure_catalog(Path(args.catalog) if args.catalog else None)
    except CatalogoInvalidoError as e:
        print(f"❌ {e}")
        return 1

    return args.handler(args, catalog)


def _cmd_validate(args: argparse.Namespace, catalog: StructureCatalog) -> int:
    validator = IbanValidator(catalog)
    exit_code = 0

    for iban in args.ibans:
        status = validator.validate(iban)
        marca = "✔" if status.is_valid else "✘"
        print(f"{marca} {iban}: {status.value}")
        if not status.is_valid:
            exit_code = 1

    return exit_code


def _cmd_generate(args: argparse.Namespace, catalog: StructureCatalog) -> int:
    iban = IbanGenerator(catalog).generate(args.account, args.bic)
    if not iban:
        print(f"❌ No se pudo generar el IBAN para la cuenta {args.account} con BIC {args.bic}")
        return 1

    print(to_print_format(iban) if args.print_format else iban)
    return 0


def _cmd_scan(args: argparse.Namespace, catalog: StructureCatalog) -> int:
    input_path = Path(args.input_path)
    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        return 1

    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path

    # Imports aquí: pandas/xlsxwriter solo hacen falta para el reporte.
    from iban_helper.adapters.output.writers.excel_writer import ExcelWriter

    logger = ConsoleLogger(verbose=not args.quiet)
    processor = IbanBatchProcessor(
        text_extractors=create_text_extractors(enable_ocr=args.ocr),
        validator=IbanValidator(catalog),
        logger=logger,
    )

    print("=" * 60)
    print("IBAN HELPER: ESCANEO DE DOCUMENTOS")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  OCR:      {'sí' if args.ocr else 'no'}")
    print()

    if input_path.is_file():
        resultados = processor.process_file(input_path)
        if resultados is None:
            print("\n❌ No se pudo procesar el archivo.")
            return 1
    else:
        resultados = processor.process_directory(input_path)

    try:
        report_path = ExcelWriter().write_report(resultados, output_dir / REPORT_FILE_NAME)
    except OutputError as e:
        logger.log_error(output_dir, e)
        logger.print_summary()
        return 1

    logger.log_report_written(report_path, len(resultados))
    logger.print_summary()
    return 0


def _cmd_countries(args: argparse.Namespace, catalog: StructureCatalog) -> int:
    for country_code in catalog.country_codes:
        structure = catalog.lookup(country_code)
        print(f"{country_code}  {structure.total_length:>2}  {structure.inner_structure}")
    return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--catalog",
        help="CSV con columnas Country, Length, InnerStructure. "
        "Si no se especifica, se usa el catálogo incluido.",
    )

    parser = argparse.ArgumentParser(
        prog="iban-helper",
        description="Validación y generación de IBANs (ISO 13616, MOD97-10)",
        epilog="Ejemplo: iban-helper validate GB82WEST12345698765432",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_validate = subparsers.add_parser("validate", parents=[common], help="Valida IBANs")
    p_validate.add_argument("ibans", nargs="+", help="IBANs en formato electrónico")
    p_validate.set_defaults(handler=_cmd_validate)

    p_generate = subparsers.add_parser(
        "generate", parents=[common], help="Genera un IBAN a partir de cuenta + BIC"
    )
    p_generate.add_argument("account", help="Número de cuenta")
    p_generate.add_argument("bic", help="Código BIC/SWIFT de 8 u 11 caracteres")
    p_generate.add_argument(
        "--print-format",
        action="store_true",
        help="Mostrar el IBAN en bloques de 4 caracteres",
    )
    p_generate.set_defaults(handler=_cmd_generate)

    p_scan = subparsers.add_parser(
        "scan", parents=[common], help="Busca y valida IBANs en PDFs, TXT y CSV"
    )
    p_scan.add_argument("input_path", help="Archivo o directorio a escanear")
    p_scan.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio donde escribir el Excel. "
        "Si no se especifica, se usa el directorio de entrada.",
    )
    p_scan.add_argument(
        "--ocr",
        action="store_true",
        help="Usar OCR (Tesseract) para páginas sin texto embebido",
    )
    p_scan.add_argument(
        "-q", "--quiet", action="store_true", help="Solo mostrar errores y el resumen"
    )
    p_scan.set_defaults(handler=_cmd_scan)

    p_countries = subparsers.add_parser(
        "countries", parents=[common], help="Lista los países del catálogo"
    )
    p_countries.set_defaults(handler=_cmd_countries)

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
