"""
Adaptador de salida: Escritor de Excel.

Genera el reporte de validación con 2 hojas:
- Hoja 1 (Resumen): cantidad de IBANs por resultado de validación.
- Hoja 2 (IBANs): una fila por IBAN encontrado, con archivo y página.

Se usa pandas con el motor xlsxwriter.
"""

from pathlib import Path

import pandas as pd

from iban_helper.domain.exceptions import OutputError
from iban_helper.domain.models.iban_check_status import IbanCheckStatus
from iban_helper.domain.models.resultado_validacion import ResultadoValidacion
from iban_helper.domain.ports.report_writer import ReportWriter

_COLUMNAS_IBANS = ["Archivo", "Página", "IBAN", "IBAN (impresión)", "País", "Estado", "Válido"]


class ExcelWriter(ReportWriter):
    """Genera el reporte de validación en formato .xlsx."""

    def write_report(self, resultados: list[ResultadoValidacion], output_path: Path) -> Path:
        """Escribe todos los resultados a un Excel.

        Una lista vacía también genera el archivo (hojas solo con
        encabezados), para que quede constancia de que se escaneó.

        Args:
            resultados: Resultados de validación.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def _escribir_excel(self, resultados: list[ResultadoValidacion], output_path: Path) -> None:
        filas_ibans = [
            {
                "Archivo": resultado.archivo_origen,
                "Página": resultado.pagina,
                "IBAN": resultado.iban,
                "IBAN (impresión)": resultado.formato_impresion,
                "País": resultado.codigo_pais,
                "Estado": resultado.estado.value,
                "Válido": "SI" if resultado.es_valida else "NO",
            }
            for resultado in resultados
        ]
        df_ibans = pd.DataFrame(filas_ibans, columns=_COLUMNAS_IBANS)

        # Todos los estados aparecen en el resumen, aunque tengan 0
        filas_resumen = [
            {
                "Estado": estado.value,
                "Cantidad": sum(1 for r in resultados if r.estado is estado),
            }
            for estado in IbanCheckStatus
        ]
        filas_resumen.append({"Estado": "Total", "Cantidad": len(resultados)})
        df_resumen = pd.DataFrame(filas_resumen, columns=["Estado", "Cantidad"])

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_ibans.to_excel(writer, index=False, sheet_name="IBANs")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_ibans = writer.sheets["IBANs"]

            text_format = workbook.add_format({"num_format": "@"})

            ws_resumen.set_column("A:A", 24)  # Estado
            ws_resumen.set_column("B:B", 10)  # Cantidad

            ws_ibans.set_column("A:A", 30)  # Archivo
            ws_ibans.set_column("B:B", 8)  # Página
            ws_ibans.set_column("C:C", 36, text_format)  # IBAN
            ws_ibans.set_column("D:D", 44, text_format)  # IBAN (impresión)
            ws_ibans.set_column("E:E", 6)  # País
            ws_ibans.set_column("F:F", 24)  # Estado
            ws_ibans.set_column("G:G", 8)  # Válido
