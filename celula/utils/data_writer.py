import os
import logging
import pandas as pd
from datetime import datetime
from typing import Dict

from . import schema

log = logging.getLogger(__name__)


class DataWriter:

    def __init__(self, config: object):
        self.config = config
        self.output_path = config.CAMINHOS['local'].get('output', "output")
        os.makedirs(self.output_path, exist_ok=True)

    def save_report_to_excel(self, report_tabs: Dict[str, pd.DataFrame], base_filename: str) -> str:
        """
        Grava uma aba por DataFrame. O nome do arquivo leva o rótulo do período
        quando o pipeline o definiu; sem rótulo, leva data e hora da execução.
        """
        period_label = getattr(self.config, 'ROTULO_PERIODO', None)
        if period_label:
            filename = f"{period_label} - {base_filename}.xlsx"
        else:
            filename = f"{base_filename}_{datetime.now():%Y-%m-%d_%Hh%Mm}.xlsx"

        full_path = os.path.join(self.output_path, filename)
        log.info(f"Escritor: Salvando relatório (Excel) em {full_path}")
        try:
            with pd.ExcelWriter(full_path, engine='xlsxwriter') as writer:
                self._write_tabs(writer, report_tabs)
        except Exception as e:
            log.error(f"Escritor: Falha ao gravar '{full_path}': {e}")
            return ""
        return full_path

    def _write_tabs(self, writer, report_tabs: Dict[str, pd.DataFrame]):
        for sheet_name, df in report_tabs.items():
            if not isinstance(df, pd.DataFrame):
                log.warning(f"Escritor: Aba '{sheet_name}' ignorada (conteúdo não é tabela).")
                continue

            df.to_excel(writer, sheet_name=sheet_name, index=False)
            if df.empty:
                continue

            worksheet = writer.sheets[sheet_name]
            if schema.OUT_COL_TAXA in df.columns:
                self._format_rate_column(writer.book, worksheet, df)
            if sheet_name == schema.ABA_MATRIZ_PRESENCA:
                self._format_matrix(writer.book, worksheet, df)
            self._autofit_columns(worksheet, df)

    def _format_rate_column(self, workbook, worksheet, df: pd.DataFrame):
        """Verde a partir de 'Estável', vermelho abaixo de 'Regular', amarelo entre os dois."""
        col = df.columns.get_loc(schema.OUT_COL_TAXA)
        last_row = len(df)

        bands = [
            ({'criteria': '>=', 'value': schema.FAIXA_ESTAVEL}, self._green(workbook)),
            ({'criteria': '<', 'value': schema.FAIXA_REGULAR}, self._red(workbook)),
            ({'criteria': 'between', 'minimum': schema.FAIXA_REGULAR,
              'maximum': schema.FAIXA_ESTAVEL - 1}, self._yellow(workbook)),
        ]
        for rule, cell_format in bands:
            worksheet.conditional_format(1, col, last_row, col, {'type': 'cell', **rule, 'format': cell_format})

    def _format_matrix(self, workbook, worksheet, df: pd.DataFrame):
        date_cols = [i for i, c in enumerate(df.columns) if c not in schema.COLUNAS_FIXAS_MATRIZ]
        if not date_cols:
            return

        first_col, last_col, last_row = date_cols[0], date_cols[-1], len(df)
        by_status = [
            (schema.STATUS_PRESENT, self._green(workbook)),
            (schema.STATUS_ABSENT, self._red(workbook)),
        ]
        for status, cell_format in by_status:
            worksheet.conditional_format(1, first_col, last_row, last_col, {
                'type': 'cell', 'criteria': '==', 'value': f'"{status}"', 'format': cell_format,
            })
        worksheet.conditional_format(1, first_col, last_row, last_col, {
            'type': 'blanks', 'format': self._yellow(workbook),
        })

    @staticmethod
    def _autofit_columns(worksheet, df: pd.DataFrame):
        for i, col in enumerate(df.columns):
            widest = df[col].astype(str).map(len).max()
            worksheet.set_column(i, i, max(widest, len(str(col))) + 2)

    @staticmethod
    def _red(workbook):
        return workbook.add_format({'bg_color': schema.COLOR_RED_BG, 'font_color': schema.COLOR_RED_FONT})

    @staticmethod
    def _yellow(workbook):
        return workbook.add_format({'bg_color': schema.COLOR_YELLOW_BG, 'font_color': schema.COLOR_YELLOW_FONT})

    @staticmethod
    def _green(workbook):
        return workbook.add_format({'bg_color': schema.COLOR_GREEN_BG, 'font_color': schema.COLOR_GREEN_FONT})
