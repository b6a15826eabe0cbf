import numpy as np
import pandas as pd

from ..completeness_calculator import LONG_TERM_ABSENCE_THRESHOLD, cell_status_label, rate_for
from ....utils import schema


class CellSummarySheetGenerator:
    def __init__(self, member_stats: pd.DataFrame, config: object = None):
        self.member_stats = member_stats
        self.threshold = getattr(config, 'LIMIAR_AUSENCIAS_CONSECUTIVAS', LONG_TERM_ABSENCE_THRESHOLD)

    def generate(self) -> dict:
        if self.member_stats is None or self.member_stats.empty:
            return {schema.ABA_RESUMO_POR_CELULA: pd.DataFrame()}

        df = self.member_stats.copy()
        df["long_term_bin"] = np.where(df["consecutive_absences"] >= self.threshold, 1, 0)

        resumo = df.groupby(schema.COL_CELL_NAME).agg(
            total_membros=(schema.COL_MEMBER_ID, 'count'),
            presentes=("present", 'sum'),
            ausentes=("absent", 'sum'),
            sem_checagem=("unchecked", 'sum'),
            esperados=("expected", 'sum'),
            ausentes_longos=("long_term_bin", 'sum'),
        ).reset_index()

        resumo['taxa'] = [
            rate_for(int(p), int(e)) for p, e in zip(resumo['presentes'], resumo['esperados'])
        ]
        resumo['situacao'] = resumo['taxa'].apply(cell_status_label)

        resumo.rename(
            columns={
                schema.COL_CELL_NAME: schema.OUT_COL_CELULA,
                'total_membros': schema.OUT_COL_TOTAL_MEMBROS,
                'presentes': schema.OUT_COL_PRESENTES,
                'ausentes': schema.OUT_COL_AUSENTES,
                'sem_checagem': schema.OUT_COL_SEM_CHECAGEM,
                'esperados': schema.OUT_COL_ESPERADOS,
                'taxa': schema.OUT_COL_TAXA,
                'situacao': schema.OUT_COL_SITUACAO,
                'ausentes_longos': schema.OUT_COL_AUSENTES_LONGOS,
            },
            inplace=True
        )
        cols = [
            schema.OUT_COL_CELULA, schema.OUT_COL_TOTAL_MEMBROS, schema.OUT_COL_PRESENTES,
            schema.OUT_COL_AUSENTES, schema.OUT_COL_SEM_CHECAGEM, schema.OUT_COL_ESPERADOS,
            schema.OUT_COL_TAXA, schema.OUT_COL_SITUACAO, schema.OUT_COL_AUSENTES_LONGOS,
        ]
        return {schema.ABA_RESUMO_POR_CELULA: resumo[cols]}
