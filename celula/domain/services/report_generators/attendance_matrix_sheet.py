import pandas as pd
from datetime import date
from typing import List, Optional

from ..attendance_index import AttendanceIndex
from ..instance_enumerator import period_instances
from ...models.member import Member
from ...models.period import ResolvedPeriod
from ....utils import schema


class AttendanceMatrixSheetGenerator:
    def __init__(self, members: List[Member], index: AttendanceIndex, period: Optional[ResolvedPeriod]):
        self.members = members
        self.index = index
        self.period = period

    def generate(self) -> dict:
        return {schema.ABA_MATRIZ_PRESENCA: self.build_matrix()}

    def build_matrix(self) -> pd.DataFrame:
        """
        Uma linha por membro e uma coluna por domingo esperado.
        PRESENT/ABSENT quando checado, vazio sem checagem e '-' antes da elegibilidade.
        """
        sundays = period_instances(self.period)
        if not sundays or not self.members:
            return pd.DataFrame()

        cells = [
            {
                schema.OUT_COL_CELULA: m.cell_name or schema.CELULA_SEM_NOME,
                schema.OUT_COL_MEMBRO: m.name or m.member_id,
                schema.OUT_COL_ID: m.member_id,
                schema.COL_DATE: sunday,
                schema.COL_STATUS: self._cell_value(m, sunday),
            }
            for m in self.members
            for sunday in sundays
        ]
        long_df = pd.DataFrame(cells)

        matrix = pd.pivot_table(
            long_df, values=schema.COL_STATUS,
            index=schema.COLUNAS_FIXAS_MATRIZ,
            columns=schema.COL_DATE, aggfunc='first'
        ).reset_index()
        matrix.columns = [
            c.strftime('%Y-%m-%d') if isinstance(c, (date, pd.Timestamp)) else c
            for c in matrix.columns
        ]
        return matrix

    def _cell_value(self, member: Member, sunday: date) -> str:
        if not member.is_eligible(sunday):
            return schema.MATRIZ_NAO_ELEGIVEL
        return self.index.lookup(member.member_id, sunday) or schema.MATRIZ_SEM_CHECAGEM
