import pandas as pd
import logging
from typing import List, Optional

from ..completeness_calculator import compute_consecutive_absences, compute_member_stat
from ...models.member import Member
from ...models.period import ResolvedPeriod
from ..attendance_index import AttendanceIndex
from ....utils import schema

log = logging.getLogger(__name__)

STATS_COLUMNS = [
    schema.COL_MEMBER_ID, schema.COL_NAME, schema.COL_CELL_ID, schema.COL_CELL_NAME,
    "present", "absent", "unchecked", "expected", "rate", "consecutive_absences",
]


class MemberStatsSheetGenerator:
    def __init__(self, members: List[Member], index: AttendanceIndex, period: Optional[ResolvedPeriod]):
        self.members = members
        self.index = index
        self.period = period

    def generate(self) -> dict:
        stats = self.build_stats()
        if stats.empty:
            return {schema.ABA_RESUMO_POR_MEMBRO: pd.DataFrame()}

        translation = {
            schema.COL_NAME: schema.OUT_COL_MEMBRO,
            schema.COL_CELL_NAME: schema.OUT_COL_CELULA,
            "present": schema.OUT_COL_PRESENTES,
            "absent": schema.OUT_COL_AUSENTES,
            "unchecked": schema.OUT_COL_SEM_CHECAGEM,
            "expected": schema.OUT_COL_ESPERADOS,
            "rate": schema.OUT_COL_TAXA,
            "consecutive_absences": schema.OUT_COL_AUSENCIAS_SEGUIDAS,
        }
        sheet = stats.sort_values(by=[schema.COL_CELL_NAME, schema.COL_NAME], na_position='last')
        sheet = sheet.rename(columns=translation)
        return {schema.ABA_RESUMO_POR_MEMBRO: sheet[list(translation.values())].reset_index(drop=True)}

    def build_stats(self) -> pd.DataFrame:
        """Uma linha por membro com as contagens do período."""
        rows = []
        for member in self.members or []:
            stat = compute_member_stat(member, self.index, self.period)
            rows.append({
                schema.COL_MEMBER_ID: member.member_id,
                schema.COL_NAME: member.name or member.member_id,
                schema.COL_CELL_ID: member.cell_id,
                schema.COL_CELL_NAME: member.cell_name or schema.CELULA_SEM_NOME,
                "present": stat.present,
                "absent": stat.absent,
                "unchecked": stat.unchecked,
                "expected": stat.total,
                "rate": stat.rate,
                "consecutive_absences": compute_consecutive_absences(member, self.index, self.period),
            })

        if not rows:
            log.warning("Resumo por Membro: Nenhum membro para calcular.")
            return pd.DataFrame(columns=STATS_COLUMNS)
        return pd.DataFrame(rows, columns=STATS_COLUMNS)
