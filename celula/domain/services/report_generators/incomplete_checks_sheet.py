import pandas as pd
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from ..attendance_index import AttendanceIndex
from ..completeness_calculator import compute_group_incomplete_dates
from ...models.member import Member
from ...models.period import ResolvedPeriod
from ....utils import schema
from ....utils.date_utils import to_local_iso_date

log = logging.getLogger(__name__)


class IncompleteChecksSheetGenerator:
    """Lista, por célula, os domingos em que a checagem de presença ficou incompleta."""

    def __init__(self, members: List[Member], index: AttendanceIndex, period: Optional[ResolvedPeriod]):
        self.members = members
        self.index = index
        self.period = period

    def generate(self) -> dict:
        rows = []
        for cell_name, cell_members in sorted(self._group_by_cell().items()):
            missed = compute_group_incomplete_dates(cell_members, self.index, self.period)
            if not missed:
                continue
            rows.append({
                schema.OUT_COL_CELULA: cell_name,
                schema.OUT_COL_SEMANAS_INCOMPLETAS: len(missed),
                schema.OUT_COL_DATAS_INCOMPLETAS: ", ".join(to_local_iso_date(d) for d in missed),
            })

        log.info(f"Checagens Incompletas: {len(rows)} células com domingos pendentes.")
        return {schema.ABA_CHECAGENS_INCOMPLETAS: pd.DataFrame(rows, columns=[
            schema.OUT_COL_CELULA, schema.OUT_COL_SEMANAS_INCOMPLETAS, schema.OUT_COL_DATAS_INCOMPLETAS,
        ])}

    def _group_by_cell(self) -> Dict[str, List[Member]]:
        groups = defaultdict(list)
        for member in self.members or []:
            groups[member.cell_name or schema.CELULA_SEM_NOME].append(member)
        return groups
