import math
from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator

from ...utils.date_utils import parse_local_date
from ...utils import schema


def derive_eligibility_start(cell_assignment_date=None, join_year=None) -> date:
    """
    Data a partir da qual o membro conta nos domingos esperados:
    data de atribuição à célula, senão 1º de janeiro do ano de entrada.
    """
    assigned = parse_local_date(cell_assignment_date)
    if assigned is not None:
        return assigned

    try:
        year = int(float(join_year))
        if 1 <= year <= 9999:
            return date(year, 1, 1)
    except (TypeError, ValueError, OverflowError):
        pass

    return parse_local_date(schema.DATA_BASE_PADRAO)


def normalize_member_id(value) -> Optional[str]:
    """Id como texto; ids numéricos lidos do CSV como float ('12.0') perdem o '.0'."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    text = str(value).strip()
    if text.endswith(".0") and text[:-2].isdigit():
        text = text[:-2]
    return text or None


class Member(BaseModel):
    """Modela um membro de célula, já com a data de elegibilidade resolvida."""
    member_id: str
    eligibility_start_date: date
    name: Optional[str] = None
    cell_id: Optional[str] = None
    cell_name: Optional[str] = None

    @field_validator("member_id", "cell_id", mode="before")
    @classmethod
    def _as_text(cls, value):
        return normalize_member_id(value)

    @field_validator("eligibility_start_date", mode="before")
    @classmethod
    def _as_local_date(cls, value):
        parsed = parse_local_date(value)
        return parsed if parsed is not None else value

    def is_eligible(self, ref_date: date) -> bool:
        """Verifica se o membro já estava ativo na data (inclusive)."""
        ref_date = parse_local_date(ref_date)
        if ref_date is None:
            return False
        return ref_date >= self.eligibility_start_date
