from datetime import date
from typing import Union

from pydantic import BaseModel, field_validator, model_validator

from ...utils.date_utils import month_index, parse_local_date


class Semester(BaseModel):
    """Modela um semestre do calendário de células (limites inclusivos)."""
    id: Union[int, str]
    name: str
    start_date: date
    end_date: date
    is_active: bool = False

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _as_local_date(cls, value):
        parsed = parse_local_date(value)
        return parsed if parsed is not None else value

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.start_date > self.end_date:
            raise ValueError(
                f"Semestre '{self.name}' com início {self.start_date} depois do fim {self.end_date}."
            )
        return self

    def contains(self, ref_date: date) -> bool:
        return self.start_date <= ref_date <= self.end_date

    def month_range_contains(self, ref_date: date) -> bool:
        """Verifica se o mês de 'ref_date' está entre o mês de início e o de fim."""
        target = month_index(ref_date)
        return month_index(self.start_date) <= target <= month_index(self.end_date)
