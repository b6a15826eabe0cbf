from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class RangeSelector(BaseModel):
    """Período explícito; as datas chegam como texto e passam pelo parser local."""
    kind: Literal["range"] = "range"
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class MonthSelector(BaseModel):
    """Mês de calendário, opcionalmente recortado pelo semestre em uso."""
    kind: Literal["month"] = "month"
    year: int
    month: int
    semester_id: Optional[Union[int, str]] = None
    clamp_to_semester: bool = True


class SemesterSelector(BaseModel):
    kind: Literal["semester"] = "semester"
    semester_id: Union[int, str]


PeriodSelector = Annotated[
    Union[RangeSelector, MonthSelector, SemesterSelector],
    Field(discriminator="kind"),
]

_selector_adapter = TypeAdapter(PeriodSelector)


def parse_selector(data: dict):
    """Constrói o seletor certo a partir de um dict com a chave 'kind'."""
    return _selector_adapter.validate_python(data)


class ResolvedPeriod(BaseModel):
    """
    Período concreto. 'effective_end' é o fim limitado a hoje; quando ele fica
    antes de 'start_date' o período existe mas não tem domingos esperados.
    """
    start_date: date
    end_date: date
    effective_end: date

    @property
    def is_empty(self) -> bool:
        return self.start_date > self.effective_end
