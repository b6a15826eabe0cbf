import logging
from datetime import date
from typing import Iterable, List, Optional, Tuple

from ..models.period import MonthSelector, RangeSelector, ResolvedPeriod, SemesterSelector
from ..models.semester import Semester
from ...utils.date_utils import (
    add_months,
    first_day_of_month,
    last_day_of_month,
    month_index,
    parse_local_date,
    week_range,
)

log = logging.getLogger(__name__)

RELATIVE_PERIOD_MONTHS = {"1m": 1, "3m": 3, "6m": 6, "12m": 12}
DEFAULT_RELATIVE_PERIOD = "3m"


def resolve_period(selector, semesters: Iterable[Semester], today: date) -> Optional[ResolvedPeriod]:
    """
    Converte o seletor num período concreto com o fim limitado a 'today'.
    Retorna None quando a entrada está incompleta/invertida ou quando o mês
    escolhido não cruza o semestre em uso.
    """
    catalog = list(semesters or [])

    if isinstance(selector, RangeSelector):
        bounds = _range_bounds(selector)
    elif isinstance(selector, MonthSelector):
        bounds = _month_bounds(selector, catalog)
    elif isinstance(selector, SemesterSelector):
        bounds = _semester_bounds(selector, catalog)
    else:
        log.warning(f"Resolvedor de Período: Seletor desconhecido '{type(selector).__name__}'.")
        bounds = None

    if bounds is None:
        return None

    start, end = bounds
    if start > end:
        return None

    cap = parse_local_date(today)
    effective_end = min(end, cap) if cap is not None else end
    return ResolvedPeriod(start_date=start, end_date=end, effective_end=effective_end)


def _range_bounds(selector: RangeSelector) -> Optional[Tuple[date, date]]:
    start = parse_local_date(selector.start_date)
    end = parse_local_date(selector.end_date)
    if start is None or end is None:
        return None
    return start, end


def _month_bounds(selector: MonthSelector, catalog: List[Semester]) -> Optional[Tuple[date, date]]:
    try:
        start = first_day_of_month(selector.year, selector.month)
        end = last_day_of_month(selector.year, selector.month)
    except ValueError:
        log.warning(f"Resolvedor de Período: Mês inválido {selector.year}-{selector.month}.")
        return None

    if not selector.clamp_to_semester:
        return start, end

    semester = _semester_in_scope(selector.semester_id, catalog)
    if semester is None:
        # Sem semestre resolvível o mês inteiro vale, sem recorte.
        log.warning(
            f"Resolvedor de Período: Nenhum semestre em uso para {selector.year}-{selector.month:02d}. "
            "Usando o mês sem recorte."
        )
        return start, end

    return max(start, semester.start_date), min(end, semester.end_date)


def _semester_bounds(selector: SemesterSelector, catalog: List[Semester]) -> Optional[Tuple[date, date]]:
    semester = find_semester(catalog, selector.semester_id)
    if semester is None:
        log.warning(f"Resolvedor de Período: Semestre '{selector.semester_id}' não encontrado.")
        return None
    return semester.start_date, semester.end_date


def _semester_in_scope(semester_id, catalog: List[Semester]) -> Optional[Semester]:
    if semester_id is not None:
        return find_semester(catalog, semester_id)
    return next((s for s in catalog if s.is_active), None)


def find_semester(semesters: Iterable[Semester], semester_id) -> Optional[Semester]:
    if semester_id is None:
        return None
    key = str(semester_id)
    return next((s for s in semesters if str(s.id) == key), None)


def find_current_semester(semesters: Iterable[Semester], today: date) -> Optional[Semester]:
    """Semestre que contém 'today'; senão o de início mais recente."""
    ordered = sorted(semesters or [], key=lambda s: s.start_date, reverse=True)
    if not ordered:
        return None
    current = next((s for s in ordered if s.contains(today)), None)
    return current or ordered[0]


def semester_months(semester: Semester) -> List[Tuple[int, int]]:
    """Pares (ano, mês) cobertos pelo semestre, do primeiro ao último mês."""
    months = []
    year, month = semester.start_date.year, semester.start_date.month
    last = month_index(semester.end_date)
    while year * 12 + (month - 1) <= last:
        months.append((year, month))
        year, month = add_months(year, month, 1)
    return months


def month_selector_for(semester: Semester, month: int) -> MonthSelector:
    """
    Monta o seletor de mês a partir só do número do mês. Um mês anterior ao
    mês de início do semestre pertence ao ano seguinte (semestre que vira o ano).
    """
    year = semester.start_date.year
    if month < semester.start_date.month:
        year += 1
    return MonthSelector(year=year, month=month, semester_id=semester.id)


def switch_unit(unit: str, semester: Semester, today: date):
    """Troca entre visão por semestre e por mês mantendo o semestre ativo."""
    if unit == "semester":
        return SemesterSelector(semester_id=semester.id)
    if unit != "month":
        raise ValueError(f"Unidade de período desconhecida: '{unit}'.")

    if semester.month_range_contains(today):
        return MonthSelector(year=today.year, month=today.month, semester_id=semester.id)
    return MonthSelector(
        year=semester.start_date.year,
        month=semester.start_date.month,
        semester_id=semester.id,
    )


def shift_month(selector: MonthSelector, increment: int, semester: Semester) -> MonthSelector:
    """Avança/recua o mês; fora dos meses do semestre o seletor não muda."""
    year, month = add_months(selector.year, selector.month, increment)
    if not semester.month_range_contains(date(year, month, 1)):
        return selector
    return selector.model_copy(update={"year": year, "month": month})


def this_week_range(today: date) -> RangeSelector:
    sunday, saturday = week_range(today)
    return RangeSelector(start_date=sunday.isoformat(), end_date=saturday.isoformat())


def this_month_range(today: date) -> RangeSelector:
    return RangeSelector(
        start_date=first_day_of_month(today.year, today.month).isoformat(),
        end_date=last_day_of_month(today.year, today.month).isoformat(),
    )


def relative_range(code: str, today: date) -> RangeSelector:
    """Últimos N meses até hoje ('1m', '3m', '6m', '12m'; padrão '3m')."""
    months = RELATIVE_PERIOD_MONTHS.get(code, RELATIVE_PERIOD_MONTHS[DEFAULT_RELATIVE_PERIOD])
    year, month = add_months(today.year, today.month, -months)
    day = min(today.day, last_day_of_month(year, month).day)
    return RangeSelector(start_date=date(year, month, day).isoformat(), end_date=today.isoformat())


def incomplete_report_range(
    report_filter: str, semesters: Iterable[Semester], semester_id, today: date
) -> RangeSelector:
    """Período do relatório de checagens incompletas (WEEK, MONTH ou SEMESTER)."""
    if report_filter == "WEEK":
        return this_week_range(today)
    if report_filter == "MONTH":
        return this_month_range(today)

    catalog = list(semesters or [])
    semester = (
        find_semester(catalog, semester_id)
        or next((s for s in catalog if s.is_active), None)
        or (catalog[0] if catalog else None)
    )
    if semester is None:
        log.info("Resolvedor de Período: Nenhum semestre cadastrado, usando o mês corrente.")
        return this_month_range(today)
    return RangeSelector(
        start_date=semester.start_date.isoformat(),
        end_date=semester.end_date.isoformat(),
    )

