import calendar
import pandas as pd
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from . import schema


def parse_local_date(value) -> Optional[date]:
    """
    Converte 'YYYY-MM-DD' (com ou sem horário depois) numa data de calendário,
    usando apenas ano/mês/dia do texto. Nunca converte fuso horário.
    Retorna None para entrada vazia ou inválida (inclusive NaT).
    """
    if isinstance(value, datetime):
        return None if pd.isna(value) else value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()[:10]
    if not text:
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def to_local_iso_date(value: date) -> str:
    """Formata a data como 'YYYY-MM-DD' com zeros à esquerda."""
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def normalize_iso_date(value) -> str:
    """Corta qualquer timestamp para os 10 primeiros caracteres ('' se vazio)."""
    if isinstance(value, (date, datetime)):
        parsed = parse_local_date(value)
        return to_local_iso_date(parsed) if parsed is not None else ""
    if not isinstance(value, str) or not value:
        return ""
    return value[:10]


def first_day_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def last_day_of_month(year: int, month: int) -> date:
    _, ultimo_dia = calendar.monthrange(year, month)
    return date(year, month, ultimo_dia)


def month_index(value: date) -> int:
    return value.year * 12 + (value.month - 1)


def add_months(year: int, month: int, increment: int) -> Tuple[int, int]:
    idx = year * 12 + (month - 1) + increment
    return idx // 12, idx % 12 + 1


def week_range(ref_date: date) -> Tuple[date, date]:
    """Semana de domingo a sábado que contém 'ref_date'."""
    days_since_sunday = (ref_date.weekday() - schema.SUNDAY) % 7
    sunday = ref_date - timedelta(days=days_since_sunday)
    return sunday, sunday + timedelta(days=6)


def next_sunday_on_or_after(ref_date: date) -> Optional[date]:
    """None quando o domingo cairia depois de date.max."""
    try:
        return ref_date + timedelta(days=(schema.SUNDAY - ref_date.weekday()) % 7)
    except OverflowError:
        return None
