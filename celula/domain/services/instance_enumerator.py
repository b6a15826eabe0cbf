from datetime import date, timedelta
from typing import List, Optional

from ..models.period import ResolvedPeriod
from ...utils import schema
from ...utils.date_utils import next_sunday_on_or_after, parse_local_date


def _bounds(start, end):
    start_date = parse_local_date(start)
    end_date = parse_local_date(end)
    if start_date is None or end_date is None or start_date > end_date:
        return None
    return start_date, end_date


def count_weekly_instances(start, end) -> int:
    """Quantidade de domingos em [start, end], ambos inclusivos."""
    bounds = _bounds(start, end)
    if bounds is None:
        return 0
    start_date, end_date = bounds

    first_sunday = next_sunday_on_or_after(start_date)
    if first_sunday is None or first_sunday > end_date:
        return 0
    return (end_date - first_sunday).days // 7 + 1


def enumerate_weekly_instances(start, end) -> List[date]:
    """Domingos em [start, end], em ordem crescente."""
    bounds = _bounds(start, end)
    if bounds is None:
        return []
    start_date, end_date = bounds

    sundays = []
    current = next_sunday_on_or_after(start_date)
    while current is not None and current <= end_date:
        sundays.append(current)
        try:
            current += timedelta(weeks=1)
        except OverflowError:
            break
    return sundays


def period_instances(period: Optional[ResolvedPeriod]) -> List[date]:
    """Domingos esperados do período já resolvido (até o fim efetivo)."""
    if period is None or period.is_empty:
        return []
    return enumerate_weekly_instances(period.start_date, period.effective_end)


def is_sunday(ref_date: date) -> bool:
    return ref_date.weekday() == schema.SUNDAY
