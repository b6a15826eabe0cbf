from datetime import date
from typing import Iterable, List, Optional

from .attendance_index import AttendanceIndex
from .eligibility import eligible_members
from .instance_enumerator import enumerate_weekly_instances, period_instances
from ..models.member import Member
from ..models.member_stat import MemberStat
from ..models.period import ResolvedPeriod
from ...utils import schema

LONG_TERM_ABSENCE_THRESHOLD = schema.LIMIAR_AUSENCIAS_CONSECUTIVAS


def rate_for(present: int, total: int) -> int:
    """Percentual inteiro arredondado para cima no meio (0 sem domingos esperados)."""
    if total <= 0:
        return 0
    return (present * 200 + total) // (2 * total)


def member_instances(member: Member, period: Optional[ResolvedPeriod]) -> List[date]:
    """Domingos esperados do período a partir da data de elegibilidade do membro."""
    if period is None or period.is_empty:
        return []
    start = max(period.start_date, member.eligibility_start_date)
    return enumerate_weekly_instances(start, period.effective_end)


def compute_member_stat(member: Member, index: AttendanceIndex, period: Optional[ResolvedPeriod]) -> MemberStat:
    present = absent = unchecked = 0
    instances = member_instances(member, period)

    for instance in instances:
        status = index.lookup(member.member_id, instance)
        if status == schema.STATUS_PRESENT:
            present += 1
        elif status == schema.STATUS_ABSENT:
            absent += 1
        else:
            unchecked += 1

    return MemberStat(
        present=present,
        absent=absent,
        unchecked=unchecked,
        rate=rate_for(present, len(instances)),
    )


def compute_group_incomplete_dates(
    members: Iterable[Member], index: AttendanceIndex, period: Optional[ResolvedPeriod]
) -> List[date]:
    """
    Domingos do período em que ao menos um membro elegível ficou sem
    PRESENT/ABSENT. Domingos sem nenhum membro elegível não contam.
    """
    roster = list(members or [])
    if not roster:
        return []

    missed = []
    for instance in period_instances(period):
        active = eligible_members(roster, instance)
        if not active:
            continue
        if any(not index.has_record(m.member_id, instance) for m in active):
            missed.append(instance)
    return missed


def compute_group_incomplete_count(
    members: Iterable[Member], index: AttendanceIndex, period: Optional[ResolvedPeriod]
) -> int:
    return len(compute_group_incomplete_dates(members, index, period))


def compute_consecutive_absences(member: Member, index: AttendanceIndex, period: Optional[ResolvedPeriod]) -> int:
    """
    Ausências seguidas mais recentes do membro: percorre os domingos do fim para
    o início, soma ABSENT, ignora domingos sem checagem e para no primeiro PRESENT.
    """
    streak = 0
    for instance in reversed(member_instances(member, period)):
        status = index.lookup(member.member_id, instance)
        if status == schema.STATUS_PRESENT:
            break
        if status == schema.STATUS_ABSENT:
            streak += 1
    return streak


def count_long_term_absentees(
    members: Iterable[Member],
    index: AttendanceIndex,
    period: Optional[ResolvedPeriod],
    threshold: int = LONG_TERM_ABSENCE_THRESHOLD,
) -> int:
    return sum(
        1 for m in members or []
        if compute_consecutive_absences(m, index, period) >= threshold
    )


def cell_status_label(rate: float) -> str:
    if rate >= schema.FAIXA_ESTAVEL:
        return schema.SITUACAO_ESTAVEL
    if rate >= schema.FAIXA_BOM:
        return schema.SITUACAO_BOM
    if rate >= schema.FAIXA_REGULAR:
        return schema.SITUACAO_REGULAR
    return schema.SITUACAO_ATENCAO
