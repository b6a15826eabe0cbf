from datetime import date
from typing import Iterable, List

from ..models.member import Member


def is_eligible(member: Member, instance_date: date) -> bool:
    """O membro conta para o domingo se a data é >= sua data de elegibilidade."""
    return member.is_eligible(instance_date)


def eligible_members(members: Iterable[Member], instance_date: date) -> List[Member]:
    return [m for m in members if m.is_eligible(instance_date)]
