import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from .member import normalize_member_id
from ...utils import schema
from ...utils.date_utils import parse_local_date


class AttendanceRecord(BaseModel):
    """Modela uma checagem de presença de um membro num domingo."""
    member_id: str
    date: Optional[datetime.date] = None
    status: Optional[str] = None

    @field_validator("member_id", mode="before")
    @classmethod
    def _as_text(cls, value):
        return normalize_member_id(value)

    @field_validator("date", mode="before")
    @classmethod
    def _as_local_date(cls, value):
        return parse_local_date(value)

    def is_binary(self) -> bool:
        """Só PRESENT/ABSENT contam como informação de presença."""
        return normalize_status(self.status) is not None


def normalize_status(status) -> Optional[str]:
    if not isinstance(status, str):
        return None
    value = status.strip().upper()
    return value if value in schema.BINARY_STATUSES else None
