import logging
import pandas as pd
from typing import Dict, Iterable, Optional, Tuple

from ..models.attendance import AttendanceRecord, normalize_status
from ..models.member import normalize_member_id
from ...utils import schema
from ...utils.date_utils import normalize_iso_date, parse_local_date

log = logging.getLogger(__name__)

IndexKey = Tuple[str, str]


def extract_member_id(record: dict) -> Optional[str]:
    """
    Lê o id do membro de um registro de presença. Aceita 'memberId'/'member_id'
    direto ou um 'member' aninhado (valor simples ou dict com 'id'/'memberId').
    """
    for key in ("memberId", "member_id"):
        member_id = normalize_member_id(record.get(key))
        if member_id is not None:
            return member_id

    nested = record.get("member")
    if isinstance(nested, dict):
        for key in ("id", "memberId"):
            member_id = normalize_member_id(nested.get(key))
            if member_id is not None:
                return member_id
        return None
    return normalize_member_id(nested)


def _date_key(value) -> Optional[str]:
    parsed = parse_local_date(value)
    return normalize_iso_date(parsed) if parsed is not None else None


class AttendanceIndex:
    """
    Mapa (membro, 'YYYY-MM-DD') -> status, só com PRESENT/ABSENT.
    Registros sem data válida ou com outro status são descartados e, em
    registros repetidos, o último prevalece.
    """

    def __init__(self, entries: Optional[Dict[IndexKey, str]] = None):
        self._entries: Dict[IndexKey, str] = dict(entries or {})

    @classmethod
    def from_records(cls, records: Iterable) -> "AttendanceIndex":
        entries: Dict[IndexKey, str] = {}
        skipped = 0
        for record in records or []:
            entry = cls._entry_for(record)
            if entry is None:
                skipped += 1
                continue
            key, status = entry
            entries[key] = status

        if skipped:
            log.debug(f"Índice de Presença: {skipped} registros descartados.")
        return cls(entries)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "AttendanceIndex":
        """Versão vetorizada para a tabela de presença já no schema interno."""
        required = [schema.COL_MEMBER_ID, schema.COL_DATE, schema.COL_STATUS]
        if df is None or df.empty or not all(col in df.columns for col in required):
            return cls()

        df_index = df[required].copy()
        df_index[schema.COL_MEMBER_ID] = df_index[schema.COL_MEMBER_ID].map(normalize_member_id)
        df_index[schema.COL_DATE] = df_index[schema.COL_DATE].map(_date_key)
        df_index[schema.COL_STATUS] = df_index[schema.COL_STATUS].map(normalize_status)

        original_len = len(df_index)
        df_index.dropna(subset=required, inplace=True)
        df_index.drop_duplicates(subset=[schema.COL_MEMBER_ID, schema.COL_DATE], keep='last', inplace=True)

        if len(df_index) < original_len:
            log.info(f"Índice de Presença: {original_len - len(df_index)} registros descartados ou repetidos.")

        entries = {
            (row.member_id, row.date): row.status
            for row in df_index.itertuples(index=False)
        }
        return cls(entries)

    @staticmethod
    def _entry_for(record) -> Optional[Tuple[IndexKey, str]]:
        if isinstance(record, AttendanceRecord):
            record = record.model_dump()
        if not isinstance(record, dict):
            return None

        member_id = extract_member_id(record)
        date_key = _date_key(record.get("date"))
        status = normalize_status(record.get("status"))
        if member_id is None or date_key is None or status is None:
            return None
        return (member_id, date_key), status

    def lookup(self, member_id, date_key) -> Optional[str]:
        return self._entries.get((normalize_member_id(member_id), normalize_iso_date(date_key)))

    def has_record(self, member_id, date_key) -> bool:
        return self.lookup(member_id, date_key) is not None

    def __contains__(self, key) -> bool:
        member_id, date_key = key
        return self.has_record(member_id, date_key)

    def __len__(self) -> int:
        return len(self._entries)
