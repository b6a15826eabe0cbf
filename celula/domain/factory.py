import pandas as pd
import logging
from typing import List, Optional

from pydantic import ValidationError

from .models.member import Member, derive_eligibility_start, normalize_member_id
from .models.semester import Semester
from ..utils import schema

log = logging.getLogger(__name__)


class MemberFactory:

    def create_members_from_df(self, df: pd.DataFrame) -> List[Member]:
        members = []
        df_cleaned = self._clean_members_df(df)

        if df_cleaned.empty:
            return []

        original_len = len(df_cleaned)
        df_cleaned.drop_duplicates(subset=[schema.COL_MEMBER_ID], keep='last', inplace=True)
        if len(df_cleaned) < original_len:
            log.info(f"Factory: Deduplicação aplicada. Removidos {original_len - len(df_cleaned)} membros repetidos.")

        for row in df_cleaned.itertuples(index=False):
            member = self._create_member_from_row(row)
            if member:
                members.append(member)

        return members

    def _clean_members_df(self, df: pd.DataFrame) -> pd.DataFrame:
        if df is None or df.empty:
            return pd.DataFrame()

        df_copy = df.copy()
        df_copy.columns = df_copy.columns.str.strip()

        rename_map = {
            schema.MEMBROS_ID: schema.COL_MEMBER_ID,
            schema.MEMBROS_NOME: schema.COL_NAME,
            schema.MEMBROS_CELULA_ID: schema.COL_CELL_ID,
            schema.MEMBROS_CELULA_NOME: schema.COL_CELL_NAME,
            schema.MEMBROS_DATA_ATRIBUICAO: "cell_assignment_date",
            schema.MEMBROS_ANO_ENTRADA: "join_year",
        }
        df_copy.rename(columns=rename_map, inplace=True)

        if schema.COL_MEMBER_ID not in df_copy.columns:
            log.warning("Factory: Coluna de id do membro não encontrada. Tentando busca inteligente...")
            found_col = next(
                (c for c in df_copy.columns if "member" in c.lower() and "id" in c.lower()), None
            )
            if found_col:
                log.info(f"Factory: Coluna de id localizada como '{found_col}'. Renomeando.")
                df_copy.rename(columns={found_col: schema.COL_MEMBER_ID}, inplace=True)
            else:
                return pd.DataFrame()

        for col in [schema.COL_NAME, schema.COL_CELL_ID, schema.COL_CELL_NAME,
                    "cell_assignment_date", "join_year"]:
            if col not in df_copy.columns:
                df_copy[col] = None

        df_copy[schema.COL_MEMBER_ID] = df_copy[schema.COL_MEMBER_ID].map(normalize_member_id)
        return df_copy.dropna(subset=[schema.COL_MEMBER_ID])

    def _create_member_from_row(self, row) -> Optional[Member]:
        eligibility_start = derive_eligibility_start(row.cell_assignment_date, row.join_year)

        try:
            return Member(
                member_id=row.member_id,
                eligibility_start_date=eligibility_start,
                name=_text_or_none(row.name),
                cell_id=normalize_member_id(row.cell_id),
                cell_name=_text_or_none(row.cell_name),
            )
        except ValidationError as e:
            log.warning(f"Factory: Membro '{row.member_id}' ignorado: {e}")
            return None


class SemesterFactory:

    def create_semesters_from_df(self, df: pd.DataFrame) -> List[Semester]:
        if df is None or df.empty:
            return []

        df_copy = df.copy()
        df_copy.columns = df_copy.columns.str.strip()

        required = schema.COLUNAS_OBRIGATORIAS_SEMESTRES
        if not all(col in df_copy.columns for col in required):
            log.warning(f"Factory: Catálogo de semestres sem as colunas {required}.")
            return []

        semesters = []
        invalid = 0
        for record in df_copy.to_dict(orient='records'):
            try:
                semesters.append(Semester(
                    id=normalize_member_id(record[schema.SEMESTRE_ID]),
                    name=str(record[schema.SEMESTRE_NOME]).strip(),
                    start_date=record[schema.SEMESTRE_INICIO],
                    end_date=record[schema.SEMESTRE_FIM],
                    is_active=_as_bool(record.get(schema.SEMESTRE_ATIVO)),
                ))
            except ValidationError:
                invalid += 1

        if invalid:
            log.warning(f"Factory: {invalid} semestres inválidos descartados (datas ausentes ou invertidas).")
        return semesters


def normalize_attendance_df(df: pd.DataFrame) -> pd.DataFrame:
    """Renomeia a tabela bruta de presença para o schema interno."""
    if df is None or df.empty:
        return pd.DataFrame(columns=[schema.COL_MEMBER_ID, schema.COL_DATE, schema.COL_STATUS])

    df_copy = df.copy()
    df_copy.columns = df_copy.columns.str.strip()
    df_copy.rename(columns={
        schema.PRESENCA_MEMBRO_ID: schema.COL_MEMBER_ID,
        schema.PRESENCA_DATA: schema.COL_DATE,
        schema.PRESENCA_STATUS: schema.COL_STATUS,
    }, inplace=True)
    return df_copy


def _text_or_none(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "sim", "yes", "y")
    if value is None or pd.isna(value):
        return False
    return bool(value)
