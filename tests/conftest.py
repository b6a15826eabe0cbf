# tests/conftest.py

import pytest
from datetime import date

from celula.utils.data_reader import DataReader
from celula.domain.factory import MemberFactory, SemesterFactory, normalize_attendance_df
from celula.domain.models.period import MonthSelector
from celula.domain.services.attendance_index import AttendanceIndex
from celula.domain.services.period_resolver import resolve_period
from tests import config_test

TODAY = date(2024, 6, 30)


@pytest.fixture(scope="session")
def raw_data():
    """Lê os CSVs mock uma única vez."""
    print("\n(GLOBAL) Lendo dados mock uma única vez: ")
    reader = DataReader(config=config_test)
    return reader.load_all_sources()


@pytest.fixture(scope="session")
def members(raw_data):
    return MemberFactory().create_members_from_df(raw_data['membros'])


@pytest.fixture(scope="session")
def semesters(raw_data):
    return SemesterFactory().create_semesters_from_df(raw_data['semestres'])


@pytest.fixture(scope="session")
def attendance_index(raw_data):
    return AttendanceIndex.from_dataframe(normalize_attendance_df(raw_data['presencas']))


@pytest.fixture(scope="session")
def march_period(semesters):
    """Março/2024 recortado pelo semestre ativo (2024-02-01 a 2024-06-30)."""
    period = resolve_period(MonthSelector(year=2024, month=3), semesters, TODAY)
    assert period is not None, "Março/2024 deveria resolver dentro do semestre ativo"
    return period


@pytest.fixture
def members_by_id(members):
    return {m.member_id: m for m in members}
