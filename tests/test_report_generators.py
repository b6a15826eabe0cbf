from datetime import date

import pandas as pd

from celula.domain.models.member import Member
from celula.domain.models.period import RangeSelector
from celula.domain.services.attendance_index import AttendanceIndex
from celula.domain.services.period_resolver import resolve_period
from celula.domain.services.report_generators.attendance_matrix_sheet import AttendanceMatrixSheetGenerator
from celula.domain.services.report_generators.cell_summary_sheet import CellSummarySheetGenerator
from celula.domain.services.report_generators.incomplete_checks_sheet import IncompleteChecksSheetGenerator
from celula.domain.services.report_generators.member_stats_sheet import MemberStatsSheetGenerator
from celula.utils import schema
from tests import config_test


def _por_membro(members, attendance_index, march_period) -> pd.DataFrame:
    tabs = MemberStatsSheetGenerator(members, attendance_index, march_period).generate()
    return tabs[schema.ABA_RESUMO_POR_MEMBRO].set_index(schema.OUT_COL_MEMBRO)


def test_resumo_por_membro(members, attendance_index, march_period):
    print("\n(teste) Resumo por membro em março/2024:")
    df = _por_membro(members, attendance_index, march_period)
    print(df.to_string())

    assert list(df.index) == ["Ana", "Bruno", "Carla", "Davi"]
    colunas = [schema.OUT_COL_PRESENTES, schema.OUT_COL_AUSENTES, schema.OUT_COL_SEM_CHECAGEM,
               schema.OUT_COL_ESPERADOS, schema.OUT_COL_TAXA, schema.OUT_COL_AUSENCIAS_SEGUIDAS]
    assert df.loc["Ana", colunas].tolist() == [4, 1, 0, 5, 80, 0]
    # entrou em 15/03: o registro de 10/03 não conta
    assert df.loc["Bruno", colunas].tolist() == [2, 0, 1, 3, 67, 0]
    assert df.loc["Carla", colunas].tolist() == [1, 4, 0, 5, 20, 4]
    # 'LATE' em 17/03 fica sem checagem
    assert df.loc["Davi", colunas].tolist() == [4, 0, 1, 5, 80, 0]


def test_resumo_por_membro_sem_membros(attendance_index, march_period):
    tabs = MemberStatsSheetGenerator([], attendance_index, march_period).generate()
    assert tabs[schema.ABA_RESUMO_POR_MEMBRO].empty


def test_resumo_por_celula(members, attendance_index, march_period):
    stats = MemberStatsSheetGenerator(members, attendance_index, march_period).build_stats()
    tabs = CellSummarySheetGenerator(stats, config_test).generate()
    df = tabs[schema.ABA_RESUMO_POR_CELULA].set_index(schema.OUT_COL_CELULA)

    centro = df.loc["Célula Centro"]
    assert centro[schema.OUT_COL_TOTAL_MEMBROS] == 2
    assert centro[schema.OUT_COL_ESPERADOS] == 8
    assert centro[schema.OUT_COL_TAXA] == 75
    assert centro[schema.OUT_COL_SITUACAO] == "Regular"
    assert centro[schema.OUT_COL_AUSENTES_LONGOS] == 0

    norte = df.loc["Célula Norte"]
    assert norte[schema.OUT_COL_TAXA] == 50
    assert norte[schema.OUT_COL_SITUACAO] == "Atenção"
    assert norte[schema.OUT_COL_AUSENTES_LONGOS] == 1


def test_resumo_por_celula_vazio():
    tabs = CellSummarySheetGenerator(pd.DataFrame()).generate()
    assert tabs[schema.ABA_RESUMO_POR_CELULA].empty


def test_checagens_incompletas(members, attendance_index, march_period):
    tabs = IncompleteChecksSheetGenerator(members, attendance_index, march_period).generate()
    df = tabs[schema.ABA_CHECAGENS_INCOMPLETAS].set_index(schema.OUT_COL_CELULA)

    assert df.loc["Célula Centro", schema.OUT_COL_SEMANAS_INCOMPLETAS] == 1
    assert df.loc["Célula Centro", schema.OUT_COL_DATAS_INCOMPLETAS] == "2024-03-24"
    assert df.loc["Célula Norte", schema.OUT_COL_DATAS_INCOMPLETAS] == "2024-03-17"


def test_celula_completa_nao_aparece():
    membro = Member(member_id="1", eligibility_start_date="2024-01-01", cell_name="Célula Sul")
    index = AttendanceIndex.from_records([
        {"memberId": "1", "date": "2024-03-03", "status": "PRESENT"},
    ])
    period = resolve_period(RangeSelector(start_date="2024-03-01", end_date="2024-03-09"), [], date(2024, 6, 30))
    tabs = IncompleteChecksSheetGenerator([membro], index, period).generate()
    assert tabs[schema.ABA_CHECAGENS_INCOMPLETAS].empty


def test_matriz_de_presenca(members, attendance_index, march_period):
    tabs = AttendanceMatrixSheetGenerator(members, attendance_index, march_period).generate()
    matriz = tabs[schema.ABA_MATRIZ_PRESENCA].set_index(schema.OUT_COL_MEMBRO)

    domingos = ["2024-03-03", "2024-03-10", "2024-03-17", "2024-03-24", "2024-03-31"]
    assert [c for c in matriz.columns if c.startswith("2024-")] == domingos
    assert matriz.loc["Bruno", domingos].tolist() == ["-", "-", "PRESENT", "", "PRESENT"]
    assert matriz.loc["Ana", "2024-03-17"] == "ABSENT"
    assert matriz.loc["Davi", "2024-03-17"] == ""


def test_matriz_sem_domingos(members, attendance_index):
    tabs = AttendanceMatrixSheetGenerator(members, attendance_index, None).generate()
    assert tabs[schema.ABA_MATRIZ_PRESENCA].empty
