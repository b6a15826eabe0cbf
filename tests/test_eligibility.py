from datetime import date

import pandas as pd

from celula.domain.models.member import Member, derive_eligibility_start, normalize_member_id
from celula.domain.services.eligibility import eligible_members, is_eligible


def test_elegibilidade_vem_da_data_de_atribuicao():
    assert derive_eligibility_start("2024-03-15", 2020) == date(2024, 3, 15)
    assert derive_eligibility_start("2024-03-15T10:00:00", None) == date(2024, 3, 15)


def test_elegibilidade_cai_para_ano_de_entrada():
    assert derive_eligibility_start(None, 2023) == date(2023, 1, 1)
    assert derive_eligibility_start("", "2022") == date(2022, 1, 1)
    assert derive_eligibility_start(float("nan"), 2021.0) == date(2021, 1, 1)


def test_elegibilidade_sempre_definida():
    assert derive_eligibility_start(None, None) == date(2000, 1, 1)
    assert derive_eligibility_start("data ruim", "ano ruim") == date(2000, 1, 1)


def test_comparacao_inclusiva_e_so_por_data():
    membro = Member(member_id="7", eligibility_start_date="2024-03-17")
    assert not is_eligible(membro, date(2024, 3, 10))
    assert is_eligible(membro, date(2024, 3, 17))
    assert membro.is_eligible("2024-03-17T00:00:00")
    assert not membro.is_eligible("sem data")


def test_filtra_membros_elegiveis():
    antigo = Member(member_id="1", eligibility_start_date=date(2023, 1, 1))
    novo = Member(member_id="2", eligibility_start_date=date(2024, 3, 15))
    assert eligible_members([antigo, novo], date(2024, 3, 10)) == [antigo]
    assert eligible_members([antigo, novo], date(2024, 3, 17)) == [antigo, novo]


def test_id_do_membro_normalizado():
    assert normalize_member_id(12.0) == "12"
    assert normalize_member_id(" 12.0 ") == "12"
    assert normalize_member_id("abc.0") == "abc.0"
    assert normalize_member_id(float("nan")) is None
    assert normalize_member_id("") is None
    assert Member(member_id=5, eligibility_start_date="2024-01-01").member_id == "5"


def test_data_nat_nao_e_elegivel():
    membro = Member(member_id="7", eligibility_start_date="2024-03-17")
    assert not membro.is_eligible(pd.NaT)
    assert membro.is_eligible(pd.Timestamp("2024-03-17 08:00"))
