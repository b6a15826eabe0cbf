import pytest
from types import SimpleNamespace

from celula.utils.data_reader import DataReader
from celula.utils.input_validator import validar_estrutura_inputs
from tests import config_test


@pytest.fixture
def data_reader_local():
    return DataReader(config=config_test)


def test_leitura_dados_locais(data_reader_local):
    print("\n(teste) Leitura de Dados Locais (Mock):")
    dados = data_reader_local.load_all_sources()

    assert len(dados['membros']) == 6, f"Esperado 6 linhas de membros, lidas {len(dados['membros'])}."
    assert len(dados['presencas']) == 21, f"Esperado 21 presenças, lidas {len(dados['presencas'])}."
    assert len(dados['semestres']) == 3
    # ids continuam texto
    assert dados['membros']['memberId'].iloc[4] == "2.0"


def test_arquivo_obrigatorio_ausente(tmp_path):
    config = SimpleNamespace(
        MODO_EXECUCAO='local',
        CAMINHOS={'local': {'dados': str(tmp_path)}},
        ARQUIVO_MEMBROS_LOCAL="members.csv",
        ARQUIVO_PRESENCAS_LOCAL="attendance.csv",
        ARQUIVO_SEMESTRES_LOCAL="semesters.csv",
    )
    with pytest.raises(FileNotFoundError):
        DataReader(config=config).load_all_sources()


def test_catalogo_de_semestres_e_opcional(tmp_path):
    (tmp_path / "members.csv").write_text("memberId,name\n1,Ana\n", encoding="utf-8")
    (tmp_path / "attendance.csv").write_text("memberId,date,status\n", encoding="utf-8")
    config = SimpleNamespace(
        MODO_EXECUCAO='local',
        CAMINHOS={'local': {'dados': str(tmp_path)}},
        ARQUIVO_MEMBROS_LOCAL="members.csv",
        ARQUIVO_PRESENCAS_LOCAL="attendance.csv",
        ARQUIVO_SEMESTRES_LOCAL="semesters.csv",
    )
    dados = DataReader(config=config).load_all_sources()
    assert dados['semestres'].empty
    assert dados['presencas'].empty
    assert validar_estrutura_inputs(dados)


def test_modo_nao_suportado():
    config = SimpleNamespace(MODO_EXECUCAO='colab')
    with pytest.raises(ValueError):
        DataReader(config=config).load_all_sources()


def test_validacao_do_mock(raw_data):
    assert validar_estrutura_inputs(raw_data)


def test_validacao_acusa_coluna_faltante(raw_data, caplog):
    dados = dict(raw_data)
    dados['presencas'] = raw_data['presencas'].drop(columns=['status'])
    assert not validar_estrutura_inputs(dados)
    assert "status" in caplog.text


def test_validacao_sem_membros(raw_data):
    dados = dict(raw_data)
    dados['membros'] = None
    assert not validar_estrutura_inputs(dados)
