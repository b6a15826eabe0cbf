from types import SimpleNamespace

import pandas as pd

from celula.utils import schema
from celula.utils.data_writer import DataWriter


def _config(tmp_path, rotulo=None):
    return SimpleNamespace(
        MODO_EXECUCAO='local',
        CAMINHOS={'local': {'output': str(tmp_path / "saida")}},
        ROTULO_PERIODO=rotulo,
    )


def test_salva_excel_com_todas_as_abas(tmp_path):
    tabs = {
        schema.ABA_RESUMO_POR_CELULA: pd.DataFrame({
            schema.OUT_COL_CELULA: ["Centro", "Norte"],
            schema.OUT_COL_TAXA: [95, 40],
        }),
        schema.ABA_CHECAGENS_INCOMPLETAS: pd.DataFrame(),
    }
    writer = DataWriter(_config(tmp_path, rotulo="2024-03-01_2024-03-31"))
    path = writer.save_report_to_excel(tabs, "relatorio")

    assert path.endswith("2024-03-01_2024-03-31 - relatorio.xlsx")
    abas = pd.ExcelFile(path).sheet_names
    assert abas == [schema.ABA_RESUMO_POR_CELULA, schema.ABA_CHECAGENS_INCOMPLETAS]
    lido = pd.read_excel(path, sheet_name=schema.ABA_RESUMO_POR_CELULA)
    assert lido[schema.OUT_COL_TAXA].tolist() == [95, 40]


def test_sem_rotulo_usa_carimbo_de_horario(tmp_path):
    writer = DataWriter(_config(tmp_path))
    path = writer.save_report_to_excel({"aba": pd.DataFrame({"a": [1]})}, "relatorio")
    assert "relatorio_" in path and path.endswith(".xlsx")


def test_item_invalido_e_ignorado(tmp_path, caplog):
    writer = DataWriter(_config(tmp_path))
    path = writer.save_report_to_excel(
        {"ok": pd.DataFrame({"a": [1]}), "quebrado": "não é tabela"}, "relatorio"
    )
    assert pd.ExcelFile(path).sheet_names == ["ok"]
    assert "quebrado" in caplog.text and "ignorada" in caplog.text
