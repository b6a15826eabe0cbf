import os
import logging
import pandas as pd

log = logging.getLogger(__name__)

# chave no dict de saída -> (atributo do config com o nome do arquivo, obrigatório)
FONTES_LOCAIS = {
    "membros": ("ARQUIVO_MEMBROS_LOCAL", True),
    "presencas": ("ARQUIVO_PRESENCAS_LOCAL", True),
    "semestres": ("ARQUIVO_SEMESTRES_LOCAL", False),
}


class DataReader:

    def __init__(self, config):
        self.config = config
        log.info("Leitor de Dados: Inicializado.")

    def load_all_sources(self) -> dict:
        mode = self.config.MODO_EXECUCAO
        log.info(f"Leitor de Dados: Executando em MODO {mode.upper()}.")

        if mode != 'local':
            raise ValueError(f"Modo de execução não suportado: '{mode}'.")

        data_path = self.config.CAMINHOS['local']['dados']
        return {
            key: self._read_csv(os.path.join(data_path, getattr(self.config, attr)), required)
            for key, (attr, required) in FONTES_LOCAIS.items()
        }

    def _read_csv(self, full_path: str, required: bool) -> pd.DataFrame:
        if not os.path.exists(full_path):
            if not required:
                log.warning(f"Leitor de Dados: '{full_path}' não encontrado. Seguindo sem ele.")
                return pd.DataFrame()
            log.error(f"Leitor de Dados: Arquivo não encontrado: '{full_path}'.")
            raise FileNotFoundError(f"Arquivo não encontrado: '{full_path}'.")

        log.info(f"Leitor de Dados: Lendo arquivo local '{full_path}'...")
        # tudo como texto: datas seguem 'YYYY-MM-DD' e ids não viram float
        return pd.read_csv(full_path, dtype=str)
