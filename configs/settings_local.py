import os

MODO_EXECUCAO = 'local'

# 'range', 'month' ou 'semester'
TIPO_PERIODO = 'month'

DATA_INICIO = None
DATA_FIM = None

ANO_DO_RELATORIO = 2025
MES_DO_RELATORIO = 11

# None = semestre ativo do catálogo
SEMESTRE_ID = None

# 'YYYY-MM-DD' para reprocessar como se fosse outro dia; None = hoje
DATA_REFERENCIA = None

LIMIAR_AUSENCIAS_CONSECUTIVAS = 3

ROTULO_PERIODO = None

BASE_DIR = os.getcwd()

CAMINHOS = {
    'local': {
        'dados': os.path.join(BASE_DIR, "raw_data_local"),
        'output': os.path.join(BASE_DIR, "output"),
    }
}

ARQUIVO_MEMBROS_LOCAL = "members.csv"
ARQUIVO_PRESENCAS_LOCAL = "attendance.csv"
ARQUIVO_SEMESTRES_LOCAL = "semesters.csv"
