# 1. Nomes das Colunas de ENTRADA
# 'members.csv'
MEMBROS_ID = "memberId"
MEMBROS_NOME = "name"
MEMBROS_CELULA_ID = "cellId"
MEMBROS_CELULA_NOME = "cellName"
MEMBROS_DATA_ATRIBUICAO = "cellAssignmentDate"
MEMBROS_ANO_ENTRADA = "joinYear"

# 'attendance.csv'
PRESENCA_MEMBRO_ID = "memberId"
PRESENCA_DATA = "date"
PRESENCA_STATUS = "status"

# 'semesters.csv'
SEMESTRE_ID = "id"
SEMESTRE_NOME = "name"
SEMESTRE_INICIO = "startDate"
SEMESTRE_FIM = "endDate"
SEMESTRE_ATIVO = "isActive"

COLUNAS_OBRIGATORIAS_MEMBROS = [MEMBROS_ID, MEMBROS_NOME]
COLUNAS_OBRIGATORIAS_PRESENCA = [PRESENCA_MEMBRO_ID, PRESENCA_DATA, PRESENCA_STATUS]
COLUNAS_OBRIGATORIAS_SEMESTRES = [SEMESTRE_ID, SEMESTRE_NOME, SEMESTRE_INICIO, SEMESTRE_FIM]

# 2. Nomes das Colunas INTERNAS
COL_MEMBER_ID = "member_id"
COL_NAME = "name"
COL_CELL_ID = "cell_id"
COL_CELL_NAME = "cell_name"
COL_DATE = "date"
COL_STATUS = "status"

# 3. Valores de Status
STATUS_PRESENT = "PRESENT"
STATUS_ABSENT = "ABSENT"
BINARY_STATUSES = (STATUS_PRESENT, STATUS_ABSENT)

MATRIZ_NAO_ELEGIVEL = "-"
MATRIZ_SEM_CHECAGEM = ""

CELULA_SEM_NOME = "Sem Célula"

# 4. Calendário
SUNDAY = 6  # date.weekday()
DATA_BASE_PADRAO = "2000-01-01"
LIMIAR_AUSENCIAS_CONSECUTIVAS = 3

# Faixas de situação da célula (taxa em %)
FAIXA_ESTAVEL = 90
FAIXA_BOM = 80
FAIXA_REGULAR = 70
SITUACAO_ESTAVEL = "Estável"
SITUACAO_BOM = "Bom"
SITUACAO_REGULAR = "Regular"
SITUACAO_ATENCAO = "Atenção"

# 5. Nomes das Colunas de SAÍDA (Excel)
OUT_COL_ID = "Id"
OUT_COL_MEMBRO = "Membro"
OUT_COL_CELULA = "Célula"
OUT_COL_PRESENTES = "Presenças"
OUT_COL_AUSENTES = "Ausências"
OUT_COL_SEM_CHECAGEM = "Sem Checagem"
OUT_COL_ESPERADOS = "Domingos Esperados"
OUT_COL_TAXA = "Taxa (%)"
OUT_COL_AUSENCIAS_SEGUIDAS = "Ausências Seguidas"
OUT_COL_TOTAL_MEMBROS = "Total de Membros"
OUT_COL_AUSENTES_LONGOS = "Ausentes de Longo Prazo"
OUT_COL_SITUACAO = "Situação"
OUT_COL_SEMANAS_INCOMPLETAS = "Semanas Incompletas"
OUT_COL_DATAS_INCOMPLETAS = "Datas Incompletas"

COLUNAS_FIXAS_MATRIZ = [OUT_COL_CELULA, OUT_COL_MEMBRO, OUT_COL_ID]

# 6. Nomes das Abas (Tabs) Finais do Excel
ABA_RESUMO_POR_MEMBRO = "Resumo_por_Membro"
ABA_RESUMO_POR_CELULA = "Resumo_por_Celula"
ABA_CHECAGENS_INCOMPLETAS = "Checagens_Incompletas"
ABA_MATRIZ_PRESENCA = "Matriz_de_Presenca"

COLOR_RED_BG = '#FFC7CE'
COLOR_RED_FONT = '#9C0006'
COLOR_YELLOW_BG = '#FFEB9C'
COLOR_YELLOW_FONT = '#9C6500'
COLOR_GREEN_BG = '#C6EFCE'
COLOR_GREEN_FONT = '#006100'
