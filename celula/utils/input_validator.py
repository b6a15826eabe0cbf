import logging

from . import schema

log = logging.getLogger(__name__)


def validar_estrutura_inputs(dados_brutos: dict) -> bool:
    """
    Confere se membros e presenças chegaram com as colunas do schema.
    Presenças vazias e catálogo de semestres ausente só geram aviso.
    """
    log.info("Validação: Verificando estrutura dos dados de entrada...")

    erros_encontrados = []

    # --- 1. Membros ---
    df_membros = dados_brutos.get('membros')
    if df_membros is None or df_membros.empty:
        erros_encontrados.append("Tabela de 'Membros' não foi carregada ou está vazia.")
    else:
        faltantes = _colunas_faltantes(df_membros, schema.COLUNAS_OBRIGATORIAS_MEMBROS)
        if faltantes:
            erros_encontrados.append(f"Membros: Faltam as colunas obrigatórias: {faltantes}")
        else:
            log.info(f"Validação: Membros OK ({len(df_membros)} registros).")

    # --- 2. Presenças ---
    df_presencas = dados_brutos.get('presencas')
    if df_presencas is None:
        erros_encontrados.append("Tabela de 'Presenças' não foi carregada.")
    elif df_presencas.empty:
        log.warning("Validação: Presenças vazia. Todos os domingos ficarão sem checagem.")
    else:
        faltantes = _colunas_faltantes(df_presencas, schema.COLUNAS_OBRIGATORIAS_PRESENCA)
        if faltantes:
            erros_encontrados.append(f"Presenças: Faltam as colunas obrigatórias: {faltantes}")
        else:
            log.info(f"Validação: Presenças OK ({len(df_presencas)} registros).")

    # --- 3. Semestres (opcional) ---
    df_semestres = dados_brutos.get('semestres')
    if df_semestres is not None and not df_semestres.empty:
        faltantes = _colunas_faltantes(df_semestres, schema.COLUNAS_OBRIGATORIAS_SEMESTRES)
        if faltantes:
            erros_encontrados.append(f"Semestres: Faltam as colunas obrigatórias: {faltantes}")
    else:
        log.warning("Validação: Catálogo de semestres vazio (períodos por semestre não serão resolvidos).")

    if erros_encontrados:
        for erro in erros_encontrados:
            log.error(f"Validação: {erro}")
        return False

    log.info("Validação: Todos os inputs estão saudáveis.")
    return True


def _colunas_faltantes(df, esperadas) -> list:
    atuais = [str(c).strip() for c in df.columns]
    return [col for col in esperadas if col not in atuais]
