import logging
from configs import settings_local as config
from celula.pipeline import AttendancePipeline
from celula.utils.data_reader import DataReader
from celula.utils.data_writer import DataWriter

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
log = logging.getLogger(__name__)


def run_local_pipeline():
    log.info("Iniciando Pipeline - MODO: LOCAL")

    if config.MODO_EXECUCAO != 'local':
        log.error("Erro: MODO_EXECUCAO em settings_local.py não está 'local'.")
        return ""

    tipo = getattr(config, 'TIPO_PERIODO', 'month')
    if tipo == 'month':
        log.info(f"Período de Análise: {config.ANO_DO_RELATORIO}-{config.MES_DO_RELATORIO:02d}")
    elif tipo == 'range':
        log.info(f"Período de Análise: {config.DATA_INICIO} a {config.DATA_FIM}")
    else:
        log.info(f"Período de Análise: semestre '{config.SEMESTRE_ID or 'atual'}'")

    log.info(f"Pasta de dados: {config.CAMINHOS['local']['dados']}")

    data_reader = DataReader(config=config)
    data_writer = DataWriter(config=config)

    pipeline = AttendancePipeline(
        data_reader=data_reader,
        data_writer=data_writer,
        config=config
    )

    return pipeline.run()


if __name__ == "__main__":
    run_local_pipeline()
