import logging
from datetime import date
from typing import Optional

from .utils.data_reader import DataReader
from .utils.data_writer import DataWriter
from .utils.date_utils import parse_local_date
from .utils.input_validator import validar_estrutura_inputs
from .domain.factory import MemberFactory, SemesterFactory, normalize_attendance_df
from .domain.models.period import MonthSelector, RangeSelector, SemesterSelector
from .domain.services.attendance_index import AttendanceIndex
from .domain.services.period_resolver import find_current_semester, resolve_period
from .domain.services.report_generators.member_stats_sheet import MemberStatsSheetGenerator
from .domain.services.report_generators.cell_summary_sheet import CellSummarySheetGenerator
from .domain.services.report_generators.incomplete_checks_sheet import IncompleteChecksSheetGenerator
from .domain.services.report_generators.attendance_matrix_sheet import AttendanceMatrixSheetGenerator

log = logging.getLogger(__name__)


class AttendancePipeline:

    def __init__(self, data_reader: DataReader, data_writer: DataWriter, config: object,
                 today: Optional[date] = None):
        self.data_reader = data_reader
        self.data_writer = data_writer
        self.config = config
        self.today = today or parse_local_date(getattr(config, 'DATA_REFERENCIA', None)) or date.today()
        self.member_factory = MemberFactory()
        self.semester_factory = SemesterFactory()
        log.info("Pipeline de Presença: Iniciando execução.")

    def build_selector_from_config(self, semesters=None):
        kind = getattr(self.config, 'TIPO_PERIODO', 'month')

        if kind == 'range':
            return RangeSelector(
                start_date=getattr(self.config, 'DATA_INICIO', None),
                end_date=getattr(self.config, 'DATA_FIM', None),
            )
        if kind == 'month':
            return MonthSelector(
                year=self.config.ANO_DO_RELATORIO,
                month=self.config.MES_DO_RELATORIO,
                semester_id=getattr(self.config, 'SEMESTRE_ID', None),
            )
        if kind == 'semester':
            semester_id = getattr(self.config, 'SEMESTRE_ID', None)
            if semester_id is None:
                current = find_current_semester(semesters or [], self.today)
                if current is None:
                    raise ValueError("TIPO_PERIODO 'semester' sem SEMESTRE_ID e sem semestres no catálogo.")
                semester_id = current.id
            return SemesterSelector(semester_id=semester_id)

        raise ValueError(f"TIPO_PERIODO desconhecido: '{kind}'.")

    def run(self) -> str:
        try:
            log.info("Leitura: Carregando fontes de dados (CSV)...")
            all_data = self.data_reader.load_all_sources()

            if not validar_estrutura_inputs(all_data):
                raise ValueError("Estrutura dos dados de entrada inválida.")

            log.info("Processamento: Montando membros, semestres e índice de presença...")
            members = self.member_factory.create_members_from_df(all_data['membros'])
            semesters = self.semester_factory.create_semesters_from_df(all_data.get('semestres'))
            index = AttendanceIndex.from_dataframe(normalize_attendance_df(all_data['presencas']))

            selector = self.build_selector_from_config(semesters)
            period = resolve_period(selector, semesters, self.today)
            if period is None:
                raise ValueError(f"Não foi possível resolver o período a partir de {selector!r}.")

            self.config.ROTULO_PERIODO = f"{period.start_date.isoformat()}_{period.effective_end.isoformat()}"
            log.info(
                f"Período: {period.start_date} a {period.end_date} "
                f"(limitado a {period.effective_end}, referência {self.today})."
            )
            if period.is_empty:
                log.warning("Período: Nenhum domingo decorrido no período. As abas ficarão zeradas.")

            log.info("Geração de Abas: Formatando relatórios de saída...")
            member_gen = MemberStatsSheetGenerator(members, index, period)
            member_stats = member_gen.build_stats()

            final_tabs = {}
            final_tabs.update(member_gen.generate())
            final_tabs.update(CellSummarySheetGenerator(member_stats, self.config).generate())
            final_tabs.update(IncompleteChecksSheetGenerator(members, index, period).generate())
            final_tabs.update(AttendanceMatrixSheetGenerator(members, index, period).generate())

            log.info(f"Geração de Abas: {len(final_tabs)} abas criadas.")

            output_file_path = self.data_writer.save_report_to_excel(
                report_tabs=final_tabs,
                base_filename="relatorio_presenca_celulas"
            )

            log.info("Sucesso: Pipeline concluído.")
            log.info(f"Arquivo final salvo em: {output_file_path}")
            return output_file_path

        except Exception as e:
            log.error(f"Falha no Pipeline: {e}", exc_info=True)
            return ""
