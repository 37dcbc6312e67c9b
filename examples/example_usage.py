"""Exemplo: usar a camada de serviços sem passar pelo Flask.

Os controllers são só uma casca fina; as regras ficam nos services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.ebd_gestor.ebd_gestor.container import build_container
from src.ebd_gestor.ebd_gestor.core.enums import Granularity
from src.ebd_gestor.ebd_gestor.reports.temporal import DateRangeWindow


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    report = container.report_service.build_general_report(
        window=DateRangeWindow(),
        church=container.settings_repo.get_church_settings(),
    )
    for row in [*report.rows, report.total]:
        print(f"{row.class_name:<20} {row.total_present:>4} {row.percentage:6.1f}%")

    view = container.report_service.build_dashboard(granularity=Granularity.YEAR, reference=date.today())
    print(view.period_label, [(p.label, p.value) for p in view.trend])

    print("Baixa frequência:", container.low_frequency_service.preview())


if __name__ == "__main__":
    main()
