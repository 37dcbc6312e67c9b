from __future__ import annotations

import csv
import io
from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, shift_reference
from ..core.enums import Granularity
from ..core.exceptions import ValidationError
from ..container import Container
from .serializers import class_row_to_dict, money, student_row_to_dict, trend_point_to_dict
from .temporal import DateRangeWindow

STUDENT_CSV_FIELDS = [
    "posicao",
    "aluno",
    "classe",
    "matriculados_na_classe",
    "presencas",
    "total_de_aulas",
    "frequencia",
]


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: Optional[str], field_name: str) -> Optional[date]:
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{field_name} inválida (AAAA-MM-DD)")

    def _parse_granularity(value: Optional[str]) -> Granularity:
        try:
            return Granularity((value or Granularity.MONTH.value).lower())
        except ValueError:
            raise ValidationError("Filtro inválido (day, month, quarter, year)")

    def _range_window() -> DateRangeWindow:
        return DateRangeWindow(
            start=_parse_date(request.args.get("start"), "Data inicial"),
            end=_parse_date(request.args.get("end"), "Data final"),
        )

    def _parse_int(value: Optional[str], field_name: str) -> Optional[int]:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"{field_name} inválido")

    def _shift(reference: date, granularity: Granularity, steps: int) -> date:
        try:
            return shift_reference(reference, granularity, steps)
        except (ValueError, OverflowError):
            raise ValidationError("Passo fora do calendário")

    def _bad_request(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    def _write_csv(*, fieldnames: list[str], rows: list[dict], filename: str):
        """Write rows to a CSV attachment (utf-8 with BOM so spreadsheets detect it)."""
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        try:
            granularity = _parse_granularity(request.args.get("granularity"))
            reference = _parse_date(request.args.get("date"), "Data") or date.today()
            # prev/next navigation: ?step=-1 goes one window back
            steps = _parse_int(request.args.get("step"), "Passo") or 0
            if steps:
                reference = _shift(reference, granularity, steps)
        except ValidationError as e:
            return _bad_request(e)

        view = container.report_service.build_dashboard(granularity=granularity, reference=reference)
        stats = view.stats
        return jsonify(
            {
                "period": view.period_label,
                "granularity": view.granularity.value,
                "stats": {
                    "active_students": stats.active_students_count,
                    "total_offerings": money(stats.total_offerings),
                    "total_visits": stats.total_visits,
                    "total_present": stats.total_present,
                    "avg_attendance": stats.avg_attendance,
                    "records_count": stats.records_count,
                },
                "class_attendance": [
                    {"class_id": b.class_id, "name": b.name, "presences": b.presences, "average": b.average}
                    for b in view.class_attendance
                ],
                "trend": [trend_point_to_dict(p) for p in view.trend],
            }
        )

    @app.route("/api/reports/classes", methods=["GET"], endpoint="report_classes")
    def report_classes():
        try:
            window = _range_window()
        except ValidationError as e:
            return _bad_request(e)

        report = container.report_service.build_general_report(
            window=window,
            church=container.settings_repo.get_church_settings(),
        )
        return jsonify(
            {
                "church_name": report.church_name,
                "address": report.address,
                "period": report.period_label,
                "rows": [class_row_to_dict(r) for r in report.rows],
                "total": class_row_to_dict(report.total),
            }
        )

    @app.route("/api/reports/classes.csv", methods=["GET"], endpoint="report_classes_csv")
    def report_classes_csv():
        try:
            window = _range_window()
        except ValidationError as e:
            return _bad_request(e)

        report = container.report_service.build_general_report(window=window)
        rows = [class_row_to_dict(r) for r in [*report.rows, report.total]]
        start = request.args.get("start") or "completo"
        return _write_csv(
            fieldnames=[
                "class_name",
                "enrolled_count",
                "total_present",
                "total_absent",
                "total_visitors",
                "total_pv",
                "total_bibles",
                "total_magazines",
                "total_offerings",
                "percentage",
            ],
            rows=rows,
            filename=f"relatorio_geral_ebd_{start}.csv",
        )

    def _student_ranking():
        return container.report_service.build_student_ranking(
            window=_range_window(),
            search=request.args.get("q"),
            class_id=request.args.get("class_id") or None,
            limit=_parse_int(request.args.get("limit"), "Limite"),
        )

    @app.route("/api/reports/students", methods=["GET"], endpoint="report_students")
    def report_students():
        try:
            ranking = _student_ranking()
        except ValidationError as e:
            return _bad_request(e)

        return jsonify({"period": ranking.period_label, "rows": [student_row_to_dict(r) for r in ranking.rows]})

    @app.route("/api/reports/students.csv", methods=["GET"], endpoint="report_students_csv")
    def report_students_csv():
        try:
            ranking = _student_ranking()
        except ValidationError as e:
            return _bad_request(e)

        rows = [
            {
                "posicao": r.position,
                "aluno": r.name,
                "classe": r.class_name,
                "matriculados_na_classe": ranking.enrolled_by_class.get(r.class_id, 0),
                "presencas": r.present_count,
                "total_de_aulas": r.total_classes,
                "frequencia": f"{r.percentage:.2f}",
            }
            for r in ranking.rows
        ]
        start = request.args.get("start") or "geral"
        return _write_csv(
            fieldnames=STUDENT_CSV_FIELDS,
            rows=rows,
            filename=f"ranking_alunos_ebd_{start}.csv",
        )

    @app.route("/api/reports/podium", methods=["GET"], endpoint="report_podium")
    def report_podium():
        try:
            window = _range_window()
        except ValidationError as e:
            return _bad_request(e)

        podium = container.report_service.build_podium(window=window, search=request.args.get("q"))
        return jsonify(
            {
                "period": window.label,
                "classes": {cid: [student_row_to_dict(r) for r in rows] for cid, rows in podium.items()},
            }
        )
