from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify, request

from ..core.constants import MONTH_NAMES
from ..core.enums import StudentStatus
from ..core.exceptions import NotFoundError
from ..container import Container
from .model import Student


def _student_to_json(s: Student) -> dict:
    return {
        "id": s.student_id,
        "name": s.name,
        "birth_date": s.birth_date,
        "class_id": s.class_id,
        "active": s.active,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/registry/students", methods=["GET"], endpoint="registry_students")
    def registry_students():
        try:
            status = StudentStatus((request.args.get("status") or StudentStatus.ACTIVE.value).lower())
        except ValueError:
            return jsonify({"success": False, "message": "Status inválido (active, inactive)"}), 400

        students = container.registry_service.search_students(request.args.get("q"), status=status)
        return jsonify([_student_to_json(s) for s in students])

    @app.route("/api/registry/birthdays", methods=["GET"], endpoint="registry_birthdays")
    def registry_birthdays():
        raw = request.args.get("month")
        try:
            month = int(raw) if raw else date.today().month
        except ValueError:
            month = 0
        if not 1 <= month <= 12:
            return jsonify({"success": False, "message": "Mês inválido (1-12)"}), 400

        students = container.registry_service.birthdays(month)
        return jsonify({"month": MONTH_NAMES[month - 1], "students": [_student_to_json(s) for s in students]})

    @app.route("/api/registry/classes", methods=["GET"], endpoint="registry_classes")
    def registry_classes():
        return jsonify([asdict(c) for c in container.registry_service.class_overview()])

    @app.route("/api/registry/classes/<class_id>/students", methods=["GET"], endpoint="registry_class_roster")
    def registry_class_roster(class_id: str):
        try:
            students = container.registry_service.class_roster(class_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify([_student_to_json(s) for s in students])

    @app.route("/api/registry/low-frequency", methods=["GET"], endpoint="registry_low_frequency_preview")
    def registry_low_frequency_preview():
        return jsonify({"student_ids": container.low_frequency_service.preview()})

    @app.route("/api/registry/low-frequency", methods=["POST"], endpoint="registry_low_frequency")
    def registry_low_frequency():
        """Move students with too many consecutive absences to the inactive tab."""
        result = container.low_frequency_service.run()
        return jsonify(
            {
                "success": True,
                "moved_count": result.moved_count,
                "student_ids": result.student_ids,
                "message": result.message,
            }
        )
