from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import CorruptStateError, NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _payload() -> dict:
        if request.is_json:
            data = request.get_json(silent=True)
            return data if isinstance(data, dict) else {}
        return request.form.to_dict()

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(CorruptStateError)
    def handle_corrupt_state(e: CorruptStateError):
        app.logger.error("Stored subject list is unreadable: %s", e)
        return jsonify({"error": str(e)}), 500

    @app.route("/api/subjects", methods=["GET"], endpoint="subjects_list")
    def subjects_list():
        return jsonify(
            {
                "threshold": service.threshold,
                "subjects": [s.to_dict() for s in service.list_summaries()],
            }
        )

    @app.route("/api/subjects", methods=["POST"], endpoint="subjects_create")
    def subjects_create():
        data = _payload()
        summary = service.add_subject(
            name=data.get("name"),
            credits=data.get("credits"),
            attended_classes=data.get("attendedClasses", 0),
            total_classes=data.get("totalClasses", 0),
        )
        return jsonify(summary.to_dict()), 201

    @app.route("/api/subjects/<int(signed=True):position>", methods=["GET"], endpoint="subjects_detail")
    def subjects_detail(position: int):
        return jsonify(service.get_summary(position).to_dict())

    @app.route("/api/subjects/<int(signed=True):position>/attended", methods=["POST"], endpoint="subjects_attended")
    def subjects_attended(position: int):
        return jsonify(service.mark_attended(position).to_dict())

    @app.route("/api/subjects/<int(signed=True):position>/missed", methods=["POST"], endpoint="subjects_missed")
    def subjects_missed(position: int):
        return jsonify(service.mark_missed(position).to_dict())

    @app.route("/api/subjects/<int(signed=True):position>", methods=["DELETE"], endpoint="subjects_delete")
    def subjects_delete(position: int):
        service.delete_subject(position)
        return "", 204
