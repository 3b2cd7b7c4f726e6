from __future__ import annotations

import io
import logging
from functools import wraps

from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import DomainError
from .chart_image import render_donut_png

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "y", "on"}


def register(app: Flask, container: Container) -> None:
    service = container.roster_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return jsonify({"success": False, "message": "Internal error"}), 500

        return wrapper

    def _payload() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _view_response(**extra):
        body = {"success": True, **extra, "view": service.view.to_dict()}
        return jsonify(body)

    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    @json_errors
    def students_list():
        selector = request.args.get("filter")
        view = service.preview_filter(selector) if selector else service.view
        return jsonify(view.to_dict())

    @app.route("/api/students", methods=["POST"], endpoint="students_add")
    @json_errors
    def students_add():
        data = _payload()
        student = service.add(data.get("name") or "", data.get("category") or "School")
        if student is None:
            return jsonify({"success": False, "message": "Name is required"}), 400
        return _view_response(student=student.to_dict()), 201

    @app.route("/api/students/<int:internal_id>", methods=["DELETE"], endpoint="students_delete")
    @json_errors
    def students_delete(internal_id: int):
        confirmed = (request.args.get("confirm") or "").lower() in TRUTHY
        deleted = service.delete(internal_id, confirmed=confirmed)
        return _view_response(deleted=deleted)

    @app.route("/api/students/<int:internal_id>/attendance", methods=["PUT"], endpoint="students_attendance")
    @json_errors
    def students_attendance(internal_id: int):
        updated = service.set_attendance(internal_id, _payload().get("attendance"))
        return _view_response(updated=updated)

    @app.route("/api/filter", methods=["POST"], endpoint="filter_apply")
    @json_errors
    def filter_apply():
        service.apply_filter(_payload().get("filter") or "All")
        return _view_response()

    @app.route("/api/filter", methods=["DELETE"], endpoint="filter_clear")
    @json_errors
    def filter_clear():
        service.clear_filter()
        return _view_response()

    # ===== EDIT MODAL =====

    @app.route("/api/edit", methods=["GET"], endpoint="edit_state")
    @json_errors
    def edit_state():
        return jsonify(service.edit.to_dict())

    @app.route("/api/students/<int:internal_id>/edit", methods=["POST"], endpoint="edit_open")
    @json_errors
    def edit_open(internal_id: int):
        draft = service.open_edit(internal_id)
        if draft is None:
            return jsonify({"success": False, "message": "Student not found"}), 404
        return jsonify({"success": True, "edit": service.edit.to_dict()})

    @app.route("/api/edit", methods=["PATCH"], endpoint="edit_update")
    @json_errors
    def edit_update():
        data = _payload()
        service.update_edit(**data)
        return jsonify({"success": True, "edit": service.edit.to_dict()})

    @app.route("/api/edit/commit", methods=["POST"], endpoint="edit_commit")
    @json_errors
    def edit_commit():
        committed = service.commit_edit()
        return _view_response(committed=committed, edit=service.edit.to_dict())

    @app.route("/api/edit/cancel", methods=["POST"], endpoint="edit_cancel")
    @json_errors
    def edit_cancel():
        service.cancel_edit()
        return jsonify({"success": True, "edit": service.edit.to_dict()})

    @app.route("/api/edit/finalize", methods=["POST"], endpoint="edit_finalize")
    @json_errors
    def edit_finalize():
        service.finalize_close()
        return jsonify({"success": True, "edit": service.edit.to_dict()})

    # ===== CHART =====

    @app.route("/api/chart", methods=["GET"], endpoint="chart_data")
    @json_errors
    def chart_data():
        return jsonify(service.view.chart.to_dict())

    @app.route("/api/chart.png", methods=["GET"], endpoint="chart_image")
    @json_errors
    def chart_image():
        buf = io.BytesIO(render_donut_png(service.view.chart))
        return send_file(buf, mimetype="image/png")
