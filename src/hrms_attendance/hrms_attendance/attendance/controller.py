from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import DomainError, NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/process", methods=["POST"], endpoint="attendance_process")
    def attendance_process():
        """Reconcile uploaded swipes with approved leave into attendance_status.

        Body (optional): {"start_date": "YYYY-MM-DD", "end_date": "YYYY-MM-DD"}.
        Without both dates the trailing 31-day window is used.
        """
        data = request.get_json(silent=True) or {}
        try:
            summary = container.reconciliation_service.process(data.get("start_date"), data.get("end_date"))
            return jsonify(summary.to_dict()), 200
        except Exception as e:
            logger.exception("Error processing attendance")
            return jsonify({"success": False, "error": str(e)}), 400

    @app.route("/api/attendance/summary", methods=["GET", "POST"], endpoint="attendance_month_summary")
    def attendance_month_summary():
        if request.method == "POST":
            data = request.get_json(silent=True) or {}
        else:
            data = request.args
        try:
            summary = container.summary_service.month_summary(
                employee_id=data.get("employee_id"),
                month=data.get("month"),
                year=data.get("year"),
            )
            return jsonify(summary.to_dict()), 200
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except DomainError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Error calculating attendance summary")
            return jsonify({"error": "Failed to fetch attendance records"}), 500
