from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..core.exceptions import DomainError, NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def _leave_to_json(req) -> dict:
    return {
        "id": req.request_id,
        "employee_id": req.employee_id,
        "type": req.leave_type,
        "start_date": req.start_date.isoformat() if req.start_date else None,
        "end_date": req.end_date.isoformat() if req.end_date else None,
        "days": req.days,
        "reason": req.reason,
        "status": req.status.value,
        "approver_user_id": req.approver_user_id,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves/compute-days", methods=["POST"], endpoint="leave_compute_days")
    def leave_compute_days():
        data = request.get_json(silent=True) or {}
        try:
            days = container.leave_service.compute_days(
                parse_optional_date(data.get("start_date"), "start_date"),
                parse_optional_date(data.get("end_date"), "end_date"),
            )
            return jsonify({"success": True, "days": days}), 200
        except DomainError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            logger.exception("Error in leave compute days")
            return jsonify({"success": False, "error": str(e)}), 400

    @app.route("/api/leaves/status", methods=["POST"], endpoint="leave_set_status")
    def leave_set_status():
        data = request.get_json(silent=True) or {}
        try:
            updated = container.leave_service.set_status(
                request_id=data.get("id"),
                status=data.get("status"),
                approver_user_id=data.get("approver_user_id"),
            )
            return jsonify({"success": True, "data": _leave_to_json(updated)}), 200
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except DomainError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            logger.exception("Error in leave set status")
            return jsonify({"success": False, "error": f"Failed to update leave status: {e}"}), 400
