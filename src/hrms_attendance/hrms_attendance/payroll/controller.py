from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/compute", methods=["POST"], endpoint="payroll_compute")
    def payroll_compute():
        data = request.get_json(silent=True) or {}
        try:
            result = container.payroll_service.compute_run(data.get("runId") or data.get("run_id"))
            return jsonify(result.to_dict()), 200
        except Exception as e:
            logger.exception("Error computing payroll")
            return jsonify({"success": False, "error": str(e)}), 400

    @app.route("/api/payroll/items/<int:item_id>/paid", methods=["POST"], endpoint="payroll_mark_paid")
    def payroll_mark_paid(item_id: int):
        data = request.get_json(silent=True) or {}
        try:
            container.payroll_service.mark_paid(
                item_id=item_id,
                evidence_url=data.get("evidence_url"),
                remarks=data.get("remarks"),
            )
            return jsonify({"success": True}), 200
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except Exception as e:
            logger.exception("Error in payroll mark paid")
            return jsonify({"success": False, "error": str(e)}), 400
