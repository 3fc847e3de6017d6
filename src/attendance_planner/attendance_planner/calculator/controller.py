from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.logging import get_logger
from ..common.validators import parse_optional_int, parse_optional_number
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = get_logger(__name__)


def _error(exc: Exception, status: int):
    return jsonify({
        "success": False,
        "code": getattr(exc, "code", type(exc).__name__),
        "message": str(exc),
    }), status


def _truthy(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/calculate", methods=["POST"], endpoint="api_calculate")
    def api_calculate():
        """Projection plus optional weekday plan for the calculator screen."""
        data = request.get_json(silent=True) or {}
        try:
            report = container.calculator_service.calculate(
                parse_optional_int(data.get("total_sessions")),
                parse_optional_int(data.get("attended_sessions")),
                parse_optional_number(data.get("target_percent")),
                capacity=data.get("weekly_capacity"),
                user_id=data.get("user_id") or None,
                use_schedule=_truthy(data.get("use_schedule", True)),
            )
            return jsonify({"success": True, "result": report.to_ui()}), 200
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            logger.exception("calculate_failed")
            return jsonify({"success": False, "message": "Calculation failed"}), 500

    @app.route("/api/users/<user_id>/weekly-capacity", methods=["GET"], endpoint="api_capacity_get")
    def api_capacity_get(user_id: str):
        try:
            capacity = container.capacity_service.get(user_id)
            return jsonify({
                "success": True,
                "weekly_capacity": capacity.as_dict(),
                "weekly_total": capacity.total,
                "has_schedule": container.capacity_service.has_schedule(user_id),
            }), 200
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            logger.exception("weekly_capacity_load_failed", user_id=user_id)
            return jsonify({"success": False, "message": "Failed to load weekly schedule"}), 500

    @app.route("/api/users/<user_id>/weekly-capacity", methods=["PUT"], endpoint="api_capacity_save")
    def api_capacity_save(user_id: str):
        data = request.get_json(silent=True)
        try:
            capacity = container.capacity_service.save(user_id, data)
            return jsonify({"success": True, "weekly_capacity": capacity.as_dict(), "weekly_total": capacity.total}), 200
        except ValidationError as e:
            return _error(e, 400)
        except Exception:
            logger.exception("weekly_capacity_save_failed", user_id=user_id)
            return jsonify({"success": False, "message": "Failed to save weekly schedule"}), 500

    @app.route("/api/users/<user_id>/weekly-capacity/<day>", methods=["PATCH"], endpoint="api_capacity_update_day")
    def api_capacity_update_day(user_id: str, day: str):
        data = request.get_json(silent=True) or {}
        try:
            capacity = container.capacity_service.update_day(user_id, day, data.get("sessions"))
            return jsonify({"success": True, "weekly_capacity": capacity.as_dict(), "weekly_total": capacity.total}), 200
        except ValidationError as e:
            return _error(e, 400)
        except NotFoundError as e:
            return _error(e, 404)
        except Exception:
            logger.exception("weekly_capacity_update_failed", user_id=user_id, day=day)
            return jsonify({"success": False, "message": f"Failed to update {day} sessions"}), 500
