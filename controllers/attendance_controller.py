from flask import Blueprint, current_app, jsonify, request

from models.attendance import Attendance
from utils.errors import ValidationError
from utils.validators import parse_date

attendance_bp = Blueprint("attendance", __name__, url_prefix="/api")


def _request_payload():
    """Body as a dict, from JSON or a form post."""
    if request.is_json:
        payload = request.get_json() or {}
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        return payload
    payload = request.form.to_dict()
    ministries = request.form.getlist("ministries")
    if ministries:
        payload["ministries"] = ministries
    return payload


# ==========================================================
# CREATE ATTENDANCE RECORD
# ==========================================================
@attendance_bp.route("/attendance", methods=["POST"])
def create_attendance():
    record = Attendance.create(_request_payload())
    current_app.logger.info("Attendance recorded: %s", record["_id"])
    return jsonify({
        "message": "Attendance recorded successfully",
        "data": Attendance.serialize(record),
    }), 201


# ==========================================================
# LIST / FILTER
# ==========================================================
@attendance_bp.route("/attendance", methods=["GET"])
def list_attendance():
    start_date = parse_date(request.args.get("startDate"), "startDate")
    end_date = parse_date(request.args.get("endDate"), "endDate")
    ministry = (request.args.get("ministry") or "").strip() or None

    records = Attendance.find(start_date, end_date, ministry)
    return jsonify({
        "count": len(records),
        "data": [Attendance.serialize(rec) for rec in records],
    })


@attendance_bp.route("/attendance/<record_id>", methods=["GET"])
def get_attendance(record_id):
    record = Attendance.find_by_id(record_id)
    return jsonify({"data": Attendance.serialize(record)})


@attendance_bp.route("/attendance/<record_id>", methods=["DELETE"])
def delete_attendance(record_id):
    record = Attendance.delete_by_id(record_id)
    current_app.logger.info("Attendance deleted: %s", record_id)
    return jsonify({
        "message": "Record deleted successfully",
        "data": Attendance.serialize(record),
    })


# ==========================================================
# STATISTICS
# ==========================================================
@attendance_bp.route("/stats", methods=["GET"])
def attendance_stats():
    return jsonify(Attendance.stats())
