from flask import Blueprint, current_app, jsonify, request

from models import CheckIn, CheckOut, Employee
from utils.datetime_utils import elapsed_milliseconds, parse_date
from utils.db import get_store, to_object_id

attendance_bp = Blueprint("attendance", __name__, url_prefix="/api")

INTERNAL_ERROR = "Internal Server Error"


def _json_body():
    # Non-JSON or malformed bodies count as empty
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _error(message, status):
    return jsonify({"error": message}), status


# -------------------------------------------------------------
# CREATE EMPLOYEE
# -------------------------------------------------------------
@attendance_bp.route("/employees", methods=["POST"])
def create_employee():
    payload = _json_body()

    try:
        employee = Employee.from_payload(payload)
        employee.validate()
        document = get_store().employees.insert(employee.to_dict())
    except Exception:
        current_app.logger.exception("Error creating employee")
        return _error(INTERNAL_ERROR, 500)

    current_app.logger.info("Employee %s created", document["_id"])
    return jsonify(document), 201


# -------------------------------------------------------------
# LIST EMPLOYEES (optionally created after a date)
# -------------------------------------------------------------
@attendance_bp.route("/employees", methods=["GET"])
def get_employees():
    try:
        filter_date = parse_date(request.args.get("createdAfter"))
        query = {"dateCreated": {"$gt": filter_date}} if filter_date else {}

        employees = get_store().employees.find_many(query)
    except Exception:
        current_app.logger.exception("Error getting employees")
        return _error(INTERNAL_ERROR, 500)

    return jsonify(employees), 200


# -------------------------------------------------------------
# CHECK IN
# -------------------------------------------------------------
@attendance_bp.route("/check-in", methods=["POST"])
def check_in():
    payload = _json_body()
    employee_id = payload.get("employeeId")

    try:
        store = get_store()
        existing_employee = store.employees.find_by_id(employee_id) if employee_id is not None else None

        if not existing_employee:
            current_app.logger.warning("Check-in rejected, employee %s not found", employee_id)
            return _error("Employee not found", 404)

        record = CheckIn(employee_id=existing_employee["_id"], comment=payload.get("comment"))
        record.validate()
        document = store.check_ins.insert(record.to_dict())
    except Exception:
        current_app.logger.exception("Error checking in employee")
        return _error(INTERNAL_ERROR, 500)

    return jsonify(document), 201


# -------------------------------------------------------------
# CHECK OUT
# -------------------------------------------------------------
@attendance_bp.route("/check-out", methods=["POST"])
def check_out():
    payload = _json_body()

    try:
        store = get_store()
        record = CheckOut.from_payload(payload)
        record.validate()

        if current_app.config.get("VERIFY_CHECK_OUT_REFERENCES"):
            if not store.employees.find_by_id(record.employee_id):
                return _error("Employee not found", 404)
            if not store.check_ins.find_by_id(record.check_in_id):
                return _error("Check-in not found", 404)

        document = store.check_outs.insert(record.to_dict())
    except Exception:
        current_app.logger.exception("Error checking out")
        return _error(INTERNAL_ERROR, 500)

    return jsonify(document), 201


# -------------------------------------------------------------
# TIME BETWEEN CHECK-IN AND CHECK-OUT
# -------------------------------------------------------------
@attendance_bp.route("/calculate-time/<employee_id>", methods=["GET"])
def calculate_time_between_check_in_and_out(employee_id):
    try:
        store = get_store()
        check_ins = store.check_ins.find_many({"employeeId": to_object_id(employee_id)})

        if not check_ins:
            return _error(f"Check-ins not found for employee with id {employee_id}", 404)

        time_differences = []
        for check_in_doc in check_ins:
            check_out_doc = store.check_outs.find_one({"checkInId": check_in_doc["_id"]})
            # Open check-ins contribute nothing
            if check_out_doc:
                time_differences.append(
                    elapsed_milliseconds(check_in_doc["checkInTime"], check_out_doc["checkOutTime"])
                )
    except Exception:
        current_app.logger.exception("Error calculating time difference")
        return _error(INTERNAL_ERROR, 500)

    return jsonify({"timeDifferences": time_differences}), 200
