from datetime import datetime

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from models import CheckIn, CheckOut, Employee


def test_employee_defaults_date_created():
    employee = Employee(name="John Doe", first_name="John", department="IT")

    employee.validate()
    document = employee.to_dict()
    assert document["name"] == "John Doe"
    assert document["firstName"] == "John"
    assert isinstance(document["dateCreated"], datetime)


@pytest.mark.parametrize("payload", [
    {},
    {"name": "John Doe", "firstName": "John"},
    {"name": "", "firstName": "John", "department": "IT"},
    {"name": 42, "firstName": "John", "department": "IT"},
])
def test_employee_rejects_missing_fields(payload):
    with pytest.raises(ValueError):
        Employee.from_payload(payload).validate()


def test_check_in_converts_employee_id():
    employee_id = ObjectId()

    record = CheckIn(employee_id=str(employee_id), comment="Checking in")

    assert record.to_dict()["employeeId"] == employee_id
    assert record.to_dict()["comment"] == "Checking in"


def test_check_in_rejects_malformed_id():
    with pytest.raises(InvalidId):
        CheckIn(employee_id="1234")


def test_check_out_requires_references():
    with pytest.raises(ValueError):
        CheckOut.from_payload({"employeeId": str(ObjectId())})


def test_check_out_rejects_numeric_ids():
    with pytest.raises(TypeError):
        CheckOut.from_payload({"employeeId": 234567, "checkInId": 456789})


def test_check_out_rejects_non_string_comment():
    record = CheckOut.from_payload({
        "employeeId": str(ObjectId()),
        "checkInId": str(ObjectId()),
        "comment": ["late"],
    })

    with pytest.raises(ValueError):
        record.validate()


def test_check_out_keeps_explicit_time():
    when = datetime(2024, 1, 2, 17, 30)

    record = CheckOut(check_in_id=ObjectId(), employee_id=ObjectId(), check_out_time=when)

    assert record.to_dict()["checkOutTime"] == when
    assert "comment" not in record.to_dict()
