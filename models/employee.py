from datetime import datetime

from utils.datetime_utils import utcnow


class Employee:

    def __init__(self, name, first_name, department, date_created=None):
        self.name = name
        self.first_name = first_name
        self.department = department
        self.date_created = date_created or utcnow()

    def validate(self):
        for field, value in (("name", self.name),
                             ("firstName", self.first_name),
                             ("department", self.department)):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Employee field '{field}' is required")
        if not isinstance(self.date_created, datetime):
            raise ValueError("Employee field 'dateCreated' must be a date")

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "name": self.name,
            "firstName": self.first_name,
            "department": self.department,
            "dateCreated": self.date_created,
        }

    @classmethod
    def from_payload(cls, payload):
        return cls(
            name=payload.get("name"),
            first_name=payload.get("firstName"),
            department=payload.get("department"),
        )
