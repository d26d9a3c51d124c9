from utils.datetime_utils import utcnow
from utils.db import to_object_id


class CheckOut:
    """
    Closes a check-in. Both references are stored as ObjectIds; whether
    they point at existing documents is up to the caller to verify.
    """

    def __init__(self, check_in_id, employee_id, comment=None, check_out_time=None):
        self.check_in_id = to_object_id(check_in_id)
        self.employee_id = to_object_id(employee_id)
        self.comment = comment
        self.check_out_time = check_out_time or utcnow()

    def validate(self):
        if self.comment is not None and not isinstance(self.comment, str):
            raise ValueError("CheckOut field 'comment' must be a string")

    def to_dict(self):
        document = {
            "checkInId": self.check_in_id,
            "checkOutTime": self.check_out_time,
        }
        if self.comment is not None:
            document["comment"] = self.comment
        document["employeeId"] = self.employee_id
        return document

    @classmethod
    def from_payload(cls, payload):
        return cls(
            check_in_id=payload.get("checkInId"),
            employee_id=payload.get("employeeId"),
            comment=payload.get("comment"),
        )
