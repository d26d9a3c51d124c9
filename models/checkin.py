from utils.datetime_utils import utcnow
from utils.db import to_object_id


class CheckIn:

    def __init__(self, employee_id, comment=None, check_in_time=None):
        # raises InvalidId / TypeError for malformed ids
        self.employee_id = to_object_id(employee_id)
        self.comment = comment
        self.check_in_time = check_in_time or utcnow()

    def validate(self):
        if self.comment is not None and not isinstance(self.comment, str):
            raise ValueError("CheckIn field 'comment' must be a string")

    def to_dict(self):
        document = {
            "employeeId": self.employee_id,
            "checkInTime": self.check_in_time,
        }
        if self.comment is not None:
            document["comment"] = self.comment
        return document
