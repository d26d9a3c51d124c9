# models/__init__.py

from .employee import Employee
from .checkin import CheckIn
from .checkout import CheckOut

__all__ = [
    "Employee",
    "CheckIn",
    "CheckOut",
]
