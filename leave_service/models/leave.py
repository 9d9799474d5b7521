from dataclasses import dataclass
from datetime import date

PENDING = "pending"
APPROVED = "approved"


@dataclass
class LeaveRequest:
    id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: str = PENDING
    # fixed at creation, reused for debit on approve and credit on delete
    duration: int = 1
