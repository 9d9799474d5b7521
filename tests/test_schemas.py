from datetime import date

from leave_service.models.employee import Employee
from leave_service.models.leave import LeaveRequest
from leave_service.schemas.employee import EmployeeRead
from leave_service.schemas.leave import LeaveRequestRead


def test_employee_read_from_record():
    record = Employee(id=4, name="Ada", department="Eng", leave_balance=7)

    body = EmployeeRead.model_validate(record)

    assert body.model_dump() == {
        "id": 4,
        "name": "Ada",
        "department": "Eng",
        "leaveBalance": 7,
    }


def test_leave_request_read_from_record():
    record = LeaveRequest(
        id=2,
        employee_id=4,
        start_date=date(2025, 1, 10),
        end_date=date(2025, 1, 12),
        reason="Trip",
        status="approved",
        duration=3,
    )

    body = LeaveRequestRead.model_validate(record)

    assert body.model_dump(mode="json") == {
        "id": 2,
        "employeeId": 4,
        "startDate": "2025-01-10",
        "endDate": "2025-01-12",
        "reason": "Trip",
        "status": "approved",
        "duration": 3,
    }
