import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from leave_service.core.dates import (
    inclusive_days,
    parse_day,
    ranges_overlap,
    require_id,
    require_text,
)
from leave_service.core.directory import EmployeeDirectory
from leave_service.core.errors import NotFound, ValidationError
from leave_service.models.leave import APPROVED, PENDING, LeaveRequest

logger = logging.getLogger(__name__)


class LeaveLedger:
    """
    In-memory store of leave requests.

    Balance accounting:
    - create only checks that the balance covers the duration (no hold)
    - approve re-checks and debits the stored duration
    - delete of an approved request credits the stored duration back
    """

    def __init__(
        self,
        directory: EmployeeDirectory,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._directory = directory
        self._today = today or date.today
        self.lock = directory.lock
        self._requests: Dict[int, LeaveRequest] = {}
        self._next_id = 1

    def list(self, employee_id: Optional[int] = None) -> List[LeaveRequest]:
        with self.lock:
            return [
                replace(r)
                for r in self._requests.values()
                if employee_id is None or r.employee_id == employee_id
            ]

    def get(self, request_id: int) -> LeaveRequest:
        with self.lock:
            return replace(self._get(request_id))

    def create(
        self,
        employee_id: Any,
        start_date: Any,
        end_date: Any,
        reason: Any,
    ) -> LeaveRequest:
        employee_id = require_id(employee_id, "employeeId")
        if start_date in (None, "") or end_date in (None, ""):
            raise ValidationError(
                "Missing required fields: employeeId, startDate, endDate, reason",
                code="missing_fields",
            )
        reason = require_text(reason, "reason")

        with self.lock:
            employee = self._directory.get(employee_id)

            start = parse_day(start_date, "startDate")
            end = parse_day(end_date, "endDate")

            if start < self._today():
                raise ValidationError(
                    "Start date cannot be in the past.",
                    code="start_in_past",
                )
            if end < start:
                raise ValidationError(
                    "End date cannot be before start date.",
                    code="end_before_start",
                )

            duration = inclusive_days(start, end)
            if employee.leave_balance < duration:
                raise ValidationError(
                    f"Insufficient leave balance. You need {duration} days "
                    f"but only have {employee.leave_balance} days.",
                    code="insufficient_balance",
                )

            # pending and approved requests both block the range
            for existing in self._requests.values():
                if existing.employee_id != employee_id:
                    continue
                if ranges_overlap(start, end, existing.start_date, existing.end_date):
                    raise ValidationError(
                        "Leave dates overlap with an existing leave request.",
                        code="overlap",
                    )

            leave = LeaveRequest(
                id=self._next_id,
                employee_id=employee_id,
                start_date=start,
                end_date=end,
                reason=reason,
                status=PENDING,
                duration=duration,
            )
            self._next_id += 1
            self._requests[leave.id] = leave

        logger.info(
            "Leave request %s created for employee %s (%s..%s, %s day(s))",
            leave.id,
            employee_id,
            start,
            end,
            duration,
        )
        return replace(leave)

    def approve(self, request_id: int) -> LeaveRequest:
        with self.lock:
            leave = self._get(request_id)
            if leave.status == APPROVED:
                raise ValidationError(
                    "Leave request already approved",
                    code="already_approved",
                )

            employee = self._directory.get(leave.employee_id)
            if employee.leave_balance < leave.duration:
                raise ValidationError(
                    f"Insufficient leave balance. Need {leave.duration} days "
                    f"but only have {employee.leave_balance} days.",
                    code="insufficient_balance",
                )

            self._directory.adjust_balance(leave.employee_id, -leave.duration)
            leave.status = APPROVED

        logger.info(
            "Leave request %s approved, %s day(s) debited from employee %s",
            request_id,
            leave.duration,
            leave.employee_id,
        )
        return replace(leave)

    def delete(self, request_id: int) -> LeaveRequest:
        """
        Remove a request; an approved one gives its days back first.

        If the employee is already gone the credit is skipped.
        """
        with self.lock:
            leave = self._get(request_id)
            if leave.status == APPROVED and self._directory.exists(leave.employee_id):
                self._directory.adjust_balance(leave.employee_id, leave.duration)
            del self._requests[request_id]

        logger.info("Leave request %s deleted (status=%s)", request_id, leave.status)
        return replace(leave)

    def delete_by_employee(self, employee_id: int) -> int:
        # cascade from employee removal: no balance restoration
        with self.lock:
            doomed = [
                r.id for r in self._requests.values() if r.employee_id == employee_id
            ]
            for request_id in doomed:
                del self._requests[request_id]
        return len(doomed)

    def _get(self, request_id: int) -> LeaveRequest:
        leave = self._requests.get(request_id)
        if leave is None:
            raise NotFound("Leave request", request_id)
        return leave
