import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from leave_service.core.dates import require_balance, require_text
from leave_service.core.errors import NotFound
from leave_service.models.employee import Employee

if TYPE_CHECKING:
    from leave_service.core.ledger import LeaveLedger

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    """
    In-memory store of employees and their leave balances.

    The directory owns the store-wide lock; the leave ledger shares it so a
    balance debit and the status change it belongs to happen as one step.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        # dicts keep insertion order, which is the list() order
        self._employees: Dict[int, Employee] = {}
        self._next_id = 1
        self._ledger: Optional["LeaveLedger"] = None

    def attach_ledger(self, ledger: "LeaveLedger") -> None:
        """Register the ledger whose requests are removed on employee delete."""
        self._ledger = ledger

    def list(self) -> List[Employee]:
        with self.lock:
            return [replace(e) for e in self._employees.values()]

    def create(self, name: Any, department: Any, leave_balance: Any) -> Employee:
        name = require_text(name, "name")
        department = require_text(department, "department")
        leave_balance = require_balance(leave_balance)

        with self.lock:
            employee = Employee(
                id=self._next_id,
                name=name,
                department=department,
                leave_balance=leave_balance,
            )
            self._next_id += 1
            self._employees[employee.id] = employee

        logger.info(
            "Employee %s created (department=%s, balance=%s)",
            employee.id,
            department,
            leave_balance,
        )
        return replace(employee)

    def get(self, employee_id: int) -> Employee:
        with self.lock:
            return replace(self._get(employee_id))

    def exists(self, employee_id: int) -> bool:
        with self.lock:
            return employee_id in self._employees

    def delete(self, employee_id: int) -> int:
        """
        Remove an employee and cascade to its leave requests.

        Returns the number of leave requests removed with it.
        """
        with self.lock:
            self._get(employee_id)
            removed = 0
            if self._ledger is not None:
                removed = self._ledger.delete_by_employee(employee_id)
            del self._employees[employee_id]

        logger.info(
            "Employee %s deleted with %s leave request(s)",
            employee_id,
            removed,
        )
        return removed

    def adjust_balance(self, employee_id: int, delta: int) -> Employee:
        """
        Apply ``delta`` days to the balance (negative = debit).

        Sufficiency is the caller's responsibility; nothing is re-checked here.
        """
        with self.lock:
            employee = self._get(employee_id)
            employee.leave_balance += delta
            return replace(employee)

    def _get(self, employee_id: int) -> Employee:
        employee = self._employees.get(employee_id)
        if employee is None:
            raise NotFound("Employee", employee_id)
        return employee
