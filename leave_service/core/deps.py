from datetime import date
from typing import Callable, Optional, Tuple

from leave_service.core.directory import EmployeeDirectory
from leave_service.core.ledger import LeaveLedger


def build_store(
    today: Optional[Callable[[], date]] = None,
) -> Tuple[EmployeeDirectory, LeaveLedger]:
    """
    Directory + ledger sharing one lock, with the employee-delete cascade wired.
    """
    directory = EmployeeDirectory()
    ledger = LeaveLedger(directory, today=today)
    directory.attach_ledger(ledger)
    return directory, ledger


# process-wide store shared by the employees and leave routers
directory, ledger = build_store()


def get_directory() -> EmployeeDirectory:
    return directory


def get_ledger() -> LeaveLedger:
    return ledger
