from dataclasses import dataclass


@dataclass
class Employee:
    id: int
    name: str
    department: str
    leave_balance: int  # whole days
