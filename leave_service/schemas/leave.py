from datetime import date
from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LeaveCreate(BaseModel):
    """POST /leave request body (validated by the ledger)."""
    employeeId: Optional[Any] = None
    startDate: Optional[Any] = None
    endDate: Optional[Any] = None
    reason: Optional[Any] = None


class LeaveRequestRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employeeId: int = Field(validation_alias=AliasChoices("employee_id", "employeeId"))
    startDate: date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    endDate: date = Field(validation_alias=AliasChoices("end_date", "endDate"))
    reason: str
    status: Literal["pending", "approved"]
    duration: int
