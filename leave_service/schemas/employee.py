from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    """
    POST /employees request body.

    Fields are typed loosely; the directory does the validation so that bad
    input is reported as 400 with the same messages everywhere.
    """
    name: Optional[Any] = None
    department: Optional[Any] = None
    leaveBalance: Optional[Any] = None


class EmployeeRead(BaseModel):
    """Response body: Employee record rendered with camelCase keys."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    department: str
    leaveBalance: int = Field(
        validation_alias=AliasChoices("leave_balance", "leaveBalance"),
    )


class MessageResponse(BaseModel):
    message: str
