from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from leave_service.core.deps import get_directory
from leave_service.core.directory import EmployeeDirectory
from leave_service.core.errors import NotFound, ValidationError
from leave_service.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    MessageResponse,
)

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
)


@router.get(
    "",
    response_model=List[EmployeeRead],
)
async def list_employees(
    directory: EmployeeDirectory = Depends(get_directory),
):
    return [EmployeeRead.model_validate(e) for e in directory.list()]


@router.post(
    "",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    payload: EmployeeCreate,
    directory: EmployeeDirectory = Depends(get_directory),
):
    try:
        employee = directory.create(
            payload.name,
            payload.department,
            payload.leaveBalance,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return EmployeeRead.model_validate(employee)


@router.get(
    "/{employee_id}",
    response_model=EmployeeRead,
)
async def get_employee(
    employee_id: int,
    directory: EmployeeDirectory = Depends(get_directory),
):
    try:
        employee = directory.get(employee_id)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    return EmployeeRead.model_validate(employee)


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
)
async def delete_employee(
    employee_id: int,
    directory: EmployeeDirectory = Depends(get_directory),
):
    """
    Delete the employee together with all of its leave requests.
    """
    try:
        directory.delete(employee_id)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    return MessageResponse(
        message="Employee deleted successfully. Associated leave requests also deleted.",
    )
