from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from leave_service.core.deps import get_ledger
from leave_service.core.errors import NotFound, ValidationError
from leave_service.core.ledger import LeaveLedger
from leave_service.schemas.employee import MessageResponse
from leave_service.schemas.leave import LeaveCreate, LeaveRequestRead

router = APIRouter(
    prefix="/leave",
    tags=["leave"],
)


@router.get(
    "",
    response_model=List[LeaveRequestRead],
)
async def list_leave_requests(
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    ledger: LeaveLedger = Depends(get_ledger),
):
    """
    List leave requests, optionally for a single employee.

    GET /leave
    GET /leave?employeeId=1
    """
    return [LeaveRequestRead.model_validate(r) for r in ledger.list(employee_id)]


@router.post(
    "",
    response_model=LeaveRequestRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_leave_request(
    payload: LeaveCreate,
    ledger: LeaveLedger = Depends(get_ledger),
):
    """
    Create a pending leave request.

    - 400 on missing fields, past start, end before start,
      insufficient balance or overlap with the employee's other requests
    - 404 when the employee does not exist
    - balance is not touched until approval
    """
    try:
        leave = ledger.create(
            payload.employeeId,
            payload.startDate,
            payload.endDate,
            payload.reason,
        )
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return LeaveRequestRead.model_validate(leave)


@router.delete(
    "/{request_id}",
    response_model=MessageResponse,
)
async def delete_leave_request(
    request_id: int,
    ledger: LeaveLedger = Depends(get_ledger),
):
    try:
        ledger.delete(request_id)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    return MessageResponse(message="Leave request deleted successfully")


@router.patch(
    "/{request_id}/approve",
    response_model=LeaveRequestRead,
)
async def approve_leave_request(
    request_id: int,
    ledger: LeaveLedger = Depends(get_ledger),
):
    """
    Mark a pending request approved and debit its duration from the balance.
    """
    try:
        leave = ledger.approve(request_id)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return LeaveRequestRead.model_validate(leave)
