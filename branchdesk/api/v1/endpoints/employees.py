from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from branchdesk.core.dependencies import get_employee_store
from branchdesk.models.common import DataResponse, MessageResponse
from branchdesk.models.employee import Employee, EmployeeCreate, EmployeeUpdate
from branchdesk.services.store import EmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Employee not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")


@router.get("", response_model=DataResponse[list[Employee]], summary="Retrieve a list of all employees")
async def list_employees(store: EmployeeStore = Depends(get_employee_store)):  # noqa: B008
    try:
        employees = store.list_all()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err
    return {"message": "Employees retrieved", "data": employees}


@router.post(
    "",
    response_model=DataResponse[Employee],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new employee",
)
async def create_employee(
    payload: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    try:
        employee = store.create(payload)
    except Exception as err:
        logger.exception("Failed to create employee")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request") from err
    return {"message": "Employee created", "data": employee}


@router.get(
    "/{employee_id}",
    response_model=DataResponse[Employee],
    responses=_NOT_FOUND,
    summary="Retrieve an employee by their ID",
)
async def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    try:
        employee = store.get_by_id(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err

    if employee is None:
        raise _not_found()

    return {"message": "Employee found", "data": employee}


@router.put(
    "/{employee_id}",
    response_model=DataResponse[Employee],
    responses=_NOT_FOUND,
    summary="Update an employee by their ID",
)
async def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    try:
        employee = store.update(employee_id, payload)
    except Exception as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request") from err

    if employee is None:
        raise _not_found()

    return {"message": "Employee updated", "data": employee}


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses=_NOT_FOUND,
    summary="Delete an employee by their ID",
)
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    try:
        removed = store.delete(employee_id)
    except Exception as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from err

    if not removed:
        raise _not_found()

    return {"message": "Employee deleted"}
