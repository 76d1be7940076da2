"""
Employee Controller
===================

FastAPI controller for employee CRUD endpoints.

Handlers are plain functions so FastAPI runs them in its threadpool; the
pymongo calls underneath are blocking.
"""
from typing import List

from fastapi import APIRouter, HTTPException, status, Depends
from fastapi.responses import PlainTextResponse

from hrms.application.dto.employee_dto import EmployeeRequest, EmployeeResponse
from hrms.api.v1.dependencies import get_employee_service
from hrms.application.services.employee_service import EmployeeService
from hrms.domain.exceptions import (
    EmployeeNotFoundError,
    EmployeeRepositoryError,
    InvalidEmployeeIdError,
)
from hrms.domain.models.employee import Employee

router = APIRouter(tags=["employees"])

DELETED_MESSAGE = "Deleted Employee"


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        name=employee.name,
        age=employee.age,
        salary=employee.salary,
    )


@router.get(
    "",
    response_model=List[EmployeeResponse],
    summary="List employees",
    description="Get every employee record. Returns an empty list when there are none."
)
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """List all employees."""
    try:
        employees = service.list_employees()
    except EmployeeRepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    
    return [_to_response(employee) for employee in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get employee by ID",
    description="Get details of a specific employee."
)
def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Get a specific employee by ID."""
    try:
        employee = service.get_employee(employee_id)
    except InvalidEmployeeIdError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmployeeRepositoryError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    
    return _to_response(employee)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    description="""
    Create a new employee record.
    
    The identifier is always generated by the store; an `id` in the body is ignored.
    The record is read back after insertion and returned as stored.
    """
)
def create_employee(
    request: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create an employee."""
    try:
        employee = service.create_employee(
            name=request.name,
            age=request.age,
            salary=request.salary,
        )
    except EmployeeRepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    
    return _to_response(employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update an employee",
    description="Overwrite name, age and salary of an existing employee."
)
def update_employee(
    employee_id: str,
    request: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Update an employee."""
    try:
        employee = service.update_employee(
            employee_id,
            name=request.name,
            age=request.age,
            salary=request.salary,
        )
    except InvalidEmployeeIdError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmployeeRepositoryError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    
    return _to_response(employee)


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    summary="Delete an employee",
    description="Permanently remove an employee. Store failures are reported as 504."
)
def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> PlainTextResponse:
    """Delete an employee."""
    try:
        service.delete_employee(employee_id)
    except InvalidEmployeeIdError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmployeeRepositoryError as e:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))
    
    return PlainTextResponse(DELETED_MESSAGE)
